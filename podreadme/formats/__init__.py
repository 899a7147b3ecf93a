"""Registry of README output formats."""

from __future__ import annotations

from typing import Dict, List, Tuple, Union

from ..errors import UnknownFormat
from ..models import FormatId
from .base import ReadmeFormat
from .html import HtmlFormat
from .markdown import MarkdownFormat
from .pod import PodFormat
from .text import TextFormat


def default_formats() -> List[ReadmeFormat]:
    return [
        TextFormat(),
        MarkdownFormat(),
        PodFormat(),
        HtmlFormat(),
    ]


FORMATS: Dict[FormatId, ReadmeFormat] = {fmt.identifier: fmt for fmt in default_formats()}


def known_formats() -> Tuple[str, ...]:
    return tuple(format_id.value for format_id in FORMATS)


def resolve(format_id: Union[str, FormatId]) -> ReadmeFormat:
    """Look up a format by identifier; raises :class:`UnknownFormat`."""
    if isinstance(format_id, FormatId):
        return FORMATS[format_id]
    try:
        key = FormatId(str(format_id).strip().lower())
    except ValueError:
        raise UnknownFormat(format_id, known_formats()) from None
    return FORMATS[key]


__all__ = [
    "FORMATS",
    "ReadmeFormat",
    "default_formats",
    "known_formats",
    "resolve",
]
