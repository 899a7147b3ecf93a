"""Plain text README."""

from __future__ import annotations

from ..models import FormatId
from ..pod import parse, render_text
from .base import ReadmeFormat


class TextFormat(ReadmeFormat):
    identifier = FormatId.TEXT
    default_filename = "README"

    def convert(self, markup: str) -> str:
        return render_text(parse(markup))
