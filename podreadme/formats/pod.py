"""POD README: the documentation blocks of the source, without the code."""

from __future__ import annotations

from ..models import FormatId
from ..pod import extract_pod
from .base import ReadmeFormat


class PodFormat(ReadmeFormat):
    identifier = FormatId.POD
    default_filename = "README.pod"

    def convert(self, markup: str) -> str:
        return extract_pod(markup)
