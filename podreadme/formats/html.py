"""HTML README."""

from __future__ import annotations

from ..models import FormatId
from ..pod import parse, render_html
from .base import ReadmeFormat


class HtmlFormat(ReadmeFormat):
    identifier = FormatId.HTML
    default_filename = "README.html"

    def convert(self, markup: str) -> str:
        return render_html(parse(markup), charset=self.output_encoding(markup))
