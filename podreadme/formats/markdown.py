"""Markdown README, produced by converting the rendered HTML."""

from __future__ import annotations

from html_to_markdown import convert_to_markdown

from ..models import FormatId
from ..pod import parse, render_html_fragment
from .base import ReadmeFormat


class MarkdownFormat(ReadmeFormat):
    identifier = FormatId.MARKDOWN
    default_filename = "README.mkdn"

    def convert(self, markup: str) -> str:
        fragment = render_html_fragment(parse(markup), raw_targets=("html", "markdown"))
        if not fragment:
            return ""
        content = convert_to_markdown(fragment, heading_style="atx").strip()
        return content + "\n" if content else ""
