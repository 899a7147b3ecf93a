"""POD (Plain Old Documentation) extraction, parsing and rendering."""

from .extractor import extract_pod
from .html import render_html, render_html_fragment
from .nodes import Document
from .parser import parse
from .text import render_text

__all__ = [
    "Document",
    "extract_pod",
    "parse",
    "render_html",
    "render_html_fragment",
    "render_text",
]
