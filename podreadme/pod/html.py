"""HTML rendering of a POD document."""

from __future__ import annotations

import re
from html import escape
from typing import List, Optional
from urllib.parse import quote

from .nodes import Block, Document, Format, Heading, Inline, ItemList, Link, Paragraph, Raw, Verbatim, plain_text

MODULE_URL = "https://metacpan.org/pod/{name}"

_TAGS = {
    "B": "b",
    "I": "i",
    "C": "code",
    "F": "i",
}


def render_html(document: Document, charset: Optional[str] = None, raw_targets=("html",)) -> str:
    """Render a complete HTML page; ``charset`` adds a ``<meta charset>``."""
    head = []
    if charset:
        head.append(f'<meta charset="{escape(charset)}">')
    head.append(f"<title>{escape(document.title(), quote=False)}</title>")
    body = render_html_fragment(document, raw_targets=raw_targets)
    return (
        "<!DOCTYPE html>\n"
        "<html>\n"
        "<head>\n"
        + "\n".join(head)
        + "\n</head>\n"
        "<body>\n"
        + (body + "\n" if body else "")
        + "</body>\n"
        "</html>\n"
    )


def render_html_fragment(document: Document, raw_targets=("html",)) -> str:
    """Render only the body markup, without the page wrapper."""
    return "\n".join(_blocks(document.blocks, raw_targets))


def anchor(text: str) -> str:
    """Anchor id for a heading or an ``L</"section">`` link."""
    return re.sub(r"[^\w\-.]+", "-", text.strip()).strip("-")


def _blocks(blocks: List[Block], raw_targets) -> List[str]:
    out: List[str] = []
    for block in blocks:
        if isinstance(block, Heading):
            ident = anchor(plain_text(block.content))
            out.append(f'<h{block.level} id="{escape(ident)}">{_inline(block.content)}</h{block.level}>')
        elif isinstance(block, Paragraph):
            out.append(f"<p>{_inline(block.content)}</p>")
        elif isinstance(block, Verbatim):
            out.append(f"<pre><code>{escape(block.text, quote=False)}</code></pre>")
        elif isinstance(block, Raw):
            if block.target in raw_targets and block.text:
                out.append(block.text)
        elif isinstance(block, ItemList):
            out.extend(_item_list(block, raw_targets))
    return out


def _item_list(item_list: ItemList, raw_targets) -> List[str]:
    if item_list.kind == "block":
        return ["<blockquote>", *_blocks(item_list.blocks, raw_targets), "</blockquote>"]

    if item_list.kind == "text":
        out = ["<dl>"]
        for item in item_list.items:
            out.append(f"<dt>{_inline(item.label)}</dt>")
            body = _blocks(item.body, raw_targets)
            if body:
                out.extend(["<dd>", *body, "</dd>"])
        out.append("</dl>")
        return out

    tag = "ul" if item_list.kind == "bullet" else "ol"
    out = [f"<{tag}>"]
    for item in item_list.items:
        parts = []
        if item.label:
            parts.append(f"<p>{_inline(item.label)}</p>")
        parts.extend(_blocks(item.body, raw_targets))
        out.append("<li>" + "\n".join(parts) + "</li>")
    out.append(f"</{tag}>")
    return out


def _inline(nodes: List[Inline]) -> str:
    parts: List[str] = []
    for node in nodes:
        if isinstance(node, str):
            parts.append(escape(node, quote=False))
        elif isinstance(node, Link):
            parts.append(_link(node))
        elif isinstance(node, Format):
            inner = _inline(node.children)
            if node.code == "S":
                parts.append(inner.replace(" ", "&nbsp;"))
            else:
                tag = _TAGS[node.code]
                parts.append(f"<{tag}>{inner}</{tag}>")
    return "".join(parts)


def _link(link: Link) -> str:
    label = _inline(link.children).strip()
    if link.is_url:
        href = link.target
    else:
        href = MODULE_URL.format(name=quote(link.target, safe=":")) if link.target else ""
        if link.section:
            href += "#" + anchor(link.section)
    if not label:
        if link.is_url:
            label = escape(link.target, quote=False)
        elif link.section and link.target:
            label = f'"{escape(link.section, quote=False)}" in {escape(link.target, quote=False)}'
        else:
            label = escape(link.section or link.target, quote=False)
    return f'<a href="{escape(href)}">{label}</a>'
