"""Plain-text rendering of a POD document, laid out like ``Pod::Text``."""

from __future__ import annotations

import textwrap
from typing import List, Optional

from .nodes import Block, Document, Format, Heading, Inline, ItemList, Link, Paragraph, Raw, Verbatim

WIDTH = 76
INDENT = 4
NBSP = "\xa0"
HEADING_OFFSETS = {1: 0, 2: 2, 3: 4, 4: 4}


def render_text(document: Document, raw_targets=("text",)) -> str:
    chunks = _blocks(document.blocks, INDENT, raw_targets)
    if not chunks:
        return ""
    return "\n\n".join(chunks).replace(NBSP, " ") + "\n"


def _blocks(blocks: List[Block], margin: int, raw_targets) -> List[str]:
    chunks: List[str] = []
    for block in blocks:
        if isinstance(block, Heading):
            offset = HEADING_OFFSETS.get(block.level, 4)
            chunks.append(" " * offset + _inline(block.content).strip())
        elif isinstance(block, Paragraph):
            chunks.append(_fill(_inline(block.content), margin))
        elif isinstance(block, Verbatim):
            chunks.append(_verbatim(block.text, margin))
        elif isinstance(block, Raw):
            if block.target in raw_targets and block.text:
                chunks.append(block.text.rstrip("\n"))
        elif isinstance(block, ItemList):
            chunks.extend(_item_list(block, margin, raw_targets))
    return [chunk for chunk in chunks if chunk.strip()]


def _item_list(item_list: ItemList, margin: int, raw_targets) -> List[str]:
    inner = margin + item_list.indent
    if item_list.kind == "block":
        return _blocks(item_list.blocks, inner, raw_targets)

    chunks: List[str] = []
    for position, item in enumerate(item_list.items, start=1):
        body = list(item.body)
        label = _inline(item.label).strip()

        if item_list.kind == "text":
            head = " " * margin + label
            rest = _blocks(body, inner, raw_targets)
            if rest:
                chunks.append(head + "\n" + rest[0])
                chunks.extend(rest[1:])
            else:
                chunks.append(head)
            continue

        tag = "*" if item_list.kind == "bullet" else f"{item.number or position}."
        if not label and body and isinstance(body[0], Paragraph):
            label = _inline(body.pop(0).content).strip()
        tag_column = " " * margin + tag.ljust(item_list.indent - 1) + " "
        if label:
            chunks.append(_fill(label, inner, initial=tag_column))
        else:
            chunks.append(tag_column.rstrip())
        chunks.extend(_blocks(body, inner, raw_targets))
    return chunks


def _fill(text: str, margin: int, initial: Optional[str] = None) -> str:
    indent = " " * margin
    return textwrap.fill(
        text,
        width=WIDTH,
        initial_indent=initial if initial is not None else indent,
        subsequent_indent=indent,
        break_long_words=False,
        break_on_hyphens=False,
    )


def _verbatim(text: str, margin: int) -> str:
    prefix = " " * margin
    return "\n".join(prefix + line if line.strip() else "" for line in text.splitlines())


def _inline(nodes: List[Inline]) -> str:
    parts: List[str] = []
    for node in nodes:
        if isinstance(node, str):
            parts.append(node)
        elif isinstance(node, Link):
            parts.append(_link(node))
        elif isinstance(node, Format):
            inner = _inline(node.children)
            if node.code in ("I", "F"):
                parts.append(f"*{inner}*")
            elif node.code == "C":
                parts.append(f'"{inner}"')
            elif node.code == "S":
                parts.append(inner.replace(" ", NBSP))
            else:
                parts.append(inner)
    return "".join(parts)


def _link(link: Link) -> str:
    label = _inline(link.children).strip()
    if link.is_url:
        return f"{label} <{link.target}>" if label else f"<{link.target}>"
    if label:
        return label
    if link.section and link.target:
        return f'"{link.section}" in {link.target}'
    if link.section:
        return f'"{link.section}"'
    return link.target
