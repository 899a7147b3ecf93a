"""Parser for POD formatting codes (``B<>``, ``C<< >>``, ``L<>``, ``E<>`` ...)."""

from __future__ import annotations

import re
from typing import List, Optional, Tuple

from markdown_it.common.entities import entities

from .nodes import Format, Inline, Link, plain_text

STYLE_CODES = frozenset("BICFS")
DROPPED_CODES = frozenset("XZ")

POD_ESCAPES = {
    "lt": "<",
    "gt": ">",
    "verbar": "|",
    "sol": "/",
}

_CODE_START = re.compile(r"([A-Z])(<+)")
_WHITESPACE = re.compile(r"\s+")
_URL = re.compile(r"^[a-zA-Z][a-zA-Z0-9+.\-]*:[^:\s]\S*$")


def parse_inline(text: str) -> List[Inline]:
    """Parse a paragraph of POD text into inline nodes."""
    nodes, _ = _parse(text, 0, None)
    return nodes


def resolve_escape(name: str) -> str:
    """Resolve the body of an ``E<...>`` code to the character it names."""
    name = name.strip()
    if name in POD_ESCAPES:
        return POD_ESCAPES[name]
    codepoint: Optional[int] = None
    if re.fullmatch(r"0[xX][0-9a-fA-F]+", name):
        codepoint = int(name, 16)
    elif re.fullmatch(r"0[0-7]+", name):
        codepoint = int(name, 8)
    elif name.isdigit():
        codepoint = int(name)
    if codepoint is not None:
        if 0 < codepoint <= 0x10FFFF:
            return chr(codepoint)
        return f"E<{name}>"
    return entities.get(name, f"E<{name}>")


def _parse(text: str, pos: int, closer: Optional[str]) -> Tuple[List[Inline], int]:
    """
    Parse from ``pos`` until ``closer`` (or end of text).

    ``closer`` is ``">"`` for single-bracket codes and a run of ``>`` for the
    multi-bracket form, which must be preceded by whitespace.
    """
    nodes: List[Inline] = []
    buffer: List[str] = []
    end_pattern = None
    if closer is not None and closer != ">":
        end_pattern = re.compile(r"\s+" + re.escape(closer))

    def flush() -> None:
        if buffer:
            nodes.append("".join(buffer))
            buffer.clear()

    while pos < len(text):
        if closer == ">" and text[pos] == ">":
            flush()
            return nodes, pos + 1
        if end_pattern is not None:
            end = end_pattern.match(text, pos)
            if end:
                flush()
                return nodes, end.end()

        start = _CODE_START.match(text, pos)
        if start:
            letter, brackets = start.group(1), start.group(2)
            if len(brackets) > 1:
                space = _WHITESPACE.match(text, start.end())
                if space:
                    children, pos = _parse(text, space.end(), ">" * len(brackets))
                else:
                    # "C<<" without a space is C< followed by a literal "<"
                    children, pos = _parse(text, start.start(2) + 1, ">")
            else:
                children, pos = _parse(text, start.end(), ">")
            flush()
            node = _make_node(letter, children)
            if isinstance(node, list):
                nodes.extend(node)
            elif node is not None:
                nodes.append(node)
            continue

        buffer.append(text[pos])
        pos += 1

    flush()
    return nodes, pos


def _make_node(letter: str, children: List[Inline]):
    if letter == "E":
        return resolve_escape(plain_text(children))
    if letter in DROPPED_CODES:
        return None
    if letter == "L":
        return _make_link(children)
    if letter in STYLE_CODES:
        return Format(letter, children)
    return children


def _make_link(children: List[Inline]) -> Link:
    label: List[Inline] = []
    rest = children
    for index, child in enumerate(children):
        if isinstance(child, str) and "|" in child:
            before, _, after = child.partition("|")
            label = children[:index] + ([before] if before else [])
            rest = ([after] if after else []) + children[index + 1:]
            break

    target = plain_text(rest).strip()
    if _URL.match(target):
        return Link(label, target, None, True)

    name, section = target, None
    if "/" in target:
        name, _, section = target.partition("/")
    elif target.startswith('"') and target.endswith('"'):
        name, section = "", target
    if section is not None:
        section = section.strip().strip('"').strip() or None
    return Link(label, name.strip(), section, False)
