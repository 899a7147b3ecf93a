"""Block-level POD parser."""

from __future__ import annotations

import logging
import re
from typing import Iterator, List, Optional, Tuple

from .inline import parse_inline
from .nodes import Block, Document, Heading, Item, ItemList, Paragraph, Raw, Verbatim

LOG = logging.getLogger(__name__)

_COMMAND = re.compile(r"^=([a-zA-Z][a-zA-Z0-9]*)(?:\s+(.*))?$", re.DOTALL)
_NUMBERED_ITEM = re.compile(r"^(\d+)\.?(?:\s+(.*))?$", re.DOTALL)
_BULLETS = ("*", "-", "o")


def parse(markup: str) -> Document:
    """
    Parse POD into a :class:`Document`.

    Text outside POD regions (before the first command paragraph or after
    ``=cut``) is skipped, so whole source files can be parsed directly.
    """
    parser = _Parser()
    for paragraph in iter_paragraphs(markup):
        parser.feed(paragraph)
    return parser.finish()


def iter_paragraphs(markup: str) -> Iterator[str]:
    """Split text into paragraphs separated by whitespace-only lines."""
    current: List[str] = []
    for line in markup.expandtabs(8).splitlines():
        if line.strip():
            current.append(line.rstrip())
        elif current:
            yield "\n".join(current)
            current = []
    if current:
        yield "\n".join(current)


class _Parser:
    def __init__(self) -> None:
        self.document = Document()
        self._lists: List[ItemList] = []
        self._regions: List[str] = []
        self._raw: Optional[Tuple[str, List[str]]] = None
        self._in_pod = False

    def feed(self, paragraph: str) -> None:
        command = _COMMAND.match(paragraph)
        if not self._in_pod:
            if not command:
                return
            self._in_pod = True

        if self._raw is not None:
            target, collected = self._raw
            if command and command.group(1) == "end" and _target(command.group(2)) == target:
                self._raw = None
                self._append(Raw(target, "\n\n".join(collected)))
            else:
                collected.append(paragraph)
            return

        if command:
            self._command(command.group(1), (command.group(2) or "").strip())
        elif paragraph[0].isspace():
            self._append(Verbatim(paragraph))
        else:
            self._append(Paragraph(parse_inline(_join_lines(paragraph))))

    def finish(self) -> Document:
        if self._raw is not None:
            target, collected = self._raw
            LOG.debug("Unterminated =begin %s region", target)
            self._raw = None
            self._append(Raw(target, "\n\n".join(collected)))
        while self._lists:
            self._close_list()
        return self.document

    def _command(self, name: str, argument: str) -> None:
        if name in ("head1", "head2", "head3", "head4"):
            self._append(Heading(int(name[-1]), parse_inline(_join_lines(argument))))
        elif name == "over":
            indent = int(argument) if argument.isdigit() else 4
            self._lists.append(ItemList(indent=indent or 4))
        elif name == "item":
            self._item(argument)
        elif name == "back":
            if self._lists:
                self._close_list()
            else:
                LOG.debug("Ignoring =back without =over")
        elif name == "begin":
            target = _target(argument)
            if target.startswith(":"):
                self._regions.append(target)
            else:
                self._raw = (target, [])
        elif name == "end":
            target = _target(argument)
            if self._regions and self._regions[-1] == target:
                self._regions.pop()
            else:
                LOG.debug("Ignoring unmatched =end %s", target)
        elif name == "for":
            parts = argument.split(None, 1)
            if not parts:
                return
            target = parts[0].lower()
            body = parts[1] if len(parts) > 1 else ""
            if target.startswith(":"):
                if body:
                    self._append(Paragraph(parse_inline(_join_lines(body))))
            else:
                self._append(Raw(target, body))
        elif name == "encoding":
            self.document.encoding = argument or None
        elif name == "cut":
            self._in_pod = False
        elif name == "pod":
            pass
        else:
            LOG.debug("Ignoring unknown POD command =%s", name)

    def _item(self, argument: str) -> None:
        if not self._lists:
            LOG.debug("=item outside =over; opening an implicit list")
            self._lists.append(ItemList())
        current = self._lists[-1]

        kind, number, label = _classify_item(argument)
        if current.kind == "block":
            current.kind = kind
        if current.kind == "number" and number is None:
            number = len(current.items) + 1
        current.items.append(Item(label=parse_inline(_join_lines(label)), number=number))

    def _close_list(self) -> None:
        finished = self._lists.pop()
        if finished.items or finished.blocks:
            self._append(finished)

    def _container(self) -> List[Block]:
        if not self._lists:
            return self.document.blocks
        current = self._lists[-1]
        if current.items:
            return current.items[-1].body
        return current.blocks

    def _append(self, block: Block) -> None:
        container = self._container()
        if isinstance(block, Verbatim) and container and isinstance(container[-1], Verbatim):
            container[-1] = Verbatim(container[-1].text + "\n\n" + block.text)
        else:
            container.append(block)


def _classify_item(argument: str) -> Tuple[str, Optional[int], str]:
    if argument in _BULLETS:
        return "bullet", None, ""
    for bullet in _BULLETS:
        if argument.startswith(bullet + " ") or argument.startswith(bullet + "\n"):
            return "bullet", None, argument[len(bullet):].strip()
    numbered = _NUMBERED_ITEM.match(argument)
    if numbered:
        return "number", int(numbered.group(1)), (numbered.group(2) or "").strip()
    if not argument:
        return "bullet", None, ""
    return "text", None, argument


def _target(argument: Optional[str]) -> str:
    parts = (argument or "").split()
    return parts[0].lower() if parts else ""


def _join_lines(text: str) -> str:
    return " ".join(line.strip() for line in text.splitlines() if line.strip())
