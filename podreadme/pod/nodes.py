"""Document tree produced by the POD parser."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Union


@dataclass
class Format:
    """A formatting code such as ``B<...>`` or ``C<...>``."""

    code: str
    children: List["Inline"] = field(default_factory=list)


@dataclass
class Link:
    """An ``L<...>`` code, pointing at a URL, a module or a section."""

    children: List["Inline"] = field(default_factory=list)
    target: str = ""
    section: Optional[str] = None
    is_url: bool = False


Inline = Union[str, Format, Link]


@dataclass
class Heading:
    level: int
    content: List[Inline]


@dataclass
class Paragraph:
    content: List[Inline]


@dataclass
class Verbatim:
    text: str


@dataclass
class Raw:
    """Content of a ``=begin``/``=for`` region meant for one output target."""

    target: str
    text: str


@dataclass
class Item:
    label: List[Inline] = field(default_factory=list)
    number: Optional[int] = None
    body: List["Block"] = field(default_factory=list)


@dataclass
class ItemList:
    """
    An ``=over`` ... ``=back`` region.

    ``kind`` is ``bullet``, ``number`` or ``text`` once the first ``=item`` is
    seen; regions without items stay ``block`` and keep their paragraphs in
    ``blocks``.
    """

    kind: str = "block"
    indent: int = 4
    items: List[Item] = field(default_factory=list)
    blocks: List["Block"] = field(default_factory=list)


Block = Union[Heading, Paragraph, Verbatim, Raw, ItemList]


@dataclass
class Document:
    blocks: List[Block] = field(default_factory=list)
    encoding: Optional[str] = None

    def title(self) -> str:
        """Text of the paragraph under ``=head1 NAME``, else the first heading."""
        first_heading = ""
        for index, block in enumerate(self.blocks):
            if not isinstance(block, Heading):
                continue
            heading = plain_text(block.content).strip()
            if not first_heading:
                first_heading = heading
            if block.level == 1 and heading.upper() == "NAME":
                for following in self.blocks[index + 1:]:
                    if isinstance(following, Paragraph):
                        return plain_text(following.content).strip()
                    if isinstance(following, Heading):
                        break
        return first_heading


def plain_text(nodes: List[Inline]) -> str:
    """Flatten inline nodes to their visible text."""
    parts: List[str] = []
    for node in nodes:
        if isinstance(node, str):
            parts.append(node)
        elif isinstance(node, Link) and not node.children:
            parts.append(node.section or node.target)
        else:
            parts.append(plain_text(node.children))
    return "".join(parts)
