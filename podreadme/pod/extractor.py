"""Pull the POD out of a source file."""

from __future__ import annotations

import re
from typing import List

_POD_START = re.compile(r"^=[a-zA-Z]")
_POD_CUT = re.compile(r"^=cut\b")


def extract_pod(source: str) -> str:
    """
    Return the POD blocks of ``source`` in document order, without the code.

    A block runs from a line starting with ``=command`` up to (not including)
    the next ``=cut``. Blocks are separated by one blank line and the result
    ends with a newline; source without POD gives an empty string.
    """
    blocks: List[List[str]] = []
    current: List[str] = []
    in_pod = False

    for line in source.splitlines():
        if not in_pod:
            if _POD_START.match(line) and not _POD_CUT.match(line):
                in_pod = True
                current = [line.rstrip()]
            continue
        if _POD_CUT.match(line):
            in_pod = False
            blocks.append(current)
            current = []
            continue
        current.append(line.rstrip())

    if in_pod:
        blocks.append(current)

    cleaned = ["\n".join(block).strip("\n") for block in blocks]
    cleaned = [block for block in cleaned if block]
    if not cleaned:
        return ""
    return "\n\n".join(cleaned) + "\n"
