"""Shared helpers for README formats."""

from __future__ import annotations

import codecs
import logging
import re
from typing import Optional

LOG = logging.getLogger(__name__)

_ENCODING = re.compile(r"^=encoding[ \t]+(\S+)", re.MULTILINE)


def declared_encoding(markup: str) -> Optional[str]:
    """
    Return the codec named by the first ``=encoding`` command.

    Unknown codec names are ignored with a warning so the README is still
    written with the source file's encoding.
    """
    match = _ENCODING.search(markup)
    if not match:
        return None
    name = match.group(1)
    try:
        return codecs.lookup(name).name
    except LookupError:
        LOG.warning("Ignoring unknown =encoding %s", name)
        return None
