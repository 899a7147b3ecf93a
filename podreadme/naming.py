"""Infer the README format and location from a plugin instance's name.

A plugin named ``ReadmePodInRoot`` (or ``ReadmeAnyFromPod / ReadmePodInRoot``)
produces a POD README in the project root without any explicit options. The
words ``Readme`` and ``In`` are optional and matching ignores case, so
``HtmlInRoot`` and ``markdown`` work too.
"""

from __future__ import annotations

import re
from typing import Dict, Iterable, Optional, Tuple

from .models import Placement

Inferred = Tuple[Optional[str], Optional[str]]


class NameInference:
    """Name parser with a per-instance memo of every name it has seen."""

    def __init__(self, format_ids: Iterable[str], locations: Iterable[str] = tuple(p.value for p in Placement)):
        self.format_ids = tuple(format_ids)
        self.locations = tuple(locations)
        type_regex = "|".join(re.escape(name) for name in self.format_ids)
        location_regex = "|".join(re.escape(name) for name in self.locations)
        self._pattern = re.compile(
            rf"(?:\A|/)\s*(?:readme)?({type_regex})(?:(?:in)?({location_regex}))?\s*\Z",
            re.IGNORECASE,
        )
        self._cache: Dict[str, Inferred] = {}

    def infer(self, plugin_name: str) -> Inferred:
        """Return ``(format_id, location)``; either may be ``None``."""
        if plugin_name in self._cache:
            return self._cache[plugin_name]
        match = self._pattern.search(plugin_name.lower())
        if match:
            result: Inferred = (match.group(1), match.group(2))
        else:
            result = (None, None)
        self._cache[plugin_name] = result
        return result

    def __len__(self) -> int:
        return len(self._cache)
