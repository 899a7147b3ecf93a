"""Keep a generated README in step with its source file.

Other build steps may rewrite the source's documentation after the README has
been produced (version or author insertion, for instance). The regenerator
subscribes to the source file and, when its POD really changes, converts it
again and hands the new README to the placement callback.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, Optional

from .extractor import extract
from .formats import ReadmeFormat
from .host import BuildFile, ContentChanged
from .models import GeneratedReadme

LOG = logging.getLogger(__name__)

Placer = Callable[[GeneratedReadme], None]


class RegeneratorState(str, Enum):
    UNOBSERVED = "unobserved"
    OBSERVING = "observing"
    REGENERATING = "regenerating"


class Regenerator:
    """
    Produces a README from a source file and regenerates it on change.

    ``key`` identifies the subscription on the source, so a given regenerator
    subscribes at most once per file no matter how often it generates.
    """

    def __init__(self, key: str, fmt: ReadmeFormat, place: Placer, label: Optional[str] = None) -> None:
        self.key = key
        self.fmt = fmt
        self._place = place
        self.label = label or key
        self.state = RegeneratorState.UNOBSERVED
        self.last_markup: Optional[str] = None
        self.regenerations = 0

    def generate(self, source: BuildFile) -> GeneratedReadme:
        markup = extract(source)
        readme = self._convert(markup, source)
        self.last_markup = markup
        if source.subscribe(self.key, self._on_change):
            LOG.debug("[%s] watching %s for changes", self.label, source.name)
        self.state = RegeneratorState.OBSERVING
        return readme

    def _on_change(self, event: ContentChanged) -> None:
        markup = extract(event.file)
        if markup == self.last_markup:
            LOG.debug("[%s] %s rewritten without POD changes", self.label, event.file.name)
            return

        self.state = RegeneratorState.REGENERATING
        LOG.warning(
            "[%s] POD in %s changed after the README was generated; regenerating. "
            "Order this plugin after the plugin that modifies %s.",
            self.label,
            event.file.name,
            event.file.name,
        )
        readme = self._convert(markup, event.file)
        self.last_markup = markup
        self.regenerations += 1
        try:
            self._place(readme)
        finally:
            self.state = RegeneratorState.OBSERVING

    def _convert(self, markup: str, source: BuildFile) -> GeneratedReadme:
        content = self.fmt.convert(markup)
        encoding = self.fmt.output_encoding(markup) or source.encoding
        return GeneratedReadme(content=content, encoding=encoding)
