"""Base class for README output formats."""

from __future__ import annotations

from typing import Optional

from ..models import FormatId
from .utils import declared_encoding


class ReadmeFormat:
    """One README output format: a default filename plus a POD converter."""

    identifier: FormatId
    default_filename: str = "README"

    def convert(self, markup: str) -> str:
        """Convert POD markup to this format. Must not fail on empty markup."""
        raise NotImplementedError

    def output_encoding(self, markup: str) -> Optional[str]:
        """Encoding declared by the markup, or ``None`` to keep the source's."""
        return declared_encoding(markup)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.identifier.value!r})"
