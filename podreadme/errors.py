"""Fatal errors raised while configuring or running the README plugin.

None of these are recovered from inside the plugin: they propagate to the
host, which aborts the build.
"""

from __future__ import annotations

from typing import Iterable


class ReadmeError(Exception):
    """Base class for every error raised by podreadme."""


class UnknownFormat(ReadmeError, ValueError):
    """The configured ``type`` is not one of the supported formats."""

    def __init__(self, format_id: object, known: Iterable[str]) -> None:
        self.format_id = format_id
        self.known = tuple(known)
        super().__init__(
            f"Unknown README type {format_id!r}; expected one of: {', '.join(self.known)}"
        )


class InvalidPlacement(ReadmeError, ValueError):
    """The configured ``location`` is neither ``build`` nor ``root``."""

    def __init__(self, location: object, known: Iterable[str]) -> None:
        self.location = location
        self.known = tuple(known)
        super().__init__(
            f"Invalid README location {location!r}; expected one of: {', '.join(self.known)}"
        )


class MissingSourceArtifact(ReadmeError, LookupError):
    """The file to extract POD from is not among the files of the build."""

    def __init__(self, source_filename: str, plugin_name: str) -> None:
        self.source_filename = source_filename
        self.plugin_name = plugin_name
        super().__init__(
            f"no source file {source_filename!r} found for [{plugin_name}] "
            "(place it below the plugin that provides that file)"
        )
