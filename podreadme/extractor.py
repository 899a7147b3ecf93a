"""Locate the source file of the README and extract its POD."""

from __future__ import annotations

from .errors import MissingSourceArtifact
from .host import Assembly, BuildFile
from .pod import extract_pod


def find_source(assembly: Assembly, source_filename: str, plugin_name: str) -> BuildFile:
    """Return the build file named ``source_filename`` or fail the build."""
    source = assembly.find_file(source_filename)
    if source is None:
        raise MissingSourceArtifact(source_filename, plugin_name)
    return source


def extract(source: BuildFile) -> str:
    """POD markup of ``source``; empty when it has no documentation."""
    return extract_pod(source.content)
