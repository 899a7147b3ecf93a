"""Minimal in-memory build host.

The README plugin talks to its host through a small contract: a collection of
files that can be searched, extended and pruned, plus lifecycle hooks called in
a fixed order. :class:`Assembly` implements that contract so the plugin can be
driven from the command line and from tests.
"""

from __future__ import annotations

import fnmatch
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Dict, Iterable, Iterator, List, Optional, Sequence

from .formats.utils import declared_encoding
from .models import ENCODE_ERRORS

LOG = logging.getLogger(__name__)

MAIN_MODULE_SUFFIXES = (".pm", ".pod")
PHASES = ("gather_files", "prune_files", "munge_files")


@dataclass(frozen=True)
class ContentChanged:
    """Published by a :class:`BuildFile` whenever its content is assigned."""

    file: "BuildFile"
    old_content: str
    new_content: str


Subscriber = Callable[[ContentChanged], None]


class BuildFile:
    """A file of the build, held in memory until the build is written."""

    def __init__(
        self,
        name: str,
        content: str = "",
        encoding: str = "utf-8",
        added_by: Optional[str] = None,
    ) -> None:
        self.name = name
        self._content = content
        self.encoding = encoding
        self.added_by = added_by
        self._subscribers: Dict[str, Subscriber] = {}

    @property
    def content(self) -> str:
        return self._content

    @content.setter
    def content(self, value: str) -> None:
        old = self._content
        self._content = value
        event = ContentChanged(self, old, value)
        for callback in list(self._subscribers.values()):
            callback(event)

    @property
    def encoded_content(self) -> bytes:
        return self._content.encode(self.encoding, errors=ENCODE_ERRORS)

    def subscribe(self, key: str, callback: Subscriber) -> bool:
        """Register ``callback`` under ``key``; returns False if ``key`` is taken."""
        if key in self._subscribers:
            return False
        self._subscribers[key] = callback
        return True

    def unsubscribe(self, key: str) -> None:
        self._subscribers.pop(key, None)

    def is_subscribed(self, key: str) -> bool:
        return key in self._subscribers

    def __repr__(self) -> str:
        return f"BuildFile({self.name!r})"


class Assembly:
    """The project being built: its root, its files and its plugins."""

    def __init__(
        self,
        root: Path,
        files: Optional[Iterable[BuildFile]] = None,
        main_module: Optional[str] = None,
    ) -> None:
        self.root = Path(root)
        self.files: List[BuildFile] = list(files or [])
        self.plugins: List[object] = []
        self._main_module = main_module

    @property
    def main_module(self) -> str:
        """Configured main module, else the shallowest ``.pm``/``.pod`` under ``lib/``."""
        if self._main_module:
            return self._main_module
        candidates = [
            file.name
            for file in self.files
            if file.name.startswith("lib/") and file.name.endswith(MAIN_MODULE_SUFFIXES)
        ]
        if not candidates:
            raise LookupError("No main module configured and none found under lib/")
        candidates.sort(key=lambda name: (name.count("/"), not name.endswith(".pm"), name))
        return candidates[0]

    def add_plugin(self, plugin) -> None:
        plugin.assembly = self
        self.plugins.append(plugin)

    def find_file(self, name: str) -> Optional[BuildFile]:
        for file in self.files:
            if file.name == name:
                return file
        return None

    def add_file(self, file: BuildFile) -> None:
        LOG.debug("Adding %s to the build", file.name)
        self.files.append(file)

    def prune_file(self, file: BuildFile) -> None:
        self.files = [existing for existing in self.files if existing is not file]

    def __iter__(self) -> Iterator[BuildFile]:
        return iter(list(self.files))

    def run_phase(self, phase: str) -> None:
        for plugin in self.plugins:
            hook = getattr(plugin, phase, None)
            if hook is not None:
                hook()

    def build(self, build_dir: Optional[Path] = None) -> List[BuildFile]:
        """
        Run every phase in order and return the final file set.

        When ``build_dir`` is given the files are written there before the
        ``after_build`` phase runs.
        """
        for phase in PHASES:
            self.run_phase(phase)
        if build_dir is not None:
            self.write(Path(build_dir))
        self.run_phase("after_build")
        return list(self.files)

    def write(self, build_dir: Path) -> None:
        LOG.info("Writing %d files to %s", len(self.files), build_dir)
        for file in self.files:
            path = build_dir / file.name
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(file.encoded_content)


def gather_dir(root: Path, exclude: Sequence[str] = ()) -> List[BuildFile]:
    """Collect the files under ``root`` as build files, skipping hidden paths."""
    root = Path(root)
    files: List[BuildFile] = []
    for path in sorted(root.rglob("*")):
        rel_path = path.relative_to(root)
        if any(part.startswith(".") for part in rel_path.parts):
            continue
        if path.is_dir():
            continue
        name = rel_path.as_posix()
        if any(fnmatch.fnmatch(name, pattern) for pattern in exclude):
            LOG.debug("Excluding %s", name)
            continue
        file = _read_build_file(path, name)
        if file is not None:
            files.append(file)
    return files


def _read_build_file(path: Path, name: str) -> Optional[BuildFile]:
    """Read ``path`` as UTF-8, falling back to the codec its ``=encoding`` names."""
    data = path.read_bytes()
    try:
        return BuildFile(name, data.decode("utf-8"))
    except UnicodeDecodeError:
        pass

    # every byte decodes as latin-1, enough to find the =encoding line
    encoding = declared_encoding(data.decode("latin-1"))
    if encoding is None:
        LOG.warning("Skipping %s: not UTF-8 text and no =encoding declared", name)
        return None
    try:
        content = data.decode(encoding)
    except UnicodeDecodeError:
        LOG.warning("Skipping %s: not valid %s text", name, encoding)
        return None
    LOG.debug("Read %s as %s", name, encoding)
    return BuildFile(name, content, encoding=encoding)
