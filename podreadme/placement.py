"""Put a generated README into the build or into the project root."""

from __future__ import annotations

import logging
from pathlib import Path

from .host import Assembly, BuildFile
from .models import GeneratedReadme

LOG = logging.getLogger(__name__)


def place_in_build(assembly: Assembly, filename: str, readme: GeneratedReadme, owner: str) -> BuildFile:
    """
    Overwrite the build file ``filename`` with ``readme``, creating it if needed.

    Safe to call repeatedly; the file is looked up in the assembly each time.
    """
    file = assembly.find_file(filename)
    if file is None:
        file = BuildFile(filename, readme.content, encoding=readme.encoding, added_by=owner)
        assembly.add_file(file)
        LOG.info("Created %s in build", filename)
        return file

    if file.added_by == owner:
        LOG.debug("[%s] updating contents of %s in build", owner, filename)
    else:
        LOG.info("Override %s in build", filename)
    file.encoding = readme.encoding
    file.content = readme.content
    return file


def place_in_root(root: Path, filename: str, readme: GeneratedReadme) -> Path:
    """Write ``readme`` next to the project configuration, replacing any old copy."""
    path = Path(root) / filename
    if path.exists():
        LOG.info("overriding %s in root", filename)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(readme.encode())
    return path
