"""Data models shared by the README plugin and its converters."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class FormatId(str, Enum):
    """The fixed set of README output formats."""

    TEXT = "text"
    MARKDOWN = "markdown"
    POD = "pod"
    HTML = "html"


class Placement(str, Enum):
    """Where the generated README ends up."""

    BUILD = "build"
    ROOT = "root"


DEFAULT_FORMAT = FormatId.TEXT
DEFAULT_PLACEMENT = Placement.BUILD
# characters the output encoding cannot represent are written as "?"
ENCODE_ERRORS = "replace"


class PluginOptions(BaseModel):
    """Options accepted by one plugin instance, exactly as the user wrote them."""

    model_config = ConfigDict(extra="forbid")

    type: Optional[str] = Field(default=None, description="README format (text, markdown, pod, html)")
    filename: Optional[str] = Field(default=None, description="Name of the README file to produce")
    source_filename: Optional[str] = Field(
        default=None,
        description="File to extract POD from (default: the main module)",
    )
    location: Optional[str] = Field(default=None, description="Where to put the README (build or root)")


@dataclass(frozen=True)
class PluginConfig:
    """
    Resolved configuration of one plugin instance.

    ``source_filename`` stays ``None`` until the host's main module is known;
    the plugin fills it in lazily.
    """

    format: FormatId
    filename: str
    placement: Placement
    source_filename: Optional[str] = None

    @property
    def in_build(self) -> bool:
        return self.placement is Placement.BUILD

    @property
    def in_root(self) -> bool:
        return self.placement is Placement.ROOT


@dataclass(frozen=True)
class GeneratedReadme:
    """Converted README content and the encoding it must be written with."""

    content: str
    encoding: str

    def encode(self) -> bytes:
        return self.content.encode(self.encoding, errors=ENCODE_ERRORS)
