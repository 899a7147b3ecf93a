"""Generate a README in any format from the POD of a project's main module."""

from .errors import InvalidPlacement, MissingSourceArtifact, ReadmeError, UnknownFormat
from .host import Assembly, BuildFile
from .models import FormatId, GeneratedReadme, Placement, PluginConfig
from .naming import NameInference
from .plugin import ReadmeAnyFromPod, build_plugins

__all__ = [
    "Assembly",
    "BuildFile",
    "FormatId",
    "GeneratedReadme",
    "InvalidPlacement",
    "MissingSourceArtifact",
    "NameInference",
    "Placement",
    "PluginConfig",
    "ReadmeAnyFromPod",
    "ReadmeError",
    "UnknownFormat",
    "build_plugins",
]
