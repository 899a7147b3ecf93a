"""The README plugin: POD from the main module, converted and placed."""

from __future__ import annotations

import dataclasses
import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional

from .errors import InvalidPlacement
from .extractor import find_source
from .formats import ReadmeFormat, known_formats, resolve
from .host import Assembly, BuildFile
from .models import DEFAULT_FORMAT, DEFAULT_PLACEMENT, GeneratedReadme, Placement, PluginConfig, PluginOptions
from .naming import NameInference
from .placement import place_in_build, place_in_root
from .regenerator import Regenerator

LOG = logging.getLogger(__name__)

PLUGIN_FAMILY = "ReadmeAnyFromPod"


def resolve_config(plugin_name: str, options: PluginOptions, inference: NameInference) -> PluginConfig:
    """
    Combine explicit options with what the plugin name implies.

    Explicit options win, then the name, then the defaults (text, build).
    Raises :class:`UnknownFormat` or :class:`InvalidPlacement` on bad values.
    """
    inferred_type, inferred_location = inference.infer(plugin_name)

    format_id = options.type if options.type is not None else inferred_type
    fmt = resolve(format_id if format_id is not None else DEFAULT_FORMAT)

    location = options.location if options.location is not None else inferred_location
    if location is None:
        placement = DEFAULT_PLACEMENT
    else:
        try:
            placement = Placement(str(location).strip().lower())
        except ValueError:
            raise InvalidPlacement(location, [p.value for p in Placement]) from None

    return PluginConfig(
        format=fmt.identifier,
        filename=options.filename or fmt.default_filename,
        placement=placement,
        source_filename=options.source_filename,
    )


class ReadmeAnyFromPod:
    """
    Generate a README from the POD of the main module.

    Hooks, in the order the host calls them:

    * ``gather_files`` registers an empty README in the build so later
      plugins see it in the file list.
    * ``prune_files`` removes root READMEs that would otherwise sneak into the
      next build from the project directory.
    * ``munge_files`` fills in the build README once the source is final.
    * ``after_build`` writes root READMEs.
    """

    def __init__(
        self,
        plugin_name: Optional[str] = None,
        options: Optional[Mapping[str, Any]] = None,
        name_inference: Optional[NameInference] = None,
        assembly: Optional[Assembly] = None,
    ) -> None:
        self.plugin_name = plugin_name or PLUGIN_FAMILY
        self.options = PluginOptions(**dict(options or {}))
        self.name_inference = name_inference if name_inference is not None else NameInference(known_formats())
        self.config = resolve_config(self.plugin_name, self.options, self.name_inference)
        self.format: ReadmeFormat = resolve(self.config.format)
        self.assembly = assembly
        self._regenerator = Regenerator(
            key=f"{self.plugin_name}#{id(self):x}",
            fmt=self.format,
            place=self._place,
            label=self.plugin_name,
        )

    @property
    def filename(self) -> str:
        return self.config.filename

    @property
    def source_filename(self) -> str:
        if self.config.source_filename is None:
            main_module = self._require_assembly().main_module
            self.config = dataclasses.replace(self.config, source_filename=main_module)
        return self.config.source_filename

    @property
    def regenerator(self) -> Regenerator:
        return self._regenerator

    def gather_files(self) -> None:
        assembly = self._require_assembly()
        if self.config.in_build and assembly.find_file(self.filename) is None:
            LOG.debug("[%s] reserving %s in build", self.plugin_name, self.filename)
            assembly.add_file(BuildFile(self.filename, "", added_by=self.plugin_name))

    def prune_files(self) -> None:
        if not self.config.in_root:
            return
        assembly = self._require_assembly()
        # another instance of us puts the same file in the build; leave it there
        for sibling in assembly.plugins:
            if (
                sibling is not self
                and type(sibling) is type(self)
                and sibling.config.in_build
                and sibling.filename == self.filename
            ):
                return
        for file in assembly:
            if file.name == self.filename:
                LOG.debug("pruning %s", file.name)
                assembly.prune_file(file)

    def munge_files(self) -> None:
        if self.config.in_build:
            LOG.debug("[%s] updating contents of %s in build", self.plugin_name, self.filename)
            self._place(self._generate())
        else:
            # root READMEs are written after the build; fail before it is written
            find_source(self._require_assembly(), self.source_filename, self.plugin_name)

    def after_build(self) -> None:
        if self.config.in_root:
            LOG.debug("[%s] updating contents of %s in root", self.plugin_name, self.filename)
            self._place(self._generate())

    def get_readme_content(self) -> str:
        """The README in the configured format for the current source."""
        return self._generate().content

    def _generate(self) -> GeneratedReadme:
        source = find_source(self._require_assembly(), self.source_filename, self.plugin_name)
        return self._regenerator.generate(source)

    def _place(self, readme: GeneratedReadme) -> None:
        assembly = self._require_assembly()
        if self.config.in_build:
            place_in_build(assembly, self.filename, readme, owner=self.plugin_name)
        else:
            place_in_root(assembly.root, self.filename, readme)

    def _require_assembly(self) -> Assembly:
        if self.assembly is None:
            raise RuntimeError(f"[{self.plugin_name}] is not attached to an assembly")
        return self.assembly

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self.plugin_name!r}, type={self.config.format.value!r}, "
            f"location={self.config.placement.value!r})"
        )


def build_plugins(
    entries: Iterable[Mapping[str, Any]],
    name_inference: Optional[NameInference] = None,
) -> List[ReadmeAnyFromPod]:
    """
    Create plugin instances from configuration entries.

    Each entry is a mapping with an optional ``name`` plus plugin options; all
    instances share one :class:`NameInference`.
    """
    inference = name_inference if name_inference is not None else NameInference(known_formats())
    plugins: List[ReadmeAnyFromPod] = []
    for entry in entries:
        options: Dict[str, Any] = dict(entry)
        name = options.pop("name", None)
        plugins.append(ReadmeAnyFromPod(name, options, name_inference=inference))
    return plugins
