#!/usr/bin/env python3
"""Command-line interface for generating READMEs from POD."""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from podreadme.errors import ReadmeError
from podreadme.formats import known_formats
from podreadme.host import Assembly, gather_dir
from podreadme.libs.config_loader import get_config, load_configs, load_project_configs
from podreadme.naming import NameInference
from podreadme.plugin import PLUGIN_FAMILY, build_plugins

LOG = logging.getLogger(__name__)

DEFAULT_BUILD_DIR = ".build"


def run(root: Path, config: dict, build_dir: Optional[Path] = None) -> Assembly:
    """Gather the project under ``root``, attach the configured plugins and build it."""
    exclude = list(get_config("exclude", config, default=[]))
    entries = get_config("plugins", config, default=None) or [{"name": PLUGIN_FAMILY}]

    assembly = Assembly(
        root,
        files=gather_dir(root, exclude=exclude),
        main_module=get_config("main_module", config, default=None),
    )
    for plugin in build_plugins(entries, NameInference(known_formats())):
        assembly.add_plugin(plugin)

    LOG.info("Building %s with %d plugin(s)", root, len(assembly.plugins))
    assembly.build(build_dir)
    return assembly


def main():
    """Main entry point for the podreadme command."""
    parser = argparse.ArgumentParser(
        description='Generate a README from the POD of a project\'s main module',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Example:
  podreadme --root My-Dist/ --build-dir My-Dist/.build

  This will:
    1. Read podreadme.yaml (and podreadme.local.yaml) from My-Dist/
    2. Gather the project files and extract POD from the main module
    3. Write the build, including build READMEs, to My-Dist/.build
    4. Write root READMEs directly into My-Dist/

Example podreadme.yaml:
  main_module: lib/My/Dist.pm
  plugins:
    - name: ReadmeAnyFromPod
    - name: ReadmePodInRoot
        """
    )

    parser.add_argument(
        '--root', '-r',
        type=Path,
        default=Path('.'),
        help='Project root directory (default: current directory)'
    )
    parser.add_argument(
        '--config', '-c',
        type=Path,
        action='append',
        help='YAML config file; may be repeated (default: <root>/podreadme.yaml)'
    )
    parser.add_argument(
        '--build-dir', '-b',
        type=Path,
        help=f'Directory to write the build to (default: <root>/{DEFAULT_BUILD_DIR})'
    )
    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Enable verbose logging'
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    root = args.root.resolve()
    if not root.is_dir():
        LOG.error(f"Project root not found: {args.root}")
        sys.exit(1)

    build_dir = args.build_dir or root / DEFAULT_BUILD_DIR

    try:
        if args.config:
            config = load_configs(*(str(path) for path in args.config))
        else:
            config = load_project_configs(str(root))
        config.setdefault("exclude", [])
        if build_dir.resolve().is_relative_to(root):
            config["exclude"] = list(config["exclude"]) + [f"{build_dir.resolve().relative_to(root).as_posix()}/*"]

        assembly = run(root, config, build_dir)
    except (ReadmeError, LookupError, TypeError, ValueError) as e:
        LOG.error(f"Build failed: {e}", exc_info=args.verbose)
        sys.exit(1)

    print("\n" + "=" * 50)
    print("README Generation Complete!")
    print("=" * 50)
    for plugin in assembly.plugins:
        if plugin.config.in_build:
            where = build_dir / plugin.filename
        else:
            where = root / plugin.filename
        print(f"  [{plugin.plugin_name}] {plugin.config.format.value} -> {where}")
        if plugin.regenerator.regenerations:
            print(f"    regenerated {plugin.regenerator.regenerations} time(s) after a source change")
    print(f"\nBuild written to: {build_dir}")


if __name__ == '__main__':
    main()
