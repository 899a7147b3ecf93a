"""Configuration loading utilities for podreadme."""

import copy
import logging
import os
from typing import Any

import yaml

LOG = logging.getLogger(__name__)

ConfigType = dict[str, Any]

DEFAULT_CONFIG_NAMES = ("podreadme.yaml", "podreadme.local.yaml")


def load_configs(*path_configs: str) -> ConfigType:
    """Load and merge YAML configuration files.

    Args:
        *path_configs: Paths to YAML configuration files

    Returns:
        Merged configuration dictionary

    Raises:
        TypeError: If a config file doesn't contain a dict
        ValueError: If no configs are loaded
    """
    def merge(orig_conf: Any, new_conf: Any):
        """Recursively merge configuration dictionaries."""
        if isinstance(orig_conf, dict) and isinstance(new_conf, dict):
            result = copy.deepcopy(orig_conf)
            for k, v in new_conf.items():
                if k in orig_conf:
                    result[k] = merge(orig_conf[k], v)
                else:
                    result[k] = v
            return result
        else:
            return copy.deepcopy(new_conf)

    result = {}
    for path in list(path_configs):
        LOG.info("loading config from %s", path)
        if os.path.isfile(path):
            with open(path, "r", encoding="utf-8") as f:
                c = yaml.safe_load(f)
                if not isinstance(c, dict):
                    raise TypeError(f"YAML config file {path} must be a dict")
                result = merge(result, c)
        else:
            LOG.warning("Skipping missing config file %s", repr(path))
    if not result:
        raise ValueError("No configs loaded")
    return result


def load_project_configs(project_root: str) -> ConfigType:
    """Load the project's configuration and its local overrides.

    Looks in ``project_root`` for:
    1. podreadme.yaml (project configuration)
    2. podreadme.local.yaml (local overrides, not committed to git)

    Returns:
        Merged configuration, or an empty dict when neither file exists
    """
    paths = [os.path.join(project_root, name) for name in DEFAULT_CONFIG_NAMES]
    if not any(os.path.isfile(path) for path in paths):
        LOG.info("No podreadme config in %s; using defaults", project_root)
        return {}
    return load_configs(*paths)


def get_config(key: str, config: ConfigType, default: Any = KeyError) -> Any:
    """Get a configuration value by dot-separated key.

    Args:
        key: Dot-separated path to config value (e.g., "readme.main_module")
        config: Configuration dict
        default: Value returned when the key is missing (raises KeyError if not given)

    Returns:
        Configuration value

    Raises:
        KeyError: If key not found in configuration and no default is given
    """
    keys = key.split('.')
    value = config
    for i, k in enumerate(keys):
        if not isinstance(value, dict):
            if default is not KeyError:
                return default
            raise KeyError(f"Cannot access {k} in non-dict value at {'.'.join(keys[:i])}")
        if k not in value:
            if default is not KeyError:
                return default
            raise KeyError(f"Key {key} not found in configuration")
        value = value[k]
    return value
