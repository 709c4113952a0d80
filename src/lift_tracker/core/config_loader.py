"""
YAML user configuration loader.

Reads optional overrides from ~/.lift-tracker/config.yaml.  Python defaults
in config.py apply whenever the file is missing; a file that can't be parsed
produces a warning and is ignored.

Usage:
    from lift_tracker.core.config_loader import load_user_config
    cfg = load_user_config()
    template = cfg.get("template")
"""

from __future__ import annotations

import os
import warnings
from pathlib import Path
from typing import Any

import yaml

CONFIG_DIR_NAME = ".lift-tracker"
CONFIG_FILE_NAME = "config.yaml"


def get_config_dir() -> Path:
    """Return ~/.lift-tracker (HOME is honoured so tests can redirect it)."""
    home = Path(os.environ.get("HOME", "~")).expanduser()
    return home / CONFIG_DIR_NAME


def get_user_config_path() -> Path | None:
    """Return ~/.lift-tracker/config.yaml if it exists, else None."""
    p = get_config_dir() / CONFIG_FILE_NAME
    return p if p.exists() else None


def _load_yaml_file(path: Path) -> dict[str, Any]:
    """Load a single YAML mapping; warn and return {} if it can't be read."""
    try:
        with open(path, "r", encoding="utf-8") as fh:
            data = yaml.safe_load(fh)
    except (OSError, yaml.YAMLError) as exc:
        warnings.warn(f"lift-tracker: ignoring {path} ({exc})", stacklevel=2)
        return {}
    if data is None:
        return {}
    if not isinstance(data, dict):
        warnings.warn(
            f"lift-tracker: ignoring {path} (top level must be a mapping)",
            stacklevel=2,
        )
        return {}
    return data


def load_user_config(path: Path | None = None) -> dict[str, Any]:
    """
    Load the user configuration.

    Args:
        path: Explicit config file; defaults to ~/.lift-tracker/config.yaml

    Returns:
        Parsed mapping, or {} when there is no usable file.
    """
    if path is None:
        path = get_user_config_path()
        if path is None:
            return {}
    elif not path.exists():
        return {}
    return _load_yaml_file(path)
