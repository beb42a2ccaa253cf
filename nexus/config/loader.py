"""Locate and read the relay's TOML and JSON documents.

Settings are the overlay of config/default.toml and config/{NEXUS_ENV}.toml.
FAQ content files go through the same reader, and relative data paths are
anchored next to the config directory so the relay behaves the same from
any working directory inside the project.
"""

import json
import os
import tomllib
from pathlib import Path
from typing import Any

CONFIG_DIR_ENV = "NEXUS_CONFIG_DIR"
ENVIRONMENT_ENV = "NEXUS_ENV"
DEFAULT_ENVIRONMENT = "development"

# How many directories above the working directory to search for config/
_SEARCH_DEPTH = 5

_PARSERS = {".toml", ".json"}


class UnsupportedDocumentError(ValueError):
    """Raised for a file type the relay cannot parse."""


def find_config_dir() -> Path:
    """Return the directory holding default.toml.

    NEXUS_CONFIG_DIR wins when set and must exist. Otherwise the working
    directory and its parents are searched for a config/ directory.
    """
    override = os.environ.get(CONFIG_DIR_ENV)
    if override:
        path = Path(override)
        if not path.is_dir():
            raise FileNotFoundError(f"{CONFIG_DIR_ENV} does not exist: {override}")
        return path

    cwd = Path.cwd()
    for candidate in [cwd, *cwd.parents][:_SEARCH_DEPTH]:
        if (candidate / "config").is_dir():
            return candidate / "config"
    return cwd / "config"


def current_environment() -> str:
    return os.environ.get(ENVIRONMENT_ENV, DEFAULT_ENVIRONMENT)


def read_document(path: Path) -> dict[str, Any]:
    """Parse a .toml or .json file whose top level is a table/object.

    Raises:
        FileNotFoundError: If the file does not exist
        UnsupportedDocumentError: If the suffix is not .toml or .json
        ValueError: If the content does not parse to a mapping (TOML and
            JSON decode errors are ValueErrors)
    """
    suffix = path.suffix.lower()
    if suffix not in _PARSERS:
        raise UnsupportedDocumentError(f"Unsupported document type: {suffix or path.name}")
    if not path.is_file():
        raise FileNotFoundError(f"File not found: {path}")

    if suffix == ".toml":
        with path.open("rb") as f:
            data: Any = tomllib.load(f)
    else:
        data = json.loads(path.read_text(encoding="utf-8"))

    if not isinstance(data, dict):
        raise ValueError(f"{path} must contain an object at the top level")
    return data


def resolve_data_path(path: Path) -> Path:
    """Anchor a relative data file path at the project root.

    Absolute paths and paths that exist relative to the working directory
    are returned unchanged.
    """
    if path.is_absolute() or path.exists():
        return path
    return find_config_dir().parent / path


def overlay(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively overlay override onto base without mutating either.

    Tables merge key by key; any other value, lists included, replaces.
    """
    merged = dict(base)
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = overlay(current, value)
        else:
            merged[key] = value
    return merged


def load_config() -> dict[str, Any]:
    """Merge default.toml with the environment's file.

    Either layer may be absent; with neither, the result is empty and the
    settings models fall back to their own defaults.
    """
    config_dir = find_config_dir()
    layers = (
        config_dir / "default.toml",
        config_dir / f"{current_environment()}.toml",
    )

    config: dict[str, Any] = {}
    for layer in layers:
        if layer.is_file():
            config = overlay(config, read_document(layer))
    return config
