"""Locate and read the per-project configuration file."""

import logging
from collections.abc import Sequence
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)

CONFIG_FILENAMES: tuple[str, ...] = ("myst.yml", "curvenote.yml")
ID_FIELD = "project.id"


def find_config_file(
    path: str | Path, filenames: Sequence[str] = CONFIG_FILENAMES
) -> Path | None:
    """Return the first candidate config file that exists in `path`."""
    for name in filenames:
        candidate = Path(path) / name
        if candidate.is_file():
            return candidate
    return None


CONFIG_READ_ERRORS = (OSError, yaml.YAMLError, ValueError)


def read_config_file(config_file: Path) -> dict[str, Any]:
    """Parse a project config file.

    Raises:
        OSError: if the file can't be read.
        yaml.YAMLError: if the file isn't valid YAML.
        ValueError: if the document isn't a mapping.
    """
    data = yaml.safe_load(config_file.read_text(encoding="utf-8"))
    if data is None:
        return {}
    if not isinstance(data, dict):
        msg = f"expected a mapping, got {type(data).__name__}"
        raise ValueError(msg)
    return data


def load_project_config(
    path: str | Path, filenames: Sequence[str] = CONFIG_FILENAMES
) -> dict[str, Any] | None:
    """Load the project config for a directory.

    Returns None when there is no config file, or it can't be read or parsed.
    """
    config_file = find_config_file(path, filenames)
    if config_file is None:
        return None
    try:
        return read_config_file(config_file)
    except CONFIG_READ_ERRORS as exc:
        logger.warning("Problem loading config file at %s: %s", config_file, exc)
        return None


def get_field(data: dict[str, Any], dotted_key: str) -> Any:
    """Look up a nested value such as `project.id`, or None if any level is missing."""
    value: Any = data
    for key in dotted_key.split("."):
        if not isinstance(value, dict):
            return None
        value = value.get(key)
    return value


def get_project_id(
    path: str | Path,
    filenames: Sequence[str] = CONFIG_FILENAMES,
    id_field: str = ID_FIELD,
) -> str | None:
    """Return the project id for a directory, or None if it has no usable id."""
    data = load_project_config(path, filenames)
    if data is None:
        return None
    project_id = get_field(data, id_field)
    if project_id is None:
        return None
    if not isinstance(project_id, str):
        logger.warning(
            "Ignoring non-string %s (%r) for path %s", id_field, project_id, path
        )
        return None
    return project_id
