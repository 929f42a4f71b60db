"""Logic for loading and merging the strategy configuration file."""

import copy
from pathlib import Path
from typing import Any

import yaml

from monorepo_strategy.deep_merge import deep_merge
from monorepo_strategy.errors import StrategyConfigError
from monorepo_strategy.project_config import CONFIG_FILENAMES, ID_FIELD

DEFAULT_CONFIG: dict[str, Any] = {
    "base_dir": "",
    "path": ".",
    "monorepo": False,
    "id_pattern_regex": None,
    "preview_label": False,
    "submit_label": False,
    "enforce_single_folder": False,
    "include_unchanged": False,
    "project_config": {
        "filenames": list(CONFIG_FILENAMES),
        "id_field": ID_FIELD,
    },
}


def load_config(path: str | Path | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path:
        p = Path(path)
        if p.exists():
            user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            if not isinstance(user_config, dict):
                msg = f"Strategy config {p} must be a mapping"
                raise StrategyConfigError(msg)
            config = deep_merge(config, user_config)
    return config
