"""Options controlling a single strategy run."""

from dataclasses import dataclass
from typing import Any

from monorepo_strategy.project_config import CONFIG_FILENAMES, ID_FIELD


def _gate_value(value: Any) -> str | bool:
    """Accept YAML label lists as well as booleans and comma-separated strings."""
    if isinstance(value, (list, tuple)):
        return ",".join(str(v) for v in value)
    if value is None:
        return False
    return value if isinstance(value, bool) else str(value)


@dataclass(frozen=True)
class StrategyOptions:
    """Pipeline configuration for the strategy.

    The three gates accept `True`/`False`, the strings `"true"`/`"false"`, or a
    comma-separated list of labels that enable the gate when applied.
    """

    path: str = "."
    base_dir: str = ""
    monorepo: bool = False
    id_pattern_regex: str | None = None
    preview_label: str | bool = False
    submit_label: str | bool = False
    enforce_single_folder: str | bool = False
    include_unchanged: bool = False
    config_filenames: tuple[str, ...] = CONFIG_FILENAMES
    id_field: str = ID_FIELD

    @classmethod
    def from_config(cls, config: dict[str, Any]) -> "StrategyOptions":
        """Build options from a merged configuration dictionary."""
        project_config = config.get("project_config") or {}
        return cls(
            path=str(config.get("path") or "."),
            base_dir=str(config.get("base_dir") or ""),
            monorepo=bool(config.get("monorepo", False)),
            id_pattern_regex=config.get("id_pattern_regex") or None,
            preview_label=_gate_value(config.get("preview_label")),
            submit_label=_gate_value(config.get("submit_label")),
            enforce_single_folder=_gate_value(config.get("enforce_single_folder")),
            include_unchanged=bool(config.get("include_unchanged", False)),
            config_filenames=tuple(project_config.get("filenames") or CONFIG_FILENAMES),
            id_field=project_config.get("id_field") or ID_FIELD,
        )
