"""Data model for the decisions produced by a strategy run."""

import json
from dataclasses import dataclass, field
from typing import Any


@dataclass
class StrategyResult:
    """Gating decisions, the build matrix and any aggregated errors."""

    paths: list[str] = field(default_factory=list)
    path_ids: dict[str, str | None] = field(default_factory=dict)
    filtered_paths: list[str] = field(default_factory=list)
    unknown_changed_files: list[str] = field(default_factory=list)
    preview: bool = False
    submit: bool = False
    enforce_single_folder: bool = False
    check: bool = True
    errors: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        """True when no check failed."""
        return not self.errors

    @property
    def matrix(self) -> dict[str, list[dict[str, Any]]]:
        """Build the CI job matrix, one job per changed project directory."""
        return {
            "include": [
                {
                    "id": self.path_ids.get(p),
                    "working-directory": p,
                    "draft": not self.submit,
                }
                for p in self.filtered_paths
            ]
        }

    def outputs(self) -> dict[str, Any]:
        """Return the step outputs consumed by later pipeline jobs."""
        return {
            "preview": self.preview,
            "check": self.check,
            "matrix": json.dumps(self.matrix),
        }
