"""Data model for the outcome of attributing changed files to directories."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class AttributionResult:
    """Directories that received changes, and changes that fit no directory."""

    filtered_paths: list[str] = field(default_factory=list)
    unknown_changed_files: list[str] = field(default_factory=list)
