"""Attribute changed files to the allowed project directories."""

from collections.abc import Sequence

from monorepo_strategy.attribution_result import AttributionResult
from monorepo_strategy.path_starts_with import path_starts_with


def _changed_directories(changed_files: Sequence[str]) -> list[str]:
    """Return the unique parent directories of the changed files, in first-seen order.

    Files at the repository root have no parent directory and are dropped.
    """
    directories: dict[str, None] = {}
    for file in changed_files:
        parent, _, _ = file.rpartition("/")
        if parent:
            directories.setdefault(parent, None)
    return list(directories)


def filter_paths_and_identify_unknown_changes(
    allowed_paths: Sequence[str],
    changed_files: Sequence[str],
    *,
    include_unchanged: bool = False,
) -> AttributionResult:
    """Filter the paths by the changed files, and mention any unknown changed files.

    Args:
        allowed_paths: The directories that are expected to have changes in them.
        changed_files: The list of changed files.
        include_unchanged: Keep every allowed path, changed or not.

    Returns:
        `filtered_paths`: allowed paths that have corresponding changes in
        `changed_files` (or all of them with `include_unchanged`).
        `unknown_changed_files`: files that were changed but don't fall under any
        of the allowed paths.
    """
    if include_unchanged:
        filtered_paths = list(allowed_paths)
    else:
        changed_dirs = _changed_directories(changed_files)
        filtered_paths = [
            allowed
            for allowed in allowed_paths
            if any(path_starts_with(changed, allowed) for changed in changed_dirs)
        ]

    # Tested against the full file path, not its parent directory
    unknown_changed_files = [
        changed
        for changed in changed_files
        if not any(path_starts_with(changed, allowed) for allowed in allowed_paths)
    ]

    return AttributionResult(
        filtered_paths=filtered_paths,
        unknown_changed_files=unknown_changed_files,
    )
