"""Expand a comma-separated list of directories and simple globs."""

import logging
from pathlib import Path

from monorepo_strategy.errors import UnsupportedPatternError

logger = logging.getLogger(__name__)

GLOB = "*"
IGNORED_PREFIXES = (".", "_")


def _split_patterns(pattern: str) -> list[str]:
    """Split on commas, trimming whitespace and dropping empty segments."""
    return [p.strip() for p in pattern.split(",") if p.strip()]


def _is_glob(segment: str) -> bool:
    return segment == GLOB or segment.endswith("/" + GLOB)


def _is_listed(entry: Path) -> bool:
    """Keep real sub-directories; skip hidden, underscored and symlinked entries."""
    if entry.name.startswith(IGNORED_PREFIXES) or entry.is_symlink():
        return False
    return entry.is_dir()


def _expand_glob(base_dir: Path, segment: str) -> list[str]:
    """List the visible sub-directories of the directory the glob points at."""
    dir_path = base_dir / segment.removesuffix(GLOB).rstrip("/")
    try:
        # Entries are listed in byte-wise name order
        entries = sorted(dir_path.iterdir(), key=lambda entry: entry.name)
    except OSError as exc:
        logger.warning("Error reading directory %s: %s", dir_path.as_posix(), exc)
        return []
    return [entry.as_posix() for entry in entries if _is_listed(entry)]


def _resolve_literal(base_dir: Path, segment: str) -> list[str]:
    """Return the path if it is an existing directory."""
    path = base_dir / segment
    try:
        is_dir = path.is_dir()
    except OSError as exc:
        logger.warning("Error accessing path %s: %s", segment, exc)
        return []
    if not is_dir:
        logger.warning("Skipping %s: not an existing directory", path.as_posix())
        return []
    return [path.as_posix()]


def resolve_paths(base_dir: str | Path, pattern: str) -> list[str]:
    """Resolve a path specification into the matching directories.

    Each comma-separated segment is either a literal directory, or a single-level
    glob (`dir/*` or `*`) that expands to the sub-directories of `dir` whose
    names don't start with `.` or `_`. Results are joined with `base_dir` and
    returned in segment order without de-duplication, so an ignored directory
    can still be listed explicitly.

    Missing literal paths and unreadable glob directories are logged and skipped.

    Raises:
        UnsupportedPatternError: if a segment uses any other wildcard form.
    """
    base = Path(base_dir)
    paths: list[str] = []
    for segment in _split_patterns(pattern):
        if _is_glob(segment):
            paths.extend(_expand_glob(base, segment))
        elif GLOB in segment:
            raise UnsupportedPatternError(segment)
        else:
            paths.extend(_resolve_literal(base, segment))
    return paths
