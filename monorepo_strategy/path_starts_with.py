"""Segment-wise path prefix matching."""

ROOT_MARKERS = frozenset({"", "."})


def path_starts_with(full_path: str, base_path: str) -> bool:
    """Check if `full_path` lies under `base_path`, comparing whole segments.

    This only matches full directory names, e.g.

        path_starts_with("papers/my-paper.md", "pa") is False
        path_starts_with("posters/poster-10/x.tex", "posters/poster-1") is False

    The repository root (`""` or `"."`) is an ancestor of every path.
    """
    if base_path in ROOT_MARKERS:
        return True
    base_parts = base_path.split("/")
    return full_path.split("/")[: len(base_parts)] == base_parts
