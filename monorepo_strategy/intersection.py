"""Set helpers for matching label lists."""

from collections.abc import Iterable


def get_intersection(a: Iterable[str], b: Iterable[str]) -> set[str]:
    """Return the elements of `b` that also occur in `a`."""
    members = set(a)
    return {value for value in b if value in members}


def has_intersection(a: Iterable[str], b: Iterable[str]) -> bool:
    """Return True when `a` and `b` share at least one element."""
    return bool(get_intersection(a, b))
