"""Decide whether an optional pipeline stage should run."""

from collections.abc import Iterable

from monorepo_strategy.boolean_or_labels import boolean_or_labels
from monorepo_strategy.intersection import has_intersection


def resolve_gate(value: str | bool, pr_labels: Iterable[str]) -> bool:
    """Resolve a boolean-or-labels input against the labels on the change request.

    A literal boolean is returned as-is; a label list enables the gate when any
    of its labels is applied to the change request.
    """
    parsed = boolean_or_labels(value)
    if isinstance(parsed, bool):
        return parsed
    return has_intersection(parsed, pr_labels)
