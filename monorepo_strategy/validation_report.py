"""Data model for the outcome of project id validation."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ValidationReport:
    """Itemized diagnostics plus an overall verdict."""

    messages: list[str] = field(default_factory=list)
    valid: bool = True
