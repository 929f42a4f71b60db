"""Exceptions raised for unrecoverable strategy configuration problems."""


class StrategyConfigError(ValueError):
    """Base class for configuration values the strategy cannot work with."""


class UnsupportedPatternError(StrategyConfigError):
    """Raised when a path pattern uses a wildcard form other than a trailing `*`."""

    def __init__(self, pattern: str) -> None:
        """Record the offending pattern segment."""
        self.pattern = pattern
        super().__init__(
            f"Unsupported path pattern {pattern!r}: only simple glob patterns "
            "ending with `/*` or `*` are supported."
        )


class InvalidIdPatternError(StrategyConfigError):
    """Raised when the project id pattern is not a valid regular expression."""

    def __init__(self, pattern: str, reason: str) -> None:
        """Record the pattern and the compiler's complaint."""
        self.pattern = pattern
        super().__init__(f"Invalid id-pattern-regex /{pattern}/: {reason}")
