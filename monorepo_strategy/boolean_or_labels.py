"""Interpret a pipeline input as either a boolean or a list of labels."""

TRUE_TOKEN = "true"
FALSE_TOKEN = "false"


def boolean_or_labels(value: str | bool) -> bool | list[str]:
    """Return a boolean for `true`/`false`, otherwise the comma-separated labels."""
    if value is True or value == TRUE_TOKEN:
        return True
    if value is False or value == FALSE_TOKEN:
        return False
    return [label.strip() for label in value.split(",")]
