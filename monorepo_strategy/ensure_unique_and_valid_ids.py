"""Validate that every project directory carries a unique, well-formed id."""

import re
from collections import Counter
from collections.abc import Mapping, Sequence
from pathlib import Path

from monorepo_strategy.errors import InvalidIdPatternError
from monorepo_strategy.project_config import (
    CONFIG_FILENAMES,
    CONFIG_READ_ERRORS,
    ID_FIELD,
    find_config_file,
    read_config_file,
)
from monorepo_strategy.validation_report import ValidationReport

# Ids end up in CI matrix/job names, so this is enforced on top of any pattern
SAFE_ID = re.compile(r"[A-Za-z0-9_-]+", re.ASCII)


def _compile_pattern(id_pattern_regex: str | None) -> re.Pattern[str] | None:
    if not id_pattern_regex:
        return None
    try:
        return re.compile(id_pattern_regex)
    except re.error as exc:
        raise InvalidIdPatternError(id_pattern_regex, str(exc)) from exc


def _is_valid_id(project_id: str | None, pattern: re.Pattern[str] | None) -> bool:
    if not project_id:
        return False
    if pattern is not None and not pattern.search(project_id):
        return False
    return SAFE_ID.fullmatch(project_id) is not None


def _invalid_id_message(
    path: str,
    project_id: str | None,
    id_pattern_regex: str | None,
    filenames: Sequence[str],
    id_field: str,
) -> str:
    """Describe why a directory failed, depending on the state of its config file."""
    config_file = find_config_file(path, filenames)
    expected = Path(path, filenames[0]).as_posix() if filenames else path
    if config_file is None:
        return (
            f'No config file present for path "{path}"\n'
            f"Create {expected} and ensure it includes a valid {id_field}"
        )
    try:
        read_config_file(config_file)
    except CONFIG_READ_ERRORS as exc:
        return (
            f'Could not read config file for path "{path}" ({exc})\n'
            f"Fix {config_file.as_posix()} and ensure it includes a valid {id_field}"
        )
    rules = [" - Must not be null or empty"]
    if id_pattern_regex:
        rules.append(f" - Must match id-pattern-regex: /{id_pattern_regex}/")
    rules.append(' - Only includes "a-z A-Z 0-9 - _"')
    return (
        f'Invalid id for path "{path}" (ID: `{project_id}`):\n'
        + "\n".join(rules)
        + f"\nUpdate {config_file.as_posix()} to include a valid {id_field}"
    )


def _duplicate_messages(path_ids: Mapping[str, str | None]) -> list[str]:
    counts = Counter(path_ids.values())
    messages = []
    for project_id, count in counts.items():
        if count < 2:  # noqa: PLR2004
            continue
        shared = [p for p, test in path_ids.items() if test == project_id]
        listing = "\n".join(f' - "{p}"' for p in shared)
        messages.append(
            f'The id "{project_id}" is repeated in the following directories:\n'
            f"{listing}"
        )
    return messages


def ensure_unique_and_valid_ids(
    path_ids: Mapping[str, str | None],
    id_pattern_regex: str | None = None,
    filenames: Sequence[str] = CONFIG_FILENAMES,
    id_field: str = ID_FIELD,
) -> ValidationReport:
    """Check that project ids are present, well-formed and unique.

    Every directory is checked so the report lists all invalid ids. Duplicates
    are only looked for once every id is individually valid.

    Raises:
        InvalidIdPatternError: if `id_pattern_regex` does not compile.
    """
    pattern = _compile_pattern(id_pattern_regex)
    messages: list[str] = []
    ids_valid = True
    for path, project_id in path_ids.items():
        if _is_valid_id(project_id, pattern):
            continue
        ids_valid = False
        messages.append(
            _invalid_id_message(path, project_id, id_pattern_regex, filenames, id_field)
        )

    if not ids_valid:
        return ValidationReport(messages=messages, valid=False)

    duplicates = _duplicate_messages(path_ids)
    if duplicates:
        return ValidationReport(messages=messages + duplicates, valid=False)

    return ValidationReport(messages=messages, valid=True)
