"""Build the mapping of project directories to their project ids."""

from collections.abc import Sequence

from monorepo_strategy.project_config import CONFIG_FILENAMES, ID_FIELD, get_project_id

PathIds = dict[str, str | None]


def get_ids_from_paths(
    paths: Sequence[str],
    filenames: Sequence[str] = CONFIG_FILENAMES,
    id_field: str = ID_FIELD,
) -> PathIds:
    """Read the project id of every path; paths without one map to None."""
    return {p: get_project_id(p, filenames, id_field) for p in paths}
