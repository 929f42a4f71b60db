"""Tests for reading project ids from per-directory config files."""

from collections.abc import Callable
from pathlib import Path

import pytest

from monorepo_strategy.get_ids_from_paths import get_ids_from_paths
from monorepo_strategy.project_config import (
    find_config_file,
    get_field,
    load_project_config,
)
from monorepo_strategy.resolve_paths import resolve_paths

Repo = Callable[[dict[str, str]], Path]


def test_get_ids_from_paths(repo: Repo) -> None:
    """Verify ids are read from either supported config file."""
    repo(
        {
            "papers/paper-1/curvenote.yml": "project:\n  id: project-1",
            "papers/paper-2/myst.yml": "project:\n  id: project-2",
        }
    )
    paths = resolve_paths(".", "papers/*")
    assert paths == ["papers/paper-1", "papers/paper-2"]
    assert get_ids_from_paths(paths) == {
        "papers/paper-1": "project-1",
        "papers/paper-2": "project-2",
    }


def test_get_ids_without_config(repo: Repo) -> None:
    """Verify directories without a config file map to None."""
    repo({"papers/paper-1/index.md": ""})
    paths = resolve_paths(".", "papers/*")
    assert get_ids_from_paths(paths) == {"papers/paper-1": None}


def test_first_config_file_wins(repo: Repo) -> None:
    """Verify myst.yml takes precedence over curvenote.yml."""
    repo(
        {
            "paper/myst.yml": "project:\n  id: from-myst",
            "paper/curvenote.yml": "project:\n  id: from-curvenote",
        }
    )
    assert find_config_file("paper") == Path("paper/myst.yml")
    assert get_ids_from_paths(["paper"]) == {"paper": "from-myst"}
    assert get_ids_from_paths(["paper"], filenames=["curvenote.yml"]) == {
        "paper": "from-curvenote"
    }


def test_unparseable_config(repo: Repo, caplog: pytest.LogCaptureFixture) -> None:
    """Verify a broken config file is logged and treated as having no id."""
    repo({"paper/myst.yml": "project: [unclosed"})
    assert load_project_config("paper") is None
    assert get_ids_from_paths(["paper"]) == {"paper": None}
    assert "Problem loading config file" in caplog.text


@pytest.mark.parametrize(
    "content",
    [
        "",
        "- a\n- b\n",
        "project: 3\n",
        "project:\n  title: x\n",
        "project:\n  id: 42\n",
    ],
)
def test_missing_or_unusable_id(repo: Repo, content: str) -> None:
    """Verify missing, nested-missing and non-string ids become None."""
    repo({"paper/myst.yml": content})
    assert get_ids_from_paths(["paper"]) == {"paper": None}


def test_custom_id_field(repo: Repo) -> None:
    """Verify the id can be read from another nested key."""
    repo({"paper/myst.yml": "site:\n  meta:\n    slug: my-site\n"})
    assert get_ids_from_paths(["paper"], id_field="site.meta.slug") == {
        "paper": "my-site"
    }


def test_get_field() -> None:
    """Verify nested lookups stop at non-mapping values."""
    data = {"project": {"id": "x"}, "flat": "y"}
    assert get_field(data, "project.id") == "x"
    assert get_field(data, "flat.id") is None
    assert get_field(data, "missing.id") is None
