"""Tests for the command line entry point."""

import io
import json
from collections.abc import Callable
from pathlib import Path

import pytest

from monorepo_strategy.cli import main, split_list


@pytest.fixture
def papers(repo: Callable[[dict[str, str]], Path]) -> Path:
    """Fixture with two papers and a strategy config file."""
    return repo(
        {
            "papers/paper-1/myst.yml": "project:\n  id: paper-1\n",
            "papers/paper-2/myst.yml": "project:\n  id: paper-2\n",
            "strategy.yml": (
                "path: papers/*\n"
                "monorepo: true\n"
                "id_pattern_regex: '^([a-z0-9-]+)$'\n"
                "preview_label: [preview]\n"
            ),
        }
    )


def test_split_list() -> None:
    """Verify blank entries are dropped."""
    assert split_list("a, b,,c,") == ["a", "b", "c"]
    assert split_list("") == []
    assert split_list(None) == []
    assert split_list("x\n\ny\n", "\n") == ["x", "y"]


def test_main_prints_outputs(papers: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Verify a successful run prints the step outputs."""
    code = main(
        [
            "--config",
            "strategy.yml",
            "--changed-files",
            "papers/paper-1/index.md",
            "--labels",
            "preview",
        ]
    )
    assert code == 0
    outputs = json.loads(capsys.readouterr().out)
    assert outputs["preview"] is True
    assert outputs["check"] is True
    assert json.loads(outputs["matrix"]) == {
        "include": [
            {"id": "paper-1", "working-directory": "papers/paper-1", "draft": True}
        ]
    }


def test_main_reads_changed_files_from_stdin(
    papers: Path,
    capsys: pytest.CaptureFixture[str],
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """Verify changed files can be piped in one per line."""
    monkeypatch.setattr(
        "sys.stdin", io.StringIO("papers/paper-1/a.md\npapers/paper-2/b.md\n")
    )
    code = main(["--config", "strategy.yml", "--changed-files-file", "-"])
    assert code == 0
    matrix = json.loads(json.loads(capsys.readouterr().out)["matrix"])
    assert [job["id"] for job in matrix["include"]] == ["paper-1", "paper-2"]


def test_main_cli_overrides_config(
    papers: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """Verify command line flags win over the config file."""
    code = main(
        [
            "--config",
            "strategy.yml",
            "--no-monorepo",
            "--changed-files",
            "papers/paper-1/index.md",
        ]
    )
    assert code == 1
    assert "not a monorepo" in capsys.readouterr().err


def test_main_reports_failures(
    papers: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """Verify failures go to stderr with a non-zero exit code."""
    code = main(
        [
            "--config",
            "strategy.yml",
            "--enforce-single-folder",
            "true",
            "--changed-files",
            "papers/paper-1/index.md,LICENSE",
        ]
    )
    assert code == 1
    err = capsys.readouterr().err
    assert "There are changes in:\n  - LICENSE" in err


def test_main_unsupported_pattern(papers: Path) -> None:
    """Verify an unsupported glob exits with its message."""
    with pytest.raises(SystemExit, match="only simple glob patterns"):
        main(["--path", "papers/**", "--monorepo"])


def test_main_can_switch_off_include_unchanged(
    papers: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """Verify `--no-include-unchanged` overrides the config file."""
    with Path("strategy.yml").open("a", encoding="utf-8") as f:
        f.write("include_unchanged: true\n")
    base = ["--config", "strategy.yml", "--changed-files", "papers/paper-2/a.md"]

    assert main(base) == 0
    matrix = json.loads(json.loads(capsys.readouterr().out)["matrix"])
    assert [job["id"] for job in matrix["include"]] == ["paper-1", "paper-2"]

    assert main([*base, "--no-include-unchanged"]) == 0
    matrix = json.loads(json.loads(capsys.readouterr().out)["matrix"])
    assert [job["id"] for job in matrix["include"]] == ["paper-2"]
