"""Command line entry point for the monorepo strategy."""

import argparse
import json
import logging
import sys
from dataclasses import replace
from pathlib import Path

import yaml

from monorepo_strategy.errors import StrategyConfigError
from monorepo_strategy.load_config import load_config
from monorepo_strategy.run_strategy import run_strategy
from monorepo_strategy.strategy_options import StrategyOptions


def split_list(value: str | None, sep: str = ",") -> list[str]:
    """Split a delimited input, dropping blank entries."""
    if not value:
        return []
    return [item.strip() for item in value.split(sep) if item.strip()]


def read_changed_files(args: argparse.Namespace) -> list[str]:
    """Collect changed files from `--changed-files` and `--changed-files-file`."""
    changed = split_list(args.changed_files)
    if args.changed_files_file:
        if args.changed_files_file == "-":
            text = sys.stdin.read()
        else:
            text = Path(args.changed_files_file).read_text(encoding="utf-8")
        changed.extend(split_list(text, "\n"))
    return changed


def build_options(args: argparse.Namespace) -> StrategyOptions:
    """Load the config file and apply command line overrides."""
    options = StrategyOptions.from_config(load_config(args.config))
    overrides = {
        key: getattr(args, key)
        for key in (
            "path",
            "base_dir",
            "monorepo",
            "id_pattern_regex",
            "preview_label",
            "submit_label",
            "enforce_single_folder",
            "include_unchanged",
        )
        if getattr(args, key) is not None
    }
    return replace(options, **overrides)


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    ap = argparse.ArgumentParser(
        description=(
            "Decide which project directories of a monorepo a CI run covers, "
            "validate their project ids and resolve the optional pipeline stages."
        ),
    )
    ap.add_argument("--config", help="Path to a strategy configuration YAML file")
    ap.add_argument(
        "--path",
        help="Comma-separated directories or simple globs (`dir/*`, `*`)",
    )
    ap.add_argument("--base-dir", help="Directory the paths are relative to")
    ap.add_argument(
        "--monorepo",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Allow more than one project directory",
    )
    ap.add_argument(
        "--id-pattern-regex",
        help="Regular expression every project id must match",
    )
    ap.add_argument(
        "--preview-label",
        help="`true`, `false` or labels that enable the preview stage",
    )
    ap.add_argument(
        "--submit-label",
        help="`true`, `false` or labels that enable the submit stage",
    )
    ap.add_argument(
        "--enforce-single-folder",
        help="`true`, `false` or labels that restrict changes to one folder",
    )
    ap.add_argument(
        "--include-unchanged",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Build every project directory, not only the changed ones",
    )
    ap.add_argument(
        "--changed-files",
        help="Comma-separated list of changed files",
    )
    ap.add_argument(
        "--changed-files-file",
        help="File listing changed files one per line (`-` for stdin)",
    )
    ap.add_argument(
        "--labels",
        help="Comma-separated labels applied to the change request",
    )
    ap.add_argument("--verbose", action="store_true", help="Log strategy inputs")
    return ap


def main(argv: list[str] | None = None) -> int:
    """Run the strategy and print its outputs as JSON."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        options = build_options(args)
        result = run_strategy(
            options, read_changed_files(args), split_list(args.labels)
        )
    except (StrategyConfigError, OSError, yaml.YAMLError) as exc:
        raise SystemExit(str(exc)) from exc

    if not result.ok:
        print("\n\n".join(result.errors), file=sys.stderr)
        return 1

    print(json.dumps(result.outputs(), indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
