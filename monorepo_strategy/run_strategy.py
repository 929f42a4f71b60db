"""Orchestration logic for deciding which projects a pipeline run covers."""

import logging
from collections.abc import Sequence

from monorepo_strategy.ensure_unique_and_valid_ids import ensure_unique_and_valid_ids
from monorepo_strategy.filter_paths import filter_paths_and_identify_unknown_changes
from monorepo_strategy.get_ids_from_paths import get_ids_from_paths
from monorepo_strategy.resolve_gate import resolve_gate
from monorepo_strategy.resolve_paths import resolve_paths
from monorepo_strategy.strategy_options import StrategyOptions
from monorepo_strategy.strategy_result import StrategyResult

logger = logging.getLogger(__name__)


def _bullets(items: Sequence[str]) -> str:
    return "\n".join(f"  - {item}" for item in items)


def _single_folder_errors(
    options: StrategyOptions, result: StrategyResult
) -> list[str]:
    """Report changes that spread beyond a single project folder."""
    errors = []
    header = (
        "The strategy is set to fail when changes are made outside of the single "
        f"folder (`enforce-single-folder: {options.enforce_single_folder}`)."
    )
    if len(result.filtered_paths) > 1:
        errors.append(
            f"{header}\nThere are changes in multiple folders:\n"
            f"{_bullets(result.filtered_paths)}"
        )
    if result.unknown_changed_files:
        errors.append(
            f"{header}\nThere are changes in:\n{_bullets(result.unknown_changed_files)}"
        )
    return errors


def run_strategy(
    options: StrategyOptions,
    changed_files: Sequence[str],
    pr_labels: Sequence[str] = (),
) -> StrategyResult:
    """Execute the full strategy.

    Resolves the project directories, attributes the changed files to them,
    validates project ids and resolves the preview/submit/single-folder gates.
    Every failed check is collected into `errors` rather than stopping at the
    first one.

    Raises:
        StrategyConfigError: for an unsupported path glob or id pattern.
    """
    # Literal and glob segments may overlap; keep the first occurrence
    paths = list(dict.fromkeys(resolve_paths(options.base_dir, options.path)))

    result = StrategyResult(
        paths=paths,
        preview=resolve_gate(options.preview_label, pr_labels),
        submit=resolve_gate(options.submit_label, pr_labels),
        enforce_single_folder=resolve_gate(options.enforce_single_folder, pr_labels),
    )

    if not options.monorepo and len(paths) != 1:
        result.errors.append(
            "Cannot include multiple paths if the strategy is not a monorepo.\n\n"
            "Either set `monorepo: true` or set a single path "
            "(without glob-like patterns)."
        )

    result.path_ids = get_ids_from_paths(
        paths, options.config_filenames, options.id_field
    )
    attribution = filter_paths_and_identify_unknown_changes(
        paths, changed_files, include_unchanged=options.include_unchanged
    )
    result.filtered_paths = attribution.filtered_paths
    result.unknown_changed_files = attribution.unknown_changed_files

    logger.info(
        "Strategy inputs: monorepo=%s paths=%s path_ids=%s changed_files=%s "
        "filtered_paths=%s unknown_changed_files=%s pr_labels=%s "
        "preview=%s submit=%s enforce_single_folder=%s",
        options.monorepo,
        paths,
        result.path_ids,
        list(changed_files),
        result.filtered_paths,
        result.unknown_changed_files,
        list(pr_labels),
        result.preview,
        result.submit,
        result.enforce_single_folder,
    )

    report = ensure_unique_and_valid_ids(
        result.path_ids,
        options.id_pattern_regex,
        options.config_filenames,
        options.id_field,
    )
    if not report.valid:
        result.errors.append(
            "The project IDs are not valid or are not unique, check the error logs "
            "for more information.\n\n" + "\n".join(report.messages)
        )

    if result.enforce_single_folder:
        result.errors.extend(_single_folder_errors(options, result))

    return result
