"""Per-file, per-directory and whole-project scaffolding."""

from __future__ import annotations

import logging
import os
from collections.abc import Sequence
from pathlib import Path

from hsscaffold.core.contracts.confirm import Confirm
from hsscaffold.core.contracts.exceptions import ScaffoldError
from hsscaffold.core.contracts.scaffold import (
    HASKELL_EXTENSION,
    ScaffoldConfig,
    ScaffoldOutcome,
    ScaffoldRequest,
    ScaffoldResult,
    ScaffoldStatus,
)
from hsscaffold.core.engine.progress import NullScaffoldProgress, ScaffoldProgress
from hsscaffold.core.fs import ensure_directory, module_name, resolve_path, write_header
from hsscaffold.core.guard import OverwriteGuard

logger = logging.getLogger(__name__)


def with_extension(file_name: str) -> str:
    if file_name.endswith(HASKELL_EXTENSION):
        return file_name
    return file_name + HASKELL_EXTENSION


def target_path(file_name: str, directory: str = "") -> str:
    """Path of the source file for *file_name*, relative to *directory* when given."""
    name = with_extension(file_name)
    if directory:
        return os.path.join(directory, name)
    return name


def scaffold_file(request: ScaffoldRequest, *, directory: str = "", confirm: Confirm | None = None) -> ScaffoldOutcome:
    """Write the module header for one file, subject to the overwrite guard.

    Raises :class:`ScaffoldError` when the parent directory or the file
    cannot be written.
    """
    path = resolve_path(target_path(request.file_name, directory))
    parent = os.path.dirname(path)
    name = module_name(path)

    guard = OverwriteGuard(force=request.force, no_interactive=request.no_interactive, confirm=confirm)
    if not guard.allows(path):
        return ScaffoldOutcome(path=Path(path), module=name, status=ScaffoldStatus.SKIPPED)

    ensure_directory(parent, dry_run=request.dry_run)
    if request.dry_run:
        logger.info("[dry-run] write header: %s (module %s)", path, name)
        return ScaffoldOutcome(path=Path(path), module=name, status=ScaffoldStatus.DRY_RUN)

    write_header(path)
    logger.info("Scaffolded %s", path)
    return ScaffoldOutcome(path=Path(path), module=name, status=ScaffoldStatus.WRITTEN)


def scaffold_batch(
    directory: str,
    file_names: Sequence[str],
    *,
    force: bool = False,
    no_interactive: bool = False,
    dry_run: bool = False,
    confirm: Confirm | None = None,
    progress: ScaffoldProgress | None = None,
    phase: str | None = None,
) -> ScaffoldResult:
    """Scaffold each of *file_names* into *directory*, in order.

    A failure for one file is recorded in the result and does not stop the
    remaining files.
    """
    progress = progress or NullScaffoldProgress()
    phase = phase or directory
    outcomes: list[ScaffoldOutcome] = []

    progress.phase_start(phase, total=len(file_names))
    for file_name in file_names:
        request = ScaffoldRequest(file_name=file_name, force=force, no_interactive=no_interactive, dry_run=dry_run)
        try:
            outcomes.append(scaffold_file(request, directory=directory, confirm=confirm))
        except ScaffoldError as exc:
            logger.error("%s", exc)
            progress.phase_error(phase, exc)
            outcomes.append(
                ScaffoldOutcome(
                    path=Path(target_path(file_name, directory)),
                    module=module_name(with_extension(file_name)),
                    status=ScaffoldStatus.FAILED,
                    error=str(exc),
                )
            )
        progress.item_done(phase)
    progress.phase_done(phase)

    return ScaffoldResult(outcomes=tuple(outcomes), dry_run=dry_run)


def scaffold_project(
    config: ScaffoldConfig,
    *,
    confirm: Confirm | None = None,
    progress: ScaffoldProgress | None = None,
) -> ScaffoldResult:
    """Scaffold the app, library and test groups of *config* with its shared flags."""
    result = ScaffoldResult(dry_run=config.dry_run)
    if config.dry_run:
        logger.info("[dry-run] No changes will be made")

    for label, group in config.groups():
        logger.debug("Scaffolding %s group into %s", label, group.directory)
        result = result.merge(
            scaffold_batch(
                group.directory,
                group.file_names,
                force=config.force,
                no_interactive=config.no_interactive,
                dry_run=config.dry_run,
                confirm=confirm,
                progress=progress,
                phase=label,
            )
        )
    return result
