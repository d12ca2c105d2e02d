"""Directory creation for scaffolded files."""

from __future__ import annotations

import logging
from pathlib import Path

from hsscaffold.core.contracts.exceptions import DirectoryCreateError

logger = logging.getLogger(__name__)


def ensure_directory(path: str, *, dry_run: bool = False) -> bool:
    """Create *path* (and its parents) unless it is empty or already exists.

    Returns ``True`` when the directory was created, or would have been in
    dry-run mode. Raises :class:`DirectoryCreateError` when creation fails.
    """
    if not path:
        return False
    directory = Path(path)
    if directory.exists():
        return False

    if dry_run:
        logger.info("[dry-run] create directory: %s", directory)
        return True

    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise DirectoryCreateError(f"failed creating directory {directory}: {exc}", path=directory) from exc
    logger.debug("Created directory %s", directory)
    return True
