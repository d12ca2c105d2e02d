"""Best-effort path resolution."""

from __future__ import annotations

from pathlib import Path


def resolve_path(path: str) -> str:
    """Return the absolute form of *path* when it exists on disk.

    A path that does not exist is returned unchanged; resolution never fails
    for a missing entry.
    """
    candidate = Path(path)
    if path and candidate.exists():
        return str(candidate.resolve())
    return path
