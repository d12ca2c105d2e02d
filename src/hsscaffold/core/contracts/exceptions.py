"""Exception hierarchy for hsscaffold."""

from __future__ import annotations

from pathlib import Path


class HsScaffoldError(Exception):
    """Base exception for all hsscaffold errors."""


class ConfigError(HsScaffoldError):
    """Configuration loading or validation failure."""


class ScaffoldError(HsScaffoldError):
    """A single file could not be scaffolded."""

    def __init__(self, message: str, *, path: Path | str | None = None) -> None:
        super().__init__(message)
        self.path = Path(path) if path is not None else None


class DirectoryCreateError(ScaffoldError):
    """The parent directory of a scaffolded file could not be created."""


class HeaderWriteError(ScaffoldError):
    """The module header could not be written."""
