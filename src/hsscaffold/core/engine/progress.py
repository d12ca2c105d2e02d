"""Progress reporting protocol for project scaffolds.

The scaffolder emits one phase per directory group; consumers (e.g. the CLI's
Rich progress bar) implement ``ScaffoldProgress`` to render feedback.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class ScaffoldProgress(ABC):
    """Observer interface for scaffold progress events."""

    @abstractmethod
    def phase_start(self, phase: str, total: int | None = None) -> None:
        """A directory group is starting. *total* is the number of files in it."""
        ...  # pragma: no cover

    @abstractmethod
    def item_done(self, phase: str) -> None:
        """One file within *phase* has been handled."""
        ...  # pragma: no cover

    @abstractmethod
    def phase_done(self, phase: str) -> None:
        """The *phase* has finished."""
        ...  # pragma: no cover

    @abstractmethod
    def phase_error(self, phase: str, error: BaseException) -> None:
        """The *phase* was interrupted by *error*."""
        ...  # pragma: no cover


class NullScaffoldProgress(ScaffoldProgress):
    """No-op implementation used when no progress display is requested."""

    def phase_start(self, phase: str, total: int | None = None) -> None:
        pass

    def item_done(self, phase: str) -> None:
        pass

    def phase_done(self, phase: str) -> None:
        pass

    def phase_error(self, phase: str, error: BaseException) -> None:
        pass
