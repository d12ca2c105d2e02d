"""Scaffold request, configuration and result contracts."""

from __future__ import annotations

from enum import Enum
from pathlib import Path, PurePath

from pydantic import BaseModel, Field, field_validator

HASKELL_EXTENSION = ".hs"


def check_file_name(name: str) -> str:
    """Reject names that cannot yield a module identifier inside the target directory."""
    if not name.strip() or name == HASKELL_EXTENSION:
        raise ValueError("file names must be non-empty strings")
    if PurePath(name).is_absolute():
        raise ValueError(f"file name must be relative to its directory: {name}")
    return name


class ScaffoldRequest(BaseModel):
    """One file to scaffold, plus the flags that govern overwrite and mutation."""

    file_name: str
    force: bool = False
    no_interactive: bool = False
    dry_run: bool = False

    model_config = {"frozen": True}

    @field_validator("file_name")
    @classmethod
    def validate_file_name(cls, value: str) -> str:
        return check_file_name(value)


class DirectoryGroup(BaseModel):
    """A target directory and the ordered module files scaffolded into it."""

    directory: str
    file_names: tuple[str, ...]

    model_config = {"frozen": True}

    @field_validator("directory")
    @classmethod
    def validate_directory(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("directory must be a non-empty string")
        return value

    @field_validator("file_names")
    @classmethod
    def validate_file_names(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        for name in value:
            check_file_name(name)
        return value


def _app_group() -> DirectoryGroup:
    return DirectoryGroup(directory="app", file_names=("Main",))


def _library_group() -> DirectoryGroup:
    return DirectoryGroup(directory="src-lib", file_names=("Lib",))


def _test_group() -> DirectoryGroup:
    return DirectoryGroup(directory="test", file_names=("Main",))


class ScaffoldConfig(BaseModel):
    """Top-level configuration for a project scaffold run.

    Attributes:
        app: Executable sources. Defaults to ``app/Main.hs``.
        library: Library sources. Defaults to ``src-lib/Lib.hs``.
        test: Test-suite sources. Defaults to ``test/Main.hs``.
        force: Overwrite existing files without asking.
        no_interactive: Never prompt; existing files are skipped unless *force*.
        dry_run: Log what would happen without touching the filesystem.
    """

    app: DirectoryGroup = Field(default_factory=_app_group)
    library: DirectoryGroup = Field(default_factory=_library_group)
    test: DirectoryGroup = Field(default_factory=_test_group)
    force: bool = False
    no_interactive: bool = False
    dry_run: bool = False

    model_config = {"frozen": True}

    def groups(self) -> tuple[tuple[str, DirectoryGroup], ...]:
        """Return ``(label, group)`` pairs in scaffold order: app, library, test."""
        return (("app", self.app), ("library", self.library), ("test", self.test))


class ScaffoldStatus(str, Enum):
    WRITTEN = "written"
    SKIPPED = "skipped"
    DRY_RUN = "dry-run"
    FAILED = "failed"


class ScaffoldOutcome(BaseModel):
    """What happened to a single scaffolded file."""

    path: Path
    module: str
    status: ScaffoldStatus
    error: str | None = None

    model_config = {"frozen": True}


class ScaffoldResult(BaseModel):
    """Aggregate outcome of a batch or project scaffold."""

    outcomes: tuple[ScaffoldOutcome, ...] = ()
    dry_run: bool = False

    model_config = {"frozen": True}

    def _with_status(self, status: ScaffoldStatus) -> list[ScaffoldOutcome]:
        return [outcome for outcome in self.outcomes if outcome.status is status]

    @property
    def written(self) -> list[ScaffoldOutcome]:
        return self._with_status(ScaffoldStatus.WRITTEN)

    @property
    def planned(self) -> list[ScaffoldOutcome]:
        return self._with_status(ScaffoldStatus.DRY_RUN)

    @property
    def skipped(self) -> list[ScaffoldOutcome]:
        return self._with_status(ScaffoldStatus.SKIPPED)

    @property
    def failed(self) -> list[ScaffoldOutcome]:
        return self._with_status(ScaffoldStatus.FAILED)

    @property
    def ok(self) -> bool:
        return not self.failed

    def merge(self, other: ScaffoldResult) -> ScaffoldResult:
        return ScaffoldResult(outcomes=self.outcomes + other.outcomes, dry_run=self.dry_run or other.dry_run)
