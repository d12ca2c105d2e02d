"""Public contracts for hsscaffold."""

from hsscaffold.core.contracts.confirm import Confirm
from hsscaffold.core.contracts.exceptions import (
    ConfigError,
    DirectoryCreateError,
    HeaderWriteError,
    HsScaffoldError,
    ScaffoldError,
)
from hsscaffold.core.contracts.scaffold import (
    HASKELL_EXTENSION,
    DirectoryGroup,
    ScaffoldConfig,
    ScaffoldOutcome,
    ScaffoldRequest,
    ScaffoldResult,
    ScaffoldStatus,
)

__all__ = [
    "HASKELL_EXTENSION",
    "Confirm",
    "ConfigError",
    "DirectoryCreateError",
    "DirectoryGroup",
    "HeaderWriteError",
    "HsScaffoldError",
    "ScaffoldConfig",
    "ScaffoldError",
    "ScaffoldOutcome",
    "ScaffoldRequest",
    "ScaffoldResult",
    "ScaffoldStatus",
]
