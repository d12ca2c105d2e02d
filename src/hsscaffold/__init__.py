"""Public API surface for hsscaffold."""

__version__ = "0.1.0"

from hsscaffold.core.config import default_config, load_config, write_config
from hsscaffold.core.contracts import (
    HASKELL_EXTENSION,
    Confirm,
    ConfigError,
    DirectoryCreateError,
    DirectoryGroup,
    HeaderWriteError,
    HsScaffoldError,
    ScaffoldConfig,
    ScaffoldError,
    ScaffoldOutcome,
    ScaffoldRequest,
    ScaffoldResult,
    ScaffoldStatus,
)
from hsscaffold.core.echo import echo_messages
from hsscaffold.core.engine import (
    NullScaffoldProgress,
    ScaffoldProgress,
    scaffold_batch,
    scaffold_file,
    scaffold_project,
    target_path,
)
from hsscaffold.core.fs import ensure_directory, module_name, render_header, resolve_path, write_header
from hsscaffold.core.guard import GuardDecision, OverwriteGuard

__all__ = [
    "HASKELL_EXTENSION",
    "Confirm",
    "ConfigError",
    "DirectoryCreateError",
    "DirectoryGroup",
    "GuardDecision",
    "HeaderWriteError",
    "HsScaffoldError",
    "NullScaffoldProgress",
    "OverwriteGuard",
    "ScaffoldConfig",
    "ScaffoldError",
    "ScaffoldOutcome",
    "ScaffoldProgress",
    "ScaffoldRequest",
    "ScaffoldResult",
    "ScaffoldStatus",
    "__version__",
    "default_config",
    "echo_messages",
    "ensure_directory",
    "load_config",
    "module_name",
    "render_header",
    "resolve_path",
    "scaffold_batch",
    "scaffold_file",
    "scaffold_project",
    "target_path",
    "write_config",
    "write_header",
]
