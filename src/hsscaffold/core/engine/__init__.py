"""Scaffold engine."""

from hsscaffold.core.engine.progress import NullScaffoldProgress, ScaffoldProgress
from hsscaffold.core.engine.scaffolder import scaffold_batch, scaffold_file, scaffold_project, target_path

__all__ = [
    "NullScaffoldProgress",
    "ScaffoldProgress",
    "scaffold_batch",
    "scaffold_file",
    "scaffold_project",
    "target_path",
]
