"""Filesystem primitives used by the scaffolder."""

from hsscaffold.core.fs.directories import ensure_directory
from hsscaffold.core.fs.header import module_name, render_header, write_header
from hsscaffold.core.fs.paths import resolve_path

__all__ = ["ensure_directory", "module_name", "render_header", "resolve_path", "write_header"]
