"""Module header rendering and writing."""

from __future__ import annotations

import logging
from pathlib import Path, PurePath

from hsscaffold.core.contracts.exceptions import HeaderWriteError

logger = logging.getLogger(__name__)

_HEADER_TEMPLATE = "module {name} where\n"


def module_name(path: str | PurePath) -> str:
    """Bare module identifier: the file's base name without its extension."""
    return PurePath(path).stem


def render_header(name: str) -> str:
    return _HEADER_TEMPLATE.format(name=name)


def write_header(path: str | Path) -> str:
    """Replace the whole content of *path* with its module header.

    Always overwrites; callers gate this with the overwrite guard. Returns the
    module name written.
    """
    target = Path(path)
    name = module_name(target)
    try:
        target.write_text(render_header(name), encoding="utf-8", newline="\n")
    except OSError as exc:
        raise HeaderWriteError(f"failed writing module header to {target}: {exc}", path=target) from exc
    logger.debug("Wrote header for module %s to %s", name, target)
    return name
