"""Config loading and writing."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from hsscaffold.core.contracts.exceptions import ConfigError
from hsscaffold.core.contracts.scaffold import DirectoryGroup, ScaffoldConfig


def default_config() -> ScaffoldConfig:
    """The stock layout: ``app/Main.hs``, ``src-lib/Lib.hs`` and ``test/Main.hs``."""
    return ScaffoldConfig()


def _resolve_directory(group: DirectoryGroup, *, base_dir: Path) -> DirectoryGroup:
    directory = Path(group.directory)
    if directory.is_absolute():
        return group
    return group.model_copy(update={"directory": str((base_dir / directory).resolve())})


def load_config(path: str | Path) -> ScaffoldConfig:
    """Load a config file; relative group directories are taken from the file's own directory."""
    config_path = Path(path).expanduser().resolve()
    config_dir = config_path.parent

    try:
        raw_payload: Any = json.loads(config_path.read_text(encoding="utf-8"))
        parsed = ScaffoldConfig.model_validate(raw_payload)
    except OSError as exc:
        raise ConfigError(f"failed reading config file: {config_path}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigError(f"invalid JSON in config file: {config_path}") from exc
    except ValidationError as exc:
        raise ConfigError(f"invalid config: {exc}") from exc

    return parsed.model_copy(
        update={
            "app": _resolve_directory(parsed.app, base_dir=config_dir),
            "library": _resolve_directory(parsed.library, base_dir=config_dir),
            "test": _resolve_directory(parsed.test, base_dir=config_dir),
        }
    )


def write_config(config: ScaffoldConfig, path: Path) -> None:
    """Write *config* to a JSON file."""
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(config.model_dump(mode="json"), indent=2) + "\n", encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"failed writing config file: {path}: {exc}") from exc
