"""New-project scaffold command."""

from __future__ import annotations

import argparse
import sys
from typing import Any

from pydantic import ValidationError

from hsscaffold.cli.progress.rich import RichScaffoldProgress
from hsscaffold.core.contracts.exceptions import ConfigError
from hsscaffold.core.contracts.scaffold import ScaffoldConfig, ScaffoldResult


def _group_override(base: dict[str, Any], names: list[str] | None, directory: str | None) -> dict[str, Any]:
    group = dict(base)
    if names is not None:
        group["file_names"] = names
    if directory is not None:
        group["directory"] = directory
    return group


def config_from_args(args: argparse.Namespace) -> ScaffoldConfig:
    """Layer command-line options over the config file (or the defaults)."""
    import hsscaffold.cli as cli

    base = cli.load_config(args.config) if args.config else cli.default_config()
    raw = base.model_dump(mode="json")
    raw["app"] = _group_override(raw["app"], args.app, args.app_dir)
    raw["library"] = _group_override(raw["library"], args.lib, args.lib_dir)
    raw["test"] = _group_override(raw["test"], args.test, args.test_dir)
    raw["force"] = base.force or args.force
    raw["no_interactive"] = base.no_interactive or args.no_interactive
    raw["dry_run"] = base.dry_run or args.dry_run

    try:
        return ScaffoldConfig.model_validate(raw)
    except ValidationError as exc:
        raise ConfigError(f"invalid options: {exc}") from exc


def _can_prompt(config: ScaffoldConfig) -> bool:
    return not (config.force or config.no_interactive)


def run_new(args: argparse.Namespace) -> ScaffoldResult:
    import hsscaffold.cli as cli

    config = config_from_args(args)

    if not args.verbose and not _can_prompt(config) and sys.stderr.isatty():
        with RichScaffoldProgress() as progress:
            result = cli.scaffold_project(config, progress=progress)
    else:
        result = cli.scaffold_project(config, confirm=cli.questionary_confirm)

    print(cli.format_scaffold_summary(result))
    return result


__all__ = ["config_from_args", "run_new"]
