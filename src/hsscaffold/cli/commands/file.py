"""Single-directory scaffold command."""

from __future__ import annotations

import argparse

from pydantic import ValidationError

from hsscaffold.core.contracts.exceptions import ConfigError
from hsscaffold.core.contracts.scaffold import ScaffoldRequest, ScaffoldResult


def _check_names(names: list[str]) -> None:
    """Validate every name before the first file is touched."""
    for name in names:
        try:
            ScaffoldRequest(file_name=name)
        except ValidationError as exc:
            raise ConfigError(f"invalid options: {exc}") from exc


def run_file(args: argparse.Namespace) -> ScaffoldResult:
    import hsscaffold.cli as cli

    _check_names(args.names)
    result = cli.scaffold_batch(
        args.dir,
        args.names,
        force=args.force,
        no_interactive=args.no_interactive,
        dry_run=args.dry_run,
        confirm=cli.questionary_confirm,
    )
    print(cli.format_scaffold_summary(result))
    return result


__all__ = ["run_file"]
