"""Init command handler."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path


def run_init(args: argparse.Namespace) -> int:
    """Write the default config file, asking before replacing an existing one."""
    import hsscaffold.cli as cli

    output = Path(args.output)

    if output.exists():
        if args.defaults:
            print(f"error: {output} already exists (use a different --output path)", file=sys.stderr)
            return 2
        try:
            if not cli.questionary_confirm(f"{output} already exists. Overwrite?"):
                print("Aborted.")
                return 2
        except KeyboardInterrupt:
            print("\nAborted.")
            return 2

    try:
        cli.write_config(cli.default_config(), output)
    except cli.ConfigError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 3
    print(f"Config written to {output}")
    print("\nEdit the module lists if needed, then run:")
    print(f"  hsscaffold new --config {output} --dry-run")
    return 0


__all__ = ["run_init"]
