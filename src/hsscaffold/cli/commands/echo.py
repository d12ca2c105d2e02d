"""Echo command handler."""

from __future__ import annotations

import argparse


def run_echo(args: argparse.Namespace) -> int:
    import hsscaffold.cli as cli

    cli.echo_messages(args.messages)
    return 0


__all__ = ["run_echo"]
