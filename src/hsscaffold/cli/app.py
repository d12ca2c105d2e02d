"""CLI app entrypoint and error mapping."""

from __future__ import annotations

import sys

from hsscaffold import ConfigError, ScaffoldError


def main(argv: list[str] | None = None) -> int:
    import hsscaffold.cli as cli

    parser = cli.build_parser()
    args = parser.parse_args(argv)

    if args.command == "echo":
        return cli._run_echo(args)
    if args.command == "init":
        return cli._run_init(args)

    if args.verbose:
        cli.logging.basicConfig(level=cli.logging.DEBUG, format="%(name)s %(message)s", stream=sys.stderr)

    try:
        if args.command == "new":
            result = cli._run_new(args)
        else:
            result = cli._run_file(args)
        return 0 if result.ok else 5
    except KeyboardInterrupt:
        print("\nAborted.")
        return 2
    except ConfigError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 3
    except ScaffoldError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 5
    except Exception as exc:  # pragma: no cover - defensive fallback
        print(f"error: {exc}", file=sys.stderr)
        return 1


__all__ = ["main"]
