"""CLI parser construction."""

from __future__ import annotations

import argparse
from importlib.metadata import PackageNotFoundError, version


def _package_version() -> str:
    try:
        return version("hsscaffold")
    except PackageNotFoundError:
        return "0.0.0"


def _add_mode_flags(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--force", "-f", action="store_true", help="Overwrite existing files without asking")
    parser.add_argument(
        "--no-interactive",
        action="store_true",
        help="Never prompt; existing files are skipped unless --force is given",
    )
    parser.add_argument(
        "--dry-run",
        "--what-if",
        dest="dry_run",
        action="store_true",
        help="Show what would be written without touching the filesystem",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="hsscaffold")
    parser.add_argument("--version", action="version", version=f"%(prog)s {_package_version()}")

    subparsers = parser.add_subparsers(dest="command", required=True)

    new_parser = subparsers.add_parser("new", help="Scaffold app, library and test module files")
    new_parser.add_argument("--config", default=None, help="Path to an hsscaffold.json config file")
    new_parser.add_argument("--app", nargs="+", metavar="NAME", default=None, help="App modules (default: Main)")
    new_parser.add_argument("--lib", nargs="+", metavar="NAME", default=None, help="Library modules (default: Lib)")
    new_parser.add_argument("--test", nargs="+", metavar="NAME", default=None, help="Test modules (default: Main)")
    new_parser.add_argument("--app-dir", default=None, help="App source directory (default: app)")
    new_parser.add_argument("--lib-dir", default=None, help="Library source directory (default: src-lib)")
    new_parser.add_argument("--test-dir", default=None, help="Test source directory (default: test)")
    _add_mode_flags(new_parser)

    file_parser = subparsers.add_parser("file", help="Scaffold individual module files into one directory")
    file_parser.add_argument("names", nargs="+", metavar="NAME", help="Module file names (.hs is appended)")
    file_parser.add_argument("--dir", default="", help="Target directory (default: current directory)")
    _add_mode_flags(file_parser)

    init_parser = subparsers.add_parser("init", help="Generate an hsscaffold.json config file")
    init_parser.add_argument(
        "--output",
        "-o",
        default="hsscaffold.json",
        help="Output file path (default: hsscaffold.json)",
    )
    init_parser.add_argument("--defaults", action="store_true", help="Never prompt; refuse to overwrite")

    echo_parser = subparsers.add_parser("echo", help="Print each argument on its own line")
    echo_parser.add_argument("messages", nargs="*", metavar="MESSAGE")

    return parser


__all__ = ["build_parser"]
