"""Shared CLI formatting helpers."""

from __future__ import annotations

from hsscaffold.core.contracts.scaffold import ScaffoldResult, ScaffoldStatus

_STATUS_MARKS = {
    ScaffoldStatus.WRITTEN: "+",
    ScaffoldStatus.DRY_RUN: "~",
    ScaffoldStatus.SKIPPED: "=",
    ScaffoldStatus.FAILED: "!",
}


def format_file_count(count: int) -> str:
    return f"{count} file{'s' if count != 1 else ''}"


def format_scaffold_summary(result: ScaffoldResult) -> str:
    mode = "dry-run" if result.dry_run else "apply"
    lines = [
        "",
        f"hsscaffold - scaffold complete ({mode})",
        "",
    ]
    if result.dry_run:
        lines.append(f"  Planned:   {format_file_count(len(result.planned))}")
    else:
        lines.append(f"  Written:   {format_file_count(len(result.written))}")
    lines.append(f"  Skipped:   {format_file_count(len(result.skipped))}")
    if result.failed:
        lines.append(f"  Failed:    {format_file_count(len(result.failed))}")

    if result.outcomes:
        lines.append("")
    for outcome in result.outcomes:
        line = f"  {_STATUS_MARKS[outcome.status]} {outcome.path} (module {outcome.module})"
        if outcome.error:
            line += f": {outcome.error}"
        lines.append(line)

    if result.dry_run:
        lines.append("")
        lines.append("  [dry-run] No changes were made")

    lines.append("")
    return "\n".join(lines)
