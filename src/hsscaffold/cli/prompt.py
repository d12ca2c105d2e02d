"""Terminal confirmation backed by questionary."""

from __future__ import annotations

import questionary


def questionary_confirm(question: str) -> bool:
    """Ask *question*, defaulting to no. A cancelled prompt aborts the command."""
    answer = questionary.confirm(question, default=False).ask()
    if answer is None:
        raise KeyboardInterrupt
    return bool(answer)
