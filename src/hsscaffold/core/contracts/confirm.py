"""Contracts for overwrite confirmation."""

from __future__ import annotations

from typing import Protocol


class Confirm(Protocol):
    """Ask the user a yes/no *question*; return ``True`` only on an explicit yes."""

    def __call__(self, question: str) -> bool: ...
