"""Overwrite confirmation for existing files."""

from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path

from hsscaffold.core.contracts.confirm import Confirm

logger = logging.getLogger(__name__)


class GuardDecision(str, Enum):
    ALLOW = "allow"
    DENY = "deny"
    PROMPT = "prompt"


class OverwriteGuard:
    """Decides whether a scaffold may write to a path.

    Missing files are always writable. An existing file is overwritten when
    *force* is set, skipped when *no_interactive* is set, and otherwise only
    after the injected *confirm* callback answers yes.
    """

    def __init__(self, *, force: bool = False, no_interactive: bool = False, confirm: Confirm | None = None) -> None:
        self._force = force
        self._no_interactive = no_interactive
        self._confirm = confirm

    def decide(self, exists: bool) -> GuardDecision:
        if not exists or self._force:
            return GuardDecision.ALLOW
        if self._no_interactive:
            return GuardDecision.DENY
        return GuardDecision.PROMPT

    def allows(self, path: str | Path) -> bool:
        target = Path(path)
        decision = self.decide(target.exists())
        if decision is GuardDecision.ALLOW:
            return True
        if decision is GuardDecision.DENY:
            logger.warning("%s already exists; skipping (use --force to overwrite)", target)
            return False

        if self._confirm is None:
            logger.warning("%s already exists and no confirmation is available; skipping", target)
            return False
        if self._confirm(f"{target} already exists. Overwrite?"):
            return True
        logger.info("Keeping existing %s", target)
        return False

