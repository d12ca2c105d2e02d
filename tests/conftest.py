"""Shared test fixtures for hsscaffold tests."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test from an empty temporary directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def recording_confirm() -> Callable[[bool], tuple[list[str], Callable[[str], bool]]]:
    """Build a confirm callback that answers *answer* and records each question."""

    def factory(answer: bool) -> tuple[list[str], Callable[[str], bool]]:
        questions: list[str] = []

        def confirm(question: str) -> bool:
            questions.append(question)
            return answer

        return questions, confirm

    return factory
