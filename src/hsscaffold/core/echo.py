"""The demo ``echo`` program shipped with scaffolded projects."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from typing import TextIO


def echo_message(message: str, *, stream: TextIO | None = None) -> None:
    print(message, file=stream or sys.stdout)


def echo_messages(messages: Iterable[str], *, stream: TextIO | None = None) -> None:
    """Print each message on its own line, in order."""
    for message in messages:
        echo_message(message, stream=stream)
