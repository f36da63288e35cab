"""
console.py

Responsibility: the operator-facing terminal.

Stages never call `input()` or `print()` directly; they receive a `Console`
so tests can script the conversation.
"""

from __future__ import annotations

import sys
from typing import Protocol, TextIO


class Console(Protocol):
    def ask(self, prompt: str) -> str: ...

    def echo(self, text: str = "") -> None: ...


class TerminalConsole:
    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def ask(self, prompt: str) -> str:
        """Show `prompt`, block for one line, and return it trimmed."""
        return input(prompt).strip()

    def echo(self, text: str = "") -> None:
        print(text, file=self._stream or sys.stdout)


def confirm(console: Console, prompt: str, *, default: bool) -> bool:
    """
    Ask a yes/no question. Empty input returns `default`.

    Only `y`/`yes` count as agreement when there is no default to fall back on;
    every other answer is a refusal.
    """
    answer = console.ask(prompt).lower()
    if not answer:
        return default
    return answer in ("y", "yes")
