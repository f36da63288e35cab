"""
executor.py

Responsibility: run one external program and report what happened.

A nonzero exit status is an ordinary `CommandOutcome(success=False, ...)`.
Only a failure to start the process at all (missing binary, exec error)
raises, as `CommandLaunchError`.
"""

from __future__ import annotations

import logging
import subprocess
from typing import Protocol, Sequence

from quack.errors import CommandLaunchError
from quack.models import CommandOutcome

logger = logging.getLogger(__name__)


class Executor(Protocol):
    def execute(self, command: str, args: Sequence[str], *, interactive: bool = False) -> CommandOutcome: ...


class CommandExecutor:
    """
    Blocking subprocess runner.

    With `interactive=True` the child inherits the terminal so the operator
    can answer its prompts (browser logins, elevated installers); nothing is
    captured in that mode.
    """

    def execute(self, command: str, args: Sequence[str], *, interactive: bool = False) -> CommandOutcome:
        cmd = [command, *args]
        logger.debug("Running: %s", " ".join(cmd))
        try:
            if interactive:
                proc = subprocess.run(cmd, check=False)
                return CommandOutcome(success=proc.returncode == 0)
            proc = subprocess.run(cmd, check=False, capture_output=True, text=True, errors="replace")
        except OSError as e:
            raise CommandLaunchError(f"Failed to execute command: {' '.join(cmd)} ({e})") from e

        outcome = CommandOutcome(
            success=proc.returncode == 0,
            stdout=(proc.stdout or "").strip(),
            stderr=(proc.stderr or "").strip(),
        )
        if not outcome.success:
            logger.debug("Command exited with %s: %s", proc.returncode, outcome.stderr)
        return outcome
