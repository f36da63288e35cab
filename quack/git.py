"""
git.py

Responsibility: bind the local working copy to the new remote.

Runs `git` in the current directory. The remote is always called `origin`;
an existing `origin` has its URL replaced instead of gaining a sibling.
"""

from __future__ import annotations

import logging

from quack.console import Console, confirm
from quack.errors import GitError
from quack.executor import Executor
from quack.models import LinkOutcome

logger = logging.getLogger(__name__)

REMOTE_NAME = "origin"
LINK_PROMPT = "Link local repo with new repo? (Y/n): "


class RemoteLinker:
    def __init__(self, *, executor: Executor, console: Console, ask_consent: bool = True) -> None:
        self._executor = executor
        self._console = console
        self._ask_consent = ask_consent

    def _run(self, *args: str) -> str:
        """Run `git` and return its stdout, raising GitError on failure."""
        outcome = self._executor.execute("git", list(args))
        if not outcome.success:
            raise GitError(f"Command failed: git {' '.join(args)}", stderr=outcome.stderr)
        return outcome.stdout

    def remotes(self) -> list[str]:
        try:
            output = self._run("remote")
        except GitError as e:
            raise GitError("Could not set git remote", stderr=e.stderr) from e
        return [line.strip() for line in output.splitlines() if line.strip()]

    def link(self, url: str) -> LinkOutcome:
        if self._ask_consent and not confirm(self._console, LINK_PROMPT, default=True):
            logger.info("Skipped setting git remotes.")
            return LinkOutcome.SKIPPED

        # Re-running `git init` in an existing repository is harmless.
        self._run("init")

        if REMOTE_NAME in self.remotes():
            logger.debug("Replacing URL of existing remote '%s'", REMOTE_NAME)
            self._run("remote", "set-url", REMOTE_NAME, url)
        else:
            self._run("remote", "add", REMOTE_NAME, url)
        return LinkOutcome.LINKED
