"""
availability.py

Responsibility: make sure the GitHub CLI is installed before anything else runs.
"""

from __future__ import annotations

import logging

from quack.config import QuackConfig
from quack.console import Console, confirm
from quack.errors import ManualActionPending, OperatorDeclinedError
from quack.executor import Executor
from quack.github_cli import GitHubCli
from quack.host import Host
from quack.installers import build_installer

logger = logging.getLogger(__name__)


class ToolAvailabilityChecker:
    def __init__(
        self,
        *,
        gh: GitHubCli,
        executor: Executor,
        console: Console,
        host: Host,
        config: QuackConfig,
    ) -> None:
        self._gh = gh
        self._executor = executor
        self._console = console
        self._host = host
        self._config = config

    def ensure_installed(self) -> None:
        """
        Return once `gh` is usable; offer to install it when it is not.

        Raises `OperatorDeclinedError` if the operator refuses,
        `UnsupportedPlatformError` for platforms without an installer and
        `ManualActionPending` when installation has to be finished by hand.
        """
        if self._gh.is_available():
            logger.info("GitHub CLI is already installed.")
            return

        logger.info(
            "The GitHub CLI is required for authentication, repository creation, and other GitHub operations."
        )
        if not confirm(self._console, "Do you want to install it? (y/n): ", default=False):
            raise OperatorDeclinedError("User opted not to install the GitHub CLI.")

        installer = build_installer(self._host.os_name, self._config, executor=self._executor, host=self._host)
        installer.install()

        # Fresh installs are often not on PATH until a new shell is opened.
        if not self._gh.is_available():
            raise ManualActionPending(
                "The GitHub CLI was installed but cannot be found yet. Open a new terminal and rerun the program."
            )
        logger.info("GitHub CLI installed.")
