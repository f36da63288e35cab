"""
github_cli.py

Responsibility: Isolate all interaction with the GitHub CLI (`gh`).

This module must be the only place that:
- Builds `gh` argument lists
- Interprets `gh` output (including the remote URL printed by `repo create`)

Stage modules (availability, auth, orchestrator) use this client and never
spell out `gh` subcommands themselves.
"""

from __future__ import annotations

import logging

from quack.errors import CommandLaunchError, RemoteUrlNotFoundError, RepositoryCreationError
from quack.executor import Executor
from quack.models import CommandOutcome, RepositoryName, Visibility, first_remote_url

logger = logging.getLogger(__name__)

GH = "gh"


class GitHubCli:
    def __init__(self, executor: Executor, binary: str = GH) -> None:
        self._executor = executor
        self._binary = binary

    def _gh(self, *args: str, interactive: bool = False) -> CommandOutcome:
        return self._executor.execute(self._binary, list(args), interactive=interactive)

    def is_available(self) -> bool:
        """
        Return True if `gh --version` runs successfully.

        A binary that cannot be launched is reported as unavailable, not raised.
        """
        try:
            return self._gh("--version").success
        except CommandLaunchError:
            return False

    def auth_status(self, hostname: str | None = None) -> bool:
        args = ["auth", "status"]
        if hostname:
            args += ["-h", hostname]
        return self._gh(*args).success

    def auth_login(self, *, hostname: str, protocol: str, web: bool) -> bool:
        """Run the interactive login handshake on the operator's terminal."""
        args = ["auth", "login", "-h", hostname, "-p", protocol]
        if web:
            args.append("-w")
        return self._gh(*args, interactive=True).success

    def set_git_protocol(self, *, hostname: str, protocol: str) -> CommandOutcome:
        return self._gh("config", "set", "-h", hostname, "git_protocol", protocol)

    def create_repo(self, name: RepositoryName, visibility: Visibility) -> str:
        """
        Create a repository and return its remote URL.

        The URL is the first output line that looks like an SSH or HTTPS
        remote. Creation output without such a line is treated as a failure.
        """
        outcome = self._gh("repo", "create", str(name), visibility.flag)
        if not outcome.success:
            raise RepositoryCreationError("Could not create GitHub repository", stderr=outcome.stderr)

        url = first_remote_url(outcome.stdout.splitlines())
        if url is None:
            logger.debug("Unparseable `gh repo create` output: %r", outcome.stdout)
            raise RemoteUrlNotFoundError("Could not capture GitHub URL.")
        return url
