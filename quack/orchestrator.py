"""
orchestrator.py

Responsibility: run the provisioning stages in order and decide the exit code.

High-level flow:
1) GitHub CLI available (install on request)
2) Authenticated with GitHub (login on request)
3) Repository name + visibility from the operator
4) `gh repo create` -> remote URL
5) Link local working copy (`git init`, `origin`)
6) Scaffold README / LICENSE

The first failing stage ends the run. Stages raise; this module is the only
place that turns an error into a message and an exit code.
"""

from __future__ import annotations

import logging
from pathlib import Path

from quack.auth import AuthenticationManager
from quack.availability import ToolAvailabilityChecker
from quack.config import QuackConfig
from quack.console import Console
from quack.errors import ManualActionPending, QuackError, RenderError
from quack.executor import Executor
from quack.git import RemoteLinker
from quack.github_cli import GitHubCli
from quack.host import Host
from quack.models import LinkOutcome, RepositoryName, SessionState, Visibility
from quack.prompts import InputCollector
from quack.renderer import render_template_dir, resolve_template_dir

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1

INTRO = """
Welcome to Quack!

Making your GitHub life easier by:
  - Ensuring GitHub CLI is installed
  - Authenticating you with GitHub
  - Creating a new GitHub repository
  - Linking the new repo to your local repo

Let's get started!"""


class Orchestrator:
    def __init__(
        self,
        *,
        console: Console,
        availability: ToolAvailabilityChecker,
        authentication: AuthenticationManager,
        inputs: InputCollector,
        gh: GitHubCli,
        linker: RemoteLinker,
        config: QuackConfig,
        workdir: Path,
    ) -> None:
        self._console = console
        self._availability = availability
        self._authentication = authentication
        self._inputs = inputs
        self._gh = gh
        self._linker = linker
        self._config = config
        self._workdir = workdir
        self.state = SessionState()

    @classmethod
    def build(
        cls,
        *,
        config: QuackConfig,
        executor: Executor,
        console: Console,
        host: Host,
        workdir: Path | None = None,
    ) -> Orchestrator:
        """Wire every stage to the same executor, console and host."""
        gh = GitHubCli(executor)
        return cls(
            console=console,
            availability=ToolAvailabilityChecker(gh=gh, executor=executor, console=console, host=host, config=config),
            authentication=AuthenticationManager(gh=gh, host=host, auth=config.auth, token_env_var=config.token_env_var),
            inputs=InputCollector(console),
            gh=gh,
            linker=RemoteLinker(executor=executor, console=console, ask_consent=config.link.confirm),
            config=config,
            workdir=workdir or Path.cwd(),
        )

    def _scaffold(self, name: RepositoryName, visibility: Visibility, remote_url: str) -> None:
        try:
            result = render_template_dir(
                template_dir=resolve_template_dir(self._config.scaffold.template),
                destination_dir=self._workdir,
                context={
                    "repo_name": name.value,
                    "visibility": visibility.value,
                    "remote_url": remote_url,
                },
            )
        except OSError as e:
            raise RenderError(f"Failed to create LICENSE and README.md files: {e}") from e

        for rel in result.skipped:
            logger.info("Kept existing %s", rel)
        self.state.scaffolded_files = result.written_files

    def _provision(self) -> None:
        state = self.state

        self._availability.ensure_installed()
        state.tool_installed = True

        self._authentication.ensure_authenticated()
        state.authenticated = True

        name, visibility = self._inputs.collect()
        state.name, state.visibility = name, visibility

        url = self._gh.create_repo(name, visibility)
        state.remote_url = url
        logger.info("Created %s repository %s", visibility.value, url)

        state.link_outcome = self._linker.link(url)

        if self._config.scaffold.enabled:
            self._scaffold(name, visibility, url)

    def summary(self) -> str:
        if self.state.link_outcome is LinkOutcome.LINKED:
            return "GitHub repository created and linked. You can now manually add, commit, and push files."
        return "GitHub repository created."

    def run(self) -> int:
        self._console.echo(INTRO)
        try:
            self._provision()
        except ManualActionPending as e:
            logger.info("%s", e)
            return EXIT_OK
        except QuackError as e:
            logger.error("Error: %s", e)
            return EXIT_FAILURE

        logger.info(self.summary())
        return EXIT_OK
