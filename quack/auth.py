"""
auth.py

Responsibility: make sure the operator is logged in to GitHub through `gh`.
"""

from __future__ import annotations

import logging

from quack.config import AuthConfig
from quack.errors import AuthenticationError
from quack.github_cli import GitHubCli
from quack.host import Host

logger = logging.getLogger(__name__)


class AuthenticationManager:
    def __init__(self, *, gh: GitHubCli, host: Host, auth: AuthConfig, token_env_var: str = "GITHUB_TOKEN") -> None:
        self._gh = gh
        self._host = host
        self._auth = auth
        self._token_env_var = token_env_var

    def _clear_stale_token(self) -> None:
        # `gh` prefers a token from the environment over its stored login.
        if self._host.getenv(self._token_env_var) is not None:
            logger.info("Clearing the %s environment variable...", self._token_env_var)
            self._host.unsetenv(self._token_env_var)

    def ensure_authenticated(self) -> None:
        self._clear_stale_token()

        if self._gh.auth_status(self._auth.hostname):
            logger.info("You are already authenticated with GitHub.")
            return

        logger.info("You are not logged in to GitHub via 'gh' CLI.")
        logger.info("Please follow the on-screen instructions to authenticate.")
        if not self._gh.auth_login(hostname=self._auth.hostname, protocol=self._auth.protocol, web=self._auth.web):
            raise AuthenticationError("Automated authentication failed.")

        if self._auth.set_git_protocol:
            outcome = self._gh.set_git_protocol(hostname=self._auth.hostname, protocol=self._auth.protocol)
            if not outcome.success:
                logger.warning("Could not set git protocol to %s: %s", self._auth.protocol, outcome.stderr)
