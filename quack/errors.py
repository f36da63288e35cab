"""
errors.py

Responsibility: the error taxonomy shared by every provisioning stage.

Stages raise; only `cli.main` converts an error into a printed message and
a process exit code (see `orchestrator.Orchestrator.run`).
"""

from __future__ import annotations


class QuackError(RuntimeError):
    pass


class CommandLaunchError(QuackError):
    """The external program could not be started at all."""


class ToolMissingError(QuackError):
    pass


class OperatorDeclinedError(ToolMissingError):
    pass


class UnsupportedPlatformError(ToolMissingError):
    pass


class ManualActionPending(QuackError):
    """
    Provisioning cannot continue without the operator doing something by hand.

    Not a failure: the run stops with exit code 0 and the message explains
    what to do before running quack again.
    """


class AuthenticationError(QuackError):
    pass


class ExternalCommandError(QuackError):
    """An external tool ran but reported failure."""

    def __init__(self, message: str, *, stderr: str = "") -> None:
        super().__init__(f"{message}: {stderr}" if stderr else message)
        self.stderr = stderr


class InstallError(ExternalCommandError):
    pass


class RepositoryCreationError(ExternalCommandError):
    pass


class GitError(ExternalCommandError):
    pass


class RemoteUrlNotFoundError(QuackError):
    pass


class ConfigError(QuackError, ValueError):
    pass


class RenderError(QuackError):
    pass
