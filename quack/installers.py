"""
installers.py

Responsibility: Install the GitHub CLI with a platform package manager.

Strategies are registered per platform identifier (see `host.LocalHost.os_name`)
and picked by name from configuration. Adding a platform means adding a
class and a registry entry; `availability.py` does not change.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Protocol

import requests

from quack.config import QuackConfig
from quack.errors import CommandLaunchError, InstallError, ManualActionPending, UnsupportedPlatformError
from quack.executor import Executor
from quack.host import Host

logger = logging.getLogger(__name__)

WINGET_UP_TO_DATE = "No newer package versions are available"
MSI_FILENAME = "gh_installer.msi"


class Installer(Protocol):
    def install(self) -> None: ...


class HomebrewInstaller:
    def __init__(self, executor: Executor) -> None:
        self._executor = executor

    def install(self) -> None:
        logger.info("Installing GitHub CLI with Homebrew...")
        try:
            outcome = self._executor.execute("brew", ["install", "gh"], interactive=True)
        except CommandLaunchError as e:
            raise InstallError(f"Failed to install GitHub CLI: {e}") from e
        if not outcome.success:
            raise InstallError("Failed to install GitHub CLI using Homebrew.", stderr=outcome.stderr)


class WingetInstaller:
    def __init__(self, executor: Executor) -> None:
        self._executor = executor

    def install(self) -> None:
        logger.info("Installing GitHub CLI with winget...")
        try:
            outcome = self._executor.execute("winget", ["install", "--id", "GitHub.cli"])
        except CommandLaunchError as e:
            raise InstallError(f"Failed to launch winget: {e}") from e

        # winget exits nonzero when the package is already current.
        if outcome.success or WINGET_UP_TO_DATE in outcome.stderr or WINGET_UP_TO_DATE in outcome.stdout:
            return
        raise InstallError("Failed to install GitHub CLI using winget.", stderr=outcome.stderr)


class ChocolateyInstaller:
    """
    Elevated Chocolatey install, falling back to downloading the MSI.

    The fallback cannot finish on its own: it leaves the installer in the
    Downloads folder and raises `ManualActionPending`.
    """

    def __init__(self, executor: Executor, host: Host, *, msi_url: str) -> None:
        self._executor = executor
        self._host = host
        self._msi_url = msi_url

    def _has_chocolatey(self) -> bool:
        try:
            self._executor.execute("choco", ["--version"])
        except CommandLaunchError:
            return False
        return True

    def install(self) -> None:
        if self._has_chocolatey():
            logger.info("Found Chocolatey! Installing GitHub CLI...")
            self._install_elevated()
            return

        installer_path = self._download_msi()
        logger.info("Installer downloaded to '%s'. Please install it manually.", installer_path)
        raise ManualActionPending(
            f"Please install the GitHub CLI using the downloaded '{installer_path.name}' and rerun the program."
        )

    def _install_elevated(self) -> None:
        args = [
            "-Command",
            "Start-Process",
            "choco",
            "-ArgumentList",
            "'install', 'gh', '-y'",
            "-Verb",
            "RunAs",
        ]
        try:
            outcome = self._executor.execute("powershell", args, interactive=True)
        except CommandLaunchError as e:
            raise InstallError(f"Failed to launch Chocolatey with elevated privileges: {e}") from e
        if not outcome.success:
            raise InstallError(
                "Failed to install GitHub CLI using Chocolatey with elevated privileges.", stderr=outcome.stderr
            )

    def _download_msi(self) -> Path:
        installer_path = self._host.download_dir() / MSI_FILENAME

        logger.info("Downloading GitHub CLI installer from %s", self._msi_url)
        try:
            installer_path.parent.mkdir(parents=True, exist_ok=True)
            with requests.get(self._msi_url, stream=True, timeout=60) as r:
                r.raise_for_status()
                with installer_path.open("wb") as fh:
                    for chunk in r.iter_content(chunk_size=64 * 1024):
                        fh.write(chunk)
        except (requests.RequestException, OSError) as e:
            # Never leave a partial installer behind.
            if installer_path.is_file():
                installer_path.unlink()
            raise InstallError(f"Failed to download GitHub CLI installer: {e}") from e
        return installer_path


InstallerFactory = Callable[[Executor, Host, QuackConfig], Installer]

# platform id -> strategy name -> factory; the first entry is the platform default.
INSTALLERS: dict[str, dict[str, InstallerFactory]] = {
    "macos": {
        "homebrew": lambda executor, host, config: HomebrewInstaller(executor),
    },
    "windows": {
        "winget": lambda executor, host, config: WingetInstaller(executor),
        "chocolatey": lambda executor, host, config: ChocolateyInstaller(executor, host, msi_url=config.msi_url),
    },
}


def build_installer(os_name: str, config: QuackConfig, *, executor: Executor, host: Host) -> Installer:
    """Return the configured installer strategy for `os_name`."""
    strategies = INSTALLERS.get(os_name)
    if strategies is None:
        raise UnsupportedPlatformError("Unsupported operating system.")

    name = config.installers.get(os_name) or next(iter(strategies))
    factory = strategies.get(name)
    if factory is None:
        raise UnsupportedPlatformError(
            f"Unknown installer '{name}' for {os_name} (choose from: {', '.join(sorted(strategies))})"
        )
    return factory(executor, host, config)
