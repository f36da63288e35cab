"""
host.py

Responsibility: facts about the machine quack runs on.

Wraps the operating system identifier, process environment variables and
the operator's Downloads folder behind one object that tests can replace.
"""

from __future__ import annotations

import os
import platform
from pathlib import Path
from typing import Protocol

import platformdirs

_PLATFORM_IDS = {
    "Darwin": "macos",
    "Windows": "windows",
    "Linux": "linux",
}


class Host(Protocol):
    @property
    def os_name(self) -> str: ...

    def getenv(self, name: str) -> str | None: ...

    def unsetenv(self, name: str) -> None: ...

    def download_dir(self) -> Path: ...


class LocalHost:
    @property
    def os_name(self) -> str:
        system = platform.system()
        return _PLATFORM_IDS.get(system, system.lower())

    def getenv(self, name: str) -> str | None:
        return os.environ.get(name)

    def unsetenv(self, name: str) -> None:
        # Child processes inherit os.environ, so this also hides it from `gh`.
        os.environ.pop(name, None)

    def download_dir(self) -> Path:
        return platformdirs.user_downloads_path()
