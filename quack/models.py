"""
models.py

Responsibility: typed values that flow between provisioning stages.

All values here are plain data; nothing in this module runs commands or
talks to the operator.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable

_REPO_NAME_RE = re.compile(r"[A-Za-z0-9_.-]+")

_REMOTE_URL_MARKERS = ("git@", "https://")


def is_valid_repo_name(name: str) -> bool:
    return _REPO_NAME_RE.fullmatch(name) is not None


@dataclass(frozen=True)
class RepositoryName:
    """A repository name accepted by the hosting service."""

    value: str

    def __post_init__(self) -> None:
        if not is_valid_repo_name(self.value):
            raise ValueError(f"Invalid repository name: {self.value!r}")

    def __str__(self) -> str:
        return self.value


class Visibility(Enum):
    PUBLIC = "public"
    PRIVATE = "private"

    @property
    def flag(self) -> str:
        return f"--{self.value}"

    @classmethod
    def parse(cls, answer: str) -> Visibility | None:
        """
        Map an operator answer to a visibility.

        Empty input defaults to PUBLIC. Returns None for anything unrecognized.
        """
        normalized = answer.lower()
        if normalized in ("", "y", "yes", "public"):
            return cls.PUBLIC
        if normalized in ("n", "no", "private"):
            return cls.PRIVATE
        return None


@dataclass(frozen=True)
class CommandOutcome:
    success: bool
    stdout: str = ""
    stderr: str = ""


def is_remote_url(line: str) -> bool:
    return any(marker in line for marker in _REMOTE_URL_MARKERS)


def first_remote_url(lines: Iterable[str]) -> str | None:
    """Return the first line carrying an SSH or HTTPS remote, trimmed."""
    for line in lines:
        if is_remote_url(line):
            return line.strip()
    return None


class LinkOutcome(Enum):
    LINKED = "linked"
    SKIPPED = "skipped"


@dataclass
class SessionState:
    """Everything one run learns about the world. Never persisted."""

    tool_installed: bool = False
    authenticated: bool = False
    name: RepositoryName | None = None
    visibility: Visibility | None = None
    remote_url: str | None = None
    link_outcome: LinkOutcome | None = None
    scaffolded_files: list[str] = field(default_factory=list)
