"""
prompts.py

Responsibility: collect the repository name and visibility from the operator.

Both questions repeat until the answer is valid. There is no retry limit;
interrupting the process is the only way out.
"""

from __future__ import annotations

import logging

from quack.console import Console
from quack.models import RepositoryName, Visibility, is_valid_repo_name

logger = logging.getLogger(__name__)

NAME_PROMPT = "\nNew repo name?: "
VISIBILITY_PROMPT = "Make repo public? (Y/n): "


class InputCollector:
    def __init__(self, console: Console) -> None:
        self._console = console

    def ask_name(self) -> RepositoryName:
        while True:
            answer = self._console.ask(NAME_PROMPT)
            if is_valid_repo_name(answer):
                return RepositoryName(answer)
            logger.warning("Invalid repository name. Only alphanumeric characters and '.', '-', '_' are allowed.")

    def ask_visibility(self) -> Visibility:
        while True:
            visibility = Visibility.parse(self._console.ask(VISIBILITY_PROMPT))
            if visibility is not None:
                return visibility
            logger.warning("Invalid option. Type 'Y' for public or 'n' for private.")

    def collect(self) -> tuple[RepositoryName, Visibility]:
        return self.ask_name(), self.ask_visibility()
