"""
logging_utils.py

Responsibility: configure the root logger once for the CLI.

Messages are written bare (no level or timestamp prefix) to stderr; INFO by
default, DEBUG with `--verbose`. Calling `configure_logging` again replaces
the handler it installed earlier instead of stacking another one.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

_HANDLER_NAME = "quack-console"


def configure_logging(verbose: bool = False, *, stream: TextIO | None = None) -> None:
    root = logging.getLogger()
    for handler in list(root.handlers):
        if handler.get_name() == _HANDLER_NAME:
            root.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter("%(message)s"))
    root.addHandler(handler)
    root.setLevel(logging.DEBUG if verbose else logging.INFO)
