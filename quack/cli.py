"""
cli.py

Responsibility: CLI entrypoint for quack.

Flags only cover ambient concerns (config file, verbosity). The repository
name and visibility are always asked interactively; see `orchestrator.py`
for the flow itself.
"""

from __future__ import annotations

import argparse
import logging

from quack import __version__
from quack.config import load_config
from quack.console import TerminalConsole
from quack.errors import ConfigError
from quack.executor import CommandExecutor
from quack.host import LocalHost
from quack.logging_utils import configure_logging
from quack.orchestrator import EXIT_FAILURE, Orchestrator

logger = logging.getLogger(__name__)

EXIT_INTERRUPTED = 130


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="quack",
        description="Create a GitHub repository with the gh CLI and link it to the current directory",
    )
    p.add_argument("--config", default=None, help="Path to a YAML config file (or set QUACK_CONFIG)")
    p.add_argument("-v", "--verbose", action="store_true", help="Show the external commands being run")
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return p


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    configure_logging(verbose=bool(args.verbose))

    try:
        config = load_config(args.config)
    except ConfigError as e:
        logger.error("Config Error: %s", e)
        return EXIT_FAILURE

    orchestrator = Orchestrator.build(
        config=config,
        executor=CommandExecutor(),
        console=TerminalConsole(),
        host=LocalHost(),
    )
    try:
        return orchestrator.run()
    except (KeyboardInterrupt, EOFError):
        logger.error("\nAborted.")
        return EXIT_INTERRUPTED


if __name__ == "__main__":
    raise SystemExit(main())
