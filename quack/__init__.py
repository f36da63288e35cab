"""
quack package

Creates a GitHub repository through the GitHub CLI and links it to the
local working copy, one interactive session at a time.

Key responsibilities are split across modules:
- `availability.py` / `installers.py`: make sure `gh` is installed
- `auth.py`: make sure the operator is logged in
- `prompts.py`: ask for repository name and visibility
- `github_cli.py`: every `gh` invocation, including `repo create`
- `git.py`: `git init` and the `origin` remote
- `renderer.py`: README / LICENSE scaffold
- `orchestrator.py` / `cli.py`: stage ordering and the `quack` entrypoint
"""

from __future__ import annotations

__all__ = ["__version__"]

__version__ = "0.1.0"
