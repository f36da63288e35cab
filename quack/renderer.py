"""
renderer.py

Responsibility: Write the starter files (README, LICENSE) into the working copy.

Rules:
- Walk template files in sorted order to ensure deterministic output.
- For UTF-8 text files, if Jinja2 markers are present, render with the provided context.
- Other files are copied byte-for-byte.
- Files that already exist in the destination are left untouched.

This module intentionally does NOT know about GitHub, git, or prompting.
"""

from __future__ import annotations

import os
import shutil
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from jinja2 import Environment, StrictUndefined, TemplateError

from quack.errors import RenderError

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"


@dataclass(frozen=True)
class RenderResult:
    rendered_files: int
    copied_files: int
    written_files: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)


def resolve_template_dir(template: str) -> Path:
    """
    Map a template setting to a directory.

    Bare names refer to templates shipped with quack; anything else is a path.
    """
    builtin = TEMPLATES_DIR / template
    if builtin.is_dir():
        return builtin
    return Path(template).expanduser()


def _is_binary_file(path: Path) -> bool:
    try:
        path.read_text(encoding="utf-8")
        return False
    except UnicodeDecodeError:
        return True


def _iter_template_files(template_dir: Path) -> list[Path]:
    files: list[Path] = []
    for root, _dirs, filenames in os.walk(template_dir):
        root_path = Path(root)
        for name in filenames:
            files.append(root_path / name)
    files.sort(key=lambda p: str(p.relative_to(template_dir)).replace(os.sep, "/"))
    return files


def render_template_dir(
    *,
    template_dir: str | Path,
    destination_dir: str | Path,
    context: dict[str, Any],
) -> RenderResult:
    """
    Render/copy a template directory into destination_dir.

    Destination files that already exist are reported in `skipped`.
    """
    tpl_dir = Path(template_dir).resolve()
    dst_dir = Path(destination_dir).resolve()

    if not tpl_dir.is_dir():
        raise RenderError(f"Template directory not found: {tpl_dir}")

    env = Environment(
        autoescape=False,
        undefined=StrictUndefined,
        keep_trailing_newline=True,
    )

    rendered = 0
    copied = 0
    written: list[str] = []
    skipped: list[str] = []

    for src_path in _iter_template_files(tpl_dir):
        rel = src_path.relative_to(tpl_dir)
        dst_path = dst_dir / rel
        if dst_path.exists():
            skipped.append(rel.as_posix())
            continue
        dst_path.parent.mkdir(parents=True, exist_ok=True)
        written.append(rel.as_posix())

        if _is_binary_file(src_path):
            shutil.copy2(src_path, dst_path)
            copied += 1
            continue

        text = src_path.read_text(encoding="utf-8")
        if ("{{" in text) or ("{%" in text) or ("{#" in text):
            try:
                out = env.from_string(text).render(**context)
            except TemplateError as e:
                raise RenderError(f"Failed rendering template file: {rel}") from e
            dst_path.write_text(out, encoding="utf-8", newline="\n")
            rendered += 1
        else:
            shutil.copy2(src_path, dst_path)
            copied += 1

    return RenderResult(rendered_files=rendered, copied_files=copied, written_files=written, skipped=skipped)
