"""
config.py

Responsibility: Load the optional YAML configuration into a typed model.

The file only tunes how stages behave (installer strategy per platform,
login options, link confirmation, scaffold template). It never supplies the
repository name or visibility; those are always asked interactively.

Lookup order:
- explicit path (`--config`)
- `$QUACK_CONFIG`
- `~/.config/quack/config.yaml` when it exists
- built-in defaults
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

import yaml

from quack.errors import ConfigError

CONFIG_ENV_VAR = "QUACK_CONFIG"
DEFAULT_CONFIG_PATH = Path("~/.config/quack/config.yaml")

DEFAULT_MSI_URL = "https://github.com/cli/cli/releases/download/v2.0.0/gh_2.0.0_windows_amd64.msi"
DEFAULT_INSTALLERS = {"macos": "homebrew", "windows": "winget"}


@dataclass(frozen=True)
class AuthConfig:
    """Options passed to `gh auth login`."""

    hostname: str = "github.com"
    protocol: str = "https"
    web: bool = True
    set_git_protocol: bool = True


@dataclass(frozen=True)
class LinkConfig:
    confirm: bool = True


@dataclass(frozen=True)
class ScaffoldConfig:
    enabled: bool = True
    template: str = "default"


@dataclass(frozen=True)
class QuackConfig:
    token_env_var: str = "GITHUB_TOKEN"
    installers: dict[str, str] = field(default_factory=lambda: dict(DEFAULT_INSTALLERS))
    msi_url: str = DEFAULT_MSI_URL
    auth: AuthConfig = field(default_factory=AuthConfig)
    link: LinkConfig = field(default_factory=LinkConfig)
    scaffold: ScaffoldConfig = field(default_factory=ScaffoldConfig)


def _section(data: Mapping[str, Any], key: str) -> dict[str, Any]:
    raw = data.get(key)
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ConfigError(f"`{key}` must be an object/mapping when provided.")
    return raw


def _as_bool(section: Mapping[str, Any], key: str, default: bool, *, where: str) -> bool:
    value = section.get(key, default)
    if not isinstance(value, bool):
        raise ConfigError(f"`{where}.{key}` must be true or false.")
    return value


def _as_str(section: Mapping[str, Any], key: str, default: str, *, where: str) -> str:
    value = section.get(key, default)
    if value is None:
        return default
    value = str(value).strip()
    if not value:
        raise ConfigError(f"`{where}.{key}` must not be empty.")
    return value


def parse_config(data: Mapping[str, Any]) -> QuackConfig:
    """Build a `QuackConfig` from an already-decoded mapping."""
    auth_raw = _section(data, "auth")
    auth = AuthConfig(
        hostname=_as_str(auth_raw, "hostname", AuthConfig.hostname, where="auth"),
        protocol=_as_str(auth_raw, "protocol", AuthConfig.protocol, where="auth").lower(),
        web=_as_bool(auth_raw, "web", AuthConfig.web, where="auth"),
        set_git_protocol=_as_bool(auth_raw, "set_git_protocol", AuthConfig.set_git_protocol, where="auth"),
    )
    if auth.protocol not in ("https", "ssh"):
        raise ConfigError("`auth.protocol` must be 'https' or 'ssh'.")

    link_raw = _section(data, "link")
    scaffold_raw = _section(data, "scaffold")

    installers = dict(DEFAULT_INSTALLERS)
    for platform_id, strategy in _section(data, "installers").items():
        installers[str(platform_id).strip().lower()] = str(strategy).strip().lower()

    return QuackConfig(
        token_env_var=_as_str(data, "token_env_var", QuackConfig.token_env_var, where="config"),
        installers=installers,
        msi_url=_as_str(data, "msi_url", DEFAULT_MSI_URL, where="config"),
        auth=auth,
        link=LinkConfig(confirm=_as_bool(link_raw, "confirm", LinkConfig.confirm, where="link")),
        scaffold=ScaffoldConfig(
            enabled=_as_bool(scaffold_raw, "enabled", ScaffoldConfig.enabled, where="scaffold"),
            template=_as_str(scaffold_raw, "template", ScaffoldConfig.template, where="scaffold"),
        ),
    )


def resolve_config_path(explicit: str | Path | None, environ: Mapping[str, str] | None = None) -> Path | None:
    """
    Return the config file to read, or None when defaults should be used.

    An explicitly requested file (argument or environment variable) must exist.
    """
    env = os.environ if environ is None else environ
    requested = explicit or env.get(CONFIG_ENV_VAR)
    if requested:
        path = Path(requested).expanduser()
        if not path.is_file():
            raise ConfigError(f"Config file does not exist: {path}")
        return path

    default = DEFAULT_CONFIG_PATH.expanduser()
    return default if default.is_file() else None


def load_config(explicit: str | Path | None = None, environ: Mapping[str, str] | None = None) -> QuackConfig:
    path = resolve_config_path(explicit, environ)
    if path is None:
        return QuackConfig()

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Could not read config file: {path}") from e
    try:
        data = yaml.safe_load(text) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Config file is not valid YAML: {path}") from e
    if not isinstance(data, dict):
        raise ConfigError("Config file must be a mapping/object at the top level.")
    return parse_config(data)
