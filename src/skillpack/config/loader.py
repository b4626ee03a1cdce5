"""Config loading and normalization for skillpack."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from skillpack.config.model import SkillpackConfig, ValidationPolicy
from skillpack.constants.config import ALLOWED_CONFIG_KEYS, CONFIG_FILENAME
from skillpack.exceptions import ConfigError


def default_repo_root() -> Path:
    """Directory of the checkout this package runs from.

    In a source checkout this is the repository holding ``skills/``; in an
    installed wheel it is a site-packages parent without one, which selects
    remote mode.
    """
    return Path(__file__).resolve().parents[3]


def load_config(repo_root: Path | None = None, config_path: Path | None = None) -> SkillpackConfig:
    """Load and validate config from ``skillpack.yaml`` or an explicit path."""
    root = (repo_root or default_repo_root()).resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    if not path.exists():
        if config_path is not None:
            raise ConfigError(f"Config file not found: {path}")
        return SkillpackConfig(repo_root=root)

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")

    unknown = sorted(set(raw) - ALLOWED_CONFIG_KEYS)
    if unknown:
        raise ConfigError(f"Unknown config key(s) in {path}: {', '.join(map(str, unknown))}")

    defaults = SkillpackConfig(repo_root=root)
    policy_defaults = ValidationPolicy()

    description_min_length = raw.get("description_min_length", policy_defaults.description_min_length)
    if (
        isinstance(description_min_length, bool)
        or not isinstance(description_min_length, int)
        or description_min_length < 0
    ):
        raise ConfigError("description_min_length must be a non-negative integer")

    fetch_timeout = raw.get("fetch_timeout", defaults.fetch_timeout)
    if isinstance(fetch_timeout, bool) or not isinstance(fetch_timeout, (int, float)) or fetch_timeout <= 0:
        raise ConfigError("fetch_timeout must be a positive number")

    return SkillpackConfig(
        repo_root=root,
        skills_dir=_ensure_string(raw.get("skills_dir", defaults.skills_dir), "skills_dir"),
        registry_file=_ensure_string(raw.get("registry_file", defaults.registry_file), "registry_file"),
        remote_base_url=_ensure_string(raw.get("remote_base_url", defaults.remote_base_url), "remote_base_url").rstrip(
            "/"
        ),
        install_subdir=_ensure_string(raw.get("install_subdir", defaults.install_subdir), "install_subdir"),
        fetch_timeout=float(fetch_timeout),
        validation=ValidationPolicy(
            description_min_length=description_min_length,
            strict_scope=_ensure_bool(raw.get("strict_scope", policy_defaults.strict_scope), "strict_scope"),
            placeholder_warnings=_ensure_bool(
                raw.get("placeholder_warnings", policy_defaults.placeholder_warnings),
                "placeholder_warnings",
            ),
        ),
    )


def _ensure_string(value: Any, key_name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ConfigError(f"{key_name} must be a non-empty string")
    return value.strip()


def _ensure_bool(value: Any, key_name: str) -> bool:
    if not isinstance(value, bool):
        raise ConfigError(f"{key_name} must be a boolean")
    return value
