"""Configuration file name and allowed keys."""

from __future__ import annotations

CONFIG_FILENAME: str = "skillpack.yaml"

ALLOWED_CONFIG_KEYS: frozenset[str] = frozenset(
    {
        "skills_dir",
        "registry_file",
        "remote_base_url",
        "install_subdir",
        "fetch_timeout",
        "description_min_length",
        "strict_scope",
        "placeholder_warnings",
    }
)
