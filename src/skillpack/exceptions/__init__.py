"""Shared exception hierarchy for skillpack."""

from __future__ import annotations

from .base import SkillpackError
from .config import ConfigError
from .io import IOFailure
from .naming import AlreadyExists, InvalidName
from .parsing import MalformedDocument
from .registry import RegistryCorrupt, RegistryUnavailable

__all__ = [
    "AlreadyExists",
    "ConfigError",
    "IOFailure",
    "InvalidName",
    "MalformedDocument",
    "RegistryCorrupt",
    "RegistryUnavailable",
    "SkillpackError",
]
