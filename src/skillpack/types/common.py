"""Cross-module type aliases."""

from __future__ import annotations

from typing import Literal, TypeAlias

Severity: TypeAlias = Literal["error", "warning"]
DocumentStatus: TypeAlias = Literal["ok", "warn", "fail"]
InstallMode: TypeAlias = Literal["local", "remote"]

Frontmatter: TypeAlias = dict[str, str]
