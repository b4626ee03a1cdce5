"""Registry artifact layout and JSON Schema."""

from __future__ import annotations

from typing import Any

from skillpack.constants.naming import NAME_MAX_LENGTH, NAME_PATTERN

REGISTRY_FILENAME: str = "registry.json"
REGISTRY_SKILLS_KEY: str = "skills"
REGISTRY_CATEGORY_KEY: str = "tech"
REGISTRY_NAME_KEY: str = "name"
REGISTRY_DESCRIPTION_KEY: str = "description"
REGISTRY_TEMP_PREFIX: str = ".tmp-registry-"
REGISTRY_TEMP_SUFFIX: str = ".json"
REGISTRY_JSON_INDENT: int = 2

_NAME_SCHEMA: dict[str, Any] = {"type": "string", "pattern": NAME_PATTERN.pattern, "maxLength": NAME_MAX_LENGTH}

REGISTRY_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "required": [REGISTRY_SKILLS_KEY],
    "properties": {
        REGISTRY_SKILLS_KEY: {
            "type": "array",
            "items": {
                "type": "object",
                "required": [REGISTRY_CATEGORY_KEY, REGISTRY_NAME_KEY],
                "properties": {
                    REGISTRY_CATEGORY_KEY: _NAME_SCHEMA,
                    REGISTRY_NAME_KEY: _NAME_SCHEMA,
                    REGISTRY_DESCRIPTION_KEY: {"type": ["string", "null"]},
                },
            },
        },
    },
}
