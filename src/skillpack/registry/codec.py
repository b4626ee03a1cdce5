"""Serialization of skill records to and from the ``registry.json`` artifact."""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

import jsonschema
from jsonschema.exceptions import best_match

from skillpack.constants.registry import (
    REGISTRY_CATEGORY_KEY,
    REGISTRY_DESCRIPTION_KEY,
    REGISTRY_JSON_INDENT,
    REGISTRY_NAME_KEY,
    REGISTRY_SCHEMA,
    REGISTRY_SKILLS_KEY,
    REGISTRY_TEMP_PREFIX,
    REGISTRY_TEMP_SUFFIX,
)
from skillpack.exceptions import IOFailure, RegistryCorrupt
from skillpack.io import write_json_atomic
from skillpack.model import SkillRecord

_VALIDATOR = jsonschema.Draft202012Validator(REGISTRY_SCHEMA)


def serialize(records: Iterable[SkillRecord]) -> dict[str, list[dict[str, str]]]:
    """Build the registry payload, ordered by ``(category, name)``.

    Only the public fields are emitted; descriptions are stored in full.
    """
    ordered = sorted(records, key=lambda record: record.key)
    return {
        REGISTRY_SKILLS_KEY: [
            {
                REGISTRY_CATEGORY_KEY: record.category,
                REGISTRY_NAME_KEY: record.name,
                REGISTRY_DESCRIPTION_KEY: record.description,
            }
            for record in ordered
        ]
    }


def dumps(records: Iterable[SkillRecord]) -> str:
    """Serialize records to registry JSON text."""
    return json.dumps(serialize(records), indent=REGISTRY_JSON_INDENT, ensure_ascii=False) + "\n"


def deserialize(document: str | bytes | Mapping[str, Any]) -> list[SkillRecord]:
    """Parse a registry document back into records.

    Later entries win when a ``(category, name)`` key repeats.

    Raises:
        RegistryCorrupt: the document is not JSON or not the expected shape.
    """
    payload: Any
    if isinstance(document, (str, bytes)):
        try:
            payload = json.loads(document)
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise RegistryCorrupt(f"Registry is not valid JSON: {exc}") from exc
    else:
        payload = document

    first = best_match(_VALIDATOR.iter_errors(payload))
    if first is not None:
        location = "/".join(str(part) for part in first.absolute_path) or "<root>"
        raise RegistryCorrupt(f"Registry has unexpected shape at {location}: {first.message}")

    by_key: dict[tuple[str, str], SkillRecord] = {}
    for entry in payload[REGISTRY_SKILLS_KEY]:
        record = SkillRecord(
            category=entry[REGISTRY_CATEGORY_KEY],
            name=entry[REGISTRY_NAME_KEY],
            description=entry.get(REGISTRY_DESCRIPTION_KEY) or "",
        )
        by_key[record.key] = record
    return list(by_key.values())


def load_registry_file(path: Path) -> list[SkillRecord]:
    """Read and decode a registry file from disk."""
    try:
        raw = path.read_bytes()
    except OSError as exc:
        raise IOFailure(f"Cannot read registry {path}: {exc}") from exc
    return deserialize(raw)


def write_registry_file(records: Iterable[SkillRecord], path: Path) -> None:
    """Write the registry artifact atomically."""
    write_json_atomic(
        path=path,
        payload=serialize(records),
        temp_prefix=REGISTRY_TEMP_PREFIX,
        temp_suffix=REGISTRY_TEMP_SUFFIX,
        indent=REGISTRY_JSON_INDENT,
    )
