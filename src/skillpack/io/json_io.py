"""JSON and text read/write helpers with atomic persistence."""

from __future__ import annotations

import json
import os
import tempfile
from collections.abc import Callable
from contextlib import suppress
from pathlib import Path
from typing import IO


def write_json_atomic(
    *,
    path: Path,
    payload: object,
    temp_prefix: str,
    temp_suffix: str,
    indent: int = 2,
    sort_keys: bool = False,
) -> None:
    """Persist JSON atomically by writing to a temp file then renaming."""

    def _dump(handle: IO[str]) -> None:
        json.dump(payload, handle, indent=indent, sort_keys=sort_keys, ensure_ascii=False)
        handle.write("\n")

    _write_atomic(path=path, writer=_dump, temp_prefix=temp_prefix, temp_suffix=temp_suffix)


def write_text_atomic(
    *,
    path: Path,
    content: str,
    temp_prefix: str,
    temp_suffix: str,
) -> None:
    """Persist text atomically by writing to a temp file then renaming."""
    _write_atomic(
        path=path,
        writer=lambda handle: handle.write(content),
        temp_prefix=temp_prefix,
        temp_suffix=temp_suffix,
    )


def _write_atomic(
    *,
    path: Path,
    writer: Callable[[IO[str]], object],
    temp_prefix: str,
    temp_suffix: str,
) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)

    temp_name: str | None = None
    try:
        with tempfile.NamedTemporaryFile(
            mode="w",
            encoding="utf-8",
            dir=path.parent,
            prefix=temp_prefix,
            suffix=temp_suffix,
            delete=False,
        ) as handle:
            temp_name = handle.name
            writer(handle)
    except Exception:
        if temp_name:
            with suppress(FileNotFoundError):
                Path(temp_name).unlink()
        raise

    assert temp_name is not None
    os.replace(temp_name, path)
