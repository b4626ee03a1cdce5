"""Parser for the flat frontmatter header of SKILL.md files.

Only the subset used by skill documents is understood: ``key: value`` lines,
one level of indented ``sub: value`` lines under an empty-valued key, and
folded block scalars (``description: >`` followed by indented lines).
"""

from __future__ import annotations

from pathlib import Path

from skillpack.constants.parsing import (
    BLOCK_SCALAR_MARKERS,
    BOM,
    COMMENT_PREFIX,
    FIELD_LINE_PATTERN,
    FRONTMATTER_DELIMITER,
    NESTED_FIELD_LINE_PATTERN,
    QUOTE_CHARS,
)
from skillpack.exceptions import IOFailure, MalformedDocument
from skillpack.model import ParsedSkillDocument, SplitDocument
from skillpack.types import Frontmatter


def split_document(text: str) -> SplitDocument:
    """Split document text into header and body lines without raising."""
    lines = tuple(text.lstrip(BOM).splitlines())
    if not lines or not _is_delimiter(lines[0]):
        return SplitDocument(lines=lines, header_lines=(), body_lines=lines, opened=False, closed=False)

    end = _find_closing_delimiter(lines)
    if end is None:
        return SplitDocument(lines=lines, header_lines=lines[1:], body_lines=(), opened=True, closed=False)

    return SplitDocument(
        lines=lines,
        header_lines=lines[1:end],
        body_lines=lines[end + 1 :],
        opened=True,
        closed=True,
    )


def extract_fields(header_lines: tuple[str, ...] | list[str]) -> Frontmatter:
    """Extract the flat field mapping from raw header lines."""
    fields: Frontmatter = {}
    block_key: str | None = None
    block_parts: list[str] = []
    parent_key: str | None = None

    for line in header_lines:
        if block_key is not None:
            if not line.strip():
                continue
            if _is_indented(line):
                block_parts.append(line.strip())
                continue
            fields[block_key] = _fold(block_parts)
            block_key = None

        stripped = line.strip()
        if not stripped or stripped.startswith(COMMENT_PREFIX):
            continue

        if _is_indented(line):
            nested = NESTED_FIELD_LINE_PATTERN.match(line)
            if parent_key is not None and nested is not None:
                fields[f"{parent_key}.{nested.group(1)}"] = _unquote((nested.group(2) or "").strip())
            continue

        match = FIELD_LINE_PATTERN.match(line)
        if match is None:
            parent_key = None
            continue

        key = match.group(1)
        value = (match.group(2) or "").strip()
        if value in BLOCK_SCALAR_MARKERS:
            block_key = key
            block_parts = []
            parent_key = None
        elif not value:
            fields[key] = ""
            parent_key = key
        else:
            fields[key] = _unquote(value)
            parent_key = None

    if block_key is not None:
        fields[block_key] = _fold(block_parts)

    return fields


def extract_frontmatter(text: str, *, source: str | None = None) -> Frontmatter:
    """Return the frontmatter fields of a document.

    Raises:
        MalformedDocument: line 1 is not ``---`` or the block never closes.
    """
    split = split_document(text)
    where = f" in {source}" if source else ""
    if not split.opened:
        raise MalformedDocument(f"Frontmatter must start on line 1 with '{FRONTMATTER_DELIMITER}'{where}")
    if not split.closed:
        raise MalformedDocument(f"Unterminated frontmatter block{where}")
    return extract_fields(split.header_lines)


def parse_skill_document(text: str, path: Path | None = None) -> ParsedSkillDocument:
    """Parse document text into frontmatter fields and body."""
    frontmatter = extract_frontmatter(text, source=str(path) if path else None)
    split = split_document(text)
    return ParsedSkillDocument(
        file_path=path,
        raw_text=text,
        frontmatter=frontmatter,
        body="\n".join(split.body_lines).strip(),
        body_start_line=split.body_start_line,
    )


def parse_skill_markdown_file(path: Path) -> ParsedSkillDocument:
    """Read and parse a SKILL.md file."""
    return parse_skill_document(read_document(path), path)


def read_document(path: Path) -> str:
    """Read a document as UTF-8, wrapping OS and decode errors in ``IOFailure``."""
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise IOFailure(f"Cannot read {path}: {exc}") from exc


def _is_delimiter(line: str) -> bool:
    return line.rstrip() == FRONTMATTER_DELIMITER


def _find_closing_delimiter(lines: tuple[str, ...]) -> int | None:
    for index in range(1, len(lines)):
        if _is_delimiter(lines[index]):
            return index
    return None


def _is_indented(line: str) -> bool:
    return line[:1] in (" ", "\t")


def _fold(parts: list[str]) -> str:
    return " ".join(" ".join(parts).split())


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in QUOTE_CHARS:
        inner = value[1:-1]
        if value[0] == '"':
            return inner.replace('\\"', '"')
        return inner.replace("''", "'")
    return value
