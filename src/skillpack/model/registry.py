"""In-memory registry of skill records."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from skillpack.model.entities import SkillRecord


class Registry:
    """Read-only collection of skill records keyed by ``(category, name)``.

    Duplicate keys are tolerated: the later record replaces the earlier one
    while keeping the earlier position.
    """

    def __init__(self, records: Iterable[SkillRecord] = ()) -> None:
        self._records: dict[tuple[str, str], SkillRecord] = {}
        for record in records:
            self._records[record.key] = record

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[SkillRecord]:
        return iter(self._records.values())

    @property
    def records(self) -> tuple[SkillRecord, ...]:
        return tuple(self._records.values())

    def categories(self) -> tuple[str, ...]:
        """Distinct categories in first-appearance order."""
        seen: dict[str, None] = {}
        for category, _ in self._records:
            seen.setdefault(category, None)
        return tuple(seen)

    def for_category(self, category: str) -> tuple[SkillRecord, ...]:
        return tuple(record for record in self._records.values() if record.category == category)

    def count(self, category: str) -> int:
        return sum(1 for record_category, _ in self._records if record_category == category)

    def get(self, category: str, name: str) -> SkillRecord | None:
        return self._records.get((category, name))
