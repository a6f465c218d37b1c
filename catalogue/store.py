"""
catalogue/store.py
------------------
Read-only store over the task catalogue.

The store is built once from a fixed sequence of TaskRecords and never
mutated afterwards, so concurrent readers need no locking.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from catalogue.models import (
    CATEGORY_ICONS,
    DEFAULT_ICON,
    CategoryIcon,
    TaskRecord,
    category_key,
    category_label,
)


class CatalogueStore:
    """Immutable, ordered collection of TaskRecords."""

    def __init__(self, records: Iterable[TaskRecord]):
        self._records: Tuple[TaskRecord, ...] = tuple(records)

        by_id: Dict[int, TaskRecord] = {}
        for record in self._records:
            if record.id in by_id:
                raise ValueError(f"Duplicate task id in catalogue: {record.id}")
            by_id[record.id] = record
        self._by_id = by_id

        # Distinct categories in first-occurrence order
        self._categories: Tuple[str, ...] = tuple(
            dict.fromkeys(r.category for r in self._records)
        )

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[TaskRecord]:
        return iter(self._records)

    def list_categories(self) -> List[str]:
        """Distinct category labels, in first-occurrence order."""
        return list(self._categories)

    def filter(self, active_category: str, search_text: str = "") -> List[TaskRecord]:
        """
        Records in `active_category` whose title or description contains
        `search_text` (case-insensitive). An empty query matches every record
        of the category. Original order is preserved; no match -> [].
        """
        return [
            r for r in self._records
            if r.category == active_category and r.matches(search_text or "")
        ]

    def get(self, task_id: int) -> Optional[TaskRecord]:
        return self._by_id.get(task_id)

    def count_by_category(self) -> Dict[str, int]:
        counts: Dict[str, int] = {c: 0 for c in self._categories}
        for r in self._records:
            counts[r.category] += 1
        return counts

    @staticmethod
    def category_label(category: str) -> str:
        return category_label(category)

    @staticmethod
    def category_icon(category: str) -> CategoryIcon:
        return CATEGORY_ICONS.get(category_key(category), DEFAULT_ICON)


@lru_cache(maxsize=1)
def get_default_store() -> CatalogueStore:
    """Store over the bundled PSX task library, built on first use."""
    from catalogue.psx_tasks import PSX_TASKS

    return CatalogueStore(PSX_TASKS)
