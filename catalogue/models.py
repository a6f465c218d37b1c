"""
catalogue/models.py
-------------------
Record types for the task catalogue.

A TaskRecord is one reference snippet; categories have no entity of their
own and are derived from the `category` field by the store.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from enum import Enum
from typing import Dict, Any


@dataclass(frozen=True)
class TaskRecord:
    id: int
    category: str
    title: str
    description: str
    code: str

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def matches(self, search_text: str) -> bool:
        """Case-insensitive substring match on title or description."""
        if not search_text:
            return True
        needle = search_text.lower()
        return needle in self.title.lower() or needle in self.description.lower()


# --------------------------------------------------------------------------- #
# Category icons (keyed by the category's letter identifier)
# --------------------------------------------------------------------------- #

class CategoryIcon(str, Enum):
    DATABASE = "database"
    LINE_CHART = "line-chart"
    BAR_CHART = "bar-chart"
    PIE_CHART = "pie-chart"
    BRAIN = "brain-circuit"
    FILE_CODE = "file-code"

    @property
    def emoji(self) -> str:
        return _ICON_EMOJI[self]


_ICON_EMOJI = {
    CategoryIcon.DATABASE: "🗄️",
    CategoryIcon.LINE_CHART: "📈",
    CategoryIcon.BAR_CHART: "📊",
    CategoryIcon.PIE_CHART: "🥧",
    CategoryIcon.BRAIN: "🧠",
    CategoryIcon.FILE_CODE: "📄",
}

CATEGORY_ICONS: Dict[str, CategoryIcon] = {
    "A": CategoryIcon.DATABASE,     # Data Collection & Cleaning
    "B": CategoryIcon.LINE_CHART,   # Descriptive Analytics
    "C": CategoryIcon.BAR_CHART,    # Visualization Tasks
    "D": CategoryIcon.PIE_CHART,    # Statistical Analytics
    "E": CategoryIcon.LINE_CHART,   # Technical Indicators
    "F": CategoryIcon.BRAIN,        # Machine Learning & Predictive Analytics
    "G": CategoryIcon.LINE_CHART,   # Portfolio Analytics & Finance
    "I": CategoryIcon.FILE_CODE,    # Reporting
}

DEFAULT_ICON = CategoryIcon.LINE_CHART


def category_key(category: str) -> str:
    """Identifier of a category label: the part before the first '.' ("A. Data ..." -> "A")."""
    head, sep, _ = category.partition(".")
    return head.strip() if sep else category.strip()


def category_label(category: str) -> str:
    """Display label without the identifier prefix, or the full label if there is none."""
    _, sep, tail = category.partition(".")
    return tail.strip() if sep and tail.strip() else category
