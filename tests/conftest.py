# tests/conftest.py

from __future__ import annotations

import pytest

from catalogue.models import TaskRecord
from catalogue.store import CatalogueStore

from .fakes import FakeDelivery


@pytest.fixture()
def delivery() -> FakeDelivery:
    return FakeDelivery()


@pytest.fixture()
def small_store() -> CatalogueStore:
    """Three categories, interleaved, with non-contiguous ids."""
    return CatalogueStore(
        [
            TaskRecord(10, "A. Data", "Load prices", "Read CSV files.", "import pandas"),
            TaskRecord(3, "B. Stats", "Daily returns", "Compute RETURNS per day.", "r = p.pct_change()"),
            TaskRecord(42, "A. Data", "Clean data", "Drop duplicate rows.", "df.drop_duplicates()"),
            TaskRecord(7, "C. Plots", "Line chart", "Plot closing prices.", "df.plot()"),
            TaskRecord(8, "B. Stats", "Volatility", "Rolling standard deviation.", "r.std()"),
        ]
    )
