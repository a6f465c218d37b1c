"""PSX Analytics task catalogue: records, sample data and the read-only store."""

from catalogue.models import TaskRecord
from catalogue.store import CatalogueStore, get_default_store

__all__ = ["TaskRecord", "CatalogueStore", "get_default_store"]
