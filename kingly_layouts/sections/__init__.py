"""Storage of per-section layout configurations."""

from .exceptions import SectionError, SectionNotFoundError, SectionPersistenceError
from .models import SectionRecord, SectionStore
from .persistence import SectionPersistence

__all__ = [
    "SectionError",
    "SectionNotFoundError",
    "SectionPersistence",
    "SectionPersistenceError",
    "SectionRecord",
    "SectionStore",
]
