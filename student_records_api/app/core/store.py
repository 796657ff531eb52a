"""
In‑memory student record store.

The store is an ordered list of ``StudentRecord`` values owned by a
``StudentStore`` instance.  It knows nothing about validation; the
service layer checks every invariant before calling ``append``,
``replace`` or ``remove``.  Swapping this module for a real database
only requires a class exposing the same methods.

A single process‑wide store is created lazily by ``get_store``, which
also serves as the FastAPI dependency for routes.  Tests override
that dependency with a fresh store.
"""

import logging
from dataclasses import dataclass, replace
from typing import Iterable, List, Optional

from .config import settings

logger = logging.getLogger(__name__)


@dataclass
class StudentRecord:
    """A stored student."""

    id: str
    name: str
    birth: str
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


SEED_STUDENTS = (
    StudentRecord(id="1", name="Sonia", birth="2019-05-14"),
    StudentRecord(id="2", name="Antoine", birth="2000-12-05"),
    StudentRecord(id="3", name="Alice", birth="1990-09-14"),
    StudentRecord(id="4", name="Sophie", birth="2001-10-02"),
    StudentRecord(id="5", name="Bernard", birth="1980-08-21"),
)


class StudentStore:
    """Ordered collection of student records kept in process memory."""

    def __init__(self, records: Optional[Iterable[StudentRecord]] = None) -> None:
        self._records: List[StudentRecord] = []
        self.reset(records or [])

    def __len__(self) -> int:
        return len(self._records)

    def all(self) -> List[StudentRecord]:
        """Return the records in insertion order (shallow list copy)."""
        return list(self._records)

    def index_of(self, student_id: str) -> int:
        """Return the position of ``student_id`` or ``-1``."""
        for index, record in enumerate(self._records):
            if record.id == student_id:
                return index
        return -1

    def find_by_id(self, student_id: str) -> Optional[StudentRecord]:
        index = self.index_of(student_id)
        return self._records[index] if index >= 0 else None

    def find_by_name(self, name: str, exclude_id: Optional[str] = None) -> Optional[StudentRecord]:
        """Case‑insensitive lookup by name, skipping ``exclude_id``."""
        wanted = name.lower()
        for record in self._records:
            if record.name.lower() == wanted and record.id != exclude_id:
                return record
        return None

    def append(self, record: StudentRecord) -> None:
        self._records.append(record)

    def replace(self, index: int, record: StudentRecord) -> None:
        self._records[index] = record

    def remove(self, index: int) -> StudentRecord:
        return self._records.pop(index)

    def reset(self, records: Iterable[StudentRecord]) -> None:
        """Replace the whole content with copies of ``records``."""
        self._records = [replace(record) for record in records]


def build_store(seed: bool = True) -> StudentStore:
    """Create a store, optionally filled with the demo students."""
    return StudentStore(SEED_STUDENTS if seed else [])


_store: Optional[StudentStore] = None


def get_store() -> StudentStore:
    """Return the process‑wide store, creating it on first use."""
    global _store
    if _store is None:
        _store = build_store(settings.seed_students)
        logger.info("Student store initialised with %s records", len(_store))
    return _store
