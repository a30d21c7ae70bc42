"""Record stores for student documents."""

from typing import Optional

from .base import StudentStore
from .memory import InMemoryStudentStore
from .sqlite import SQLiteStudentStore

__all__ = ["StudentStore", "InMemoryStudentStore", "SQLiteStudentStore", "get_store"]


def get_store(backend: str, database_url: Optional[str] = None) -> StudentStore:
    """Build the store selected by ``backend`` (``sqlite`` or ``memory``)."""
    if backend == "memory":
        return InMemoryStudentStore()
    if backend == "sqlite":
        return SQLiteStudentStore(database_url)
    raise ValueError(f"Unknown store backend: {backend}")
