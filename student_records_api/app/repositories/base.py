"""Base record store interface."""

import uuid
from abc import ABC, abstractmethod
from typing import Callable, List, Optional

from ..schemas.student import Student

Predicate = Callable[[Student], bool]


def new_student_id() -> str:
    """Generate an identifier for a student stored without one."""
    return uuid.uuid4().hex


class StudentStore(ABC):
    """Abstract base class for student document stores.

    Stores hand out copies: mutating a returned record never changes
    what is stored until it is passed back to ``put``.
    """

    @abstractmethod
    def get(self, student_id: str) -> Optional[Student]:
        """Return the student stored under ``student_id`` or None."""
        ...

    @abstractmethod
    def put(self, student: Student) -> str:
        """
        Insert or replace a student.

        A student without an ``id`` is assigned a new one.

        Returns:
            The identifier the student is stored under

        Raises:
            DuplicateEmailError: If another student uses the same email
        """
        ...

    @abstractmethod
    def delete(self, student_id: str) -> bool:
        """
        Delete a student.

        Returns:
            True if deleted, False if it didn't exist
        """
        ...

    @abstractmethod
    def exists(self, student_id: str) -> bool:
        """Check if a student is stored under ``student_id``."""
        ...

    @abstractmethod
    def query(self, predicate: Predicate) -> List[Student]:
        """Return every stored student matching ``predicate``, in insertion order."""
        ...

    def exists_by_email(self, email: str) -> bool:
        """Check if any stored student uses ``email``."""
        return bool(self.query(lambda student: student.email == email))

    def all(self) -> List[Student]:
        return self.query(lambda student: True)
