"""In-process student store."""

import logging
import threading
from typing import Dict, List, Optional

from ..core.exceptions import DuplicateEmailError
from ..schemas.student import Student
from .base import Predicate, StudentStore, new_student_id

logger = logging.getLogger(__name__)


class InMemoryStudentStore(StudentStore):
    """
    Student store backed by a dictionary.

    Records are deep-copied on the way in and out so callers never
    share state with the store.  Contents are lost when the process
    exits; use it for tests and local experiments.
    """

    def __init__(self) -> None:
        self._students: Dict[str, Student] = {}
        self._lock = threading.Lock()

    def get(self, student_id: str) -> Optional[Student]:
        with self._lock:
            student = self._students.get(student_id)
            return student.model_copy(deep=True) if student is not None else None

    def put(self, student: Student) -> str:
        student_id = student.id or new_student_id()
        stored = student.model_copy(update={"id": student_id}, deep=True)
        with self._lock:
            if student.email is not None:
                for other_id, other in self._students.items():
                    if other_id != student_id and other.email == student.email:
                        raise DuplicateEmailError(student.email)
            self._students[student_id] = stored
        logger.debug("Stored student %s", student_id)
        return student_id

    def delete(self, student_id: str) -> bool:
        with self._lock:
            return self._students.pop(student_id, None) is not None

    def exists(self, student_id: str) -> bool:
        with self._lock:
            return student_id in self._students

    def query(self, predicate: Predicate) -> List[Student]:
        with self._lock:
            snapshot = list(self._students.values())
        return [student.model_copy(deep=True) for student in snapshot if predicate(student)]
