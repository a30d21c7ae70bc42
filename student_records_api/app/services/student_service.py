"""
Business logic for student records.

``StudentService`` coordinates the record store with the merge engine
and the completeness validator.  Each call is a single unit of work:
the record is read, combined with the request payload and written
back without any locking, so two concurrent updates of the same
student can overwrite each other (the later write wins).
"""

import logging
from typing import List

from ..core.exceptions import StudentNotFoundError
from ..repositories.base import StudentStore
from ..schemas.fields import mutable_fields
from ..schemas.student import Student, StudentFields, StudentPatch
from .merge import merge
from .validation import validate_complete


class StudentService:
    """Service for creating, reading, updating and deleting students."""

    def __init__(self, store: StudentStore) -> None:
        self.store = store
        self.logger = logging.getLogger(__name__)

    def create(self, data: StudentFields) -> str:
        """Store a new student and return its identifier.

        The payload is persisted as-is: no completeness check runs on
        creation.  Any identifier carried by ``data`` is discarded so the
        store always assigns a fresh one.
        """
        student = Student(**{spec.name: spec.read(data) for spec in mutable_fields()})
        student_id = self.store.put(student)
        self.logger.info("Created student %s", student_id)
        return student_id

    def find_all(self) -> List[Student]:
        return self.store.all()

    def find_by_id(self, student_id: str) -> Student:
        """Return the student stored under ``student_id``.

        Raises ``StudentNotFoundError`` if there is none.
        """
        student = self.store.get(student_id)
        if student is None:
            raise StudentNotFoundError(student_id)
        return student

    def exists(self, student_id: str) -> bool:
        return self.store.exists(student_id)

    def find_starting_with(self, prefix: str) -> List[Student]:
        """Return students whose name starts with ``prefix`` (case sensitive)."""
        return self.store.query(
            lambda student: student.name is not None and student.name.startswith(prefix)
        )

    def find_by_age_range(self, min_age: int, max_age: int) -> List[Student]:
        """Return students aged between ``min_age`` and ``max_age``, both inclusive."""
        return self.store.query(
            lambda student: student.age is not None and min_age <= student.age <= max_age
        )

    def full_update(self, student_id: str, data: StudentPatch) -> Student:
        """Replace the student stored under ``student_id`` with ``data``.

        ``data`` must describe the whole record: ``MissingFieldError`` is
        raised for the first required field it lacks and nothing is
        stored in that case.  Validation runs whether or not a student
        exists under ``student_id``; when none exists the record is
        created under that identifier.  Optional fields omitted from
        ``data`` are cleared.
        """
        validate_complete(data)
        replaced = self.store.exists(student_id)
        student = Student(
            id=student_id,
            **{spec.name: spec.read(data) for spec in mutable_fields()},
        )
        self.store.put(student)
        if replaced:
            self.logger.info("Replaced student %s", student_id)
        else:
            self.logger.info("Created student %s through full update", student_id)
        return student

    def partial_update(self, student_id: str, patch: StudentPatch) -> Student:
        """Apply the fields supplied in ``patch`` to the stored student.

        Raises ``StudentNotFoundError`` if no student is stored under
        ``student_id``.  Returns the merged record.
        """
        existing = self.find_by_id(student_id)
        merged = merge(existing, patch)
        self.store.put(merged)
        self.logger.info(
            "Partially updated student %s (%s)",
            student_id,
            ", ".join(sorted(patch.model_fields_set - {"id"})) or "no fields",
        )
        return merged

    def delete(self, student_id: str) -> None:
        """Delete a student.

        Raises ``StudentNotFoundError`` if no student is stored under
        ``student_id``.
        """
        if not self.store.exists(student_id):
            raise StudentNotFoundError(student_id)
        self.store.delete(student_id)
        self.logger.info("Deleted student %s", student_id)
