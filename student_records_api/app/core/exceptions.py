"""
Exceptions raised by the student services and stores.

The API layer translates ``MissingFieldError`` and
``DuplicateEmailError`` into 400 responses and ``StudentNotFoundError``
into 404.  ``FieldAccessError`` signals a defect in the field catalog
and is deliberately left untranslated so it surfaces as a 500.
"""


class StudentRecordsError(Exception):
    """Base class for all errors raised by this package."""


class MissingFieldError(StudentRecordsError):
    """A full update was attempted with a required field missing."""

    def __init__(self, field_name: str) -> None:
        self.field_name = field_name
        super().__init__(f"Missing required field: {field_name}")


class StudentNotFoundError(StudentRecordsError):
    """No student is stored under the given identifier."""

    def __init__(self, student_id: str) -> None:
        self.student_id = student_id
        super().__init__(f"Student not found with id : '{student_id}'")


class DuplicateEmailError(StudentRecordsError):
    """Another student already uses this email address."""

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__(f"A student with email '{email}' already exists")


class FieldAccessError(StudentRecordsError):
    """A catalog field could not be read from a record."""

    def __init__(self, field_name: str, reason: str) -> None:
        self.field_name = field_name
        super().__init__(f"Failed to access field: {field_name}. {reason}")
