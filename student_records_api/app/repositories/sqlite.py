"""
SQLite-backed student store.

Each student is stored as a JSON document in the ``students`` table.
``name``, ``email`` and ``age`` are copied into their own columns so
the database enforces email uniqueness and can index them.  A new
connection is opened per operation, as everywhere else in the
application, except for ``:memory:`` databases: those exist only as
long as their connection, so the store keeps one open for its lifetime.
"""

import logging
import sqlite3
import threading
from contextlib import contextmanager
from typing import Iterator, List, Optional

from ..core.db import get_connection, get_cursor, init_db, is_memory_database
from ..core.exceptions import DuplicateEmailError
from ..schemas.student import Student
from .base import Predicate, StudentStore, new_student_id

logger = logging.getLogger(__name__)


class SQLiteStudentStore(StudentStore):
    """Student store persisting JSON documents in SQLite."""

    def __init__(self, database_url: Optional[str] = None, create_schema: bool = True) -> None:
        self.database_url = database_url
        self._connection: Optional[sqlite3.Connection] = None
        self._lock = threading.Lock()
        if is_memory_database(database_url):
            self._connection = get_connection(database_url, check_same_thread=False)
            logger.info("Using in-memory SQLite database; records are lost on exit")
        if create_schema:
            with self._lock:
                init_db(database_url, self._connection)

    @contextmanager
    def _cursor(self) -> Iterator[sqlite3.Cursor]:
        if self._connection is None:
            with get_cursor(self.database_url) as cursor:
                yield cursor
            return
        # The shared connection runs one transaction at a time.
        with self._lock, get_cursor(connection=self._connection) as cursor:
            yield cursor

    def get(self, student_id: str) -> Optional[Student]:
        with self._cursor() as cursor:
            row = cursor.execute(
                "SELECT document FROM students WHERE id = ?",
                (student_id,),
            ).fetchone()
        if not row:
            return None
        return self._row_to_student(row)

    def put(self, student: Student) -> str:
        student_id = student.id or new_student_id()
        document = student.model_copy(update={"id": student_id}).model_dump_json(by_alias=True)
        try:
            with self._cursor() as cursor:
                cursor.execute(
                    """
                    INSERT INTO students (id, name, email, age, document)
                    VALUES (?, ?, ?, ?, ?)
                    ON CONFLICT(id) DO UPDATE SET
                        name = excluded.name,
                        email = excluded.email,
                        age = excluded.age,
                        document = excluded.document
                    """,
                    (student_id, student.name, student.email, student.age, document),
                )
        except sqlite3.IntegrityError as exc:
            if "students.email" in str(exc):
                raise DuplicateEmailError(student.email) from exc
            raise
        logger.debug("Stored student %s", student_id)
        return student_id

    def delete(self, student_id: str) -> bool:
        with self._cursor() as cursor:
            cursor.execute("DELETE FROM students WHERE id = ?", (student_id,))
            affected = cursor.rowcount
        return affected > 0

    def exists(self, student_id: str) -> bool:
        with self._cursor() as cursor:
            row = cursor.execute(
                "SELECT 1 FROM students WHERE id = ?",
                (student_id,),
            ).fetchone()
        return row is not None

    def exists_by_email(self, email: str) -> bool:
        with self._cursor() as cursor:
            row = cursor.execute(
                "SELECT 1 FROM students WHERE email = ?",
                (email,),
            ).fetchone()
        return row is not None

    def query(self, predicate: Predicate) -> List[Student]:
        with self._cursor() as cursor:
            rows = cursor.execute("SELECT document FROM students ORDER BY rowid").fetchall()
        students = (self._row_to_student(row) for row in rows)
        return [student for student in students if predicate(student)]

    @staticmethod
    def _row_to_student(row: sqlite3.Row) -> Student:
        """Convert a database row to a Student instance."""
        return Student.model_validate_json(row["document"])
