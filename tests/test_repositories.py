"""Tests for the student stores.

Every test runs against the in-memory store and the SQLite store, the
latter both on a file and on a ``:memory:`` database.
"""

import sqlite3

import pytest

from student_records_api.app.core.exceptions import DuplicateEmailError
from student_records_api.app.repositories import (
    InMemoryStudentStore,
    SQLiteStudentStore,
    get_store,
)


@pytest.fixture(params=["memory", "sqlite", "sqlite-memory"])
def any_store(request, tmp_path):
    if request.param == "memory":
        return InMemoryStudentStore()
    if request.param == "sqlite-memory":
        return SQLiteStudentStore(":memory:")
    return SQLiteStudentStore(str(tmp_path / "students.db"))


def test_put_assigns_id_and_get_returns_copy(any_store, make_student):
    student = make_student()

    student_id = any_store.put(student)
    loaded = any_store.get(student_id)

    assert student.id is None
    assert loaded.id == student_id
    assert loaded.model_dump(exclude={"id"}) == student.model_dump(exclude={"id"})


def test_get_unknown_returns_none(any_store):
    assert any_store.get("missing") is None


def test_put_with_id_replaces(any_store, make_student):
    student_id = any_store.put(make_student())

    any_store.put(make_student(id=student_id, name="Renamed"))

    assert any_store.get(student_id).name == "Renamed"
    assert len(any_store.all()) == 1


def test_mutating_loaded_record_does_not_change_store(any_store, make_student):
    student_id = any_store.put(make_student())

    loaded = any_store.get(student_id)
    loaded.courses.append("Karate")

    assert any_store.get(student_id).courses == ["Math", "Science"]


def test_duplicate_email_rejected(any_store, make_student):
    any_store.put(make_student(email="same@x.com"))

    with pytest.raises(DuplicateEmailError):
        any_store.put(make_student(email="same@x.com", name="Other"))


def test_same_student_may_keep_its_email(any_store, make_student):
    student_id = any_store.put(make_student(email="same@x.com"))

    any_store.put(make_student(id=student_id, email="same@x.com", age=30))

    assert any_store.get(student_id).age == 30


def test_students_without_email_do_not_collide(any_store, make_student):
    any_store.put(make_student(email=None))
    any_store.put(make_student(email=None, name="Other"))

    assert len(any_store.all()) == 2


def test_delete(any_store, make_student):
    student_id = any_store.put(make_student())

    assert any_store.delete(student_id) is True
    assert any_store.delete(student_id) is False
    assert not any_store.exists(student_id)


def test_exists_and_exists_by_email(any_store, make_student):
    student_id = any_store.put(make_student(email="here@x.com"))

    assert any_store.exists(student_id)
    assert not any_store.exists("missing")
    assert any_store.exists_by_email("here@x.com")
    assert not any_store.exists_by_email("gone@x.com")


def test_query_keeps_insertion_order(any_store, make_student):
    for index, name in enumerate(["Carol", "Alice", "Bob"]):
        any_store.put(make_student(name=name, email=f"{index}@x.com"))

    assert [s.name for s in any_store.all()] == ["Carol", "Alice", "Bob"]
    assert [s.name for s in any_store.query(lambda s: s.name < "C")] == ["Alice", "Bob"]


def test_sqlite_keeps_document_between_instances(tmp_path, make_student):
    path = str(tmp_path / "students.db")
    student_id = SQLiteStudentStore(path).put(make_student(graduation_date="2026-06-30T12:00:00"))

    loaded = SQLiteStudentStore(path).get(student_id)

    assert loaded.graduation_date.isoformat() == "2026-06-30T12:00:00"
    assert loaded.address.postcode == 123


def test_sqlite_stores_json_with_camel_case_names(sqlite_store, make_student):
    student_id = sqlite_store.put(make_student())

    conn = sqlite3.connect(sqlite_store.database_url)
    try:
        document = conn.execute(
            "SELECT document FROM students WHERE id = ?", (student_id,)
        ).fetchone()[0]
    finally:
        conn.close()

    assert '"fullTime":true' in document
    assert '"registerDate"' in document


def test_get_store_selects_backend(tmp_path):
    assert isinstance(get_store("memory"), InMemoryStudentStore)
    assert isinstance(get_store("sqlite", str(tmp_path / "s.db")), SQLiteStudentStore)
    with pytest.raises(ValueError):
        get_store("mongo")


def test_sqlite_memory_database_is_private_to_its_store(make_student):
    first = SQLiteStudentStore(":memory:")
    second = SQLiteStudentStore(":memory:")

    student_id = first.put(make_student())

    assert first.get(student_id).name == "John Doe"
    assert second.get(student_id) is None
    assert second.all() == []
