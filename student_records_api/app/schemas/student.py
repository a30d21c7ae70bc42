"""
Pydantic models for student records.

``Student`` is the persisted record.  ``StudentCreate`` is the body
accepted when creating a record (the identifier is assigned by the
store), and ``StudentPatch`` is the partial representation used by the
update endpoints: every field is optional and pydantic's
``model_fields_set`` tells an omitted field apart from one explicitly
sent as ``null``.

JSON payloads use camelCase names (``fullTime``, ``graduationDate``,
``registerDate``); the Python attributes are snake_case.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

# Bounds of the 32-bit integers clients store in ``age`` and ``postcode``.
INT32_MIN = -2**31
INT32_MAX = 2**31 - 1

CAMEL_CASE_CONFIG = {
    "alias_generator": to_camel,
    "populate_by_name": True,
}


class Address(BaseModel):
    """Postal address embedded in a student record."""

    street: Optional[str] = Field(None, examples=["123 Main St"])
    city: Optional[str] = Field(None, examples=["Anytown"])
    postcode: Optional[int] = Field(None, ge=INT32_MIN, le=INT32_MAX, examples=[12335])


class StudentFields(BaseModel):
    """Fields shared by every student representation except ``id``.

    None of them is enforced here: required-ness is declared in the
    field catalog and only checked on full updates.
    """

    name: Optional[str] = Field(None, examples=["Flying Dutchman"])
    email: Optional[str] = Field(None, examples=["flying.dutchman@bikinibottom.com"])
    address: Optional[Address] = None
    age: Optional[int] = Field(None, ge=INT32_MIN, le=INT32_MAX, examples=[12])
    courses: Optional[List[str]] = Field(None, examples=[["History", "Geography"]])
    full_time: Optional[bool] = Field(None, examples=[True])
    gpa: Optional[float] = Field(None, examples=[3.2])
    graduation_date: Optional[datetime] = None
    register_date: Optional[datetime] = Field(None, examples=["2024-07-19T08:45:05.546"])

    model_config = CAMEL_CASE_CONFIG


class StudentCreate(StudentFields):
    """Schema for creating a student.  Any ``id`` in the body is ignored."""


class StudentPatch(StudentFields):
    """Partial student representation used by PUT and PATCH.

    Only fields present in the request body are applied.  ``id`` is
    accepted for symmetry with ``Student`` but never applied.
    """

    id: Optional[str] = None


class Student(StudentFields):
    """A stored student record."""

    id: Optional[str] = None


class StudentCreatedResponse(BaseModel):
    message: str


class StudentUpdateResponse(BaseModel):
    """Body returned by the update endpoints."""

    message: str
    student: Student
