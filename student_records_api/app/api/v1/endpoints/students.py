"""
Student endpoints for API v1.

These routes expose CRUD operations on student records.  Handlers are
plain functions: the service and the stores are blocking, so FastAPI
runs them in its threadpool.  Service exceptions are translated into
HTTP errors here; anything else surfaces as a 500.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from student_records_api.app.api.deps import get_student_service
from student_records_api.app.core.exceptions import (
    DuplicateEmailError,
    MissingFieldError,
    StudentNotFoundError,
)
from student_records_api.app.schemas.student import (
    Student,
    StudentCreate,
    StudentCreatedResponse,
    StudentPatch,
    StudentUpdateResponse,
)
from student_records_api.app.services.student_service import StudentService

router = APIRouter()


@router.post(
    "",
    response_model=StudentCreatedResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new student",
)
def create_student(
    student: StudentCreate,
    service: StudentService = Depends(get_student_service),
) -> StudentCreatedResponse:
    """Create a new student.

    The identifier is assigned by the store and returned in the
    message.  Responds 400 if the email is already in use.
    """
    try:
        student_id = service.create(student)
    except DuplicateEmailError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    return StudentCreatedResponse(
        message=f"A new student is successfully created with ID: {student_id}"
    )


@router.get(
    "/all",
    response_model=List[Student],
    response_model_exclude_none=True,
    summary="Find all students in the database",
)
def find_all_students(
    service: StudentService = Depends(get_student_service),
) -> List[Student]:
    """Return every student.  An empty store yields an empty list."""
    return service.find_all()


@router.get(
    "/age",
    response_model=List[Student],
    response_model_exclude_none=True,
    summary="Find students by age range",
    responses={204: {"description": "No students found"}},
)
def find_students_by_age(
    min_age: int = Query(..., alias="minAge"),
    max_age: int = Query(..., alias="maxAge"),
    service: StudentService = Depends(get_student_service),
):
    """Return students whose age lies within ``minAge``..``maxAge`` inclusive.

    Responds 204 when no student matches.
    """
    students = service.find_by_age_range(min_age, max_age)
    if not students:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return students


@router.get(
    "",
    response_model=List[Student],
    response_model_exclude_none=True,
    summary="Find students starting with a given name",
    responses={204: {"description": "No students found"}},
)
def find_students_starting_with(
    name: str = Query(...),
    service: StudentService = Depends(get_student_service),
):
    """Return students whose name starts with ``name``.

    Matching is case sensitive.  Responds 204 when no student matches.
    """
    students = service.find_starting_with(name)
    if not students:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return students


@router.get(
    "/{student_id}",
    response_model=Student,
    response_model_exclude_none=True,
    summary="Find a student by ID",
)
def get_student(
    student_id: str,
    service: StudentService = Depends(get_student_service),
) -> Student:
    try:
        return service.find_by_id(student_id)
    except StudentNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e


@router.patch(
    "/{student_id}",
    response_model=StudentUpdateResponse,
    response_model_exclude_none=True,
    summary="Partially update a student by ID",
)
def partially_update_student(
    student_id: str,
    patch: StudentPatch,
    service: StudentService = Depends(get_student_service),
) -> StudentUpdateResponse:
    """Apply the fields present in the body to an existing student.

    Fields omitted from the body keep their stored value; a field sent
    as ``null`` is cleared.  Responds 404 if the student does not exist.
    """
    try:
        student = service.partial_update(student_id, patch)
    except StudentNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    except DuplicateEmailError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    return StudentUpdateResponse(
        message=f"Student partially updated successfully with ID: {student_id}",
        student=student,
    )


@router.put(
    "/{student_id}",
    response_model=StudentUpdateResponse,
    response_model_exclude_none=True,
    summary="Update an existing student",
)
def update_student(
    student_id: str,
    data: StudentPatch,
    service: StudentService = Depends(get_student_service),
) -> StudentUpdateResponse:
    """Replace a student with the body.

    The body must contain every required field, otherwise the request
    is rejected with 400 and nothing is stored.  If no student exists
    under ``student_id`` it is created there.
    """
    try:
        student = service.full_update(student_id, data)
    except (MissingFieldError, DuplicateEmailError) as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    return StudentUpdateResponse(
        message=f"Student updated successfully with ID: {student_id}",
        student=student,
    )


@router.delete(
    "/{student_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a student by ID",
)
def delete_student(
    student_id: str,
    service: StudentService = Depends(get_student_service),
) -> None:
    """Delete a student.  Responds 404 if the student does not exist."""
    try:
        service.delete(student_id)
    except StudentNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    return None
