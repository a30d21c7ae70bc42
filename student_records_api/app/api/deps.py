"""
FastAPI dependencies shared by the v1 endpoints.

The service instance is built once by ``create_app`` and kept on
``app.state`` so tests can assemble an application around any store.
"""

from fastapi import Request

from student_records_api.app.services.student_service import StudentService


def get_student_service(request: Request) -> StudentService:
    """Return the ``StudentService`` attached to the running application."""
    return request.app.state.student_service
