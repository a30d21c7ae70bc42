"""
Top‑level router for version 1 of the API.

This router aggregates the resource routers.  Student routes are
served at ``/students`` without a version prefix so existing clients
keep working; new resources should be added here with their own
prefix.
"""

from fastapi import APIRouter

from .endpoints import health, students

router = APIRouter()

router.include_router(students.router, prefix="/students", tags=["students"])
router.include_router(health.router, tags=["health"])
