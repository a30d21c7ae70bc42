"""
Startup seeding.

``seed_data`` inserts a demo student the first time the application
starts against an empty store, so the API has something to return
out of the box.  The demo email doubles as the marker: if it is
already stored, nothing happens.
"""

import logging
from datetime import datetime

from ..repositories.base import StudentStore
from ..schemas.student import Address, Student

logger = logging.getLogger(__name__)

SEED_EMAIL = "flying.dutchman@bikinibottom.com"


def build_seed_student(email: str = SEED_EMAIL) -> Student:
    """Return the demo student with predefined data."""
    return Student(
        name="Flying Dutchman",
        email=email,
        address=Address(street="123 Main St", city="Anytown", postcode=12335),
        age=12,
        courses=["History", "Geography", "Navigation"],
        full_time=True,
        gpa=3.2,
        graduation_date=None,
        register_date=datetime.fromisoformat("2024-07-19T08:45:05.546"),
    )


def seed_data(store: StudentStore) -> bool:
    """Insert the demo student unless its email is already stored.

    Returns True if the student was inserted.
    """
    logger.info("Checking if data already exists...")
    if store.exists_by_email(SEED_EMAIL):
        logger.info("Data already exists. Skipping initialization.")
        return False
    logger.info("Initializing data...")
    student_id = store.put(build_seed_student())
    logger.info("Data initialized (student %s).", student_id)
    return True
