"""
Completeness check for full updates.

A full update replaces every mutable field of a record, so the body
must describe the whole record.  ``validate_complete`` rejects it
before anything is persisted if a required field is missing.
"""

import logging

from ..core.exceptions import MissingFieldError
from ..schemas.fields import required_fields
from ..schemas.student import StudentFields

logger = logging.getLogger(__name__)


def validate_complete(record: StudentFields) -> None:
    """Raise ``MissingFieldError`` for the first required field that is absent.

    Fields are checked in catalog order and the check stops at the
    first failure, so only one field is reported per call.  An explicit
    ``null`` counts as missing.
    """
    for spec in required_fields():
        if spec.read(record) is None:
            logger.warning("Full update rejected: missing field %s", spec.alias)
            raise MissingFieldError(spec.alias)
