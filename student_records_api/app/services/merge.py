"""
Field merge engine used by partial updates.

``merge`` walks the field catalog and copies every field the caller
supplied from the patch onto a copy of the existing record.  Fields
the caller omitted keep their stored value; a field sent as ``null`` is
supplied and therefore cleared.  The identifier is never taken from
the patch.
"""

from typing import Any, Dict

from ..schemas.fields import mutable_fields
from ..schemas.student import Student, StudentPatch


def changed_fields(incoming: StudentPatch) -> Dict[str, Any]:
    """Return the supplied mutable fields of ``incoming`` keyed by attribute name."""
    return {
        spec.name: spec.read(incoming)
        for spec in mutable_fields()
        if spec.is_present(incoming)
    }


def merge(existing: Student, incoming: StudentPatch) -> Student:
    """Combine ``incoming`` into a new record based on ``existing``.

    Values are copied verbatim.  ``existing`` is left untouched; the
    result may share unmodified sub-objects (such as the address) with
    it.
    """
    updates = changed_fields(incoming)
    if not updates:
        return existing.model_copy()
    return existing.model_copy(update=updates)
