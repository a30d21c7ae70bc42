"""
Field catalog for student records.

``FIELDS`` lists every field of a student in declaration order,
together with its JSON name, whether a complete record must carry it
and whether updates may change it.  The merge engine and the
completeness validator iterate over this catalog instead of inspecting
the model at runtime, so adding a field to ``Student`` means adding it
here as well.
"""

from dataclasses import dataclass
from datetime import datetime
from operator import attrgetter
from typing import Any, Callable, List, Optional, Tuple

from ..core.exceptions import FieldAccessError
from .student import Address


@dataclass(frozen=True)
class FieldSpec:
    """Description of one student field.

    Attributes:
        name: Python attribute name.
        alias: Name used in JSON payloads and error messages.
        type: Declared value type, informational only.
        required: Whether a complete record must carry a non-null value.
        nullable: Whether a stored record may hold ``None`` here.
        mutable: Whether updates may change the value.
        getter: Accessor returning the field's value from a record.
    """

    name: str
    alias: str
    type: Any
    required: bool
    nullable: bool
    mutable: bool
    getter: Callable[[Any], Any]

    def read(self, record: Any) -> Any:
        try:
            return self.getter(record)
        except AttributeError as exc:
            raise FieldAccessError(self.alias, str(exc)) from exc

    def is_present(self, record: Any) -> bool:
        """Return True if the caller supplied this field, even as ``None``."""
        try:
            return self.name in record.model_fields_set
        except AttributeError as exc:
            raise FieldAccessError(self.alias, str(exc)) from exc


def _field(
    name: str,
    type_: Any,
    alias: Optional[str] = None,
    required: bool = True,
    nullable: bool = False,
    mutable: bool = True,
) -> FieldSpec:
    return FieldSpec(
        name=name,
        alias=alias or name,
        type=type_,
        required=required,
        nullable=nullable,
        mutable=mutable,
        getter=attrgetter(name),
    )


FIELDS: Tuple[FieldSpec, ...] = (
    _field("id", str, required=False, mutable=False),
    _field("name", str),
    _field("email", str),
    _field("address", Address),
    _field("age", int),
    _field("courses", List[str]),
    _field("full_time", bool, alias="fullTime"),
    _field("gpa", float),
    _field("graduation_date", datetime, alias="graduationDate", required=False, nullable=True),
    _field("register_date", datetime, alias="registerDate"),
)

FIELDS_BY_NAME = {spec.name: spec for spec in FIELDS}


def required_fields() -> Tuple[FieldSpec, ...]:
    """Fields a complete record must carry, in catalog order."""
    return tuple(spec for spec in FIELDS if spec.required)


def mutable_fields() -> Tuple[FieldSpec, ...]:
    """Fields that merge and full replacement may write, in catalog order."""
    return tuple(spec for spec in FIELDS if spec.mutable)
