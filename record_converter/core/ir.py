"""Intermediate representation: the canonical Record and its field list.

WHY: Four text formats describe the same records in four different
shapes. The IR gives every codec one well-typed target to decode into
and one source to encode from, so no format ever talks to another.

HOW: Record is a frozen dataclass validated on construction.
RECORD_FIELDS declares the fields explicitly as (name, kind) pairs;
codecs iterate this tuple for ordering, CSV headers, text coercion and
schema generation instead of reflecting over the dataclass.

RULES:
- A canonical sequence is a plain ``list[Record]``; list order is file order
- Field order is always id, name, value, active
- id is an unsigned 32-bit integer; bool is never accepted as an int
- value is always stored as float; ints are widened on construction
- TOML documents nest the sequence under WRAPPER_KEY; no other format does
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping

U32_MAX = 4_294_967_295
"""Largest id a Record accepts."""

WRAPPER_KEY = "records"
"""Top-level TOML key under which the record array is stored."""


class FieldKind(Enum):
    """Value kind of a Record field, used for coercion and rendering."""

    UINT = "uint"
    TEXT = "text"
    FLOAT = "float"
    BOOL = "bool"


@dataclass(frozen=True)
class FieldSpec:
    """One declared Record field."""

    name: str
    kind: FieldKind


RECORD_FIELDS: tuple[FieldSpec, ...] = (
    FieldSpec("id", FieldKind.UINT),
    FieldSpec("name", FieldKind.TEXT),
    FieldSpec("value", FieldKind.FLOAT),
    FieldSpec("active", FieldKind.BOOL),
)

FIELD_NAMES: tuple[str, ...] = tuple(spec.name for spec in RECORD_FIELDS)


@dataclass(frozen=True)
class Record:
    """A single record of the canonical representation.

    WHY: Every format round-trips through this type, so it must reject
    anything a format could not reproduce faithfully.

    HOW: ``__post_init__`` checks each field's Python type and widens an
    integer ``value`` to float. Invalid input raises TypeError/ValueError
    immediately, and an integer too large for a float raises
    OverflowError. Codecs validate documents first and turn anything
    still raised here into their own ConversionError.

    RULES:
    - id: int (not bool), 0 <= id <= U32_MAX
    - name: str
    - value: float (int accepted and widened, bool rejected)
    - active: bool
    """

    id: int
    name: str
    value: float
    active: bool

    def __post_init__(self) -> None:
        if isinstance(self.id, bool) or not isinstance(self.id, int):
            raise TypeError("Record.id must be an int, got {}".format(type(self.id).__name__))
        if not 0 <= self.id <= U32_MAX:
            raise ValueError("Record.id out of range 0..{}: {}".format(U32_MAX, self.id))
        if not isinstance(self.name, str):
            raise TypeError("Record.name must be a str, got {}".format(type(self.name).__name__))
        if isinstance(self.value, bool) or not isinstance(self.value, (int, float)):
            raise TypeError(
                "Record.value must be a float, got {}".format(type(self.value).__name__)
            )
        if not isinstance(self.active, bool):
            raise TypeError(
                "Record.active must be a bool, got {}".format(type(self.active).__name__)
            )
        # Frozen dataclass: bypass __setattr__ to widen int values.
        object.__setattr__(self, "value", float(self.value))

    def to_dict(self) -> dict[str, Any]:
        """Return the fields as a dict in declared order."""
        return {spec.name: getattr(self, spec.name) for spec in RECORD_FIELDS}

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> Record:
        """Build a Record from a mapping that has exactly the declared fields.

        Shape checks (missing or extra keys) belong to the caller; this
        only picks the declared fields by name.
        """
        return cls(**{spec.name: data[spec.name] for spec in RECORD_FIELDS})
