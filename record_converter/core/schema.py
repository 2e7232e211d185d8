"""JSON Schemas for record documents, generated from RECORD_FIELDS.

WHY: JSON, YAML and TOML all parse into plain Python containers before
Records are built. Checking those containers field-by-field in each
codec would duplicate the same rules three times; one JSON Schema per
document shape keeps the rules in one place and yields precise paths
in error messages.

HOW: Each FieldKind maps to a schema fragment. RECORD_SCHEMA is an
object with exactly the declared fields. SEQUENCE_SCHEMA is an array of
records (JSON, YAML). WRAPPED_SCHEMA nests that array under WRAPPER_KEY
(TOML). Validation uses a Draft 7 validator whose ``integer`` type is
strict: floats like ``1.0`` and booleans are not integers.

RULES:
- additionalProperties is false: extra or nested fields are rejected
- validate_document() raises jsonschema.ValidationError (best match)
- describe_validation_error() renders "$[0].name: <reason>"
"""

from __future__ import annotations

from typing import Any

from jsonschema import Draft7Validator, validators
from jsonschema.exceptions import ValidationError, best_match

from record_converter.core.ir import RECORD_FIELDS, U32_MAX, WRAPPER_KEY, FieldKind

_KIND_SCHEMAS: dict[FieldKind, dict[str, Any]] = {
    FieldKind.UINT: {"type": "integer", "minimum": 0, "maximum": U32_MAX},
    FieldKind.TEXT: {"type": "string"},
    FieldKind.FLOAT: {"type": "number"},
    FieldKind.BOOL: {"type": "boolean"},
}

RECORD_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {spec.name: _KIND_SCHEMAS[spec.kind] for spec in RECORD_FIELDS},
    "required": [spec.name for spec in RECORD_FIELDS],
    "additionalProperties": False,
}

SEQUENCE_SCHEMA: dict[str, Any] = {
    "type": "array",
    "items": RECORD_SCHEMA,
}

WRAPPED_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {WRAPPER_KEY: SEQUENCE_SCHEMA},
    "required": [WRAPPER_KEY],
}


def _is_strict_integer(checker, instance) -> bool:
    return isinstance(instance, int) and not isinstance(instance, bool)


StrictValidator = validators.extend(
    Draft7Validator,
    type_checker=Draft7Validator.TYPE_CHECKER.redefine("integer", _is_strict_integer),
)


def validate_document(document: Any, schema: dict[str, Any]) -> None:
    """Validate a parsed document, raising the most relevant ValidationError."""
    error = best_match(StrictValidator(schema).iter_errors(document))
    if error is not None:
        raise error


def describe_validation_error(error: ValidationError) -> str:
    """Render a ValidationError as ``"<json path>: <message>"``."""
    path = "$"
    for part in error.absolute_path:
        if isinstance(part, int):
            path += "[{}]".format(part)
        else:
            path += ".{}".format(part)
    return "{}: {}".format(path, error.message)
