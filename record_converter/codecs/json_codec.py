"""JSON codec: a bare array of record objects.

WHY: JSON is the lingua franca of web APIs. Records travel as a plain
array of objects with no wrapper, one object per record.

HOW: Decoding parses with the stdlib json module, rejecting the
non-standard NaN/Infinity literals, then validates the array against
SEQUENCE_SCHEMA. Encoding pretty-prints ``Record.to_dict()`` objects so
keys come out in declared field order.

RULES:
- Output is pretty-printed with a stable indent (JSON_INDENT by default)
- Non-ASCII text is written verbatim (ensure_ascii=False)
- Non-finite values cannot be written: raise UnsupportedRepresentation
- No trailing newline, matching json.dumps
"""

from __future__ import annotations

import json
import math
from typing import Optional, Sequence

from record_converter.codecs.base import BaseCodec, records_from_document
from record_converter.config import JSON_INDENT
from record_converter.core.errors import JsonError, UnsupportedRepresentation
from record_converter.core.formats import Format
from record_converter.core.ir import Record
from record_converter.core.schema import SEQUENCE_SCHEMA


def _reject_constant(name: str) -> float:
    raise ValueError("{} is not a valid JSON number".format(name))


class JsonCodec(BaseCodec):
    """Codec for JSON arrays of record objects."""

    def __init__(self, indent: Optional[int] = None) -> None:
        self.indent = JSON_INDENT if indent is None else indent

    @property
    def format(self) -> Format:
        return Format.JSON

    def decode(self, text: str) -> list[Record]:
        try:
            document = json.loads(text, parse_constant=_reject_constant)
        except ValueError as exc:
            raise JsonError(str(exc)) from exc
        return records_from_document(document, SEQUENCE_SCHEMA, JsonError)

    def encode(self, records: Sequence[Record]) -> str:
        for index, record in enumerate(records):
            if not math.isfinite(record.value):
                raise UnsupportedRepresentation(
                    Format.JSON,
                    "$[{}].value is {!r}, which JSON cannot express".format(index, record.value),
                )
        try:
            return json.dumps(
                [record.to_dict() for record in records],
                indent=self.indent,
                ensure_ascii=False,
                allow_nan=False,
            )
        except (TypeError, ValueError) as exc:
            raise JsonError(str(exc)) from exc
