"""CSV codec: a header row plus one row per record.

WHY: Spreadsheets exchange records as CSV, where every value is text.
The header names the columns, so columns are bound to fields by name
and may appear in any order.

HOW: Decoding reads rows with the stdlib csv module, validates the
header against FIELD_NAMES, then coerces each cell according to its
FieldKind. Encoding writes through a UTF-8 TextIOWrapper over an
in-memory BytesIO buffer and decodes the bytes back to text.

RULES:
- Binding is by header name, never by position
- The header must name every field exactly once; unknown columns are errors
- A row with a different column count than the header is an error
- Blank lines are skipped
- Booleans are the literals ``true``/``false``; floats use repr()
  (shortest text that parses back to the same float)
- The header is written even when there are no records
- Rows end with ``\\n``; a row with ``\\r`` in any cell is written fully quoted
- Cells have no length limit in either direction
"""

from __future__ import annotations

import csv
import io
import re
from typing import Any, Sequence

from record_converter.codecs.base import BaseCodec
from record_converter.core.errors import CsvError, TextEncodingError
from record_converter.core.formats import Format
from record_converter.core.ir import FIELD_NAMES, RECORD_FIELDS, U32_MAX, FieldKind, FieldSpec, Record

_UINT_PATTERN = re.compile(r"\+?[0-9]+\Z")

_BOOL_LITERALS = {"true": True, "false": False}


def _coerce(spec: FieldSpec, raw: str, line: int) -> Any:
    """Convert one cell to the Python value for its field kind."""
    if spec.kind is FieldKind.TEXT:
        return raw
    if spec.kind is FieldKind.UINT:
        digits = raw.lstrip("+").lstrip("0") or "0"
        # Length check first: int() refuses very long digit strings.
        if _UINT_PATTERN.match(raw) and len(digits) <= len(str(U32_MAX)):
            value = int(digits)
            if value <= U32_MAX:
                return value
        raise CsvError(
            "field `{}`: '{}' is not an unsigned integer in 0..{}".format(spec.name, raw, U32_MAX),
            line=line,
        )
    if spec.kind is FieldKind.FLOAT:
        # float() also accepts digit separators and padding; CSV cells must not.
        if "_" not in raw and raw == raw.strip():
            try:
                return float(raw)
            except ValueError:
                pass
        raise CsvError("field `{}`: '{}' is not a float".format(spec.name, raw), line=line)
    if raw in _BOOL_LITERALS:
        return _BOOL_LITERALS[raw]
    raise CsvError(
        "field `{}`: '{}' is not a boolean (expected true or false)".format(spec.name, raw),
        line=line,
    )


def _render(kind: FieldKind, value: Any) -> str:
    if kind is FieldKind.BOOL:
        return "true" if value else "false"
    if kind is FieldKind.FLOAT:
        return repr(value)
    return str(value)


def _check_header(header: list[str], line: int) -> None:
    duplicates = sorted({name for name in header if header.count(name) > 1})
    if duplicates:
        raise CsvError("duplicate header column(s): {}".format(", ".join(duplicates)), line=line)
    unknown = [name for name in header if name not in FIELD_NAMES]
    if unknown:
        raise CsvError("unknown header column(s): {}".format(", ".join(unknown)), line=line)
    missing = [name for name in FIELD_NAMES if name not in header]
    if missing:
        raise CsvError("missing header column(s): {}".format(", ".join(missing)), line=line)


class CsvCodec(BaseCodec):
    """Codec for comma-separated records with a header row."""

    @property
    def format(self) -> Format:
        return Format.CSV

    def decode(self, text: str) -> list[Record]:
        # No cell can be longer than the whole text.
        if len(text) > csv.field_size_limit():
            csv.field_size_limit(len(text))
        reader = csv.reader(io.StringIO(text, newline=""))
        header: list[str] = []
        records: list[Record] = []
        try:
            for row in reader:
                if not row:
                    continue
                if not header:
                    _check_header(row, reader.line_num)
                    header = row
                    continue
                if len(row) != len(header):
                    raise CsvError(
                        "found record with {} fields, but the header has {} fields".format(
                            len(row), len(header)
                        ),
                        line=reader.line_num,
                    )
                cells = dict(zip(header, row))
                records.append(Record(**{
                    spec.name: _coerce(spec, cells[spec.name], reader.line_num)
                    for spec in RECORD_FIELDS
                }))
        except csv.Error as exc:
            raise CsvError(str(exc), line=reader.line_num) from exc
        return records

    def encode(self, records: Sequence[Record]) -> str:
        try:
            with io.TextIOWrapper(io.BytesIO(), encoding="utf-8", newline="") as stream:
                writer = csv.writer(stream, lineterminator="\n")
                # With a "\n" terminator the minimal writer leaves "\r" unquoted.
                quoting_writer = csv.writer(stream, lineterminator="\n", quoting=csv.QUOTE_ALL)
                writer.writerow(FIELD_NAMES)
                for record in records:
                    values = record.to_dict()
                    row = [_render(spec.kind, values[spec.name]) for spec in RECORD_FIELDS]
                    if any("\r" in cell for cell in row):
                        quoting_writer.writerow(row)
                    else:
                        writer.writerow(row)
                stream.flush()
                data = stream.buffer.getvalue()
        except UnicodeEncodeError as exc:
            raise TextEncodingError(str(exc), Format.CSV) from exc
        except csv.Error as exc:
            raise CsvError(str(exc)) from exc
        try:
            return data.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise TextEncodingError(str(exc), Format.CSV) from exc
