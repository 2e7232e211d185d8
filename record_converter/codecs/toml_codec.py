"""TOML codec: an array of tables under the ``records`` key.

WHY: A TOML document must be a table at the top level, so a bare list
of records cannot be written. The record array is nested under the
fixed WRAPPER_KEY on encode and unwrapped from it on decode.

HOW: Decoding uses the stdlib ``tomllib`` parser (plain Python values),
checks for the wrapper key, then validates against WRAPPED_SCHEMA.
Encoding builds a ``tomlkit`` document with an explicit array of tables,
so every record is written as its own ``[[records]]`` section however
short it is.

RULES:
- Wrap on encode, unwrap on decode, always under WRAPPER_KEY
- A missing wrapper key is a TomlDecodeError
- Other top-level keys are ignored on decode
- An empty sequence is written as ``records = []`` (an empty array of
  tables would vanish from the document)
- Output is TOML 1.0: strings are escaped here with only 1.0 escapes,
  so tomllib (and any 1.0 reader) can load what this codec writes
- Parse/shape failures raise TomlDecodeError; write failures TomlEncodeError
"""

from __future__ import annotations

import tomllib
from typing import Sequence

import tomlkit

from record_converter.codecs.base import BaseCodec, records_from_document
from record_converter.core.errors import TomlDecodeError, TomlEncodeError
from record_converter.core.formats import Format
from record_converter.core.ir import WRAPPER_KEY, Record
from record_converter.core.schema import WRAPPED_SCHEMA


_BASIC_ESCAPES = {
    '"': '\\"',
    "\\": "\\\\",
    "\b": "\\b",
    "\t": "\\t",
    "\n": "\\n",
    "\f": "\\f",
    "\r": "\\r",
}


def _basic_string(value: str) -> tomlkit.items.String:
    """Build a basic string item using TOML 1.0 escapes only."""
    escaped = "".join(
        _BASIC_ESCAPES.get(char)
        or ("\\u{:04x}".format(ord(char)) if char < " " or char == "\x7f" else char)
        for char in value
    )
    return tomlkit.string(escaped, escape=False)


def _build_document(records: Sequence[Record]) -> tomlkit.TOMLDocument:
    document = tomlkit.document()
    if not records:
        document.add(WRAPPER_KEY, tomlkit.array())
        return document
    tables = tomlkit.aot()
    for record in records:
        table = tomlkit.table()
        for key, value in record.to_dict().items():
            table.add(key, _basic_string(value) if isinstance(value, str) else value)
        tables.append(table)
    document.add(WRAPPER_KEY, tables)
    return document


class TomlCodec(BaseCodec):
    """Codec for TOML documents holding a ``records`` array of tables."""

    @property
    def format(self) -> Format:
        return Format.TOML

    def decode(self, text: str) -> list[Record]:
        # TOMLDecodeError is a ValueError, as is int() refusing an overlong literal.
        try:
            document = tomllib.loads(text)
        except ValueError as exc:
            raise TomlDecodeError(str(exc)) from exc
        if WRAPPER_KEY not in document:
            raise TomlDecodeError("missing field `{}`".format(WRAPPER_KEY))
        return records_from_document(document, WRAPPED_SCHEMA, TomlDecodeError, key=WRAPPER_KEY)

    def encode(self, records: Sequence[Record]) -> str:
        try:
            return tomlkit.dumps(_build_document(records))
        except (TypeError, ValueError) as exc:
            raise TomlEncodeError(str(exc)) from exc
