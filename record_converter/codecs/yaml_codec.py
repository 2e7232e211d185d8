"""YAML codec: a top-level sequence of record mappings.

WHY: YAML is the usual format for hand-edited configuration. Records
are a top-level sequence of mappings; both block and flow styles are
accepted on input.

HOW: PyYAML's safe loader parses the text (no arbitrary object
construction), then the result is validated against SEQUENCE_SCHEMA.
Encoding uses safe_dump in block style with key order preserved.

RULES:
- Only the safe loader/dumper are used
- Exactly one YAML document per input
- Output is block style, fields in declared order (sort_keys=False)
- An empty sequence is written as ``[]``
- Output is ASCII; non-ASCII text is written as double-quoted escapes
- int() refusing an overlong integer literal is a YamlError too
"""

from __future__ import annotations

from typing import Sequence

import yaml

from record_converter.codecs.base import BaseCodec, records_from_document
from record_converter.core.errors import YamlError
from record_converter.core.formats import Format
from record_converter.core.ir import Record
from record_converter.core.schema import SEQUENCE_SCHEMA


class YamlCodec(BaseCodec):
    """Codec for YAML sequences of record mappings."""

    @property
    def format(self) -> Format:
        return Format.YAML

    def decode(self, text: str) -> list[Record]:
        try:
            document = yaml.safe_load(text)
        except (yaml.YAMLError, ValueError) as exc:
            raise YamlError(str(exc)) from exc
        return records_from_document(document, SEQUENCE_SCHEMA, YamlError)

    def encode(self, records: Sequence[Record]) -> str:
        try:
            return yaml.safe_dump(
                [record.to_dict() for record in records],
                default_flow_style=False,
                sort_keys=False,
            )
        except yaml.YAMLError as exc:
            raise YamlError(str(exc)) from exc
