"""Codec registry — one decode/encode pair per Format.

WHY: The orchestrator, CLI and HTTP service need a single lookup to find
the codec for a Format. A central dict makes the set of formats explicit
and keeps callers free of per-format branching.

HOW: CODECS maps each Format member to a codec *class* (not an instance).
``get_codec()`` instantiates the class for one call.

RULES:
- Every Format member has exactly one entry
- Values are BaseCodec subclasses (not instances)
- Every codec listed here must be importable without side effects
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from record_converter.codecs.csv_codec import CsvCodec
from record_converter.codecs.json_codec import JsonCodec
from record_converter.codecs.toml_codec import TomlCodec
from record_converter.codecs.yaml_codec import YamlCodec
from record_converter.core.formats import Format

if TYPE_CHECKING:
    from record_converter.codecs.base import BaseCodec

CODECS: dict[Format, type[BaseCodec]] = {
    Format.JSON: JsonCodec,
    Format.YAML: YamlCodec,
    Format.CSV: CsvCodec,
    Format.TOML: TomlCodec,
}


def get_codec(format: Format) -> BaseCodec:
    """Return a fresh codec instance for ``format``."""
    return CODECS[format]()
