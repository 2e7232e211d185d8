"""Record Converter — lossless record conversion between text formats.

WHY: The same list of records travels between tools that speak different
text formats (JSON APIs, YAML configs, CSV spreadsheets, TOML files).
Converting pairwise between every format would multiply edge cases; a
single canonical representation keeps each format independent.

HOW: Two-stage pipeline — decode (text → list[Record]) and encode
(list[Record] → text). One codec per format, all registered in
``record_converter.codecs.CODECS``. The orchestrator in
``record_converter.converter`` composes the two stages.

RULES:
- Every codec decodes into and encodes from the same Record IR
- No codec ever calls another codec
- Adding a new format = one new codec module plus one Format member
- Failures raise ConversionError subclasses; nothing is returned partially
"""

from record_converter.converter import convert, cycle, decode, encode
from record_converter.core.errors import ConversionError
from record_converter.core.formats import Format
from record_converter.core.ir import Record

__version__ = "0.1.0"

__all__ = [
    "ConversionError",
    "Format",
    "Record",
    "convert",
    "cycle",
    "decode",
    "encode",
]
