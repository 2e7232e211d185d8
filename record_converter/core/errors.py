"""Exception taxonomy for conversion failures.

WHY: A failed conversion must say exactly which stage and which format
failed, and must never return partial output. Typed exceptions let the
CLI and HTTP layers report failures precisely without string matching.

HOW: Every error derives from ConversionError, which carries the
originating Format (or None) and a short ``kind`` tag. Format-specific
errors wrap the underlying library diagnostic as their message; codecs
chain the original exception with ``raise ... from exc``.

RULES:
- Codecs raise only ConversionError subclasses for bad input
- One failed conversion raises exactly one error
- ``kind`` values are stable identifiers (used in HTTP error bodies)
- EmptyInput is raised before any format-specific parsing
- UnsupportedRepresentation is for data a format cannot express
"""

from __future__ import annotations

from typing import Optional

from record_converter.core.formats import Format


class ConversionError(Exception):
    """Base class for all decode/encode failures."""

    kind = "conversion"

    def __init__(self, message: str, format: Optional[Format] = None) -> None:
        super().__init__(message)
        self.message = message
        self.format = format


class JsonError(ConversionError):
    """JSON text could not be parsed, validated or produced."""

    kind = "json"

    def __init__(self, detail: str) -> None:
        super().__init__("JSON Error: {}".format(detail), Format.JSON)


class YamlError(ConversionError):
    """YAML text could not be parsed, validated or produced."""

    kind = "yaml"

    def __init__(self, detail: str) -> None:
        super().__init__("YAML Error: {}".format(detail), Format.YAML)


class CsvError(ConversionError):
    """CSV header or row problem.

    ``line`` is the 1-based physical line of the offending row when known.
    """

    kind = "csv"

    def __init__(self, detail: str, line: Optional[int] = None) -> None:
        if line is not None:
            detail = "line {}: {}".format(line, detail)
        super().__init__("CSV Error: {}".format(detail), Format.CSV)
        self.line = line


class TomlDecodeError(ConversionError):
    kind = "toml_decode"

    def __init__(self, detail: str) -> None:
        super().__init__("TOML Deserialization Error: {}".format(detail), Format.TOML)


class TomlEncodeError(ConversionError):
    kind = "toml_encode"

    def __init__(self, detail: str) -> None:
        super().__init__("TOML Serialization Error: {}".format(detail), Format.TOML)


class TextEncodingError(ConversionError):
    """Encoder output bytes are not valid UTF-8 text (CSV buffer path)."""

    kind = "text_encoding"

    def __init__(self, detail: str, format: Optional[Format] = None) -> None:
        super().__init__("UTF8 Error: {}".format(detail), format)


class EmptyInput(ConversionError):
    """Input text is empty or whitespace-only."""

    kind = "empty_input"

    def __init__(self, format: Format) -> None:
        super().__init__("Input data for {} format is empty".format(format), format)


class UnsupportedRepresentation(ConversionError):
    """The records cannot be rendered faithfully in the requested format."""

    kind = "unsupported_representation"

    def __init__(self, format: Format, detail: Optional[str] = None) -> None:
        message = "Cannot represent this data structure as {}".format(format)
        if detail:
            message = "{}: {}".format(message, detail)
        super().__init__(message, format)
