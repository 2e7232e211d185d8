"""Abstract base codec.

WHY: Every format decodes into and encodes from the same Record IR. A
shared base class enforces one interface so the orchestrator, CLI and
HTTP service can work with any codec generically.

HOW: BaseCodec is an ABC with a ``format`` property and two methods,
``decode()`` and ``encode()``. Helpers shared by the container-shaped
formats (JSON, YAML, TOML) live here too: validating a parsed document
against a schema and building the Record list from it.

RULES:
- Subclasses MUST implement ``format``, ``decode()`` and ``encode()``
- decode() receives text that is already known to be non-blank
- decode() and encode() raise only ConversionError subclasses for bad data
- Neither method returns partial results
- Codecs never call each other

To add a new format:
1. Add a member to Format
2. Create a codec module in codecs/ subclassing BaseCodec
3. Register it in CODECS in codecs/__init__.py
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, Optional, Sequence

from jsonschema.exceptions import ValidationError

from record_converter.core.errors import ConversionError
from record_converter.core.formats import Format
from record_converter.core.ir import Record
from record_converter.core.schema import describe_validation_error, validate_document


class BaseCodec(ABC):
    """Abstract base for all format codecs."""

    @property
    @abstractmethod
    def format(self) -> Format:
        """The Format this codec reads and writes."""

    @property
    def name(self) -> str:
        """Human-readable format name, e.g. 'YAML'."""
        return self.format.display_name

    @abstractmethod
    def decode(self, text: str) -> list[Record]:
        """Parse text into the canonical record sequence.

        Args:
            text: Raw input text (non-blank).

        Returns:
            Records in document order.
        """

    @abstractmethod
    def encode(self, records: Sequence[Record]) -> str:
        """Render the canonical record sequence as text.

        Args:
            records: Records in the order they must appear.

        Returns:
            The complete document text.
        """


def records_from_document(
    document: Any,
    schema: dict[str, Any],
    error: Callable[[str], ConversionError],
    key: Optional[str] = None,
) -> list[Record]:
    """Validate a parsed document and build Records from it.

    Args:
        document: The parsed document (a list, or a dict for wrapped formats).
        schema: SEQUENCE_SCHEMA or WRAPPED_SCHEMA.
        error: Factory for the codec's error type, called with a detail.
        key: Wrapper key holding the record list, or None for a bare list.

    Raises:
        ConversionError: Built by ``error`` when validation fails or a
            valid-looking value cannot be held by a Record (an integer
            ``value`` too large for a float).
    """
    try:
        validate_document(document, schema)
    except ValidationError as exc:
        raise error(describe_validation_error(exc)) from exc
    items = document[key] if key is not None else document
    prefix = "$.{}".format(key) if key is not None else "$"
    records = []
    for index, item in enumerate(items):
        try:
            records.append(Record.from_mapping(item))
        except (OverflowError, TypeError, ValueError) as exc:
            raise error("{}[{}]: {}".format(prefix, index, exc)) from exc
    return records
