"""Conversion orchestrator: decode, encode, convert and the full-cycle check.

WHY: Callers want one call that turns text in one format into text in
another. Composing the two codec stages here keeps the ordering and
error-priority rules in one place instead of in every caller.

HOW: ``decode()`` rejects blank input, then hands the text to the input
format's codec. ``encode()`` hands the records to the output format's
codec. ``convert()`` is encode(decode(...)). ``cycle()`` chains convert()
through a route of formats and compares the final records with the
first decoded ones.

RULES:
- Blank input raises EmptyInput before any format-specific parsing
- Decode errors win: encode is never attempted after a failed decode
- No retries, no fallback to another format, no partial output
- The canonical list lives only for the duration of one call
- Diagnostic trace goes to the module logger at DEBUG level only
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Sequence

from record_converter.codecs import get_codec
from record_converter.core.errors import EmptyInput
from record_converter.core.formats import Format
from record_converter.core.ir import Record

logger = logging.getLogger(__name__)

DEFAULT_CYCLE_ROUTE: tuple[Format, ...] = (
    Format.JSON,
    Format.YAML,
    Format.CSV,
    Format.TOML,
    Format.JSON,
)


def decode(input_text: str, format: Format) -> list[Record]:
    """Parse ``input_text`` in ``format`` into the canonical record list.

    Raises:
        EmptyInput: If the text is empty or whitespace-only.
        ConversionError: Format-specific parse or shape failure.
    """
    if not input_text.strip():
        raise EmptyInput(format)
    return get_codec(format).decode(input_text)


def encode(records: Sequence[Record], format: Format) -> str:
    """Render ``records`` as text in ``format``.

    Raises:
        ConversionError: Format-specific serialization failure.
    """
    return get_codec(format).encode(records)


def convert(input_text: str, input_format: Format, output_format: Format) -> str:
    """Convert ``input_text`` from ``input_format`` to ``output_format``.

    WHY: This is the single entry point outer callers (CLI, HTTP
    service, scripts) use.

    HOW: Decodes to the canonical record list, logs it, then encodes.

    RULES:
    - Exactly two stages, decode then encode
    - The first ConversionError propagates unchanged
    """
    return run_conversion(input_text, input_format, output_format)[1]


def run_conversion(
    input_text: str, input_format: Format, output_format: Format
) -> tuple[list[Record], str]:
    """Like ``convert()``, but also return the decoded records.

    Callers that report on a conversion (the HTTP service's record
    count) use this so they share convert()'s stages and trace.
    """
    logger.debug("Converting from %s to %s", input_format, output_format)
    records = decode(input_text, input_format)
    logger.debug("Decoded %d record(s): %r", len(records), records)
    return records, encode(records, output_format)


@dataclass
class CycleStep:
    """One hop of a conversion cycle and the text it produced."""

    source: Format
    target: Format
    text: str


@dataclass
class CycleReport:
    """Result of ``cycle()``.

    Attributes:
        initial: Records decoded from the original input.
        final: Records decoded from the last step's output.
        steps: Each hop in route order.
    """

    initial: list[Record]
    final: list[Record]
    steps: list[CycleStep] = field(default_factory=list)

    @property
    def matches(self) -> bool:
        return self.initial == self.final


def cycle(
    input_text: str,
    input_format: Format,
    route: Sequence[Format] = DEFAULT_CYCLE_ROUTE,
) -> CycleReport:
    """Chain conversions through ``route`` and compare the end with the start.

    WHY: A lossless converter must come back to the same records after
    visiting every format. This check makes that property observable
    for any input, not just in tests.

    HOW: Decodes the input once to get the reference records. If the
    route does not start at ``input_format`` the input format is
    prepended. Each hop converts the previous hop's text to the next
    format. The last text is decoded and compared with the reference.

    RULES:
    - route needs at least one format
    - A mismatch is reported in the result, never raised
    - Conversion errors propagate unchanged
    """
    if not route:
        raise ValueError("cycle route needs at least one format")
    hops = list(route)
    if hops[0] is not input_format:
        hops.insert(0, input_format)

    initial = decode(input_text, input_format)
    steps: list[CycleStep] = []
    text = input_text
    for source, target in zip(hops, hops[1:]):
        text = convert(text, source, target)
        steps.append(CycleStep(source=source, target=target, text=text))

    final = decode(text, hops[-1])
    report = CycleReport(initial=initial, final=final, steps=steps)
    if not report.matches:
        logger.warning(
            "Cycle %s did not reproduce the input records",
            " -> ".join(str(f) for f in hops),
        )
    return report
