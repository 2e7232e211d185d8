"""Command-line interface for the Record Converter.

WHY: Users need a simple way to convert record files from the terminal.
The core never touches files, so the CLI owns all I/O: reading the
input text, choosing formats, and writing the result to stdout or to an
output directory.

HOW: Uses argparse to accept an input file (or ``-`` for stdin), the
source and target formats, an optional output directory, and a
``--cycle`` mode that runs the full-cycle check. Status messages go to
stderr; converted text goes to stdout unless --output-dir is given.

RULES:
- Positional argument: input file path, or ``-`` for stdin
- --from defaults to the input file's extension; required for stdin
- --to is required unless --cycle is given
- Output naming: {stem}{extension}, numeric suffix on conflict (data-2.yaml)
- ConversionError → "Error: <message>" on stderr, exit code 1
- Status output goes to stderr (not stdout)
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from record_converter.config import FORMAT_EXTENSIONS, configure_logging
from record_converter.converter import DEFAULT_CYCLE_ROUTE, convert, cycle
from record_converter.core.errors import ConversionError
from record_converter.core.formats import Format

logger = logging.getLogger(__name__)

_FORMAT_CHOICES = ", ".join(f.value for f in Format)


def _status(msg: str) -> None:
    """Print a status message to stderr.

    Status output must not pollute stdout so the CLI can be piped.
    """
    print(msg, file=sys.stderr, flush=True)


def _fail(msg: str) -> None:
    print("Error: {}".format(msg), file=sys.stderr)
    sys.exit(1)


def _resolve_output_path(stem: str, extension: str, output_dir: Path) -> Path:
    """Resolve the output file path, adding a numeric suffix on conflict.

    WHY: Users may convert the same file several times. Overwriting the
    previous output would lose work.

    RULES:
    - First attempt: {stem}{extension} (e.g. data.yaml)
    - Conflict: {stem}-{n}{extension}, n starting at 2 (e.g. data-2.yaml)
    """
    base_path = output_dir / "{}{}".format(stem, extension)
    if not base_path.exists():
        return base_path

    counter = 2
    while True:
        candidate = output_dir / "{}-{}{}".format(stem, counter, extension)
        if not candidate.exists():
            return candidate
        counter += 1


def _read_input(input_file: str) -> str:
    if input_file == "-":
        return sys.stdin.read()
    path = Path(input_file)
    if not path.is_file():
        _fail("File not found: {}".format(path))
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        _fail("{} is not UTF-8 text: {}".format(path, e))


def _resolve_input_format(args: argparse.Namespace) -> Format:
    if args.input_format:
        return args.input_format
    if args.input_file == "-":
        _fail("--from is required when reading from stdin")
    try:
        return Format.from_extension(Path(args.input_file).suffix)
    except ValueError as e:
        _fail("{} (use --from to set it explicitly)".format(e))


def _run_cycle(text: str, input_format: Format) -> None:
    report = cycle(text, input_format)
    for step in report.steps:
        _status("---> Converting from {} to {}...".format(step.source, step.target))
        print(step.text)
    if report.matches:
        _status("Data matches after full conversion cycle ({} record(s)).".format(
            len(report.initial)
        ))
        return
    _fail("Data mismatch after full conversion cycle!")


def _run(args: argparse.Namespace) -> None:
    input_format = _resolve_input_format(args)
    text = _read_input(args.input_file)

    if args.cycle:
        _run_cycle(text, input_format)
        return

    if args.output_format is None:
        _fail("--to is required unless --cycle is given")

    output_dir: Optional[Path] = None
    if args.output_dir:
        output_dir = Path(args.output_dir).resolve()
        if not output_dir.is_dir():
            _fail("Output directory does not exist: {}".format(output_dir))

    _status("Converting {} from {} to {}...".format(
        args.input_file, input_format, args.output_format
    ))
    result = convert(text, input_format, args.output_format)

    if output_dir is None:
        sys.stdout.write(result)
        if not result.endswith("\n"):
            sys.stdout.write("\n")
        return

    stem = "stdin" if args.input_file == "-" else Path(args.input_file).stem
    path = _resolve_output_path(stem, FORMAT_EXTENSIONS[args.output_format], output_dir)
    path.write_text(result, encoding="utf-8")
    _status("Saved: {}".format(path))


def _format_arg(value: str) -> Format:
    try:
        return Format.from_name(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from None


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI.

    Separate from main() so tests can inspect the parser without
    running a conversion.
    """
    parser = argparse.ArgumentParser(
        prog="record_converter",
        description="Convert record collections between JSON, YAML, CSV and TOML.",
    )

    parser.add_argument(
        "input_file",
        help="Path to the input file, or '-' to read from stdin.",
    )

    parser.add_argument(
        "--from",
        dest="input_format",
        type=_format_arg,
        default=None,
        help="Input format ({}). Default: inferred from the file extension.".format(
            _FORMAT_CHOICES
        ),
    )

    parser.add_argument(
        "--to",
        dest="output_format",
        type=_format_arg,
        default=None,
        help="Output format ({}).".format(_FORMAT_CHOICES),
    )

    parser.add_argument(
        "--output-dir",
        default=None,
        help="Directory to save the converted file (default: print to stdout).",
    )

    parser.add_argument(
        "--cycle",
        action="store_true",
        help="Convert through {} and check the records survive unchanged.".format(
            " -> ".join(str(f) for f in DEFAULT_CYCLE_ROUTE)
        ),
    )

    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (default: RECORD_CONVERTER_LOG_LEVEL or WARNING).",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the CLI.

    RULES:
    - argv=None means use sys.argv (normal CLI invocation)
    - Explicit argv is for testing
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        configure_logging(args.log_level)
    except ValueError as e:
        parser.error(str(e))

    try:
        _run(args)
    except ConversionError as e:
        logger.debug("Conversion failed", exc_info=True)
        _fail(e.message)


if __name__ == "__main__":
    main()
