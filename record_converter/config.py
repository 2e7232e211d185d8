"""Configuration constants, format metadata, and .env loading.

WHY: Centralizes all configurable values so they are easy to find,
update, and override. Format file extensions and media types are plain
data structures, not buried in codec logic, so the CLI and the HTTP
service describe formats identically.

HOW: python-dotenv loads the .env file on import. Constants are
module-level dicts and values read from environment variables.
Integer settings go through _int_setting(), which raises a clear
ValueError for malformed or out-of-range values.

RULES:
- All environment variables use the RECORD_CONVERTER_ prefix
- Defaults are usable without any .env file
- The core (codecs, converter) reads only JSON_INDENT from here
- configure_logging() is called by entry points, never by the library
"""

from __future__ import annotations

import logging
import os
from typing import Optional

from dotenv import load_dotenv

from record_converter.core.formats import Format

# Load .env from the project root (where the script is run from)
load_dotenv()


def _int_setting(name: str, default: int, minimum: int, maximum: int) -> int:
    """Read an integer environment variable within [minimum, maximum].

    RULES:
    - Missing or blank variable returns the default
    - Non-integer or out-of-range values raise ValueError naming the variable
    """
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError("{} must be an integer, got '{}'".format(name, raw)) from None
    if not minimum <= value <= maximum:
        raise ValueError(
            "{} must be between {} and {}, got {}".format(name, minimum, maximum, value)
        )
    return value


# ---------------------------------------------------------------------------
# Format metadata (used by the CLI and HTTP service)
# ---------------------------------------------------------------------------

FORMAT_EXTENSIONS: dict[Format, str] = {
    Format.JSON: ".json",
    Format.YAML: ".yaml",
    Format.CSV: ".csv",
    Format.TOML: ".toml",
}
"""Preferred file extension written for each output format."""

FORMAT_MEDIA_TYPES: dict[Format, str] = {
    Format.JSON: "application/json",
    Format.YAML: "application/yaml",
    Format.CSV: "text/csv",
    Format.TOML: "application/toml",
}

# ---------------------------------------------------------------------------
# Environment-driven settings
# ---------------------------------------------------------------------------

JSON_INDENT = _int_setting("RECORD_CONVERTER_JSON_INDENT", 2, 0, 8)
LOG_LEVEL = os.getenv("RECORD_CONVERTER_LOG_LEVEL", "WARNING").strip().upper() or "WARNING"
API_HOST = os.getenv("RECORD_CONVERTER_API_HOST", "127.0.0.1")
API_PORT = _int_setting("RECORD_CONVERTER_API_PORT", 8000, 1, 65535)


def configure_logging(level: Optional[str] = None) -> None:
    """Send log records to stderr at the given (or configured) level.

    Raises ValueError for an unknown level name.
    """
    name = (level or LOG_LEVEL).upper()
    numeric = logging.getLevelName(name)
    if not isinstance(numeric, int):
        raise ValueError("Unknown log level '{}'".format(name))
    logging.basicConfig(
        level=numeric,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
