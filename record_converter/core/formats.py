"""Closed catalog of supported text formats.

WHY: Every decode/encode call, error message and CLI flag refers to a
format. A single enum keeps the set closed and gives each member one
canonical display name for diagnostics.

HOW: Format is a plain Enum whose values are the lowercase keys used in
CLI flags and HTTP payloads. ``display_name`` maps member → name and
``from_name()`` maps name → member, so the mapping is bidirectional.

RULES:
- Exactly four members: JSON, YAML, CSV, TOML
- Members are compared by identity, never by display name
- Lookup by name is case-insensitive and accepts the aliases in _ALIASES
- Display names are only for humans (logs, errors, help text)
"""

from __future__ import annotations

from enum import Enum


class Format(Enum):
    """A supported text encoding for record collections."""

    JSON = "json"
    YAML = "yaml"
    CSV = "csv"
    TOML = "toml"

    @property
    def display_name(self) -> str:
        """Canonical human-readable name, e.g. ``"YAML"``."""
        return _DISPLAY_NAMES[self]

    def __str__(self) -> str:
        return self.display_name

    @classmethod
    def from_name(cls, name: str) -> Format:
        """Resolve a format key, display name or alias to a Format.

        RULES:
        - Case-insensitive, surrounding whitespace ignored
        - Accepts keys ("json"), display names ("JSON") and aliases ("yml")
        - Raises ValueError listing the valid names when nothing matches
        """
        key = name.strip().lower()
        key = _ALIASES.get(key, key)
        for member in cls:
            if member.value == key:
                return member
        raise ValueError(
            "Unknown format '{}'. Available formats: {}".format(
                name, ", ".join(m.value for m in cls)
            )
        )

    @classmethod
    def from_extension(cls, extension: str) -> Format:
        """Resolve a file extension (with or without the dot) to a Format."""
        ext = extension.lower()
        if not ext.startswith("."):
            ext = "." + ext
        if ext not in _EXTENSIONS:
            raise ValueError(
                "Cannot infer format from extension '{}'. Known extensions: {}".format(
                    extension, ", ".join(sorted(_EXTENSIONS))
                )
            )
        return _EXTENSIONS[ext]


_DISPLAY_NAMES: dict[Format, str] = {
    Format.JSON: "JSON",
    Format.YAML: "YAML",
    Format.CSV: "CSV",
    Format.TOML: "TOML",
}

_ALIASES: dict[str, str] = {
    "yml": "yaml",
    "toml-like": "toml",
}

_EXTENSIONS: dict[str, Format] = {
    ".json": Format.JSON,
    ".yaml": Format.YAML,
    ".yml": Format.YAML,
    ".csv": Format.CSV,
    ".toml": Format.TOML,
}
