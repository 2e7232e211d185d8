"""Core model: formats, the Record IR, document schemas and errors.

WHY: The core package holds the stable heart of the converter — the
canonical Record definition and the closed set of formats. Codecs and
outer surfaces depend on it; it depends on nothing inside the package.

HOW: formats.py defines the Format enum, ir.py the Record dataclass and
its declared field list, schema.py the JSON Schemas derived from that
list, errors.py the exception taxonomy.

RULES:
- The Record dataclass and RECORD_FIELDS are the contract — change with care
- No file or network I/O anywhere in this package
- No format-specific parsing here; that belongs to the codecs
"""
