"""Shared test fixtures for the record_converter test suite.

WHY: Most test modules need the same sample records and the same sample
documents. Centralizing them here keeps every test on identical data.

HOW: Plain module-level constants hold the canonical sample (the three
records used throughout the docs) and the matching documents in each
format. Fixtures hand out fresh copies.

RULES:
- SAMPLE_RECORDS matches every SAMPLE_* document exactly
- TRICKY_RECORDS exercises quoting, unicode, control characters,
  line-break look-alikes, a cell past the csv module's default field
  limit and numeric extremes; all finite floats
"""

from typing import List

import pytest

from record_converter.core.ir import U32_MAX, Record


SAMPLE_RECORDS: List[Record] = [
    Record(id=1, name="Alice", value=12.34, active=True),
    Record(id=2, name="Bob", value=56.78, active=False),
    Record(id=3, name="Charlie", value=99.0, active=True),
]

TRICKY_RECORDS: List[Record] = [
    Record(id=0, name="", value=0.0, active=False),
    Record(id=U32_MAX, name="O'Brien, Jr.", value=-0.5, active=True),
    Record(id=7, name='Say "hi"', value=1e-300, active=False),
    Record(id=8, name="Zoë 🚀", value=1e20, active=True),
    Record(id=9, name="multi\nline", value=0.1 + 0.2, active=False),
    Record(id=10, name="true", value=123456789.123456789, active=True),
    Record(id=11, name="  padded  ", value=-2.5e-7, active=False),
    Record(id=12, name="# not a comment", value=3.0, active=True),
    Record(id=13, name="a\rb\r\nc", value=4.0, active=False),
    Record(id=14, name="\x1b[0m\x7f", value=5.0, active=True),
    Record(id=15, name="nel\x85 ls\u2028ps\u2029", value=6.0, active=False),
    Record(id=16, name="x" * 200_000, value=7.0, active=True),
]

SAMPLE_JSON = """[
    { "id": 1, "name": "Alice", "value": 12.34, "active": true },
    { "id": 2, "name": "Bob", "value": 56.78, "active": false },
    { "id": 3, "name": "Charlie", "value": 99.0, "active": true }
]"""

SAMPLE_YAML = """\
- id: 1
  name: Alice
  value: 12.34
  active: true
- id: 2
  name: Bob
  value: 56.78
  active: false
- id: 3
  name: Charlie
  value: 99.0
  active: true
"""

SAMPLE_CSV = """\
id,name,value,active
1,Alice,12.34,true
2,Bob,56.78,false
3,Charlie,99.0,true
"""

SAMPLE_TOML = """\
[[records]]
id = 1
name = "Alice"
value = 12.34
active = true

[[records]]
id = 2
name = "Bob"
value = 56.78
active = false

[[records]]
id = 3
name = "Charlie"
value = 99.0
active = true
"""


@pytest.fixture
def sample_records():
    """The three canonical sample records."""
    return list(SAMPLE_RECORDS)


@pytest.fixture
def tricky_records():
    """Records whose text and numbers stress quoting and float precision."""
    return list(TRICKY_RECORDS)
