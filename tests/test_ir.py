"""Unit tests for the Record IR and its declared field list.

WHY: Every codec trusts Record to reject values no format could
reproduce. A Record that silently accepted a bool id or a string value
would break round trips far from the cause.
"""

import pytest

from record_converter.core.ir import (
    FIELD_NAMES,
    RECORD_FIELDS,
    U32_MAX,
    WRAPPER_KEY,
    FieldKind,
    Record,
)


class TestFieldDeclaration:

    def test_field_order(self):
        assert FIELD_NAMES == ("id", "name", "value", "active")

    def test_field_kinds(self):
        kinds = {spec.name: spec.kind for spec in RECORD_FIELDS}
        assert kinds == {
            "id": FieldKind.UINT,
            "name": FieldKind.TEXT,
            "value": FieldKind.FLOAT,
            "active": FieldKind.BOOL,
        }

    def test_wrapper_key(self):
        assert WRAPPER_KEY == "records"


class TestRecordValidation:

    def test_valid_record(self):
        record = Record(id=1, name="Alice", value=12.34, active=True)
        assert record.id == 1
        assert record.value == 12.34

    def test_int_value_widened_to_float(self):
        record = Record(id=1, name="A", value=12, active=True)
        assert isinstance(record.value, float)
        assert record.value == 12.0

    def test_id_bounds(self):
        assert Record(id=0, name="", value=0.0, active=False).id == 0
        assert Record(id=U32_MAX, name="", value=0.0, active=False).id == U32_MAX

    @pytest.mark.parametrize("bad_id", [-1, U32_MAX + 1])
    def test_id_out_of_range(self, bad_id):
        with pytest.raises(ValueError):
            Record(id=bad_id, name="x", value=1.0, active=True)

    @pytest.mark.parametrize("bad_id", [True, 1.0, "1", None])
    def test_id_wrong_type(self, bad_id):
        with pytest.raises(TypeError):
            Record(id=bad_id, name="x", value=1.0, active=True)

    def test_name_must_be_str(self):
        with pytest.raises(TypeError):
            Record(id=1, name=5, value=1.0, active=True)

    @pytest.mark.parametrize("bad_value", [True, "1.0", None])
    def test_value_wrong_type(self, bad_value):
        with pytest.raises(TypeError):
            Record(id=1, name="x", value=bad_value, active=True)

    @pytest.mark.parametrize("bad_active", [1, "true", None])
    def test_active_must_be_bool(self, bad_active):
        with pytest.raises(TypeError):
            Record(id=1, name="x", value=1.0, active=bad_active)

    def test_records_are_immutable(self):
        record = Record(id=1, name="x", value=1.0, active=True)
        with pytest.raises(AttributeError):
            record.name = "y"


class TestRecordMapping:

    def test_to_dict_uses_declared_order(self):
        record = Record(id=1, name="Alice", value=12.34, active=True)
        assert list(record.to_dict()) == ["id", "name", "value", "active"]
        assert record.to_dict() == {"id": 1, "name": "Alice", "value": 12.34, "active": True}

    def test_from_mapping_ignores_key_order(self):
        data = {"active": False, "value": 2.5, "name": "Bob", "id": 2}
        assert Record.from_mapping(data) == Record(id=2, name="Bob", value=2.5, active=False)

    def test_from_mapping_missing_field(self):
        with pytest.raises(KeyError):
            Record.from_mapping({"id": 1, "name": "x", "value": 1.0})
