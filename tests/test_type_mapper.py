"""Unit tests for JSON sample type inference."""
from decimal import Decimal

import pytest
from databuilder.inference.type_mapper import (
    backend_to_frontend,
    infer_type,
    is_date_time,
    is_uuid,
)
from databuilder.inference.types import TypeKind


class TestStringInference:
    """Test string subtype detection."""

    def test_plain_and_empty_strings(self):
        for value in ("hello", ""):
            t = infer_type(value)
            assert t.kind == TypeKind.STRING
            assert (t.backend, t.frontend) == ("string", "string")

    @pytest.mark.parametrize("value", [
        "2024-01-15T10:30:00Z",
        "2024-01-15T10:30:00.123456789+05:30",
        "2024-01-15 10:30",
        "2024-01-15T10:30:00-0800",
        "2024-12-31",
    ])
    def test_iso_date_times(self, value):
        t = infer_type(value)
        assert t.kind == TypeKind.DATE_TIME
        assert (t.backend, t.frontend) == ("DateTime", "Date")

    @pytest.mark.parametrize("value", [
        "2024-13-45",
        "2024-01-15T25:00:00",
        "15/01/2024",
        "January 15, 2024",
        "20240115",
        "2024-01-15T10:30:00 trailing",
        "2024-01-15\n",
        "2024-01-15T10:30:00Z\n",
    ])
    def test_non_iso_strings_are_not_dates(self, value):
        assert not is_date_time(value)
        assert infer_type(value).kind == TypeKind.STRING

    def test_uuid_has_no_frontend_primitive(self):
        t = infer_type("550e8400-e29b-41d4-a716-446655440000")
        assert t.kind == TypeKind.UNIQUE_IDENTIFIER
        assert t.backend == "Guid"
        assert t.frontend == "string"

    def test_uuid_grammar_is_canonical_only(self):
        assert is_uuid("{550E8400-E29B-41D4-A716-446655440000}")
        assert not is_uuid("550e8400e29b41d4a716446655440000")
        assert not is_uuid("{550e8400-e29b-41d4-a716-446655440000")
        assert not is_uuid("550e8400-e29b-41d4-a716-44665544000g")
        assert not is_uuid("550e8400-e29b-41d4-a716-446655440000\n")


class TestNumberInference:
    """Test numeric width and fraction detection."""

    @pytest.mark.parametrize("value,kind,backend", [
        (10, TypeKind.INTEGER, "int"),
        (-2147483648, TypeKind.INTEGER, "int"),
        (2147483648, TypeKind.WIDE_INTEGER, "long"),
        (9223372036854775807, TypeKind.WIDE_INTEGER, "long"),
        (9223372036854775808, TypeKind.INTEGER, "int"),
        (Decimal("99.99"), TypeKind.DECIMAL, "decimal"),
        (99.99, TypeKind.DECIMAL, "decimal"),
        (10.0, TypeKind.INTEGER, "int"),
        (Decimal("10.0"), TypeKind.INTEGER, "int"),
        (Decimal("1E+3"), TypeKind.INTEGER, "int"),
        (Decimal("5E+9"), TypeKind.WIDE_INTEGER, "long"),
    ])
    def test_numbers(self, value, kind, backend):
        t = infer_type(value)
        assert t.kind == kind
        assert t.backend == backend
        assert t.frontend == "number"


class TestOtherInference:
    """Test booleans, null, arrays and objects."""

    def test_booleans(self):
        for value in (True, False):
            t = infer_type(value)
            assert t.kind == TypeKind.BOOLEAN
            assert (t.backend, t.frontend) == ("bool", "boolean")

    def test_null_is_optional_string(self):
        t = infer_type(None)
        assert t.kind == TypeKind.STRING
        assert t.nullable is True
        assert t.backend == "string?"
        assert t.frontend == "string | null"

    def test_object_is_untyped_map(self):
        t = infer_type({"key": "value", "nested": {"deep": [1, 2]}})
        assert t.kind == TypeKind.OBJECT_MAP
        assert t.backend == "Dictionary<string, object>"
        assert t.frontend == "Record<string, any>"
        assert t.element is None

    @pytest.mark.parametrize("value,backend,frontend", [
        ([], "List<object>", "any[]"),
        (["a", "b"], "List<string>", "string[]"),
        ([1, 2], "List<int>", "number[]"),
        ([{"a": 1}], "List<Dictionary<string, object>>", "Record<string, any>[]"),
        ([[1]], "List<List<int>>", "number[][]"),
        ([None], "List<string?>", "(string | null)[]"),
    ])
    def test_arrays(self, value, backend, frontend):
        t = infer_type(value)
        assert t.kind == TypeKind.LIST
        assert t.backend == backend
        assert t.frontend == frontend

    def test_mixed_arrays_use_first_element(self):
        assert infer_type([1, "two", None]).backend == "List<int>"

    @pytest.mark.parametrize("value", [
        "text", "2024-01-15T10:30:00Z", 42, Decimal("1.5"), True, None, [], ["a"], {"k": 1},
    ])
    def test_inference_is_deterministic(self, value):
        assert infer_type(value) == infer_type(value)


class TestBackendToFrontend:
    """Test backend type name translation."""

    @pytest.mark.parametrize("backend,frontend", [
        ("string", "string"),
        ("int", "number"),
        ("long", "number"),
        ("double", "number"),
        ("decimal", "number"),
        ("float", "number"),
        ("bool", "boolean"),
        ("DateTime", "Date"),
        ("DateOnly", "Date"),
        ("TimeOnly", "string"),
        ("Guid", "string"),
        ("object", "any"),
        ("Dictionary<string, object>", "Record<string, any>"),
        ("List<int>", "number[]"),
        ("List<List<string>>", "string[][]"),
        ("int[]", "number[]"),
        ("string?", "string | null"),
        ("List<string?>", "(string | null)[]"),
        ("Widget", "any"),
    ])
    def test_mapping(self, backend, frontend):
        assert backend_to_frontend(backend) == frontend

    def test_agrees_with_inferred_descriptors(self):
        for value in ("x", 1, Decimal("2.5"), True, None, ["a"], {"k": 1}, "2024-01-15"):
            t = infer_type(value)
            assert backend_to_frontend(t.backend) == t.frontend
