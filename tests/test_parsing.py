import pytest
from datetime import date, datetime
from config_resolve import parse_value, ValueType, MISSING


def ok(value_type, raw):
    result = parse_value(value_type, raw)
    assert result.found, result.message
    return result.value


def rejected(value_type, raw):
    result = parse_value(value_type, raw)
    return not result.found and result.value is MISSING and result.level == 'error'


class TestInteger:
    @pytest.mark.parametrize("raw,expected", [("42", 42), ("-5", -5), ("0", 0)])
    def test_valid(self, raw, expected):
        assert ok(ValueType.INTEGER, raw) == expected

    @pytest.mark.parametrize("raw", ["007", "+5", " 5", "5 ", "1_000", "4.2", "abc", "-0"])
    def test_non_canonical(self, raw):
        assert rejected(ValueType.INTEGER, raw)


class TestFloat:
    @pytest.mark.parametrize("raw,expected", [("1.5", 1.5), ("-0.25", -0.25), ("10", 10.0), ("10.0", 10.0)])
    def test_valid(self, raw, expected):
        assert ok(ValueType.FLOAT, raw) == expected

    @pytest.mark.parametrize("raw", ["1.50", "abc", "1.5x", " 1.5", "nan", "inf", "-inf"])
    def test_non_canonical(self, raw):
        assert rejected(ValueType.FLOAT, raw)


class TestBoolean:
    def test_literals(self):
        assert ok(ValueType.BOOLEAN, "true") is True
        assert ok(ValueType.BOOLEAN, "false") is False

    @pytest.mark.parametrize("raw", ["True", "yes", "1", "on"])
    def test_other_values(self, raw):
        assert rejected(ValueType.BOOLEAN, raw)


class TestOtherTypes:
    def test_array(self):
        assert ok(ValueType.ARRAY, "a,b,,c") == ["a", "b", "", "c"]
        assert ok(ValueType.ARRAY, "single") == ["single"]

    def test_json(self):
        assert ok(ValueType.JSON, '{"a": [1, 2]}') == {"a": [1, 2]}
        assert ok(ValueType.JSON, "3") == 3
        assert rejected(ValueType.JSON, "{bad")
        assert rejected(ValueType.JSON, "[" * 100000)

    def test_string(self):
        assert ok(ValueType.STRING, "hello") == "hello"
        assert ok(ValueType.STRING, "null") is None
        assert ok(ValueType.STRING, "NULL") == "NULL"

    def test_null(self):
        assert ok(ValueType.NULL, "null") is None
        assert rejected(ValueType.NULL, "nil")

    def test_date(self):
        assert ok(ValueType.DATE, "2024-05-01") == date(2024, 5, 1)
        assert ok(ValueType.DATE, "2024-05-01T10:30:00") == datetime(2024, 5, 1, 10, 30)
        assert rejected(ValueType.DATE, "yesterday")

    def test_unknown_type(self):
        result = parse_value("decimal", "1")
        assert not result.found
        assert "Unknown config type" in result.message
