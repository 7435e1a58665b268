"""Tests for JSON parser."""

import pytest
from json_formatter.parser import JSONParser, EMPTY_INPUT_MESSAGE, MAX_NESTING_DEPTH, nesting_depth
from json_formatter.types import ErrorType, JSONParseError, ProcessingError


class TestJSONParser:
    """Tests for JSONParser class."""

    def setup_method(self):
        """Set up test fixtures."""
        self.parser = JSONParser()

    def test_parse_object(self):
        """Test parsing a JSON object keeps key order."""
        data = self.parser.parse('{"b": 1, "a": {"c": [1, 2]}}')

        assert data == {"b": 1, "a": {"c": [1, 2]}}
        assert list(data.keys()) == ["b", "a"]

    def test_parse_scalar_roots(self):
        """Test that scalar root values are accepted."""
        assert self.parser.parse('"text"') == "text"
        assert self.parser.parse('42') == 42
        assert self.parser.parse('true') is True
        assert self.parser.parse('null') is None

    def test_parse_preserves_large_integers(self):
        """Test that integers beyond double precision are kept exactly."""
        assert self.parser.parse('12345678901234567890') == 12345678901234567890

    def test_parse_invalid_json_syntax(self):
        """Test parsing invalid JSON syntax."""
        with pytest.raises(JSONParseError) as exc_info:
            self.parser.parse('{"users": {"name": "Alice"}')

        assert exc_info.value.error_type == ErrorType.SYNTAX
        assert exc_info.value.position is not None
        assert str(exc_info.value)

    def test_parse_error_is_processing_error(self):
        """Test that parse errors share the ProcessingError base."""
        with pytest.raises(ProcessingError):
            self.parser.parse('{"a":1,}')

    @pytest.mark.parametrize("content", ["", "   ", "\n\t "])
    def test_parse_empty_input(self, content):
        """Test parsing empty or whitespace-only input."""
        with pytest.raises(JSONParseError) as exc_info:
            self.parser.parse(content)

        assert exc_info.value.error_type == ErrorType.EMPTY
        assert exc_info.value.position is None
        assert str(exc_info.value) == EMPTY_INPUT_MESSAGE

    @pytest.mark.parametrize("constant", ["NaN", "Infinity", "-Infinity"])
    def test_parse_rejects_non_standard_constants(self, constant):
        """Test that NaN and Infinity are rejected."""
        with pytest.raises(JSONParseError, match=constant.lstrip('-')):
            self.parser.parse(f'{{"value": {constant}}}')

    def test_parse_deep_nesting_error(self):
        """Test that excessive nesting is reported as a parse error."""
        content = "[" * 100000 + "]" * 100000

        with pytest.raises(JSONParseError, match="nesting depth"):
            self.parser.parse(content)

    def test_parse_nesting_limit(self):
        """Test documents are accepted up to the nesting limit and rejected past it."""
        at_limit = "[" * MAX_NESTING_DEPTH + "]" * MAX_NESTING_DEPTH
        past_limit = "[" * 900 + "]" * 900

        assert nesting_depth(self.parser.parse(at_limit)) == MAX_NESTING_DEPTH
        with pytest.raises(JSONParseError, match="nesting depth"):
            self.parser.parse(past_limit)

    @pytest.mark.parametrize("number", ["1e400", "-1e400", "1.5E+999"])
    def test_parse_rejects_out_of_range_numbers(self, number):
        """Test that numbers beyond the double range are rejected."""
        with pytest.raises(JSONParseError, match="out of range"):
            self.parser.parse(f'[{number}]')

    def test_parse_keeps_largest_double(self):
        """Test that numbers close to the double limit still parse."""
        assert self.parser.parse('[1.7976931348623157e308]') == [1.7976931348623157e308]

    def test_nesting_depth(self):
        """Test maximum depth calculation."""
        assert nesting_depth({"a": {"b": {"c": 1}}}) == 3
        assert nesting_depth([[["x"]]]) == 3
        assert nesting_depth([1, {"a": []}]) == 3
        assert nesting_depth("x") == 0
