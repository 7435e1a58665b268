"""Tests for the upload gate."""

import logging
import pytest
from json_formatter.parser import JSONParser
from json_formatter.types import Operation
from json_formatter.upload_gate import UploadGate


class RecordingParser(JSONParser):
    """Parser that counts parse calls."""

    def __init__(self):
        super().__init__()
        self.calls = 0

    def parse(self, json_string):
        self.calls += 1
        return super().parse(json_string)


class TestUploadGate:
    """Tests for UploadGate class."""

    valid_content = '{"name":"test","value":123,"nested":{"key":"value"}}'
    formatted_content = '{\n  "name": "test",\n  "value": 123,\n  "nested": {\n    "key": "value"\n  }\n}'

    def setup_method(self):
        """Set up test fixtures."""
        self.parser = RecordingParser()
        self.gate = UploadGate(parser=self.parser)

    def test_accepts_valid_file(self):
        """Test a valid upload is returned formatted with two spaces."""
        result = self.gate.accept_upload("test.json", self.valid_content, len(self.valid_content))

        assert result.success
        assert result.result_text == self.formatted_content
        assert result.error_message is None
        assert result.original_size == len(self.valid_content)
        assert result.processed_size == len(self.formatted_content)
        assert result.operation == Operation.VALIDATE

    def test_upload_always_uses_two_space_indent(self):
        """Test already-indented uploads are normalized to two spaces."""
        content = '{\n        "a": [\n                1\n        ]\n}'
        result = self.gate.accept_upload("wide.json", content, len(content))

        assert result.result_text == '{\n  "a": [\n    1\n  ]\n}'

    def test_rejects_oversized_file_before_parsing(self):
        """Test declared sizes over 10MB are rejected without parsing."""
        content = "x" * 32
        result = self.gate.accept_upload("large.json", content, 11 * 1024 * 1024)

        assert not result.success
        assert result.result_text is None
        assert result.error_message == "File size exceeds maximum limit of 10MB"
        assert result.processed_size is None
        assert result.original_size == len(content)
        assert result.operation == Operation.VALIDATE
        assert self.parser.calls == 0

    def test_rejects_oversized_valid_json(self):
        """Test the size limit applies regardless of content validity."""
        gate = UploadGate(max_upload_bytes=4, parser=self.parser)
        result = gate.accept_upload("small.json", '{"a":1}', 7)

        assert not result.success
        assert "exceeds maximum limit" in result.error_message
        assert self.parser.calls == 0

    def test_accepts_size_exactly_at_limit(self):
        """Test a declared size equal to the limit is accepted."""
        gate = UploadGate(max_upload_bytes=7)
        result = gate.accept_upload("edge.json", '{"a":1}', 7)

        assert result.success

    def test_rejects_size_mismatch_before_parsing(self):
        """Test mismatched declared size is rejected without parsing."""
        result = self.gate.accept_upload(
            "test.json", self.valid_content, len(self.valid_content) + 10
        )

        assert not result.success
        assert result.result_text is None
        assert result.error_message == "File size mismatch: declared size does not match content length"
        assert result.original_size == len(self.valid_content)
        assert result.processed_size is None
        assert self.parser.calls == 0

    def test_invalid_json_content(self):
        """Test invalid JSON gets a prefixed parse error."""
        content = '{"name":"test","value":123,}'
        result = self.gate.accept_upload("invalid.json", content, len(content))

        assert not result.success
        assert result.result_text is None
        assert result.error_message.startswith("JSON Parse Error: ")
        assert len(result.error_message) > len("JSON Parse Error: ")
        assert result.original_size == len(content)
        assert result.processed_size is None
        assert self.parser.calls == 1

    def test_empty_file(self):
        """Test an empty upload is a parse failure."""
        result = self.gate.accept_upload("empty.json", "", 0)

        assert not result.success
        assert result.error_message == "JSON Parse Error: No JSON content provided"

    def test_logs_upload(self, caplog):
        """Test that uploads are logged with their file name."""
        with caplog.at_level(logging.INFO):
            self.gate.accept_upload("named.json", "{}", 2)

        assert "named.json" in caplog.text

    def test_invalid_limit(self):
        """Test that a non-positive size limit is rejected."""
        with pytest.raises(ValueError):
            UploadGate(max_upload_bytes=0)
