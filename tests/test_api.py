"""Tests for the HTTP API."""

import pytest
from fastapi.testclient import TestClient
from json_formatter.api import create_app
from json_formatter.history import InMemoryHistoryStore
from json_formatter.json_formatter import JSONFormatter


@pytest.fixture
def client(settings, ticking_clock):
    """Test client for an app with an injected formatter."""
    formatter = JSONFormatter(settings=settings,
                              history_store=InMemoryHistoryStore(clock=ticking_clock))
    with TestClient(create_app(formatter)) as test_client:
        yield test_client


class TestAPI:
    """Tests for the FastAPI application."""

    def test_health(self, client):
        """Test the health endpoint."""
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "ok"
        assert response.json()["timestamp"]

    def test_process_format(self, client):
        """Test formatting over HTTP."""
        response = client.post("/api/process", json={
            "jsonContent": '{"a":{"b":1}}',
            "operation": "format",
            "indentSize": 4,
        })

        assert response.status_code == 200
        assert response.json() == {
            "success": True,
            "result": '{\n    "a": {\n        "b": 1\n    }\n}',
            "error": None,
            "originalSize": 13,
            "processedSize": 35,
            "operation": "format",
        }

    def test_process_default_indent(self, client):
        """Test that indentSize defaults to two spaces."""
        response = client.post("/api/process", json={
            "jsonContent": '{"b":1,"a":2}',
            "operation": "sort-keys",
        })

        assert response.json()["result"] == '{\n  "a": 2,\n  "b": 1\n}'

    def test_process_invalid_json_is_not_transport_error(self, client, invalid_json):
        """Test that malformed JSON content returns 200 with success=false."""
        response = client.post("/api/process", json={
            "jsonContent": invalid_json,
            "operation": "minify",
        })

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is False
        assert body["result"] is None
        assert body["processedSize"] is None
        assert body["error"]

    def test_process_unknown_operation_rejected(self, client):
        """Test that unknown operations are rejected at the boundary."""
        response = client.post("/api/process", json={
            "jsonContent": "{}",
            "operation": "uppercase",
        })

        assert response.status_code == 422

    @pytest.mark.parametrize("indent", [0, 9])
    def test_process_indent_out_of_range_rejected(self, client, indent):
        """Test that indent sizes outside 1..8 are rejected."""
        response = client.post("/api/process", json={
            "jsonContent": "{}",
            "operation": "format",
            "indentSize": indent,
        })

        assert response.status_code == 422

    def test_validate(self, client):
        """Test validation over HTTP."""
        response = client.post("/api/validate", json={"jsonContent": '{\n  "b": }'})

        assert response.status_code == 200
        body = response.json()
        assert body["isValid"] is False
        assert body["lineNumber"] == 2
        assert body["columnNumber"] == 8

    def test_upload(self, client):
        """Test upload over HTTP."""
        content = '{"name":"test"}'
        response = client.post("/api/upload", json={
            "fileName": "test.json",
            "fileContent": content,
            "fileSize": len(content),
        })

        body = response.json()
        assert body["success"] is True
        assert body["result"] == '{\n  "name": "test"\n}'
        assert body["operation"] == "validate"

    def test_upload_oversized(self, client):
        """Test oversized uploads over HTTP."""
        response = client.post("/api/upload", json={
            "fileName": "big.json",
            "fileContent": "{}",
            "fileSize": 10_485_761,
        })

        body = response.json()
        assert body["success"] is False
        assert body["error"] == "File size exceeds maximum limit of 10MB"

    def test_history(self, client):
        """Test history lists processed requests newest first."""
        assert client.get("/api/history").json() == []

        client.post("/api/process", json={"jsonContent": '[1]', "operation": "minify"})
        client.post("/api/process", json={"jsonContent": '[2]', "operation": "format"})

        records = client.get("/api/history").json()
        assert [record["original_content"] for record in records] == ['[2]', '[1]']
        assert records[0]["operation"] == "format"
        assert records[0]["id"] > records[1]["id"]
        assert records[0]["created_at"] > records[1]["created_at"]

    def test_tree(self, client):
        """Test the tree endpoint."""
        response = client.post("/api/tree", json={"jsonContent": '[1]', "expandDepth": 0})

        body = response.json()
        assert body["success"] is True
        assert body["lines"] == ["▸ Array[1] (1 item)"]
        assert body["root"]["children"][0]["index"] == 0

    def test_tree_deep_nesting(self, client):
        """Test deeply nested input is a failed tree, not a server error."""
        response = client.post("/api/tree", json={"jsonContent": "[" * 900 + "]" * 900})

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is False
        assert "nesting depth" in body["error"]

    def test_app_creates_formatter_at_startup(self, settings):
        """Test the lifespan builds a formatter when none is injected."""
        app = create_app(settings=settings)

        with TestClient(app) as test_client:
            assert isinstance(app.state.formatter, JSONFormatter)
            assert test_client.get("/health").status_code == 200

        assert app.state.formatter is None
