"""Pytest configuration and fixtures."""

import pytest
import tempfile
import json
from datetime import datetime, timedelta, timezone
from pathlib import Path

from json_formatter.config import Settings
from json_formatter.history import InMemoryHistoryStore
from json_formatter.json_formatter import JSONFormatter


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        yield Path(tmp_dir)


@pytest.fixture
def settings():
    """Settings independent of the environment, with in-memory history."""
    return Settings(
        default_indent=2,
        max_upload_bytes=10 * 1024 * 1024,
        expand_depth=2,
        history_enabled=True,
        history_path=None,
        cors_origins=["*"],
    )


@pytest.fixture
def history_store():
    """In-memory history store."""
    return InMemoryHistoryStore()


@pytest.fixture
def formatter(settings, history_store):
    """JSONFormatter wired to an in-memory history store."""
    return JSONFormatter(settings=settings, history_store=history_store)


@pytest.fixture
def ticking_clock():
    """Clock returning strictly increasing timestamps one second apart."""
    start = datetime(2024, 1, 1, tzinfo=timezone.utc)
    ticks = {"count": 0}

    def clock():
        ticks["count"] += 1
        return start + timedelta(seconds=ticks["count"])

    return clock


@pytest.fixture
def sample_document():
    """Sample nested JSON document for testing."""
    return {
        "name": "test",
        "value": 123,
        "nested": {
            "zebra": True,
            "apple": None,
            "items": ["c", "a", "b"]
        },
        "records": [
            {"id": 2, "label": "second"},
            {"label": "first", "id": 1}
        ]
    }


@pytest.fixture
def sample_json(sample_document):
    """Compact JSON text of the sample document."""
    return json.dumps(sample_document, separators=(',', ':'))


@pytest.fixture
def invalid_json():
    """JSON text with a trailing comma."""
    return '{"a":1,}'
