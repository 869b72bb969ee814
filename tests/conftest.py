# tests/conftest.py
"""
Pytest configuration and fixtures for the test suite
"""

import asyncio

import pytest

from mongo_connect.config.settings import get_settings
from mongo_connect.resources.mongo.client import BaseMongoDriver


class RecordingDriver(BaseMongoDriver):
    """Driver stub that records every call and returns or raises what it is told to."""

    def __init__(self, handle=None, error=None, handle_factory=None):
        self.handle = handle if handle is not None else object()
        self.error = error
        self.handle_factory = handle_factory
        self.calls = []

    async def connect(self, uri, db_name=None):
        self.calls.append({"uri": uri, "db_name": db_name})
        # Let other pending connects start before this one finishes
        await asyncio.sleep(0)
        if self.error is not None:
            raise self.error
        if self.handle_factory is not None:
            return self.handle_factory()
        return self.handle


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch, tmp_path):
    """Run every test without MONGODB_URI, outside any real .env, with a fresh settings cache."""
    monkeypatch.delenv("MONGODB_URI", raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def driver():
    """A driver stub that succeeds."""
    return RecordingDriver()
