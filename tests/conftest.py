"""Pytest fixtures for PatrolLink tests."""

from __future__ import annotations

import uuid

import pytest
from fastapi.testclient import TestClient

from nlp.command_parser import CommandParser
from nlp.context import ContextMemory


@pytest.fixture
def context() -> ContextMemory:
    """A fresh session context."""
    return ContextMemory()


@pytest.fixture
def parser() -> CommandParser:
    return CommandParser()


@pytest.fixture
def session_id() -> str:
    """Unique session id so tests never share the service singleton's state."""
    return f"test-{uuid.uuid4().hex[:8]}"


@pytest.fixture
def client() -> TestClient:
    """Create a test client for the FastAPI app."""
    from backend.server import app
    return TestClient(app)
