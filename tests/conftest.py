# -*- coding: utf-8 -*-
"""
Pytest configuration and fixtures.
"""
import pytest
from fastapi.testclient import TestClient

from codefree.api import app
from codefree.config import settings
from codefree.fenced_code import FencedCodeStripper
from codefree.front_matter import FrontMatterStripper
from codefree.inline_code import InlineCodeStripper
from codefree.pipeline import CodeFreePipeline


class AuthenticatedTestClient(TestClient):
    """Test client with API key authentication."""

    def __init__(self, *args, api_key: str = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.api_key = api_key or settings.API_KEY

    def request(self, method, url, **kwargs):
        headers = kwargs.get("headers") or {}
        if self.api_key:
            headers["X-API-Key"] = self.api_key
        kwargs["headers"] = headers
        return super().request(method, url, **kwargs)


@pytest.fixture
def client():
    """FastAPI test client with API key."""
    return AuthenticatedTestClient(app, raise_server_exceptions=False)


@pytest.fixture
def unauthenticated_client():
    """FastAPI test client without authentication."""
    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture
def api_key(monkeypatch):
    """Enable API key authentication for the duration of a test."""
    monkeypatch.setattr(settings, "API_KEY", "test-key")
    return "test-key"


@pytest.fixture
def front_matter_stripper():
    return FrontMatterStripper()


@pytest.fixture
def fenced_code_stripper():
    return FencedCodeStripper()


@pytest.fixture
def inline_code_stripper():
    return InlineCodeStripper()


@pytest.fixture
def pipeline():
    return CodeFreePipeline()


@pytest.fixture
def sample_document():
    """Document mixing front matter, a fenced block and inline code."""
    return (
        '---\nnum: 1\nstring: "string"\nlist:\n  - 1\n  - 2\n---\n'
        "text\n"
        "```ts\ncode\n```\n"
        "text`code`text\n"
    )
