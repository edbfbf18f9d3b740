"""
Shared test fixtures for textrazor-client tests.
Patches config module to avoid loading a real .env, and supplies a fake
transport so no test ever touches the network.
"""

import os
import sys

import pytest

# Add project root to path so imports work
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from tests.fixtures import TEST_API_KEY, FakeTransport  # noqa: E402


@pytest.fixture(autouse=True)
def _isolate_config(monkeypatch):
    """Ensure every test starts with a clean config state."""
    from textrazor_client import config

    monkeypatch.setattr(config, "env", {})
    monkeypatch.setattr(config, "API_KEY", "")
    monkeypatch.setattr(config, "ENDPOINT", config.DEFAULT_ENDPOINT)
    monkeypatch.setattr(config, "SECURE_ENDPOINT", config.DEFAULT_SECURE_ENDPOINT)
    monkeypatch.setattr(config, "USE_COMPRESSION", True)
    monkeypatch.setattr(config, "USE_ENCRYPTION", True)
    monkeypatch.setattr(config, "HTTP_TIMEOUT_SECONDS", None)
    monkeypatch.setattr(config, "HTTP_MAX_RESPONSE_BYTES", 5_000_000)
    monkeypatch.setattr(config, "HTTP_LOG_ENABLED", False)
    monkeypatch.setattr(config, "HTTP_LOG_SAMPLE_RATE", 1.0)
    monkeypatch.setattr(config, "MCP_RESPONSE_MODE", "legacy")


@pytest.fixture
def make_client():
    """Factory: make_client(status=200, body="", fail=False, **client_kwargs)."""
    from textrazor_client.client import TextRazorClient

    def _make(status=200, body="", fail=False, headers=None, **kwargs):
        transport = FakeTransport(status=status, body=body, fail=fail, headers=headers)
        kwargs.setdefault("api_key", TEST_API_KEY)
        return TextRazorClient(transport=transport, **kwargs), transport

    return _make
