"""
Pytest configuration and fixtures.
"""

import pytest
from types import SimpleNamespace
from fastapi.testclient import TestClient
from promptsmith import main
from promptsmith.services import llm

@pytest.fixture
def client():
    """Create a test client with a fresh rate-limit window."""
    main.rate_limit_store.clear()
    with TestClient(main.app) as test_client:
        yield test_client
    main.rate_limit_store.clear()

@pytest.fixture
def well_formed_prompt():
    """A prompt that carries every cue the checker looks for."""
    return ("You are a helpful writing coach. Context: blog post. "
            "Please make sure to include an example, step by step.")

class FakeCompletions:
    """Stands in for client.chat.completions; records calls."""

    def __init__(self, content=None, error=None):
        self.content = content
        self.error = error
        self.calls = []

    def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        message = SimpleNamespace(content=self.content)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])

@pytest.fixture
def fake_gateway(monkeypatch):
    """
    Install a fake gateway client.

    Usage: completions = fake_gateway(content="...") or fake_gateway(error=exc)
    """
    def install(content=None, error=None):
        completions = FakeCompletions(content=content, error=error)
        fake_client = SimpleNamespace(chat=SimpleNamespace(completions=completions))
        monkeypatch.setattr(llm, "_client", fake_client)
        return completions
    return install
