import pytest
from fastapi.testclient import TestClient

from aushadh_ai.api.deps import get_gemini_client
from aushadh_ai.main import app


class FakeGeminiClient:
    """Stands in for GeminiClient: returns a canned response or raises."""

    def __init__(self, response=None, error=None):
        self.response = response if response is not None else {}
        self.error = error
        self.calls = []

    def generate_content(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        return self.response


def text_response(text):
    return {"candidates": [{"content": {"role": "model", "parts": [{"text": text}]}}]}


@pytest.fixture
def fake_client():
    def _make(response=None, error=None):
        return FakeGeminiClient(response=response, error=error)
    return _make


@pytest.fixture
def gemini_text():
    return text_response


@pytest.fixture
def api():
    """TestClient factory; the given fake replaces the real Gemini client."""
    def _make(fake):
        app.dependency_overrides[get_gemini_client] = lambda: fake
        return TestClient(app)

    yield _make
    app.dependency_overrides.clear()
