"""Pytest fixtures and shared test configuration.

Fixtures:
    - clean_env: Removes OLLAMA_* variables so defaults apply
    - inference_config: Config pointing at a fake server
    - reply_payload: Factory for inference server response bodies
    - async_client: HTTPX client for API testing
"""

from collections.abc import AsyncGenerator, Callable
from typing import Any

import pytest
from httpx import ASGITransport, AsyncClient

from tinychat.api import app
from tinychat.inference.config import InferenceConfig

OLLAMA_ENV_VARS = ("OLLAMA_BASE_URL", "OLLAMA_MODEL", "OLLAMA_TEMPERATURE", "OLLAMA_TIMEOUT")


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Remove inference environment variables for the test.

    Returns:
        The monkeypatch fixture, for setting variables afterwards.
    """
    for name in OLLAMA_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def inference_config() -> InferenceConfig:
    """Return a config aimed at a fake inference server."""
    return InferenceConfig(
        base_url="http://ollama.test",
        model_name="tinyllama",
        temperature=0.7,
        timeout=None,
    )


@pytest.fixture
def reply_payload() -> Callable[[str], dict[str, Any]]:
    """Build a response body shaped like Ollama's /api/chat reply."""

    def _build(content: str) -> dict[str, Any]:
        return {
            "model": "tinyllama",
            "created_at": "2024-01-01T00:00:00Z",
            "message": {"role": "assistant", "content": content},
            "done": True,
            "total_duration": 123456,
            "eval_count": 7,
        }

    return _build


@pytest.fixture
async def async_client() -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client for API testing.

    Yields:
        Configured AsyncClient for making test requests.
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
