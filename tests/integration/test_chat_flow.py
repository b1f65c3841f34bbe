"""Integration tests for the chat widget's request/response cycle.

Drives ChatSession through the real InferenceClient. The server is an
httpx.MockTransport, or a running Ollama when OLLAMA_LIVE_TESTS is set.
"""

import json
import os
from collections.abc import Callable
from typing import Any

import httpx
import pytest

from tinychat.inference.client import InferenceClient
from tinychat.inference.config import InferenceConfig
from tinychat.ui.session import FALLBACK_REPLY, ChatSession


def live_tests_enabled() -> bool:
    """Check if tests against a running Ollama are requested."""
    return os.environ.get("OLLAMA_LIVE_TESTS", "").lower() in {"1", "true", "yes"}


requires_ollama = pytest.mark.skipif(
    not live_tests_enabled(),
    reason="OLLAMA_LIVE_TESTS not set - skipping live inference test",
)


class TestChatFlow:
    """ChatSession and InferenceClient working together."""

    async def test_conversation_builds_history(
        self,
        inference_config: InferenceConfig,
        reply_payload: Callable[[str], dict[str, Any]],
    ) -> None:
        """Two turns send growing histories and store both replies."""
        bodies: list[dict[str, Any]] = []

        def handler(request: httpx.Request) -> httpx.Response:
            body = json.loads(request.content)
            bodies.append(body)
            return httpx.Response(200, json=reply_payload(f"reply {len(bodies)}"))

        client = InferenceClient(config=inference_config, transport=httpx.MockTransport(handler))
        session = ChatSession(client=client)

        await session.send("Hi")
        await session.send("Tell me more")

        assert [m.content for m in session.messages] == [
            "Hi",
            "reply 1",
            "Tell me more",
            "reply 2",
        ]
        assert [m["content"] for m in bodies[1]["messages"]] == ["Hi", "reply 1", "Tell me more"]
        assert all(b["stream"] is False for b in bodies)

    @pytest.mark.parametrize(
        "handler",
        [
            lambda request: httpx.Response(500, text="internal error"),
            lambda request: httpx.Response(200, text="<html>not json</html>"),
        ],
    )
    async def test_server_failure_shows_fallback(
        self,
        inference_config: InferenceConfig,
        handler: Callable[[httpx.Request], httpx.Response],
    ) -> None:
        """Errors from the server surface as the fallback message."""
        client = InferenceClient(config=inference_config, transport=httpx.MockTransport(handler))
        session = ChatSession(client=client)

        await session.send("Hi")

        assert [m.role for m in session.messages] == ["user", "assistant"]
        assert session.messages[-1].content == FALLBACK_REPLY

    async def test_unreachable_server_shows_fallback(self) -> None:
        """Nothing listening on the port yields the fallback message."""
        config = InferenceConfig(base_url="http://127.0.0.1:9", timeout=5.0)
        session = ChatSession(client=InferenceClient(config=config))

        await session.send("Anyone there?")

        assert session.messages[-1].content == FALLBACK_REPLY
        assert session.is_busy is False

    @requires_ollama
    async def test_live_round_trip(self) -> None:
        """A running Ollama answers with one assistant message.

        Requires the configured model to be pulled (OLLAMA_MODEL).
        """
        session = ChatSession(client=InferenceClient())

        reply = await session.send("Say the word 'hello' and nothing else")

        assert reply is not None
        assert reply.role == "assistant"
        assert reply.content
        assert reply.content != FALLBACK_REPLY
