"""HTTP client for the local inference server's chat endpoint.

Sends the full conversation in one non-streaming request and returns the
reply text. Every failure mode (connection refused, non-2xx status,
malformed body) is raised as a single InferenceError so callers have one
thing to catch.
"""

import logging
from collections.abc import Sequence

import httpx
from pydantic import ValidationError

from tinychat.inference.config import InferenceConfig, get_inference_config
from tinychat.models.schemas import (
    InferenceOptions,
    InferenceReply,
    InferenceRequest,
    Message,
)

logger = logging.getLogger(__name__)

CHAT_PATH = "/api/chat"
NO_RESPONSE = "(no response)"


class InferenceError(Exception):
    """Raised when a chat request to the inference server fails."""

    pass


class InferenceClient:
    """Client for the inference server's chat endpoint.

    Opens one httpx.AsyncClient per request. A custom transport can be
    injected, which tests use to stand in for the server.
    """

    def __init__(
        self,
        config: InferenceConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            config: Optional inference configuration.
                    Loads from environment if not provided.
            transport: Optional httpx transport override.
        """
        self._config = config or get_inference_config()
        self._transport = transport

    @property
    def config(self) -> InferenceConfig:
        return self._config

    @property
    def chat_url(self) -> str:
        return f"{self._config.base_url}{CHAT_PATH}"

    def build_request(self, messages: Sequence[Message]) -> InferenceRequest:
        """Build the request body for a conversation.

        Args:
            messages: Conversation history, oldest first, ending with
                      the message being sent.

        Returns:
            InferenceRequest ready to serialize.
        """
        return InferenceRequest(
            model=self._config.model_name,
            messages=list(messages),
            stream=False,
            options=InferenceOptions(temperature=self._config.temperature),
        )

    async def chat(self, messages: Sequence[Message]) -> str:
        """Send the conversation and return the assistant's reply.

        Args:
            messages: Conversation history including the new user message.

        Returns:
            The reply text, or "(no response)" when the server sent none.

        Raises:
            InferenceError: On network failure, non-success status or an
                            unparsable response body.
        """
        body = self.build_request(messages).model_dump(mode="json")

        async with httpx.AsyncClient(
            timeout=self._config.timeout,
            transport=self._transport,
        ) as client:
            try:
                response = await client.post(
                    self.chat_url,
                    json=body,
                    headers={"Content-Type": "application/json"},
                )
                response.raise_for_status()
            except httpx.HTTPStatusError as e:
                raise InferenceError(
                    f"Inference request failed: HTTP {e.response.status_code}"
                ) from e
            except httpx.HTTPError as e:
                raise InferenceError(f"Inference request failed: {e}") from e

        try:
            reply = InferenceReply.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            raise InferenceError(f"Invalid response from inference server: {e}") from e

        content = (reply.message.content if reply.message else None) or ""
        logger.debug(f"Received reply from {self._config.model_name} ({len(content)} chars)")
        return content or NO_RESPONSE


# Module-level singleton instance
_inference_client: InferenceClient | None = None


def get_inference_client() -> InferenceClient:
    """Get or create the global inference client.

    Returns:
        The InferenceClient instance.
    """
    global _inference_client
    if _inference_client is None:
        _inference_client = InferenceClient()
    return _inference_client
