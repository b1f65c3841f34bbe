"""Per-page chat state: message history, busy flag and panel visibility."""

import logging
from collections.abc import Callable

from tinychat.inference.client import (
    InferenceClient,
    InferenceError,
    get_inference_client,
)
from tinychat.models.schemas import Message

logger = logging.getLogger(__name__)

FALLBACK_REPLY = "Sorry — connection error. Is Ollama running?"


class ChatSession:
    """Manages chat state for one page load.

    History is append-only while the page lives and starts empty on reload.
    At most one request is outstanding; input arriving while busy is dropped.
    """

    def __init__(self, client: InferenceClient | None = None) -> None:
        self.messages: list[Message] = []
        self.is_busy: bool = False
        self.is_open: bool = False
        self._client = client

    @property
    def client(self) -> InferenceClient:
        if self._client is None:
            self._client = get_inference_client()
        return self._client

    def toggle(self) -> bool:
        self.is_open = not self.is_open
        return self.is_open

    def can_send(self, text: str | None) -> bool:
        return bool(text and text.strip()) and not self.is_busy

    def add_message(self, role: str, content: str) -> Message:
        message = Message(role=role, content=content)
        self.messages.append(message)
        return message

    async def send(
        self,
        text: str | None,
        on_update: Callable[[], None] | None = None,
    ) -> Message | None:
        """Send user text and append the assistant's answer.

        Args:
            text: Raw input. Surrounding whitespace is stripped.
            on_update: Called once the user message is appended and the
                       session is busy, and again after the reply lands.

        Returns:
            The appended assistant message, or None when nothing was sent
            because the input was blank or a request is already in flight.
        """
        if not self.can_send(text):
            return None

        self.add_message("user", text.strip())
        self.is_busy = True
        try:
            if on_update:
                on_update()
            reply = await self.client.chat(self.messages)
        except InferenceError as e:
            logger.error(f"Chat request failed: {e}")
            reply = FALLBACK_REPLY
        finally:
            self.is_busy = False

        message = self.add_message("assistant", reply)
        if on_update:
            on_update()
        return message

    def reset(self) -> None:
        self.messages.clear()
        self.is_busy = False
