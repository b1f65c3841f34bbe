"""Pydantic models for chat messages and the inference wire format."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

Role = Literal["user", "assistant"]


class Message(BaseModel):
    """A single chat message in the conversation.

    Attributes:
        role: The speaker, either "user" or "assistant".
        content: The message text.
    """

    role: Role = Field(..., description="Message role: 'user' or 'assistant'")
    content: str = Field(..., description="The message content")


class InferenceOptions(BaseModel):
    """Sampling options forwarded to the inference server."""

    temperature: float = Field(default=0.7, ge=0.0, le=2.0)


class InferenceRequest(BaseModel):
    """Request body for the inference server's chat endpoint.

    Attributes:
        model: Model identifier known to the server.
        messages: Full conversation history, oldest first.
        stream: Always False; the reply arrives as one JSON document.
        options: Sampling options.
    """

    model: str = Field(..., min_length=1)
    messages: list[Message]
    stream: bool = False
    options: InferenceOptions = Field(default_factory=InferenceOptions)


class ReplyMessage(BaseModel):
    model_config = ConfigDict(extra="ignore")

    role: str = "assistant"
    content: str | None = None


class InferenceReply(BaseModel):
    """Response body from the chat endpoint.

    Only the reply text is used. Timing counters and other server
    fields are ignored.
    """

    model_config = ConfigDict(extra="ignore")

    model: str | None = None
    message: ReplyMessage | None = None
    done: bool | None = None
