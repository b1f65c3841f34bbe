"""Pydantic models for chat messages and inference requests.

Models:
    - Message: Individual message in the conversation
    - InferenceRequest: Body sent to the inference server
    - InferenceReply: Body returned by the inference server
"""

from tinychat.models.schemas import (
    InferenceOptions,
    InferenceReply,
    InferenceRequest,
    Message,
    ReplyMessage,
    Role,
)

__all__ = [
    "InferenceOptions",
    "InferenceReply",
    "InferenceRequest",
    "Message",
    "ReplyMessage",
    "Role",
]
