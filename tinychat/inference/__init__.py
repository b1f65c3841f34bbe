"""Inference server access for the chat widget.

Responsibilities:
    - Environment-backed configuration for the Ollama endpoint
    - Building the chat request body from the message history
    - One non-streaming POST per user message
    - Folding every failure into InferenceError

Keeps HTTP details out of the UI layer.
"""

from tinychat.inference.client import (
    InferenceClient,
    InferenceError,
    get_inference_client,
)
from tinychat.inference.config import InferenceConfig, get_inference_config

__all__ = [
    "InferenceClient",
    "InferenceConfig",
    "InferenceError",
    "get_inference_client",
    "get_inference_config",
]
