"""Inference server configuration with environment variable loading.

Pydantic-based configuration for the local Ollama chat endpoint.
"""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

# Load environment variables from .env file
load_dotenv()


class InferenceConfig(BaseModel):
    """Configuration for the local inference server.

    Attributes:
        base_url: Server root URL, without trailing slash.
        model_name: Model identifier sent with every request.
        temperature: Sampling temperature (0.0 = deterministic, 2.0 = creative).
        timeout: Request timeout in seconds. None waits indefinitely.
    """

    base_url: str = Field(
        default_factory=lambda: os.getenv("OLLAMA_BASE_URL", "http://localhost:11434"),
        description="Inference server base URL",
    )
    model_name: str = Field(
        default_factory=lambda: os.getenv("OLLAMA_MODEL", "tinyllama"),
        description="Model to use",
    )
    temperature: float = Field(
        default_factory=lambda: os.getenv("OLLAMA_TEMPERATURE", "0.7"),
        validate_default=True,
        ge=0.0,
        le=2.0,
        description="Sampling temperature for response generation",
    )
    timeout: float | None = Field(
        default_factory=lambda: os.getenv("OLLAMA_TIMEOUT") or None,
        validate_default=True,
        description="Request timeout in seconds (None for no timeout)",
    )

    @field_validator("base_url")
    @classmethod
    def normalize_base_url(cls, v: str) -> str:
        """Strip whitespace and trailing slashes from the base URL."""
        v = v.strip().rstrip("/")
        if not v:
            raise ValueError("Inference base URL required. Set OLLAMA_BASE_URL in .env")
        return v

    @field_validator("model_name")
    @classmethod
    def validate_model_name(cls, v: str) -> str:
        """Validate that a model identifier is provided."""
        if not v or not v.strip():
            raise ValueError("Model name required. Set OLLAMA_MODEL in .env")
        return v.strip()

    @field_validator("timeout")
    @classmethod
    def validate_timeout(cls, v: float | None) -> float | None:
        """Reject non-positive timeouts."""
        if v is not None and v <= 0:
            raise ValueError("timeout must be greater than 0")
        return v


def get_inference_config() -> InferenceConfig:
    """Create inference configuration from environment.

    Returns:
        Configured InferenceConfig instance.

    Raises:
        ValidationError: If an environment value is invalid.
    """
    return InferenceConfig()
