"""Unit tests for individual components in isolation.

Coverage:
    - models/: Pydantic validation and serialization
    - inference/: Configuration and request/response handling
    - ui/session: Chat state transitions

The inference server is replaced by httpx.MockTransport or a stub client.
"""
