"""Integration tests for components working together as a system.

Coverage:
    - FastAPI app over ASGITransport
    - Chat session driving the real InferenceClient
    - Optional round trip against a running Ollama (OLLAMA_LIVE_TESTS=1)
"""
