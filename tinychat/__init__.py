"""TinyChat - a web page shell with a floating chat widget for a local LLM.

Combines FastAPI for HTTP serving, NiceGUI for the interface, httpx for
talking to the inference server, and Pydantic for data validation.

Components:
    - api: FastAPI application and health endpoint
    - inference: Ollama configuration and chat client
    - ui: Page shell, chat widget and per-page chat session
    - models: Message and wire schemas
"""

__version__ = "0.1.0"
