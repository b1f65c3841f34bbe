"""FastAPI application for TinyChat.

Endpoints:
    - GET /health: Service health status
    - GET /: Home page with chat widget (NiceGUI, mounted at startup)
"""

from tinychat.api.app import app, create_app

__all__ = ["app", "create_app"]
