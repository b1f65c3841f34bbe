"""Main application entry point.

Runs FastAPI with NiceGUI mounted for the page shell and chat widget.
Environment variables are loaded from .env file.
"""

import logging
import os
import sys

from dotenv import load_dotenv

# Load environment variables before any other imports that might need them
load_dotenv()

# Configure logging
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger(__name__)

TITLE = "TinyChat"
FAVICON = "💬"


def run_integrated() -> None:
    """Run FastAPI with NiceGUI mounted on the same server.

    FastAPI handles /health and /docs, NiceGUI handles the pages.
    """
    import uvicorn
    from nicegui import ui

    from tinychat.api.app import create_app
    from tinychat.ui.pages import home_page  # noqa: F401 - Registers the page

    app = create_app()

    # Mount NiceGUI onto FastAPI
    ui.run_with(
        app,
        title=TITLE,
        favicon=FAVICON,
        storage_secret=os.getenv("NICEGUI_STORAGE_SECRET", "tinychat-secret"),
    )

    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "8000"))
    logger.info(f"Starting integrated server on http://localhost:{port}")
    logger.info(f"API docs available at http://localhost:{port}/docs")

    uvicorn.run(
        app,
        host=host,
        port=port,
        log_level=os.getenv("LOG_LEVEL", "info").lower(),
    )


def run_standalone() -> None:
    """Run the NiceGUI pages on their own, without the FastAPI routes."""
    from nicegui import ui

    from tinychat.ui.pages import home_page  # noqa: F401 - Registers the page

    port = int(os.getenv("PORT", "8080"))
    logger.info(f"Starting NiceGUI on http://localhost:{port}")
    ui.run(
        title=TITLE,
        favicon=FAVICON,
        host=os.getenv("HOST", "0.0.0.0"),
        port=port,
        reload=False,
    )


def main() -> None:
    """Application entry point.

    Set RUN_MODE=standalone to serve only the NiceGUI pages.
    Default is integrated mode (FastAPI and NiceGUI on one port).
    """
    mode = os.getenv("RUN_MODE", "integrated").lower()

    logger.info(f"Starting TinyChat in {mode} mode")

    if mode == "standalone":
        run_standalone()
    else:
        run_integrated()


if __name__ == "__main__":
    main()
