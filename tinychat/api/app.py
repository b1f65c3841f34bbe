"""FastAPI application factory and configuration.

Hosts the NiceGUI pages (mounted in tinychat.main) alongside a health
endpoint, with lifespan logging.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from tinychat import __version__
from tinychat.inference.config import get_inference_config

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Manage application startup and shutdown lifecycle.

    Args:
        app: The FastAPI application instance.

    Yields:
        Control to the application while it runs.
    """
    # Startup
    config = get_inference_config()
    logger.info("Starting TinyChat...")
    logger.info(f"Inference endpoint: {config.base_url} (model: {config.model_name})")
    yield
    # Shutdown
    logger.info("Shutting down TinyChat...")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance.
    """
    application = FastAPI(
        title="TinyChat",
        description=(
            "Web page shell with a floating chat widget. The widget forwards "
            "user messages to a locally running Ollama server and shows "
            "the reply."
        ),
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @application.get("/health")
    async def health_check() -> dict[str, str]:
        """Check service health status."""
        return {"status": "healthy", "service": "tinychat"}

    return application


app = create_app()
