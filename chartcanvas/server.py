from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging
import sys
from typing import Optional

import uvicorn

from .api import charts_router
from .config import get_settings

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(level: Optional[str] = None) -> None:
    """Send chartcanvas logs to stdout at the configured level."""
    level = (level or get_settings().log_level).upper()
    package_logger = logging.getLogger("chartcanvas")
    package_logger.setLevel(level)

    if not any(getattr(handler, "_chartcanvas", False) for handler in package_logger.handlers):
        stdout_handler = logging.StreamHandler(sys.stdout)
        stdout_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        stdout_handler._chartcanvas = True
        package_logger.addHandler(stdout_handler)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()
    app = FastAPI(
        title="chartcanvas geometry API",
        description="Axis scales, histogram bins and curve paths from tab-separated data",
        version="1.0.0",
        docs_url="/docs" if settings.is_development_mode() else None,
        redoc_url="/redoc" if settings.is_development_mode() else None,
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    return app


def register_routers(app: FastAPI) -> None:
    """Register all routers with the application."""

    # Health check endpoint
    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy"}

    app.include_router(charts_router)


setup_logging()

# Create the FastAPI application instance
app = create_app()
register_routers(app)


if __name__ == "__main__":
    uvicorn.run("chartcanvas.server:app", host="0.0.0.0", port=8000)
