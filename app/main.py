# Standard library imports
from pathlib import Path
from contextlib import asynccontextmanager
import logging

# External package imports
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Local application imports
from .api.v1 import user_router, health_router, root_router
from .core.config import get_settings
from .core.logging_config import configure_logging
from .di.container import reset_container
from .infrastructure.db import ensure_user_indexes, close_database

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.

    Ensures the unique email index exists on startup and closes the
    MongoDB client and drops the DI container on shutdown.
    """
    try:
        await ensure_user_indexes()
    except Exception as e:
        # The service still answers health checks while MongoDB is unreachable
        logger.error(f"Failed to ensure user indexes: {e}", exc_info=True)

    yield

    close_database()
    # Providers hold collections from the closed client
    reset_container()
    logger.info("Application shutdown complete")


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - Environment variable loading
    - Logging configuration
    - CORS middleware configuration
    - API route registration

    Returns:
        Configured FastAPI application instance
    """
    # Load environment variables from .env file
    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(env_path)

    settings = get_settings()
    configure_logging(settings.log_level)

    application = FastAPI(
        title="User Service API",
        version="1.0.0",
        description="Clean Architecture User CRUD service",
        lifespan=lifespan
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allowed_origins,
        allow_credentials="*" not in settings.cors_allowed_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Register API routers
    application.include_router(root_router)
    application.include_router(health_router, prefix="/api/v1")
    application.include_router(user_router, prefix="/api/v1/users")

    return application


# Create application instance
app = create_application()
