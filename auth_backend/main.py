# Standard library imports
from pathlib import Path
from contextlib import asynccontextmanager
import logging

# External package imports
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

# Local application imports
from .api.v1 import auth_router, health_router, request_validation_exception_handler
from .core.config import get_settings
from .core.logging_config import setup_logging
from .di.container import get_container
from .domain.repositories.user_repository import UserRepository
from .infrastructure.db.mongo_connection import close_database

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.
    
    Creates the unique email index on startup and closes the MongoDB
    client on shutdown.
    """
    try:
        user_repository = get_container().get(UserRepository)
        await user_repository.ensure_indexes()
    except Exception as e:
        # Don't fail app startup if MongoDB is unreachable; requests will
        # report the store error themselves
        logger.error(f"Failed to ensure user indexes: {e}", exc_info=True)
    
    logger.info("Application startup complete")
    
    yield
    
    close_database()
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
    setup_logging(settings.log_level)
    
    application = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="User signup and login backed by MongoDB",
        lifespan=lifespan
    )
    
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    
    application.add_exception_handler(RequestValidationError, request_validation_exception_handler)
    
    # Register API routers
    application.include_router(auth_router, prefix="/auth")
    application.include_router(health_router)
    
    return application


# Create application instance
app = create_application()
