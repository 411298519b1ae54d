import logging
import time
from typing import Optional
from fastapi import FastAPI, Request, Response, status
from fastapi.middleware.cors import CORSMiddleware

from .core.config import Settings, get_settings
from .core.database import init_db, check_db_connection
from .core.exceptions import TaskNotFoundError
from .routers import tasks

# Configure logging
logging.basicConfig(level=get_settings().log_level)
logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the FastAPI application with the task routes mounted"""
    settings = settings or get_settings()

    app = FastAPI(
        title="Task API",
        description="CRUD service for tasks",
        version=settings.service_version
    )

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(
        tasks.router,
        prefix=settings.api_prefix + "/tasks",
        tags=["tasks"]
    )
    logger.info("Task router included successfully")

    @app.exception_handler(TaskNotFoundError)
    async def task_not_found_handler(request: Request, exc: TaskNotFoundError):
        # Not-found carries no body
        return Response(status_code=status.HTTP_404_NOT_FOUND)

    @app.on_event("startup")
    async def startup_event():
        """Initialize application on startup"""
        logger.info(f"Starting {settings.service_name}...")
        if init_db():
            logger.info("Database initialized successfully")
        else:
            logger.error("Database initialization failed")
        logger.info(f"{settings.service_name} startup completed")

    @app.get("/")
    async def root():
        """Root endpoint"""
        return {
            "service": settings.service_name,
            "version": settings.service_version,
            "status": "running",
        }

    @app.get("/health")
    async def health_check():
        """Health check endpoint"""
        db_healthy = check_db_connection()
        return {
            "service": settings.service_name,
            "version": settings.service_version,
            "status": "healthy" if db_healthy else "unhealthy",
            "database": "connected" if db_healthy else "disconnected",
            "timestamp": time.time()
        }

    return app


app = create_app()
