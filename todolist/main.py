"""
ToDoList Backend - FastAPI application

Main application entry point.
"""
import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from todolist import __version__
from todolist.config import Settings, get_settings
from todolist.errors import register_error_handlers
from todolist.auth.routes import router as auth_router
from todolist.routers.todos import router as todos_router

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def create_app(settings: Optional[Settings] = None, firestore_client=None) -> FastAPI:
    """
    Build the application.

    ``settings`` and ``firestore_client`` default to the environment
    configuration and a lazily created Firestore client.
    """
    settings = settings or get_settings()
    configure_logging(settings)

    app = FastAPI(
        title=settings.app_name,
        description="User accounts and per-user todo lists.",
        version=__version__,
        debug=settings.debug,
        docs_url="/api/docs",
        redoc_url="/api/redoc",
    )
    app.state.settings = settings
    app.state.firestore = firestore_client

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.get_cors_origins(),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)

    # Include routers
    app.include_router(auth_router, prefix="/api", tags=["Authentication"])
    app.include_router(todos_router, prefix="/api/todos", tags=["Todos"])

    @app.get("/", response_class=PlainTextResponse)
    async def home():
        """Liveness check."""
        return "ToDoList Backend is running!"

    @app.get("/api/health")
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy", "app": settings.app_name}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    logger.info("Starting %s on port %d", settings.app_name, settings.port)
    uvicorn.run("todolist.main:app", host=settings.host, port=settings.port, reload=settings.debug)
