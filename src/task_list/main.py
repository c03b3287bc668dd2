import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from . import __version__, dependencies
from .config import AppConfig
from .routers import tasks
from .shared.exceptions import register_exception_handlers
from .shared.exceptions.exception_handlers import GENERIC_ERROR_MESSAGE

log = logging.getLogger(__name__)

_dependencies_initialized = False


@asynccontextmanager
async def lifespan(app: FastAPI):
    log.info("Task list service starting")
    yield
    log.info("Task list service shutting down")
    dependencies.dispose_database()


app = FastAPI(
    title="Task List",
    version=__version__,
    description="A single-page to-do list: create, rename, complete and delete tasks.",
    lifespan=lifespan,
)


def setup_dependencies(config: Optional[AppConfig] = None) -> None:
    """
    Bind configuration and storage to the application.

    Idempotent: later calls are ignored until the module state is reset.
    A blank ``database_url`` selects the in-memory task store.
    """
    global _dependencies_initialized
    if _dependencies_initialized:
        log.debug("setup_dependencies called but already initialized")
        return

    config = config or AppConfig()
    dependencies.set_app_config(config)
    app.title = config.app_name

    if config.database_url:
        dependencies.init_database(config.database_url)
        log.info("Persistence enabled - tasks will be stored in the database")
    else:
        log.warning("No database URL provided - using in-memory task storage")

    _dependencies_initialized = True
    log.info("Dependencies initialized")


def reset_dependencies() -> None:
    """Undo ``setup_dependencies`` so it can run again with a new configuration."""
    global _dependencies_initialized
    dependencies.dispose_database()
    dependencies.set_app_config(None)
    _dependencies_initialized = False


def create_app(config: Optional[AppConfig] = None) -> FastAPI:
    """Return the configured application."""
    setup_dependencies(config)
    return app


@app.exception_handler(Exception)
async def unexpected_exception_handler(request: Request, exc: Exception):
    log.error(
        "Unhandled error: %s",
        exc,
        extra={"path": request.url.path, "method": request.method},
        exc_info=True,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": GENERIC_ERROR_MESSAGE},
    )


register_exception_handlers(app)
app.include_router(tasks.router, tags=["Tasks"])


@app.get("/health", tags=["Health"])
async def health_check():
    """Basic health check endpoint."""
    log.debug("Health check endpoint '/health' called")
    return {"status": "Task List service is healthy", "version": __version__}
