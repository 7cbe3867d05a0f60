"""FastAPI application for the repcoach JSON API."""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from .. import __version__
from ..db.engine import get_db_path, init_db
from ..errors import InvalidTransitionError, NotAuthenticatedError, ValidationError
from ..utils.logger import setup_logger
from .routers import coaching, metrics, records, sessions

logger = setup_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler - runs on startup and shutdown."""
    db_path = get_db_path()
    if not db_path.exists():
        logger.info("Creating database at %s", db_path)
        await init_db(db_path)
    yield


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="repcoach",
        description="Workout tracking, fitness metrics and coaching",
        version=__version__,
        lifespan=lifespan,
    )

    @app.exception_handler(ValidationError)
    async def validation_error(request: Request, exc: ValidationError):
        return JSONResponse(status_code=400, content={"error": str(exc)})

    @app.exception_handler(InvalidTransitionError)
    async def invalid_transition(request: Request, exc: InvalidTransitionError):
        return JSONResponse(status_code=409, content={"error": str(exc)})

    @app.exception_handler(NotAuthenticatedError)
    async def not_authenticated(request: Request, exc: NotAuthenticatedError):
        return JSONResponse(status_code=401, content={"error": str(exc)})

    app.include_router(metrics.router)
    app.include_router(sessions.router)
    app.include_router(records.router)
    app.include_router(coaching.router)

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__}

    return app
