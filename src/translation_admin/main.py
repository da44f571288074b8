"""FastAPI application entry point."""

from contextlib import asynccontextmanager
import uuid

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.routing import APIRoute
from sqlalchemy.exc import IntegrityError
from structlog import contextvars

from translation_admin.api.main import api_router
from translation_admin.core.config import Settings, settings
from translation_admin.core.exceptions import (
    AppException,
    ConflictError,
    UnexpectedError,
    ValidationError,
)
from translation_admin.core.logging import get_logger, setup_logging
from translation_admin.sample_data import seed_store
from translation_admin.store import ContentStore, build_store

setup_logging()
logger = get_logger(__name__)


def custom_generate_unique_id(route: APIRoute) -> str:
    """Generate operation IDs for the OpenAPI schema as ``{tag}-{route_name}``."""
    if route.tags:
        return f"{route.tags[0]}-{route.name}"
    return route.name


@asynccontextmanager
async def lifespan(app: FastAPI):
    store = app.state.store
    logger.info(
        "application_startup",
        environment=app.state.settings.ENVIRONMENT,
        debug=app.state.settings.DEBUG,
        store_backend=type(store).__name__,
    )
    yield
    logger.info("application_shutdown")


def _error_response(exc: AppException) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


def create_app(store: ContentStore | None = None, config: Settings = settings) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        store: Store to serve. When omitted, one is built from ``config`` and
            seeded with the sample content if ``SEED_SAMPLE_DATA`` is set.
        config: Settings to configure the app with
    """
    if store is None:
        store = build_store(config)
        if config.SEED_SAMPLE_DATA:
            seed_store(store)

    app = FastAPI(
        title=config.PROJECT_NAME,
        openapi_url=f"{config.API_PREFIX}/openapi.json",
        docs_url=f"{config.API_PREFIX}/docs",
        redoc_url=f"{config.API_PREFIX}/redoc",
        lifespan=lifespan,
        generate_unique_id_function=custom_generate_unique_id,
    )
    app.state.store = store
    app.state.settings = config

    @app.exception_handler(AppException)
    async def app_exception_handler(
        request: Request, exc: AppException
    ) -> JSONResponse:
        """Handle all AppException subclasses with consistent JSON format."""
        logger.warning(
            "app_exception",
            error_code=exc.error_code,
            message=exc.message,
            status_code=exc.status_code,
            details=exc.details,
            path=str(request.url.path),
        )
        return _error_response(exc)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Malformed bodies answer 400 in the same shape as ValidationError."""
        errors = jsonable_encoder(exc.errors(), custom_encoder={Exception: str})
        logger.warning(
            "request_validation_failed",
            path=str(request.url.path),
            errors=len(errors),
        )
        return _error_response(
            ValidationError("Invalid request", details={"errors": errors})
        )

    @app.exception_handler(IntegrityError)
    async def integrity_error_handler(
        request: Request, exc: IntegrityError
    ) -> JSONResponse:
        # A unique or foreign key constraint fired in the database
        logger.warning("integrity_error", path=str(request.url.path), error=str(exc.orig))
        return _error_response(
            ConflictError("The change conflicts with existing data", "INTEGRITY_ERROR")
        )

    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("unhandled_exception", path=str(request.url.path))
        return _error_response(UnexpectedError())

    @app.middleware("http")
    async def add_request_id(request: Request, call_next):
        """Add unique request ID to each request for tracing."""
        request_id = request.headers.get("X-Request-ID", str(uuid.uuid4()))
        contextvars.clear_contextvars()
        contextvars.bind_contextvars(request_id=request_id)

        response = await call_next(request)
        response.headers["X-Request-ID"] = request_id
        return response

    if config.all_cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=config.all_cors_origins,
            allow_credentials=True,
            allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
            allow_headers=["Content-Type", "X-Request-ID", "Accept", "Origin"],
            expose_headers=["X-Request-ID"],
        )
        logger.info("cors_configured", origins=config.all_cors_origins)

    app.include_router(api_router, prefix=config.API_PREFIX)

    @app.get("/health", tags=["health"])
    async def health():
        """Liveness check."""
        return {"status": "ok", "service": config.PROJECT_NAME}

    return app


app = create_app()
