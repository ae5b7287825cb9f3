import logging
from contextlib import asynccontextmanager

import logfire
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncEngine

from bloglist.application.api.v1.errors import error_body, map_bloglist_error
from bloglist.application.api.v1.routes import blogs, health, stats, users
from bloglist.application.di import create_container
from bloglist.config import Config, configure_logging
from bloglist.domain.shared.error import BloglistError
from bloglist.infrastructure.persistence.database import create_tables
from bloglist.util.di.fastapi import setup_dishka

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    container = app.state.dishka_container
    config = await container.get(Config)

    if config.database.create_tables:
        engine = await container.get(AsyncEngine)
        await create_tables(engine)
        logger.info("Database tables ready")

    yield

    await container.close()


def create_app(config: Config | None = None) -> FastAPI:
    """Create FastAPI application."""
    # Pydantic Settings populates from env vars at runtime
    config = config or Config()  # type: ignore[call-arg]

    # Configure logging early
    configure_logging(config.logging)
    logger.info("Starting %s server v%s", config.server.name, config.server.version)

    app_instance = FastAPI(
        title=config.server.name,
        description=config.server.description,
        version=config.server.version,
        lifespan=lifespan,
    )

    # Spans are only exported when a Logfire token is present
    logfire.configure(
        service_name=config.server.name,
        service_version=config.server.version,
        send_to_logfire="if-token-present",
        console=False,
    )
    logfire.instrument_fastapi(app_instance)

    # Setup dependency injection
    container = create_container(config)
    setup_dishka(container, app_instance)

    app_instance.include_router(health.router, prefix="/api")
    app_instance.include_router(blogs.router, prefix="/api")
    app_instance.include_router(users.router, prefix="/api")
    app_instance.include_router(stats.router, prefix="/api")

    # Global bloglist error handler - maps domain and infrastructure errors to HTTP responses
    @app_instance.exception_handler(BloglistError)
    async def bloglist_error_handler(request: Request, exc: BloglistError):
        http_exc = map_bloglist_error(exc)
        return JSONResponse(
            status_code=http_exc.status_code,
            content=http_exc.detail,
        )

    # Malformed request bodies and parameters are client errors, reported like domain ones
    @app_instance.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        if errors:
            first = errors[0]
            location = ".".join(str(part) for part in first.get("loc", ()))
            message = f"{location}: {first.get('msg', 'invalid value')}"
        else:
            message = "Invalid request"
        return JSONResponse(
            status_code=400,
            content=error_body(message, "VALIDATION_ERROR"),
        )

    # Global exception handler - logs all unhandled exceptions
    @app_instance.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception(
            "Unhandled exception on %s %s",
            request.method,
            request.url.path,
        )
        return JSONResponse(
            status_code=500,
            content=error_body("Internal server error", "INTERNAL_ERROR"),
        )

    return app_instance


# Create app instance for uvicorn
app = create_app()
