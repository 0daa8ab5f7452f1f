"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from shortlink.context import CancelContext
from shortlink.shortcode import ShortCodeGenerator
from shortlink.store import MappingStore
from .api import api_router
from .api.schemas import ErrorResponse
from .web import web_router
from .middleware.logging import LoggingMiddleware


def _error_body(error: str, detail: Optional[str] = None) -> dict:
    return ErrorResponse(error=error, detail=detail).model_dump()


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render HTTP errors as ErrorResponse bodies, keeping headers such as Allow."""
    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body(str(exc.detail)),
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed JSON and missing or empty fields are client errors (400)."""
    logger = logging.getLogger("url_shortener.web")
    logger.warning(f"Invalid request body for {request.url.path}: {exc.errors()}")
    detail = "; ".join(str(error.get("msg", "")) for error in exc.errors())
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_error_body("Invalid request body", detail or None),
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup and shutdown."""
    logger = app.state.logger
    logger.info(f"URL shortener ready ({len(app.state.store)} URLs in memory)")

    yield

    # Anything still in flight sees a cancelled context from here on
    app.state.root_context.cancel()
    logger.info("URL shortener stopped")


def create_app(
    store: MappingStore,
    generator: ShortCodeGenerator,
    config,
    logger: Optional[logging.Logger] = None,
) -> FastAPI:
    """Create and configure FastAPI application.

    Args:
        store: Mapping store shared by all requests
        generator: Short code generator
        config: Configuration instance
        logger: Optional service logger

    Returns:
        Configured FastAPI app
    """
    app = FastAPI(
        title="URL Shortener",
        description="In-memory URL shortening service",
        version="1.0.0",
        docs_url="/api/docs",
        redoc_url="/api/redoc",
        openapi_url="/api/openapi.json",
        lifespan=lifespan,
    )

    # Store instances in app state for access in routes
    app.state.store = store
    app.state.generator = generator
    app.state.config = config
    app.state.logger = logger or logging.getLogger("url_shortener")
    app.state.root_context = CancelContext.background()

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    app.add_middleware(LoggingMiddleware)

    # API routes first: the redirect route matches every other path
    app.include_router(api_router, prefix="/api", tags=["API"])
    app.include_router(web_router, tags=["Web"])

    return app
