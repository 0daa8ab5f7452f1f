"""Shorten and redirect routes implementation."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.responses import RedirectResponse

from shortlink.context import CancelContext
from shortlink.errors import ContextCancelledError
from shortlink.common.headers import build_base_url
from shortlink.common.url_builder import build_short_url
from ..api.schemas import ErrorResponse, ShortenRequest, ShortenResponse
from ..dependencies import get_request_context

router = APIRouter()

logger = logging.getLogger("url_shortener.web")


@router.post(
    "/shorten",
    response_model=ShortenResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid request body or empty URL"},
        500: {"model": ErrorResponse, "description": "Request cancelled or timed out"},
    },
    summary="Create short URL",
    description="Store the URL under a freshly generated short code and return the short URL.",
)
def shorten_url(
    request: Request,
    body: ShortenRequest,
    ctx: CancelContext = Depends(get_request_context),
):
    """Create a shortened URL."""
    store = request.app.state.store
    generator = request.app.state.generator
    config = request.app.state.config

    code = generator.generate()
    try:
        store.set(ctx, code, body.url)
    except ContextCancelledError as e:
        logger.error(f"Failed to store URL: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error",
        )

    base_url = build_base_url(
        headers=request.headers,
        fallback_base_url=config.base_url,
        request_scheme=request.url.scheme,
        request_host=request.headers.get("host"),
    )

    logger.info(f"Successfully shortened URL with code {code}")
    return ShortenResponse(short_url=build_short_url(code, base_url))


@router.api_route(
    "/shorten",
    methods=["GET", "PUT", "PATCH", "DELETE"],
    include_in_schema=False,
)
async def shorten_method_not_allowed(request: Request):
    """Reject anything but POST on /shorten before it reaches the redirect route."""
    logger.warning(f"Method {request.method} not allowed for /shorten")
    raise HTTPException(
        status_code=status.HTTP_405_METHOD_NOT_ALLOWED,
        detail="Method not allowed",
        headers={"Allow": "POST"},
    )


@router.get("/", include_in_schema=False)
async def empty_code():
    """The bare root carries no code to resolve."""
    logger.warning("Empty code provided in request")
    raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not found")


@router.get(
    "/{short_code:path}",
    responses={
        302: {"description": "Redirect to the original URL"},
        404: {"model": ErrorResponse, "description": "Short code not found"},
        500: {"model": ErrorResponse, "description": "Request cancelled or timed out"},
    },
    summary="Follow short URL",
)
def redirect_to_url(
    request: Request,
    short_code: str,
    ctx: CancelContext = Depends(get_request_context),
):
    """Redirect to the original URL."""
    store = request.app.state.store

    try:
        original_url, found = store.get(ctx, short_code)
    except ContextCancelledError as e:
        logger.error(f"Failed to retrieve URL: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error",
        )

    if not found:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not found")

    logger.info(f"Redirecting code {short_code} to URL {original_url}")
    return RedirectResponse(url=original_url, status_code=status.HTTP_302_FOUND)
