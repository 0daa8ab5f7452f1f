"""Request-scoped dependencies."""

from typing import AsyncIterator

from fastapi import Request

from shortlink.context import CancelContext


async def get_request_context(request: Request) -> AsyncIterator[CancelContext]:
    """Yield a cancellation context for the current request.

    The context is derived from the application's root context, so shutting
    the app down cancels in-flight requests, and it expires after the
    configured request timeout. It is cancelled once the request finishes.
    """
    config = request.app.state.config
    ctx = request.app.state.root_context.with_timeout(config.request_timeout_seconds)
    try:
        yield ctx
    finally:
        ctx.cancel()
