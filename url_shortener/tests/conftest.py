"""Pytest configuration and fixtures."""

import random

import pytest
from httpx import ASGITransport, AsyncClient

from config import Config
from shortlink.context import CancelContext
from shortlink.shortcode import ShortCodeGenerator
from shortlink.store import MappingStore
from shortlink.common.logging_config import setup_logging
from web_app import create_app


@pytest.fixture
def logger():
    """Create test logger."""
    return setup_logging(level="DEBUG")


@pytest.fixture
def ctx():
    """Background context that is never cancelled."""
    return CancelContext.background()


@pytest.fixture
def cancelled_ctx():
    """Context cancelled before use."""
    context = CancelContext.background().with_cancel()
    context.cancel()
    return context


@pytest.fixture
def store(logger) -> MappingStore:
    """Create an empty mapping store."""
    return MappingStore(logger=logger)


@pytest.fixture
def short_code_generator():
    """Create short code generator."""
    return ShortCodeGenerator(rng=random.Random(1234))


@pytest.fixture
def config():
    """Configuration with the defaults the service ships with."""
    return Config(base_url="http://localhost:8080")


@pytest.fixture
def app(store, short_code_generator, config, logger):
    """Create test FastAPI app."""
    return create_app(
        store=store,
        generator=short_code_generator,
        config=config,
        logger=logger,
    )


@pytest.fixture
async def client(app):
    """Create test client talking to the app in-process."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://localhost:8080") as ac:
        yield ac


@pytest.fixture
def sample_urls():
    """Sample URLs for testing."""
    return [
        "https://example.com/test",
        "https://github.com/user/repo",
        "https://stackoverflow.com/questions/123456",
    ]
