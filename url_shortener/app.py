#!/usr/bin/env python3
"""
Main entry point for URL shortener service.

Concurrency: all requests share one in-memory MappingStore guarded by a
reader/writer lock. The store lives in process memory, so the server always
runs a single uvicorn worker; restarting the process drops every short URL.

Usage:
    python app.py

Environment variables (all optional, all prefixed with URL_SHORTENER_):
    URL_SHORTENER_HOST - Host to bind to
    URL_SHORTENER_PORT - Port to listen on
    URL_SHORTENER_BASE_URL - Base URL for short links when no Host header is sent
    URL_SHORTENER_REQUEST_TIMEOUT_SECONDS - Per-request deadline for store calls
    URL_SHORTENER_LOG_LEVEL - Logging level
"""

import signal
import sys

import uvicorn

from config import load_config
from shortlink.shortcode import ShortCodeGenerator
from shortlink.store import MappingStore
from shortlink.common.logging_config import setup_logging
from web_app import create_app


def main():
    """Main entry point."""
    config = load_config()

    logger = setup_logging(
        level=config.log_level,
        log_file=config.log_file,
        json_format=config.log_json,
    )

    logger.info("URL Shortener Service")
    logger.info(f"Configuration: {config.model_dump()}")

    store = MappingStore(logger=logger)
    generator = ShortCodeGenerator()

    app = create_app(
        store=store,
        generator=generator,
        config=config,
        logger=logger,
    )

    uvicorn_config = uvicorn.Config(
        app,
        host=config.host,
        port=config.port,
        workers=1,
        log_level=config.log_level.lower(),
        access_log=True,
    )

    server = uvicorn.Server(uvicorn_config)

    # Setup signal handlers for graceful shutdown
    def handle_signal(signum, frame):
        logger.info(f"Received signal {signum}, initiating graceful shutdown...")
        server.should_exit = True

    signal.signal(signal.SIGINT, handle_signal)
    signal.signal(signal.SIGTERM, handle_signal)

    try:
        logger.info(f"Starting server on {config.host}:{config.port}")
        server.run()
    except (Exception, SystemExit) as e:
        logger.error(f"Server failed to start: {e}")
        sys.exit(1)

    # uvicorn logs bind errors and returns without raising
    if not server.started:
        logger.error(f"Server failed to start on {config.host}:{config.port}")
        sys.exit(1)


if __name__ == "__main__":
    main()
