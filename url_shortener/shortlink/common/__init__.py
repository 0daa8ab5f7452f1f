"""Common utilities for URL shortener."""

from .headers import extract_forwarded_headers, build_base_url
from .url_builder import build_short_url
from .logging_config import setup_logging

__all__ = [
    "extract_forwarded_headers",
    "build_base_url",
    "build_short_url",
    "setup_logging",
]
