"""Core of the URL shortener: code generation and the mapping store."""

from .context import CancelContext
from .errors import ContextCancelledError, DeadlineExceededError
from .shortcode import ShortCodeGenerator
from .store import MappingStore

__all__ = [
    "CancelContext",
    "ContextCancelledError",
    "DeadlineExceededError",
    "ShortCodeGenerator",
    "MappingStore",
]
