"""Concurrent in-memory mapping store for URL shortener."""

import logging
from typing import Dict, Optional, Tuple

from .context import CancelContext
from .rwlock import ReadWriteLock


class MappingStore:
    """Thread-safe code -> URL mapping.

    The whole map is guarded by a single reader/writer lock: lookups run in
    parallel, writes are exclusive. Each call checks its context once, after
    taking the lock and before touching the map, so a cancelled call never
    changes state.

    Calls block the calling thread while the lock is contended, so async
    code must reach the store from a worker thread (FastAPI does this for
    plain `def` handlers), never directly on the event loop.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """Initialize mapping store.

        Args:
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)
        self._urls: Dict[str, str] = {}
        self._lock = ReadWriteLock()

    def set(self, ctx: CancelContext, code: str, url: str) -> None:
        """Store a URL under a code, replacing any previous URL.

        Args:
            ctx: Caller context
            code: The short code
            url: The destination URL

        Raises:
            ContextCancelledError: If ctx is already done
        """
        with self._lock.write_locked():
            error = ctx.err()
            if error is not None:
                self.logger.error(f"Context cancelled while setting URL for code {code}")
                raise error

            self._urls[code] = url
            self.logger.info(f"Stored URL for code {code}")

    def get(self, ctx: CancelContext, code: str) -> Tuple[str, bool]:
        """Look up the URL stored under a code.

        Args:
            ctx: Caller context
            code: The short code to lookup

        Returns:
            Tuple of (url, found); url is empty when not found

        Raises:
            ContextCancelledError: If ctx is already done
        """
        with self._lock.read_locked():
            error = ctx.err()
            if error is not None:
                self.logger.error(f"Context cancelled while getting URL for code {code}")
                raise error

            url = self._urls.get(code)

        if url is None:
            self.logger.warning(f"URL not found for code {code}")
            return "", False

        self.logger.info(f"Retrieved URL for code {code}")
        return url, True

    def __len__(self) -> int:
        with self._lock.read_locked():
            return len(self._urls)
