"""Cooperative cancellation contexts for store operations."""

import threading
import time
from typing import List, Optional

from .errors import ContextCancelledError, DeadlineExceededError


class CancelContext:
    """Per-call cancellation signal with an optional deadline.

    A context is done once it has been cancelled, once its deadline has
    passed, or once its parent is done. Nothing is interrupted: callees
    check the context at entry and bail out if it is done.
    """

    def __init__(
        self,
        parent: Optional["CancelContext"] = None,
        deadline: Optional[float] = None,
    ):
        """Initialize context.

        Args:
            parent: Optional parent context whose cancellation propagates here
            deadline: Optional absolute deadline on the time.monotonic() clock
        """
        self.parent = parent
        self.deadline = deadline
        self._cancelled = threading.Event()
        self._children: List["CancelContext"] = []
        self._lock = threading.Lock()

        # Child deadline can never outlive the parent's
        if parent is not None and parent.deadline is not None:
            if self.deadline is None or parent.deadline < self.deadline:
                self.deadline = parent.deadline

    @classmethod
    def background(cls) -> "CancelContext":
        """Return a root context that is never cancelled on its own."""
        return cls()

    def with_cancel(self) -> "CancelContext":
        """Derive a child context that can be cancelled independently."""
        child = CancelContext(parent=self)
        self._attach(child)
        return child

    def with_timeout(self, seconds: float) -> "CancelContext":
        """Derive a child context that expires after the given number of seconds."""
        child = CancelContext(parent=self, deadline=time.monotonic() + seconds)
        self._attach(child)
        return child

    def _attach(self, child: "CancelContext") -> None:
        with self._lock:
            cancelled = self._cancelled.is_set()
            if not cancelled:
                self._children.append(child)
        if cancelled:
            child.cancel()

    def cancel(self) -> None:
        """Cancel this context and every context derived from it."""
        with self._lock:
            if self._cancelled.is_set():
                return
            self._cancelled.set()
            children, self._children = self._children, []

        for child in children:
            child.cancel()

        if self.parent is not None:
            self.parent._detach(self)

    def _detach(self, child: "CancelContext") -> None:
        with self._lock:
            if child in self._children:
                self._children.remove(child)

    def deadline_passed(self) -> bool:
        return self.deadline is not None and time.monotonic() >= self.deadline

    def done(self) -> bool:
        """Check whether the context is cancelled or expired."""
        if self._cancelled.is_set() or self.deadline_passed():
            return True
        return self.parent is not None and self.parent.done()

    def err(self) -> Optional[ContextCancelledError]:
        """Return the reason the context is done, or None if still active.

        Explicit cancellation takes precedence over an expired deadline.
        """
        if self._cancelled.is_set():
            return ContextCancelledError()
        if self.parent is not None:
            parent_err = self.parent.err()
            if parent_err is not None:
                return parent_err
        if self.deadline_passed():
            return DeadlineExceededError()
        return None

    def raise_if_done(self) -> None:
        """Raise the context error if the context is done."""
        error = self.err()
        if error is not None:
            raise error

    def remaining(self) -> Optional[float]:
        """Seconds left until the deadline, or None if there is no deadline."""
        if self.deadline is None:
            return None
        return max(0.0, self.deadline - time.monotonic())
