"""Exceptions raised by the URL shortener core."""


class ContextCancelledError(Exception):
    """Raised when a call is made with a context that is already cancelled."""

    def __init__(self, message: str = "context canceled"):
        super().__init__(message)


class DeadlineExceededError(ContextCancelledError):
    """Raised when a call is made after the context deadline has passed."""

    def __init__(self, message: str = "context deadline exceeded"):
        super().__init__(message)
