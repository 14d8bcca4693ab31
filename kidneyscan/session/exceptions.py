class SessionError(Exception):
    """Base exception for all session-related errors."""


class NoActiveSessionError(SessionError):
    """Raised when a session operation needs a submitted file but none exists."""


class SessionSupersededError(SessionError):
    """Raised to waiters of a session abandoned by a newer submission or close."""
