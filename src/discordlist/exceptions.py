"""
Exceptions for the discordlist client.

Every failure surfaced by a client operation derives from DiscordlistError.
Nothing is retried internally; callers decide what to do with each kind.
"""

from typing import Optional


class DiscordlistError(Exception):
    """Base class for all discordlist client errors."""


class TransportInitError(DiscordlistError):
    """Raised when the HTTP transport cannot be built (TLS backend, trust store)."""


class TransportError(DiscordlistError):
    """Raised when a request fails before a response is received."""

    def __init__(self, method: str, url: str, reason: str):
        self.method = method
        self.url = url
        self.reason = reason

        super().__init__(f"{method} {url} failed: {reason}")


class RequestTimeoutError(TransportError):
    """Raised when a request exceeds the client's timeout."""


class ApiError(DiscordlistError):
    """Exception raised when the service answers with a non-success status."""

    def __init__(
        self, status_code: int, method: str, url: str, body: Optional[str] = None
    ):
        self.status_code = status_code
        self.method = method
        self.url = url
        self.body = body

        message = f"{method} {url} returned HTTP {status_code}"
        if body:
            message += f": {body[:200]}"
        super().__init__(message)


class DecodeError(DiscordlistError):
    """Raised when a response body does not match the expected schema."""

    def __init__(self, model: str, body: str, reason: str):
        self.model = model
        self.body = body
        self.reason = reason

        super().__init__(f"Could not decode response as {model}: {reason}")
