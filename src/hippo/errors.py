"""
Hippo client errors
Every failure surfaced by the client is a ClientError subclass.
"""

from typing import Optional


class ClientError(Exception):
    """Base exception for all Hippo client errors."""


class InvalidUrlError(ClientError):
    """The base URL or a joined path could not be parsed."""


class InvalidConfigError(ClientError):
    """Invalid configuration was given to the client."""


class ClientIOError(ClientError):
    """Local file-system or I/O failure."""


class SerializationError(ClientError):
    """JSON could not be encoded for a request or decoded from a response."""


class HttpClientError(ClientError):
    """Transport-level failure (DNS, connect, TLS, timeout)."""


class InvalidRequestError(ClientError):
    """The server answered with a non-success status for the request."""

    def __init__(self, status_code: int, message: Optional[str] = None):
        super().__init__(
            f"Invalid request (status code {status_code}): {message!r}"
        )
        self.status_code = status_code
        self.message = message


class ServerError(ClientError):
    """The server failed (5xx). Carries the body text when there is one."""

    def __init__(self, message: Optional[str] = None):
        super().__init__(f"Server has encountered an error: {message!r}")
        self.message = message


class UnauthorizedError(ClientError):
    """Invalid credentials, or no access to the requested resource."""

    def __init__(self, message: Optional[str] = None):
        super().__init__(
            "User has invalid credentials or is not authorized to access "
            "the requested resource"
        )
        self.message = message


class OtherError(ClientError):
    """Uncategorized failure; the message describes the underlying issue."""
