"""
hippo — client for registering application revisions with a Hippo server.
"""

from .auth import create_token
from .client import HippoClient
from .errors import (
    ClientError,
    ClientIOError,
    HttpClientError,
    InvalidConfigError,
    InvalidRequestError,
    InvalidUrlError,
    OtherError,
    SerializationError,
    ServerError,
    UnauthorizedError,
)
from .types import ClientOptions, RegisterRevisionRequest, TokenResponse

__all__ = [
    "ClientError",
    "ClientIOError",
    "ClientOptions",
    "HippoClient",
    "HttpClientError",
    "InvalidConfigError",
    "InvalidRequestError",
    "InvalidUrlError",
    "OtherError",
    "RegisterRevisionRequest",
    "SerializationError",
    "ServerError",
    "TokenResponse",
    "UnauthorizedError",
    "create_token",
]
__version__ = "0.1.0"
