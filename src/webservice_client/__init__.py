"""Base client for quickly building JSON web service clients."""

from .client import WebServiceClient
from .config import ClientConfig, ResponseMode
from .errors import (
    ConfigurationError,
    DeserializationError,
    InvalidPath,
    RemoteError,
    RequestCancelled,
    SerializationError,
    TransportError,
    WebServiceError,
)
from .http import Request, Response
from .middleware import basic_auth, bearer_token, static_headers
from .outcome import HardFailure, SoftMiss, Success
from .response import NO_CONTENT, ResponseWrapper
from .serialization import UNSET
from .transport import HttpxTransport, Transport

__all__ = [
    "WebServiceClient",
    "ClientConfig",
    "ResponseMode",
    "WebServiceError",
    "ConfigurationError",
    "InvalidPath",
    "SerializationError",
    "DeserializationError",
    "TransportError",
    "RemoteError",
    "RequestCancelled",
    "Request",
    "Response",
    "ResponseWrapper",
    "NO_CONTENT",
    "UNSET",
    "SoftMiss",
    "Success",
    "HardFailure",
    "HttpxTransport",
    "Transport",
    "basic_auth",
    "bearer_token",
    "static_headers",
]
