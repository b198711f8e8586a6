"""Exception hierarchy raised by the web service client."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Optional

import httpx

if TYPE_CHECKING:  # pragma: no cover
    from .http import Response

_JSON = object()


class WebServiceError(Exception):
    """Base class for every error raised by this package."""


class ConfigurationError(WebServiceError):
    pass


class InvalidPath(WebServiceError):
    pass


class SerializationError(WebServiceError):
    pass


class DeserializationError(WebServiceError):
    pass


class TransportError(WebServiceError):
    """The request never produced a response (connection, DNS, timeout)."""


class RequestCancelled(WebServiceError):
    pass


class RemoteError(WebServiceError):
    """A non-2xx response, carried whole so callers can inspect it."""

    def __init__(self, response: "Response", deserializer: Optional[Callable[[bytes], Any]] = _JSON) -> None:  # type: ignore[assignment]
        self.response = response
        self.deserializer = deserializer
        super().__init__(str(self))

    def __reduce__(self):
        if self.deserializer is _JSON:
            return (type(self), (self.response,))
        return (type(self), (self.response, self.deserializer))

    @property
    def status_code(self) -> int:
        return self.response.status_code

    @property
    def headers(self) -> httpx.Headers:
        return self.response.headers

    @property
    def content(self) -> bytes:
        return self.response.content

    @property
    def text(self) -> str:
        return self.response.text

    def data(self) -> Any:
        """Decode the error body with the deserializer active for the call.

        JSON unless another one was given. With deserialization disabled the raw
        bytes come back; an empty body decodes to ``None``.
        """
        if not self.response.content:
            return None
        if self.deserializer is None:
            return self.response.content
        if self.deserializer is _JSON:
            from .serialization import deserialize

            return deserialize(self.response.content)
        return self.deserializer(self.response.content)

    def __str__(self) -> str:
        status_line = self.response.status_line
        if self.response.content:
            return f"{status_line}\n{self.response.text}"
        return status_line


__all__ = [
    "WebServiceError",
    "ConfigurationError",
    "InvalidPath",
    "SerializationError",
    "DeserializationError",
    "TransportError",
    "RequestCancelled",
    "RemoteError",
]
