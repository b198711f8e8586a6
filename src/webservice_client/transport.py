"""HTTP transports the client dispatches requests through."""

from __future__ import annotations

import logging
from typing import Optional, Protocol

import httpx

from .errors import TransportError
from .http import Request, Response

logger = logging.getLogger("webservice_client.transport")


class Transport(Protocol):
    def send(self, request: Request, timeout: float) -> Response:  # pragma: no cover - interface
        ...

    def close(self) -> None:  # pragma: no cover - interface
        ...


class HttpxTransport:
    """Sends requests through a shared :class:`httpx.Client`.

    Pass ``transport`` (for example :class:`httpx.MockTransport`) to swap the
    network layer without touching the client.
    """

    def __init__(
        self,
        timeout: float = 10.0,
        *,
        transport: Optional[httpx.BaseTransport] = None,
        client: Optional[httpx.Client] = None,
    ) -> None:
        self._client = client or httpx.Client(timeout=timeout, transport=transport)

    def send(self, request: Request, timeout: float) -> Response:
        try:
            response = self._client.request(
                request.method,
                request.url,
                headers=request.headers,
                content=request.content,
                timeout=timeout,
            )
        except httpx.HTTPError as exc:
            logger.debug("Transport failure method=%s url=%s error=%s", request.method, request.url, exc)
            raise TransportError(f"{request.method} {request.url} failed: {exc}") from exc
        return Response(
            status_code=response.status_code,
            headers=response.headers,
            content=response.content,
        )

    def close(self) -> None:
        self._client.close()


__all__ = ["Transport", "HttpxTransport"]
