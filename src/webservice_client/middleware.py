"""Request middleware applied before a request is dispatched.

A middleware is any callable taking a :class:`~webservice_client.http.Request`
and returning either a request to continue with or ``None`` to keep the
(mutated) one it was given.
"""

from __future__ import annotations

import base64
from typing import Callable, Iterable, Mapping, Optional

from .http import Request

Middleware = Callable[[Request], Optional[Request]]


def apply_middleware(request: Request, middleware: Iterable[Middleware]) -> Request:
    for fn in middleware:
        result = fn(request)
        if result is not None:
            request = result
    return request


def static_headers(headers: Mapping[str, str], *, overwrite: bool = False) -> Middleware:
    """Add fixed headers, leaving ones already set on the request alone."""
    fixed = dict(headers)

    def middleware(request: Request) -> None:
        for name, value in fixed.items():
            if overwrite or name not in request.headers:
                request.headers[name] = value

    return middleware


def bearer_token(token: str, header: str = "Authorization") -> Middleware:
    def middleware(request: Request) -> None:
        request.headers[header] = f"Bearer {token}"

    return middleware


def basic_auth(username: str, password: str) -> Middleware:
    credentials = base64.b64encode(f"{username}:{password}".encode("utf-8")).decode("ascii")

    def middleware(request: Request) -> None:
        request.headers["Authorization"] = f"Basic {credentials}"

    return middleware


__all__ = ["Middleware", "apply_middleware", "static_headers", "bearer_token", "basic_auth"]
