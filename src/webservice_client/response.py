"""Response wrapper returned in ``ResponseMode.WRAPPED``."""

from __future__ import annotations

from typing import Any, Optional

import httpx

from .http import Response
from .serialization import Deserializer, deserialize


class _NoContent:
    """Successful response without a body.

    Truthy, so ``if client.delete(...)`` reads naturally, and distinct from
    ``None`` which means the resource does not exist.
    """

    _instance: Optional["_NoContent"] = None

    def __new__(cls) -> "_NoContent":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return True

    def __repr__(self) -> str:
        return "NO_CONTENT"


NO_CONTENT = _NoContent()


class ResponseWrapper:
    def __init__(self, response: Response, deserializer: Optional[Deserializer] = deserialize) -> None:
        self.response = response
        self._deserializer = deserializer

    @property
    def status_code(self) -> int:
        return self.response.status_code

    @property
    def status_line(self) -> str:
        return self.response.status_line

    @property
    def headers(self) -> httpx.Headers:
        return self.response.headers

    @property
    def content(self) -> bytes:
        return self.response.content

    @property
    def text(self) -> str:
        return self.response.text

    @property
    def is_success(self) -> bool:
        return self.response.is_success

    @property
    def is_error(self) -> bool:
        return self.response.status_code >= 400

    def success(self) -> bool:
        return self.response.is_success

    def ok(self) -> bool:
        return self.success()

    def data(self) -> Any:
        """Decode the body, or return ``NO_CONTENT`` when it is empty.

        With the deserializer disabled the raw bytes come back unchanged.
        """
        if not self.response.content:
            return NO_CONTENT
        if self._deserializer is None:
            return self.response.content
        return self._deserializer(self.response.content)

    def __repr__(self) -> str:
        return f"<ResponseWrapper [{self.status_code}]>"


__all__ = ["NO_CONTENT", "ResponseWrapper"]
