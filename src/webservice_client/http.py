"""Request/response value types and the request preparation steps."""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Optional, Sequence, Tuple, Union
from urllib.parse import quote

import httpx

from .errors import ConfigurationError, InvalidPath, SerializationError
from .serialization import Serializer

Scalar = Union[str, int, float, bool]
QueryParams = Mapping[str, Union[Scalar, Sequence[Scalar]]]

_JSON_CONTENT = re.compile(r"json", re.IGNORECASE)
_CONTENT_TYPE_SPELLINGS = {"content-type", "content_type", "contenttype"}


@dataclass
class Request:
    method: str
    url: str
    headers: httpx.Headers = field(default_factory=httpx.Headers)
    content: Optional[bytes] = None

    def __post_init__(self) -> None:
        self.method = self.method.upper()
        if not isinstance(self.headers, httpx.Headers):
            self.headers = httpx.Headers(self.headers)
        if isinstance(self.content, str):
            self.content = self.content.encode("utf-8")
        elif isinstance(self.content, bytearray):
            self.content = bytes(self.content)


@dataclass
class Response:
    status_code: int
    headers: httpx.Headers = field(default_factory=httpx.Headers)
    content: bytes = b""

    def __post_init__(self) -> None:
        if not isinstance(self.headers, httpx.Headers):
            self.headers = httpx.Headers(self.headers)

    @property
    def reason_phrase(self) -> str:
        return httpx.codes.get_reason_phrase(self.status_code)

    @property
    def status_line(self) -> str:
        return f"{self.status_code} {self.reason_phrase}".rstrip()

    @property
    def text(self) -> str:
        return self.content.decode("utf-8", errors="replace")

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300

    @property
    def is_server_error(self) -> bool:
        return 500 <= self.status_code < 600

    def __str__(self) -> str:
        lines = [self.status_line]
        lines.extend(f"{name}: {value}" for name, value in self.headers.multi_items())
        lines.append("")
        lines.append(self.text)
        return "\n".join(lines)


def resolve_path(base_url: str, path: Optional[str]) -> str:
    if not path:
        raise InvalidPath("The path is missing")
    # Fully qualified URLs bypass base_url; everything else is concatenated as-is.
    if path.startswith("http"):
        return path
    return base_url + path


def build_query(params: Optional[QueryParams], encode: bool = False) -> str:
    """Flatten ``params`` into ``key=value`` / ``key[]=v1&key[]=v2`` pairs.

    Values are joined literally unless ``encode`` is set.
    """
    if not params:
        return ""
    if not isinstance(params, Mapping):
        raise ConfigurationError("query params must be a mapping")

    def fmt(value: Any) -> str:
        text = _scalar_text(value)
        return quote(text, safe="") if encode else text

    pairs = []
    for key, value in params.items():
        if isinstance(value, (list, tuple)):
            pairs.extend(f"{fmt(key)}[]={fmt(item)}" for item in value)
        else:
            pairs.append(f"{fmt(key)}={fmt(value)}")
    return "&".join(pairs)


def _scalar_text(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def append_query(url: str, query: str) -> str:
    if not query:
        return url
    separator = "&" if "?" in url else "?"
    return f"{url}{separator}{query}"


def merge_headers(
    defaults: Optional[Mapping[str, str]],
    user_headers: Optional[Mapping[str, str]],
    content_type: Optional[str],
) -> httpx.Headers:
    if user_headers is not None and not isinstance(user_headers, Mapping):
        raise ConfigurationError("headers must be a mapping")
    merged = httpx.Headers()
    for source in (defaults or {}, user_headers or {}):
        for name, value in source.items():
            if name.lower() in _CONTENT_TYPE_SPELLINGS:
                name = "Content-Type"
            merged[name] = value
    if content_type and "content-type" not in merged:
        merged["Content-Type"] = content_type
    return merged


def is_json_content(content_type: Optional[str]) -> bool:
    return bool(content_type and _JSON_CONTENT.search(content_type))


def encode_body(body: Any, content_type: Optional[str], serializer: Optional[Serializer]) -> Optional[bytes]:
    if body is None:
        return None
    if serializer is not None and is_json_content(content_type):
        return serializer(body)
    if isinstance(body, str):
        return body.encode("utf-8")
    if isinstance(body, (bytes, bytearray)):
        return bytes(body)
    raise SerializationError(
        f"Cannot send a {type(body).__name__} body without a serializer for content type {content_type!r}"
    )


def prepare(
    content_type: Optional[str],
    default_headers: Optional[Mapping[str, str]],
    user_headers: Optional[Mapping[str, str]],
    body: Any,
    serializer: Optional[Serializer],
) -> Tuple[httpx.Headers, Optional[bytes]]:
    """Merge headers over the defaults and encode ``body`` for the wire."""
    headers = merge_headers(default_headers, user_headers, content_type)
    return headers, encode_body(body, headers.get("content-type"), serializer)


__all__ = [
    "Request",
    "Response",
    "QueryParams",
    "resolve_path",
    "build_query",
    "append_query",
    "merge_headers",
    "is_json_content",
    "encode_body",
    "prepare",
]
