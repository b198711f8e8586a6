"""Default JSON hooks used to encode request bodies and decode responses."""

from __future__ import annotations

import json
from typing import Any, Callable, Optional, Union

from .errors import DeserializationError, SerializationError

Serializer = Callable[[Any], bytes]
Deserializer = Callable[[bytes], Any]


class _Unset:
    """Marks a per-call option that was not passed (``None`` means "disabled")."""

    _instance: Optional["_Unset"] = None

    def __new__(cls) -> "_Unset":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET = _Unset()


def serialize(value: Any) -> bytes:
    try:
        return json.dumps(value, separators=(",", ":")).encode("utf-8")
    except (TypeError, ValueError) as exc:
        raise SerializationError(f"Unable to encode request body as JSON: {exc}") from exc


def deserialize(content: Union[bytes, str]) -> Any:
    try:
        return json.loads(content)
    except (TypeError, ValueError) as exc:
        raise DeserializationError(f"Unable to decode response body as JSON: {exc}") from exc


def pick(option: Any, default: Any) -> Any:
    """Resolve a per-call override against the client-level setting."""
    return default if option is UNSET else option


__all__ = ["Serializer", "Deserializer", "UNSET", "serialize", "deserialize", "pick"]
