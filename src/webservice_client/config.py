"""Configuration objects for web service clients."""

from __future__ import annotations

import dataclasses
import enum
import os
import types
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

from .errors import ConfigurationError
from .serialization import Deserializer, Serializer, deserialize, serialize


class ResponseMode(str, enum.Enum):
    RAW = "raw"
    WRAPPED = "wrapped"


@dataclass(frozen=True)
class ClientConfig:
    base_url: str
    timeout: float = 10.0
    max_retries: int = 0
    backoff_seconds: float = 1.0
    content_type: str = "application/json"
    serializer: Optional[Serializer] = serialize
    deserializer: Optional[Deserializer] = deserialize
    logger: Optional[Any] = None
    response_mode: ResponseMode = ResponseMode.RAW
    headers: Mapping[str, str] = field(default_factory=dict)
    encode_query: bool = False
    retry_on_transport_error: bool = False

    def __post_init__(self) -> None:
        if not self.base_url:
            raise ConfigurationError("base_url is required")
        if not isinstance(self.headers, Mapping):
            raise ConfigurationError("headers must be a mapping")
        for name, kinds in (("max_retries", (int,)), ("backoff_seconds", (int, float)), ("timeout", (int, float))):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, kinds):
                raise ConfigurationError(f"{name} must be a number, got {value!r}")
        object.__setattr__(self, "headers", types.MappingProxyType(dict(self.headers)))
        if self.max_retries < 0:
            raise ConfigurationError("max_retries must be >= 0")
        if self.backoff_seconds < 0:
            raise ConfigurationError("backoff_seconds must be >= 0")
        if self.timeout <= 0:
            raise ConfigurationError("timeout must be positive")
        try:
            object.__setattr__(self, "response_mode", ResponseMode(self.response_mode))
        except ValueError as exc:
            raise ConfigurationError(f"Unknown response_mode {self.response_mode!r}") from exc

    @classmethod
    def from_env(cls, prefix: str = "WEBSERVICE_CLIENT_", **overrides: Any) -> "ClientConfig":
        """Build a config from ``<prefix>*`` environment variables.

        Keyword overrides win over the environment.
        """
        values: Dict[str, Any] = {}
        base_url = os.environ.get(f"{prefix}BASE_URL")
        if base_url:
            values["base_url"] = base_url
        content_type = os.environ.get(f"{prefix}CONTENT_TYPE")
        if content_type:
            values["content_type"] = content_type

        numeric = {
            "TIMEOUT": ("timeout", float),
            "RETRIES": ("max_retries", int),
            "BACKOFF_SECONDS": ("backoff_seconds", float),
        }
        for suffix, (name, convert) in numeric.items():
            raw = os.environ.get(f"{prefix}{suffix}")
            if raw is None or not raw.strip():
                continue
            try:
                values[name] = convert(raw.strip())
            except ValueError as exc:
                raise ConfigurationError(f"{prefix}{suffix} must be a number, got {raw!r}") from exc

        values.update(overrides)
        if "base_url" not in values:
            raise ConfigurationError(f"{prefix}BASE_URL is not set")
        return cls(**values)

    def replace(self, **changes: Any) -> "ClientConfig":
        return dataclasses.replace(self, **changes)


__all__ = ["ClientConfig", "ResponseMode"]
