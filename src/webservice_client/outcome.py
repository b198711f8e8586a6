"""Classification of a final response into a caller-visible outcome."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional, Union

from .config import ResponseMode
from .errors import RemoteError
from .http import Request, Response
from .response import NO_CONTENT, ResponseWrapper
from .serialization import Deserializer, deserialize

SOFT_MISS_STATUSES = frozenset({404, 410})


@dataclass(frozen=True)
class SoftMiss:
    """GET of a resource that does not exist (404/410)."""

    response: Response

    def unwrap(self) -> None:
        return None


@dataclass(frozen=True)
class Success:
    value: Any

    def unwrap(self) -> Any:
        return self.value


@dataclass(frozen=True)
class HardFailure:
    response: Response
    deserializer: Optional[Deserializer] = field(default=deserialize, compare=False)

    @property
    def error(self) -> RemoteError:
        return RemoteError(self.response, self.deserializer)

    def unwrap(self) -> Any:
        raise self.error


Outcome = Union[SoftMiss, Success, HardFailure]


def classify(
    request: Request,
    response: Response,
    mode: ResponseMode = ResponseMode.RAW,
    deserializer: Optional[Deserializer] = None,
) -> Outcome:
    if request.method == "GET" and response.status_code in SOFT_MISS_STATUSES:
        return SoftMiss(response)
    if not response.is_success:
        return HardFailure(response, deserializer)
    if mode is ResponseMode.WRAPPED:
        return Success(ResponseWrapper(response, deserializer))
    if not response.content:
        return Success(NO_CONTENT)
    if deserializer is None:
        return Success(response.content)
    return Success(deserializer(response.content))


__all__ = ["SOFT_MISS_STATUSES", "SoftMiss", "Success", "HardFailure", "Outcome", "classify"]
