from __future__ import annotations

from typing import Callable, List, Union

import pytest

from webservice_client import ClientConfig, WebServiceClient
from webservice_client.http import Request, Response

Reply = Union[Response, Exception]


class RecordingTransport:
    """Replays canned responses and keeps every request it was handed."""

    def __init__(self, *replies: Reply) -> None:
        self.replies: List[Reply] = list(replies)
        self.requests: List[Request] = []
        self.timeouts: List[float] = []
        self.closed = False

    def send(self, request: Request, timeout: float) -> Response:
        self.requests.append(request)
        self.timeouts.append(timeout)
        reply = self.replies.pop(0) if len(self.replies) > 1 else self.replies[0]
        if isinstance(reply, Exception):
            raise reply
        return reply

    def close(self) -> None:
        self.closed = True


class RecordingLogger:
    def __init__(self) -> None:
        self.messages: List[str] = []

    def debug(self, message: str) -> None:
        self.messages.append(message)


@pytest.fixture()
def log_sink() -> RecordingLogger:
    return RecordingLogger()


@pytest.fixture()
def make_client() -> Callable[..., WebServiceClient]:
    def factory(*replies: Reply, **options) -> WebServiceClient:
        options.setdefault("backoff_seconds", 0)
        cfg = ClientConfig(base_url="https://api.example.com/v1", **options)
        return WebServiceClient(cfg, transport=RecordingTransport(*replies))

    return factory
