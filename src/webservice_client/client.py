"""Base client for JSON web services."""

from __future__ import annotations

import logging
import threading
import time
from typing import Any, Iterable, Mapping, Optional, Union

import httpx

from . import metrics
from .config import ClientConfig
from .errors import RequestCancelled, TransportError
from .http import QueryParams, Request, Response, append_query, build_query, prepare, resolve_path
from .middleware import Middleware, apply_middleware
from .outcome import Outcome, classify
from .serialization import UNSET, pick
from .transport import HttpxTransport, Transport

logger = logging.getLogger("webservice_client")


class WebServiceClient:
    """Verb helpers, retries and response handling shared by API clients.

    Subclass it, set ``default_base_url`` and add endpoint methods::

        class WidgetClient(WebServiceClient):
            default_base_url = "https://foo.com/v1"

            def __init__(self, token, **options):
                super().__init__(middleware=[bearer_token(token)], **options)

            def get_widget(self, widget_id):
                return self.get(f"/widgets/{widget_id}")

    GET requests answered with 404 or 410 return ``None``. Any other non-2xx
    response raises :class:`~webservice_client.errors.RemoteError`.
    """

    default_base_url: Optional[str] = None

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        *,
        transport: Union[Transport, httpx.BaseTransport, None] = None,
        middleware: Iterable[Middleware] = (),
        **options: Any,
    ) -> None:
        if config is None:
            options.setdefault("base_url", self.default_base_url)
            config = ClientConfig(**options)
        elif options:
            config = config.replace(**options)
        self._config = config
        if transport is None or isinstance(transport, httpx.BaseTransport):
            transport = HttpxTransport(config.timeout, transport=transport)
        self._transport = transport
        self._middleware = tuple(middleware)

    def __enter__(self) -> "WebServiceClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def base_url(self) -> str:
        return self._config.base_url

    def get(self, path: Optional[str], params: Optional[QueryParams] = None, **options: Any) -> Any:
        return self.execute("GET", path, params=params, **options).unwrap()

    def post(self, path: Optional[str], body: Any = None, **options: Any) -> Any:
        return self.execute("POST", path, body, **options).unwrap()

    def put(self, path: Optional[str], body: Any = None, **options: Any) -> Any:
        return self.execute("PUT", path, body, **options).unwrap()

    def patch(self, path: Optional[str], body: Any = None, **options: Any) -> Any:
        return self.execute("PATCH", path, body, **options).unwrap()

    def delete(self, path: Optional[str], **options: Any) -> Any:
        return self.execute("DELETE", path, **options).unwrap()

    def execute(
        self,
        method: str,
        path: Optional[str],
        body: Any = None,
        *,
        params: Optional[QueryParams] = None,
        headers: Optional[Mapping[str, str]] = None,
        serializer: Any = UNSET,
        deserializer: Any = UNSET,
        cancel: Optional[threading.Event] = None,
    ) -> Outcome:
        """Run one call through the pipeline and return its outcome without raising."""
        request = self.build_request(method, path, body, params=params, headers=headers, serializer=serializer)
        return self.dispatch(request, deserializer=deserializer, cancel=cancel)

    def build_request(
        self,
        method: str,
        path: Optional[str],
        body: Any = None,
        *,
        params: Optional[QueryParams] = None,
        headers: Optional[Mapping[str, str]] = None,
        serializer: Any = UNSET,
    ) -> Request:
        config = self._config
        url = resolve_path(config.base_url, path)
        if params:
            url = append_query(url, build_query(params, encode=config.encode_query))
        merged, content = prepare(
            config.content_type,
            config.headers,
            headers,
            body,
            pick(serializer, config.serializer),
        )
        return Request(method=method, url=url, headers=merged, content=content)

    def req(self, request: Request, **options: Any) -> Any:
        """Send a prepared request and return what the verb helpers would."""
        return self.dispatch(request, **options).unwrap()

    def dispatch(
        self,
        request: Request,
        *,
        deserializer: Any = UNSET,
        cancel: Optional[threading.Event] = None,
    ) -> Outcome:
        request = apply_middleware(request, self._middleware)
        response = self.send(request, cancel=cancel)
        return classify(
            request,
            response,
            self._config.response_mode,
            pick(deserializer, self._config.deserializer),
        )

    def send(self, request: Request, *, cancel: Optional[threading.Event] = None) -> Response:
        """Send ``request``, resending it after 5xx responses while retries remain."""
        max_retries = self._config.max_retries
        attempt = 0
        while True:
            attempt += 1
            if cancel is not None and cancel.is_set():
                raise RequestCancelled(f"{request.method} {request.url} cancelled before attempt {attempt}")
            try:
                response = self._attempt(request)
            except TransportError as exc:
                if not (self._config.retry_on_transport_error and attempt <= max_retries):
                    raise
                self.log(f"Transport error on attempt {attempt}/{max_retries + 1}: {exc}")
            else:
                if not (response.is_server_error and attempt <= max_retries):
                    return response
                self.log(f"Server error {response.status_code} on attempt {attempt}/{max_retries + 1}, retrying")
            metrics.record_retry(request.method)
            self._backoff(request, cancel)

    def _attempt(self, request: Request) -> Response:
        self._log_request(request)
        started = time.perf_counter()
        try:
            response = self._transport.send(request, self._config.timeout)
        except TransportError:
            metrics.record_attempt(request.method, "error", time.perf_counter() - started)
            raise
        metrics.record_attempt(request.method, str(response.status_code), time.perf_counter() - started)
        self._log_response(response)
        return response

    def _backoff(self, request: Request, cancel: Optional[threading.Event]) -> None:
        delay = self._config.backoff_seconds
        if cancel is None:
            time.sleep(delay)
        elif cancel.wait(delay):
            raise RequestCancelled(f"{request.method} {request.url} cancelled while waiting to retry")

    def _log_request(self, request: Request) -> None:
        self.log(f"{request.method} => {request.url}")
        content = request.content
        if not content:
            return
        if isinstance(content, str):
            self.log(content)
        else:
            self.log(bytes(content).decode("utf-8", errors="replace"))

    def _log_response(self, response: Response) -> None:
        self.log(str(response))

    def log(self, message: str) -> None:
        sink = self._config.logger
        if sink is None:
            return
        try:
            getattr(sink, "debug", sink)(message)
        except Exception:
            logger.debug("Client logger raised while logging a message", exc_info=True)

    def close(self) -> None:
        close = getattr(self._transport, "close", None)
        if close is not None:
            close()

__all__ = ["WebServiceClient"]
