from __future__ import annotations

import base64

from webservice_client.http import Request
from webservice_client.middleware import apply_middleware, basic_auth, bearer_token, static_headers


def test_static_headers_do_not_clobber_by_default() -> None:
    request = Request("GET", "https://x", {"X-Token": "call"})
    apply_middleware(request, [static_headers({"X-Token": "default", "X-Client": "widgets"})])
    assert request.headers["x-token"] == "call"
    assert request.headers["x-client"] == "widgets"


def test_static_headers_overwrite() -> None:
    request = Request("GET", "https://x", {"X-Token": "call"})
    apply_middleware(request, [static_headers({"X-Token": "default"}, overwrite=True)])
    assert request.headers["x-token"] == "default"


def test_bearer_and_basic_auth() -> None:
    request = apply_middleware(Request("GET", "https://x"), [bearer_token("t0k")])
    assert request.headers["authorization"] == "Bearer t0k"

    request = apply_middleware(Request("GET", "https://x"), [basic_auth("user", "pa:ss")])
    scheme, encoded = request.headers["authorization"].split(" ", 1)
    assert scheme == "Basic"
    assert base64.b64decode(encoded) == b"user:pa:ss"


def test_middleware_may_replace_the_request() -> None:
    def reroute(request: Request) -> Request:
        return Request(request.method, request.url.replace("/v1/", "/v2/"), request.headers, request.content)

    seen = []
    request = apply_middleware(Request("GET", "https://x/v1/a"), [reroute, lambda r: seen.append(r.url)])
    assert request.url == "https://x/v2/a"
    assert seen == ["https://x/v2/a"]
