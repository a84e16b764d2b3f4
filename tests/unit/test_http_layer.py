# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import httpx

from urlpinger.config import HttpSettings
from urlpinger.errors import ErrorCategory
from urlpinger.http import StubHttpClient, create_default_http_client
from urlpinger.http.httpx_client import HttpxClient
from urlpinger.http.models import HttpRequest, HttpResponse


def _mock_client(handler) -> httpx.Client:
    return httpx.Client(transport=httpx.MockTransport(handler), follow_redirects=True)


def test_httpx_client_returns_status_headers_and_latency():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["user_agent"] = request.headers.get("user-agent")
        return httpx.Response(
            200,
            headers=[("Content-Type", "text/html"), ("Server", "nginx"), ("Server", "envoy")],
            content=b"<html></html>",
        )

    client = HttpxClient(HttpSettings(), client=_mock_client(handler))
    resp = client.request(HttpRequest(url="https://srv/"))
    client.close()

    assert resp.ok is True
    assert resp.status_code == 200
    assert resp.status_line == "200 OK"
    assert resp.headers["content-type"] == "text/html"
    assert resp.headers["server"] == "nginx"
    assert resp.elapsed_ms >= 0
    assert resp.url == "https://srv/"
    assert seen["user_agent"] == HttpSettings().user_agent


def test_httpx_client_follows_redirects():
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/old":
            return httpx.Response(301, headers={"Location": "https://srv/new"})
        return httpx.Response(204)

    client = HttpxClient(HttpSettings(), client=_mock_client(handler))
    resp = client.request(HttpRequest(url="https://srv/old"))
    assert resp.ok is True
    assert resp.status_line == "204 No Content"
    assert resp.url == "https://srv/new"


def test_httpx_client_converts_transport_errors():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    client = HttpxClient(HttpSettings(), client=_mock_client(handler))
    resp = client.request(HttpRequest(url="https://srv/"))
    assert resp.ok is False
    assert resp.status_code is None
    assert resp.status_line == ""
    assert resp.error_type == "ConnectError"
    assert "connection refused" in (resp.error_message or "")
    assert resp.error_category == ErrorCategory.CONNECTION_ERROR


def test_httpx_client_rejects_unsupported_scheme_without_network():
    client = HttpxClient(HttpSettings())
    try:
        resp = client.request(HttpRequest(url="ftp://x"))
    finally:
        client.close()
    assert resp.ok is False
    assert resp.error_category == ErrorCategory.INVALID_URL


def test_default_client_factory_builds_httpx_client():
    client = create_default_http_client(HttpSettings(timeout=1.0))
    try:
        assert isinstance(client, HttpxClient)
        assert client.settings.timeout == 1.0
        assert client.settings.verify_ssl is False
    finally:
        client.close()


def test_stub_client_records_requests_and_misses():
    stub = StubHttpClient({"https://x": HttpResponse(ok=True, status_code=200, reason_phrase="OK")})
    assert stub.request(HttpRequest(url="https://x")).status_line == "200 OK"
    miss = stub.request(HttpRequest(url="https://y"))
    assert miss.ok is False
    assert [r.url for r in stub.requests] == ["https://x", "https://y"]
    stub.close()
    assert stub.closed is True
