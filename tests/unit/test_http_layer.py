# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import time

import httpx

from cmdsummary.config import HttpSettings
from cmdsummary.errors import ErrorCategory
from cmdsummary.http import (
    HttpRequest,
    HttpResponse,
    HttpxClient,
    RetryConfig,
    StubHttpClient,
    close_client,
    send_with_retries,
)


class SequenceHttpClient:
    def __init__(self, responses):
        self._responses = list(responses)
        self.calls = 0

    def request(self, request: HttpRequest) -> HttpResponse:  # noqa: ARG002
        self.calls += 1
        return self._responses[min(self.calls - 1, len(self._responses) - 1)]

    def close(self) -> None:  # pragma: no cover - unused
        return None


def test_retry_config_from_settings_clamps_minimum():
    settings = HttpSettings(max_retries=0)
    retry = RetryConfig.from_settings(settings)
    assert retry.max_attempts == 1
    assert retry.backoff_factor == settings.backoff_factor


def test_send_with_retries_success_after_retry(monkeypatch):
    sleeps = []
    monkeypatch.setattr(time, "sleep", sleeps.append)
    client = SequenceHttpClient([HttpResponse(ok=False, error_message="timeout"), HttpResponse(ok=True, status_code=200, text="done")])

    response = send_with_retries(client, HttpRequest(url="http://x"), retry_config=RetryConfig(max_attempts=3, initial_delay=0.5))

    assert response.text == "done"
    assert response.meta["retry_count"] == 1
    assert client.calls == 2
    assert sleeps == [0.5]


def test_send_with_retries_does_not_retry_http_errors(monkeypatch):
    monkeypatch.setattr(time, "sleep", lambda _: None)
    client = SequenceHttpClient([HttpResponse(ok=True, status_code=500)])
    response = send_with_retries(client, HttpRequest(url="http://x"), retry_config=RetryConfig(max_attempts=3))
    assert response.status_code == 500
    assert client.calls == 1


def test_send_with_retries_exhausts(monkeypatch):
    monkeypatch.setattr(time, "sleep", lambda _: None)
    client = SequenceHttpClient([HttpResponse(ok=False, error_message="down")])
    response = send_with_retries(client, HttpRequest(url="http://x"), retry_config=RetryConfig(max_attempts=2))
    assert response.ok is False
    assert response.meta["retry_exhausted"] is True
    assert client.calls == 2


def test_send_with_retries_wraps_client_exceptions():
    class Raising:
        def request(self, request):
            raise ValueError("boom")

    response = send_with_retries(Raising(), HttpRequest(url="http://x"), retry_config=RetryConfig(max_attempts=1))
    assert response.ok is False
    assert response.error_type == "ValueError"


def test_httpx_client_returns_normalized_response():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["ua"] = request.headers["user-agent"]
        return httpx.Response(200, json={"version": "7.84.3"}, headers={"X-Test": "1"})

    client = HttpxClient(HttpSettings(user_agent="ua/1"), client=httpx.Client(transport=httpx.MockTransport(handler)))
    response = client.request(HttpRequest(url="https://acme/api"))

    assert response.succeeded
    assert response.json() == {"version": "7.84.3"}
    assert response.headers["x-test"] == "1"
    assert seen["ua"] == "ua/1"
    client.close()


def test_httpx_client_categorizes_transport_errors():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectTimeout("timed out", request=request)

    client = HttpxClient(HttpSettings(), client=httpx.Client(transport=httpx.MockTransport(handler)))
    response = client.request(HttpRequest(url="https://acme/api"))

    assert response.ok is False
    assert response.status_code is None
    assert response.error_type == "ConnectTimeout"
    assert response.meta["error_category"] == ErrorCategory.TIMEOUT


def test_stub_http_client_returns_registered_responses():
    stub = StubHttpClient()
    stub.add("http://example", HttpResponse(ok=True, status_code=200, text="hello"))
    assert stub.request(HttpRequest(url="http://example")).text == "hello"
    missing = stub.request(HttpRequest(url="http://missing"))
    assert missing.ok is False
    assert [r.url for r in stub.requests] == ["http://example", "http://missing"]


def test_close_client_tolerates_failures_and_missing_close():
    class Closable:
        closed = False

        def close(self):
            self.closed = True

    class Exploding:
        def close(self):
            raise RuntimeError("already closed")

    closable = Closable()
    close_client(closable)
    assert closable.closed is True
    close_client(Exploding())
    close_client(object())
    close_client(None)
