# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import base64

import pytest

from cmdsummary.config import SummarySettings
from cmdsummary.errors import ConfigurationError, ErrorCategory, RemoteError
from cmdsummary.http import HttpResponse, RetryConfig, StubHttpClient
from cmdsummary.remote import PlatformClient, ServerDetails, normalize_url, parse_major_version

VERSION_URL = "https://acme.jfrog.io/artifactory/api/system/version"
NO_RETRY = RetryConfig(max_attempts=1)


def _client(response, **server_kwargs):
    stub = StubHttpClient({VERSION_URL: response})
    server = ServerDetails(url="https://acme.jfrog.io", **server_kwargs)
    return PlatformClient(server, stub, retry_config=NO_RETRY), stub


def test_fetch_details_parses_major_version():
    client, stub = _client(HttpResponse(ok=True, status_code=200, text='{"version": "7.84.3", "revision": "78403900"}'))

    details = client.fetch_details()

    assert details.url == "https://acme.jfrog.io/"
    assert details.major_version == 7
    assert details.version == "7.84.3"
    assert stub.requests[0].headers["Accept"] == "application/json"


def test_access_token_is_sent_as_bearer():
    client, stub = _client(HttpResponse(ok=True, status_code=200, text='{"version": "6.23.1"}'), access_token="tok")
    assert client.fetch_details().major_version == 6
    assert stub.requests[0].headers["Authorization"] == "Bearer tok"


def test_basic_auth_when_no_token():
    client, stub = _client(HttpResponse(ok=True, status_code=200, text='{"version": "7.1.0"}'), user="ci", password="pw")
    client.fetch_details()
    expected = base64.b64encode(b"ci:pw").decode("ascii")
    assert stub.requests[0].headers["Authorization"] == f"Basic {expected}"


def test_transport_failure_raises_remote_error():
    client, _ = _client(
        HttpResponse(ok=False, error_message="timed out", error_type="ConnectTimeout", meta={"error_category": ErrorCategory.TIMEOUT})
    )
    with pytest.raises(RemoteError) as excinfo:
        client.fetch_details()
    assert excinfo.value.category == ErrorCategory.TIMEOUT
    assert "timed out" in str(excinfo.value)


def test_unauthorized_is_auth_error():
    client, _ = _client(HttpResponse(ok=True, status_code=401, text="{}"))
    with pytest.raises(RemoteError) as excinfo:
        client.fetch_details()
    assert excinfo.value.category == ErrorCategory.AUTH_ERROR


@pytest.mark.parametrize("body", ["not json", "{}", '{"version": "beta"}', "[]"])
def test_bad_payload_is_bad_response(body):
    client, _ = _client(HttpResponse(ok=True, status_code=200, text=body))
    with pytest.raises(RemoteError) as excinfo:
        client.fetch_details()
    assert excinfo.value.category == ErrorCategory.BAD_RESPONSE


def test_server_details_requires_url():
    with pytest.raises(ConfigurationError):
        ServerDetails.from_settings(SummarySettings())
    server = ServerDetails.from_settings(SummarySettings(platform_url="https://x.example", access_token="t"))
    assert server.url == "https://x.example/"
    assert server.auth_headers() == {"Authorization": "Bearer t"}
    assert ServerDetails(url="https://x.example/").auth_headers() == {}


def test_url_and_version_helpers():
    assert normalize_url(" https://a.example ") == "https://a.example/"
    assert normalize_url("https://a.example/") == "https://a.example/"
    assert parse_major_version("7.84.3") == 7
    assert parse_major_version("6") == 6
