# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Platform metadata client: base URL and Artifactory major version."""

from __future__ import annotations

import base64
import json
import logging
from dataclasses import dataclass

from ..config import ACCESS_TOKEN_ENV, PLATFORM_URL_ENV, SummarySettings
from ..errors import (
    ConfigurationError,
    ErrorCategory,
    RemoteError,
    categorize_status,
    error_category_to_reason,
)
from ..http.client import HttpClient
from ..http.models import HttpRequest, RetryConfig
from ..http.retry import send_with_retries
from ..models import PlatformDetails

logger = logging.getLogger(__name__)

VERSION_ENDPOINT = "artifactory/api/system/version"


def normalize_url(url: str) -> str:
    url = url.strip()
    return url if url.endswith("/") else url + "/"


def parse_major_version(version: str) -> int:
    major, _, _ = str(version).strip().partition(".")
    return int(major)


@dataclass
class ServerDetails:
    url: str
    access_token: str | None = None
    user: str | None = None
    password: str | None = None

    def __post_init__(self) -> None:
        self.url = normalize_url(self.url)

    @classmethod
    def from_settings(cls, settings: SummarySettings) -> ServerDetails:
        if not settings.platform_url:
            raise ConfigurationError(
                f"platform URL is mandatory for summary links; pass --url or set '{PLATFORM_URL_ENV}' "
                f"(with '{ACCESS_TOKEN_ENV}' for authentication)"
            )
        return cls(
            url=settings.platform_url,
            access_token=settings.access_token,
            user=settings.user,
            password=settings.password,
        )

    def auth_headers(self) -> dict[str, str]:
        if self.access_token:
            return {"Authorization": f"Bearer {self.access_token}"}
        if self.user and self.password:
            token = base64.b64encode(f"{self.user}:{self.password}".encode()).decode("ascii")
            return {"Authorization": f"Basic {token}"}
        return {}


class PlatformClient:
    """Fetches the metadata every rendered link depends on."""

    def __init__(self, server: ServerDetails, http_client: HttpClient, retry_config: RetryConfig | None = None):
        self.server = server
        self.http_client = http_client
        self.retry_config = retry_config

    def fetch_details(self) -> PlatformDetails:
        url = self.server.url + VERSION_ENDPOINT
        request = HttpRequest(url=url, headers={"Accept": "application/json", **self.server.auth_headers()})
        response = send_with_retries(self.http_client, request, retry_config=self.retry_config)

        if not response.ok:
            category = response.meta.get("error_category", ErrorCategory.UNKNOWN_ERROR)
            raise RemoteError(f"{error_category_to_reason(category)}: {response.error_message or 'no response'}", category)
        if not response.succeeded:
            category = categorize_status(response.status_code)
            raise RemoteError(f"{error_category_to_reason(category)}: HTTP {response.status_code} from {url}", category)

        try:
            payload = response.json()
            version = str(payload["version"])
            major = parse_major_version(version)
        except (json.JSONDecodeError, KeyError, TypeError, ValueError) as exc:
            raise RemoteError(f"failed to get Artifactory major version from {url}: {exc}", ErrorCategory.BAD_RESPONSE) from exc

        logger.debug("Platform %s runs Artifactory %s", self.server.url, version)
        return PlatformDetails(url=self.server.url, major_version=major, version=version)
