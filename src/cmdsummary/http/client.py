# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""HTTP client protocol used to reach the platform."""

from __future__ import annotations

import logging
from typing import Protocol

from .models import HttpRequest, HttpResponse

logger = logging.getLogger(__name__)


class HttpClient(Protocol):
    """
    Transport the platform client talks through.

    Implementations report transport failures as ``HttpResponse(ok=False)`` with no
    status code instead of raising, so ``send_with_retries`` can tell them apart
    from HTTP error statuses.
    """

    def request(self, request: HttpRequest) -> HttpResponse: ...

    def close(self) -> None:  # pragma: no cover - optional for adapters
        ...


def close_client(client: HttpClient | None) -> None:
    """Release ``client``; close failures only matter for debugging."""
    if client is None or not hasattr(client, "close"):
        return
    try:
        client.close()
    except Exception as exc:  # noqa: BLE001
        logger.debug("Ignoring error while closing %s: %s", type(client).__name__, exc)
