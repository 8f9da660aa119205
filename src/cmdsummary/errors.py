# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Error taxonomy and exception helpers."""

from __future__ import annotations

from enum import Enum
from pathlib import Path


class ErrorCategory(str, Enum):
    TIMEOUT = "TIMEOUT"
    AUTH_ERROR = "AUTH_ERROR"
    SSL_ERROR = "SSL_ERROR"
    CONNECTION_ERROR = "CONNECTION_ERROR"
    DNS_ERROR = "DNS_ERROR"
    BAD_RESPONSE = "BAD_RESPONSE"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"
    NONE = "NONE"


class SummaryError(Exception):
    """Base class for every failure raised by cmdsummary."""


class ConfigurationError(SummaryError):
    """Required configuration (output directory, platform URL) is missing."""


class SummaryIOError(SummaryError):
    """Reading, writing or stat-ing a store or report file failed."""

    def __init__(self, message: str, path: Path | str | None = None):
        super().__init__(message)
        self.path = Path(path) if path is not None else None


class CorruptDataError(SummaryError, ValueError):
    """Persisted JSON is present but does not match the expected schema."""

    def __init__(self, message: str, path: Path | str | None = None):
        super().__init__(message)
        self.path = Path(path) if path is not None else None


class RemoteError(SummaryError):
    """Platform URL or version could not be obtained."""

    def __init__(self, message: str, category: ErrorCategory = ErrorCategory.UNKNOWN_ERROR):
        super().__init__(message)
        self.category = category


class SectionError(SummaryError):
    """A single section failed to generate; other sections are unaffected."""

    def __init__(self, section: str, message: str):
        super().__init__(f"{section}: {message}")
        self.section = section


def categorize_exception(exc: Exception) -> ErrorCategory:
    """
    Map Python/httpx exceptions to ErrorCategory.
    """
    import socket
    import ssl as ssl_module

    import httpx

    if isinstance(exc, httpx.TimeoutException):
        return ErrorCategory.TIMEOUT

    if isinstance(exc, (ssl_module.SSLError, ssl_module.CertificateError)):
        return ErrorCategory.SSL_ERROR

    if isinstance(exc, (socket.gaierror, socket.herror)):
        return ErrorCategory.DNS_ERROR

    if isinstance(exc, (httpx.ConnectError, httpx.RemoteProtocolError, httpx.NetworkError, httpx.ProxyError)):
        return ErrorCategory.CONNECTION_ERROR

    if isinstance(exc, (ConnectionError, ConnectionRefusedError, ConnectionResetError)):
        return ErrorCategory.CONNECTION_ERROR

    return ErrorCategory.UNKNOWN_ERROR


def categorize_status(status_code: int | None) -> ErrorCategory:
    if status_code in (401, 403):
        return ErrorCategory.AUTH_ERROR
    if status_code is None:
        return ErrorCategory.UNKNOWN_ERROR
    return ErrorCategory.BAD_RESPONSE


def error_category_to_reason(category: ErrorCategory | None) -> str:
    """User-facing reason string."""
    mapping = {
        ErrorCategory.TIMEOUT: "Timed out contacting the platform",
        ErrorCategory.AUTH_ERROR: "Platform rejected the supplied credentials",
        ErrorCategory.SSL_ERROR: "TLS/certificate issue",
        ErrorCategory.CONNECTION_ERROR: "Network connectivity issue",
        ErrorCategory.DNS_ERROR: "DNS resolution failure",
        ErrorCategory.BAD_RESPONSE: "Unexpected response from the platform",
        ErrorCategory.UNKNOWN_ERROR: "Network error while contacting the platform",
        ErrorCategory.NONE: "",
        None: "",
    }
    return mapping.get(category, "Platform request failed")
