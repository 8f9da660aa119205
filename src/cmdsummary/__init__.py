# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
cmdsummary package entrypoint.

Accumulates the results of independently invoked commands (uploads, build-info
publication, security scans) under a shared output directory and renders them into
one markdown summary. Each invocation is its own process; the filesystem is the
only coordination point.
"""

from .aggregate import Aggregator
from .config import HttpSettings, SummarySettings, load_http_settings, load_summary_settings
from .errors import (
    ConfigurationError,
    CorruptDataError,
    RemoteError,
    SectionError,
    SummaryError,
    SummaryIOError,
)
from .http import HttpClient, HttpRequest, HttpResponse, HttpxClient
from .log import setup_logging
from .models import CombinedReport, PlatformDetails, Result, ResultsWrapper
from .remote import PlatformClient, ServerDetails
from .results import PathTree, ResultStore
from .runtime import CommandSummary
from .sections import BuildInfoSection, SectionKind, SectionRenderer, SecuritySection, UploadSection
from .version import __version__

__all__ = [
    "Aggregator",
    "BuildInfoSection",
    "CombinedReport",
    "CommandSummary",
    "ConfigurationError",
    "CorruptDataError",
    "HttpClient",
    "HttpRequest",
    "HttpResponse",
    "HttpSettings",
    "HttpxClient",
    "PathTree",
    "PlatformClient",
    "PlatformDetails",
    "RemoteError",
    "Result",
    "ResultStore",
    "ResultsWrapper",
    "SectionError",
    "SectionKind",
    "SectionRenderer",
    "SecuritySection",
    "ServerDetails",
    "SummaryError",
    "SummaryIOError",
    "SummarySettings",
    "UploadSection",
    "load_http_settings",
    "load_summary_settings",
    "setup_logging",
    "__version__",
]
