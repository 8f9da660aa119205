# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""High-level facade wiring settings, the result store, the platform client and the aggregator."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from .aggregate import Aggregator
from .config import RESULTS_FILE_NAME, HttpSettings, SummarySettings, load_http_settings, load_summary_settings
from .http.client import HttpClient, close_client
from .http.httpx_client import HttpxClient
from .http.models import RetryConfig
from .models import CombinedReport, PlatformDetails
from .remote import PlatformClient, ServerDetails
from .results import ResultStore
from .sections import SectionKind
from .utils.files import append_text

logger = logging.getLogger(__name__)


class CommandSummary:
    """
    Entry point used by the CLI: record results after each command, finalize once.

    The HTTP client is only created when platform metadata is actually needed, so
    ``record`` and ``reset`` never touch the network.
    """

    def __init__(
        self,
        settings: SummarySettings | None = None,
        http_client: HttpClient | None = None,
        aggregator: Aggregator | None = None,
        http_settings: HttpSettings | None = None,
    ):
        self.settings = settings or load_summary_settings()
        self.http_settings = http_settings or load_http_settings()
        self._http_client = http_client
        self.aggregator = aggregator or Aggregator(self.settings)

    @property
    def http_client(self) -> HttpClient:
        if self._http_client is None:
            self._http_client = HttpxClient(self.http_settings)
        return self._http_client

    def should_run(self) -> bool:
        return self.aggregator.should_run()

    @property
    def result_store(self) -> ResultStore:
        return ResultStore(self.aggregator.summary_dir / SectionKind.UPLOAD.value / RESULTS_FILE_NAME)

    def record(self, fragment_paths: Iterable[Path]) -> int:
        """Append fragment files to the cumulative store; returns the number of results added."""
        return self.result_store.append_fragments(fragment_paths)

    def reset(self) -> bool:
        return self.result_store.reset()

    def platform_details(self) -> PlatformDetails:
        server = ServerDetails.from_settings(self.settings)
        return PlatformClient(server, self.http_client, RetryConfig.from_settings(self.http_settings)).fetch_details()

    def finalize(self) -> CombinedReport | None:
        """Configuration and platform errors abort before any section runs."""
        summary_dir = self.aggregator.summary_dir
        platform = self.platform_details()
        logger.debug("Finalizing command summary in %s", summary_dir)
        report = self.aggregator.finalize(platform)
        if report is not None and self.settings.github_step_summary is not None:
            append_text(report.markdown, self.settings.github_step_summary)
            logger.info("Appended command summary to %s", self.settings.github_step_summary)
        return report

    def close(self) -> None:
        close_client(self._http_client)
        self._http_client = None

    def __enter__(self) -> CommandSummary:
        return self

    def __exit__(self, _exc_type, _exc, _tb) -> None:  # noqa: ANN001
        self.close()
