# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Aggregator: runs every section in report order and writes the combined markdown."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from ..config import MARKDOWN_FILE_NAME, OUTPUT_DIR_ENV, SummarySettings
from ..errors import ConfigurationError, SectionError
from ..models import CombinedReport, PlatformDetails
from ..sections import SectionContext, SectionRenderer, default_renderers, ordered_renderers
from ..utils.files import write_text_atomically

logger = logging.getLogger(__name__)


class Aggregator:
    """Combines independently generated sections into one report per finalize call."""

    def __init__(self, settings: SummarySettings, renderers: Iterable[SectionRenderer] | None = None):
        self.settings = settings
        self.renderers = ordered_renderers(renderers if renderers is not None else default_renderers())

    def should_run(self) -> bool:
        return self.settings.summary_dir is not None

    @property
    def summary_dir(self) -> Path:
        summary_dir = self.settings.summary_dir
        if summary_dir is None:
            raise ConfigurationError(
                "unable to generate the command summary because the output directory is not specified. "
                f"Please ensure that the environment variable '{OUTPUT_DIR_ENV}' is set before running your commands "
                "to enable summary generation"
            )
        return summary_dir

    @property
    def report_path(self) -> Path:
        return self.summary_dir / MARKDOWN_FILE_NAME

    def finalize(self, platform: PlatformDetails) -> CombinedReport | None:
        """
        Generate every section and write the combined report.

        A failing section is logged and left out. When no section produces content
        nothing is written and None is returned.
        """
        context = SectionContext(summary_dir=self.summary_dir, platform=platform)
        bodies: list[str] = []
        produced: list[str] = []
        failed: list[str] = []

        for renderer in self.renderers:
            section = renderer.kind.value
            try:
                markdown = renderer.generate(context)
            except SectionError as exc:
                logger.warning("Failed to generate markdown for section %s: %s", section, exc)
                failed.append(section)
                continue
            except Exception as exc:  # noqa: BLE001
                logger.warning("Failed to generate markdown for section %s: %s", section, exc, exc_info=True)
                failed.append(section)
                continue
            if markdown:
                bodies.append(markdown)
                produced.append(section)
            else:
                logger.debug("Section %s produced no content", section)

        combined = "".join(bodies)
        if not combined:
            logger.info("No section produced content; skipping %s", self.report_path)
            return None

        path = write_text_atomically(combined, self.report_path)
        logger.info("Wrote command summary (%s) to %s", ", ".join(produced), path)
        return CombinedReport(path=path, markdown=combined, sections=produced, failed_sections=failed)
