# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Section renderer base classes and context."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from ..config import MARKDOWN_FILE_NAME, RESULTS_FILE_NAME
from ..errors import SectionError, SummaryError
from ..models import PlatformDetails
from ..utils.files import remove_file, write_text_atomically

logger = logging.getLogger(__name__)


class SectionKind(str, Enum):
    SECURITY = "security"
    BUILD_INFO = "build-info"
    UPLOAD = "upload"

    def __str__(self) -> str:
        return self.value


# Layout order of the combined report.
SECTION_ORDER: tuple[SectionKind, ...] = (SectionKind.SECURITY, SectionKind.BUILD_INFO, SectionKind.UPLOAD)


@dataclass(frozen=True)
class SectionContext:
    summary_dir: Path
    platform: PlatformDetails

    def section_dir(self, kind: SectionKind) -> Path:
        return self.summary_dir / kind.value

    def section_markdown_path(self, kind: SectionKind) -> Path:
        return self.section_dir(kind) / MARKDOWN_FILE_NAME

    @property
    def results_path(self) -> Path:
        return self.section_dir(SectionKind.UPLOAD) / RESULTS_FILE_NAME


class SectionRenderer(ABC):
    """
    Produces one section of the combined report from that section's own artifacts.

    ``render`` returns an empty string when the section's inputs are absent; that is
    the normal "not exercised this run" case, and any markdown left by an earlier
    run is removed. Any failure surfaces as SectionError.
    """

    kind: SectionKind

    def generate(self, context: SectionContext) -> str:
        try:
            markdown = self.render(context)
            if markdown:
                write_text_atomically(markdown, context.section_markdown_path(self.kind))
            elif remove_file(context.section_markdown_path(self.kind)):
                logger.debug("Removed stale %s section markdown", self.kind.value)
        except SectionError:
            raise
        except (SummaryError, OSError) as exc:
            raise SectionError(self.kind.value, str(exc)) from exc
        return markdown

    @abstractmethod
    def render(self, context: SectionContext) -> str:
        raise NotImplementedError
