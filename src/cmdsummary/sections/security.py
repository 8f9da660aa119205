# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Security scan section."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from ..errors import CorruptDataError
from ..models import SecurityScanRecord
from ..utils.files import json_files, read_json
from ..utils.markdown import heading, link, table
from .base import SectionContext, SectionKind, SectionRenderer

TITLE = "🛡️ Security scans"


class SecurityCollector(Protocol):
    def collect(self, section_dir: Path) -> list[SecurityScanRecord]: ...


class JsonSecurityCollector:
    """Reads one summary object (or a list of them) from each ``*.json`` file in the section directory."""

    def collect(self, section_dir: Path) -> list[SecurityScanRecord]:
        records: list[SecurityScanRecord] = []
        for path in json_files(section_dir):
            data = read_json(path)
            if data is None:
                continue
            items = data if isinstance(data, list) else [data]
            try:
                records.extend(SecurityScanRecord.from_mapping(item) for item in items)
            except CorruptDataError as exc:
                raise CorruptDataError(f"{path}: {exc}", path) from exc
        return records


class SecuritySection(SectionRenderer):
    kind = SectionKind.SECURITY

    def __init__(self, collector: SecurityCollector | None = None):
        self.collector = collector or JsonSecurityCollector()

    def render(self, context: SectionContext) -> str:
        records = self.collector.collect(context.section_dir(self.kind))
        if not records:
            return ""
        rows = [(link(r.name, r.url), r.kind, r.violations, r.vulnerabilities) for r in records]
        return heading(TITLE) + table(("Target", "Scan", "Violations", "Vulnerabilities"), rows) + "\n"
