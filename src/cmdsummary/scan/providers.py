# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Scan outcome providers, selected per indexed data kind."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from ..errors import CorruptDataError
from ..models import NOT_SCANNED_RESULT, ScanIndex, ScanResult, format_findings
from ..utils.files import read_json


class ScanResultProvider(Protocol):
    """Resolves one indexed data file into ``(result, fallback)``."""

    def scan(self, path: Path) -> tuple[ScanResult, ScanResult]: ...


class StaticScanResultProvider:
    """In-memory provider returning fixed outcomes; records what it was asked to scan."""

    def __init__(self, result: ScanResult, fallback: ScanResult = NOT_SCANNED_RESULT):
        self.result = result
        self.fallback = fallback
        self.scanned: list[Path] = []

    def scan(self, path: Path) -> tuple[ScanResult, ScanResult]:
        self.scanned.append(path)
        return self.result, self.fallback


class JsonScanResultProvider:
    """Reads ``violations``/``vulnerabilities`` from the indexed JSON file itself."""

    def scan(self, path: Path) -> tuple[ScanResult, ScanResult]:
        data = read_json(path)
        if data is None:
            return NOT_SCANNED_RESULT, NOT_SCANNED_RESULT
        if not isinstance(data, dict):
            raise CorruptDataError(f"{path}: scan data must be an object", path)
        result = ScanResult(
            violations=format_findings(data.get("violations")),
            vulnerabilities=format_findings(data.get("vulnerabilities")),
        )
        return result, NOT_SCANNED_RESULT


def default_providers() -> dict[str, ScanResultProvider]:
    provider = JsonScanResultProvider()
    return {index.value: provider for index in ScanIndex}
