# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Scan outcome models shared by the build-info and security sections."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

NOT_SCANNED = "not scanned"


class ScanIndex(str, Enum):
    """Well-known indexed data kinds emitted next to published build-info."""

    DOCKER_SCAN = "docker-scans"
    BUILD_SCAN = "build-scans"
    BINARIES_SCAN = "binaries-scans"


@dataclass(frozen=True)
class ScanResult:
    violations: str = NOT_SCANNED
    vulnerabilities: str = NOT_SCANNED


NOT_SCANNED_RESULT = ScanResult()


@dataclass
class ScanResultsMapping:
    """
    Scan outcomes keyed by scanned name, built for a single finalize call.

    ``fallback`` is what entries without their own outcome display.
    """

    results: dict[str, ScanResult] = field(default_factory=dict)
    fallback: ScanResult = NOT_SCANNED_RESULT

    def __contains__(self, name: str) -> bool:
        return name in self.results

    def __len__(self) -> int:
        return len(self.results)

    def set(self, name: str, result: ScanResult) -> None:
        self.results[name] = result

    def lookup(self, name: str) -> ScanResult:
        return self.results.get(name, self.fallback)
