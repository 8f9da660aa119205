# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Dataclass exports for cmdsummary."""

from .build_info import BuildInfoRecord, BuildModule, ModuleArtifact
from .platform import PlatformDetails
from .report import CombinedReport
from .results import Result, ResultsWrapper
from .scan import NOT_SCANNED, NOT_SCANNED_RESULT, ScanIndex, ScanResult, ScanResultsMapping
from .security import SecurityScanRecord, format_findings

__all__ = [
    "BuildInfoRecord",
    "BuildModule",
    "CombinedReport",
    "ModuleArtifact",
    "NOT_SCANNED",
    "NOT_SCANNED_RESULT",
    "PlatformDetails",
    "Result",
    "ResultsWrapper",
    "ScanIndex",
    "ScanResult",
    "ScanResultsMapping",
    "SecurityScanRecord",
    "format_findings",
]
