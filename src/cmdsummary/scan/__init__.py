# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Scan outcome resolution for indexed build-info data."""

from .indexed import DirectoryIndexEnumerator, IndexedFileEnumerator, IndexedFiles, resolve_scan_results
from .providers import JsonScanResultProvider, ScanResultProvider, StaticScanResultProvider, default_providers

__all__ = [
    "DirectoryIndexEnumerator",
    "IndexedFileEnumerator",
    "IndexedFiles",
    "JsonScanResultProvider",
    "ScanResultProvider",
    "StaticScanResultProvider",
    "default_providers",
    "resolve_scan_results",
]
