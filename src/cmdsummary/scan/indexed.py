# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Enumeration of indexed data files and their resolution into scan outcomes."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Protocol

from ..models import ScanResultsMapping
from ..utils.files import json_files
from .providers import ScanResultProvider

logger = logging.getLogger(__name__)

IndexedFiles = dict[str, dict[str, Path]]


class IndexedFileEnumerator(Protocol):
    def indexed_files(self, section_dir: Path) -> IndexedFiles: ...


class DirectoryIndexEnumerator:
    """
    Treats every subdirectory of the section directory as an index.

    The subdirectory name is the index identifier and each ``*.json`` file inside
    is one entry, keyed by its file stem (the scanned name).
    """

    def indexed_files(self, section_dir: Path) -> IndexedFiles:
        if not section_dir.is_dir():
            return {}
        indexed: IndexedFiles = {}
        for index_dir in sorted(p for p in section_dir.iterdir() if p.is_dir()):
            entries = {path.stem: path for path in json_files(index_dir)}
            if entries:
                indexed[index_dir.name] = entries
        return indexed


def resolve_scan_results(
    indexed_files: Mapping[str, Mapping[str, Path]],
    providers: Mapping[str, ScanResultProvider],
) -> ScanResultsMapping:
    """Build the scan outcome lookup for one finalize call."""
    mapping = ScanResultsMapping()
    for index, entries in indexed_files.items():
        provider = providers.get(index)
        if provider is None:
            logger.warning("No scan provider for index %s; %d entries left unscanned", index, len(entries))
            continue
        for scanned_name, path in entries.items():
            try:
                result, fallback = provider.scan(path)
            except Exception as exc:  # noqa: BLE001
                logger.warning("Failed to generate scan result for %s: %s", scanned_name, exc)
                continue
            mapping.set(scanned_name, result)
            mapping.fallback = fallback
    return mapping


__all__ = ["DirectoryIndexEnumerator", "IndexedFileEnumerator", "IndexedFiles", "resolve_scan_results"]
