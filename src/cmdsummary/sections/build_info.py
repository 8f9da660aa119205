# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Published build-info section, cross-referenced with indexed scan data."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path

from ..errors import CorruptDataError
from ..models import BuildInfoRecord, PlatformDetails, ScanResultsMapping
from ..results import PathTree
from ..scan import (
    DirectoryIndexEnumerator,
    IndexedFileEnumerator,
    IndexedFiles,
    ScanResultProvider,
    default_providers,
    resolve_scan_results,
)
from ..utils.files import json_files, read_json
from ..utils.markdown import artifact_url, build_info_url, heading, link, table
from .base import SectionContext, SectionKind, SectionRenderer

BUILDS_TITLE = "🛠️ Published Build Infos"
SCANS_TITLE = "🔎 Scanned Artifacts"
SCAN_HEADERS = ("Name", "Type", "Violations", "Vulnerabilities")


def load_build_infos(section_dir: Path) -> list[BuildInfoRecord]:
    builds: list[BuildInfoRecord] = []
    for path in json_files(section_dir):
        data = read_json(path)
        if data is None:
            continue
        try:
            builds.append(BuildInfoRecord.from_mapping(data))
        except CorruptDataError as exc:
            raise CorruptDataError(f"{path}: {exc}", path) from exc
    return builds


def _index_label(index: str) -> str:
    return index.removesuffix("-scans").removesuffix("-scan")


def render_build_info_markdown(
    builds: list[BuildInfoRecord],
    indexed: IndexedFiles,
    scan_results: ScanResultsMapping,
    platform: PlatformDetails,
) -> str:
    parts: list[str] = []

    if builds:
        rows = []
        for build in builds:
            outcome = scan_results.lookup(build.name)
            url = build.url or build_info_url(platform.url, build.name, build.number, platform.major_version)
            rows.append((link(build.display_name, url), outcome.violations, outcome.vulnerabilities))
        parts.append(heading(BUILDS_TITLE) + table(("Build Info", "Violations", "Vulnerabilities"), rows) + "\n")

    scan_rows: list[tuple[str, str, str, str]] = []
    listed: set[str] = {build.name for build in builds}
    for build in builds:
        for module in build.modules:
            if module.id in listed:
                continue
            listed.add(module.id)
            outcome = scan_results.lookup(module.id)
            scan_rows.append((module.id, module.type, outcome.violations, outcome.vulnerabilities))
    for index, entries in indexed.items():
        for scanned_name in entries:
            if scanned_name in listed:
                continue
            listed.add(scanned_name)
            outcome = scan_results.lookup(scanned_name)
            scan_rows.append((scanned_name, _index_label(index), outcome.violations, outcome.vulnerabilities))
    if scan_rows:
        parts.append(heading(SCANS_TITLE) + table(SCAN_HEADERS, scan_rows) + "\n")

    for build in builds:
        tree = PathTree()
        for module in build.modules:
            for artifact in module.artifacts:
                tree.add_path(artifact.path, artifact_url(platform.url, artifact.path, platform.major_version))
        if tree:
            parts.append(heading(f"📦 Artifacts of {build.display_name}", level=4) + "<pre>\n" + tree.render() + "</pre>\n\n")

    return "".join(parts)


class BuildInfoSection(SectionRenderer):
    """
    Renders published builds and their scan outcomes.

    Scan outcomes are resolved per call through providers keyed by the opaque
    index identifiers the enumerator reports, so no scan backend is assumed.
    """

    kind = SectionKind.BUILD_INFO

    def __init__(
        self,
        enumerator: IndexedFileEnumerator | None = None,
        providers: Mapping[str, ScanResultProvider] | None = None,
    ):
        self.enumerator = enumerator or DirectoryIndexEnumerator()
        self.providers = dict(providers) if providers is not None else default_providers()

    def render(self, context: SectionContext) -> str:
        section_dir = context.section_dir(self.kind)
        builds = load_build_infos(section_dir)
        indexed = self.enumerator.indexed_files(section_dir)
        if not builds and not indexed:
            return ""
        scan_results = resolve_scan_results(indexed, self.providers)
        return render_build_info_markdown(builds, indexed, scan_results, context.platform)
