# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Markdown building blocks and platform link builders."""

from __future__ import annotations

import html
from collections.abc import Iterable, Sequence
from urllib.parse import quote

LEGACY_UI_MAJOR_VERSION = 6


def escape_cell(value: str) -> str:
    return str(value).replace("|", "\\|").replace("\n", " ")


def link(text: str, url: str | None) -> str:
    if not url:
        return text
    return f"[{text}]({url})"


def html_link(text: str, url: str | None) -> str:
    """Anchor for use inside raw HTML blocks; text and href are escaped."""
    if not url:
        return html.escape(text)
    return f'<a href="{html.escape(url, quote=True)}">{html.escape(text)}</a>'


def table(headers: Sequence[str], rows: Iterable[Sequence[str]]) -> str:
    lines = [
        "| " + " | ".join(escape_cell(h) for h in headers) + " |",
        "| " + " | ".join("---" for _ in headers) + " |",
    ]
    for row in rows:
        lines.append("| " + " | ".join(escape_cell(cell) for cell in row) + " |")
    return "\n".join(lines) + "\n"


def heading(text: str, level: int = 3) -> str:
    return f"{'#' * level} {text}\n\n"


def artifact_url(platform_url: str, path: str, major_version: int) -> str:
    """Browse link for an artifact path (``repo/dir/file``)."""
    encoded = quote(path.strip("/"))
    if major_version <= LEGACY_UI_MAJOR_VERSION:
        return f"{platform_url}artifactory/webapp/#/artifacts/browse/tree/General/{encoded}"
    return f"{platform_url}ui/repos/tree/General/{encoded}?clearFilter=true"


def build_info_url(platform_url: str, name: str, number: str, major_version: int) -> str:
    encoded_name = quote(name, safe="")
    encoded_number = quote(number, safe="")
    if major_version <= LEGACY_UI_MAJOR_VERSION:
        return f"{platform_url}artifactory/webapp/#/builds/{encoded_name}/{encoded_number}"
    return f"{platform_url}ui/builds/{encoded_name}/{encoded_number}/published"
