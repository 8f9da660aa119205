# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Security command summary records."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..errors import CorruptDataError
from .scan import NOT_SCANNED


def format_findings(value: Any) -> str:
    """Render a count, list or preformatted label as a table cell."""
    if value is None:
        return NOT_SCANNED
    if isinstance(value, bool):
        raise CorruptDataError("findings must be a count, a list or a label")
    if isinstance(value, int):
        return "✅ none" if value == 0 else f"❌ {value}"
    if isinstance(value, list):
        return format_findings(len(value))
    if isinstance(value, dict):
        parts = [f"{severity}: {count}" for severity, count in value.items() if count]
        return ", ".join(parts) if parts else format_findings(0)
    return str(value)


@dataclass(frozen=True)
class SecurityScanRecord:
    name: str
    kind: str = "scan"
    violations: str = NOT_SCANNED
    vulnerabilities: str = NOT_SCANNED
    url: str = ""

    @classmethod
    def from_mapping(cls, data: Any) -> SecurityScanRecord:
        if not isinstance(data, dict) or not data.get("name"):
            raise CorruptDataError("security summary must be an object with a 'name'")
        return cls(
            name=str(data["name"]),
            kind=str(data.get("kind") or "scan"),
            violations=format_findings(data.get("violations")),
            vulnerabilities=format_findings(data.get("vulnerabilities")),
            url=str(data.get("url") or ""),
        )
