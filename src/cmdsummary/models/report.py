# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Combined report produced by a finalize call."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class CombinedReport:
    path: Path
    markdown: str
    sections: list[str] = field(default_factory=list)
    failed_sections: list[str] = field(default_factory=list)
