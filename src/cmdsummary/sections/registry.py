# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Section renderer registry."""

from __future__ import annotations

from collections.abc import Iterable

from .base import SECTION_ORDER, SectionKind, SectionRenderer
from .build_info import BuildInfoSection
from .security import SecuritySection
from .upload import UploadSection


def default_renderers() -> list[SectionRenderer]:
    return [SecuritySection(), BuildInfoSection(), UploadSection()]


def ordered_renderers(renderers: Iterable[SectionRenderer]) -> list[SectionRenderer]:
    """Sort renderers into report order; unknown kinds and duplicates are rejected."""
    by_kind: dict[SectionKind, SectionRenderer] = {}
    for renderer in renderers:
        kind = SectionKind(renderer.kind)
        if kind in by_kind:
            raise ValueError(f"duplicate renderer for section {kind}")
        by_kind[kind] = renderer
    return [by_kind[kind] for kind in SECTION_ORDER if kind in by_kind]


__all__ = ["default_renderers", "ordered_renderers"]
