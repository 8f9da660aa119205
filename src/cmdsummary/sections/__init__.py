# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Report sections: security, build-info and upload."""

from .base import SECTION_ORDER, SectionContext, SectionKind, SectionRenderer
from .build_info import BuildInfoSection, load_build_infos, render_build_info_markdown
from .registry import default_renderers, ordered_renderers
from .security import JsonSecurityCollector, SecurityCollector, SecuritySection
from .upload import UploadSection, should_render_uploads

__all__ = [
    "SECTION_ORDER",
    "BuildInfoSection",
    "JsonSecurityCollector",
    "SectionContext",
    "SectionKind",
    "SectionRenderer",
    "SecurityCollector",
    "SecuritySection",
    "UploadSection",
    "default_renderers",
    "load_build_infos",
    "ordered_renderers",
    "render_build_info_markdown",
    "should_render_uploads",
]
