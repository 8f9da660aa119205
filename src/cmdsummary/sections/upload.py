# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Uploaded files section, rendered as a tree of target paths."""

from __future__ import annotations

import logging

from ..results import PathTree, ResultStore
from ..utils.files import has_entries
from ..utils.markdown import artifact_url, heading
from .base import SectionContext, SectionKind, SectionRenderer

logger = logging.getLogger(__name__)

TITLE = "📁 Files uploaded to Artifactory by this workflow"


def should_render_uploads(context: SectionContext) -> bool:
    """Uploads are already listed by build-info output whenever it exists."""
    return not has_entries(context.section_dir(SectionKind.BUILD_INFO))


class UploadSection(SectionRenderer):
    kind = SectionKind.UPLOAD

    def render(self, context: SectionContext) -> str:
        if not should_render_uploads(context):
            logger.debug("Skipping upload summary generation due to build-info data to avoid duplications")
            return ""

        wrapper = ResultStore(context.results_path).load()
        if not wrapper.results:
            return ""

        platform = context.platform
        tree = PathTree()
        for result in wrapper:
            tree.add_path(result.target_path, artifact_url(platform.url, result.target_path, platform.major_version))
        if not tree:
            return ""
        return heading(TITLE) + "<pre>\n" + tree.render() + "</pre>\n\n"
