# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Utility exports."""

from .files import append_text, dump_json, has_entries, json_files, read_bytes, read_json, remove_file, write_text_atomically
from .markdown import artifact_url, build_info_url, heading, html_link, link, table

__all__ = [
    "append_text",
    "artifact_url",
    "build_info_url",
    "dump_json",
    "has_entries",
    "heading",
    "html_link",
    "json_files",
    "link",
    "read_bytes",
    "read_json",
    "remove_file",
    "table",
    "write_text_atomically",
]
