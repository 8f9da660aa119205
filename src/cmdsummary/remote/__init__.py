# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Remote platform collaborators."""

from .platform import PlatformClient, ServerDetails, normalize_url, parse_major_version

__all__ = ["PlatformClient", "ServerDetails", "normalize_url", "parse_major_version"]
