# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Remote platform metadata used to build valid links."""

from dataclasses import dataclass


@dataclass(frozen=True)
class PlatformDetails:
    """Base URL (always ending with ``/``) and the Artifactory major version."""

    url: str
    major_version: int
    version: str = ""
