# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import pytest

from cmdsummary.models import PlatformDetails
from cmdsummary.sections import SectionContext

_ISOLATED_ENV = (
    "JFROG_CLI_COMMAND_SUMMARY_OUTPUT_DIR",
    "JF_URL",
    "JF_ACCESS_TOKEN",
    "JF_USER",
    "JF_PASSWORD",
    "GITHUB_ACTIONS",
    "GITHUB_STEP_SUMMARY",
)


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch):
    for name in _ISOLATED_ENV:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def platform():
    return PlatformDetails(url="https://acme.jfrog.io/", major_version=7, version="7.84.3")


@pytest.fixture
def summary_dir(tmp_path):
    return tmp_path / "out" / "jfrog-command-summary"


@pytest.fixture
def context(summary_dir, platform):
    return SectionContext(summary_dir=summary_dir, platform=platform)
