# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Configuration helpers for cmdsummary."""

import os
from dataclasses import dataclass
from pathlib import Path

from .version import __version__

DEFAULT_USER_AGENT = f"cmdsummary/{__version__}"

OUTPUT_DIR_ENV = "JFROG_CLI_COMMAND_SUMMARY_OUTPUT_DIR"
PLATFORM_URL_ENV = "JF_URL"
ACCESS_TOKEN_ENV = "JF_ACCESS_TOKEN"
USER_ENV = "JF_USER"
PASSWORD_ENV = "JF_PASSWORD"
GITHUB_ACTIONS_ENV = "GITHUB_ACTIONS"
GITHUB_STEP_SUMMARY_ENV = "GITHUB_STEP_SUMMARY"

SUMMARY_DIR_NAME = "jfrog-command-summary"
MARKDOWN_FILE_NAME = "markdown.md"
RESULTS_FILE_NAME = "data.json"


def _float_env(name: str, default: float) -> float:
    try:
        value = os.getenv(name)
        return float(value) if value is not None else default
    except ValueError:
        return default


def _int_env(name: str, default: int) -> int:
    try:
        value = os.getenv(name)
        return int(value) if value is not None else default
    except ValueError:
        return default


def _bool_env(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _str_env(name: str) -> str | None:
    value = os.getenv(name)
    if value is None or not value.strip():
        return None
    return value.strip()


@dataclass
class HttpSettings:
    """HTTP client defaults."""

    timeout: float = 10.0
    max_retries: int = 2
    backoff_factor: float = 2.0
    initial_delay: float = 1.0
    user_agent: str = DEFAULT_USER_AGENT
    allow_redirects: bool = True
    verify_ssl: bool = True

    @classmethod
    def from_env(cls) -> "HttpSettings":
        """Create settings from environment variables (evaluated at call time)."""
        return cls(
            timeout=_float_env("CMDSUMMARY_HTTP_TIMEOUT", cls.timeout),
            max_retries=_int_env("CMDSUMMARY_HTTP_RETRIES", cls.max_retries),
            backoff_factor=_float_env("CMDSUMMARY_HTTP_BACKOFF", cls.backoff_factor),
            initial_delay=_float_env("CMDSUMMARY_HTTP_INITIAL_DELAY", cls.initial_delay),
            user_agent=os.getenv("CMDSUMMARY_USER_AGENT", cls.user_agent),
            allow_redirects=_bool_env("CMDSUMMARY_HTTP_REDIRECTS", cls.allow_redirects),
            verify_ssl=_bool_env("CMDSUMMARY_HTTP_VERIFY_SSL", cls.verify_ssl),
        )


@dataclass
class SummarySettings:
    """Where summary state lives and which platform the links point at."""

    output_dir: Path | None = None
    platform_url: str | None = None
    access_token: str | None = None
    user: str | None = None
    password: str | None = None
    github_step_summary: Path | None = None

    @classmethod
    def from_env(cls) -> "SummarySettings":
        output_dir = _str_env(OUTPUT_DIR_ENV)
        step_summary = _str_env(GITHUB_STEP_SUMMARY_ENV) if _bool_env(GITHUB_ACTIONS_ENV, False) else None
        return cls(
            output_dir=Path(output_dir) if output_dir else None,
            platform_url=_str_env(PLATFORM_URL_ENV),
            access_token=_str_env(ACCESS_TOKEN_ENV),
            user=_str_env(USER_ENV),
            password=_str_env(PASSWORD_ENV),
            github_step_summary=Path(step_summary) if step_summary else None,
        )

    @property
    def summary_dir(self) -> Path | None:
        """Root of all summary artifacts, or None when summaries are disabled."""
        if self.output_dir is None:
            return None
        return self.output_dir / SUMMARY_DIR_NAME


def load_http_settings() -> HttpSettings:
    """Load HTTP settings from environment with sensible defaults."""
    return HttpSettings.from_env()


def load_summary_settings() -> SummarySettings:
    return SummarySettings.from_env()
