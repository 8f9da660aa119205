# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import logging
import socket
import ssl
from pathlib import Path

import httpx
import pytest

from cmdsummary.config import HttpSettings, SummarySettings, load_http_settings, load_summary_settings
from cmdsummary.errors import (
    CorruptDataError,
    ErrorCategory,
    SectionError,
    SummaryError,
    categorize_exception,
    categorize_status,
    error_category_to_reason,
)
from cmdsummary.log import setup_logging


def test_http_settings_env_overrides(monkeypatch):
    monkeypatch.setenv("CMDSUMMARY_HTTP_TIMEOUT", "3.5")
    monkeypatch.setenv("CMDSUMMARY_HTTP_RETRIES", "5")
    monkeypatch.setenv("CMDSUMMARY_HTTP_VERIFY_SSL", "false")
    monkeypatch.setenv("CMDSUMMARY_USER_AGENT", "custom/1")

    settings = load_http_settings()

    assert settings.timeout == 3.5
    assert settings.max_retries == 5
    assert settings.verify_ssl is False
    assert settings.user_agent == "custom/1"


def test_http_settings_ignore_invalid_numbers(monkeypatch):
    monkeypatch.setenv("CMDSUMMARY_HTTP_TIMEOUT", "soon")
    monkeypatch.setenv("CMDSUMMARY_HTTP_RETRIES", "many")

    settings = HttpSettings.from_env()

    assert settings.timeout == HttpSettings.timeout
    assert settings.max_retries == HttpSettings.max_retries


def test_summary_settings_from_env(monkeypatch, tmp_path):
    monkeypatch.setenv("JFROG_CLI_COMMAND_SUMMARY_OUTPUT_DIR", str(tmp_path))
    monkeypatch.setenv("JF_URL", "https://acme.jfrog.io")
    monkeypatch.setenv("JF_ACCESS_TOKEN", "tok")

    settings = load_summary_settings()

    assert settings.output_dir == tmp_path
    assert settings.summary_dir == tmp_path / "jfrog-command-summary"
    assert settings.platform_url == "https://acme.jfrog.io"
    assert settings.access_token == "tok"
    assert settings.github_step_summary is None


def test_blank_output_dir_disables_summary(monkeypatch):
    monkeypatch.setenv("JFROG_CLI_COMMAND_SUMMARY_OUTPUT_DIR", "   ")
    settings = SummarySettings.from_env()
    assert settings.output_dir is None
    assert settings.summary_dir is None


def test_step_summary_only_inside_github_actions(monkeypatch, tmp_path):
    step_file = tmp_path / "step.md"
    monkeypatch.setenv("GITHUB_STEP_SUMMARY", str(step_file))
    assert SummarySettings.from_env().github_step_summary is None

    monkeypatch.setenv("GITHUB_ACTIONS", "true")
    assert SummarySettings.from_env().github_step_summary == Path(step_file)


@pytest.mark.parametrize(
    "exc, expected",
    [
        (httpx.ReadTimeout("slow"), ErrorCategory.TIMEOUT),
        (ssl.SSLError("bad cert"), ErrorCategory.SSL_ERROR),
        (socket.gaierror("no such host"), ErrorCategory.DNS_ERROR),
        (httpx.ConnectError("refused"), ErrorCategory.CONNECTION_ERROR),
        (ConnectionResetError("reset"), ErrorCategory.CONNECTION_ERROR),
        (RuntimeError("other"), ErrorCategory.UNKNOWN_ERROR),
    ],
)
def test_categorize_exception(exc, expected):
    assert categorize_exception(exc) == expected


def test_categorize_status():
    assert categorize_status(401) == ErrorCategory.AUTH_ERROR
    assert categorize_status(403) == ErrorCategory.AUTH_ERROR
    assert categorize_status(500) == ErrorCategory.BAD_RESPONSE
    assert categorize_status(None) == ErrorCategory.UNKNOWN_ERROR


def test_error_category_reasons():
    assert error_category_to_reason(ErrorCategory.TIMEOUT) == "Timed out contacting the platform"
    assert error_category_to_reason(None) == ""
    assert error_category_to_reason(ErrorCategory.NONE) == ""


def test_error_hierarchy():
    corrupt = CorruptDataError("bad", "/tmp/data.json")
    assert isinstance(corrupt, SummaryError)
    assert isinstance(corrupt, ValueError)
    assert corrupt.path == Path("/tmp/data.json")

    section = SectionError("upload", "boom")
    assert section.section == "upload"
    assert str(section) == "upload: boom"


def test_setup_logging_quiets_transport_loggers_unless_debug(monkeypatch):
    for name in ("httpx", "httpcore"):
        monkeypatch.setattr(logging.getLogger(name), "level", logging.NOTSET)

    assert setup_logging("info") == logging.INFO
    assert logging.getLogger("httpx").level == logging.WARNING
    assert logging.getLogger("httpcore").level == logging.WARNING

    assert setup_logging("DEBUG") == logging.DEBUG
    assert logging.getLogger("httpx").level == logging.NOTSET


def test_setup_logging_unknown_level_falls_back_to_warning(monkeypatch):
    monkeypatch.setattr(logging.getLogger("httpx"), "level", logging.NOTSET)
    monkeypatch.setattr(logging.getLogger("httpcore"), "level", logging.NOTSET)
    assert setup_logging("chatty") == logging.WARNING
