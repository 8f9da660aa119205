# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Logging helpers for cmdsummary."""

from __future__ import annotations

import logging
import os

DEFAULT_LOG_LEVEL = os.getenv("CMDSUMMARY_LOG_LEVEL", "WARNING").upper()
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

# Transport libraries that log every request at INFO.
TRANSPORT_LOGGERS = ("httpx", "httpcore")


def setup_logging(level: str | None = None) -> int:
    """
    Configure root logging for the CLI and return the numeric level in effect.

    Transport request logs are only let through at DEBUG, so ``--verbose`` shows
    the platform calls while INFO keeps to summary progress.
    """
    effective_level = getattr(logging, (level or DEFAULT_LOG_LEVEL).upper(), logging.WARNING)
    if not isinstance(effective_level, int):
        effective_level = logging.WARNING
    logging.basicConfig(level=effective_level, format=LOG_FORMAT)
    transport_level = logging.NOTSET if effective_level <= logging.DEBUG else logging.WARNING
    for name in TRANSPORT_LOGGERS:
        logging.getLogger(name).setLevel(transport_level)
    return effective_level


__all__ = ["setup_logging"]
