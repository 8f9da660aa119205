# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Filesystem helpers: atomic replacement and tolerant JSON reads."""

from __future__ import annotations

import json
import os
from contextlib import suppress
from pathlib import Path
from typing import Any
from uuid import uuid4

from ..errors import CorruptDataError, SummaryIOError


def _atomic_temp_path(target_path: Path) -> Path:
    return target_path.parent / f".{target_path.name}.{uuid4().hex}.tmp"


def write_text_atomically(text: str, output_path: Path) -> Path:
    """Replace ``output_path`` with ``text`` or leave the previous content untouched."""
    temp_path = _atomic_temp_path(output_path)
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(temp_path, "w", encoding="utf-8", newline="") as handle:
            handle.write(text)
            handle.flush()
            os.fsync(handle.fileno())
        os.replace(temp_path, output_path)
    except OSError as exc:
        raise SummaryIOError(f"failed to write {output_path}: {exc}", output_path) from exc
    finally:
        try:
            with suppress(FileNotFoundError):
                temp_path.unlink()
        except OSError as exc:
            raise SummaryIOError(f"failed to remove temporary file {temp_path}: {exc}", temp_path) from exc
    return output_path


def remove_file(path: Path) -> bool:
    """Delete ``path``; returns False when it did not exist."""
    try:
        path.unlink()
    except FileNotFoundError:
        return False
    except OSError as exc:
        raise SummaryIOError(f"failed to remove {path}: {exc}", path) from exc
    return True


def dump_json(payload: Any) -> str:
    """Stable, human-readable JSON with a trailing newline."""
    return json.dumps(payload, indent=2, ensure_ascii=False) + "\n"


def read_bytes(path: Path, *, missing_ok: bool = False) -> bytes:
    """Read a file; a missing file yields ``b""`` when ``missing_ok``."""
    try:
        return path.read_bytes()
    except FileNotFoundError as exc:
        if missing_ok:
            return b""
        raise SummaryIOError(f"file not found: {path}", path) from exc
    except OSError as exc:
        raise SummaryIOError(f"failed to read {path}: {exc}", path) from exc


def read_json(path: Path, *, missing_ok: bool = False) -> Any | None:
    """
    Load JSON from ``path``.

    Returns None for an empty (or, with ``missing_ok``, absent) file. Non-empty content
    that is not valid JSON raises CorruptDataError.
    """
    raw = read_bytes(path, missing_ok=missing_ok)
    if not raw.strip():
        return None
    try:
        return json.loads(raw.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise CorruptDataError(f"{path} is not valid JSON: {exc}", path) from exc


def has_entries(directory: Path) -> bool:
    """True when ``directory`` exists and contains at least one entry."""
    try:
        with os.scandir(directory) as entries:
            return any(True for _ in entries)
    except (FileNotFoundError, NotADirectoryError):
        return False
    except OSError as exc:
        raise SummaryIOError(f"failed to list {directory}: {exc}", directory) from exc


def json_files(directory: Path) -> list[Path]:
    """Sorted ``*.json`` files directly under ``directory``; empty when it does not exist."""
    if not directory.is_dir():
        return []
    try:
        return sorted(path for path in directory.iterdir() if path.is_file() and path.suffix == ".json")
    except OSError as exc:
        raise SummaryIOError(f"failed to list {directory}: {exc}", directory) from exc


def append_text(text: str, path: Path) -> None:
    try:
        with open(path, "a", encoding="utf-8") as handle:
            handle.write(text)
    except OSError as exc:
        raise SummaryIOError(f"failed to append to {path}: {exc}", path) from exc
