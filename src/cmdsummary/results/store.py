# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Cumulative, append-only store of transfer results.

Every command invocation runs in its own process, so the store is a JSON file at a
fixed path that each invocation reads, extends and replaces as one cycle. Writes go
through a temp file and an atomic rename; a crash mid-write leaves the previous
content in place.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from pathlib import Path

from ..errors import CorruptDataError
from ..models import Result, ResultsWrapper
from ..utils.files import dump_json, read_json, remove_file, write_text_atomically

logger = logging.getLogger(__name__)


def load_results_file(path: Path, *, missing_ok: bool) -> ResultsWrapper:
    """Parse one ResultsWrapper document; empty files are empty wrappers."""
    data = read_json(path, missing_ok=missing_ok)
    if data is None:
        return ResultsWrapper()
    try:
        return ResultsWrapper.from_mapping(data)
    except CorruptDataError as exc:
        raise CorruptDataError(f"{path}: {exc}", path) from exc


class ResultStore:
    """Durable log of Result records for one pipeline run."""

    def __init__(self, path: Path):
        self.path = Path(path)

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"ResultStore({str(self.path)!r})"

    def exists(self) -> bool:
        return self.path.is_file()

    def load(self) -> ResultsWrapper:
        wrapper = load_results_file(self.path, missing_ok=True)
        if not wrapper.results:
            logger.debug("No stored results in %s", self.path)
        return wrapper

    def save(self, wrapper: ResultsWrapper) -> None:
        write_text_atomically(dump_json(wrapper.to_dict()), self.path)

    def append(self, new_results: Sequence[Result]) -> None:
        """Concatenate ``new_results`` to the stored sequence and persist it."""
        if not new_results:
            return
        wrapper = self.load()
        wrapper.extend(list(new_results))
        self.save(wrapper)
        logger.info("Appended %d result(s) to %s (%d total)", len(new_results), self.path, len(wrapper))

    def append_fragments(self, fragment_paths: Iterable[Path]) -> int:
        """
        Merge externally produced fragment files into the store.

        All fragments are read before the store is touched, so one unreadable or
        malformed fragment aborts the whole merge.
        """
        collected = read_fragments(fragment_paths)
        self.append(collected)
        return len(collected)

    def reset(self) -> bool:
        """Delete the store file. Returns False when there was nothing to delete."""
        if not remove_file(self.path):
            return False
        logger.info("Removed result store %s", self.path)
        return True


def read_fragments(fragment_paths: Iterable[Path]) -> list[Result]:
    collected: list[Result] = []
    for fragment in fragment_paths:
        wrapper = load_results_file(Path(fragment), missing_ok=False)
        logger.debug("Read %d result(s) from fragment %s", len(wrapper), fragment)
        collected.extend(wrapper.results)
    return collected


__all__ = ["ResultStore", "load_results_file", "read_fragments"]
