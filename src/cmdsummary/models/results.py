# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Transfer result records and the persisted wrapper around them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ..errors import CorruptDataError


def _string_field(entry: dict[str, Any], key: str) -> str:
    value = entry.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise CorruptDataError(f"result field '{key}' must be a string, got {type(value).__name__}")
    return value


@dataclass(frozen=True)
class Result:
    """One transferred artifact. Identity is ``(source_path, target_path)``."""

    source_path: str
    target_path: str
    remote_url: str = ""

    @property
    def key(self) -> tuple[str, str]:
        return (self.source_path, self.target_path)

    def to_dict(self) -> dict[str, str]:
        return {
            "sourcePath": self.source_path,
            "targetPath": self.target_path,
            "rtUrl": self.remote_url,
        }

    @classmethod
    def from_mapping(cls, data: Any) -> Result:
        if not isinstance(data, dict):
            raise CorruptDataError(f"result entry must be an object, got {type(data).__name__}")
        return cls(
            source_path=_string_field(data, "sourcePath"),
            target_path=_string_field(data, "targetPath"),
            remote_url=_string_field(data, "rtUrl"),
        )


@dataclass
class ResultsWrapper:
    """Ordered, append-only list of results; the only unit that is persisted."""

    results: list[Result] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.results)

    def __iter__(self):
        return iter(self.results)

    def extend(self, new_results: list[Result]) -> None:
        self.results.extend(new_results)

    def target_paths(self) -> list[str]:
        return [result.target_path for result in self.results]

    def to_dict(self) -> dict[str, Any]:
        return {"results": [result.to_dict() for result in self.results]}

    @classmethod
    def from_mapping(cls, data: Any) -> ResultsWrapper:
        if not isinstance(data, dict):
            raise CorruptDataError(f"results document must be an object, got {type(data).__name__}")
        raw_results = data.get("results")
        if raw_results is None:
            return cls()
        if not isinstance(raw_results, list):
            raise CorruptDataError("'results' must be a list")
        return cls(results=[Result.from_mapping(item) for item in raw_results])
