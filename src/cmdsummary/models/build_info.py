# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Published build-info records as written by build-info publication."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ..errors import CorruptDataError


@dataclass(frozen=True)
class ModuleArtifact:
    name: str
    path: str


@dataclass
class BuildModule:
    id: str
    type: str = "generic"
    artifacts: list[ModuleArtifact] = field(default_factory=list)

    @classmethod
    def from_mapping(cls, data: Any) -> BuildModule:
        if not isinstance(data, dict) or not data.get("id"):
            raise CorruptDataError("build module must be an object with an 'id'")
        artifacts = []
        for item in data.get("artifacts") or []:
            if not isinstance(item, dict):
                raise CorruptDataError(f"artifact of module '{data['id']}' must be an object")
            name = str(item.get("name") or "")
            path = str(item.get("path") or name)
            if path:
                artifacts.append(ModuleArtifact(name=name or path.rsplit("/", 1)[-1], path=path))
        return cls(id=str(data["id"]), type=str(data.get("type") or "generic"), artifacts=artifacts)


@dataclass
class BuildInfoRecord:
    name: str
    number: str
    started: str = ""
    url: str = ""
    modules: list[BuildModule] = field(default_factory=list)

    @property
    def display_name(self) -> str:
        return f"{self.name} {self.number}"

    @classmethod
    def from_mapping(cls, data: Any) -> BuildInfoRecord:
        if not isinstance(data, dict):
            raise CorruptDataError(f"build-info must be an object, got {type(data).__name__}")
        name = data.get("name")
        number = data.get("number")
        if not name or number is None or number == "":
            raise CorruptDataError("build-info requires 'name' and 'number'")
        raw_modules = data.get("modules") or []
        if not isinstance(raw_modules, list):
            raise CorruptDataError("'modules' must be a list")
        return cls(
            name=str(name),
            number=str(number),
            started=str(data.get("started") or ""),
            url=str(data.get("url") or ""),
            modules=[BuildModule.from_mapping(item) for item in raw_modules],
        )
