# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Hierarchical view over flat artifact paths."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from ..utils.markdown import html_link

PATH_SEPARATOR = "/"
REPO_MARKER = "📦 "
DIR_MARKER = "📁 "
FILE_MARKER = "📄 "
BRANCH = "├── "
LAST_BRANCH = "└── "
PIPE_INDENT = "│   "
SPACE_INDENT = "    "


class PathTreeNode:
    """One path segment; children keep insertion order."""

    __slots__ = ("name", "children", "url")

    def __init__(self, name: str, url: str | None = None):
        self.name = name
        self.children: dict[str, PathTreeNode] = {}
        self.url = url

    @property
    def is_leaf(self) -> bool:
        return not self.children

    def label(self) -> str:
        """HTML-escaped name; leaves with a url become links."""
        return html_link(self.name, self.url if self.is_leaf else None)

    def walk(self) -> Iterator[PathTreeNode]:
        yield self
        for child in self.children.values():
            yield from child.walk()

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"PathTreeNode({self.name!r}, children={list(self.children)!r})"


def split_path(path: str) -> list[str]:
    return [segment for segment in path.split(PATH_SEPARATOR) if segment]


class PathTree:
    """
    Tree of target paths grouped by segment.

    The first segment (usually the repository) is a top-level node. Rendering is
    cached and rebuilt after the next change.
    """

    def __init__(self, paths: Iterable[str] = ()):
        self.root = PathTreeNode("")
        self._rendered: str | None = None
        for path in paths:
            self.add_path(path)

    def add_path(self, path: str, url: str | None = None) -> bool:
        """Insert ``path``; returns True when at least one node was created."""
        segments = split_path(path)
        if not segments:
            return False

        created = False
        node = self.root
        for segment in segments:
            child = node.children.get(segment)
            if child is None:
                child = PathTreeNode(segment)
                node.children[segment] = child
                created = True
            node = child

        if url and node.url is None:
            node.url = url
            self._rendered = None
        if created:
            self._rendered = None
        return created

    def __len__(self) -> int:
        return self.leaf_count

    def __bool__(self) -> bool:
        return bool(self.root.children)

    @property
    def leaf_count(self) -> int:
        return sum(1 for node in self.root.walk() if node is not self.root and node.is_leaf)

    def render(self) -> str:
        if self._rendered is None:
            self._rendered = "".join("\n".join(self._node_lines(top, REPO_MARKER)) + "\n\n" for top in self.root.children.values())
        return self._rendered

    def __str__(self) -> str:
        return self.render()

    def _node_lines(self, node: PathTreeNode, marker: str) -> list[str]:
        lines = [marker + node.label()]
        children = list(node.children.values())
        for index, child in enumerate(children):
            is_last = index == len(children) - 1
            child_lines = self._node_lines(child, FILE_MARKER if child.is_leaf else DIR_MARKER)
            lines.append((LAST_BRANCH if is_last else BRANCH) + child_lines[0])
            indent = SPACE_INDENT if is_last else PIPE_INDENT
            lines.extend(indent + line for line in child_lines[1:])
        return lines


__all__ = ["PathTree", "PathTreeNode", "split_path"]
