# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Result persistence and path grouping."""

from .store import ResultStore, load_results_file, read_fragments
from .tree import PathTree, PathTreeNode, split_path

__all__ = ["PathTree", "PathTreeNode", "ResultStore", "load_results_file", "read_fragments", "split_path"]
