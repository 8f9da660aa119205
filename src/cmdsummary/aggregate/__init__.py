# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Report aggregation."""

from .engine import Aggregator

__all__ = ["Aggregator"]
