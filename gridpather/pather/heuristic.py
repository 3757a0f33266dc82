"""Remaining-distance estimate used to order the frontier."""

from __future__ import annotations

from typing import Tuple


def manhattan(a: Tuple[int, int], b: Tuple[int, int]) -> int:
    """Manhattan distance ``|dx| + |dy|`` between two grid positions."""
    return int(abs(a[0] - b[0]) + abs(a[1] - b[1]))
