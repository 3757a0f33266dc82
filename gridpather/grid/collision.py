"""Grid coordinates and the collision classification scale.

Cells are classified on an ordered severity scale. The ordering matters: the
search treats anything worse than ``WALKABLE`` as blocking for diagonal
corner checks, and the cost model assigns increasing costs up the scale.
"""

from __future__ import annotations

from enum import IntEnum
from typing import NamedTuple, Tuple


class Position(NamedTuple):
    """Integer (x, y) grid coordinate. Compares equal to a plain ``(x, y)`` tuple."""

    x: int
    y: int


class CollisionType(IntEnum):
    """Traversal category of a single cell, ordered by severity."""

    WALKABLE = 0
    OBJECT = 1
    MONSTER = 2
    LOW_PRIORITY = 3
    NON_WALKABLE = 4


# Orthogonal moves first, then diagonals. Expansion order feeds the frontier's
# insertion sequence, so it also decides ties between equal-priority nodes.
ORTHOGONAL_DIRECTIONS: Tuple[Position, ...] = (
    Position(0, 1),
    Position(1, 0),
    Position(0, -1),
    Position(-1, 0),
)
DIAGONAL_DIRECTIONS: Tuple[Position, ...] = (
    Position(1, 1),
    Position(-1, 1),
    Position(1, -1),
    Position(-1, -1),
)
DIRECTIONS: Tuple[Position, ...] = ORTHOGONAL_DIRECTIONS + DIAGONAL_DIRECTIONS


def direction(origin: Tuple[int, int], target: Tuple[int, int]) -> Position:
    """Return the (dx, dy) step from ``origin`` to ``target``."""
    return Position(target[0] - origin[0], target[1] - origin[1])


def is_diagonal(step: Tuple[int, int]) -> bool:
    return step[0] != 0 and step[1] != 0
