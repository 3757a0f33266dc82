"""Collision grid types for gridpather."""

from .collision import (
    DIAGONAL_DIRECTIONS,
    DIRECTIONS,
    ORTHOGONAL_DIRECTIONS,
    CollisionType,
    Position,
    direction,
    is_diagonal,
)
from .grid import DEFAULT_ASCII_LEGEND, CollisionGrid, InvalidGridError
from .schemas import CollisionGridState
from .helpers import render_ascii_path

__all__ = [
    "CollisionType",
    "Position",
    "DIRECTIONS",
    "ORTHOGONAL_DIRECTIONS",
    "DIAGONAL_DIRECTIONS",
    "direction",
    "is_diagonal",
    "CollisionGrid",
    "InvalidGridError",
    "DEFAULT_ASCII_LEGEND",
    "CollisionGridState",
    "render_ascii_path",
]
