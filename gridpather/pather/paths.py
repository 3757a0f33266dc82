"""Helpers for inspecting computed paths.

These re-derive facts about a route independently of the search: whether
every step is a legal move on the grid, and what the route costs under a
given ``CostModel``. Useful to callers validating a cached path against a
fresh grid snapshot, and to tests.
"""

from __future__ import annotations

from typing import Optional, Sequence, Tuple

from gridpather.grid.collision import Position, direction, is_diagonal
from gridpather.grid.grid import CollisionGrid

from .cost import BLOCKED, DEFAULT_COST_MODEL, CostModel


def is_valid_step(grid: CollisionGrid, origin: Tuple[int, int], target: Tuple[int, int]) -> bool:
    """Check one move the way the search would allow it.

    The target must be in bounds, exactly one cell away (orthogonal or
    diagonal), not blocked, and a diagonal must not cut a corner.
    """
    if not grid.in_bounds(*origin) or not grid.in_bounds(*target):
        return False
    step = direction(origin, target)
    if max(abs(step.x), abs(step.y)) != 1:
        return False
    if DEFAULT_COST_MODEL.base_cost(grid.collision_at(*target)) == BLOCKED:
        return False
    if is_diagonal(step) and grid.cuts_corner(origin[0], origin[1], step):
        return False
    return True


def validate_path(grid: CollisionGrid, path: Sequence[Tuple[int, int]]) -> bool:
    """Return True if ``path`` is non-empty and every consecutive step is valid."""
    if not path:
        return False
    if not grid.in_bounds(*path[0]):
        return False
    return all(is_valid_step(grid, a, b) for a, b in zip(path, path[1:]))


def path_cost(
    grid: CollisionGrid,
    path: Sequence[Tuple[int, int]],
    cost_model: Optional[CostModel] = None,
) -> int:
    """Accumulated cost of walking ``path``, matching the search's ``g`` for it.

    The start cell is free; every later cell adds its entry cost, plus the turn
    penalty whenever the heading changes. Returns ``BLOCKED`` if the path
    enters a blocked cell.
    """
    model = cost_model or DEFAULT_COST_MODEL
    total = 0
    heading: Optional[Position] = None
    for origin, target in zip(path, path[1:]):
        enter_cost = model.cost(grid, target)
        if enter_cost == BLOCKED:
            return BLOCKED
        total += enter_cost
        step = direction(origin, target)
        if heading is not None and step != heading:
            total += model.turn_penalty
        heading = step
    return total
