"""Weighted A* search over a collision grid.

Finds the cheapest 8-connected route between two cells. On top of the plain
per-cell costs from ``CostModel`` the search shapes routes in two ways:

- Diagonal steps may not cut across a corner: if either orthogonal cell the
  diagonal passes between is worse than walkable, the step is rejected.
- Changing direction costs ``turn_penalty`` extra, so straight runs win over
  zig-zags of the same length.

Each call owns its own node arena, frontier and best-cost table, so a grid
can be shared by several concurrent searches as long as nobody writes to it.
The search has no iteration cap; callers that need a time bound impose it
outside.

Usage:
    result = calculate_path(grid, (0, 0), (4, 4))
    if result.found:
        follow(result.path)
"""

from __future__ import annotations

import os
from typing import Dict, Optional, Tuple

from gridpather.grid.collision import DIRECTIONS, Position, direction, is_diagonal
from gridpather.grid.grid import CollisionGrid
from gridpather.logging_utils import log_search_result
from gridpather.schemas import PathResult

from .cost import BLOCKED, DEFAULT_COST_MODEL, CostModel
from .frontier import Frontier, NodeArena, SearchNode
from .heuristic import manhattan


def calculate_path(
    grid: CollisionGrid,
    start: Tuple[int, int],
    goal: Tuple[int, int],
    cost_model: Optional[CostModel] = None,
) -> PathResult:
    """Return the lowest-cost walkable route from ``start`` to ``goal``.

    Args:
        grid: Collision snapshot; read only, never mutated.
        start: (x, y) of the first cell. It does not have to be walkable.
        goal: (x, y) of the target cell.
        cost_model: Cost weights; defaults to ``DEFAULT_COST_MODEL``.

    Returns:
        PathResult with ``found=True`` and the path start→goal inclusive, or
        ``found=False`` with an empty path when the goal cannot be reached.
        Out-of-range endpoints are a plain ``found=False``.
    """
    model = cost_model or DEFAULT_COST_MODEL
    start = Position(*start)
    goal = Position(*goal)

    # Out-of-range endpoints can never be reached; decline before indexing the grid.
    if not grid.in_bounds(*start) or not grid.in_bounds(*goal):
        result = PathResult.not_found()
        _debug_summary(start, goal, result)
        return result

    arena = NodeArena()
    frontier = Frontier()
    # Position -> arena index of the cheapest node discovered for it.
    best: Dict[Position, int] = {}

    # The start cell itself is never charged, whatever its classification.
    root = arena.add(SearchNode(position=start, g=0, priority=manhattan(start, goal)))
    best[start] = root
    frontier.push(arena[root].priority, root)
    expanded = 0

    while frontier:
        index = frontier.pop()
        current = arena[index]

        # A cheaper node replaced this one after it was queued; its entry is
        # left in the heap and dropped here instead of being expanded twice.
        if best[current.position] != index:
            continue

        # Goal popped: walk predecessor indices back to the start.
        if current.position == goal:
            path = arena.trace(index)
            result = PathResult(
                path=path,
                length=len(path),
                found=True,
                cost=current.g,
                expanded=expanded,
            )
            _debug_summary(start, goal, result)
            return result

        expanded += 1
        # Direction we arrived from; None only for the start node.
        heading = (
            direction(arena[current.parent].position, current.position)
            if current.parent is not None
            else None
        )

        for step in DIRECTIONS:
            neighbor = Position(current.position.x + step.x, current.position.y + step.y)
            if not grid.in_bounds(*neighbor):
                continue

            # No squeezing diagonally between two cells that aren't walkable.
            if is_diagonal(step) and grid.cuts_corner(current.position.x, current.position.y, step):
                continue

            enter_cost = model.cost(grid, neighbor)
            if enter_cost == BLOCKED:
                continue

            new_cost = current.g + enter_cost
            # Turning costs extra so straight runs beat zig-zags of equal length.
            if heading is not None and heading != step:
                new_cost += model.turn_penalty

            # Only a strictly cheaper route replaces a known node.
            known = best.get(neighbor)
            if known is not None and new_cost >= arena[known].g:
                continue

            node_index = arena.add(
                SearchNode(
                    position=neighbor,
                    g=new_cost,
                    priority=new_cost + manhattan(neighbor, goal),
                    parent=index,
                )
            )
            best[neighbor] = node_index
            frontier.push(arena[node_index].priority, node_index)

    # Frontier exhausted: the goal is blocked or walled off.
    result = PathResult.not_found(expanded=expanded)
    _debug_summary(start, goal, result)
    return result


def _debug_summary(start: Position, goal: Position, result: PathResult) -> None:
    # Enable with DEBUG_PATHFINDING=1
    if os.getenv("DEBUG_PATHFINDING", "").lower() not in ("1", "true", "yes"):
        return
    log_search_result(f"[Pather] {tuple(start)} -> {tuple(goal)}", result)
