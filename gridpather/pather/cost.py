"""Traversal cost model.

Converts a cell's collision classification into the cost of entering it.
Costs grow with severity (walkable < object < monster < low priority) and
non-walkable cells return the ``BLOCKED`` sentinel so the search never enters
them. Each non-walkable neighbour adds a proximity penalty, which pushes
routes away from walls even when an open route hugging the wall would tie.

Usage:
    model = CostModel()
    model.cost(grid, (3, 4))  # 1 for an open walkable cell

    # Tuned weights from environment variables (see ``Config``)
    model = CostModel.from_config()
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from gridpather.config import Config
from gridpather.grid.collision import DIRECTIONS, CollisionType
from gridpather.grid.grid import CollisionGrid

# Effective infinity for cells that must never be entered.
BLOCKED = 2**31 - 1


@dataclass(frozen=True)
class CostModel:
    """Per-classification base costs plus the shaping penalties used by the search."""

    walkable: int = 1
    object: int = 4
    monster: int = 16
    low_priority: int = 20
    wall_proximity_penalty: int = 2
    turn_penalty: int = 1

    @classmethod
    def from_config(cls) -> "CostModel":
        """Build a cost model from ``Config`` (environment variables / .env)."""
        Config.validate()
        return cls(
            walkable=Config.WALKABLE_COST,
            object=Config.OBJECT_COST,
            monster=Config.MONSTER_COST,
            low_priority=Config.LOW_PRIORITY_COST,
            wall_proximity_penalty=Config.WALL_PROXIMITY_PENALTY,
            turn_penalty=Config.TURN_PENALTY,
        )

    def base_cost(self, classification: int) -> int:
        """Cost of a classification alone; ``BLOCKED`` for non-walkable or unknown values."""
        if classification == CollisionType.WALKABLE:
            return self.walkable
        if classification == CollisionType.OBJECT:
            return self.object
        if classification == CollisionType.MONSTER:
            return self.monster
        if classification == CollisionType.LOW_PRIORITY:
            return self.low_priority
        return BLOCKED

    def cost(self, grid: CollisionGrid, position: Tuple[int, int]) -> int:
        """Cost of entering ``position``, including the wall-proximity penalty."""
        x, y = position
        total = self.base_cost(grid.collision_at(x, y))
        if total == BLOCKED:
            return BLOCKED

        for dx, dy in DIRECTIONS:
            nx, ny = x + dx, y + dy
            if grid.in_bounds(nx, ny) and grid.collision_at(nx, ny) == CollisionType.NON_WALKABLE:
                total += self.wall_proximity_penalty
        return total


DEFAULT_COST_MODEL = CostModel()
