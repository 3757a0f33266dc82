"""
Pydantic schemas for gridpather results and scenarios.

Search internals (nodes, frontier) are plain dataclasses scoped to a single
call. Everything that crosses the library boundary is a pydantic model so it
can be validated on the way in and dumped to JSON on the way out.
"""

from typing import List, Optional, Tuple

from pydantic import BaseModel, Field

from gridpather.grid.collision import Position
from gridpather.grid.schemas import CollisionGridState


class PathResult(BaseModel):
    """Outcome of one search.

    ``found`` is the only failure signal: an unreachable or blocked goal is a
    normal result with ``found=False`` and an empty path, never an exception.
    """

    path: List[Position] = Field(
        default_factory=list,
        description="Positions from start to goal inclusive; empty when not found",
    )
    length: int = Field(0, description="Number of positions in path (not the cost)")
    found: bool = Field(False, description="Whether the goal was reached")
    cost: int = Field(0, description="Accumulated traversal cost of the path, penalties included")
    expanded: int = Field(0, description="Nodes expanded before the search terminated")

    @classmethod
    def not_found(cls, expanded: int = 0) -> "PathResult":
        return cls(expanded=expanded)

    def as_tuple(self) -> Tuple[List[Position], int, bool]:
        """Return the ``(path, length, found)`` triple."""
        return list(self.path), self.length, self.found


class GridScenario(BaseModel):
    """A named grid plus the endpoints of the route to compute on it."""

    name: str
    description: Optional[str] = None
    grid: CollisionGridState
    start: Position
    goal: Position
