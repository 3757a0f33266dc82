"""Pydantic schemas for grid snapshots.

These models mirror the ``CollisionGrid`` dataclass but keep grid snapshots
serializable (JSON scenario files, fixtures, debugging dumps).
"""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field, model_validator

from .grid import CollisionGrid, InvalidGridError


class CollisionGridState(BaseModel):
    """Serializable, row-major collision grid."""

    width: int = Field(..., gt=0, description="Number of columns")
    height: int = Field(..., gt=0, description="Number of rows")
    rows: List[List[int]] = Field(
        default_factory=list,
        description="rows[y][x] → collision classification value",
    )

    @model_validator(mode="after")
    def _check_rectangular(self) -> "CollisionGridState":
        if len(self.rows) != self.height:
            raise ValueError(f"expected {self.height} rows, got {len(self.rows)}")
        for y, row in enumerate(self.rows):
            if len(row) != self.width:
                raise ValueError(f"row {y} has {len(row)} cells, expected {self.width}")
        return self

    @classmethod
    def from_grid(cls, grid: CollisionGrid) -> "CollisionGridState":
        return cls(
            width=grid.width,
            height=grid.height,
            rows=[[int(value) for value in row] for row in grid.cells],
        )

    def to_grid(self) -> CollisionGrid:
        grid = CollisionGrid.from_rows(self.rows)
        if (grid.width, grid.height) != (self.width, self.height):  # pragma: no cover - guarded by validator
            raise InvalidGridError("Grid state dimensions disagree with its rows")
        return grid
