"""Collision grid container.

The grid is a rectangular snapshot of per-cell collision classifications
supplied by whatever produces the collision map. Searches only read it; the
caller is responsible for not mutating it while a search is running.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from .collision import CollisionType


class InvalidGridError(ValueError):
    """Raised when a grid violates its shape contract (non-rectangular, empty)."""


DEFAULT_ASCII_LEGEND: Dict[str, CollisionType] = {
    ".": CollisionType.WALKABLE,
    "o": CollisionType.OBJECT,
    "m": CollisionType.MONSTER,
    "~": CollisionType.LOW_PRIORITY,
    "#": CollisionType.NON_WALKABLE,
}


@dataclass
class CollisionGrid:
    """Rectangular matrix of collision classifications indexed ``cells[y][x]``.

    Values are usually ``CollisionType`` members. Plain integers are accepted
    as-is so that unrecognized classifications coming from a map producer stay
    visible to the cost model (which treats them as blocked).
    """

    width: int
    height: int
    cells: List[List[int]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise InvalidGridError(
                f"Grid dimensions must be positive, got {self.width}x{self.height}"
            )
        if len(self.cells) != self.height:
            raise InvalidGridError(
                f"Grid declares height {self.height} but has {len(self.cells)} rows"
            )
        for y, row in enumerate(self.cells):
            if len(row) != self.width:
                raise InvalidGridError(
                    f"Row {y} has {len(row)} cells, expected width {self.width}"
                )

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> "CollisionGrid":
        """Build a grid from row-major classifications, inferring the dimensions."""
        cells = [[_coerce(value) for value in row] for row in rows]
        width = len(cells[0]) if cells else 0
        return cls(width=width, height=len(cells), cells=cells)

    @classmethod
    def from_ascii(
        cls,
        text: str | Iterable[str],
        legend: Optional[Mapping[str, int]] = None,
    ) -> "CollisionGrid":
        """Build a grid from an ASCII drawing, one character per cell.

        The first line is ``y == 0``. Blank lines are ignored. Characters
        missing from the legend raise ``InvalidGridError``.
        """
        mapping = {**DEFAULT_ASCII_LEGEND}
        if legend:
            mapping.update(legend)

        lines = text.splitlines() if isinstance(text, str) else list(text)
        rows: List[List[int]] = []
        for line in lines:
            line = line.strip()
            if not line:
                continue
            try:
                rows.append([mapping[char] for char in line])
            except KeyError as exc:
                raise InvalidGridError(f"Unknown grid symbol {exc.args[0]!r}") from exc
        return cls.from_rows(rows)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def collision_at(self, x: int, y: int) -> int:
        """Return the classification at (x, y). Caller checks bounds first."""
        return self.cells[y][x]

    def cuts_corner(self, x: int, y: int, step: Tuple[int, int]) -> bool:
        """True if a diagonal ``step`` from (x, y) squeezes past a cell worse than walkable."""
        dx, dy = step
        return (
            self.cells[y][x + dx] > CollisionType.WALKABLE
            or self.cells[y + dy][x] > CollisionType.WALKABLE
        )

    def with_cell(self, position: Tuple[int, int], value: int) -> "CollisionGrid":
        """Return a copy of the grid with one cell reclassified."""
        x, y = position
        if not self.in_bounds(x, y):
            raise InvalidGridError(f"Cell {(x, y)} is outside the {self.width}x{self.height} grid")
        cells = [list(row) for row in self.cells]
        cells[y][x] = _coerce(value)
        return CollisionGrid(width=self.width, height=self.height, cells=cells)


def _coerce(value: int) -> int:
    try:
        return CollisionType(value)
    except ValueError:
        return int(value)
