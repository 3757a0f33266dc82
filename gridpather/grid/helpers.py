"""Debug rendering for collision grids."""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence, Tuple

from .collision import CollisionType
from .grid import CollisionGrid

_DEFAULT_CELL_SYMBOLS: Dict[int, str] = {
    CollisionType.WALKABLE: ".",
    CollisionType.OBJECT: "o",
    CollisionType.MONSTER: "m",
    CollisionType.LOW_PRIORITY: "~",
    CollisionType.NON_WALKABLE: "#",
}


def render_ascii_path(
    grid: CollisionGrid,
    path: Optional[Sequence[Tuple[int, int]]] = None,
    *,
    symbols: Optional[Dict[int, str]] = None,
) -> str:
    """Render the grid one character per cell, overlaying ``path`` if given.

    Row ``y == 0`` is printed first, matching ``CollisionGrid.from_ascii``.
    Path cells are drawn as ``*``, with ``S`` and ``G`` marking the endpoints.
    Unknown classifications fall back to ``?``.
    """

    mapping = {**_DEFAULT_CELL_SYMBOLS}
    if symbols:
        mapping.update(symbols)

    overlay: Dict[Tuple[int, int], str] = {}
    if path:
        for position in path:
            overlay[tuple(position)] = "*"
        overlay[tuple(path[0])] = "S"
        overlay[tuple(path[-1])] = "G"

    lines: List[str] = []
    for y in range(grid.height):
        row_chars: List[str] = []
        for x in range(grid.width):
            marker = overlay.get((x, y))
            if marker is None:
                marker = mapping.get(grid.collision_at(x, y), "?")
            row_chars.append(marker)
        lines.append("".join(row_chars))

    return "\n".join(lines)
