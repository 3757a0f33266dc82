"""Run several independent searches over one grid concurrently.

A single search is synchronous and CPU-bound. When a caller needs routes for
many agents against the same snapshot (one per unit, say), this helper fans
the searches out to worker threads and gathers the results in request order.
Every search builds its own frontier and best-cost table; the grid is only
read, so it is shared without copying.

Usage:
    results = await calculate_paths(grid, [((0, 0), (9, 9)), ((3, 1), (3, 8))])
"""

from __future__ import annotations

import asyncio
from typing import List, Optional, Sequence, Tuple

from .grid.grid import CollisionGrid
from .pather.astar import calculate_path
from .pather.cost import CostModel
from .schemas import PathResult

Endpoints = Tuple[Tuple[int, int], Tuple[int, int]]


async def calculate_paths(
    grid: CollisionGrid,
    requests: Sequence[Endpoints],
    cost_model: Optional[CostModel] = None,
) -> List[PathResult]:
    """Compute a path for each ``(start, goal)`` pair; results keep request order.

    The grid must not be mutated until the returned awaitable completes.
    """
    # gather preserves argument order, so results line up with requests
    tasks = [
        asyncio.to_thread(calculate_path, grid, start, goal, cost_model)
        for start, goal in requests
    ]
    return list(await asyncio.gather(*tasks))
