"""
gridpather - weighted A* pathfinding over 2D collision grids.

Computes the cheapest 8-connected route between two cells of a collision
grid, steering away from walls and preferring straight runs.

Pure computation: no file I/O, no global state, no threads unless you ask
for the batch helper. Grid snapshots are owned by the caller.
"""

__version__ = "0.1.0"

# Grid types
from .grid import (
    CollisionGrid,
    CollisionGridState,
    CollisionType,
    InvalidGridError,
    Position,
    render_ascii_path,
)

# Search engine
from .pather import (
    BLOCKED,
    DEFAULT_COST_MODEL,
    CostModel,
    calculate_path,
    manhattan,
    is_valid_step,
    path_cost,
    validate_path,
)
from .batch import calculate_paths

# Schemas
from .schemas import GridScenario, PathResult

# Scenario loader helpers
from .loader import GridLoader, load_grid_scenario

__all__ = [
    # Grid types
    "CollisionGrid",
    "CollisionGridState",
    "CollisionType",
    "InvalidGridError",
    "Position",
    "render_ascii_path",
    # Search engine
    "calculate_path",
    "calculate_paths",
    "CostModel",
    "DEFAULT_COST_MODEL",
    "BLOCKED",
    "manhattan",
    # Path helpers
    "is_valid_step",
    "path_cost",
    "validate_path",
    # Schemas
    "PathResult",
    "GridScenario",
    # Scenario helpers
    "GridLoader",
    "load_grid_scenario",
]
