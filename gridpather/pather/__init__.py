"""A* search engine: heuristic, cost model, frontier and the search loop."""

from .astar import calculate_path
from .cost import BLOCKED, DEFAULT_COST_MODEL, CostModel
from .frontier import Frontier, NodeArena, SearchNode
from .heuristic import manhattan
from .paths import is_valid_step, path_cost, validate_path

__all__ = [
    "calculate_path",
    "CostModel",
    "DEFAULT_COST_MODEL",
    "BLOCKED",
    "Frontier",
    "NodeArena",
    "SearchNode",
    "manhattan",
    "is_valid_step",
    "path_cost",
    "validate_path",
]
