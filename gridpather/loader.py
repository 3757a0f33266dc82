"""
Grid scenario loading from JSON files.

This module provides GridLoader for turning JSON scenario files into a
``GridScenario``: a validated collision grid plus the start and goal of the
route to compute on it. Scenarios are how fixtures, demos and bug reports
("the unit got stuck here") are captured without writing Python.

A grid can be given either as numeric rows or as an ASCII drawing:
```json
{
  "name": "doorway",
  "description": "Two rooms joined by a single door",
  "start": [1, 1],
  "goal": [7, 1],
  "ascii": [
    ".........",
    "....#....",
    "....#...."
  ],
  "legend": {"D": 0}
}
```
or
```json
{
  "name": "corridor",
  "start": [0, 0],
  "goal": [4, 0],
  "grid": {"width": 5, "height": 1, "rows": [[0, 0, 2, 0, 0]]}
}
```

Usage:
    loader = GridLoader()
    scenario = loader.load("doorway")
    result = calculate_path(scenario.grid.to_grid(), scenario.start, scenario.goal)
"""

import json
from pathlib import Path
from typing import Any, Dict, Optional

from .config import Config
from .grid import CollisionGrid, CollisionGridState
from .schemas import GridScenario


class GridLoader:
    """Load and validate grid scenarios from JSON files.

    Directory structure:
    - Default: ``Config.GRIDS_DIR`` ({PROJECT_ROOT}/examples/grids unless
      PATHER_GRIDS_DIR is set)
    - Override via constructor: GridLoader(Path("/custom/grids"))
    - Scenario files: {scenario_name}.json

    Validation:
    - Required fields: name, start, goal, and exactly one of grid/ascii
    - Grid must be rectangular (pydantic validation on CollisionGridState)
    - Raises ValueError if validation fails
    """

    def __init__(self, grids_dir: Optional[Path] = None):
        self.grids_dir = grids_dir or Config.GRIDS_DIR

    def load(self, scenario_name: str) -> GridScenario:
        """Load a scenario by name (without the .json extension).

        Raises:
            FileNotFoundError: If the scenario file doesn't exist in grids_dir
            ValueError: If the scenario is missing fields or the grid is malformed
            json.JSONDecodeError: If the file contains invalid JSON
        """
        scenario_path = self.grids_dir / f"{scenario_name}.json"

        if not scenario_path.exists():
            raise FileNotFoundError(
                f"Grid scenario '{scenario_name}' not found at {scenario_path}"
            )

        data = json.loads(scenario_path.read_text())
        return self.parse(data)

    def parse(self, data: Dict[str, Any]) -> GridScenario:
        """Build a GridScenario from already-decoded scenario data."""
        self._validate_scenario(data)

        if "ascii" in data:
            grid_state = CollisionGridState.from_grid(
                CollisionGrid.from_ascii(data["ascii"], legend=data.get("legend"))
            )
        else:
            grid_state = CollisionGridState.model_validate(data["grid"])

        return GridScenario(
            name=data["name"],
            description=data.get("description"),
            grid=grid_state,
            start=tuple(data["start"]),
            goal=tuple(data["goal"]),
        )

    def _validate_scenario(self, data: Dict[str, Any]) -> None:
        required = ["name", "start", "goal"]
        missing = [field for field in required if field not in data]

        if missing:
            raise ValueError(f"Grid scenario missing required fields: {missing}")

        has_grid = "grid" in data
        has_ascii = "ascii" in data
        if has_grid == has_ascii:
            raise ValueError("Grid scenario must define exactly one of 'grid' or 'ascii'")

        for key in ("start", "goal"):
            point = data[key]
            if not isinstance(point, (list, tuple)) or len(point) != 2:
                raise ValueError(f"'{key}' must be an [x, y] pair, got {point!r}")


def load_grid_scenario(scenario_name: str) -> GridScenario:
    """Convenience function to load a scenario from the default directory."""
    loader = GridLoader()
    return loader.load(scenario_name)
