"""
gridpather Configuration

Loads cost weights and paths from environment variables with sensible defaults.
"""

import os
from pathlib import Path
from dotenv import load_dotenv

# Load .env file if it exists
load_dotenv()


class Config:
    """Library configuration loaded from environment variables."""

    # Base cost of entering a cell, by collision classification
    WALKABLE_COST: int = int(os.getenv("PATHER_WALKABLE_COST", "1"))
    OBJECT_COST: int = int(os.getenv("PATHER_OBJECT_COST", "4"))
    MONSTER_COST: int = int(os.getenv("PATHER_MONSTER_COST", "16"))
    LOW_PRIORITY_COST: int = int(os.getenv("PATHER_LOW_PRIORITY_COST", "20"))

    # Route shaping
    # Added once per non-walkable neighbour of the entered cell
    WALL_PROXIMITY_PENALTY: int = int(os.getenv("PATHER_WALL_PROXIMITY_PENALTY", "2"))
    # Added whenever the heading changes between consecutive steps
    TURN_PENALTY: int = int(os.getenv("PATHER_TURN_PENALTY", "1"))

    # Project Paths
    PROJECT_ROOT: Path = Path(__file__).parent.parent
    GRIDS_DIR: Path = Path(os.getenv("PATHER_GRIDS_DIR", str(PROJECT_ROOT / "examples" / "grids")))

    @classmethod
    def validate(cls) -> None:
        """Validate configuration and raise errors if values are out of range."""
        base_costs = {
            "PATHER_WALKABLE_COST": cls.WALKABLE_COST,
            "PATHER_OBJECT_COST": cls.OBJECT_COST,
            "PATHER_MONSTER_COST": cls.MONSTER_COST,
            "PATHER_LOW_PRIORITY_COST": cls.LOW_PRIORITY_COST,
        }
        for name, value in base_costs.items():
            if value <= 0:
                raise ValueError(f"{name} must be a positive integer, got {value}")

        if cls.WALL_PROXIMITY_PENALTY < 0:
            raise ValueError(
                f"PATHER_WALL_PROXIMITY_PENALTY must not be negative, got {cls.WALL_PROXIMITY_PENALTY}"
            )
        if cls.TURN_PENALTY < 0:
            raise ValueError(f"PATHER_TURN_PENALTY must not be negative, got {cls.TURN_PENALTY}")

    @classmethod
    def display(cls) -> str:
        """Return a formatted string showing current configuration."""
        lines = [
            "gridpather Configuration:",
            f"  Costs: walkable={cls.WALKABLE_COST} object={cls.OBJECT_COST} "
            f"monster={cls.MONSTER_COST} low_priority={cls.LOW_PRIORITY_COST}",
            f"  Wall Proximity Penalty: {cls.WALL_PROXIMITY_PENALTY}",
            f"  Turn Penalty: {cls.TURN_PENALTY}",
            f"  Grids Dir: {cls.GRIDS_DIR}",
        ]
        return "\n".join(lines)
