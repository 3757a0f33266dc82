"""Tests for grid scenario loading via GridLoader."""

import json
from pathlib import Path

import pytest

from gridpather import CollisionType, GridLoader, calculate_path

GRIDS_DIR = Path(__file__).resolve().parent.parent / "examples" / "grids"


def test_loads_ascii_scenario_and_routes_through_door():
    loader = GridLoader(grids_dir=GRIDS_DIR)
    scenario = loader.load("doorway")

    assert scenario.name == "doorway"
    assert scenario.start == (1, 1)
    assert scenario.goal == (7, 1)

    grid = scenario.grid.to_grid()
    result = calculate_path(grid, scenario.start, scenario.goal)
    assert result.found is True
    # The dividing wall is only open at (4, 2)
    assert (4, 2) in result.path


def test_loads_numeric_rows_scenario():
    scenario = GridLoader(grids_dir=GRIDS_DIR).load("monster_corridor")
    grid = scenario.grid.to_grid()

    assert grid.collision_at(2, 1) == CollisionType.MONSTER
    result = calculate_path(grid, scenario.start, scenario.goal)
    assert result.found is True
    assert (2, 1) not in result.path


def test_sealed_scenario_has_no_path():
    scenario = GridLoader(grids_dir=GRIDS_DIR).load("sealed")
    result = calculate_path(scenario.grid.to_grid(), scenario.start, scenario.goal)
    assert result.found is False


def test_custom_legend_symbols():
    scenario = GridLoader(grids_dir=GRIDS_DIR).load("bazaar")
    grid = scenario.grid.to_grid()
    assert grid.collision_at(2, 1) == CollisionType.OBJECT


def test_missing_scenario_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        GridLoader(grids_dir=tmp_path).load("nowhere")


def test_load_reads_from_directory(tmp_path):
    (tmp_path / "tiny.json").write_text(
        json.dumps({"name": "tiny", "start": [0, 0], "goal": [1, 0], "ascii": [".."]})
    )
    scenario = GridLoader(grids_dir=tmp_path).load("tiny")
    assert scenario.description is None
    assert calculate_path(scenario.grid.to_grid(), scenario.start, scenario.goal).length == 2


@pytest.mark.parametrize(
    "data, message",
    [
        ({"name": "x", "start": [0, 0], "ascii": [".."]}, "missing required fields"),
        ({"name": "x", "start": [0, 0], "goal": [1, 0]}, "exactly one of"),
        (
            {
                "name": "x",
                "start": [0, 0],
                "goal": [1, 0],
                "ascii": [".."],
                "grid": {"width": 2, "height": 1, "rows": [[0, 0]]},
            },
            "exactly one of",
        ),
        ({"name": "x", "start": [0], "goal": [1, 0], "ascii": [".."]}, "'start'"),
    ],
)
def test_invalid_scenarios_rejected(data, message):
    with pytest.raises(ValueError, match=message):
        GridLoader().parse(data)


def test_ragged_grid_rows_rejected():
    data = {
        "name": "ragged",
        "start": [0, 0],
        "goal": [1, 0],
        "grid": {"width": 2, "height": 2, "rows": [[0, 0], [0]]},
    }
    with pytest.raises(ValueError):
        GridLoader().parse(data)


@pytest.mark.parametrize("grid", [[[0, 0]], "0 0", None])
def test_grid_section_must_be_an_object(grid):
    data = {"name": "bare", "start": [0, 0], "goal": [1, 0], "grid": grid}

    with pytest.raises(ValueError):
        GridLoader().parse(data)
