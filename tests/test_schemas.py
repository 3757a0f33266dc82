"""Unit tests for result/scenario schemas and configuration."""

import json

import pytest

from gridpather import GridScenario, PathResult, Position
from gridpather.config import Config
from gridpather.grid import CollisionGridState


def test_path_result_defaults_to_not_found():
    result = PathResult.not_found(expanded=7)

    assert result.found is False
    assert result.path == []
    assert result.length == 0
    assert result.expanded == 7
    assert result.as_tuple() == ([], 0, False)


def test_path_result_serializes_positions():
    result = PathResult(path=[(0, 0), (1, 1)], length=2, found=True, cost=1)

    assert result.path[1] == Position(1, 1)
    payload = json.loads(result.model_dump_json())
    assert payload["path"] == [[0, 0], [1, 1]]
    assert payload["found"] is True


def test_grid_scenario_endpoints_are_positions():
    scenario = GridScenario(
        name="tiny",
        grid=CollisionGridState(width=2, height=1, rows=[[0, 0]]),
        start=(0, 0),
        goal=(1, 0),
    )

    assert scenario.start == (0, 0)
    assert scenario.goal.x == 1


def test_config_validate_rejects_non_positive_costs(monkeypatch):
    monkeypatch.setattr(Config, "OBJECT_COST", 0)

    with pytest.raises(ValueError, match="PATHER_OBJECT_COST"):
        Config.validate()


def test_config_display_lists_weights():
    text = Config.display()

    assert "gridpather Configuration:" in text
    assert f"Turn Penalty: {Config.TURN_PENALTY}" in text
