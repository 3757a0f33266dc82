"""Tests for path validation and cost recomputation helpers."""

from gridpather import BLOCKED, CollisionGrid, CostModel, is_valid_step, path_cost, validate_path


GRID = CollisionGrid.from_ascii(
    """
    ....
    .#..
    ..#.
    ....
    """
)


def test_valid_steps():
    assert is_valid_step(GRID, (0, 0), (1, 0))
    assert is_valid_step(GRID, (0, 3), (1, 2))
    # Not adjacent
    assert not is_valid_step(GRID, (0, 0), (2, 0))
    # Standing still is not a move
    assert not is_valid_step(GRID, (0, 0), (0, 0))
    # Into a wall
    assert not is_valid_step(GRID, (0, 0), (1, 1))
    # Diagonal between two walls
    assert not is_valid_step(GRID, (1, 2), (2, 1))
    # Off the grid
    assert not is_valid_step(GRID, (3, 3), (4, 3))


def test_validate_path():
    assert validate_path(GRID, [(0, 0), (1, 0), (2, 0), (3, 1)])
    assert validate_path(GRID, [(2, 3)])
    assert not validate_path(GRID, [])
    assert not validate_path(GRID, [(0, 3), (1, 2), (2, 1), (3, 0)])


def test_path_cost_counts_turns():
    grid = CollisionGrid.from_ascii(["....", "...."])

    assert path_cost(grid, [(0, 0)]) == 0
    assert path_cost(grid, [(0, 0), (1, 0), (2, 0)]) == 2
    # Three cells entered plus two heading changes
    assert path_cost(grid, [(0, 0), (1, 0), (2, 1), (3, 1)]) == 5
    assert path_cost(grid, [(0, 0), (1, 0), (2, 1), (3, 1)], CostModel(turn_penalty=0)) == 3


def test_path_cost_includes_wall_proximity_and_blocked():
    assert path_cost(GRID, [(0, 0), (1, 0)]) == 3
    assert path_cost(GRID, [(0, 0), (1, 1)]) == BLOCKED
