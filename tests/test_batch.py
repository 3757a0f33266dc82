"""Tests for running independent searches concurrently over one grid."""

import pytest

from gridpather import CollisionGrid, calculate_path, calculate_paths


GRID = CollisionGrid.from_ascii(
    """
    ........
    ..#.....
    ..#..#..
    ..#..#..
    .....#..
    ........
    """
)


@pytest.mark.asyncio
async def test_batch_matches_sequential_results_in_order():
    requests = [
        ((0, 0), (7, 5)),
        ((7, 0), (0, 5)),
        ((3, 3), (3, 3)),
        ((0, 0), (2, 2)),  # goal is a wall
    ]

    results = await calculate_paths(GRID, requests)

    assert len(results) == len(requests)
    for (start, goal), result in zip(requests, results):
        expected = calculate_path(GRID, start, goal)
        assert result.model_dump() == expected.model_dump()

    assert results[2].path == [(3, 3)]
    assert results[3].found is False


@pytest.mark.asyncio
async def test_empty_batch():
    assert await calculate_paths(GRID, []) == []
