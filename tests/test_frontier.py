"""Tests for the node arena and priority frontier."""

from gridpather.grid import Position
from gridpather.pather import Frontier, NodeArena, SearchNode


def test_frontier_pops_lowest_priority_first():
    frontier = Frontier()
    frontier.push(5, 0)
    frontier.push(2, 1)
    frontier.push(9, 2)

    assert len(frontier) == 3
    assert [frontier.pop(), frontier.pop(), frontier.pop()] == [1, 0, 2]
    assert not frontier


def test_frontier_breaks_ties_in_insertion_order():
    frontier = Frontier()
    for index in (4, 7, 1):
        frontier.push(3, index)

    assert [frontier.pop() for _ in range(3)] == [4, 7, 1]


def test_arena_trace_walks_back_to_root():
    arena = NodeArena()
    root = arena.add(SearchNode(position=Position(0, 0), g=0, priority=4))
    middle = arena.add(SearchNode(position=Position(1, 1), g=1, priority=3, parent=root))
    # A discarded branch that must not leak into the trace
    arena.add(SearchNode(position=Position(0, 1), g=1, priority=5, parent=root))
    leaf = arena.add(SearchNode(position=Position(2, 1), g=3, priority=3, parent=middle))

    assert arena.trace(leaf) == [(0, 0), (1, 1), (2, 1)]
    assert arena.trace(root) == [(0, 0)]
    assert len(arena) == 4
