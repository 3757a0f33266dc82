"""Search node arena and the priority frontier.

Nodes live in a flat list owned by one search call and refer to their
predecessor by index, so reconstructing a path is a walk over integers rather
than a chain of object references.
"""

from __future__ import annotations

import heapq
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from gridpather.grid.collision import Position


@dataclass
class SearchNode:
    """Best-known route to ``position`` at the time it was recorded."""

    position: Position
    g: int
    priority: int
    parent: Optional[int] = None


@dataclass
class NodeArena:
    """Append-only storage for the nodes created during a single search."""

    nodes: List[SearchNode] = field(default_factory=list)

    def add(self, node: SearchNode) -> int:
        self.nodes.append(node)
        return len(self.nodes) - 1

    def __getitem__(self, index: int) -> SearchNode:
        return self.nodes[index]

    def __len__(self) -> int:
        return len(self.nodes)

    def trace(self, index: int) -> List[Position]:
        """Follow predecessor indices from ``index`` back to the root, start first."""
        path: List[Position] = []
        current: Optional[int] = index
        while current is not None:
            node = self.nodes[current]
            path.append(node.position)
            current = node.parent
        path.reverse()
        return path


class Frontier:
    """Min-heap of arena indices keyed by node priority.

    Entries are ``(priority, sequence, index)``. The monotonic sequence number
    makes equal-priority entries pop in insertion order. That tie-break is an
    implementation detail: callers should rely on cost optimality, not on a
    particular path among equally cheap ones.
    """

    def __init__(self) -> None:
        self._heap: List[Tuple[int, int, int]] = []
        self._sequence = 0

    def push(self, priority: int, index: int) -> None:
        heapq.heappush(self._heap, (priority, self._sequence, index))
        self._sequence += 1

    def pop(self) -> int:
        """Remove and return the arena index with the lowest priority."""
        return heapq.heappop(self._heap)[2]

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)
