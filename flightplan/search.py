"""Exhaustive simple-path enumeration with an explicit stack.

The traversal is iterative backtracking: each `Frame` remembers which
outgoing leg of its city to try next and owns the partial path that reached
it. Frames are pushed when a city is entered and popped when the destination
is reached or every leg has been tried. No recursion is involved, so path
length is bounded only by the number of cities.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Optional

from flightplan.graph import FlightGraph, NodeID
from flightplan.logging import get_logger
from flightplan.path import Path

logger = get_logger(__name__)


@dataclass
class Frame:
    """Exploration state for one city on the search stack.

    Attributes:
        node: City being explored.
        next_index: Index of the next untried outgoing leg of ``node``.
        path: Path from the origin to ``node``; owned by this frame.
    """

    node: NodeID
    next_index: int
    path: Path


class PathSearch:
    """Step-wise enumeration of all simple paths from origin to destination.

    Paths are produced in depth-first discovery order, always trying the
    lowest-index untried leg of the top frame first. The stack and the
    results collected so far stay readable between steps.

    Example:
        search = PathSearch(graph, "A", "C")
        for path in search:
            print(path.sequence)
    """

    def __init__(self, graph: FlightGraph, origin: NodeID, destination: NodeID) -> None:
        self.graph = graph
        self.origin = origin
        self.destination = destination
        self.stack: List[Frame] = []
        self.results: List[Path] = []
        self.frames_pushed = 0
        if graph.has_departures(origin):
            self._push(Frame(origin, 0, Path.start(origin)))

    @property
    def done(self) -> bool:
        """True once the stack is exhausted."""
        return not self.stack

    def _push(self, frame: Frame) -> None:
        self.stack.append(frame)
        self.frames_pushed += 1

    def step(self) -> Optional[Path]:
        """Advance the search by one iteration.

        One call does exactly one of: record a completed path and backtrack,
        try the next leg of the top frame (pushing a frame unless it would
        revisit a city), or pop an exhausted frame.

        Returns:
            The path completed by this step, or None.
        """
        if not self.stack:
            return None

        frame = self.stack[-1]

        if frame.node == self.destination:
            self.stack.pop()
            self.results.append(frame.path)
            return frame.path

        neighbors = self.graph.get_neighbors(frame.node)
        if frame.next_index < len(neighbors):
            edge = neighbors[frame.next_index]
            frame.next_index += 1
            # Cycle guard; also drops self-loops
            if edge.dst not in frame.path:
                self._push(Frame(edge.dst, 0, frame.path.extend(edge)))
        else:
            self.stack.pop()
        return None

    def __iter__(self) -> Iterator[Path]:
        while self.stack:
            path = self.step()
            if path is not None:
                yield path

    def run(self) -> List[Path]:
        """Drain the search and return every path found, in discovery order."""
        for _ in self:
            pass
        logger.debug(
            f"Found {len(self.results)} path(s) from {self.origin} to "
            f"{self.destination} ({self.frames_pushed} frames pushed)"
        )
        return list(self.results)


def find_paths(graph: FlightGraph, origin: NodeID, destination: NodeID) -> List[Path]:
    """Return all simple paths from ``origin`` to ``destination``.

    Args:
        graph: Flight graph; not modified.
        origin: Starting city. A city with no departures yields no paths.
        destination: Target city.

    Returns:
        Completed paths, unsorted, in depth-first discovery order. Empty when
        no route exists.
    """
    return PathSearch(graph, origin, destination).run()
