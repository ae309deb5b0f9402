from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterator, Tuple

from flightplan.graph import FlightEdge, NodeID

if TYPE_CHECKING:
    from flightplan.rank import SortKey


@dataclass(frozen=True)
class Path:
    """
    A route through the flight graph with running totals.

    Paths are immutable; `extend` returns a new instance so that sibling
    branches of a search never share state.

    Attributes:
        nodes (Tuple[NodeID, ...]):
            Cities in visiting order, starting with the origin.
        cost (int):
            Sum of leg costs traversed so far.
        time (int):
            Sum of leg travel times traversed so far.
    """

    nodes: Tuple[NodeID, ...]
    cost: int = 0
    time: int = 0

    @classmethod
    def start(cls, node: NodeID) -> Path:
        """Return a single-city path with zero cost and time."""
        return cls((node,))

    def extend(self, edge: FlightEdge) -> Path:
        """
        Return a copy of this path with `edge` appended.

        Args:
            edge: Leg departing from this path's last city.

        Returns:
            A new Path ending at `edge.dst` with updated totals.
        """
        return Path(
            self.nodes + (edge.dst,),
            self.cost + edge.cost,
            self.time + edge.time,
        )

    def __contains__(self, node: object) -> bool:
        return node in self.nodes

    def __iter__(self) -> Iterator[NodeID]:
        return iter(self.nodes)

    def __len__(self) -> int:
        return len(self.nodes)

    @property
    def src_node(self) -> NodeID:
        """Return the first city in the path."""
        return self.nodes[0]

    @property
    def dst_node(self) -> NodeID:
        """Return the last city in the path."""
        return self.nodes[-1]

    @property
    def sequence(self) -> str:
        """Return the cities joined with arrows, e.g. ``A -> B -> C``."""
        return " -> ".join(self.nodes)

    def metric(self, sort_key: SortKey) -> int:
        """Return the total selected by `sort_key` (time or cost)."""
        return sort_key.metric(self)
