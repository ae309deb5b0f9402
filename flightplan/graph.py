"""Flight graph with ordered departures.

`FlightGraph` extends `networkx.MultiDiGraph` with flight-specific edge
weights (``cost`` and ``time``) and an ordered departure list per city. A plain
MultiDiGraph groups out-edges by neighbour, so the departure list is what keeps
the exact insertion order that path enumeration depends on.
"""

from __future__ import annotations

from dataclasses import dataclass
from pickle import dumps, loads
from typing import Dict, Iterable, List, Optional, Tuple

import networkx as nx

NodeID = str
EdgeID = int
RouteTuple = Tuple[NodeID, NodeID, int, int]


@dataclass(frozen=True)
class FlightEdge:
    """A single directed flight leg.

    Attributes:
        src: City the leg departs from.
        dst: City the leg arrives at.
        cost: Ticket cost of the leg.
        time: Travel time of the leg.
        key: Unique edge identifier within the owning graph.
    """

    src: NodeID
    dst: NodeID
    cost: int
    time: int
    key: EdgeID


class FlightGraph(nx.MultiDiGraph):
    """Directed multigraph of flight legs.

    Rules:
      - Adding an edge creates missing nodes.
      - Parallel edges and self-loops are kept; nothing is deduplicated.
      - Weights are stored as given, without sign checks.
      - Edge keys are integers from a counter that only advances.

    Inherits from:
        networkx.MultiDiGraph
    """

    def __init__(self, *args, **kwargs) -> None:
        """Initialize an empty FlightGraph.

        Attributes:
            _edges: Map edge key to its ``FlightEdge`` in insertion order.
            _departures: Map city to its outgoing legs in insertion order.
            _neighbors: Read-only snapshots of ``_departures``, rebuilt lazily
                after a city gains a leg.
        """
        super().__init__(*args, **kwargs)
        self._edges: Dict[EdgeID, FlightEdge] = {}
        self._departures: Dict[NodeID, List[FlightEdge]] = {}
        self._next_edge_id: int = 0
        self._neighbors: Dict[NodeID, Tuple[FlightEdge, ...]] = {}

    @classmethod
    def from_routes(cls, routes: Iterable[RouteTuple]) -> FlightGraph:
        """Build a graph from undirected ``(origin, dest, cost, time)`` records."""
        graph = cls()
        for origin, dest, cost, time in routes:
            graph.add_route(origin, dest, cost, time)
        return graph

    def new_edge_key(self, u: NodeID, v: NodeID, key: Optional[int] = None) -> int:  # type: ignore[override]
        """Return a new unique integer edge ID.

        Signature matches NetworkX's ``new_edge_key(self, u, v, key=None)``.
        """
        next_edge_id = self._next_edge_id
        self._next_edge_id += 1
        return next_edge_id

    def copy(self) -> FlightGraph:  # type: ignore[override]
        """Return a pickle-based deep copy, departure lists included.

        NetworkX copies and views rebuild the graph through ``add_edges_from``,
        which bypasses the departure lists, so they are not offered here.
        """
        return loads(dumps(self))

    #
    # Edge management
    #
    def add_edge(  # pyright: ignore[reportIncompatibleMethodOverride]
        self,
        u_for_edge: NodeID,
        v_for_edge: NodeID,
        key: Optional[EdgeID] = None,
        *,
        cost: int = 0,
        time: int = 0,
    ) -> EdgeID:
        """Add a directed flight leg from ``u_for_edge`` to ``v_for_edge``.

        Args:
            u_for_edge: Departure city. Created if absent.
            v_for_edge: Arrival city. Created if absent.
            key: Optional explicit edge key; generated when None.
            cost: Leg cost.
            time: Leg travel time.

        Returns:
            The key of the new edge.

        Raises:
            ValueError: If an explicit key is already in use.
        """
        if key is None:
            key = self.new_edge_key(u_for_edge, v_for_edge)
        else:
            if key in self._edges:
                raise ValueError(f"Edge with id '{key}' already exists.")
            # Auto keys must stay ahead of explicit ones
            if key >= self._next_edge_id:
                self._next_edge_id = key + 1

        super().add_edge(u_for_edge, v_for_edge, key=key, cost=cost, time=time)
        edge = FlightEdge(u_for_edge, v_for_edge, cost, time, key)
        self._edges[key] = edge
        self._departures.setdefault(u_for_edge, []).append(edge)
        self._neighbors.pop(u_for_edge, None)
        return key

    def add_route(
        self, origin: NodeID, dest: NodeID, cost: int, time: int
    ) -> Tuple[EdgeID, EdgeID]:
        """Add an undirected route as two directed legs with equal weights.

        Returns:
            Keys of the ``origin -> dest`` and ``dest -> origin`` legs.
        """
        forward = self.add_edge(origin, dest, cost=cost, time=time)
        backward = self.add_edge(dest, origin, cost=cost, time=time)
        return forward, backward

    #
    # Queries
    #
    def get_neighbors(self, node: NodeID) -> Tuple[FlightEdge, ...]:
        """Return outgoing legs of ``node`` in insertion order.

        Unknown cities yield an empty tuple. The tuple is cached until the
        city gains another leg, so repeated lookups do not copy.
        """
        neighbors = self._neighbors.get(node)
        if neighbors is None:
            neighbors = tuple(self._departures.get(node, ()))
            if node in self._departures:
                self._neighbors[node] = neighbors
        return neighbors

    def has_departures(self, node: NodeID) -> bool:
        """Return True if at least one leg departs from ``node``."""
        return node in self._departures

    def get_edges(self) -> Dict[EdgeID, FlightEdge]:
        """Return a shallow copy of the edge map (key -> FlightEdge)."""
        return dict(self._edges)

    def departure_counts(self) -> Dict[NodeID, int]:
        """Return the number of outgoing legs per city, in first-seen order."""
        return {node: len(self._departures.get(node, ())) for node in self.nodes}
