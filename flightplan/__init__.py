"""flightplan: simple-path flight planning.

Builds an undirected flight graph from route records, enumerates every
cycle-free route between two cities with an explicit-stack search, and ranks
the routes by total travel time or total cost.

Primary API:
    FlightGraph - Flight legs with ordered departures per city
    find_paths() - All simple paths between two cities, in discovery order
    rank_paths() - Stable ascending ranking by time or cost, truncated
    plan_requests() - Enumerate and rank a batch of requests
    run_files() - File-to-file pipeline producing the text report

Example:
    from flightplan import FlightGraph, SortKey, find_paths, rank_paths

    graph = FlightGraph.from_routes([("A", "B", 100, 2), ("B", "C", 50, 3)])
    best = rank_paths(find_paths(graph, "A", "C"), SortKey.TIME)
"""

from __future__ import annotations

from flightplan import cli, logging
from flightplan._version import __version__
from flightplan.config import PLANNER_CONFIG, PlannerConfig
from flightplan.graph import FlightEdge, FlightGraph
from flightplan.io import (
    FlightRequest,
    InputFormatError,
    load_flight_data,
    load_requests,
    parse_flight_data,
    parse_requests,
    write_report,
)
from flightplan.path import Path
from flightplan.planner import plan_request, plan_requests, run_files
from flightplan.rank import RankedPath, SortKey, rank_paths
from flightplan.report import QueryResult, render_report, render_result
from flightplan.search import Frame, PathSearch, find_paths

__all__ = [
    # Version
    "__version__",
    # Model
    "FlightEdge",
    "FlightGraph",
    "Path",
    "FlightRequest",
    # Search and ranking
    "Frame",
    "PathSearch",
    "find_paths",
    "SortKey",
    "RankedPath",
    "rank_paths",
    # Pipeline
    "QueryResult",
    "plan_request",
    "plan_requests",
    "run_files",
    "render_report",
    "render_result",
    # I/O
    "InputFormatError",
    "parse_flight_data",
    "parse_requests",
    "load_flight_data",
    "load_requests",
    "write_report",
    # Configuration
    "PlannerConfig",
    "PLANNER_CONFIG",
    # Utilities
    "cli",
    "logging",
]
