"""Request pipeline: enumerate, rank and render."""

from __future__ import annotations

from pathlib import Path
from time import perf_counter
from typing import Iterable, List, Optional, Union

from flightplan.config import PLANNER_CONFIG, PlannerConfig
from flightplan.graph import FlightGraph
from flightplan.io import FlightRequest, load_flight_data, load_requests, write_report
from flightplan.logging import get_logger
from flightplan.rank import rank_paths
from flightplan.report import QueryResult, render_report
from flightplan.search import find_paths

logger = get_logger(__name__)


def plan_request(
    graph: FlightGraph,
    request: FlightRequest,
    index: int = 1,
    config: Optional[PlannerConfig] = None,
) -> QueryResult:
    """Plan a single request against a read-only graph."""
    config = config or PLANNER_CONFIG
    paths = find_paths(graph, request.origin, request.destination)
    if not paths:
        logger.debug(
            f"Request {index}: no path from {request.origin} to {request.destination}"
        )
    ranked = rank_paths(paths, request.sort_key, limit=config.top_k)
    return QueryResult(index, request, ranked, total_paths=len(paths))


def plan_requests(
    graph: FlightGraph,
    requests: Iterable[FlightRequest],
    config: Optional[PlannerConfig] = None,
) -> List[QueryResult]:
    """Plan requests in order; indices start at 1."""
    return [
        plan_request(graph, request, index, config)
        for index, request in enumerate(requests, start=1)
    ]


def run_files(
    flight_data: Union[str, Path, None] = None,
    requests: Union[str, Path, None] = None,
    output: Union[str, Path, None] = None,
    config: Optional[PlannerConfig] = None,
) -> str:
    """Run the full pipeline over files and write the report.

    Any argument left as None falls back to the file name in ``config``.
    Nothing is written unless every request was read and planned.

    Returns:
        The report text that was written.
    """
    config = config or PLANNER_CONFIG
    flight_data = flight_data or config.flight_data_file
    requests = requests or config.requests_file
    output = output or config.output_file

    start = perf_counter()
    graph = load_flight_data(flight_data, separator=config.field_separator)
    request_list = load_requests(requests, separator=config.field_separator)

    results = plan_requests(graph, request_list, config)
    text = render_report(results)
    write_report(output, text)

    logger.info(
        f"Planned {len(results)} request(s) in {perf_counter() - start:.3f} s"
    )
    return text
