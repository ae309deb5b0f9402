"""Plain-text rendering of planned requests."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List

from flightplan.io import FlightRequest
from flightplan.rank import RankedPath


@dataclass
class QueryResult:
    """Outcome of one request.

    Attributes:
        index: 1-based position of the request in its file.
        request: The request that was planned.
        ranked: Best paths, already ranked and truncated.
        total_paths: Number of simple paths found before truncation.
    """

    index: int
    request: FlightRequest
    ranked: List[RankedPath] = field(default_factory=list)
    total_paths: int = 0


def format_header(index: int, request: FlightRequest) -> str:
    return (
        f"Flight {index}: {request.origin}, {request.destination} "
        f"({request.sort_key.label})"
    )


def format_ranked_path(ranked: RankedPath) -> str:
    path = ranked.path
    return f"Path {ranked.rank}: {path.sequence}. Time: {path.time} Cost: {path.cost}"


def format_no_plan(request: FlightRequest) -> str:
    return (
        f"Path 1: No available flight plan from "
        f"{request.origin} to {request.destination}."
    )


def render_result(result: QueryResult) -> List[str]:
    """Return the header and path lines for one request."""
    lines = [format_header(result.index, result.request)]
    if not result.ranked:
        lines.append(format_no_plan(result.request))
    else:
        lines.extend(format_ranked_path(r) for r in result.ranked)
    return lines


def render_report(results: Iterable[QueryResult]) -> str:
    """Render all requests as report text.

    Blocks are separated by a single blank line, with none after the last.
    Every line ends with a newline.
    """
    blocks = ["".join(f"{line}\n" for line in render_result(r)) for r in results]
    return "\n".join(blocks)
