"""Command-line interface for flightplan."""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path
from time import perf_counter
from typing import Any, List, Optional

from flightplan.config import PLANNER_CONFIG
from flightplan.io import FlightRequest, load_flight_data
from flightplan.logging import get_logger, set_global_log_level
from flightplan.planner import plan_request, run_files
from flightplan.rank import SortKey
from flightplan.report import render_result

logger = get_logger(__name__)


def _format_table(
    headers: List[str],
    rows: List[List[Any]],
    min_width: int = 8,
) -> str:
    """Format data as a simple ASCII table.

    Args:
        headers: Column headers
        rows: Data rows
        min_width: Minimum column width

    Returns:
        Formatted table string
    """
    if not rows:
        return ""

    all_data = [headers] + rows
    col_widths = []
    for col_idx in range(len(headers)):
        max_width = max(len(str(row[col_idx])) for row in all_data)
        col_widths.append(max(max_width, min_width))

    def format_row(row_data: List[Any]) -> str:
        return "   " + " | ".join(
            f"{str(item):<{col_widths[i]}}" for i, item in enumerate(row_data)
        )

    lines = [format_row(headers)]
    lines.append("   " + "-+-".join("-" * width for width in col_widths))
    for row in rows:
        lines.append(format_row(row))
    return "\n".join(lines)


def _format_duration(seconds: float) -> str:
    """Return a concise human-readable duration string.

    Examples:
        0.123 -> "123.0 ms"; 1.234 -> "1.23 s"; 75.2 -> "1m 15.2s".
    """
    if seconds < 1.0:
        return f"{seconds * 1000.0:.1f} ms"
    if seconds < 60.0:
        return f"{seconds:.2f} s"
    minutes = int(seconds // 60)
    rem = seconds - minutes * 60
    return f"{minutes}m {rem:.1f}s"


def _plural(n: int, singular: str, plural: Optional[str] = None) -> str:
    """Return grammatically correct unit for count n."""
    if n == 1:
        return singular
    return plural or (singular + "s")


def _positive_int(value: str) -> int:
    """Argparse type for counts that must be at least 1."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: '{value}'") from None
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def _run(
    flights: Optional[Path],
    requests: Optional[Path],
    output: Optional[Path],
    stdout: bool,
) -> None:
    """Plan every request in the requests file and write the report."""
    start = perf_counter()
    effective_output = output or Path(PLANNER_CONFIG.output_file)
    try:
        text = run_files(flights, requests, effective_output)
    except FileNotFoundError as e:
        logger.error(f"Input file not found: {e.filename}")
        print(f"ERROR: Input file not found: {e.filename}")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Failed to plan flights: {type(e).__name__}: {e}")
        print(f"ERROR: Failed to plan flights: {type(e).__name__}: {e}")
        sys.exit(1)

    print(f"Report written to: {effective_output}")
    if stdout:
        print(text, end="")
    logger.info(f"Run completed in {_format_duration(perf_counter() - start)}")


def _query(
    flights: Optional[Path], origin: str, destination: str, sort: str, top: int
) -> None:
    """Answer one ad-hoc request and print it."""
    flights = flights or Path(PLANNER_CONFIG.flight_data_file)
    try:
        graph = load_flight_data(flights, separator=PLANNER_CONFIG.field_separator)
    except FileNotFoundError:
        logger.error(f"Flight data file not found: {flights}")
        print(f"ERROR: Flight data file not found: {flights}")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Failed to load flight data: {type(e).__name__}: {e}")
        print(f"ERROR: Failed to load flight data: {type(e).__name__}: {e}")
        sys.exit(1)

    request = FlightRequest(origin, destination, SortKey.from_code(sort))
    config = replace(PLANNER_CONFIG, top_k=top)
    result = plan_request(graph, request, 1, config)
    for line in render_result(result):
        print(line)
    logger.info(
        f"{result.total_paths} {_plural(result.total_paths, 'path')} found, "
        f"{len(result.ranked)} shown"
    )


def _inspect(flights: Optional[Path]) -> None:
    """Print a summary of the flight graph."""
    flights = flights or Path(PLANNER_CONFIG.flight_data_file)
    try:
        graph = load_flight_data(flights, separator=PLANNER_CONFIG.field_separator)
    except FileNotFoundError:
        logger.error(f"Flight data file not found: {flights}")
        print(f"ERROR: Flight data file not found: {flights}")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Failed to inspect flight data: {type(e).__name__}: {e}")
        print(f"ERROR: Failed to inspect flight data: {type(e).__name__}: {e}")
        sys.exit(1)

    cities = graph.number_of_nodes()
    legs = graph.number_of_edges()
    print(f"Flight data: {flights}")
    print(f"  {cities} {_plural(cities, 'city', 'cities')}")
    print(f"  {legs} flight {_plural(legs, 'leg')}")

    rows = [[city, count] for city, count in graph.departure_counts().items()]
    table = _format_table(["City", "Departures"], rows)
    if table:
        print()
        print(table)


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``flightplan`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="flightplan",
        description="Find and rank flight plans between cities.",
    )

    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Only log warnings and errors"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{run,query,inspect}",
        help="Available commands",
    )

    run_parser = subparsers.add_parser("run", help="Plan all requested flights")
    run_parser.add_argument(
        "--requests",
        "-r",
        type=Path,
        default=None,
        help=f"Requests file (default: {PLANNER_CONFIG.requests_file})",
    )
    run_parser.add_argument(
        "--output",
        "-o",
        type=Path,
        default=None,
        help=f"Report file (default: {PLANNER_CONFIG.output_file})",
    )
    run_parser.add_argument(
        "--stdout",
        action="store_true",
        help="Also print the report to stdout",
    )

    query_parser = subparsers.add_parser("query", help="Plan a single flight")
    query_parser.add_argument("origin", help="Departure city")
    query_parser.add_argument("destination", help="Arrival city")
    query_parser.add_argument(
        "--sort",
        "-s",
        default="C",
        help="Sort key: T for time, C for cost (default: C)",
    )
    query_parser.add_argument(
        "--top",
        "-k",
        type=_positive_int,
        default=PLANNER_CONFIG.top_k,
        help=f"Number of plans to show (default: {PLANNER_CONFIG.top_k})",
    )

    inspect_parser = subparsers.add_parser(
        "inspect", help="Summarize a flight data file"
    )

    for p in (run_parser, query_parser, inspect_parser):
        p.add_argument(
            "--flights",
            "-f",
            type=Path,
            default=None,
            help=f"Flight data file (default: {PLANNER_CONFIG.flight_data_file})",
        )

    effective_args = sys.argv[1:] if argv is None else argv

    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    if args.verbose:
        set_global_log_level(logging.DEBUG)
        logger.debug("Debug logging enabled")
    elif args.quiet:
        set_global_log_level(logging.WARNING)
    else:
        set_global_log_level(logging.INFO)

    if args.command == "run":
        _run(args.flights, args.requests, args.output, args.stdout)
    elif args.command == "query":
        _query(args.flights, args.origin, args.destination, args.sort, args.top)
    elif args.command == "inspect":
        _inspect(args.flights)


if __name__ == "__main__":
    main()
