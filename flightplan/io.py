"""Readers and writers for the line-oriented flight files.

Flight data::

    2
    Dallas|Austin|98|47
    Austin|Houston|95|39

Requests::

    1
    Dallas|Houston|T

The first line of each file is a record count. Extra lines after the declared
records are ignored; missing or malformed ones raise `InputFormatError`.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Tuple, Union

from flightplan.graph import FlightGraph, NodeID
from flightplan.logging import get_logger
from flightplan.rank import SortKey

logger = get_logger(__name__)

PathLike = Union[str, Path]


class InputFormatError(ValueError):
    """Raised when an input file does not match the expected record format."""


@dataclass(frozen=True)
class FlightRequest:
    """One requested itinerary."""

    origin: NodeID
    destination: NodeID
    sort_key: SortKey


def _read_records(lines: Iterable[str], source: str) -> Iterator[Tuple[int, str]]:
    """Yield ``(line_number, record)`` for each declared record.

    Reads the count line first, then exactly that many records.
    """
    it = iter(lines)
    try:
        header = next(it)
    except StopIteration:
        raise InputFormatError(f"{source}: file is empty") from None

    try:
        count = int(header.strip())
    except ValueError:
        raise InputFormatError(
            f"{source}:1: expected a record count, got '{header.rstrip()}'"
        ) from None

    for line_no in range(2, count + 2):
        try:
            line = next(it)
        except StopIteration:
            raise InputFormatError(
                f"{source}: expected {count} records, found {line_no - 2}"
            ) from None
        yield line_no, line.rstrip("\r\n")


def _split(
    record: str, separator: str, width: int, source: str, line_no: int
) -> List[str]:
    tokens = record.split(separator)
    if len(tokens) != width:
        raise InputFormatError(
            f"{source}:{line_no}: expected {width} fields separated by "
            f"'{separator}', got '{record}'"
        )
    return tokens


def _to_int(token: str, field: str, source: str, line_no: int) -> int:
    try:
        return int(token)
    except ValueError:
        raise InputFormatError(
            f"{source}:{line_no}: {field} must be an integer, got '{token}'"
        ) from None


def parse_flight_data(
    lines: Iterable[str],
    separator: str = "|",
    source: str = "<flight data>",
    graph: Optional[FlightGraph] = None,
) -> FlightGraph:
    """Build or extend a FlightGraph from flight data lines.

    Each ``origin|dest|cost|time`` record becomes a route in both directions.
    Cost and time are signed integers and are not range-checked.

    Args:
        lines: Text lines, count line first.
        separator: Field delimiter.
        source: Name used in error messages.
        graph: Existing graph to extend; a new one is created if None.

    Returns:
        The populated graph.

    Raises:
        InputFormatError: On a missing, short or malformed record.
    """
    if graph is None:
        graph = FlightGraph()

    for line_no, record in _read_records(lines, source):
        origin, dest, cost, time = _split(record, separator, 4, source, line_no)
        graph.add_route(
            origin,
            dest,
            _to_int(cost, "cost", source, line_no),
            _to_int(time, "time", source, line_no),
        )
    return graph


def parse_requests(
    lines: Iterable[str],
    separator: str = "|",
    source: str = "<requests>",
) -> List[FlightRequest]:
    """Parse ``origin|dest|sortKey`` request records.

    Raises:
        InputFormatError: On a missing or malformed record, including an empty
            sort key.
    """
    requests: List[FlightRequest] = []
    for line_no, record in _read_records(lines, source):
        origin, dest, code = _split(record, separator, 3, source, line_no)
        if not code:
            raise InputFormatError(f"{source}:{line_no}: missing sort key")
        requests.append(FlightRequest(origin, dest, SortKey.from_code(code)))
    return requests


def load_flight_data(path: PathLike, separator: str = "|") -> FlightGraph:
    """Read a flight data file into a FlightGraph."""
    path = Path(path)
    logger.debug(f"Reading flight data from: {path}")
    with path.open(encoding="utf-8") as fh:
        graph = parse_flight_data(fh, separator=separator, source=str(path))
    logger.info(
        f"Loaded {graph.number_of_nodes()} cities and "
        f"{graph.number_of_edges()} flight legs from {path}"
    )
    return graph


def load_requests(path: PathLike, separator: str = "|") -> List[FlightRequest]:
    """Read a requests file."""
    path = Path(path)
    logger.debug(f"Reading requests from: {path}")
    with path.open(encoding="utf-8") as fh:
        requests = parse_requests(fh, separator=separator, source=str(path))
    logger.info(f"Loaded {len(requests)} request(s) from {path}")
    return requests


def write_report(path: PathLike, text: str) -> None:
    """Write report text, creating parent directories as needed."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    logger.info(f"Report written to: {path}")
