from flightplan.io import FlightRequest
from flightplan.path import Path
from flightplan.rank import RankedPath, SortKey
from flightplan.report import (
    QueryResult,
    format_header,
    format_no_plan,
    format_ranked_path,
    render_report,
    render_result,
)


def _request(origin="A", destination="C", key=SortKey.TIME):
    return FlightRequest(origin, destination, key)


def test_format_header():
    assert format_header(1, _request()) == "Flight 1: A, C (Time)"
    assert format_header(7, _request("X", "Y", SortKey.COST)) == "Flight 7: X, Y (Cost)"


def test_format_ranked_path():
    ranked = RankedPath(1, Path(("A", "B", "C"), cost=150, time=5))
    assert format_ranked_path(ranked) == "Path 1: A -> B -> C. Time: 5 Cost: 150"


def test_format_single_city_path():
    ranked = RankedPath(1, Path.start("A"))
    assert format_ranked_path(ranked) == "Path 1: A. Time: 0 Cost: 0"


def test_format_no_plan():
    assert (
        format_no_plan(_request("X", "Y"))
        == "Path 1: No available flight plan from X to Y."
    )


def test_render_result_with_paths():
    result = QueryResult(
        2,
        _request(key=SortKey.COST),
        [
            RankedPath(1, Path(("A", "B"), 10, 1)),
            RankedPath(2, Path(("A", "B"), 20, 5)),
        ],
        total_paths=2,
    )
    assert render_result(result) == [
        "Flight 2: A, C (Cost)",
        "Path 1: A -> B. Time: 1 Cost: 10",
        "Path 2: A -> B. Time: 5 Cost: 20",
    ]


def test_render_result_empty():
    result = QueryResult(1, _request("X", "Y"))
    assert render_result(result) == [
        "Flight 1: X, Y (Time)",
        "Path 1: No available flight plan from X to Y.",
    ]


def test_render_report_separates_blocks():
    """One blank line between blocks, none after the last."""
    results = [QueryResult(1, _request("X", "Y")), QueryResult(2, _request("Y", "X"))]
    assert render_report(results) == (
        "Flight 1: X, Y (Time)\n"
        "Path 1: No available flight plan from X to Y.\n"
        "\n"
        "Flight 2: Y, X (Time)\n"
        "Path 1: No available flight plan from Y to X.\n"
    )


def test_render_report_single_and_empty():
    assert render_report([QueryResult(1, _request("X", "Y"))]).count("\n\n") == 0
    assert render_report([]) == ""
