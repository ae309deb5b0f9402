import pytest

from flightplan.path import Path
from flightplan.rank import RankedPath, SortKey, rank_paths
from flightplan.search import find_paths


@pytest.mark.parametrize(
    "code,expected",
    [
        ("T", SortKey.TIME),
        ("C", SortKey.COST),
        ("X", SortKey.COST),
        ("t", SortKey.COST),
        ("Time", SortKey.TIME),
        ("", SortKey.COST),
    ],
)
def test_sort_key_from_code(code, expected):
    """Only a leading 'T' selects time; everything else selects cost."""
    assert SortKey.from_code(code) is expected


def test_sort_key_labels():
    assert SortKey.TIME.label == "Time"
    assert SortKey.COST.label == "Cost"


def test_rank_by_cost():
    paths = [Path(("A", "B"), 30, 1), Path(("A", "C", "B"), 10, 9)]
    ranked = rank_paths(paths, SortKey.COST)
    assert [r.path.cost for r in ranked] == [10, 30]
    assert [r.rank for r in ranked] == [1, 2]


def test_rank_by_time():
    paths = [Path(("A", "B"), 30, 1), Path(("A", "C", "B"), 10, 9)]
    ranked = rank_paths(paths, SortKey.TIME)
    assert [r.path.time for r in ranked] == [1, 9]


def test_rank_truncates_to_three():
    paths = [Path(("A", "B"), c, c) for c in (5, 4, 3, 2, 1)]
    ranked = rank_paths(paths, SortKey.COST)
    assert len(ranked) == 3
    assert [r.path.cost for r in ranked] == [1, 2, 3]


def test_rank_fewer_than_limit():
    paths = [Path(("A", "B"), 2, 2), Path(("A", "B"), 1, 1)]
    assert len(rank_paths(paths, SortKey.COST)) == 2


def test_rank_custom_limit():
    paths = [Path(("A", "B"), c, c) for c in range(10)]
    assert len(rank_paths(paths, SortKey.COST, limit=5)) == 5
    assert rank_paths(paths, SortKey.COST, limit=0) == []


def test_rank_empty():
    assert rank_paths([], SortKey.TIME) == []


def test_rank_ties_keep_discovery_order():
    """Equal metric values stay in the order they were found."""
    first = Path(("A", "X", "B"), 10, 1)
    second = Path(("A", "Y", "B"), 10, 2)
    third = Path(("A", "B"), 5, 3)
    ranked = rank_paths([first, second, third], SortKey.COST)
    assert [r.path for r in ranked] == [third, first, second]


def test_rank_is_repeatable(square_1):
    paths = find_paths(square_1, "A", "C")
    assert rank_paths(paths, SortKey.TIME) == rank_paths(paths, SortKey.TIME)


def test_rank_does_not_reorder_input():
    paths = [Path(("A", "B"), 2, 2), Path(("A", "B"), 1, 1)]
    rank_paths(paths, SortKey.COST)
    assert [p.cost for p in paths] == [2, 1]


def test_rank_negative_weights():
    paths = [Path(("A", "B"), 0, 0), Path(("A", "C", "B"), -5, 1)]
    ranked = rank_paths(paths, SortKey.COST)
    assert ranked[0].path.cost == -5


def test_parallel_edges_ranked_by_cost(parallel_1):
    ranked = rank_paths(find_paths(parallel_1, "A", "B"), SortKey.COST)
    assert ranked == [
        RankedPath(1, Path(("A", "B"), 10, 1)),
        RankedPath(2, Path(("A", "B"), 20, 5)),
    ]


def test_rank_negative_limit_is_empty():
    """A negative limit keeps nothing rather than slicing from the end."""
    paths = [Path(("A", "B"), c, c) for c in range(4)]
    assert rank_paths(paths, SortKey.COST, limit=-1) == []
