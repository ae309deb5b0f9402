"""Ranking of enumerated paths by time or cost."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List

from flightplan.path import Path


class SortKey(Enum):
    """Metric used to order paths, ascending."""

    TIME = "T"
    COST = "C"

    @classmethod
    def from_code(cls, code: str) -> SortKey:
        """Map a request code to a key.

        Only the first character counts: ``T`` selects time, anything else
        selects cost.
        """
        return cls.TIME if code[:1] == "T" else cls.COST

    @property
    def label(self) -> str:
        return "Time" if self is SortKey.TIME else "Cost"

    def metric(self, path: Path) -> int:
        return path.time if self is SortKey.TIME else path.cost


@dataclass(frozen=True)
class RankedPath:
    """A path with its 1-based position in the ranking."""

    rank: int
    path: Path


def rank_paths(
    paths: Iterable[Path], sort_key: SortKey, limit: int = 3
) -> List[RankedPath]:
    """Sort paths by the chosen metric and keep the best ``limit``.

    The sort is stable, so paths with equal metric keep discovery order.

    Args:
        paths: Completed paths in discovery order.
        sort_key: Metric to sort by.
        limit: Maximum number of paths to return; negative counts as 0.

    Returns:
        At most ``limit`` ranked paths; fewer when fewer paths exist.
    """
    ordered = sorted(paths, key=sort_key.metric)
    kept = ordered[: max(limit, 0)]
    return [RankedPath(i, p) for i, p in enumerate(kept, start=1)]
