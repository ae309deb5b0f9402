"""Shared flight graph fixtures."""

from __future__ import annotations

import pytest

from flightplan.graph import FlightGraph


@pytest.fixture
def line_1():
    # Cost / Time:
    #    [100/2]    [50/3]
    #  A◄───────►B◄───────►C
    g = FlightGraph()
    g.add_route("A", "B", 100, 2)
    g.add_route("B", "C", 50, 3)
    return g


@pytest.fixture
def triangle_1():
    # Cost / Time:
    #     [10/5]        [10/5]
    #   ┌───────►B◄───────┐
    #   │                 │
    #   ▼      [30/1]     ▼
    #   A◄───────────────►C
    g = FlightGraph()
    g.add_route("A", "B", 10, 5)
    g.add_route("B", "C", 10, 5)
    g.add_route("A", "C", 30, 1)
    return g


@pytest.fixture
def parallel_1():
    # Cost / Time:
    #    [10/1, 20/5]
    #  A◄────────────►B
    g = FlightGraph()
    g.add_route("A", "B", 10, 1)
    g.add_route("A", "B", 20, 5)
    return g


@pytest.fixture
def square_1():
    # Cost / Time:
    #       [1/4]       [1/4]
    #   ┌──────────►B◄────────┐
    #   │                     │
    #   ▼                     ▼
    #   A          [5/1]      C
    #   ▲                     ▲
    #   │  [2/2]       [2/2]  │
    #   └──────────►D◄────────┘
    #
    # plus a diagonal B◄──►D [3/3]
    g = FlightGraph()
    g.add_route("A", "B", 1, 4)
    g.add_route("B", "C", 1, 4)
    g.add_route("A", "D", 2, 2)
    g.add_route("D", "C", 2, 2)
    g.add_route("B", "D", 3, 3)
    g.add_route("A", "C", 5, 1)
    return g


@pytest.fixture
def disconnected_1():
    #  A◄──►B      X◄──►Y
    g = FlightGraph()
    g.add_route("A", "B", 1, 1)
    g.add_route("X", "Y", 1, 1)
    return g


@pytest.fixture
def flight_data_text() -> str:
    return "\n".join(
        [
            "4",
            "Dallas|Austin|98|47",
            "Austin|Houston|95|39",
            "Dallas|Houston|101|51",
            "Austin|Chicago|144|192",
        ]
    ) + "\n"


@pytest.fixture
def requests_text() -> str:
    return "\n".join(
        [
            "3",
            "Dallas|Houston|T",
            "Chicago|Dallas|C",
            "Dallas|Miami|C",
        ]
    ) + "\n"
