"""Configuration for the flight planner."""

from dataclasses import dataclass


@dataclass
class PlannerConfig:
    """Settings shared by the input readers, the ranker and the CLI."""

    # Number of ranked paths reported per request
    top_k: int = 3

    # Field delimiter in flight data and request records
    field_separator: str = "|"

    # Default file names, resolved against the working directory
    flight_data_file: str = "flight_data.txt"
    requests_file: str = "requested_flights.txt"
    output_file: str = "output.txt"


# Global configuration instance
PLANNER_CONFIG = PlannerConfig()
