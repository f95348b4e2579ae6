"""
Static reference data: operating airlines, serviced cities and the seat grid.
"""

from typing import Dict, Iterator

AIRLINE_NAMES: Dict[str, str] = {
    "JST": "Jetstar",
    "QFA": "Qantas",
    "RXA": "Regional Express",
    "VOZ": "Virgin",
    "FRE": "Fly Pelican",
}

# Frequent flyer points awarded for a flight to or from each city
CITY_POINTS: Dict[str, int] = {
    "Sydney": 1200,
    "Melbourne": 1750,
    "Rockhampton": 1400,
    "Adelaide": 1950,
    "Perth": 3375,
}

SEAT_ROWS = 10
SEAT_COLUMNS = "ABCD"
TOTAL_SEATS = SEAT_ROWS * len(SEAT_COLUMNS)


def all_seats() -> Iterator[str]:
    """Yield every seat code in row-major order (1A, 1B, ... 10D)."""
    for row in range(1, SEAT_ROWS + 1):
        for column in SEAT_COLUMNS:
            yield f"{row}{column}"


def airline_name(code: str) -> str:
    """Return the airline's display name, falling back to the code itself."""
    return AIRLINE_NAMES.get(code, code)


def points_for_city(city: str) -> int:
    return CITY_POINTS[city]
