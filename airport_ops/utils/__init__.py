"""
Configuration, reference data and field validation helpers.
"""

from .config import AirportConfig, load_config, get_config, reset_config
from .reference_data import (
    AIRLINE_NAMES,
    CITY_POINTS,
    SEAT_COLUMNS,
    SEAT_ROWS,
    airline_name,
    all_seats,
    points_for_city,
)

__all__ = [
    'AirportConfig',
    'load_config',
    'get_config',
    'reset_config',
    'AIRLINE_NAMES',
    'CITY_POINTS',
    'SEAT_COLUMNS',
    'SEAT_ROWS',
    'airline_name',
    'all_seats',
    'points_for_city',
]
