"""
Field validators for user registration and flight registration input.

Each validator is a predicate; callers decide which exception to raise.
"""

import re

from .reference_data import AIRLINE_NAMES, CITY_POINTS

NAME_PATTERN = re.compile(r"^[A-Za-z][A-Za-z '\-]*$")
EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+$")
MOBILE_PATTERN = re.compile(r"^0\d{9}$")
FLIGHT_CODE_PATTERN = re.compile(r"^[A-Z]{3}\d{3}$")
PLANE_ID_PATTERN = re.compile(r"^[A-Z]{3}\d[AD]$")
SEAT_PATTERN = re.compile(r"^([1-9]|10)[A-D]$")

MIN_PASSWORD_LENGTH = 8
FF_NUMBER_RANGE = (100000, 999999)
FF_POINTS_RANGE = (0, 1_000_000)
STAFF_ID_RANGE = (1000, 9000)


def valid_name(name: str) -> bool:
    return bool(name) and NAME_PATTERN.match(name) is not None


def valid_age(age: int) -> bool:
    return 0 <= age <= 99


def valid_email(email: str) -> bool:
    return EMAIL_PATTERN.match(email) is not None


def valid_mobile(mobile: str) -> bool:
    return MOBILE_PATTERN.match(mobile) is not None


def valid_password(password: str) -> bool:
    """At least eight characters with a digit, a lowercase and an uppercase letter."""
    return (
        len(password) >= MIN_PASSWORD_LENGTH
        and re.search(r"\d", password) is not None
        and re.search(r"[a-z]", password) is not None
        and re.search(r"[A-Z]", password) is not None
    )


def valid_ff_number(number: str) -> bool:
    if not number.isdigit():
        return False
    low, high = FF_NUMBER_RANGE
    return low <= int(number) <= high


def valid_ff_points(points: int) -> bool:
    low, high = FF_POINTS_RANGE
    return low <= points <= high


def valid_staff_id(staff_id: str) -> bool:
    if not staff_id.isdigit():
        return False
    low, high = STAFF_ID_RANGE
    return low <= int(staff_id) <= high


def valid_airline_code(code: str) -> bool:
    return code in AIRLINE_NAMES


def valid_city(city: str) -> bool:
    return city in CITY_POINTS


def valid_flight_code(code: str) -> bool:
    return FLIGHT_CODE_PATTERN.match(code) is not None and valid_airline_code(code[:3])


def valid_plane_id(plane_id: str) -> bool:
    return PLANE_ID_PATTERN.match(plane_id) is not None and valid_airline_code(plane_id[:3])


def valid_seat(seat: str) -> bool:
    return SEAT_PATTERN.match(seat) is not None


def normalize_seat(seat: str) -> str:
    """Trim and upper-case a seat code as typed by a user."""
    return seat.strip().upper()
