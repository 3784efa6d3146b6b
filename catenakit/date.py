"""Calendar helpers for the proleptic Gregorian calendar and GPS time."""

from __future__ import annotations

COMMON_TO_GPS_SECONDS = 315964800

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1

GPS_TIME_INVALID_LOW = _INT64_MIN
GPS_TIME_INVALID = GPS_TIME_INVALID_LOW
COMMON_TIME_INVALID_LOW = GPS_TIME_INVALID_LOW + COMMON_TO_GPS_SECONDS
COMMON_TIME_INVALID = _INT64_MIN
COMMON_TIME_INVALID_HIGH = _INT64_MAX
GPS_TIME_INVALID_HIGH = COMMON_TIME_INVALID_HIGH - COMMON_TO_GPS_SECONDS

COMMON_YEAR = 1970
GPS_YEAR = 1980
MIN_YEAR = 0
MAX_YEAR = 0xFFFF

# Bit n set means zero-origin month n has 31 days.
MONTHS_WITH_31_DAYS = (
    1 << 0 | 1 << 2 | 1 << 4 | 1 << 6 | 1 << 7 | 1 << 9 | 1 << 11
)


def days_since_proleptic_zero(year: int) -> int:
    """Days from day zero of the proleptic Gregorian calendar to 1 January of year."""
    if year <= 0:
        return 0
    quads = (year - 1) // 4
    return 366 + 365 * (year - 1) + quads - quads // 25 + quads // 100


COMMON_DAY_ZERO = days_since_proleptic_zero(COMMON_YEAR)
GPS_DAY_ZERO = days_since_proleptic_zero(GPS_YEAR) + 5


def is_leap_year(year: int) -> bool:
    """True if year is a Gregorian leap year (year 0 is one)."""
    if year % 4 != 0:
        return False
    if year % 100 != 0:
        return True
    return year % 400 == 0


def is_valid_gps_time(t: int) -> bool:
    return GPS_TIME_INVALID_LOW < t < GPS_TIME_INVALID_HIGH


def is_valid_common_time(t: int) -> bool:
    return COMMON_TIME_INVALID_LOW < t < COMMON_TIME_INVALID_HIGH


def gps_from_common(t: int) -> int:
    """Convert seconds since 1970 to GPS seconds, or GPS_TIME_INVALID."""
    return t - COMMON_TO_GPS_SECONDS if is_valid_common_time(t) else GPS_TIME_INVALID


def common_from_gps(t: int) -> int:
    """Convert GPS seconds to seconds since 1970, or COMMON_TIME_INVALID."""
    return t + COMMON_TO_GPS_SECONDS if is_valid_gps_time(t) else COMMON_TIME_INVALID


def _days_in_month(year: int, month: int) -> int:
    if month == 2:
        return 29 if is_leap_year(year) else 28
    return 31 if (1 << (month - 1)) & MONTHS_WITH_31_DAYS else 30


def is_valid_year_month_day(year: int, month: int, day: int) -> bool:
    return (
        MIN_YEAR <= year <= MAX_YEAR
        and 1 <= month <= 12
        and 1 <= day <= _days_in_month(year, month)
    )


def is_valid_hour_minute_second(hour: int, minute: int, second: int) -> bool:
    return 0 <= hour <= 23 and 0 <= minute <= 59 and 0 <= second <= 59


def day_in_year(year: int, month: int, day: int) -> int:
    """Zero-origin day within the year; 0 for an impossible month or day."""
    if month < 1 or month > 12 or day < 1:
        return 0
    days = sum(
        28 if m == 2 else (31 if (1 << (m - 1)) & MONTHS_WITH_31_DAYS else 30)
        for m in range(1, month)
    )
    if month >= 3 and is_leap_year(year):
        days += 1
    return days + day - 1