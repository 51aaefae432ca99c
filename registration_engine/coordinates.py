"""
Default latitude/longitude format checks for address entry.

Values may carry an optional + or - sign, must not start with a decimal point,
and need at least one digit after a decimal point when one is present.
Whole-degree ranges are 0-89 or exactly 90 for latitude, 0-179 or exactly 180
for longitude; 90/180 only accept all-zero fractions (so "90.5" is rejected).
"""
import logging
import re
from typing import Any, Pattern

logger = logging.getLogger(__name__)

DEFAULT_LATITUDE_REGEX = r"[+-]?((([0-8]?[0-9])(\.\d+)?)|90(\.0+)?)"
DEFAULT_LONGITUDE_REGEX = r"[+-]?((((1?[0-7]?|[0-9]?)[0-9])(\.\d+)?)|180(\.0+)?)"

# ASCII so that \d does not accept non-Latin digits
_LATITUDE_RE = re.compile(DEFAULT_LATITUDE_REGEX, re.ASCII)
_LONGITUDE_RE = re.compile(DEFAULT_LONGITUDE_REGEX, re.ASCII)


def _is_valid(value: Any, pattern: Pattern[str]) -> bool:
    if not isinstance(value, str):
        return False
    return pattern.fullmatch(value) is not None


def is_valid_latitude(latitude: Any) -> bool:
    """
    True if latitude matches DEFAULT_LATITUDE_REGEX in full.
    Malformed input (including None) is simply False.
    """
    return _is_valid(latitude, _LATITUDE_RE)


def is_valid_longitude(longitude: Any) -> bool:
    """
    True if longitude matches DEFAULT_LONGITUDE_REGEX in full.
    """
    return _is_valid(longitude, _LONGITUDE_RE)
