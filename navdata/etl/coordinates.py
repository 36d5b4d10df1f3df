"""ARINC 424 latitude/longitude field decoding.

Latitude fields are 9 characters (``N40382169``): hemisphere, 2-digit
degrees, 2-digit minutes, seconds in hundredths (4 digits). Longitude
fields are 10 characters (``W073464233``) with 3-digit degrees.
"""

from __future__ import annotations

import re

from navdata.contracts.common import Point2LL
from navdata.etl.errors import FieldParseError

LATITUDE_WIDTH = 9
LONGITUDE_WIDTH = 10

_DIGITS_RE = re.compile(r"^[0-9]+$")


def parse_digits(value: str, field: str) -> int:
    """Parse an unsigned all-digit column. Anything else is fatal."""
    if not _DIGITS_RE.match(value):
        raise FieldParseError(field, value)
    return int(value)


def _dms_to_degrees(degrees: str, minutes: str, hundredths: str, field: str) -> float:
    deg = parse_digits(degrees, f"{field} degrees")
    mins = parse_digits(minutes, f"{field} minutes")
    secs = parse_digits(hundredths, f"{field} seconds")
    return deg + mins / 60 + secs / 100 / 3600


def decode_latitude(field: str) -> float:
    """Decode a 9-character latitude field to signed decimal degrees."""
    if len(field) != LATITUDE_WIDTH:
        raise FieldParseError("latitude", field)
    value = _dms_to_degrees(field[1:3], field[3:5], field[5:], "latitude")
    return -value if field[0] == "S" else value


def decode_longitude(field: str) -> float:
    """Decode a 10-character longitude field to signed decimal degrees."""
    if len(field) != LONGITUDE_WIDTH:
        raise FieldParseError("longitude", field)
    value = _dms_to_degrees(field[1:4], field[4:6], field[6:], "longitude")
    return -value if field[0] == "W" else value


def decode_lat_long(latitude: str, longitude: str) -> Point2LL:
    """Decode a latitude/longitude field pair into ``(longitude, latitude)``."""
    return (decode_longitude(longitude), decode_latitude(latitude))
