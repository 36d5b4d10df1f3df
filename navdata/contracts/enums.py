"""Enumerations shared across all navdata contracts."""

from enum import Enum, IntEnum


class NavaidType(str, Enum):
    """Kind of radio navigation aid."""
    VOR = "VOR"
    NDB = "NDB"
    DME = "DME"


class AirwayLevel(IntEnum):
    """Altitude band an airway leg applies to."""
    ALL = 0
    LOW = 1
    HIGH = 2


class AirwayDirection(IntEnum):
    """Direction restriction of an airway leg."""
    ANY = 0
    FORWARD = 1
    BACKWARD = 2
