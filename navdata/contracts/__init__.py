"""navdata contracts: Pydantic v2 models for decoded navigation data.

Sources
-------

**FAA CIFP** (ARINC 424, refreshed every AIRAC cycle):
- ``Airport`` / ``Runway``: primary airport and runway records
- ``Navaid``: VHF and NDB navaid records
- ``Fix``: enroute, terminal and heliport waypoint records
- ``Airway`` / ``AirwayFix``: enroute airway leg records

**FAA JO 7340 callsign table** (HTML):
- ``Callsign``: three-letter designator telephony names

Published outputs
-----------------
Each collection is written as one JSON document (``airports.json``,
``navaids.json``, ``fixes.json``, ``airways.json``, ``callsigns.json``)
keyed by identifier, locally or to a Cloud Storage bucket.
"""

from navdata.contracts.enums import (
    AirwayDirection,
    AirwayLevel,
    NavaidType,
)
from navdata.contracts.common import NavModel, Point2LL
from navdata.contracts.airport import Airport, Runway
from navdata.contracts.navaid import Fix, Navaid
from navdata.contracts.airway import Airway, AirwayFix
from navdata.contracts.callsign import Callsign

__all__ = [
    # Enums
    "AirwayDirection",
    "AirwayLevel",
    "NavaidType",
    # Common
    "NavModel",
    "Point2LL",
    # Domain models
    "Airport",
    "Runway",
    "Fix",
    "Navaid",
    "Airway",
    "AirwayFix",
    "Callsign",
]
