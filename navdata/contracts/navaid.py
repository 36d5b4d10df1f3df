"""Navaid and Fix: point locations used for navigation.

Both are keyed externally by their identifier; the identifier itself is
not repeated inside the model.
"""

from pydantic import Field

from navdata.contracts.common import NavModel, Point2LL
from navdata.contracts.enums import NavaidType


class Navaid(NavModel):
    """A VOR, NDB or DME station."""

    type: NavaidType = Field(..., alias="Type")
    name: str = Field(default="", alias="Name")
    location: Point2LL = Field(..., alias="Location")


class Fix(NavModel):
    """An enroute, terminal or heliport waypoint."""

    location: Point2LL = Field(..., alias="Location")
