"""Airport models: read model from CIFP airport and runway records."""

from pydantic import Field

from navdata.contracts.common import NavModel, Point2LL


class Runway(NavModel):
    """One runway end, from a CIFP runway record (4.1.10)."""

    id: str = Field(..., alias="Id", description="e.g. '4L', '22R', '10'")
    heading: float = Field(..., alias="Heading", description="Magnetic, degrees")
    threshold: Point2LL = Field(..., alias="Threshold")
    elevation: int = Field(..., alias="Elevation", description="Threshold elevation, ft")


class Airport(NavModel):
    """Airport consolidated from a CIFP primary airport record and its runways.

    Runway records may precede the primary record in the file, in which case
    the airport starts out as a placeholder with empty name and location.
    """

    name: str = Field(default="", alias="Name")
    elevation: int = Field(default=0, alias="Elevation")
    location: Point2LL = Field(default=(0.0, 0.0), alias="Location")
    runways: list[Runway] = Field(default_factory=list, alias="Runways")
