"""Airway models: enroute routes assembled from CIFP airway leg records."""

from pydantic import Field

from navdata.contracts.common import NavModel
from navdata.contracts.enums import AirwayDirection, AirwayLevel


class AirwayFix(NavModel):
    """One leg of an airway: the fix and its restrictions."""

    fix: str = Field(..., alias="Fix", max_length=5)
    level: AirwayLevel = Field(default=AirwayLevel.ALL, alias="Level")
    direction: AirwayDirection = Field(default=AirwayDirection.ANY, alias="Direction")


class Airway(NavModel):
    """One contiguous run of an airway, fixes in sequence-number order.

    A route name may have several ``Airway`` instances when the source
    restarts its sequence.
    """

    fixes: list[AirwayFix] = Field(default_factory=list, alias="Fixes")

    @property
    def fix_names(self) -> list[str]:
        return [f.fix for f in self.fixes]
