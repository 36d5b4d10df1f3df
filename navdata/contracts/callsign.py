"""Callsign: airline telephony designator, keyed by three-letter code."""

from pydantic import Field, field_validator

from navdata.contracts.common import NavModel


class Callsign(NavModel):
    """Radio telephony name of an aircraft operator."""

    telephony: str = Field(..., alias="Telephony", min_length=1)
    airline: str = Field(default="", alias="Airline")
    country: str = Field(default="", alias="Country")

    @field_validator("telephony", "airline", "country", mode="before")
    @classmethod
    def collapse_whitespace(cls, v: str) -> str:
        return " ".join(v.split())
