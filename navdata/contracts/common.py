"""Base classes and shared types for navdata contracts.

Unit conventions (all contracts and JSON outputs):
- **Elevations**: feet MSL, integer
- **Headings**: degrees magnetic, one decimal place
- **Coordinates**: decimal degrees, ``(longitude, latitude)``, positive east/north

Serialized keys use the capitalized names of the published navdata files
(``Name``, ``Location``, ...). Python code uses the snake_case field names.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict

# (longitude, latitude)
Point2LL = tuple[float, float]


class NavModel(BaseModel):
    """Base model with navdata JSON serialization.

    - Enums serialize as their raw values.
    - ``to_json_dict()`` produces a JSON-safe dict keyed by the aliases.
    - ``from_json_dict()`` hydrates from such a dict.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        use_enum_values=True,
    )

    def to_json_dict(self) -> dict[str, Any]:
        """Dump to a dict keyed by the published field names."""
        return self.model_dump(mode="json", by_alias=True)

    @classmethod
    def from_json_dict(cls, data: dict[str, Any]) -> "NavModel":
        """Create model instance from a navdata JSON dict."""
        return cls.model_validate(data)
