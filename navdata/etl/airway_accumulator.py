"""Work-in-progress buffer that assembles airways from leg records."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from navdata.contracts.airway import Airway, AirwayFix

logger = logging.getLogger(__name__)


@dataclass
class AirwayAccumulator:
    """Collects airway legs per route until an end-of-route marker.

    Legs are keyed by their sequence-number field, so a later leg with the
    same sequence number replaces the earlier one. Pending legs are kept per
    route name: legs of two routes may interleave without mixing.
    """

    airways: dict[str, list[Airway]] = field(default_factory=dict)
    _pending: dict[str, dict[str, AirwayFix]] = field(default_factory=dict, init=False, repr=False)

    @property
    def pending_routes(self) -> list[str]:
        """Route names with legs not yet closed by an end marker."""
        return list(self._pending)

    def add_leg(self, route: str, sequence: str, leg: AirwayFix, end_of_route: bool) -> Airway | None:
        """Add one leg; returns the completed airway when ``end_of_route``."""
        self._pending.setdefault(route, {})[sequence] = leg
        if not end_of_route:
            return None
        return self._flush(route)

    def _flush(self, route: str) -> Airway:
        legs = self._pending.pop(route)
        airway = Airway(fixes=[legs[seq] for seq in sorted(legs)])
        self.airways.setdefault(route, []).append(airway)
        logger.debug("Airway %s: %d fixes", route, len(airway.fixes))
        return airway

    def finish(self) -> dict[str, list[Airway]]:
        """Drop unterminated routes and return the completed airways."""
        for route, legs in self._pending.items():
            logger.warning("Airway %s: dropping %d legs with no end-of-route marker", route, len(legs))
        self._pending.clear()
        return self.airways
