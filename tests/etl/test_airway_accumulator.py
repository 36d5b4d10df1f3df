"""Tests for the airway work-in-progress accumulator."""

from __future__ import annotations

from navdata.contracts.airway import AirwayFix
from navdata.contracts.enums import AirwayLevel
from navdata.etl.airway_accumulator import AirwayAccumulator


def _leg(fix: str) -> AirwayFix:
    return AirwayFix(fix=fix, level=AirwayLevel.HIGH)


class TestAirwayAccumulator:
    def test_starts_empty(self):
        acc = AirwayAccumulator()
        assert acc.pending_routes == []
        assert acc.airways == {}

    def test_pending_until_end_marker(self):
        acc = AirwayAccumulator()
        assert acc.add_leg("J60", "0010", _leg("AAA"), end_of_route=False) is None
        assert acc.pending_routes == ["J60"]
        assert acc.airways == {}

    def test_flush_orders_by_sequence(self):
        acc = AirwayAccumulator()
        acc.add_leg("J60", "0020", _leg("CCC"), end_of_route=False)
        acc.add_leg("J60", "0005", _leg("AAA"), end_of_route=False)
        airway = acc.add_leg("J60", "0010", _leg("BBB"), end_of_route=True)

        assert airway is not None
        assert airway.fix_names == ["AAA", "BBB", "CCC"]
        assert acc.airways["J60"] == [airway]
        assert acc.pending_routes == []

    def test_same_sequence_overwrites(self):
        acc = AirwayAccumulator()
        acc.add_leg("J60", "0010", _leg("AAA"), end_of_route=False)
        airway = acc.add_leg("J60", "0010", _leg("ZZZ"), end_of_route=True)
        assert airway.fix_names == ["ZZZ"]

    def test_finish_drops_unterminated(self):
        acc = AirwayAccumulator()
        acc.add_leg("J60", "0010", _leg("AAA"), end_of_route=True)
        acc.add_leg("V16", "0010", _leg("XXX"), end_of_route=False)

        airways = acc.finish()

        assert list(airways) == ["J60"]
        assert acc.pending_routes == []

    def test_writes_into_shared_mapping(self):
        out: dict = {}
        acc = AirwayAccumulator(airways=out)
        acc.add_leg("J60", "0010", _leg("AAA"), end_of_route=True)
        assert out["J60"][0].fix_names == ["AAA"]
