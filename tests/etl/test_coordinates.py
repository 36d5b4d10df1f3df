"""Tests for ARINC 424 coordinate decoding."""

from __future__ import annotations

import pytest

from navdata.etl.coordinates import (
    decode_lat_long,
    decode_latitude,
    decode_longitude,
    parse_digits,
)
from navdata.etl.errors import FieldParseError
from tests.etl.arinc_lines import encode_latitude, encode_longitude


class TestDecodeLatitude:
    def test_north(self):
        # 40°38'23.74"
        assert decode_latitude("N40382374") == pytest.approx(40.639928, abs=1e-6)

    def test_south_is_negative(self):
        assert decode_latitude("S33562700") < 0

    def test_unknown_hemisphere_is_positive(self):
        assert decode_latitude(" 10000000") == pytest.approx(10.0)

    def test_zero(self):
        assert decode_latitude("S00000000") == 0.0

    def test_non_digit_is_fatal(self):
        with pytest.raises(FieldParseError) as exc_info:
            decode_latitude("N4038 374")
        assert exc_info.value.field == "latitude seconds"

    def test_blank_is_fatal(self):
        with pytest.raises(FieldParseError):
            decode_latitude("         ")

    def test_wrong_width_is_fatal(self):
        with pytest.raises(FieldParseError):
            decode_latitude("N403823")


class TestDecodeLongitude:
    def test_west_is_negative(self):
        assert decode_longitude("W073464329") == pytest.approx(-73.778692, abs=1e-6)

    def test_east_is_positive(self):
        assert decode_longitude("E151104300") == pytest.approx(151.178611, abs=1e-6)

    def test_signed_digits_rejected(self):
        with pytest.raises(FieldParseError):
            decode_longitude("W-73464329")


class TestDecodeLatLong:
    def test_order_is_longitude_latitude(self):
        lon, lat = decode_lat_long("N40382374", "W073464329")
        assert lon < 0 < lat

    @pytest.mark.parametrize(
        "lat, lon",
        [
            (40.639928, -73.778692),
            (-33.946111, 151.177222),
            (0.000278, -0.000278),
            (64.813611, -147.856667),
            (-89.999, 179.999),
        ],
    )
    def test_round_trip(self, lat, lon):
        decoded = decode_lat_long(encode_latitude(lat), encode_longitude(lon))
        assert decoded[0] == pytest.approx(lon, abs=1e-4)
        assert decoded[1] == pytest.approx(lat, abs=1e-4)


class TestParseDigits:
    def test_leading_zeros(self):
        assert parse_digits("0040", "heading") == 40

    @pytest.mark.parametrize("value", ["", " 40", "4.0", "+40", "²"])
    def test_rejects(self, value):
        with pytest.raises(FieldParseError):
            parse_digits(value, "heading")
