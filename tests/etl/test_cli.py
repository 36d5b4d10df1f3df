"""End-to-end tests for the pipeline CLI on a local CIFP file."""

from __future__ import annotations

import json
from pathlib import Path
from unittest import mock

import pytest

from navdata.contracts.callsign import Callsign
from navdata.etl.cli import main
from tests.etl.arinc_lines import (
    airport_record,
    airway_record,
    navaid_record,
    runway_record,
    waypoint_record,
)


@pytest.fixture
def cifp_path(tmp_path: Path) -> Path:
    p = tmp_path / "FAACIFP18"
    p.write_bytes(
        airport_record("KJFK")
        + runway_record("KJFK", "RW04L", "0040")
        + runway_record("KJFK", "RW22R", "2200")
        + navaid_record("JFK")
        + waypoint_record("MERIT")
        + airway_record("J60", "0010", "MERIT")
        + airway_record("J60", "0020", "JFK", end=True)
    )
    return p


class TestCLI:
    def test_writes_all_collections(self, cifp_path: Path, tmp_path: Path):
        out = tmp_path / "out"
        main(["--cifp-path", str(cifp_path), "--output", str(out), "--skip-callsigns", "--bucket", ""])

        airports = json.loads((out / "airports.json").read_text())
        assert [r["Heading"] for r in airports["KJFK"]["Runways"]] == [4.0, 220.0]
        assert json.loads((out / "navaids.json").read_text())["JFK"]["Type"] == "VOR"
        assert "MERIT" in json.loads((out / "fixes.json").read_text())
        airways = json.loads((out / "airways.json").read_text())
        assert [f["Fix"] for f in airways["J60"][0]["Fixes"]] == ["MERIT", "JFK"]
        assert not (out / "callsigns.json").exists()

    def test_callsigns_stored(self, cifp_path: Path, tmp_path: Path):
        out = tmp_path / "out"
        callsigns = {"AAL": Callsign(telephony="AMERICAN", airline="American Airlines", country="USA")}
        with mock.patch(
            "navdata.services.callsign_scraper.scrape_callsigns", return_value=callsigns
        ):
            main(["--cifp-path", str(cifp_path), "--output", str(out), "--bucket", ""])

        data = json.loads((out / "callsigns.json").read_text())
        assert data["AAL"]["Telephony"] == "AMERICAN"

    def test_downloads_when_no_path(self, cifp_path: Path, tmp_path: Path):
        out = tmp_path / "out"
        with mock.patch(
            "navdata.services.cifp_downloader.download_cifp",
            return_value=cifp_path.read_bytes(),
        ) as mock_download:
            main(["--output", str(out), "--skip-callsigns", "--bucket", ""])

        mock_download.assert_called_once_with()
        assert (out / "airports.json").exists()

    def test_malformed_cifp_exits_without_output(self, tmp_path: Path):
        bad = tmp_path / "FAACIFP18"
        bad.write_bytes(airport_record() + b"S" * 131 + b"\r\n")
        out = tmp_path / "out"

        with pytest.raises(SystemExit) as exc_info:
            main(["--cifp-path", str(bad), "--output", str(out), "--skip-callsigns", "--bucket", ""])

        assert exc_info.value.code == 1
        assert not (out / "airports.json").exists()
