"""ARINC 424 decoder for the FAA CIFP dataset.

The CIFP file is a sequence of fixed-width records: 132 content columns
followed by CR LF. Each record is classified by three columns:

- column 0: record type (``S`` for standard records; anything else is skipped)
- column 4: section code (``D`` navaid, ``E`` enroute, ``H`` heliport, ``P`` airport)
- subsection code at column 5 (``E``), 6 (``D``) or 12 (``H``, ``P``)

Column ranges below are 0-based and end-exclusive.

Usage:
    from navdata.etl.arinc424 import parse_arinc424

    data = parse_arinc424(Path("FAACIFP18").read_bytes())
    data.airports["KJFK"].runways
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass, field

from navdata.contracts.airport import Airport, Runway
from navdata.contracts.airway import Airway, AirwayFix
from navdata.contracts.common import Point2LL
from navdata.contracts.enums import AirwayDirection, AirwayLevel, NavaidType
from navdata.contracts.navaid import Fix, Navaid
from navdata.etl.airway_accumulator import AirwayAccumulator
from navdata.etl.coordinates import decode_lat_long, parse_digits
from navdata.etl.errors import ARINC424Error, FieldParseError, LineLengthError, UnknownCodeError

logger = logging.getLogger(__name__)

LINE_LENGTH = 134  # 132 columns + CR LF
ENCODING = "latin-1"
STANDARD_RECORD = "S"

SUBSECTION_COLUMN = {
    "D": 6,
    "E": 5,
    "H": 12,
    "P": 12,
}

AIRWAY_LEVELS = {
    "B": AirwayLevel.ALL,
    " ": AirwayLevel.ALL,
    "L": AirwayLevel.LOW,
    "H": AirwayLevel.HIGH,
}

AIRWAY_DIRECTIONS = {
    " ": AirwayDirection.ANY,
    "F": AirwayDirection.FORWARD,
    "B": AirwayDirection.BACKWARD,
}

# Primary record and first continuation only.
RUNWAY_CONTINUATIONS = ("0", "1")

_SIGNED_RE = re.compile(r"^[+-]?[0-9]+$")


@dataclass
class ParsedCIFP:
    """Complete decoded dataset from one CIFP file."""

    airports: dict[str, Airport] = field(default_factory=dict)
    navaids: dict[str, Navaid] = field(default_factory=dict)
    fixes: dict[str, Fix] = field(default_factory=dict)
    airways: dict[str, list[Airway]] = field(default_factory=dict)


class LineSource:
    """Single-pass iterator over the fixed-length records of a buffer.

    Every record must be exactly ``LINE_LENGTH`` bytes including its
    terminator; a trailing fragment without a newline counts as a record
    too. One record can be pushed back for lookahead.
    """

    def __init__(self, contents: bytes, line_length: int = LINE_LENGTH):
        self._contents = contents
        self._offset = 0
        self._line_length = line_length
        self._pushed: str | None = None
        self.line_number = 0

    def __iter__(self) -> LineSource:
        return self

    def __next__(self) -> str:
        if self._pushed is not None:
            line, self._pushed = self._pushed, None
            return line

        if self._offset >= len(self._contents):
            raise StopIteration

        end = self._contents.find(b"\n", self._offset)
        end = len(self._contents) if end == -1 else end + 1
        raw = self._contents[self._offset:end]
        self._offset = end
        self.line_number += 1

        if len(raw) != self._line_length:
            raise LineLengthError(self.line_number, len(raw), self._line_length)
        return raw.decode(ENCODING)

    def push_back(self, line: str) -> None:
        """Return ``line`` to the front of the sequence."""
        if self._pushed is not None:
            raise RuntimeError("only one line can be pushed back")
        self._pushed = line


def parse_signed(value: str, field: str) -> int:
    """Parse an optionally signed integer column (elevations)."""
    if not _SIGNED_RE.match(value):
        raise FieldParseError(field, value)
    return int(value)


def normalize_runway_id(raw: str) -> str:
    """``RW04L`` -> ``4L``, ``RW10`` -> ``10``."""
    return raw.removeprefix("RW").removeprefix("0").strip()


class ARINC424Decoder:
    """Decodes one CIFP buffer into airports, navaids, fixes and airways.

    A decoder instance owns its output collections; use a new instance
    (or ``parse_arinc424``) for every buffer.
    """

    def __init__(self) -> None:
        self.result = ParsedCIFP()
        self.fix_overwrites = 0
        self.skipped_records = 0
        self._airways = AirwayAccumulator(airways=self.result.airways)
        self._handlers: dict[tuple[str, str], Callable[[str], None]] = {
            ("D", " "): self._navaid,  # VHF navaid 4.1.2
            ("D", "B"): self._navaid,  # NDB navaid 4.1.3
            ("E", "A"): self._waypoint,  # enroute waypoint 4.1.4
            ("E", "R"): self._airway_leg,  # enroute airway 4.1.6
            ("H", "C"): self._waypoint,  # heliport terminal waypoint
            ("P", "A"): self._airport,  # primary airport record 4.1.7
            ("P", "C"): self._waypoint,  # airport terminal waypoint 4.1.4
            ("P", "G"): self._runway,  # runway 4.1.10
        }

    def decode(self, contents: bytes) -> ParsedCIFP:
        lines = LineSource(contents)
        for line in lines:
            try:
                self._dispatch(line)
            except ARINC424Error as e:
                if e.line_number is None:
                    e.line_number = lines.line_number
                raise

        self._airways.finish()
        logger.info(
            "Parsed CIFP: %d lines, %d airports, %d navaids, %d fixes (%d overwritten), "
            "%d airway routes, %d records skipped",
            lines.line_number,
            len(self.result.airports),
            len(self.result.navaids),
            len(self.result.fixes),
            self.fix_overwrites,
            len(self.result.airways),
            self.skipped_records,
        )
        return self.result

    def _dispatch(self, line: str) -> None:
        if line[0] != STANDARD_RECORD:
            self.skipped_records += 1
            return

        section = line[4]
        column = SUBSECTION_COLUMN.get(section)
        handler = None if column is None else self._handlers.get((section, line[column]))
        if handler is None:
            # SIDs, STARs, approaches, holds, ...
            self.skipped_records += 1
            return
        handler(line)

    # ---------- field extractors ----------

    def _navaid(self, line: str) -> None:
        ident = line[13:17].strip()
        if len(ident) < 3:
            self.skipped_records += 1
            return

        name = line[93:123].strip()
        if line[32:51].strip():
            subsection = line[SUBSECTION_COLUMN["D"]]
            kind = NavaidType.VOR if subsection == " " else NavaidType.NDB
            location = decode_lat_long(line[32:41], line[41:51])
        else:
            # DME-only station: coordinates live in the DME field
            kind = NavaidType.DME
            location = decode_lat_long(line[55:64], line[64:74])

        self.result.navaids[ident] = Navaid(type=kind, name=name, location=location)

    def _waypoint(self, line: str) -> None:
        ident = line[13:18].strip()
        self._add_fix(ident, decode_lat_long(line[32:41], line[41:51]))

    def _add_fix(self, ident: str, location: Point2LL) -> None:
        if ident in self.result.fixes:
            self.fix_overwrites += 1
            logger.debug("Fix %s repeats; keeping the latest record", ident)
        self.result.fixes[ident] = Fix(location=location)

    def _airway_leg(self, line: str) -> None:
        route = line[13:18].strip()
        sequence = line[25:29]

        level = AIRWAY_LEVELS.get(line[45])
        if level is None:
            raise UnknownCodeError("airway level", line[45])
        direction = AIRWAY_DIRECTIONS.get(line[46])
        if direction is None:
            raise UnknownCodeError("airway direction", line[46])

        leg = AirwayFix(fix=line[29:34].strip(), level=level, direction=direction)
        self._airways.add_leg(route, sequence, leg, end_of_route=line[40] == "E")

    def _airport(self, line: str) -> None:
        icao = line[6:10].strip()
        location = decode_lat_long(line[32:41], line[41:51])
        elevation = parse_signed(line[56:61], "airport elevation")

        existing = self.result.airports.get(icao)
        self.result.airports[icao] = Airport(
            name=line[93:122].strip(),
            elevation=elevation,
            location=location,
            runways=existing.runways if existing is not None else [],
        )

    def _runway(self, line: str) -> None:
        if line[21] not in RUNWAY_CONTINUATIONS:
            self.skipped_records += 1
            return
        heading = line[27:31]
        if not heading.strip():
            # No heading available, e.g. seaplane bases.
            self.skipped_records += 1
            return

        runway = Runway(
            id=normalize_runway_id(line[13:18]),
            heading=parse_digits(heading, "runway heading") / 10,
            threshold=decode_lat_long(line[32:41], line[41:51]),
            elevation=parse_signed(line[66:71], "runway elevation"),
        )

        icao = line[6:10].strip()
        airport = self.result.airports.get(icao)
        if airport is None:
            airport = self.result.airports[icao] = Airport()
        airport.runways.append(runway)


def parse_arinc424(contents: bytes) -> ParsedCIFP:
    """Decode a complete CIFP buffer.

    Raises:
        LineLengthError: A record is not exactly 134 bytes.
        FieldParseError: A numeric column is not numeric.
        UnknownCodeError: An airway level or direction code is unrecognized.
    """
    return ARINC424Decoder().decode(contents)
