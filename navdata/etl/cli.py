"""CLI entry point for the navdata pipeline.

Usage:
    python -m navdata.etl.cli --output /tmp/navdata
    python -m navdata.etl.cli --cifp-path FAACIFP18 --skip-callsigns
    python -m navdata.etl.cli --bucket my-navdata-bucket
"""

from __future__ import annotations

import argparse
import logging
import os
from pathlib import Path

from navdata.etl.arinc424 import parse_arinc424
from navdata.etl.errors import ARINC424Error
from navdata.etl.json_store import BUCKET_ENV, OUTPUT_DIR_ENV, JSONStore

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="navdata CIFP pipeline")
    parser.add_argument("--cifp-path", type=Path, help="Local FAACIFP18 file (default: download the current cycle)")
    parser.add_argument(
        "--output",
        type=Path,
        default=Path(os.environ.get(OUTPUT_DIR_ENV, ".")),
        help="Output directory for JSON files",
    )
    parser.add_argument(
        "--bucket",
        default=os.environ.get(BUCKET_ENV),
        help=f"GCS bucket to upload to instead of writing locally (env {BUCKET_ENV})",
    )
    parser.add_argument("--skip-callsigns", action="store_true", help="Don't scrape the callsign table")
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    store = JSONStore(bucket=args.bucket or None, output_dir=args.output)
    logger.info("Storing outputs in %s", store.destination)

    # 1. Callsigns
    if not args.skip_callsigns:
        from navdata.services.callsign_scraper import scrape_callsigns
        store.store(scrape_callsigns(), "callsigns.json")

    # 2. Raw CIFP
    if args.cifp_path is not None:
        logger.info("Reading CIFP from %s", args.cifp_path)
        contents = args.cifp_path.read_bytes()
    else:
        from navdata.services.cifp_downloader import download_cifp
        contents = download_cifp()

    # 3. Decode
    try:
        data = parse_arinc424(contents)
    except ARINC424Error as e:
        logger.error("Invalid CIFP data (%s): %s", type(e).__name__, e)
        raise SystemExit(1)

    logger.info(
        "Got %d airports, %d navaids, %d fixes, %d airways from CIFP",
        len(data.airports),
        len(data.navaids),
        len(data.fixes),
        len(data.airways),
    )

    # 4. Store
    store.store(data.airports, "airports.json")
    store.store(data.navaids, "navaids.json")
    store.store(data.fixes, "fixes.json")
    store.store(data.airways, "airways.json")

    logger.info("navdata pipeline complete")


if __name__ == "__main__":
    main()
