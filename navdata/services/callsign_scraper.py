"""Scraper for the FAA aircraft company telephony designators table."""

from __future__ import annotations

import logging

import requests
from bs4 import BeautifulSoup

from navdata.contracts.callsign import Callsign

logger = logging.getLogger(__name__)

CALLSIGN_PAGE_URL = "https://www.faa.gov/air_traffic/publications/atpubs/cnt_html/chap3_section_3.html"
REQUEST_TIMEOUT = 60
DEFAULT_USER_AGENT = "navdata-CallsignScraper/1.0"

# Column order: 3Ltr, company, country, telephony
HEADER_CELL = "3Ltr"


class CallsignScraperError(Exception):
    """Failed to fetch the callsign page."""
    pass


def parse_callsign_table(html: str) -> dict[str, Callsign]:
    """Parse every telephony table row into ``{3-letter code: Callsign}``.

    Header rows and rows without a telephony name are skipped. When a code
    appears twice, the later row wins.
    """
    soup = BeautifulSoup(html, "html.parser")
    callsigns: dict[str, Callsign] = {}

    for tr in soup.find_all("tr"):
        row = [cell.get_text().strip() for cell in tr.find_all(["td", "th"], recursive=False)]
        if len(row) < 4 or row[0] == HEADER_CELL or not row[3]:
            continue

        if row[0] in callsigns:
            logger.warning("%r is repeated", row[0])
        callsigns[row[0]] = Callsign(telephony=row[3], airline=row[1], country=row[2])

    logger.info("Parsed %d callsigns", len(callsigns))
    return callsigns


def scrape_callsigns(url: str = CALLSIGN_PAGE_URL) -> dict[str, Callsign]:
    """Fetch and parse the FAA callsign table."""
    logger.info("Fetching %s", url)
    try:
        response = requests.get(
            url,
            timeout=REQUEST_TIMEOUT,
            headers={"User-Agent": DEFAULT_USER_AGENT},
        )
        response.raise_for_status()
    except requests.exceptions.RequestException as e:
        raise CallsignScraperError(f"Failed to fetch {url}: {e}")

    return parse_callsign_table(response.text)
