"""FAA CIFP downloader.

Finds the current CIFP archive by scraping the FAA download page, fetches
the zip archive and extracts the ARINC 424 file from it.

Usage:
    from navdata.services.cifp_downloader import download_cifp

    contents = download_cifp()
"""

from __future__ import annotations

import io
import logging
import zipfile

import requests
from bs4 import BeautifulSoup

logger = logging.getLogger(__name__)

# Constants
CIFP_PAGE_URL = "https://www.faa.gov/air_traffic/flight_info/aeronav/digital_products/cifp/download/"
CIFP_ENTRY_NAME = "FAACIFP18"
REQUEST_TIMEOUT = 60
DEFAULT_USER_AGENT = "navdata-CIFPDownloader/1.0"


# ============ Exceptions ============

class CIFPDownloaderError(Exception):
    """Base exception for CIFP downloader errors."""
    pass


class NetworkError(CIFPDownloaderError):
    """Network-related errors (timeout, connection refused, HTTP status)."""
    pass


class ParseError(CIFPDownloaderError):
    """Failed to find the archive link in the FAA page HTML."""
    pass


class DownloadError(CIFPDownloaderError):
    """The archive is unreadable or lacks the CIFP entry."""
    pass


# ============ HTTP ============

def _get(url: str) -> requests.Response:
    try:
        response = requests.get(
            url,
            timeout=REQUEST_TIMEOUT,
            headers={"User-Agent": DEFAULT_USER_AGENT},
        )
        response.raise_for_status()
    except requests.exceptions.Timeout:
        raise NetworkError(f"Timeout fetching {url}")
    except requests.exceptions.RequestException as e:
        raise NetworkError(f"Failed to fetch {url}: {e}")
    return response


# ============ Link Discovery ============

def find_cifp_zip_url(html: str) -> str:
    """Return the archive link from the FAA CIFP download page HTML.

    The page lists the current and upcoming cycles inside ``<cfoutput>``
    blocks; the first ``<a href>`` directly inside one is the current cycle.

    Raises:
        ParseError: If no such link exists
    """
    soup = BeautifulSoup(html, "html.parser")
    for block in soup.find_all("cfoutput"):
        for link in block.find_all("a", recursive=False):
            href = link.get("href")
            if href:
                return href
    raise ParseError("Unable to find URL for CIFP ZIP file")


def get_cifp_zip_url(page_url: str = CIFP_PAGE_URL) -> str:
    """Scrape the FAA CIFP page for the URL of the latest CIFP archive."""
    logger.info("Scraping CIFP page at %s", page_url)
    response = _get(page_url)
    return find_cifp_zip_url(response.text)


# ============ Archive ============

def extract_cifp(archive: bytes, entry_name: str = CIFP_ENTRY_NAME) -> bytes:
    """Extract the ARINC 424 file from an in-memory CIFP zip archive.

    Raises:
        DownloadError: If the archive is invalid or lacks ``entry_name``
    """
    try:
        with zipfile.ZipFile(io.BytesIO(archive)) as cifp_zip:
            found = None
            for info in cifp_zip.infolist():
                logger.debug("zip entry: %s (%d bytes)", info.filename, info.file_size)
                if info.filename == entry_name:
                    found = info
            if found is None:
                raise DownloadError(f"Didn't find {entry_name!r} in CIFP zip file")
            contents = cifp_zip.read(found)
    except zipfile.BadZipFile as e:
        raise DownloadError(f"CIFP archive is not a valid zip file: {e}")

    logger.info("CIFP is %d bytes after decompression", len(contents))
    return contents


def download_cifp(zip_url: str | None = None) -> bytes:
    """Download the current CIFP and return the raw ARINC 424 file.

    Args:
        zip_url: Archive URL (default: scraped from the FAA page)

    Returns:
        The contents of the ``FAACIFP18`` archive entry
    """
    if zip_url is None:
        zip_url = get_cifp_zip_url()
    logger.info("CIFP is at %s", zip_url)

    response = _get(zip_url)
    logger.info("Received %d bytes", len(response.content))
    return extract_cifp(response.content)
