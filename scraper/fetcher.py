"""
HTTP retrieval of the Kandilli bulletin page.

One blocking GET per call: no retries, no custom headers, no timeout
beyond the transport default.
"""

import requests

from scraper.errors import FetchError
from scraper.log_config import setup_logger

# Turkish text; served without a charset most of the time
DEFAULT_ENCODING = "iso-8859-9"


class BulletinFetcher:
    """Download the raw bulletin HTML."""

    def __init__(self):
        self.logger = setup_logger("bulletin_fetcher")

    def fetch(self, url):
        """
        Fetch a page and return its body decoded as text.

        Args:
            url (str): The URL to fetch

        Returns:
            str: Full response body

        Raises:
            FetchError: On network failure, non-success status or a body
                that cannot be decoded
        """
        try:
            response = requests.get(url)
            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            self.logger.error(f"Failed to fetch {url}: {e}")
            raise FetchError(f"Failed to fetch {url}: {e}", url=url) from e

        # requests falls back to ISO-8859-1 for text/* without a charset
        content_type = response.headers.get("Content-Type", "").lower()
        if "charset=" in content_type and response.encoding:
            encoding = response.encoding
        else:
            encoding = DEFAULT_ENCODING
        try:
            body = response.content.decode(encoding)
        except (UnicodeDecodeError, LookupError) as e:
            self.logger.error(f"Cannot decode body of {url} as {encoding}: {e}")
            raise FetchError(
                f"Cannot decode body of {url} as {encoding}: {e}", url=url
            ) from e

        self.logger.info(
            f"Successfully fetched: {url} (Status: {response.status_code}, {len(body)} chars)"
        )
        return body
