import json

import settings
from scraper.bulletin_parser import BulletinParser
from scraper.fetcher import BulletinFetcher
from scraper.log_config import setup_logger


class LatestEarthquakeScraper:
    def __init__(
        self,
        url: str = settings.KANDILLI_URL,
        timezone_name: str = settings.BULLETIN_TIMEZONE,
    ):
        self.url = url
        self.logger = setup_logger("main_index")

        # Initialize sub-components
        self.fetcher = BulletinFetcher()
        self.parser = BulletinParser(timezone_name)

    def latest(self):
        """
        Fetch the bulletin and return the most recent earthquake.

        Returns:
            Event: First data row of the bulletin

        Raises:
            FetchError, StructureError, FieldParseError: On any failure,
                nothing is retried
        """
        return self.latest_n(1)[0]

    def latest_n(self, count: int):
        """
        Fetch the bulletin and return the ``count`` most recent earthquakes.

        Every call performs its own fetch; no state is shared between calls.
        The whole call fails if any requested row fails to parse, so a
        partial list is never returned.

        Args:
            count (int): Number of events, must be at least 1

        Returns:
            list: Events in published order (most recent first)
        """
        self.logger.info(f"Fetching latest {count} earthquake(s) from {self.url}")

        html = self.fetcher.fetch(self.url)
        events = self.parser.parse_bulletin(html, count)

        self.logger.info(f"Parsed {len(events)} earthquake(s)")
        return events


if __name__ == "__main__":
    scraper = LatestEarthquakeScraper()

    latest = scraper.latest()
    print("=== LATEST EARTHQUAKE ===")
    print(json.dumps(latest.to_dict(), indent=4, ensure_ascii=False))

    events = scraper.latest_n(settings.DEFAULT_EVENT_COUNT)
    print(f"\n=== LATEST {len(events)} EARTHQUAKES ===")
    for event in events:
        print(
            f"{event.date} {event.occurred_at:%H:%M:%S} UTC  M{event.magnitude:.1f}  "
            f"{event.depth_km:.1f} km  {event.district} ({event.province})"
        )
