"""
Parser for the Kandilli Observatory "latest earthquakes" bulletin.

The bulletin is a single <pre> block of fixed-width text. The first lines
are title, notes and column headers; every following line is one event,
most recent first:

    2024.01.01 12:30:00  38.1234  27.5678  10.5  -.-  4.2  -.-  ILCE  (IL)  Ilksel

Columns are padded with runs of spaces, so rows are tokenized on
whitespace and fields are picked by token position (see COLUMN_LAYOUT).
"""

import math
from datetime import datetime, timedelta, timezone
from zoneinfo import ZoneInfo

from bs4 import BeautifulSoup

import settings
from scraper.errors import FieldParseError, StructureError
from scraper.log_config import setup_logger
from scraper.models import Event

# Title, notes and column header lines before the first event row
HEADER_LINE_COUNT = 7

# Field name -> token index after whitespace tokenization
COLUMN_LAYOUT = {
    "date": 0,
    "time_of_day": 1,
    "depth": 4,
    "magnitude": 6,
    "district": 8,
    "province": 9,
}

MIN_TOKEN_COUNT = max(COLUMN_LAYOUT.values()) + 1

# Dotted dates, 24-hour clock, optional tenths of a second
DATETIME_FORMATS = (
    "%d.%m.%Y %H:%M:%S.%f",
    "%d.%m.%Y %H:%M:%S",
    "%Y.%m.%d %H:%M:%S.%f",
    "%Y.%m.%d %H:%M:%S",
)

UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


class BulletinParser:
    """Turn bulletin HTML into Event records."""

    def __init__(self, timezone_name=settings.BULLETIN_TIMEZONE):
        self.timezone = ZoneInfo(timezone_name)
        self.logger = setup_logger("bulletin_parser")

    def extract_block(self, html):
        """Return the text of the first <pre> element in the document."""
        soup = BeautifulSoup(html, "html.parser")
        pre = soup.find("pre")
        if pre is None:
            self.logger.error("No <pre> block found in bulletin page")
            raise StructureError("No <pre> block found in bulletin page")

        block = pre.get_text()
        self.logger.debug(f"Extracted bulletin block ({len(block)} chars)")
        return block

    def split_rows(self, block, count=None):
        """
        Split the bulletin block into data rows, dropping the header lines.

        Args:
            block (str): Text of the <pre> element
            count (int): Number of rows wanted, or None for all of them

        Returns:
            list: Data rows in published order (most recent first)

        Raises:
            StructureError: If the header is incomplete or fewer than
                ``count`` data rows exist
        """
        if count is not None and count < 1:
            raise ValueError(f"Row count must be positive, got {count}")

        lines = block.splitlines()
        if len(lines) < HEADER_LINE_COUNT:
            self.logger.error(
                f"Bulletin has {len(lines)} lines, expected at least {HEADER_LINE_COUNT}"
            )
            raise StructureError(
                f"Bulletin has {len(lines)} lines, expected at least {HEADER_LINE_COUNT} header lines"
            )

        rows = lines[HEADER_LINE_COUNT:]
        # Padding after the table; blank lines inside it are left to parse_row
        while rows and not rows[-1].strip():
            rows.pop()
        self.logger.debug(f"Found {len(rows)} data rows")

        if count is None:
            return rows

        if count > len(rows):
            self.logger.error(f"Requested {count} rows but only {len(rows)} available")
            raise StructureError(
                f"Requested {count} events but bulletin only has {len(rows)} rows"
            )
        return rows[:count]

    def parse_row(self, line, row_index=None):
        """
        Parse one bulletin row into an Event.

        Raises:
            StructureError: If the row has too few columns
            FieldParseError: If a column cannot be converted
        """
        tokens = line.split()
        if len(tokens) < MIN_TOKEN_COUNT:
            self.logger.error(
                f"Row {row_index} has {len(tokens)} columns, expected {MIN_TOKEN_COUNT}: {line!r}"
            )
            raise StructureError(
                f"Row has {len(tokens)} columns, expected at least {MIN_TOKEN_COUNT}: {line!r}",
                row_index=row_index,
            )

        def column(name):
            return tokens[COLUMN_LAYOUT[name]]

        event = Event(
            date=column("date"),
            time=self.parse_timestamp(column("date"), column("time_of_day"), row_index),
            depth_km=self.parse_number(
                "depth", column("depth"), row_index, minimum=0
            ),
            magnitude=self.parse_number("magnitude", column("magnitude"), row_index),
            province=self.strip_parentheses(column("province")),
            district=column("district"),
        )
        self.logger.debug(f"Parsed row {row_index}: {event}")
        return event

    def parse_rows(self, lines):
        """Parse rows in order, failing on the first bad one."""
        return [self.parse_row(line, row_index=i) for i, line in enumerate(lines)]

    def parse_bulletin(self, html, count=None):
        """Extract, split and parse ``count`` events (all when None)."""
        block = self.extract_block(html)
        return self.parse_rows(self.split_rows(block, count))

    def parse_timestamp(self, date_str, time_str, row_index=None):
        """Convert bulletin date and time-of-day to epoch seconds."""
        datetime_str = f"{date_str} {time_str}"

        for fmt in DATETIME_FORMATS:
            try:
                parsed = datetime.strptime(datetime_str, fmt)
                break
            except ValueError:
                continue
        else:
            self.logger.error(f"Failed to parse datetime: '{datetime_str}'")
            raise FieldParseError("time", datetime_str, row_index=row_index)

        local = parsed.replace(tzinfo=self.timezone)
        # Floor to whole seconds
        return (local - UNIX_EPOCH) // timedelta(seconds=1)

    def parse_number(self, column, raw, row_index=None, minimum=None):
        try:
            value = float(raw)
        except ValueError as e:
            self.logger.error(f"Failed to parse {column} '{raw}': {e}")
            raise FieldParseError(column, raw, row_index=row_index) from e

        if not math.isfinite(value) or (minimum is not None and value < minimum):
            self.logger.error(f"Out of range {column} '{raw}'")
            raise FieldParseError(
                column, raw, row_index=row_index, reason="out of range"
            )
        return value

    @staticmethod
    def strip_parentheses(token):
        """Remove one literal leading '(' and trailing ')', nothing else."""
        if token.startswith("("):
            token = token[1:]
        if token.endswith(")"):
            token = token[:-1]
        return token
