"""Kandilli Observatory bulletin fetching and parsing."""

from scraper.bulletin_parser import BulletinParser
from scraper.errors import BulletinError, FetchError, FieldParseError, StructureError
from scraper.fetcher import BulletinFetcher
from scraper.models import Event

__all__ = [
    "BulletinError",
    "BulletinFetcher",
    "BulletinParser",
    "Event",
    "FetchError",
    "FieldParseError",
    "StructureError",
]
