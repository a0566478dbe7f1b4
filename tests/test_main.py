from unittest.mock import patch

import pytest

from main import LatestEarthquakeScraper
from scraper.errors import FetchError, FieldParseError, StructureError
from tests.conftest import HEADER_LINES, ROWS, make_html

URL = "http://example.test/lst0.asp"


@pytest.fixture
def scraper():
    return LatestEarthquakeScraper(url=URL, timezone_name="Europe/Istanbul")


def test_latest(scraper, bulletin_html):
    with patch.object(scraper.fetcher, "fetch", return_value=bulletin_html) as fetch:
        event = scraper.latest()

    fetch.assert_called_once_with(URL)
    assert event.district == "BUCA"
    assert event.province == "IZMIR"
    assert event.magnitude == 4.2


def test_latest_matches_latest_n_one(scraper, bulletin_html):
    with patch.object(scraper.fetcher, "fetch", return_value=bulletin_html):
        assert scraper.latest() == scraper.latest_n(1)[0]


def test_latest_n_returns_exactly_n_in_order(scraper, bulletin_html):
    with patch.object(scraper.fetcher, "fetch", return_value=bulletin_html):
        events = scraper.latest_n(2)

    assert [e.district for e in events] == ["BUCA", "KARLIOVA"]


def test_latest_n_fetches_every_call(scraper, bulletin_html):
    with patch.object(scraper.fetcher, "fetch", return_value=bulletin_html) as fetch:
        scraper.latest_n(1)
        scraper.latest_n(1)

    assert fetch.call_count == 2


def test_latest_n_more_than_available(scraper, bulletin_html):
    with patch.object(scraper.fetcher, "fetch", return_value=bulletin_html):
        with pytest.raises(StructureError):
            scraper.latest_n(10)


def test_latest_n_fails_whole_call_on_bad_row(scraper):
    html = make_html(HEADER_LINES + [ROWS[0], ROWS[1].replace("2.1", "?")])
    with patch.object(scraper.fetcher, "fetch", return_value=html):
        with pytest.raises(FieldParseError):
            scraper.latest_n(2)


def test_latest_propagates_fetch_error(scraper):
    with patch.object(scraper.fetcher, "fetch", side_effect=FetchError("down", url=URL)):
        with pytest.raises(FetchError):
            scraper.latest()


def test_latest_page_without_bulletin(scraper):
    with patch.object(scraper.fetcher, "fetch", return_value="<html><body></body></html>"):
        with pytest.raises(StructureError):
            scraper.latest()
