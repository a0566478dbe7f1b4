"""Shared bulletin fixtures.

Run with:  python -m pytest tests/ -v
"""

import pytest

import settings

HEADER_LINES = [
    "B.U. KANDILLI RASATHANESI ve DAE.",
    "RECENT EARTHQUAKES IN TURKEY",
    "KOERI REGIONAL EARTHQUAKE-TSUNAMI MONITORING CENTER",
    "(QUICK EPICENTER DETERMINATIONS)",
    "",
    "Date       Time      Latit(N)  Long(E)   Depth(km)     MD   ML   Mw    Region",
    "---------- --------  --------  -------   ----------    ------------    -----------",
]

ROWS = [
    "2024.01.01 12:30:00  38.1234   27.5678       10.5      -.-  4.2  -.-   BUCA (IZMIR)                                      Ilksel",
    "2024.01.01 11:05:42  39.0011   40.1122        7.0      -.-  2.1  -.-   KARLIOVA (BINGOL)                                 Ilksel",
    "2023.12.31 23:59:59  37.5500   36.9000       21.3      -.-  3.0  -.-   PAZARCIK (KAHRAMANMARAS)                          Ilksel",
]


def make_html(lines):
    body = "\n".join(lines)
    return (
        "<html><head><title>Son Depremler</title></head><body>"
        f"<pre>{body}\n</pre>"
        "</body></html>"
    )


@pytest.fixture(autouse=True)
def log_dir(tmp_path, monkeypatch):
    monkeypatch.setattr(settings, "LOG_DIR", str(tmp_path / "logs"))


@pytest.fixture
def bulletin_html():
    return make_html(HEADER_LINES + ROWS)
