import os
from dotenv import load_dotenv

# Load env
load_dotenv()

# Kandilli Observatory "latest earthquakes" bulletin
KANDILLI_URL = "http://www.koeri.boun.edu.tr/scripts/lst0.asp"

LOG_DIR = os.getenv("LOG_DIR", "logs")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Bulletin times are published in Turkey local time
BULLETIN_TIMEZONE = os.getenv("BULLETIN_TIMEZONE", "Europe/Istanbul")

DEFAULT_EVENT_COUNT = int(os.getenv("DEFAULT_EVENT_COUNT", "10"))

FLASK_HOST = os.getenv("FLASK_HOST", "0.0.0.0")
FLASK_PORT = int(os.getenv("FLASK_PORT", "5000"))
