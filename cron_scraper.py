import json
import logging
import os
import sys
from pathlib import Path

from dotenv import load_dotenv


# Setup
def setup_environment():
    """Ensure we're in the right directory and environment is loaded"""
    script_dir = os.path.dirname(os.path.abspath(__file__))
    os.chdir(script_dir)
    load_dotenv()  # Load .env after changing to project directory


def setup_logging(log_dir):
    """Configure logging for cron execution"""
    logs_dir = Path(log_dir)
    logs_dir.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger("cron_scraper")
    logger.setLevel(logging.INFO)

    # File handler - single append file for all cron runs
    if not logger.handlers:
        log_file = logs_dir / "cron.log"
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.INFO)

        file_format = logging.Formatter("%(asctime)s - %(levelname)s - %(message)s")
        file_handler.setFormatter(file_format)
        logger.addHandler(file_handler)

    return logger


def parse_count(argv, default):
    """Event count from the first CLI argument, or the configured default"""
    if len(argv) < 2:
        return default
    count = int(argv[1])
    if count < 1:
        raise ValueError(f"Event count must be positive, got {count}")
    return count


def main(argv=None):
    """Main execution"""
    argv = sys.argv if argv is None else argv

    # Setup
    setup_environment()

    # Imported after .env is loaded so settings pick it up
    import settings
    from main import LatestEarthquakeScraper

    logger = setup_logging(settings.LOG_DIR)
    logger.info("=== CRON SCRAPER STARTED ===")

    try:
        count = parse_count(argv, settings.DEFAULT_EVENT_COUNT)

        logger.info(f"Fetching latest {count} earthquake(s)...")
        scraper = LatestEarthquakeScraper()
        events = scraper.latest_n(count)

        for event in events:
            print(json.dumps(event.to_dict(), ensure_ascii=False))

        logger.info(f"Fetched {len(events)} earthquake(s). Latest: {events[0]}")
        logger.info("=== CRON SCRAPER COMPLETED SUCCESSFULLY ===")
        return 0

    except Exception as e:
        logger.error(f"=== CRON SCRAPER FAILED: {str(e)} ===")
        return 1


if __name__ == "__main__":
    sys.exit(main())
