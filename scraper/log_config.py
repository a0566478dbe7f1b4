import logging
from datetime import datetime
from pathlib import Path

import settings


def setup_logger(name):
    """
    Configure a named logger with timestamped file output.

    The handler is attached only once per logger name, so several scraper
    instances in one process share the same log file.

    Args:
        name (str): Logger name, also used as the log file prefix

    Returns:
        logging.Logger: Configured logger instance
    """
    logs_dir = Path(settings.LOG_DIR)
    logs_dir.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger(name)
    logger.setLevel(settings.LOG_LEVEL)

    # File Handler
    if not logger.handlers:
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_file = logs_dir / f"{name}_{timestamp}.log"
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(settings.LOG_LEVEL)

        file_format = logging.Formatter(
            "%(asctime)s - %(levelname)s - %(filename)s:%(lineno)d - %(funcName)s - %(message)s"
        )
        file_handler.setFormatter(file_format)
        logger.addHandler(file_handler)

    return logger
