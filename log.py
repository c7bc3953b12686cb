import logging
import sys

import settings

LOGGER_NAME = "leetcode_watchlist"


def setup_logging(log_file: str | None = None, stream: bool = False) -> logging.Logger:
    """
    Debug logging to file, plus stderr when `stream` is set. Each handler is
    added at most once, so later calls only add what is still missing.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG)
    formatter = logging.Formatter('%(asctime)s - %(levelname)s - %(message)s')

    # FileHandler subclasses StreamHandler, hence the exact type check below
    if not any(isinstance(h, logging.FileHandler) for h in logger.handlers):
        file_handler = logging.FileHandler(log_file or settings.LOG_FILE)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    if stream and not any(type(h) is logging.StreamHandler for h in logger.handlers):
        stream_handler = logging.StreamHandler(sys.stderr)
        stream_handler.setLevel(logging.INFO)
        stream_handler.setFormatter(formatter)
        logger.addHandler(stream_handler)

    return logger
