import logging
import sys

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'


def setup_logging(level="INFO", stream=None):
    """Send the package's log records to a console handler."""
    logger = logging.getLogger("graph_anonymity")
    logger.setLevel(getattr(logging, str(level).upper()))
    logger.handlers.clear()

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False
    return logger
