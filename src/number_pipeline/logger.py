import logging
import sys

logger = logging.getLogger("number_pipeline")


def setup_logger(log_level="WARNING"):
    handler = logging.StreamHandler(sys.stderr)
    if log_level:
        logger.setLevel(log_level)
        handler.setLevel(log_level)
    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    handler.setFormatter(formatter)
    # main() may run more than once per process, e.g. under pytest
    for old_handler in list(logger.handlers):
        logger.removeHandler(old_handler)
    logger.addHandler(handler)
    return logger
