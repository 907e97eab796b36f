# utils/logger.py
import logging
import sys

LOGGER_NAME = "memengine"

logger = logging.getLogger(LOGGER_NAME)

# A library never configures output on its own
if not any(isinstance(h, logging.NullHandler) for h in logger.handlers):
    logger.addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """Return a child of the package logger, e.g. ``memengine.index.hash``."""
    if name.startswith(LOGGER_NAME):
        return logging.getLogger(name)
    return logger.getChild(name)


def configure_logging(level: int = logging.INFO) -> logging.Logger:
    """Attach a stdout handler to the package logger (once) and set its level."""
    logger.setLevel(level)

    # Prevent duplicate handlers if called multiple times
    if not any(isinstance(h, logging.StreamHandler) for h in logger.handlers):
        stream_handler = logging.StreamHandler(sys.stdout)
        stream_formatter = logging.Formatter(
            "%(asctime)s - %(levelname)s - %(name)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        stream_handler.setFormatter(stream_formatter)
        logger.addHandler(stream_handler)

    return logger
