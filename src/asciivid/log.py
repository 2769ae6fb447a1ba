import logging
import sys


def setup_logging(level: str = "INFO") -> logging.Logger:
    """Configure the ``asciivid`` logger for console output on stderr."""
    logger = logging.getLogger("asciivid")
    logger.setLevel(getattr(logging, level.upper()))
    logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    logger.addHandler(console_handler)

    return logger
