# app/core/logging_config.py
import logging

FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_handler: logging.Handler | None = None


def setup_logging(level: str = "INFO") -> logging.Logger:
    """Attach a single stream handler to the root logger.

    Safe to call more than once; the handler is only added the first time.
    """
    global _handler
    logger = logging.getLogger()
    if _handler is None:
        _handler = logging.StreamHandler()
        _handler.setFormatter(logging.Formatter(FORMAT))
        logger.addHandler(_handler)
    logger.setLevel(level.upper())
    return logger
