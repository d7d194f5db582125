import logging
import sys

from shopcart.config import settings

_FORMAT = "[%(levelname)s] %(asctime)s %(name)s: %(message)s"


def get_logger(name: str) -> logging.Logger:
    """
    Return a module logger writing to stdout at the configured LOG_LEVEL.
    The handler is attached once per logger name.
    """
    log = logging.getLogger(name)
    log.setLevel(settings.LOG_LEVEL.upper())
    if not log.handlers:
        h = logging.StreamHandler(sys.stdout)
        h.setFormatter(logging.Formatter(_FORMAT))
        log.addHandler(h)
        log.propagate = False
    return log
