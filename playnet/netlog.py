"""
Logging setup for the playnet library.
"""
import logging
import sys


DEBUG_FORMAT = "%(asctime)s %(levelname)8s [%(process)6d %(module)12s.%(funcName)-12s:%(lineno)4d] %(message)s"
SCREEN_FORMAT = "%(asctime)s | %(message)s"


def setup_logging(name: str = "playnet", level: str = "INFO") -> logging.Logger:
    """Returns the named logger with a single screen handler attached.

    The logger itself passes every record; `level` only filters what the
    screen handler prints. Calling this again for the same name replaces
    the handler instead of stacking a second one.
    """
    log = logging.getLogger(name)
    log.handlers = []

    handler_screen = logging.StreamHandler(sys.stdout)
    handler_screen.setFormatter(
        logging.Formatter(DEBUG_FORMAT if level == "DEBUG" else SCREEN_FORMAT, datefmt="%H:%M:%S")
    )
    handler_screen.setLevel(level)
    log.addHandler(handler_screen)

    log.setLevel("DEBUG")

    return log
