# memograph/log.py
import logging
import sys

from .core.config import get_config


def get_logger(name="memograph", level=None, logfile=None):
    """
    Attach a stdout handler (and optionally a file handler) to a package logger.

    The level defaults to `log_level` of the active GraphConfig. Calling this
    again on a configured logger only updates its level.
    """
    logger = logging.getLogger(name)
    logger.setLevel(get_config().log_level if level is None else level)
    if logger.handlers:
        return logger  # already configured

    fmt = logging.Formatter(fmt="%(asctime)s | %(levelname)7s | %(name)s | %(message)s",
                            datefmt="%Y-%m-%d %H:%M:%S")

    sh = logging.StreamHandler(sys.stdout)
    sh.setFormatter(fmt)
    logger.addHandler(sh)

    if logfile:
        fh = logging.FileHandler(logfile)
        fh.setFormatter(fmt)
        logger.addHandler(fh)

    return logger
