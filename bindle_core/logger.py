"""
bindle_core.logger
------------------
JSON-line logging shared by the signing engine, keyring stores and transport.
Level defaults to INFO and can be overridden with BINDLE_LOG_LEVEL.
"""

import logging, json, sys, time, os

_FORMAT = json.dumps({
    "ts": "%(asctime)s",
    "level": "%(levelname)s",
    "name": "%(name)s",
    "msg": "%(message)s",
})


def _formatter() -> logging.Formatter:
    formatter = logging.Formatter(fmt=_FORMAT, datefmt="%Y-%m-%dT%H:%M:%SZ")
    formatter.converter = time.gmtime  # UTC
    return formatter


def get_logger(name="bindle", level=None, to_file=None):
    logger = logging.getLogger(name)
    if level is None:
        level = logging.getLevelName(os.getenv("BINDLE_LOG_LEVEL", "INFO").upper())
        if not isinstance(level, int):
            # unknown level name
            level = logging.INFO
    logger.setLevel(level)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(_formatter())
        logger.addHandler(handler)

        if to_file:
            os.makedirs(os.path.dirname(to_file) or ".", exist_ok=True)
            file_handler = logging.FileHandler(to_file)
            file_handler.setFormatter(_formatter())
            logger.addHandler(file_handler)

    return logger
