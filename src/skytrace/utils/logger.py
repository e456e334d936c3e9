# utils/logger.py
import logging

LOGGER_NAME = "skytrace"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def init_logger(level=logging.INFO) -> logging.Logger:
    """
    Installs a basic console handler and returns the package logger.
    Applications call this once; the library itself never configures handlers.
    """
    logging.basicConfig(level=level, format=LOG_FORMAT)
    root = logging.getLogger(LOGGER_NAME)
    root.setLevel(level)
    return root


def get_logger(name: str) -> logging.Logger:
    if name.startswith(LOGGER_NAME):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_NAME}.{name}")


logger = logging.getLogger(LOGGER_NAME)
logger.addHandler(logging.NullHandler())
