"""
Logging setup shared by the kernel, the HTTP api and the entrypoint.
"""
import logging
import os

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def setup_logging(level=None):
    level = level or os.getenv("ACIDENTITON_LOG_LEVEL", "INFO")
    root = logging.getLogger("acidentiton")
    root.setLevel(str(level).upper())
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
    return root


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
