import logging
import os
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s:%(module)s:%(lineno)d] %(message)s"


def setup_logging(level=None) -> logging.Logger:
    """Configure a root logger with a simple console handler.

    The level falls back to ``NDFD_LOG_LEVEL`` and then ``INFO``.
    """
    if level is None:
        level = os.environ.get("NDFD_LOG_LEVEL", "INFO").upper()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%dT%H:%M:%S%z"))

    root = logging.getLogger()
    root.setLevel(level)
    root.addHandler(handler)
    return root
