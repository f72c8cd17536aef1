"""
Root logger setup for the Users API.

Modules log through ``logging.getLogger(__name__)``; ``setup_logging``
attaches a single console handler to the root logger the first time it
is called and is a no-op afterwards.
"""

import logging

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO") -> None:
    """Configure the root logger with a console handler.

    ``level`` is a logging level name such as ``"DEBUG"`` (case
    insensitive); unknown names fall back to INFO.
    """
    root = logging.getLogger()
    if root.handlers:
        # Already configured (test runners, repeated create_app calls)
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    root.addHandler(handler)
