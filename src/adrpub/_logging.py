"""Logging configuration for adrpub.

Modules log through a module-level logger:
    import logging
    log = logging.getLogger(__name__)

The CLI calls configure_logging() once with Settings.log_level.
"""

import logging
import sys


def configure_logging(level: str = "INFO") -> None:
    """Attach a stderr handler to the adrpub logger.

    Later calls reuse the handler, updating its level and rebinding it to the
    current sys.stderr.
    """
    logger = logging.getLogger("adrpub")
    resolved = getattr(logging, level.upper(), logging.INFO)
    logger.setLevel(resolved)

    if logger.handlers:
        for handler in logger.handlers:
            handler.setLevel(resolved)
            if isinstance(handler, logging.StreamHandler):
                handler.setStream(sys.stderr)
        return

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(resolved)
    handler.setFormatter(logging.Formatter(fmt="[%(levelname)s] %(name)s: %(message)s"))
    logger.addHandler(handler)
    # Keep messages off the root logger to avoid duplicates
    logger.propagate = False
