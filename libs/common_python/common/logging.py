"""Shared logging setup.

Every entrypoint (API server, training job) calls `configure_logging` once so
all components emit the same format:

    2024-01-01 12:00:00,000 [INFO] app.datastore.store: Record store ready: ...

Modules log through `logging.getLogger(__name__)` and never configure handlers
themselves.
"""

import logging

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(level="INFO") -> None:
    """Install a single stream handler on the root logger.

    Safe to call more than once; later calls only change the level.

    Args:
        level: Level name ("DEBUG", "INFO", ...) or numeric level.
    """
    if isinstance(level, str):
        level = level.upper()
    root = logging.getLogger()
    if not any(getattr(h, "_nba_record_handler", False) for h in root.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._nba_record_handler = True
        root.addHandler(handler)
    root.setLevel(level)
