"""Logging setup.

Call ``setup_logging()`` once at startup; later calls only adjust levels.
"""

from __future__ import annotations

import logging
import sys
from typing import Dict, List

# Libraries that are too chatty at INFO.
_QUIET_LOGGERS: Dict[str, List[str]] = {
    "WARNING": ["werkzeug", "mysql.connector"],
}


def setup_logging(level: str = "INFO") -> None:
    root = logging.getLogger()
    root.setLevel(_parse_level(level))

    # Flask's dev server adds no root handler; tests and scripts neither.
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)-8s %(name)s: %(message)s"))
        root.addHandler(handler)

    for quiet_level, names in _QUIET_LOGGERS.items():
        for name in names:
            logging.getLogger(name).setLevel(_parse_level(quiet_level))


def _parse_level(raw: str) -> int:
    """Convert a level name to a logging constant, defaulting to INFO."""
    numeric = getattr(logging, str(raw).upper(), None)
    if isinstance(numeric, int):
        return numeric
    return logging.INFO
