"""
Workflow utilities: logging setup and one-line JSON event records.
"""
import json
import logging
from typing import Any

logger = logging.getLogger(__name__)


def configure_logging(level: str = "WARNING") -> None:
    """Root logging for scripts; unknown level names fall back to WARNING."""
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        numeric = logging.WARNING
    logging.basicConfig(level=numeric, format="%(levelname)s: %(message)s")


def log_structured(level: str, **fields: Any) -> None:
    """Log fields as a single JSON object at the named level (debug, info, warning, error)."""
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        numeric = logging.INFO
    logger.log(numeric, "%s", json.dumps({"level": level, **fields}, default=str))
