"""JSON log line helpers.

Every event is logged as one JSON object per line so any collector can parse
it; the request correlation ID is attached automatically.
"""

from __future__ import annotations

import json
import logging
import os
from datetime import UTC, datetime
from typing import Any

from airisk.core.request_context import get_request_id

SERVICE_NAME = "airisk"


def configure_logging(level: str | int | None = None) -> None:
    """Route the package's loggers to stderr with a bare message format.

    The message is already a JSON document, so no extra formatting is applied.
    Called once at application start; repeated calls are no-ops.
    """

    logger = logging.getLogger(SERVICE_NAME)
    if logger.handlers:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(level or os.getenv("LOG_LEVEL", "INFO").upper())
    logger.propagate = False


def log_json(
    logger: logging.Logger,
    level: int,
    event: str,
    **fields: Any,
) -> None:
    """Emit a single JSON log line for an event."""

    payload: dict[str, Any] = {
        "timestamp": datetime.now(UTC).isoformat(),
        "level": logging.getLevelName(level),
        "event": event,
    }
    request_id = get_request_id()
    if request_id:
        payload["request_id"] = request_id

    payload.update(fields)
    logger.log(level, json.dumps(payload, default=str))
