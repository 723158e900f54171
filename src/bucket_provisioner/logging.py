"""Logging configuration for the bucket provisioner."""

import json
import logging
import sys
from typing import Any

from .utils.errors import sanitize_dict


def setup_structured_logging(level: str = "INFO") -> None:
    """Configure plain progress logging on stdout."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )


def log_provisioning_event(
    logger: logging.Logger,
    resource_kind: str,
    resource_name: str,
    region: str | None,
    event: str,
    message: str,
    level: int = logging.DEBUG,
    **kwargs: Any,
) -> None:
    """Log a structured provisioning event, at debug level unless told otherwise."""
    log_data = {
        "resource": resource_kind,
        "name": resource_name,
        "region": region,
        "event": event,
        "message": message,
    }
    log_data.update(kwargs)
    logger.log(level, json.dumps(sanitize_dict(log_data), default=str))
