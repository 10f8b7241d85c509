"""
Logging helpers.

amclient never configures structlog; the application does. Endpoints are
redacted before they reach log fields or error messages, so credentials in
the URL stay out of both.
"""

from __future__ import annotations

from typing import Any
from urllib.parse import urlsplit, urlunsplit

import structlog

LOGGER_NAME = "amclient"


def get_logger(**context: Any) -> Any:
    """Return the ``amclient`` structlog logger, with ``context`` bound if given."""
    logger = structlog.get_logger(LOGGER_NAME)
    if context:
        return logger.bind(**context)
    return logger


def redact_url(url: str) -> str:
    """Strip userinfo, query and fragment so a URL is safe to log."""
    if not url:
        return url
    parts = urlsplit(url)
    host = parts.hostname or ""
    if ":" in host:
        host = f"[{host}]"
    if parts.port is not None:
        host = f"{host}:{parts.port}"
    return urlunsplit((parts.scheme, host, parts.path, "", ""))


def bind_endpoint(logger: Any, endpoint: str) -> Any:
    """Bind the redacted endpoint onto ``logger`` so every emission log line carries it."""
    if not endpoint:
        return logger
    return logger.bind(endpoint=redact_url(endpoint))
