"""
Stripe client logging.

Sets up structured logging on import and exposes the loggers used across
the package:
- `logger` for general client activity
- `api_logger` for request/response timing
"""

import logging

from .config import env
from .config.logging import (
  setup_logging,
  get_logger,
  log_api_request,
  log_error,
)

setup_logging()

logger = get_logger("stripe_api")
api_logger = get_logger("stripe_api.api")

if env.is_development():
  logging.getLogger("httpx").setLevel(logging.WARNING)
  logging.getLogger("httpcore").setLevel(logging.WARNING)


def log_api(
  method: str,
  path: str,
  status_code: int,
  duration_ms: float,
  request_id: str | None = None,
) -> None:
  """Log API requests with structured data."""
  log_api_request(api_logger, method, path, status_code, duration_ms, request_id)


__all__ = [
  "logger",
  "api_logger",
  "log_api",
  "log_error",
]
