"""
Logging setup for the Stripe client.

Deployed environments get one JSON object per line, split across stderr
(errors) and stdout (everything else). Development gets a plain console
format.
"""

import json
import logging
import logging.config
import traceback
from datetime import datetime, timezone
from typing import Any

from stripe_api.config.env import EnvConfig


APPLICATION_LOGGERS = ["stripe_api", "stripe_api.api"]

# Record attributes copied into the JSON line when a caller sets them via `extra`
CONTEXT_FIELDS = (
  "action",
  "method",
  "path",
  "duration_ms",
  "status_code",
  "metadata",
  "request_id",
)

# environment -> (level for the package loggers, emit DEBUG records)
ENVIRONMENT_LEVELS = {
  "prod": ("INFO", False),
  "staging": ("INFO", True),
  "test": ("WARNING", False),
}


class StructuredFormatter(logging.Formatter):
  """Render a record as a compact JSON object."""

  def format(self, record: logging.LogRecord) -> str:
    created = datetime.fromtimestamp(record.created, tz=timezone.utc)
    payload: dict[str, Any] = {
      "timestamp": created.isoformat().replace("+00:00", "Z"),
      "level": record.levelname,
      "component": getattr(record, "component", record.name),
      "message": record.getMessage(),
    }

    for name in CONTEXT_FIELDS:
      if hasattr(record, name):
        payload[name] = getattr(record, name)

    if record.levelno >= logging.ERROR:
      if hasattr(record, "error_category"):
        payload["error_category"] = record.error_category
      if record.exc_info:
        exc_type, exc_value, _ = record.exc_info
        payload["error"] = {
          "type": exc_type.__name__ if exc_type else "Unknown",
          "message": str(exc_value) if exc_value else "",
          "traceback": traceback.format_exception(*record.exc_info),
        }

    return json.dumps(payload, default=str, separators=(",", ":"))


class TieredLogFilter:
  """
  Pass only the records belonging to one output tier.

  critical takes ERROR and above, operational takes INFO and WARNING, and
  debug takes DEBUG alone. An unknown tier passes everything.
  """

  TIERS = {
    "critical": (logging.ERROR, None),
    "operational": (logging.INFO, logging.ERROR),
    "debug": (logging.DEBUG, logging.INFO),
  }

  def __init__(self, tier: str):
    self.tier = tier

  def filter(self, record: logging.LogRecord) -> bool:
    if self.tier not in self.TIERS:
      return True
    low, high = self.TIERS[self.tier]
    return record.levelno >= low and (high is None or record.levelno < high)


def _stream_handler(
  level: str, stream: str, formatter: str, tier: str | None = None
) -> dict[str, Any]:
  handler: dict[str, Any] = {
    "class": "logging.StreamHandler",
    "level": level,
    "formatter": formatter,
    "stream": f"ext://sys.{stream}",
  }
  if tier:
    handler["filters"] = [f"{tier}_filter"]
  return handler


def get_logging_config(environment: str | None = None) -> dict[str, Any]:
  """
  Build a dictConfig for the given environment (defaults to ENVIRONMENT).

  Anything not listed in ENVIRONMENT_LEVELS is treated as development, where
  LOG_LEVEL picks the level and output goes to one plain console handler.
  """
  env = environment or EnvConfig.ENVIRONMENT
  is_dev = env not in ENVIRONMENT_LEVELS

  if is_dev:
    level = getattr(EnvConfig, "LOG_LEVEL", None) or "DEBUG"
    with_debug = level == "DEBUG"
  else:
    level, with_debug = ENVIRONMENT_LEVELS[env]

  handlers = {
    "critical": _stream_handler("ERROR", "stderr", "structured", "critical"),
    "operational": _stream_handler("INFO", "stdout", "structured", "operational"),
    "console": _stream_handler(level, "stdout", "simple" if is_dev else "structured"),
  }
  if with_debug:
    handlers["debug"] = _stream_handler("DEBUG", "stdout", "structured", "debug")

  if is_dev:
    app_handlers = ["console"]
  else:
    app_handlers = ["critical", "operational"] + (["debug"] if with_debug else [])

  loggers: dict[str, Any] = {
    name: {"level": level, "handlers": list(app_handlers), "propagate": False}
    for name in APPLICATION_LOGGERS
  }
  for name in ("httpx", "httpcore"):
    loggers[name] = {
      "level": "WARNING",
      "handlers": ["console"] if is_dev else ["operational"],
      "propagate": False,
    }

  return {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
      "structured": {"()": StructuredFormatter},
      "simple": {"format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s"},
    },
    "filters": {
      f"{tier}_filter": {"()": TieredLogFilter, "tier": tier}
      for tier in TieredLogFilter.TIERS
    },
    "handlers": handlers,
    "loggers": loggers,
    "root": {"level": "WARNING", "handlers": ["console"] if is_dev else ["critical"]},
  }


def setup_logging(environment: str | None = None) -> None:
  logging.config.dictConfig(get_logging_config(environment))


def get_logger(name: str) -> logging.Logger:
  return logging.getLogger(name)


def log_api_request(
  logger: logging.Logger,
  method: str,
  path: str,
  status_code: int,
  duration_ms: float,
  request_id: str | None = None,
) -> None:
  """Record one completed Stripe API call at INFO."""
  logger.info(
    f"{method} {path} - {status_code} ({duration_ms:.2f}ms)",
    extra={
      "component": "api",
      "action": "request_completed",
      "method": method,
      "path": path,
      "status_code": status_code,
      "duration_ms": duration_ms,
      "request_id": request_id,
    },
  )


def log_error(
  logger: logging.Logger,
  error: Exception,
  component: str,
  action: str,
  error_category: str = "application",
  metadata: dict[str, Any] | None = None,
) -> None:
  """
  Record a failure at ERROR with the active traceback attached.

  `error_category` groups failures across components, e.g.
  "invalid_json_model" for responses that did not decode.
  """
  logger.error(
    f"Error in {component}.{action}: {error!s}",
    exc_info=True,
    extra={
      "component": component,
      "action": action,
      "error_category": error_category,
      "metadata": metadata or {},
    },
  )
