"""
Custom Exception Types for the Stripe client.

Every error raised by this package derives from `StripeError`. The three
ways a call can fail are kept apart:

- transport failures (`stripe_api.client.exceptions.StripeTransportError`)
- API-level errors returned by Stripe (`stripe_api.client.exceptions.StripeAPIError`)
- responses that cannot be decoded into the expected model (`InvalidJsonModelError`)
"""

from typing import Optional, Dict, Any, List, Mapping
from datetime import datetime, timezone


class StripeError(Exception):
  """
  Base exception for all Stripe client errors.

  Attributes:
      message: Human-readable error message
      error_code: Error code for categorization
      details: Additional error context and metadata
      timestamp: When the error occurred
  """

  def __init__(
    self,
    message: str,
    error_code: Optional[str] = None,
    details: Optional[Dict[str, Any]] = None,
  ):
    super().__init__(message)
    self.message = message
    self.error_code = error_code or self.__class__.__name__
    self.details = details or {}
    self.timestamp = datetime.now(timezone.utc).isoformat()

  def to_dict(self) -> Dict[str, Any]:
    """Convert exception to dictionary for logging and diagnostics."""
    return {
      "error": self.error_code,
      "message": self.message,
      "details": self.details,
      "timestamp": self.timestamp,
    }


class InvalidJsonModelError(StripeError):
  """
  Raised when Stripe answers successfully but the JSON does not match the model.

  This points at a version mismatch between the API and this client and is
  not something a caller can recover from by retrying.
  """

  def __init__(
    self,
    status_code: int,
    url: str,
    post_parameters: Optional[Mapping[str, str]],
    query_parameters: Optional[Mapping[str, str]],
    json_body: Any,
    errors: List[Dict[str, Any]],
  ):
    self.status_code = status_code
    self.url = url
    self.post_parameters = dict(post_parameters) if post_parameters else None
    self.query_parameters = dict(query_parameters) if query_parameters else None
    self.json_body = json_body
    self.errors = errors

    paths = ", ".join(
      ".".join(str(part) for part in error.get("loc", ())) or "<root>"
      for error in errors
    )
    super().__init__(
      f"Invalid JSON model from {url} (status {status_code}): {paths}",
      error_code="INVALID_JSON_MODEL",
      details={
        "status_code": status_code,
        "url": url,
        "errors": errors,
      },
    )
