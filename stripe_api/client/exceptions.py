"""
Stripe API Client Exceptions.

Defines the exception hierarchy for API-level and transport-level failures.
"""

from typing import Optional, Dict, Any

from stripe_api.exceptions import StripeError


class StripeAPIError(StripeError):
  """Base exception for errors reported by the Stripe API."""

  def __init__(
    self,
    message: str,
    status_code: Optional[int] = None,
    response_data: Optional[Dict[str, Any]] = None,
    error_type: Optional[str] = None,
    code: Optional[str] = None,
    param: Optional[str] = None,
    url: Optional[str] = None,
  ):
    super().__init__(
      message,
      details={
        "status_code": status_code,
        "error_type": error_type,
        "code": code,
        "param": param,
        "url": url,
      },
    )
    self.status_code = status_code
    self.response_data = response_data
    self.error_type = error_type
    self.code = code
    self.param = param
    self.url = url


class InvalidRequestError(StripeAPIError):
  """
  The request had invalid parameters or referenced a missing resource.

  Examples: 400 Bad Request, 404 Not Found
  """

  pass


class AuthenticationError(StripeAPIError):
  """No valid API key provided (401)."""

  pass


class CardError(StripeAPIError):
  """
  Parameters were valid but the request failed (402).

  Typically a declined card; `code` carries the decline reason.
  """

  pass


class RateLimitError(StripeAPIError):
  """Too many requests hit the API too quickly (429)."""

  pass


class StripeServerError(StripeAPIError):
  """Something went wrong on Stripe's end (5xx)."""

  pass


class StripeTransportError(StripeError):
  """
  The request never produced an HTTP response.

  Examples: DNS failure, connection refused, connection reset
  """

  pass


class StripeTimeoutError(StripeTransportError):
  """Request timeout errors."""

  pass
