"""
Server response parsing.

Turns a raw `httpx.Response` into either the decoded JSON body or the
matching `StripeAPIError` subclass.
"""

import json
from typing import Any, Dict, Mapping, Optional, Type

import httpx

from stripe_api.logger import logger
from .exceptions import (
  AuthenticationError,
  CardError,
  InvalidRequestError,
  RateLimitError,
  StripeAPIError,
  StripeServerError,
)

STATUS_ERRORS: Dict[int, Type[StripeAPIError]] = {
  400: InvalidRequestError,
  401: AuthenticationError,
  402: CardError,
  404: InvalidRequestError,
  429: RateLimitError,
}


def _error_class_for(status_code: int) -> Type[StripeAPIError]:
  if status_code in STATUS_ERRORS:
    return STATUS_ERRORS[status_code]
  if status_code >= 500:
    return StripeServerError
  return StripeAPIError


def parse_stripe_server_error(
  response: httpx.Response,
  url: str,
  post_parameters: Optional[Mapping[str, str]] = None,
  query_parameters: Optional[Mapping[str, str]] = None,
) -> Any:
  """
  Parse a Stripe response.

  Args:
      response: Raw HTTP response
      url: URL the request was sent to
      post_parameters: Form parameters that were sent, for diagnostics
      query_parameters: Query parameters that were sent, for diagnostics

  Returns:
      Decoded JSON body of a successful (2xx) response

  Raises:
      StripeAPIError: The response carries an error status, or a successful
          response body is not JSON
  """
  status_code = response.status_code

  if 200 <= status_code < 300:
    try:
      return response.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
      raise StripeAPIError(
        f"Response body from {url} is not valid JSON: {e}",
        status_code=status_code,
        url=url,
      ) from e

  try:
    response_data = response.json()
  except (json.JSONDecodeError, UnicodeDecodeError):
    response_data = {"detail": response.text}

  error_body: Dict[str, Any] = {}
  if isinstance(response_data, dict) and isinstance(response_data.get("error"), dict):
    error_body = response_data["error"]

  message = error_body.get("message") or f"Stripe API request failed ({status_code})"

  logger.warning(
    f"Stripe API error {status_code} for {url}: {message}",
    extra={
      "component": "stripe_client",
      "action": "server_error",
      "status_code": status_code,
      "metadata": {
        "error_type": error_body.get("type"),
        "post_parameter_keys": sorted(post_parameters or {}),
        "query_parameters": dict(query_parameters or {}),
      },
    },
  )

  error_class = _error_class_for(status_code)
  raise error_class(
    message,
    status_code=status_code,
    response_data=response_data if isinstance(response_data, dict) else None,
    error_type=error_body.get("type"),
    code=error_body.get("code"),
    param=error_body.get("param"),
    url=url,
  )
