"""
Stripe API Client - Async client for the Stripe REST API.
"""

from .client import StripeClient
from .config import StripeClientConfig
from .errors import parse_stripe_server_error
from .exceptions import (
  AuthenticationError,
  CardError,
  InvalidRequestError,
  RateLimitError,
  StripeAPIError,
  StripeServerError,
  StripeTimeoutError,
  StripeTransportError,
)
from .factory import get_stripe_client

__all__ = [
  "AuthenticationError",
  "CardError",
  "InvalidRequestError",
  "RateLimitError",
  "StripeAPIError",
  "StripeClient",
  "StripeClientConfig",
  "StripeServerError",
  "StripeTimeoutError",
  "StripeTransportError",
  "get_stripe_client",
  "parse_stripe_server_error",
]
