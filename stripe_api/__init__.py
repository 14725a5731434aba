"""
Async Stripe API client: Customer resource.
"""

from . import customers
from .client import StripeClient, StripeClientConfig, get_stripe_client
from .exceptions import InvalidJsonModelError, StripeError
from .models import Customer, CustomerInput

__all__ = [
  "Customer",
  "CustomerInput",
  "InvalidJsonModelError",
  "StripeClient",
  "StripeClientConfig",
  "StripeError",
  "customers",
  "get_stripe_client",
]
