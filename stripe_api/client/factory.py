"""
Stripe client factory.
"""

from typing import Any, Optional

from stripe_api.logger import logger
from .client import StripeClient
from .config import StripeClientConfig


def get_stripe_client(
  api_key: Optional[str] = None,
  endpoint: Optional[str] = None,
  **overrides: Any,
) -> StripeClient:
  """
  Build a StripeClient from environment configuration.

  Args:
      api_key: Secret key, defaults to STRIPE_API_KEY
      endpoint: API endpoint, defaults to STRIPE_ENDPOINT
      **overrides: Other StripeClientConfig overrides

  Returns:
      A new client; the caller owns it and must close it
  """
  if api_key is not None:
    overrides["api_key"] = api_key
  if endpoint:
    overrides["base_url"] = endpoint
  config = StripeClientConfig.from_env().with_overrides(**overrides)

  for problem in config.validate():
    logger.warning(f"Stripe configuration problem: {problem}")

  return StripeClient(config=config)
