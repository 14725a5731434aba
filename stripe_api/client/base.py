"""
Base Stripe API Client.

Configuration resolution and URL handling shared by client implementations.
"""

from typing import Optional
from urllib.parse import urljoin

from stripe_api.config import env
from stripe_api.logger import logger
from .config import StripeClientConfig


class BaseStripeClient:
  """Base class for Stripe API clients."""

  def __init__(
    self,
    base_url: Optional[str] = None,
    config: Optional[StripeClientConfig] = None,
    **kwargs,
  ):
    """
    Initialize the client.

    Args:
        base_url: Stripe endpoint, e.g. https://api.stripe.com
        config: Client configuration
        **kwargs: Additional config overrides (api_key, timeout, ...)
    """
    self.config = config or StripeClientConfig.from_env()

    if kwargs:
      self.config = self.config.with_overrides(**kwargs)

    if base_url:
      self.config.base_url = base_url
    self.config.base_url = self.config.base_url.rstrip("/")

    if not self.config.base_url:
      raise ValueError("base_url must be provided or set in environment")

    if self.config.api_key:
      logger.debug(f"StripeClient configured with API key {self._masked_key()}")
    elif env.is_production() or env.is_staging():
      logger.warning("StripeClient initialized without API key")
    else:
      logger.debug("StripeClient initialized without API key (development mode)")

  def _masked_key(self) -> str:
    return self.config.api_key[:8] + "..."

  def _build_url(self, path: str) -> str:
    """Build full URL from base and path."""
    if path.startswith("/"):
      path = path[1:]
    return urljoin(self.config.base_url + "/", path)
