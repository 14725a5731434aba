"""
Asynchronous Stripe API Client.

Wraps an `httpx.AsyncClient` configured for Stripe: HTTP Basic auth with the
secret key, form-encoded request bodies and optional idempotency keys.
"""

import time
from typing import Dict, Mapping, Optional, Tuple

import httpx

from stripe_api.logger import logger, log_api
from .base import BaseStripeClient
from .config import StripeClientConfig
from .exceptions import StripeTimeoutError, StripeTransportError

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


class StripeClient(BaseStripeClient):
  """Asynchronous client for Stripe API operations."""

  def __init__(
    self,
    base_url: Optional[str] = None,
    config: Optional[StripeClientConfig] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
    **kwargs,
  ):
    """
    Initialize asynchronous Stripe client.

    Args:
        base_url: Stripe endpoint
        config: Client configuration
        transport: Custom httpx transport (mainly for tests)
        **kwargs: Additional config overrides
    """
    super().__init__(base_url, config, **kwargs)

    limits = httpx.Limits(
      max_connections=self.config.max_connections,
      max_keepalive_connections=self.config.max_keepalive_connections,
      keepalive_expiry=self.config.keepalive_expiry,
    )

    self.client = httpx.AsyncClient(
      base_url=self.config.base_url,
      auth=httpx.BasicAuth(self.config.api_key, ""),
      timeout=httpx.Timeout(self.config.timeout),
      limits=limits,
      headers=self.config.headers,
      verify=self.config.verify_ssl,
      transport=transport,
    )

  async def __aenter__(self):
    """Async context manager entry."""
    return self

  async def __aexit__(self, exc_type, exc_val, exc_tb):
    """Async context manager exit."""
    await self.close()

  async def close(self):
    """Close the client and cleanup resources."""
    await self.client.aclose()

  async def post_form(
    self,
    path: str,
    params: Mapping[str, str],
    idempotency_key: Optional[str] = None,
  ) -> Tuple[str, httpx.Response]:
    """
    POST form-encoded parameters.

    Args:
        path: API path, e.g. /v1/customers
        params: Flat form parameters
        idempotency_key: Sent as the Idempotency-Key header when given

    Returns:
        The absolute URL that was requested and the raw response

    Raises:
        StripeTimeoutError: The request timed out
        StripeTransportError: The request failed before a response arrived
    """
    url = self._build_url(path)

    headers: Dict[str, str] = {"Content-Type": FORM_CONTENT_TYPE}
    if idempotency_key is not None:
      headers["Idempotency-Key"] = idempotency_key

    logger.debug(f"Making request: POST {url}")
    start = time.perf_counter()

    try:
      response = await self.client.request(
        method="POST",
        url=url,
        data=dict(params),
        headers=headers,
      )
    except httpx.TimeoutException as e:
      raise StripeTimeoutError(f"Request timeout: {e}") from e
    except httpx.ConnectError as e:
      raise StripeTransportError(f"Connection error: {e}") from e
    except httpx.RequestError as e:
      raise StripeTransportError(f"Request error: {e}") from e

    duration_ms = (time.perf_counter() - start) * 1000
    log_api(
      "POST",
      path,
      response.status_code,
      duration_ms,
      request_id=response.headers.get("Request-Id"),
    )

    return url, response
