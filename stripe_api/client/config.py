"""
Stripe API Client Configuration.
"""

import os
from typing import Dict, Any, List
from dataclasses import dataclass, field, fields

from stripe_api.config import env
from stripe_api.config.env import get_bool_env


@dataclass
class StripeClientConfig:
  """Configuration for Stripe API clients."""

  # Connection settings
  base_url: str = ""
  api_key: str = ""
  timeout: float = 30.0

  # Connection pool settings
  max_connections: int = 100
  max_keepalive_connections: int = 20
  keepalive_expiry: float = 5.0

  # Request settings
  headers: Dict[str, str] = field(default_factory=dict)
  verify_ssl: bool = True

  @classmethod
  def from_env(cls, prefix: str = "STRIPE_CLIENT_") -> "StripeClientConfig":
    """
    Create configuration from environment variables.

    Endpoint, API key and timeout fall back to the application-wide
    `EnvConfig` values when no prefixed variable is set.

    Args:
        prefix: Environment variable prefix

    Returns:
        StripeClientConfig instance
    """
    config = cls(
      base_url=env.STRIPE_ENDPOINT,
      api_key=env.STRIPE_API_KEY,
      timeout=env.STRIPE_TIMEOUT,
      max_connections=env.STRIPE_MAX_CONNECTIONS,
    )

    env_mappings = {
      "base_url": "BASE_URL",
      "api_key": "API_KEY",
      "timeout": "TIMEOUT",
      "max_connections": "MAX_CONNECTIONS",
      "max_keepalive_connections": "MAX_KEEPALIVE_CONNECTIONS",
      "keepalive_expiry": "KEEPALIVE_EXPIRY",
      "verify_ssl": "VERIFY_SSL",
    }

    for attr, env_suffix in env_mappings.items():
      value = os.environ.get(prefix + env_suffix)

      if value is not None:
        attr_type = type(getattr(config, attr))
        if attr_type is bool:
          setattr(config, attr, get_bool_env(prefix + env_suffix))
        elif attr_type in (int, float):
          setattr(config, attr, attr_type(value))
        else:
          setattr(config, attr, value)

    return config

  def with_overrides(self, **kwargs: Any) -> "StripeClientConfig":
    """
    Create a new config with overridden values.

    Args:
        **kwargs: Values to override

    Returns:
        New StripeClientConfig instance
    """
    config_dict: Dict[str, Any] = {f.name: getattr(self, f.name) for f in fields(self)}
    config_dict["headers"] = self.headers.copy()
    config_dict.update(kwargs)
    return StripeClientConfig(**config_dict)

  def validate(self) -> List[str]:
    """
    Check the settings a client would actually be built with.

    Returns:
        List of human-readable problems, empty when the configuration is usable
    """
    problems: List[str] = []

    if not self.base_url:
      problems.append("base_url must not be empty")
    elif not self.base_url.startswith(("http://", "https://")):
      problems.append("base_url must be an http(s) URL")

    if not self.api_key and not (env.is_development() or env.is_test()):
      problems.append("api_key is required outside dev/test")

    if self.timeout <= 0:
      problems.append("timeout must be positive")

    return problems
