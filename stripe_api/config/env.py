"""
Centralized environment variable configuration.

This module provides a single source of truth for all environment variables
used by the Stripe client, with type conversions and default values.

Organization:
- Helper functions for type-safe env var access
- Core application settings
- Stripe API connection settings
"""

import os
from typing import List


# ==========================================================================
# HELPER FUNCTIONS FOR TYPE-SAFE ENVIRONMENT VARIABLE ACCESS
# ==========================================================================


def get_int_env(key: str, default: int) -> int:
  """
  Get an integer environment variable with safe type conversion.

  Args:
      key: Environment variable name
      default: Default value if not set or invalid

  Returns:
      Integer value from environment or default
  """
  try:
    return int(os.getenv(key, str(default)))
  except (ValueError, TypeError):
    # Use print instead of logger to avoid circular import
    print(f"Warning: Invalid {key} value, using default: {default}")
    return default


def get_float_env(key: str, default: float) -> float:
  """
  Get a float environment variable with safe type conversion.

  Args:
      key: Environment variable name
      default: Default value if not set or invalid

  Returns:
      Float value from environment or default
  """
  try:
    return float(os.getenv(key, str(default)))
  except (ValueError, TypeError):
    print(f"Warning: Invalid {key} value, using default: {default}")
    return default


def get_bool_env(key: str, default: bool = False) -> bool:
  """Get a boolean environment variable."""
  value = os.getenv(key, str(default)).lower()
  return value in ("true", "1", "yes", "on")


def get_str_env(key: str, default: str = "") -> str:
  """Get a string environment variable."""
  return os.getenv(key, default)


# ==========================================================================
# MAIN CONFIGURATION CLASS
# ==========================================================================


class EnvConfig:
  """
  Centralized environment variable configuration.

  Values are read once at import time. Tests that need different values
  should patch the attributes rather than the environment.
  """

  # ==========================================================================
  # CORE APPLICATION SETTINGS
  # ==========================================================================

  ENVIRONMENT = get_str_env("ENVIRONMENT", "dev")
  LOG_LEVEL = get_str_env("LOG_LEVEL", "INFO")

  # ==========================================================================
  # STRIPE API
  # ==========================================================================

  STRIPE_API_KEY = get_str_env("STRIPE_API_KEY", "")
  STRIPE_ENDPOINT = get_str_env("STRIPE_ENDPOINT", "https://api.stripe.com")
  STRIPE_TIMEOUT = get_float_env("STRIPE_TIMEOUT", 30.0)
  STRIPE_MAX_CONNECTIONS = get_int_env("STRIPE_MAX_CONNECTIONS", 100)

  @classmethod
  def is_production(cls) -> bool:
    """Check if running in production."""
    return cls.ENVIRONMENT.lower() in ["prod", "production"]

  @classmethod
  def is_development(cls) -> bool:
    """Check if running in development."""
    return cls.ENVIRONMENT.lower() in ["dev", "development", "local"]

  @classmethod
  def is_staging(cls) -> bool:
    return cls.ENVIRONMENT.lower() in ["staging", "stage"]

  @classmethod
  def is_test(cls) -> bool:
    return cls.ENVIRONMENT.lower() in ["test", "testing"]

  @classmethod
  def validate(cls) -> List[str]:
    """
    Validate the loaded configuration.

    Returns:
        List of human-readable problems, empty when the configuration is usable
    """
    problems: List[str] = []

    if not cls.STRIPE_ENDPOINT:
      problems.append("STRIPE_ENDPOINT must not be empty")
    elif not cls.STRIPE_ENDPOINT.startswith(("http://", "https://")):
      problems.append("STRIPE_ENDPOINT must be an http(s) URL")

    if not cls.STRIPE_API_KEY and not (cls.is_development() or cls.is_test()):
      problems.append("STRIPE_API_KEY is required outside dev/test")

    if cls.STRIPE_TIMEOUT <= 0:
      problems.append("STRIPE_TIMEOUT must be positive")

    return problems


env = EnvConfig
