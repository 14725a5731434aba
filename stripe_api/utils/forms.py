"""
Form-encoding helpers.

Stripe takes POST bodies as flat `application/x-www-form-urlencoded` pairs
and spells nesting with brackets: `metadata[order_id]=42`,
`source[exp_month]=12`.
"""

from datetime import datetime
from enum import Enum
from typing import Any, Mapping

from stripe_api.models.common import to_epoch_seconds

# Parameter name -> number of trailing characters left readable in logs
SENSITIVE_FORM_PARAMS = {
  "source[number]": 4,
  "source[cvc]": 0,
}


def form_value(value: Any) -> str:
  """Render a scalar the way Stripe expects it in a form body."""
  if isinstance(value, bool):
    return "true" if value else "false"
  if isinstance(value, Enum):
    return str(value.value)
  if isinstance(value, datetime):
    return str(to_epoch_seconds(value))
  return str(value)


def flatten_form_params(
  params: Mapping[str, Any], prefix: str | None = None
) -> dict[str, str]:
  """
  Flatten nested parameters into bracketed form keys.

  None values are dropped, so optional fields that are not set never reach
  the request body.

  Args:
      params: Parameter mapping, values may be scalars or nested mappings
      prefix: Key the mapping is nested under, if any

  Returns:
      Flat mapping of form keys to string values
  """
  flat: dict[str, str] = {}
  for key, value in params.items():
    if value is None:
      continue
    name = f"{prefix}[{key}]" if prefix else key
    if isinstance(value, Mapping):
      flat.update(flatten_form_params(value, name))
    else:
      flat[name] = form_value(value)
  return flat


def mask_form_params(params: Mapping[str, str]) -> dict[str, str]:
  """Copy of `params` with card numbers and CVCs masked, for logging."""
  masked = dict(params)
  for name, visible in SENSITIVE_FORM_PARAMS.items():
    value = masked.get(name)
    if value is None:
      continue
    hidden = len(value) - visible if visible else len(value)
    masked[name] = "*" * hidden + (value[-visible:] if visible else "")
  return masked
