"""Shipping details attached to customers."""

from pydantic import Field

from .common import StripeObject


class Address(StripeObject):
  """Postal address."""

  city: str | None = None
  country: str | None = Field(None, description="Two-letter ISO country code")
  line1: str | None = None
  line2: str | None = None
  postal_code: str | None = None
  state: str | None = None


class Shipping(StripeObject):
  """Shipping information for a customer."""

  address: Address
  name: str
  phone: str | None = None
  carrier: str | None = None
  tracking_number: str | None = None
