"""Coupons and the discounts that apply them."""

from typing import Literal

from pydantic import Field

from .common import Currency, Metadata, StripeObject, Timestamp


class Coupon(StripeObject):
  """A coupon that can be redeemed by customers or subscriptions."""

  object_name = "coupon"

  id: str
  amount_off: int | None = Field(None, description="Amount in the smallest currency unit")
  created: Timestamp
  currency: Currency | None = None
  duration: Literal["forever", "once", "repeating"]
  duration_in_months: int | None = None
  livemode: bool
  max_redemptions: int | None = None
  metadata: Metadata = Field(default_factory=dict)
  percent_off: int | None = None
  redeem_by: Timestamp | None = None
  times_redeemed: int
  valid: bool


class Discount(StripeObject):
  """A coupon applied to a customer or subscription."""

  object_name = "discount"

  coupon: Coupon
  customer: str
  end: Timestamp | None = None
  start: Timestamp
  subscription: str | None = None
