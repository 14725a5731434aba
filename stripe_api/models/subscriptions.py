"""Plans and the subscriptions customers hold to them."""

from typing import Literal

from pydantic import Field

from .common import Amount, Currency, Metadata, StripeObject, Timestamp
from .discounts import Discount


class Plan(StripeObject):
  """A recurring price a customer can subscribe to."""

  object_name = "plan"

  id: str
  amount: int = Field(..., description="Amount in the smallest currency unit")
  created: Timestamp
  currency: Currency
  interval: Literal["day", "week", "month", "year"]
  interval_count: int
  livemode: bool
  metadata: Metadata = Field(default_factory=dict)
  name: str
  statement_descriptor: str | None = None
  trial_period_days: int | None = None


class Subscription(StripeObject):
  """A customer's subscription to a plan."""

  object_name = "subscription"

  id: str
  application_fee_percent: Amount | None = None
  cancel_at_period_end: bool
  canceled_at: Timestamp | None = None
  created: Timestamp
  current_period_end: Timestamp
  current_period_start: Timestamp
  customer: str
  discount: Discount | None = None
  ended_at: Timestamp | None = None
  livemode: bool
  metadata: Metadata = Field(default_factory=dict)
  plan: Plan
  quantity: int
  start: Timestamp
  status: Literal["trialing", "active", "past_due", "canceled", "unpaid"]
  tax_percent: Amount | None = None
  trial_end: Timestamp | None = None
  trial_start: Timestamp | None = None
