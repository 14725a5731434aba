import os

# EnvConfig is read at import time, so this must run before stripe_api loads
os.environ.setdefault("ENVIRONMENT", "test")

import pytest  # noqa: E402

# 2021-01-01T00:00:00Z
CREATED_AT = 1609459200


@pytest.fixture
def card_payment_source_json():
  """Stored card as it appears in a customer's sources list."""
  return {
    "object": "card",
    "id": "card_1A2b3C4d5E6f",
    "brand": "Visa",
    "exp_month": 12,
    "exp_year": 2025,
    "last4": "4242",
    "funding": "credit",
    "address_city": "Berlin",
    "address_country": "DE",
    "address_line1": "Unter den Linden 1",
    "address_line1_check": "pass",
    "address_line2": None,
    "address_state": None,
    "address_zip": "10117",
    "address_zip_check": "pass",
    "country": "US",
    "currency": None,
    "customer": "cus_9s6XKzkNRiz8i3",
    "cvc_check": "pass",
    "default_for_currency": None,
    "fingerprint": "Xt5EWLLDS7FJjR1c",
    "metadata": {},
    "name": "Jenny Rosen",
  }


@pytest.fixture
def plan_json():
  return {
    "object": "plan",
    "id": "gold",
    "amount": 2000,
    "created": CREATED_AT,
    "currency": "usd",
    "interval": "month",
    "interval_count": 1,
    "livemode": False,
    "metadata": {},
    "name": "Gold",
    "statement_descriptor": None,
    "trial_period_days": None,
  }


@pytest.fixture
def subscription_json(plan_json):
  return {
    "object": "subscription",
    "id": "sub_9s6XBvTjNTjBfA",
    "application_fee_percent": None,
    "cancel_at_period_end": False,
    "canceled_at": None,
    "created": CREATED_AT,
    "current_period_end": CREATED_AT + 2678400,
    "current_period_start": CREATED_AT,
    "customer": "cus_9s6XKzkNRiz8i3",
    "discount": None,
    "ended_at": None,
    "livemode": False,
    "metadata": {"tier": "gold"},
    "plan": plan_json,
    "quantity": 1,
    "start": CREATED_AT,
    "status": "active",
    "tax_percent": 19.5,
    "trial_end": None,
    "trial_start": None,
  }


@pytest.fixture
def discount_json():
  return {
    "object": "discount",
    "coupon": {
      "object": "coupon",
      "id": "25OFF",
      "amount_off": None,
      "created": CREATED_AT,
      "currency": None,
      "duration": "repeating",
      "duration_in_months": 3,
      "livemode": False,
      "max_redemptions": None,
      "metadata": {},
      "percent_off": 25,
      "redeem_by": None,
      "times_redeemed": 1,
      "valid": True,
    },
    "customer": "cus_9s6XKzkNRiz8i3",
    "end": CREATED_AT + 7776000,
    "start": CREATED_AT,
    "subscription": None,
  }


@pytest.fixture
def customer_json(card_payment_source_json, subscription_json, discount_json):
  """A complete customer in exactly the shape the encoder emits."""
  return {
    "object": "customer",
    "id": "cus_9s6XKzkNRiz8i3",
    "account_balance": 0,
    "created": CREATED_AT,
    "currency": "usd",
    "default_source": "card_1A2b3C4d5E6f",
    "delinquent": False,
    "description": "Jenny Rosen",
    "discount": discount_json,
    "email": "jenny.rosen@example.com",
    "livemode": False,
    "metadata": {"order_id": "6735"},
    "shipping": {
      "address": {
        "city": "Berlin",
        "country": "DE",
        "line1": "Unter den Linden 1",
        "line2": None,
        "postal_code": "10117",
        "state": None,
      },
      "name": "Jenny Rosen",
      "phone": "+49 30 1234567",
      "carrier": None,
      "tracking_number": None,
    },
    "sources": {
      "data": [card_payment_source_json],
      "has_more": False,
      "total_count": 1,
      "url": "/v1/customers/cus_9s6XKzkNRiz8i3/sources",
    },
    "subscriptions": [subscription_json],
  }
