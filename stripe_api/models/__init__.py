"""
Stripe resource models.

Pydantic models mirroring the API's JSON: snake_case fields, epoch-second
timestamps, `"object"` discriminators on output.
"""

from .common import Currency, StripeObject
from .customers import (
  Card,
  Customer,
  CustomerInput,
  Source,
  Sources,
  Token,
  decode_source,
  encode_source,
)
from .discounts import Coupon, Discount
from .payment_sources import (
  BitcoinReceiverPaymentSource,
  CardPaymentSource,
  PaymentSource,
)
from .shippings import Address, Shipping
from .subscriptions import Plan, Subscription

__all__ = [
  "Address",
  "BitcoinReceiverPaymentSource",
  "Card",
  "CardPaymentSource",
  "Coupon",
  "Currency",
  "Customer",
  "CustomerInput",
  "Discount",
  "PaymentSource",
  "Plan",
  "Shipping",
  "Source",
  "Sources",
  "StripeObject",
  "Subscription",
  "Token",
  "decode_source",
  "encode_source",
]
