"""
Stored payment sources as returned by the API.

Unlike the request-side `Source`, these always carry an `object` field, and
decoding dispatches on it.
"""

from typing import Annotated, Literal, Union

from pydantic import Field

from .common import Currency, Metadata, StripeObject, Timestamp


class CardPaymentSource(StripeObject):
  """A card saved on a customer."""

  object: Literal["card"] = "card"
  id: str
  brand: str
  exp_month: int
  exp_year: int
  last4: str
  funding: Literal["credit", "debit", "prepaid", "unknown"]
  address_city: str | None = None
  address_country: str | None = None
  address_line1: str | None = None
  address_line1_check: str | None = None
  address_line2: str | None = None
  address_state: str | None = None
  address_zip: str | None = None
  address_zip_check: str | None = None
  country: str | None = None
  currency: Currency | None = None
  customer: str | None = None
  cvc_check: str | None = None
  default_for_currency: bool | None = None
  fingerprint: str | None = None
  metadata: Metadata = Field(default_factory=dict)
  name: str | None = None


class BitcoinReceiverPaymentSource(StripeObject):
  """A bitcoin receiver attached to a customer."""

  object: Literal["bitcoin_receiver"] = "bitcoin_receiver"
  id: str
  active: bool
  amount: int
  amount_received: int
  bitcoin_amount: int
  bitcoin_amount_received: int
  bitcoin_uri: str
  created: Timestamp
  currency: Currency
  customer: str | None = None
  description: str | None = None
  email: str | None = None
  filled: bool
  inbound_address: str
  livemode: bool
  metadata: Metadata = Field(default_factory=dict)


PaymentSource = Annotated[
  Union[CardPaymentSource, BitcoinReceiverPaymentSource],
  Field(discriminator="object"),
]
