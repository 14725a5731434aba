"""
Customer resource models.

`Customer` is what the API returns; `CustomerInput` is what callers build to
create one. `Source` is the request-side payment source, either a token id
or a full card.
"""

from typing import Annotated, Any, Union

from pydantic import (
  BaseModel,
  ConfigDict,
  Discriminator,
  Field,
  Tag,
  TypeAdapter,
  model_serializer,
  model_validator,
)

from stripe_api.utils.forms import flatten_form_params
from .common import Amount, Currency, Metadata, StripeObject, Timestamp
from .discounts import Discount
from .payment_sources import PaymentSource
from .shippings import Shipping
from .subscriptions import Subscription


class Sources(StripeObject):
  """One page of a customer's stored payment sources."""

  data: list[PaymentSource]
  has_more: bool
  total_count: int
  url: str


class Customer(StripeObject):
  """A Stripe customer."""

  object_name = "customer"

  id: str
  account_balance: Amount
  created: Timestamp
  currency: Currency
  default_source: str
  delinquent: bool
  description: str
  discount: Discount | None = None
  email: str
  livemode: bool
  metadata: Metadata = Field(default_factory=dict)
  shipping: Shipping
  sources: Sources
  subscriptions: list[Subscription]


# ============================================================================
# Request-side payment source
# ============================================================================


class Token(BaseModel):
  """A source created beforehand (e.g. by Stripe.js), referenced by id."""

  model_config = ConfigDict(frozen=True)

  id: str

  @model_validator(mode="before")
  @classmethod
  def _from_bare_id(cls, data: Any) -> Any:
    if isinstance(data, str):
      return {"id": data}
    return data

  @model_serializer
  def _to_bare_id(self) -> str:
    return self.id


class Card(StripeObject):
  """Full card details sent inline."""

  object_name = "card"

  exp_month: int
  exp_year: int
  number: str
  address_city: str | None = None
  address_country: str | None = None
  address_line1: str | None = None
  address_line2: str | None = None
  address_state: str | None = None
  address_zip: str | None = None
  currency: Currency | None = None
  cvc: str | None = None
  default_for_currency: bool | None = None
  metadata: Metadata = Field(default_factory=dict)
  name: str | None = None

  def form_fields(self) -> dict[str, Any]:
    """Fields sent under `source[...]`; metadata is not among them."""
    return {
      "object": "card",
      "exp_month": self.exp_month,
      "exp_year": self.exp_year,
      "number": self.number,
      "address_city": self.address_city,
      "address_country": self.address_country,
      "address_line1": self.address_line1,
      "address_line2": self.address_line2,
      "address_state": self.address_state,
      "address_zip": self.address_zip,
      "currency": self.currency.value.lower() if self.currency else None,
      "cvc": self.cvc,
      "default_for_currency": self.default_for_currency,
      "name": self.name,
    }


def _source_shape(value: Any) -> str | None:
  if isinstance(value, (str, Token)):
    return "token"
  if isinstance(value, (dict, Card)):
    return "card"
  return None


Source = Annotated[
  Union[Annotated[Token, Tag("token")], Annotated[Card, Tag("card")]],
  Discriminator(
    _source_shape,
    custom_error_type="invalid_source",
    custom_error_message="InvalidSource",
  ),
]

SOURCE_ADAPTER: TypeAdapter[Any] = TypeAdapter(Source)


def decode_source(value: Any) -> Token | Card:
  """Decode a source from its wire value: a token id string or a card object."""
  return SOURCE_ADAPTER.validate_python(value)


def encode_source(source: Token | Card) -> Any:
  return SOURCE_ADAPTER.dump_python(source, mode="json")


# ============================================================================
# Create request
# ============================================================================


class CustomerInput(BaseModel):
  """Parameters for creating a customer."""

  account_balance: Amount
  coupon: str | None = None
  description: str | None = None
  email: str | None = None
  metadata: Metadata = Field(default_factory=dict)
  plan: str | None = None
  quantity: int | None = None
  shipping: Shipping | None = None
  source: Source | None = None
  tax_percent: Amount | None = None
  trial_end: Timestamp | None = None

  def to_form_parameters(self) -> dict[str, str]:
    """
    Encode as flat POST form parameters.

    Unset optional fields are left out entirely. Shipping is not sent.
    """
    if isinstance(self.source, Card):
      source: Any = self.source.form_fields()
    elif isinstance(self.source, Token):
      source = self.source.id
    else:
      source = None

    return flatten_form_params(
      {
        "account_balance": self.account_balance,
        "coupon": self.coupon,
        "description": self.description,
        "email": self.email,
        "plan": self.plan,
        "quantity": self.quantity,
        "tax_percent": self.tax_percent,
        "trial_end": self.trial_end,
        "metadata": self.metadata,
        "source": source,
      }
    )
