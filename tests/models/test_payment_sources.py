"""Tests for response-side payment sources and sibling resources."""

import pytest
from pydantic import TypeAdapter, ValidationError

from stripe_api.models import (
  BitcoinReceiverPaymentSource,
  CardPaymentSource,
  Discount,
  PaymentSource,
  Subscription,
)

payment_source_adapter = TypeAdapter(PaymentSource)


@pytest.fixture
def bitcoin_receiver_json():
  return {
    "object": "bitcoin_receiver",
    "id": "btcrcv_1A2b3C4d",
    "active": True,
    "amount": 1000,
    "amount_received": 0,
    "bitcoin_amount": 1757908,
    "bitcoin_amount_received": 0,
    "bitcoin_uri": "bitcoin:test_7i9Fo4ygCS8kqgNgKSuo7kJ1m6r2kRoN?amount=0.01757908",
    "created": 1609459200,
    "currency": "usd",
    "filled": False,
    "inbound_address": "test_7i9Fo4ygCS8kqgNgKSuo7kJ1m6r2kRoN",
    "livemode": False,
    "metadata": {},
  }


class TestPaymentSource:
  """PaymentSource dispatches on the object field."""

  def test_card(self, card_payment_source_json):
    source = payment_source_adapter.validate_python(card_payment_source_json)

    assert isinstance(source, CardPaymentSource)
    assert source.brand == "Visa"

  def test_bitcoin_receiver(self, bitcoin_receiver_json):
    source = payment_source_adapter.validate_python(bitcoin_receiver_json)

    assert isinstance(source, BitcoinReceiverPaymentSource)
    assert source.bitcoin_amount == 1757908
    assert source.customer is None

  def test_unknown_object_is_rejected(self, card_payment_source_json):
    card_payment_source_json["object"] = "bank_account"

    with pytest.raises(ValidationError):
      payment_source_adapter.validate_python(card_payment_source_json)

  def test_encode_keeps_object_field(self, bitcoin_receiver_json):
    source = payment_source_adapter.validate_python(bitcoin_receiver_json)

    encoded = payment_source_adapter.dump_python(source, mode="json")

    assert encoded["object"] == "bitcoin_receiver"
    assert encoded["created"] == 1609459200


class TestSiblingResources:
  def test_subscription_round_trip(self, subscription_json):
    subscription = Subscription.model_validate(subscription_json)

    assert subscription.model_dump(mode="json") == subscription_json

  def test_discount_round_trip(self, discount_json):
    discount = Discount.model_validate(discount_json)

    assert discount.coupon.percent_off == 25
    assert discount.model_dump(mode="json") == discount_json

  def test_subscription_rejects_unknown_status(self, subscription_json):
    subscription_json["status"] = "paused_forever"

    with pytest.raises(ValidationError):
      Subscription.model_validate(subscription_json)
