"""Tests for shared wire types."""

from datetime import datetime, timezone, timedelta
from decimal import Decimal

import pytest

from stripe_api.models.common import (
  Currency,
  decimal_to_json,
  empty_if_null,
  from_epoch_seconds,
  to_epoch_seconds,
)


class TestEpochSeconds:
  """Conversion between epoch seconds and datetimes."""

  def test_from_epoch_seconds(self):
    assert from_epoch_seconds(1609459200) == datetime(2021, 1, 1, tzinfo=timezone.utc)

  def test_to_epoch_seconds(self):
    assert to_epoch_seconds(datetime(2021, 1, 1, tzinfo=timezone.utc)) == 1609459200

  def test_naive_datetime_is_treated_as_utc(self):
    assert to_epoch_seconds(datetime(2021, 1, 1)) == 1609459200

  def test_other_timezones_convert(self):
    berlin_winter = timezone(timedelta(hours=1))

    assert to_epoch_seconds(datetime(2021, 1, 1, 1, tzinfo=berlin_winter)) == 1609459200

  def test_datetimes_pass_through(self):
    value = datetime(2021, 1, 1, tzinfo=timezone.utc)

    assert from_epoch_seconds(value) is value

  @pytest.mark.parametrize("value", ["1609459200", 1609459200.5, True])
  def test_non_integer_values_are_rejected(self, value):
    with pytest.raises(ValueError):
      from_epoch_seconds(value)


class TestDecimalToJson:
  def test_integral_values_become_ints(self):
    assert decimal_to_json(Decimal("100")) == 100
    assert isinstance(decimal_to_json(Decimal("100.00")), int)

  def test_fractional_values_become_floats(self):
    assert decimal_to_json(Decimal("19.5")) == 19.5

  def test_values_beyond_double_precision_keep_every_digit(self):
    assert decimal_to_json(Decimal("12345678901234567.89")) == "12345678901234567.89"
    assert decimal_to_json(Decimal("0.1234567890123456789")) == "0.1234567890123456789"


def test_empty_if_null():
  assert empty_if_null(None) == {}
  assert empty_if_null({"a": "b"}) == {"a": "b"}


class TestCurrency:
  def test_lookup_is_case_insensitive(self):
    assert Currency("USD") is Currency.USD
    assert Currency("usd") is Currency.USD

  def test_iso_code(self):
    assert Currency.EUR.iso == "EUR"

  def test_unknown_code(self):
    with pytest.raises(ValueError):
      Currency("xxx")
