"""Tests for mapping Stripe responses onto results and API errors."""

import httpx
import pytest

from stripe_api.client.errors import parse_stripe_server_error
from stripe_api.client.exceptions import (
  AuthenticationError,
  CardError,
  InvalidRequestError,
  RateLimitError,
  StripeAPIError,
  StripeServerError,
)

URL = "https://api.stripe.test/v1/customers"


def _error_body(error_type: str, message: str, **extra) -> dict:
  return {"error": {"type": error_type, "message": message, **extra}}


class TestSuccessfulResponses:
  def test_returns_decoded_json(self):
    response = httpx.Response(200, json={"id": "cus_123"})

    assert parse_stripe_server_error(response, URL) == {"id": "cus_123"}

  def test_non_json_success_body_is_an_api_error(self):
    response = httpx.Response(200, text="<html>maintenance</html>")

    with pytest.raises(StripeAPIError) as exc_info:
      parse_stripe_server_error(response, URL)

    assert exc_info.value.status_code == 200
    assert exc_info.value.url == URL


class TestErrorResponses:
  @pytest.mark.parametrize(
    "status_code,error_class",
    [
      (400, InvalidRequestError),
      (401, AuthenticationError),
      (402, CardError),
      (404, InvalidRequestError),
      (429, RateLimitError),
      (500, StripeServerError),
      (503, StripeServerError),
    ],
  )
  def test_status_maps_to_error_class(self, status_code, error_class):
    response = httpx.Response(
      status_code, json=_error_body("api_error", "Something failed")
    )

    with pytest.raises(error_class) as exc_info:
      parse_stripe_server_error(response, URL, {"account_balance": "0"})

    assert exc_info.value.status_code == status_code
    assert exc_info.value.message == "Something failed"

  def test_card_error_details(self):
    response = httpx.Response(
      402,
      json=_error_body(
        "card_error",
        "Your card was declined.",
        code="card_declined",
        param="source",
      ),
    )

    with pytest.raises(CardError) as exc_info:
      parse_stripe_server_error(response, URL, {"source": "tok_chargeDeclined"})

    error = exc_info.value
    assert error.error_type == "card_error"
    assert error.code == "card_declined"
    assert error.param == "source"
    assert error.url == URL
    assert error.response_data["error"]["message"] == "Your card was declined."

  def test_unexpected_status_is_plain_api_error(self):
    response = httpx.Response(409, json=_error_body("idempotency_error", "Conflict"))

    with pytest.raises(StripeAPIError) as exc_info:
      parse_stripe_server_error(response, URL)

    assert type(exc_info.value) is StripeAPIError
    assert exc_info.value.error_type == "idempotency_error"

  def test_error_without_json_body(self):
    response = httpx.Response(502, text="Bad Gateway")

    with pytest.raises(StripeServerError) as exc_info:
      parse_stripe_server_error(response, URL)

    assert exc_info.value.response_data == {"detail": "Bad Gateway"}
    assert exc_info.value.error_type is None
    assert "502" in exc_info.value.message
