"""
Customer operations.

Only creation is supported.
"""

from typing import Optional

from pydantic import ValidationError

from stripe_api.client import StripeClient, parse_stripe_server_error
from stripe_api.exceptions import InvalidJsonModelError
from stripe_api.logger import logger, log_error
from stripe_api.models.customers import Customer, CustomerInput
from stripe_api.utils.forms import mask_form_params

CUSTOMERS_PATH = "/v1/customers"


async def create(
  client: StripeClient,
  customer_input: CustomerInput,
  idempotency_key: Optional[str] = None,
) -> Customer:
  """
  Create a customer.

  Args:
      client: Stripe client carrying the endpoint and API key
      customer_input: Customer to create
      idempotency_key: Sent as Idempotency-Key so a retried call is not
          processed twice

  Returns:
      The customer as stored by Stripe

  Raises:
      StripeTransportError: No response was received
      StripeAPIError: Stripe rejected the request
      InvalidJsonModelError: Stripe accepted the request but the response
          does not decode into a Customer
  """
  post_parameters = customer_input.to_form_parameters()

  logger.debug(
    f"Generated POST form parameters is {mask_form_params(post_parameters)}"
  )

  url, response = await client.post_form(
    CUSTOMERS_PATH, post_parameters, idempotency_key=idempotency_key
  )

  json_body = parse_stripe_server_error(response, url, post_parameters, None)

  try:
    return Customer.model_validate(json_body)
  except ValidationError as e:
    error = InvalidJsonModelError(
      status_code=response.status_code,
      url=url,
      post_parameters=post_parameters,
      query_parameters=None,
      json_body=json_body,
      errors=e.errors(include_url=False),
    )
    log_error(
      logger,
      error,
      component="customers",
      action="create",
      error_category="invalid_json_model",
      metadata={"url": url, "status_code": response.status_code},
    )
    raise error from e
