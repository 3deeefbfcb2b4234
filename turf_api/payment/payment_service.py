# turf_api/payment/payment_service.py

import logging
import math
import time
from typing import Any, Dict, Optional

from pydantic import ValidationError

from turf_api.payment.errors import GatewayError, OrderValidationError
from turf_api.payment.payment_models import (
    AMOUNT_ERROR,
    CreateOrderRequest,
    OrderNotes,
    OrderPayload,
)

logger = logging.getLogger(__name__)

CURRENCY = "INR"
RECEIPT_PREFIX = "receipt_order_"


# -------------------------------------------------
# Validate Request Body
# -------------------------------------------------
def parse_order_request(body: Any) -> CreateOrderRequest:
    """
    Validates the raw JSON body from the frontend.
    Anything that isn't a JSON object is treated as an empty body,
    so it fails on the missing amount.
    """
    if not isinstance(body, dict):
        body = {}

    try:
        return CreateOrderRequest.model_validate(body)
    except ValidationError as e:
        errors = e.errors()
        if any(err["loc"] and err["loc"][0] == "amount" for err in errors):
            raise OrderValidationError(AMOUNT_ERROR) from e
        field = errors[0]["loc"][0] if errors and errors[0]["loc"] else "body"
        raise OrderValidationError(f"Invalid value for '{field}'") from e


# -------------------------------------------------
# Build Razorpay Order Payload
# -------------------------------------------------
def to_minor_units(amount: float) -> int:
    """INR -> paise. Halves round up."""
    return int(math.floor(amount * 100 + 0.5))


def generate_receipt(now: Optional[float] = None) -> str:
    if now is None:
        now = time.time()
    return f"{RECEIPT_PREFIX}{int(now * 1000)}"


def normalize_slots(slots) -> str:
    if isinstance(slots, list):
        return ",".join(slots)
    return slots or ""


def build_order_payload(
    order_request: CreateOrderRequest, now: Optional[float] = None
) -> OrderPayload:
    return OrderPayload(
        amount=to_minor_units(order_request.amount),
        currency=CURRENCY,
        receipt=generate_receipt(now),
        notes=OrderNotes(
            activity=order_request.activity or "",
            date=order_request.date or "",
            slots=normalize_slots(order_request.slots),
        ),
    )


# -------------------------------------------------
# Create Razorpay Order
# -------------------------------------------------
def create_razorpay_order(client, payload: OrderPayload) -> Dict:
    """
    Sends the order to Razorpay and returns the order object untouched.
    Every failure (auth, network, bad request) comes back as GatewayError.
    """
    try:
        order = client.order.create(payload.model_dump())
    except Exception as e:
        raise GatewayError(f"Razorpay order creation failed: {e}") from e

    logger.info("✅ Razorpay Order Created: %s", order.get("id"))
    return order
