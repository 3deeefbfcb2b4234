# turf_api/payment/payment_routes.py

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool

from turf_api.payment.errors import GatewayError, OrderValidationError
from turf_api.payment.payment_service import (
    build_order_payload,
    create_razorpay_order,
    parse_order_request,
)
from turf_api.payment.razorpay_client import get_razorpay_client

logger = logging.getLogger(__name__)

router = APIRouter(tags=["payments"])

INVALID_JSON_ERROR = "Request body must be valid JSON"
GATEWAY_FAILURE_ERROR = "Failed to create Razorpay order"


# -------------------------------------------------
# Create Order (Frontend → Backend → Razorpay)
# -------------------------------------------------
@router.post("/create-order")
async def create_order(request: Request, client=Depends(get_razorpay_client)):
    """
    Validates the booking amount, creates a Razorpay order
    and relays the order object back to the frontend.
    """
    raw = await request.body()
    try:
        body = await request.json() if raw.strip() else {}
    except ValueError:
        return JSONResponse(status_code=400, content={"error": INVALID_JSON_ERROR})

    try:
        order_request = parse_order_request(body)
    except OrderValidationError as e:
        return JSONResponse(status_code=400, content={"error": e.message})

    payload = build_order_payload(order_request)

    try:
        order = await run_in_threadpool(create_razorpay_order, client, payload)
    except GatewayError:
        logger.exception("❌ Razorpay Error (receipt %s)", payload.receipt)
        return JSONResponse(status_code=500, content={"error": GATEWAY_FAILURE_ERROR})

    return JSONResponse(status_code=200, content=order)
