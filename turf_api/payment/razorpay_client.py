# turf_api/payment/razorpay_client.py

import razorpay
from fastapi import Request

from turf_api.config import SERVICE_NAME, VERSION, Settings


def build_razorpay_client(settings: Settings) -> razorpay.Client:
    # Missing keys are allowed outside production; calls then fail at Razorpay
    client = razorpay.Client(
        auth=(settings.razorpay_key_id or "", settings.razorpay_key_secret or "")
    )
    client.set_app_details({
        "title": SERVICE_NAME,
        "version": VERSION,
    })
    return client


def get_razorpay_client(request: Request) -> razorpay.Client:
    return request.app.state.razorpay_client
