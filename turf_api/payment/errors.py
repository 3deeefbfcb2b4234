# turf_api/payment/errors.py


class PaymentError(Exception):
    """Base class for everything the payment flow raises on purpose."""


class OrderValidationError(PaymentError):
    """Caller sent data we can't turn into a gateway order (HTTP 400)."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class GatewayError(PaymentError):
    """Razorpay call failed for any reason (HTTP 500, detail only logged)."""


class StartupConfigError(PaymentError):
    """Required configuration missing in a strict deployment."""
