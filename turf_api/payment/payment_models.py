# turf_api/payment/payment_models.py

import math
import re
from typing import Any, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

AMOUNT_ERROR = "Valid amount (₹) is required"

DECIMAL_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
RADIX_RE = re.compile(r"0(?:[xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)")


def parse_numeric_string(value: str) -> float:
    value = value.strip()
    try:
        if DECIMAL_RE.fullmatch(value):
            return float(value)
        if RADIX_RE.fullmatch(value):
            return float(int(value, 0))
    except (OverflowError, ValueError):
        pass
    raise ValueError(AMOUNT_ERROR)


# -------------------------
# Create Order (Frontend → Backend)
# -------------------------
class CreateOrderRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    amount: float = Field(..., gt=0, description="Amount in INR (rupees)")
    activity: Optional[str] = Field(default=None, description="Booked activity")
    date: Optional[str] = Field(default=None, description="Booking date")
    slots: Optional[Union[List[str], str]] = Field(
        default=None, description="Slot label or list of slot labels"
    )

    @field_validator("amount", mode="before")
    @classmethod
    def coerce_amount(cls, value: Any) -> float:
        # Numbers, plus strings in the grammar JavaScript's Number() accepts
        if value is None or isinstance(value, bool):
            raise ValueError(AMOUNT_ERROR)
        if isinstance(value, str):
            number = parse_numeric_string(value)
        elif isinstance(value, (int, float)):
            try:
                number = float(value)
            except OverflowError:
                raise ValueError(AMOUNT_ERROR)
        else:
            raise ValueError(AMOUNT_ERROR)

        # Must still be finite once converted to paise
        if math.isnan(number) or math.isinf(number) or math.isinf(number * 100):
            raise ValueError(AMOUNT_ERROR)
        return number


# -------------------------
# Order Payload (Backend → Razorpay)
# -------------------------
class OrderNotes(BaseModel):
    activity: str = ""
    date: str = ""
    slots: str = ""


class OrderPayload(BaseModel):
    amount: int
    currency: str = "INR"
    receipt: str
    notes: OrderNotes = Field(default_factory=OrderNotes)
