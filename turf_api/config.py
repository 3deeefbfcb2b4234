import logging
import os
from typing import List, Optional

from dotenv import load_dotenv
from pydantic import BaseModel

from turf_api.payment.errors import StartupConfigError

logger = logging.getLogger(__name__)

SERVICE_NAME = "Turf Booking API"
VERSION = "1.0.0"


def parse_port(value: Optional[str]) -> int:
    if not value:
        return 5000
    try:
        port = int(value)
    except ValueError:
        raise StartupConfigError(f"PORT must be an integer, got {value!r}")
    if not 0 < port < 65536:
        raise StartupConfigError(f"PORT out of range: {port}")
    return port


class Settings(BaseModel):
    """Runtime configuration, read once at process start."""

    razorpay_key_id: Optional[str] = None
    razorpay_key_secret: Optional[str] = None
    frontend_origin: str = "*"
    port: int = 5000
    environment: str = "development"

    @classmethod
    def from_env(cls) -> "Settings":
        # Load environment variables
        load_dotenv()

        return cls(
            razorpay_key_id=os.getenv("RAZORPAY_KEY_ID") or None,
            razorpay_key_secret=os.getenv("RAZORPAY_KEY_SECRET") or None,
            frontend_origin=os.getenv("FRONTEND_ORIGIN") or "*",
            port=parse_port(os.getenv("PORT")),
            environment=os.getenv("APP_ENV") or os.getenv("NODE_ENV") or "development",
        )

    @property
    def is_production(self) -> bool:
        return self.environment.strip().lower() == "production"

    @property
    def razorpay_configured(self) -> bool:
        return bool(self.razorpay_key_id and self.razorpay_key_secret)

    @property
    def allowed_origins(self) -> List[str]:
        origins = [o.strip() for o in self.frontend_origin.split(",") if o.strip()]
        return origins or ["*"]


def check_credentials(settings: Settings) -> None:
    if settings.razorpay_configured:
        return

    logger.warning("⚠️ Razorpay credentials are missing (RAZORPAY_KEY_ID / RAZORPAY_KEY_SECRET)")
    if settings.is_production:
        raise StartupConfigError(
            "Cannot start server without Razorpay credentials in production"
        )


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
