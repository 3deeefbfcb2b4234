import logging
import sys
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from turf_api.config import (
    SERVICE_NAME,
    VERSION,
    Settings,
    check_credentials,
    configure_logging,
)
from turf_api.payment import payment_routes
from turf_api.payment.errors import StartupConfigError
from turf_api.payment.razorpay_client import build_razorpay_client
from turf_api.routes import root

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    if settings is None:
        settings = Settings.from_env()

    # Raises StartupConfigError before anything is served
    check_credentials(settings)

    # ---------------------------------------------------
    # Create FastAPI Application
    # ---------------------------------------------------
    app = FastAPI(
        title=SERVICE_NAME,
        description="Creates Razorpay orders for turf bookings",
        version=VERSION,
    )
    app.state.settings = settings
    app.state.razorpay_client = build_razorpay_client(settings)

    # ---------------------------------------------------
    # CORS CONFIG
    # ---------------------------------------------------
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ---------------------------------------------------
    # Register API Routes
    # ---------------------------------------------------
    app.include_router(root.router)
    app.include_router(payment_routes.router)

    return app


def run() -> None:
    import uvicorn

    configure_logging()

    try:
        settings = Settings.from_env()
        application = create_app(settings)
    except StartupConfigError as e:
        logger.error("❌ %s", e)
        sys.exit(1)

    logger.info("🚀 Backend running on http://localhost:%s", settings.port)
    uvicorn.run(
        application,
        host="0.0.0.0",
        port=settings.port,
        log_level="info",
        access_log=True,
    )


# ---------------------------------------------------
# Local Development Server
# ---------------------------------------------------
if __name__ == "__main__":
    run()
