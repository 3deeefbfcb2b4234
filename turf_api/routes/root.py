from fastapi import APIRouter, Request
from fastapi.responses import PlainTextResponse

from turf_api.config import SERVICE_NAME, VERSION


router = APIRouter()


@router.get("/", response_class=PlainTextResponse)
async def root():
    return f"{SERVICE_NAME} is running ✅"


@router.get("/health")
async def health_check(request: Request):
    settings = request.app.state.settings
    return {
        "status": "healthy",
        "service": SERVICE_NAME,
        "version": VERSION,
        "razorpay": "configured" if settings.razorpay_configured else "missing",
    }
