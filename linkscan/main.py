"""Link Scanner Service — FastAPI application entry point."""

from __future__ import annotations

import logging
import time

from fastapi import FastAPI

from .api.routes import router
from .config import settings
from .engine.scanner import get_scanner
from .models import KIND_ORDER, HealthResponse

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

logger = logging.getLogger(__name__)

_start_time = time.time()

app = FastAPI(
    title="Link Scanner Service",
    version=settings.VERSION,
    description="Detects user handles, hashtags and URLs in label text",
)

app.include_router(router)


@app.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    available = get_scanner().available_kinds
    return HealthResponse(
        # A missing detector degrades results, it does not stop the service
        status="healthy" if len(available) == len(KIND_ORDER) else "degraded",
        service="linkscan",
        version=settings.VERSION,
        detectors=available,
        uptime_seconds=round(time.time() - _start_time, 2),
    )


if __name__ == "__main__":
    import uvicorn

    logger.info(f"Starting Link Scanner Service on port {settings.LINKSCAN_PORT}")
    uvicorn.run(
        "linkscan.main:app",
        host="0.0.0.0",
        port=settings.LINKSCAN_PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )
