"""Link Scanner Service API routes."""

from __future__ import annotations

import logging
import time

from fastapi import APIRouter, HTTPException

from ..engine.dispatch import link_at
from ..engine.scanner import get_scanner
from ..models import (
    BatchScanRequest,
    BatchScanResponse,
    LinkAtRequest,
    LinkAtResponse,
    ScanRequest,
    ScanResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def _run_scan(request: ScanRequest) -> ScanResponse:
    start_ms = _now_ms()
    matches = get_scanner().scan(
        request.text,
        request.to_configuration(),
        request.link_targets,
    )
    return ScanResponse(matches=matches, processing_ms=_now_ms() - start_ms)


@router.post("/scan", response_model=ScanResponse)
async def scan_text(request: ScanRequest) -> ScanResponse:
    """Detect user handles, hashtags and URLs in a block of text."""
    try:
        return _run_scan(request)
    except Exception as e:
        logger.exception("Scan failed")
        raise HTTPException(status_code=500, detail=f"Scan failed: {str(e)}")


@router.post("/scan/batch", response_model=BatchScanResponse)
async def scan_batch(request: BatchScanRequest) -> BatchScanResponse:
    """Scan multiple texts in batch."""
    results = []
    for item in request.requests:
        try:
            results.append(_run_scan(item))
        except Exception as e:
            # On individual failure, return an empty result
            logger.exception("Batch item scan failed")
            results.append(ScanResponse(matches=[], error=str(e)))
    return BatchScanResponse(results=results)


@router.post("/links/at", response_model=LinkAtResponse)
async def link_at_position(request: LinkAtRequest) -> LinkAtResponse:
    """Return the link covering a character position, as a tap would resolve it."""
    try:
        result = _run_scan(request)
    except Exception as e:
        logger.exception("Link lookup failed")
        raise HTTPException(status_code=500, detail=f"Link lookup failed: {str(e)}")
    return LinkAtResponse(match=link_at(result.matches, request.position))


def _now_ms() -> int:
    return int(time.time() * 1000)
