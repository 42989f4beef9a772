"""
Quote submission API endpoint.

Routes: POST /quote

Dependencies: fastapi, starlette, quote_service.core.intake
System role: Quote intake HTTP API
"""

import asyncio
import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool

from quote_service.api.deps import get_intake_handler, get_settings_dependency
from quote_service.configs import Settings
from quote_service.core.intake import IntakeHandler
from quote_service.models.common import QuoteSubmissionResponse

logger = logging.getLogger(__name__)

TIMEOUT_ERROR = "Request timed out. Please try again later."

router = APIRouter(tags=["quote"])


@router.post("/quote", response_model=QuoteSubmissionResponse)
async def submit_quote(
    request: Request,
    intake: IntakeHandler = Depends(get_intake_handler),
    settings: Settings = Depends(get_settings_dependency),
) -> JSONResponse:
    """
    Submit a quote request.

    The raw body is handed to the intake handler as-is so that malformed
    JSON and schema problems are reported in the handler's 400 format.

    Args:
        request: Incoming request (raw body, client address, user agent)
        intake: Injected IntakeHandler
        settings: Injected application settings

    Returns:
        JSONResponse: {"success": true, "message": ...} on 200, otherwise
        {"success": false, "error": ..., "details"?: [...]}
    """
    body = await request.body()
    source_ip = request.client.host if request.client else None
    user_agent = request.headers.get("user-agent")

    try:
        response = await asyncio.wait_for(
            run_in_threadpool(intake.handle, body, source_ip, user_agent),
            timeout=settings.intake.intake_timeout_seconds,
        )
    except asyncio.TimeoutError:
        logger.error(
            "submit_quote - Intake exceeded %.1fs",
            settings.intake.intake_timeout_seconds,
        )
        return JSONResponse(
            status_code=504,
            content=QuoteSubmissionResponse(success=False, error=TIMEOUT_ERROR).to_body(),
        )

    return JSONResponse(status_code=response.status_code, content=response.body)
