"""Code analysis endpoint."""

from __future__ import annotations

import asyncio
import logging
import time
import uuid

from fastapi import APIRouter, Depends

from botlint.analysis.analyzer import Analyzer
from botlint.api.dependencies import (
    get_analyzer,
    get_request_logger,
    get_settings,
)
from botlint.api.schemas import AnalyzeRequest, APIResponse
from botlint.config import Settings
from botlint.constants import ID_HEX_LENGTH
from botlint.logger import AnalysisLogger

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["analyze"])


@router.post("/analyze")
async def analyze(
    body: AnalyzeRequest,
    analyzer: Analyzer = Depends(get_analyzer),
    settings: Settings = Depends(get_settings),
    request_logger: AnalysisLogger = Depends(get_request_logger),
) -> APIResponse:
    """Run every registered detector over the submitted source."""
    request_id = uuid.uuid4().hex[:ID_HEX_LENGTH]

    if len(body.code) > settings.max_code_length:
        logger.info(
            "event=analyze_rejected request_id=%s length=%d",
            request_id,
            len(body.code),
        )
        return APIResponse(
            success=False,
            error=(
                f"Code exceeds maximum length of "
                f"{settings.max_code_length} characters"
            ),
            metadata={"request_id": request_id},
        )

    started = time.perf_counter()
    result = await asyncio.to_thread(analyzer.analyze, body.code)
    duration_ms = round((time.perf_counter() - started) * 1000, 2)

    request_logger.log_analysis(
        request_id=request_id,
        code_length=len(body.code),
        diagnostic_count=len(result.diagnostics),
        detectors=analyzer.detector_names,
        duration_ms=duration_ms,
    )
    return APIResponse(
        success=True,
        data=result.to_wire(),
        metadata={
            "request_id": request_id,
            "analyzer_enabled": analyzer.enabled,
            "duration_ms": duration_ms,
        },
    )
