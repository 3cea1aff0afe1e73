"""Documentation example lookup endpoint."""

from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends

from botlint.api.dependencies import get_request_logger
from botlint.api.schemas import APIResponse, DocsRequest
from botlint.constants import ID_HEX_LENGTH
from botlint.enrichment.examples import relevant_examples_for_text
from botlint.logger import AnalysisLogger

router = APIRouter(prefix="/api", tags=["docs"])


@router.post("/docs")
async def docs(
    body: DocsRequest,
    request_logger: AnalysisLogger = Depends(get_request_logger),
) -> APIResponse:
    """Examples whose topic appears in the posted diagnostic text."""
    request_id = uuid.uuid4().hex[:ID_HEX_LENGTH]
    try:
        examples = relevant_examples_for_text(body.text)
    except ValueError as exc:
        request_logger.log_error(request_id, "docs", str(exc))
        return APIResponse(
            success=False,
            error="Example catalog is unavailable",
            metadata={"request_id": request_id},
        )

    request_logger.log_enrichment(
        request_id=request_id,
        text_length=len(body.text),
        example_keys=list(examples),
    )
    return APIResponse(
        success=True,
        data={
            "examples": {
                key: example.model_dump(mode="json", by_alias=True)
                for key, example in examples.items()
            }
        },
        metadata={"request_id": request_id},
    )
