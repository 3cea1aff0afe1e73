"""Health check endpoint."""

from datetime import UTC, datetime

from fastapi import APIRouter, Depends

from botlint import __version__
from botlint.analysis.analyzer import Analyzer
from botlint.api.dependencies import get_analyzer

router = APIRouter(prefix="/api", tags=["health"])


@router.get("/health")
async def health(
    analyzer: Analyzer = Depends(get_analyzer),
) -> dict[str, object]:
    """Basic health check for load balancers."""
    return {
        "status": "healthy",
        "version": __version__,
        "analyzer_enabled": analyzer.enabled,
        "timestamp": datetime.now(UTC).isoformat(),
    }
