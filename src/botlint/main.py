"""FastAPI application with lifespan startup."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from botlint import __version__
from botlint.analysis.analyzer import create_analyzer
from botlint.api.routes import analyze, docs, health
from botlint.config import Settings
from botlint.logger import AnalysisLogger
from botlint.logging_config import setup_logging

_settings = Settings()
setup_logging(_settings.log_level)

_logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    # 1. Use module-level settings (single source of truth)
    settings = _settings

    # 2. Build the analyzer once; disabled means no detectors at all
    analyzer = create_analyzer(settings.enable_analyzer)

    # 3. Initialize request logger
    logger = AnalysisLogger(
        log_dir=settings.log_dir, level=settings.log_level
    )

    # 4. Store in app.state
    app.state.settings = settings
    app.state.analyzer = analyzer
    app.state.logger = logger

    _logger.info(
        "event=startup analyzer_enabled=%s detectors=%s",
        analyzer.enabled,
        ",".join(analyzer.detector_names) or "-",
    )

    yield


app = FastAPI(
    title="botlint",
    description="Static analysis for discord.js bot code",
    version=__version__,
    openapi_url="/api/openapi.json",
    docs_url="/api/swagger",
    redoc_url="/api/redoc",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=_settings.cors_origin_list,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type"],
    allow_credentials=False,
)

# Routes
app.include_router(health.router)
app.include_router(analyze.router)
app.include_router(docs.router)
