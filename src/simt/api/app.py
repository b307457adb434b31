"""FastAPI application with lifespan and router mounting."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from simt.api.routes import ai, critical_jobs, employees, health, talent
from simt.core.config import AppSettings
from simt.core.exceptions import (
    EmptyReportError,
    ImportValidationError,
    NarrativeError,
    RecordNotFoundError,
)
from simt.core.logging_config import configure_logging
from simt.core.protocols import IFileStore, IKeyValueStore, IModelProvider
from simt.model_providers import create_model_provider
from simt.persistence import create_persistence
from simt.persistence.repository import TalentRepository
from simt.services.narratives import NarrativeService
from simt.services.reports import ReportExporter

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Initialize application resources not injected through ``create_app``."""
    settings: AppSettings = app.state.settings
    configure_logging(settings.log_level)

    if getattr(app.state, "repository", None) is None:
        repository, store, file_store = create_persistence(settings)
        app.state.repository = repository
        app.state.store = store
        app.state.exporter = ReportExporter(file_store)
    if getattr(app.state, "narratives", None) is None:
        app.state.narratives = NarrativeService(create_model_provider(settings), settings)

    logger.info("SIMT API started (environment=%s)", settings.environment)
    yield


def _register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(RecordNotFoundError)
    async def _not_found(request: Request, exc: RecordNotFoundError) -> JSONResponse:
        return JSONResponse(status_code=404, content={"detail": str(exc)})

    @app.exception_handler(ImportValidationError)
    async def _bad_import(request: Request, exc: ImportValidationError) -> JSONResponse:
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    @app.exception_handler(EmptyReportError)
    async def _empty_report(request: Request, exc: EmptyReportError) -> JSONResponse:
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    @app.exception_handler(NarrativeError)
    async def _narrative(request: Request, exc: NarrativeError) -> JSONResponse:
        return JSONResponse(status_code=502, content={"detail": str(exc)})


def create_app(
    settings: AppSettings | None = None,
    *,
    store: IKeyValueStore | None = None,
    file_store: IFileStore | None = None,
    model: IModelProvider | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Backends passed in here take precedence over the ones built from
    settings at start-up.
    """
    settings = settings or AppSettings()
    app = FastAPI(
        title="SIMT Talent Management",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    if store is not None and file_store is not None:
        app.state.store = store
        app.state.repository = TalentRepository(store)
        app.state.exporter = ReportExporter(file_store)
    if model is not None:
        app.state.narratives = NarrativeService(model, settings)

    _register_error_handlers(app)
    app.include_router(health.router)
    app.include_router(employees.router, prefix="/employees")
    app.include_router(critical_jobs.router, prefix="/critical-jobs")
    app.include_router(talent.router, prefix="/talent")
    app.include_router(ai.router, prefix="/ai")
    return app
