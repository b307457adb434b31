"""Request-scoped accessors for resources created at application start-up."""

from __future__ import annotations

from fastapi import Request

from simt.core.config import AppSettings
from simt.core.protocols import IKeyValueStore
from simt.persistence.repository import TalentRepository
from simt.services.narratives import NarrativeService
from simt.services.reports import ReportExporter


def get_settings(request: Request) -> AppSettings:
    return request.app.state.settings


def get_store(request: Request) -> IKeyValueStore:
    return request.app.state.store


def get_repository(request: Request) -> TalentRepository:
    return request.app.state.repository


def get_narratives(request: Request) -> NarrativeService:
    return request.app.state.narratives


def get_exporter(request: Request) -> ReportExporter:
    return request.app.state.exporter
