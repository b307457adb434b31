"""SIMT exception hierarchy."""

from __future__ import annotations


class SimtError(Exception):
    """Base exception for all SIMT errors."""


class StorageError(SimtError):
    """Key/value store or file store operation failed."""


class RecordNotFoundError(SimtError):
    """Employee or critical job not present in the store."""

    def __init__(self, kind: str, record_id: str) -> None:
        self.kind = kind
        self.record_id = record_id
        super().__init__(f"{kind} {record_id!r} not found")


class ModelProviderError(SimtError):
    """Generative text provider call failed."""


class NarrativeError(SimtError):
    """AI narrative could not be produced."""


class EmptyReportError(SimtError):
    """Report requested for an empty employee collection."""


class ImportValidationError(SimtError):
    """Imported spreadsheet rows are unusable as a whole."""

    def __init__(self, sheet: str, message: str) -> None:
        self.sheet = sheet
        super().__init__(f"Sheet {sheet!r}: {message}")
