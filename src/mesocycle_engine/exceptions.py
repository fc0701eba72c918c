"""Custom exception hierarchy for the mesocycle engine."""

from __future__ import annotations


class MesocycleError(Exception):
    """Base exception for all mesocycle_engine errors."""


class ExportValidationError(MesocycleError):
    """Export options were rejected before mapping (e.g. no valid weeks selected)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


class PdfRenderError(MesocycleError):
    """The PDF serializer is unavailable or failed to render."""


class ConfigurationError(MesocycleError):
    """An environment setting holds a value outside its allowed choices."""

    def __init__(self, message: str, setting: str) -> None:
        super().__init__(message)
        self.setting = setting
