"""Export entry points: validate options, map, build, and name the artifact."""

from __future__ import annotations

import dataclasses
import logging
import math
from dataclasses import dataclass
from typing import Iterable

from mesocycle_engine.exceptions import ExportValidationError
from mesocycle_engine.exports.excel import XLSX_MIME_TYPE, build_excel_workbook
from mesocycle_engine.exports.mapper import map_program_to_export_model, utc_now_iso
from mesocycle_engine.exports.options import ExportOptions, ExportScope
from mesocycle_engine.exports.pdf import build_pdf_bytes
from mesocycle_engine.exports.pdf_model import build_pdf_render_model
from mesocycle_engine.models.program import ProgramOutput

logger = logging.getLogger(__name__)

PDF_MIME_TYPE = "application/pdf"
NO_WEEKS_MESSAGE = "Please enter at least one valid week number."


@dataclass(frozen=True)
class ExportArtifact:
    filename: str
    mime_type: str
    data: bytes


def _parse_week(value: object) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number) or number != int(number):
        return None
    return int(number)


def resolve_selected_weeks(raw: str | Iterable[object] | None, week_count: int) -> tuple[int, ...]:
    """Parse a week selection into sorted, unique week numbers in 1..week_count.

    Accepts a comma-separated string (``"1, 3,5"``) or any iterable of
    values. Entries that are not whole numbers or fall outside the program
    are dropped.
    """
    if raw is None:
        return ()
    values = raw.split(",") if isinstance(raw, str) else raw
    weeks = set()
    for value in values:
        week = _parse_week(value)
        if week is not None and 1 <= week <= week_count:
            weeks.add(week)
    return tuple(sorted(weeks))


def validate_export_options(program: ProgramOutput, options: ExportOptions) -> ExportOptions:
    """Resolve the week selection against the program.

    Returns:
        Options with ``selected_weeks`` resolved and sorted (scope=selected).

    Raises:
        ExportValidationError: If scope=selected leaves no week to export.
    """
    if options.scope != ExportScope.SELECTED or options.selected_weeks is None:
        return options
    weeks = resolve_selected_weeks(options.selected_weeks, program.week_count)
    if not weeks:
        raise ExportValidationError(NO_WEEKS_MESSAGE, field="selected_weeks")
    return dataclasses.replace(options, selected_weeks=weeks)


def export_filename(program: ProgramOutput, extension: str, now_iso: str | None = None) -> str:
    """``mesocycle-<focus>-<profile>-<YYYY-MM-DD>.<ext>``"""
    stamp = (now_iso if now_iso is not None else utc_now_iso())[:10]
    inputs = program.inputs
    return (
        f"mesocycle-{inputs.focus.value}-{inputs.strength_profile.value}"
        f"-{stamp}.{extension.lstrip('.')}"
    )


def export_program_as_excel(
    program: ProgramOutput, options: ExportOptions, now_iso: str | None = None
) -> ExportArtifact:
    """Validate options and build the xlsx workbook."""
    resolved_now = now_iso if now_iso is not None else utc_now_iso()
    options = validate_export_options(program, options)
    model = map_program_to_export_model(program, options, resolved_now)
    data = build_excel_workbook(model)
    filename = export_filename(program, "xlsx", resolved_now)
    logger.info("Exported %s (%d weeks)", filename, len(model.filtered_weeks))
    return ExportArtifact(filename=filename, mime_type=XLSX_MIME_TYPE, data=data)


def export_program_as_pdf(
    program: ProgramOutput, options: ExportOptions, now_iso: str | None = None
) -> ExportArtifact:
    """Validate options, lay out pages and render the PDF.

    Raises:
        ExportValidationError: If the week selection is empty.
        PdfRenderError: If WeasyPrint is unavailable.
    """
    resolved_now = now_iso if now_iso is not None else utc_now_iso()
    options = validate_export_options(program, options)
    model = map_program_to_export_model(program, options, resolved_now)
    render_model = build_pdf_render_model(model)
    data = build_pdf_bytes(render_model)
    filename = export_filename(program, "pdf", resolved_now)
    logger.info("Exported %s (%d pages)", filename, len(render_model.pages))
    return ExportArtifact(filename=filename, mime_type=PDF_MIME_TYPE, data=data)
