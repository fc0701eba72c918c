"""Export module: flat export model, spreadsheet and PDF builders."""

from mesocycle_engine.exports.excel import build_excel_workbook
from mesocycle_engine.exports.mapper import map_program_to_export_model
from mesocycle_engine.exports.model import EXPORT_HEADERS, ExportModel, OverviewRow
from mesocycle_engine.exports.options import (
    ExportDetail,
    ExportOptions,
    ExportScope,
    Orientation,
    PaperSize,
    PdfMode,
)
from mesocycle_engine.exports.pdf import build_pdf_bytes, render_html
from mesocycle_engine.exports.pdf_model import (
    PageKind,
    PdfLayoutOptions,
    PdfRenderModel,
    build_pdf_render_model,
)
from mesocycle_engine.exports.service import (
    ExportArtifact,
    export_filename,
    export_program_as_excel,
    export_program_as_pdf,
    resolve_selected_weeks,
    validate_export_options,
)

__all__ = [
    "EXPORT_HEADERS",
    "ExportArtifact",
    "ExportDetail",
    "ExportModel",
    "ExportOptions",
    "ExportScope",
    "Orientation",
    "OverviewRow",
    "PageKind",
    "PaperSize",
    "PdfLayoutOptions",
    "PdfMode",
    "PdfRenderModel",
    "build_excel_workbook",
    "build_pdf_bytes",
    "build_pdf_render_model",
    "export_filename",
    "export_program_as_excel",
    "export_program_as_pdf",
    "map_program_to_export_model",
    "render_html",
    "resolve_selected_weeks",
    "validate_export_options",
]
