"""Spreadsheet export of an ExportModel (xlsx via pandas + openpyxl)."""

from __future__ import annotations

import logging
from io import BytesIO

import pandas as pd
from openpyxl import Workbook
from openpyxl.styles import Font
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.pagebreak import Break
from openpyxl.worksheet.worksheet import Worksheet

from mesocycle_engine.exports.model import EXPORT_HEADERS, ExportModel, Row
from mesocycle_engine.exports.options import ExportDetail

logger = logging.getLogger(__name__)

SHEET_OVERVIEW = "Overview"
SHEET_CALENDAR = "Calendar"
SHEET_WORKOUTS = "Workouts"
SHEET_PROGRESSION = "Progression"
SHEET_TRACKER = "Sessions Tracker"

XLSX_MIME_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"

_BOLD = Font(bold=True)
_MIN_WIDTH = 8
_MAX_WIDTH = 48


def rows_to_frame(rows: tuple[Row, ...], headers: tuple[str, ...]) -> pd.DataFrame:
    """Rows as a DataFrame with exactly ``headers`` as columns, in order."""
    return pd.DataFrame(list(rows), columns=list(headers)).fillna("")


def _write_frame(ws: Worksheet, frame: pd.DataFrame) -> None:
    ws.append(list(frame.columns))
    for record in frame.itertuples(index=False):
        ws.append(list(record))
    _style_header(ws)


def _style_header(ws: Worksheet) -> None:
    for cell in ws[1]:
        cell.font = _BOLD
    ws.freeze_panes = "A2"


def _fit_columns(ws: Worksheet) -> None:
    for index, column in enumerate(ws.iter_cols(values_only=True), start=1):
        longest = max(
            (max(len(line) for line in str(value).split("\n")) for value in column if value is not None),
            default=0,
        )
        width = min(_MAX_WIDTH, max(_MIN_WIDTH, longest + 2))
        ws.column_dimensions[get_column_letter(index)].width = width


def _write_tracker(ws: Worksheet, model: ExportModel) -> None:
    """Session tracker grouped by week, then by day, with a page break per week."""
    headers = EXPORT_HEADERS["sessions"]
    ws.append(list(headers))
    _style_header(ws)

    current_week = None
    current_day = None
    for row in model.session_rows:
        week = row["Week"]
        if week != current_week:
            if current_week is not None:
                ws.row_breaks.append(Break(id=ws.max_row))
            ws.append([f"Week {week}: {row['Week Objective']}"])
            ws.cell(row=ws.max_row, column=1).font = _BOLD
            current_week = week
            current_day = None
        day = row["Day Label"]
        if day != current_day:
            ws.append([f"{day}: {row['Session Type']}"])
            ws.cell(row=ws.max_row, column=1).font = Font(italic=True)
            current_day = day
        ws.append([row[h] for h in headers])


def build_excel_workbook(model: ExportModel) -> bytes:
    """Build the xlsx workbook for an export model.

    Sheets, in order: Overview, Calendar, Workouts (full detail only),
    Progression, Sessions Tracker.

    Returns:
        The workbook serialized to bytes.
    """
    wb = Workbook()
    ws_overview = wb.active
    ws_overview.title = SHEET_OVERVIEW
    overview = pd.DataFrame(
        [(row.key, row.value) for row in model.overview],
        columns=list(EXPORT_HEADERS["overview"]),
    )
    _write_frame(ws_overview, overview)

    ws_calendar = wb.create_sheet(SHEET_CALENDAR)
    _write_frame(ws_calendar, rows_to_frame(model.calendar_rows, EXPORT_HEADERS["calendar"]))

    if model.options.detail == ExportDetail.FULL:
        ws_workouts = wb.create_sheet(SHEET_WORKOUTS)
        _write_frame(ws_workouts, rows_to_frame(model.workout_rows, EXPORT_HEADERS["workouts"]))

    ws_progression = wb.create_sheet(SHEET_PROGRESSION)
    _write_frame(
        ws_progression,
        rows_to_frame(model.progression_rows, EXPORT_HEADERS["progression"]),
    )

    ws_tracker = wb.create_sheet(SHEET_TRACKER)
    _write_tracker(ws_tracker, model)

    for ws in wb.worksheets:
        _fit_columns(ws)

    buffer = BytesIO()
    wb.save(buffer)
    data = buffer.getvalue()
    logger.info(
        "Built workbook: %d sheets, %d weeks, %d bytes",
        len(wb.worksheets),
        len(model.filtered_weeks),
        len(data),
    )
    return data
