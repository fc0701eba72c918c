"""Paginated document render model.

Turns an ExportModel into an ordered list of typed pages. The model is
format-agnostic: it knows page kinds, titles, tables and page geometry,
but nothing about how bytes are produced (see ``exports.pdf``).

Page order:
    cover -> week-overview (one per week) -> session-detail (detailed mode
    with full detail only, one per training day) -> progression-summary
    (optional)
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from enum import Enum

from mesocycle_engine.exports.model import EXPORT_HEADERS, ExportModel, Row
from mesocycle_engine.exports.options import (
    ExportDetail,
    ExportOptions,
    Orientation,
    PaperSize,
    PdfMode,
)
from mesocycle_engine.models.enums import MAX_EFFORT, SessionType, WorkoutKind
from mesocycle_engine.models.program import DayPlan, WeekPlan, WorkoutSession
from mesocycle_engine.workout_builder.prescription import parse_prescription
from mesocycle_engine.workout_builder.strength import profile_label

# Paper sizes in PostScript points, portrait (width, height)
PAGE_SIZES: dict[PaperSize, tuple[int, int]] = {
    PaperSize.LETTER: (612, 792),
    PaperSize.A4: (595, 842),
}

COVER_TITLE = "Mesocycle Program"

USAGE_NOTES = (
    "Effort is rated 1 (very easy) to 5 (maximal) for each day.",
    "RIR = reps in reserve: stop each set with that many clean reps left.",
    "Zone targets use heart-rate zones; RPE targets use perceived exertion (1-10).",
    "Items flagged cardio-collision-adjusted are lightened because of nearby hard cardio.",
    "Deload and taper weeks drop one session and reduce load on purpose.",
)

COLOR_PALETTE: dict[SessionType, str] = {
    SessionType.STRENGTH: "#E74C3C",
    SessionType.ENDURANCE: "#3498DB",
    SessionType.MIXED: "#8E44AD",
    SessionType.REST: "#D5DBDB",
    SessionType.RECOVERY: "#AED6F1",
    SessionType.DELOAD: "#82E0AA",
}

GRAYSCALE_PALETTE: dict[SessionType, str] = {
    SessionType.STRENGTH: "#4D4D4D",
    SessionType.ENDURANCE: "#7F7F7F",
    SessionType.MIXED: "#666666",
    SessionType.REST: "#E6E6E6",
    SessionType.RECOVERY: "#CCCCCC",
    SessionType.DELOAD: "#B3B3B3",
}

# Ink saver: pale tints, rendered as outlines with light fills
INK_SAVER_PALETTE: dict[SessionType, str] = {
    SessionType.STRENGTH: "#FADBD8",
    SessionType.ENDURANCE: "#D6EAF8",
    SessionType.MIXED: "#E8DAEF",
    SessionType.REST: "#FFFFFF",
    SessionType.RECOVERY: "#EBF5FB",
    SessionType.DELOAD: "#E9F7EF",
}


class PageKind(str, Enum):
    COVER = "cover"
    WEEK_OVERVIEW = "week-overview"
    SESSION_DETAIL = "session-detail"
    PROGRESSION_SUMMARY = "progression-summary"


@dataclass(frozen=True)
class PdfLayoutOptions:
    """Document layout choices (a subset of ExportOptions plus detail)."""

    mode: PdfMode = PdfMode.DETAILED
    detail: ExportDetail = ExportDetail.FULL
    paper_size: PaperSize = PaperSize.A4
    orientation: Orientation = Orientation.AUTO
    grayscale: bool = False
    ink_saver: bool = True
    include_legend: bool = True
    include_progression_chart: bool = False

    @classmethod
    def from_export_options(cls, options: ExportOptions) -> PdfLayoutOptions:
        return cls(
            mode=options.pdf_mode,
            detail=options.detail,
            paper_size=options.paper_size,
            orientation=options.orientation,
            grayscale=options.grayscale,
            ink_saver=options.ink_saver,
            include_legend=options.include_legend,
            include_progression_chart=options.include_progression_chart,
        )


@dataclass(frozen=True)
class DayCell:
    label: str
    title: str
    session_type: SessionType
    effort: int
    main_prescription: str = ""


@dataclass(frozen=True)
class ChecklistRow:
    block: str
    slot: str
    exercise: str
    prescription: str
    sets: str = ""
    reps: str = ""
    rir: str = ""
    flags: str = ""
    done: bool = False


@dataclass(frozen=True)
class ChartBar:
    week: int
    value: float
    fraction: float  # value / MAX_EFFORT, 0-1


@dataclass(frozen=True)
class RenderPage:
    """A single page. Fields not relevant to ``kind`` stay empty."""

    kind: PageKind
    title: str
    subtitle: str = ""
    page_number: int | None = None  # None for the cover
    page_count: int = 0
    lines: tuple[str, ...] = field(default_factory=tuple)
    key_values: tuple[tuple[str, str], ...] = field(default_factory=tuple)
    legend: tuple[tuple[str, str], ...] = field(default_factory=tuple)
    day_cells: tuple[DayCell, ...] = field(default_factory=tuple)
    checklist: tuple[ChecklistRow, ...] = field(default_factory=tuple)
    table_headers: tuple[str, ...] = field(default_factory=tuple)
    table_rows: tuple[tuple[str, ...], ...] = field(default_factory=tuple)
    chart: tuple[ChartBar, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class PdfRenderModel:
    pages: tuple[RenderPage, ...]
    paper_size: PaperSize
    orientation: Orientation  # resolved: portrait or landscape
    page_width: int
    page_height: int
    grayscale: bool = False
    ink_saver: bool = False
    palette: dict[SessionType, str] = field(default_factory=dict)

    def pages_of_kind(self, kind: PageKind) -> tuple[RenderPage, ...]:
        return tuple(page for page in self.pages if page.kind == kind)


# ---------------------------------------------------------------------------
# Layout resolution
# ---------------------------------------------------------------------------


def resolve_orientation(layout: PdfLayoutOptions) -> Orientation:
    """Honor explicit orientation; auto is landscape for compact, portrait for detailed."""
    if layout.orientation in (Orientation.PORTRAIT, Orientation.LANDSCAPE):
        return layout.orientation
    return Orientation.LANDSCAPE if layout.mode == PdfMode.COMPACT else Orientation.PORTRAIT


def resolve_page_size(paper_size: PaperSize, orientation: Orientation) -> tuple[int, int]:
    width, height = PAGE_SIZES[paper_size]
    if orientation == Orientation.LANDSCAPE:
        return height, width
    return width, height


def resolve_palette(layout: PdfLayoutOptions) -> dict[SessionType, str]:
    if layout.grayscale:
        return dict(GRAYSCALE_PALETTE)
    if layout.ink_saver:
        return dict(INK_SAVER_PALETTE)
    return dict(COLOR_PALETTE)


# ---------------------------------------------------------------------------
# Page builders
# ---------------------------------------------------------------------------


def main_prescription(workout: WorkoutSession | None) -> str:
    """Headline line of a workout: the first main-set item."""
    if workout is None or len(workout.blocks) < 2 or not workout.blocks[1].items:
        return ""
    item = workout.blocks[1].items[0]
    return f"{item.name}: {item.prescription}"


def _cover_page(model: ExportModel, layout: PdfLayoutOptions) -> RenderPage:
    inputs = model.program.inputs
    input_rows = (
        ("Focus", inputs.focus.value),
        ("Level", inputs.level.value),
        ("Strength profile", profile_label(inputs.strength_profile)),
        ("Mesocycle length", f"{inputs.mesocycle_weeks} weeks"),
        ("Sessions per week", str(inputs.sessions_per_week)),
    )
    if inputs.mixed_bias is not None:
        input_rows += (("Endurance share", f"{inputs.mixed_bias}%"),)

    legend: tuple[tuple[str, str], ...] = ()
    if layout.include_legend:
        legend = tuple(
            (session_type.value, color)
            for session_type, color in resolve_palette(layout).items()
        )

    return RenderPage(
        kind=PageKind.COVER,
        title=COVER_TITLE,
        subtitle=(
            f"{inputs.focus.value} | {inputs.level.value} | "
            f"{inputs.strength_profile.value}"
        ),
        key_values=input_rows + tuple((row.key, row.value) for row in model.overview),
        lines=USAGE_NOTES,
        legend=legend,
    )


def _day_cell(day: DayPlan) -> DayCell:
    title = day.workout.title if day.workout is not None else day.session_type.value.title()
    return DayCell(
        label=day.date_label,
        title=title,
        session_type=day.session_type,
        effort=day.effort,
        main_prescription=main_prescription(day.workout),
    )


def _week_page(week: WeekPlan) -> RenderPage:
    return RenderPage(
        kind=PageKind.WEEK_OVERVIEW,
        title=f"Week {week.week_index}",
        subtitle=f"Objective: {week.objective.value}",
        day_cells=tuple(_day_cell(day) for day in week.days),
        lines=(
            f"Planned sessions: {week.planned_session_count} of {week.target_session_count}",
            f"Average effort: {week.summary.avg_effort}",
        ),
    )


def _checklist(workout: WorkoutSession) -> tuple[ChecklistRow, ...]:
    rows = []
    for block in workout.blocks:
        for item in block.items:
            parsed = parse_prescription(item.prescription)
            rows.append(ChecklistRow(
                block=block.title,
                slot=item.slot,
                exercise=item.name,
                prescription=item.prescription,
                sets=str(parsed.sets) if parsed else "",
                reps=parsed.reps if parsed else "",
                rir=str(parsed.rir) if parsed else "",
                flags=", ".join(item.flags),
            ))
    return tuple(rows)


def _session_page(week: WeekPlan, day: DayPlan) -> RenderPage:
    workout = day.workout
    lines = [f"Effort: {day.effort}/5", f"Week objective: {week.objective.value}"]
    if workout.kind == WorkoutKind.STRENGTH and workout.day_type is not None:
        lines.append(f"Day type: {workout.day_type.value}")
    if workout.target_mode is not None:
        lines.append(f"Target: {workout.target_mode.value.upper()} ({workout.target_value})")
    return RenderPage(
        kind=PageKind.SESSION_DETAIL,
        title=f"Week {week.week_index} · {day.date_label}",
        subtitle=workout.title,
        lines=tuple(lines),
        checklist=_checklist(workout),
    )


def _progression_page(rows: tuple[Row, ...], headers: tuple[str, ...]) -> RenderPage:
    chart = tuple(
        ChartBar(
            week=int(row["Week"]),
            value=float(row["Avg Effort"]),
            fraction=min(1.0, float(row["Avg Effort"]) / MAX_EFFORT),
        )
        for row in rows
    )
    return RenderPage(
        kind=PageKind.PROGRESSION_SUMMARY,
        title="Progression Summary",
        subtitle="Average effort by week",
        table_headers=headers,
        table_rows=tuple(tuple(str(row[h]) for h in headers) for row in rows),
        chart=chart,
    )


def _number_pages(pages: list[RenderPage]) -> tuple[RenderPage, ...]:
    """Number every non-cover page from 1 and stamp the shared page count."""
    numbered_count = sum(1 for page in pages if page.kind != PageKind.COVER)
    result = []
    number = 0
    for page in pages:
        if page.kind == PageKind.COVER:
            result.append(dataclasses.replace(page, page_count=numbered_count))
            continue
        number += 1
        result.append(dataclasses.replace(
            page, page_number=number, page_count=numbered_count,
        ))
    return tuple(result)


def build_pdf_render_model(
    model: ExportModel, layout: PdfLayoutOptions | None = None
) -> PdfRenderModel:
    """Lay out the export model as typed pages.

    Args:
        model: Output of map_program_to_export_model().
        layout: Layout choices; defaults to those carried by ``model.options``.

    Returns:
        PdfRenderModel with resolved orientation, page size and palette.
    """
    if layout is None:
        layout = PdfLayoutOptions.from_export_options(model.options)

    pages = [_cover_page(model, layout)]
    pages.extend(_week_page(week) for week in model.filtered_weeks)

    if layout.mode == PdfMode.DETAILED and layout.detail == ExportDetail.FULL:
        for week in model.filtered_weeks:
            pages.extend(
                _session_page(week, day)
                for day in week.days
                if day.is_training_day and day.workout is not None
            )

    if layout.include_progression_chart:
        pages.append(_progression_page(model.progression_rows, EXPORT_HEADERS["progression"]))

    orientation = resolve_orientation(layout)
    width, height = resolve_page_size(layout.paper_size, orientation)
    return PdfRenderModel(
        pages=_number_pages(pages),
        paper_size=layout.paper_size,
        orientation=orientation,
        page_width=width,
        page_height=height,
        grayscale=layout.grayscale,
        ink_saver=layout.ink_saver,
        palette=resolve_palette(layout),
    )
