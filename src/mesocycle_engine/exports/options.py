"""Export options shared by the mapper and the format builders."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ExportScope(str, Enum):
    ALL = "all"
    SELECTED = "selected"


class ExportDetail(str, Enum):
    CALENDAR_ONLY = "calendar-only"
    FULL = "full"


class PdfMode(str, Enum):
    COMPACT = "compact"
    DETAILED = "detailed"


class PaperSize(str, Enum):
    LETTER = "letter"
    A4 = "a4"


class Orientation(str, Enum):
    PORTRAIT = "portrait"
    LANDSCAPE = "landscape"
    AUTO = "auto"


@dataclass(frozen=True)
class ExportOptions:
    """What to export and how the document should be laid out.

    The mapper only reads ``scope``, ``selected_weeks`` and ``detail``; the
    remaining fields are passed through for the document builder.
    """

    scope: ExportScope = ExportScope.ALL
    selected_weeks: tuple[int, ...] | None = None
    detail: ExportDetail = ExportDetail.FULL
    pdf_mode: PdfMode = PdfMode.DETAILED
    paper_size: PaperSize = PaperSize.A4
    orientation: Orientation = Orientation.AUTO
    grayscale: bool = False
    ink_saver: bool = True
    include_legend: bool = True
    include_progression_chart: bool = False
