"""PDF serialization of a PdfRenderModel.

The render model is first written out as a self-contained HTML document
(one ``<section class="page">`` per page, CSS ``@page`` sized from the
model) and then converted with WeasyPrint. ``render_html`` has no third
party dependency; WeasyPrint is only imported when bytes are requested.
"""

from __future__ import annotations

import logging
from html import escape

from mesocycle_engine.exceptions import PdfRenderError
from mesocycle_engine.exports.pdf_model import PageKind, PdfRenderModel, RenderPage

logger = logging.getLogger(__name__)

_BASE_CSS = """
@page {{ size: {width}pt {height}pt; margin: 36pt; }}
body {{ font-family: Helvetica, Arial, sans-serif; font-size: 9pt; color: {text}; }}
.page {{ page-break-after: always; }}
.page:last-child {{ page-break-after: auto; }}
h1 {{ font-size: 16pt; margin: 0 0 4pt 0; }}
h2 {{ font-size: 10pt; font-weight: normal; margin: 0 0 12pt 0; }}
table {{ border-collapse: collapse; width: 100%; }}
td, th {{ border: 0.5pt solid #999; padding: 3pt; vertical-align: top; }}
.day {{ width: 14%; }}
.bar {{ height: 10pt; background: {bar}; }}
.footer {{ font-size: 8pt; text-align: right; margin-top: 12pt; }}
.box {{ display: inline-block; width: 8pt; height: 8pt; border: 0.5pt solid #333; }}
"""


def _e(value: object) -> str:
    return escape(str(value))


def _key_value_table(rows) -> str:
    body = "".join(f"<tr><th>{_e(k)}</th><td>{_e(v)}</td></tr>" for k, v in rows)
    return f"<table>{body}</table>"


def _legend(page: RenderPage) -> str:
    if not page.legend:
        return ""
    swatches = "".join(
        f'<span style="background:{_e(color)}" class="box"></span> {_e(label)} '
        for label, color in page.legend
    )
    return f'<p class="legend">{swatches}</p>'


def _week_grid(page: RenderPage, model: PdfRenderModel) -> str:
    cells = []
    for cell in page.day_cells:
        color = model.palette.get(cell.session_type, "#FFFFFF")
        cells.append(
            f'<td class="day" style="background:{_e(color)}">'
            f"<strong>{_e(cell.label)}</strong><br>{_e(cell.title)}<br>"
            f"{_e(cell.session_type.value)}<br>Effort {cell.effort}/5<br>"
            f"<small>{_e(cell.main_prescription)}</small></td>"
        )
    return f"<table><tr>{''.join(cells)}</tr></table>"


def _checklist(page: RenderPage) -> str:
    header = "".join(
        f"<th>{h}</th>"
        for h in ("Block", "Slot", "Exercise", "Prescription", "Sets", "Reps", "RIR", "Flags", "Done")
    )
    rows = "".join(
        "<tr>"
        f"<td>{_e(r.block)}</td><td>{_e(r.slot)}</td><td>{_e(r.exercise)}</td>"
        f"<td>{_e(r.prescription)}</td><td>{_e(r.sets)}</td><td>{_e(r.reps)}</td>"
        f"<td>{_e(r.rir)}</td><td>{_e(r.flags)}</td><td><span class=\"box\"></span></td>"
        "</tr>"
        for r in page.checklist
    )
    return f"<table><tr>{header}</tr>{rows}</table>"


def _progression(page: RenderPage) -> str:
    header = "".join(f"<th>{_e(h)}</th>" for h in page.table_headers)
    rows = "".join(
        "<tr>" + "".join(f"<td>{_e(v)}</td>" for v in row) + "</tr>"
        for row in page.table_rows
    )
    bars = "".join(
        f"<tr><th>Week {bar.week}</th><td>"
        f'<div class="bar" style="width:{bar.fraction * 100:.0f}%"></div></td>'
        f"<td>{bar.value:.1f}</td></tr>"
        for bar in page.chart
    )
    return f"<table><tr>{header}</tr>{rows}</table><h2>Average effort</h2><table>{bars}</table>"


def _render_page(page: RenderPage, model: PdfRenderModel) -> str:
    parts = [f"<h1>{_e(page.title)}</h1>"]
    if page.subtitle:
        parts.append(f"<h2>{_e(page.subtitle)}</h2>")

    if page.kind == PageKind.COVER:
        parts.append(_key_value_table(page.key_values))
        parts.append(_legend(page))
    elif page.kind == PageKind.WEEK_OVERVIEW:
        parts.append(_week_grid(page, model))
    elif page.kind == PageKind.SESSION_DETAIL:
        parts.append(_checklist(page))
    elif page.kind == PageKind.PROGRESSION_SUMMARY:
        parts.append(_progression(page))

    if page.lines:
        parts.append("<ul>" + "".join(f"<li>{_e(line)}</li>" for line in page.lines) + "</ul>")
    if page.page_number is not None:
        parts.append(f'<div class="footer">Page {page.page_number} of {page.page_count}</div>')

    return f'<section class="page {page.kind.value}">{"".join(parts)}</section>'


def render_html(model: PdfRenderModel) -> str:
    """Render the document as a standalone HTML string."""
    css = _BASE_CSS.format(
        width=model.page_width,
        height=model.page_height,
        text="#000000" if model.grayscale else "#222222",
        bar="#666666" if model.grayscale else "#3498DB",
    )
    body = "".join(_render_page(page, model) for page in model.pages)
    return (
        "<!DOCTYPE html><html><head><meta charset=\"utf-8\">"
        f"<style>{css}</style></head><body>{body}</body></html>"
    )


def build_pdf_bytes(model: PdfRenderModel) -> bytes:
    """Serialize the render model to PDF bytes with WeasyPrint.

    Raises:
        PdfRenderError: If WeasyPrint is not installed.
    """
    try:
        from weasyprint import HTML
    except ImportError as exc:
        raise PdfRenderError(
            "PDF export requires WeasyPrint; install the 'pdf' extra"
        ) from exc

    html = render_html(model)
    pdf = HTML(string=html).write_pdf()
    logger.info("Rendered PDF: %d pages, %d bytes", len(model.pages), len(pdf))
    return pdf
