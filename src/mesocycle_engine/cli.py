"""Command-line mesocycle generator and exporter.

Usage:
    python -m mesocycle_engine.cli --focus mixed --level intermediate --format xlsx
    python -m mesocycle_engine.cli --focus strength --level beginner --summary
    python -m mesocycle_engine.cli --focus endurance --level advanced \\
        --weeks-to-export 1,2,3 --format pdf
"""

from __future__ import annotations

import argparse
import dataclasses
import json
import logging
import sys
from pathlib import Path

from mesocycle_engine import config
from mesocycle_engine.exceptions import ConfigurationError, MesocycleError
from mesocycle_engine.exports import (
    ExportDetail,
    ExportOptions,
    ExportScope,
    PaperSize,
    PdfMode,
    export_filename,
    export_program_as_excel,
    export_program_as_pdf,
)
from mesocycle_engine.exports.mapper import utc_now_iso
from mesocycle_engine.models import Focus, Level, PlannerInputs, ProgramOutput, StrengthProfile
from mesocycle_engine.planner import generate_program, get_recommended_defaults

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Generate and export a training mesocycle")
    parser.add_argument("--focus", required=True, choices=[f.value for f in Focus])
    parser.add_argument("--level", required=True, choices=[lv.value for lv in Level])
    parser.add_argument("--weeks", type=float, help="Mesocycle length (4-12)")
    parser.add_argument("--sessions", type=float, help="Sessions per week (2-6)")
    parser.add_argument("--bias", type=float, help="Endurance share for mixed focus (0-100)")
    parser.add_argument(
        "--profile",
        default=StrengthProfile.BALANCED.value,
        choices=[p.value for p in StrengthProfile],
    )
    parser.add_argument("--weeks-to-export", help="Comma-separated week numbers, e.g. 1,3,5")
    parser.add_argument(
        "--detail",
        default=ExportDetail.FULL.value,
        choices=[d.value for d in ExportDetail],
    )
    parser.add_argument("--format", default="xlsx", choices=["xlsx", "pdf", "json"])
    parser.add_argument("--output-dir", type=Path, default=config.OUTPUT_DIR)
    parser.add_argument("--summary", action="store_true", help="Print a weekly summary")
    return parser


def build_inputs(args: argparse.Namespace) -> PlannerInputs:
    """Planner inputs from parsed arguments, filling gaps with recommended defaults."""
    defaults = get_recommended_defaults(args.level, args.focus)
    return PlannerInputs(
        focus=Focus(args.focus),
        level=Level(args.level),
        mesocycle_weeks=args.weeks if args.weeks is not None else defaults.mesocycle_weeks,
        sessions_per_week=(
            args.sessions if args.sessions is not None else defaults.sessions_per_week
        ),
        mixed_bias=args.bias if args.bias is not None else defaults.mixed_bias,
        strength_profile=StrengthProfile(args.profile),
    )


def _setting(enum_cls, value: str, name: str):
    try:
        return enum_cls(value.strip().lower())
    except ValueError:
        choices = ", ".join(member.value for member in enum_cls)
        raise ConfigurationError(
            f"{name}={value!r} is not one of: {choices}", setting=name
        ) from None


def build_options(args: argparse.Namespace) -> ExportOptions:
    selected = None
    if args.weeks_to_export:
        selected = tuple(part for part in args.weeks_to_export.split(","))
    return ExportOptions(
        scope=ExportScope.SELECTED if selected is not None else ExportScope.ALL,
        selected_weeks=selected,
        detail=ExportDetail(args.detail),
        pdf_mode=_setting(PdfMode, config.PDF_MODE, "MESOCYCLE_PDF_MODE"),
        paper_size=_setting(PaperSize, config.PAPER_SIZE, "MESOCYCLE_PAPER_SIZE"),
    )


def format_summary(program: ProgramOutput) -> str:
    lines = []
    for week in program.weeks:
        days = " ".join(
            f"{day.date_label}:{day.session_type.value[:3]}" for day in week.days
        )
        lines.append(
            f"Week {week.week_index:>2} {week.objective.value:<6} "
            f"{week.planned_session_count} sessions  avg effort {week.summary.avg_effort:.1f}  "
            f"{days}"
        )
    return "\n".join(lines)


def _write(path: Path, data: bytes) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(data)
    logger.info("Wrote %s (%d bytes)", path, len(data))


def run(args: argparse.Namespace) -> Path:
    """Generate the program and write the requested export; returns the file path."""
    program = generate_program(build_inputs(args))
    if args.summary:
        print(format_summary(program))

    now_iso = utc_now_iso()
    if args.format == "json":
        path = args.output_dir / export_filename(program, "json", now_iso)
        payload = json.dumps(dataclasses.asdict(program), indent=2, default=str)
        _write(path, payload.encode("utf-8"))
        return path

    options = build_options(args)
    if args.format == "pdf":
        artifact = export_program_as_pdf(program, options, now_iso)
    else:
        artifact = export_program_as_excel(program, options, now_iso)
    path = args.output_dir / artifact.filename
    _write(path, artifact.data)
    return path


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(
        level=getattr(logging, config.LOG_LEVEL.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    args = _build_parser().parse_args(argv)
    try:
        run(args)
    except MesocycleError as exc:
        logger.error("Export failed: %s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
