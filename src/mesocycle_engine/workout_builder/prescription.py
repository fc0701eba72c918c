"""Strength prescription strings: formatting, parsing and load reduction.

Strength items are prescribed as ``"<sets>x<reps> @ <rir> RIR"``, e.g.
``"4x6 @ 2 RIR"`` or ``"3x8-10 @ 2 RIR"``. Anything else (endurance
blocks, trunk rounds) is free text and does not parse.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

_PRESCRIPTION_RE = re.compile(r"^(\d+)x([\d-]+)\s@\s(\d+)\sRIR$", re.IGNORECASE)


@dataclass(frozen=True)
class ParsedPrescription:
    sets: int
    reps: str
    rir: int


def format_prescription(sets: int, reps: str, rir: int) -> str:
    return f"{sets}x{reps} @ {rir} RIR"


def parse_prescription(value: str) -> ParsedPrescription | None:
    """Parse a strength prescription; return None when it does not match."""
    match = _PRESCRIPTION_RE.match(value.strip())
    if match is None:
        return None
    return ParsedPrescription(
        sets=int(match.group(1)),
        reps=match.group(2),
        rir=int(match.group(3)),
    )


def reduce_prescription(value: str, set_floor: int) -> str:
    """Drop one set (not below ``set_floor``) and add one rep in reserve.

    Unparseable prescriptions are returned unchanged.
    """
    parsed = parse_prescription(value)
    if parsed is None:
        return value
    return format_prescription(
        max(set_floor, parsed.sets - 1),
        parsed.reps,
        parsed.rir + 1,
    )
