"""Enumerations and planning constants for the mesocycle engine.

Enum values are the strings used in exports and on the command line.
"""

from enum import Enum


class Focus(str, Enum):
    """Primary training focus of a mesocycle."""

    STRENGTH = "strength"
    ENDURANCE = "endurance"
    MIXED = "mixed"


class Level(str, Enum):
    """Athlete training age classification."""

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class StrengthProfile(str, Enum):
    """Strength sub-profile driving exercise selection."""

    BODYBUILDING = "bodybuilding"
    POWERLIFTING = "powerlifting"
    BALANCED = "balanced"
    ENDURANCE_SUPPORT = "endurance-support"


class WeekObjective(str, Enum):
    """Derived purpose of a training week within the mesocycle."""

    BUILD = "build"
    PUSH = "push"
    DELOAD = "deload"
    TAPER = "taper"


class SessionType(str, Enum):
    """Display category of a calendar day."""

    STRENGTH = "strength"
    ENDURANCE = "endurance"
    MIXED = "mixed"
    REST = "rest"
    RECOVERY = "recovery"
    DELOAD = "deload"


class WorkoutKind(str, Enum):
    """Underlying discipline of a workout session."""

    STRENGTH = "strength"
    ENDURANCE = "endurance"


class DayType(str, Enum):
    """Strength day rotation slots. The "2" variants reuse the base catalogs."""

    A = "A"
    B = "B"
    C = "C"
    A2 = "A2"
    B2 = "B2"
    C2 = "C2"

    @property
    def base(self) -> "DayType":
        return DayType(self.value[0])

    @property
    def variant_offset(self) -> int:
        return 1 if self.value.endswith("2") else 0


class EnduranceWorkoutType(str, Enum):
    """Endurance workout subtypes ordered by intensity."""

    EASY = "easy"
    LONG_EASY = "long-easy"
    TEMPO = "tempo"
    INTERVAL = "interval"


class TargetMode(str, Enum):
    """How endurance intensity is prescribed."""

    ZONE = "zone"
    RPE = "rpe"


# ---------------------------------------------------------------------------
# Input ranges
# ---------------------------------------------------------------------------
MIN_MESOCYCLE_WEEKS = 4
MAX_MESOCYCLE_WEEKS = 12
MIN_SESSIONS_PER_WEEK = 2
MAX_SESSIONS_PER_WEEK = 6
MIN_MIXED_BIAS = 0
MAX_MIXED_BIAS = 100
DEFAULT_MIXED_BIAS = 50

# ---------------------------------------------------------------------------
# Calendar layout
# ---------------------------------------------------------------------------
DAY_LABELS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")

# Planned session count -> 1-indexed training weekdays
DAY_TEMPLATES: dict[int, tuple[int, ...]] = {
    2: (2, 5),
    3: (1, 3, 5),
    4: (1, 2, 4, 5),
    5: (1, 2, 3, 5, 6),
    6: (1, 2, 3, 4, 5, 6),
}

# Deload weeks are fixed at these indexes for mesocycles of 10+ weeks
LONG_CYCLE_DELOAD_WEEKS = (4, 8)
LONG_CYCLE_THRESHOLD = 10
SHORT_CYCLE_THRESHOLD = 6

# Effort scale (1-5)
MIN_EFFORT = 1
MAX_EFFORT = 5
REST_DAY_EFFORT = 1

# ---------------------------------------------------------------------------
# Strength rotation and interference
# ---------------------------------------------------------------------------
DAY_TYPE_ROTATION = (
    DayType.A,
    DayType.B,
    DayType.C,
    DayType.A2,
    DayType.B2,
    DayType.C2,
)

MAIN_SLOTS = ("S1", "S2", "S3")
ACCESSORY_SLOTS = ("S4", "S5")
TRUNK_SLOT = "S6"

# Lower-body slots reduced when hard cardio is scheduled the same or an adjacent day
LOWER_BODY_SLOTS = frozenset({"S1", "S4"})
MAIN_SET_FLOOR = 2
ACCESSORY_SET_FLOOR = 1

HARD_ENDURANCE_TYPES = frozenset({
    EnduranceWorkoutType.TEMPO,
    EnduranceWorkoutType.INTERVAL,
})

CARDIO_COLLISION_FLAG = "cardio-collision-adjusted"
