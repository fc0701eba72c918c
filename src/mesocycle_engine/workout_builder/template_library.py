"""Template library: exercise catalogs and endurance workout descriptors.

Strength catalogs are keyed by profile, base day type (A/B/C) and slot:

    S1  main lower-body lift
    S2  main upper-body push
    S3  main upper-body pull
    S4  lower-body accessory
    S5  upper-body accessory
    S6  trunk / power

The "2" day variants (A2/B2/C2) reuse the base catalog with a rotation
offset. All tables are read-only and shared by reference.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from mesocycle_engine.models.enums import (
    DayType,
    EnduranceWorkoutType,
    StrengthProfile,
    TargetMode,
    WeekObjective,
)

SlotCatalog = Mapping[str, tuple[str, ...]]


def _freeze(table: dict) -> Mapping:
    return MappingProxyType({
        key: _freeze(value) if isinstance(value, dict) else value
        for key, value in table.items()
    })


# ---------------------------------------------------------------------------
# Strength exercise catalogs
# ---------------------------------------------------------------------------

_EXERCISES = {
    StrengthProfile.BODYBUILDING: {
        DayType.A: {
            "S1": ("Hack Squat", "High-Bar Back Squat", "Leg Press"),
            "S2": ("Dumbbell Bench Press", "Machine Chest Press", "Flat Barbell Bench Press"),
            "S3": ("Chest-Supported Row", "Seated Cable Row", "Pendlay Row"),
            "S4": ("Leg Extension", "Walking Lunge", "Sissy Squat"),
            "S5": ("Cable Fly", "Dumbbell Lateral Raise", "Pec Deck"),
            "S6": ("Cable Crunch", "Hanging Knee Raise"),
        },
        DayType.B: {
            "S1": ("Romanian Deadlift", "Stiff-Leg Deadlift", "Good Morning"),
            "S2": ("Seated Dumbbell Press", "Machine Shoulder Press", "Arnold Press"),
            "S3": ("Lat Pulldown", "Weighted Pull-Up", "Single-Arm Pulldown"),
            "S4": ("Lying Leg Curl", "Seated Leg Curl", "Nordic Curl"),
            "S5": ("EZ-Bar Curl", "Incline Dumbbell Curl", "Hammer Curl"),
            "S6": ("Ab Wheel Rollout", "Decline Sit-Up"),
        },
        DayType.C: {
            "S1": ("Bulgarian Split Squat", "Smith Machine Squat", "Belt Squat"),
            "S2": ("Incline Barbell Press", "Incline Dumbbell Press", "Dips"),
            "S3": ("Meadows Row", "T-Bar Row", "Cable Pullover"),
            "S4": ("Standing Calf Raise", "Hip Thrust", "Seated Calf Raise"),
            "S5": ("Overhead Triceps Extension", "Rope Pushdown", "Skull Crusher"),
            "S6": ("Pallof Press", "Side Plank"),
        },
    },
    StrengthProfile.POWERLIFTING: {
        DayType.A: {
            "S1": ("Competition Back Squat", "Pause Squat", "Safety Bar Squat"),
            "S2": ("Competition Bench Press", "Spoto Press", "Close-Grip Bench Press"),
            "S3": ("Barbell Row", "Pendlay Row", "Seal Row"),
            "S4": ("Front Squat", "Belt Squat", "Leg Press"),
            "S5": ("Dumbbell Bench Press", "JM Press", "Triceps Pushdown"),
            "S6": ("Weighted Plank", "Box Jump"),
        },
        DayType.B: {
            "S1": ("Competition Deadlift", "Deficit Deadlift", "Block Pull"),
            "S2": ("Overhead Press", "Push Press", "Z Press"),
            "S3": ("Weighted Pull-Up", "Lat Pulldown", "Chin-Up"),
            "S4": ("Romanian Deadlift", "Glute-Ham Raise", "Back Extension"),
            "S5": ("Face Pull", "Rear Delt Fly", "Band Pull-Apart"),
            "S6": ("Broad Jump", "Hanging Leg Raise"),
        },
        DayType.C: {
            "S1": ("Pin Squat", "Tempo Squat", "High-Bar Squat"),
            "S2": ("Larsen Press", "Board Press", "Feet-Up Bench Press"),
            "S3": ("Chest-Supported Row", "Kroc Row", "Cable Row"),
            "S4": ("Walking Lunge", "Split Squat", "Leg Extension"),
            "S5": ("Dips", "Close-Grip Push-Up", "Dumbbell Floor Press"),
            "S6": ("Suitcase Carry", "Medicine Ball Slam"),
        },
    },
    StrengthProfile.BALANCED: {
        DayType.A: {
            "S1": ("Back Squat", "Goblet Squat", "Front Squat"),
            "S2": ("Bench Press", "Dumbbell Bench Press", "Push-Up"),
            "S3": ("One-Arm Dumbbell Row", "Barbell Row", "Inverted Row"),
            "S4": ("Reverse Lunge", "Step-Up", "Leg Press"),
            "S5": ("Dumbbell Lateral Raise", "Face Pull", "Biceps Curl"),
            "S6": ("Dead Bug", "Plank"),
        },
        DayType.B: {
            "S1": ("Trap Bar Deadlift", "Romanian Deadlift", "Conventional Deadlift"),
            "S2": ("Overhead Press", "Half-Kneeling Press", "Landmine Press"),
            "S3": ("Pull-Up", "Lat Pulldown", "Chin-Up"),
            "S4": ("Hip Thrust", "Hamstring Curl", "Single-Leg RDL"),
            "S5": ("Triceps Dip", "Hammer Curl", "Rear Delt Fly"),
            "S6": ("Kettlebell Swing", "Hanging Knee Raise"),
        },
        DayType.C: {
            "S1": ("Bulgarian Split Squat", "Front Squat", "Lateral Lunge"),
            "S2": ("Incline Dumbbell Press", "Dips", "Incline Bench Press"),
            "S3": ("Seated Cable Row", "Chest-Supported Row", "TRX Row"),
            "S4": ("Calf Raise", "Copenhagen Plank", "Leg Extension"),
            "S5": ("Push-Up", "Band Pull-Apart", "Dumbbell Shrug"),
            "S6": ("Farmer Carry", "Pallof Press"),
        },
    },
    StrengthProfile.ENDURANCE_SUPPORT: {
        DayType.A: {
            "S1": ("Bulgarian Split Squat", "Rear-Foot Elevated Split Squat", "Goblet Squat"),
            "S2": ("Push-Up", "Dumbbell Bench Press", "Landmine Press"),
            "S3": ("One-Arm Dumbbell Row", "TRX Row", "Inverted Row"),
            "S4": ("Single-Leg Calf Raise", "Step-Down", "Tibialis Raise"),
            "S5": ("Band Pull-Apart", "Face Pull", "Y-T-W Raise"),
            "S6": ("Dead Bug", "Pogo Hops"),
        },
        DayType.B: {
            "S1": ("Single-Leg Romanian Deadlift", "Trap Bar Deadlift", "Kettlebell Deadlift"),
            "S2": ("Half-Kneeling Press", "Dumbbell Overhead Press", "Pike Push-Up"),
            "S3": ("Lat Pulldown", "Pull-Up", "Straight-Arm Pulldown"),
            "S4": ("Hip Thrust", "Nordic Curl", "Single-Leg Glute Bridge"),
            "S5": ("Reverse Fly", "External Rotation", "Scap Push-Up"),
            "S6": ("Side Plank", "Skater Bound"),
        },
        DayType.C: {
            "S1": ("Step-Up", "Lateral Lunge", "Split Squat"),
            "S2": ("Incline Push-Up", "Dumbbell Floor Press", "Push-Up"),
            "S3": ("Chest-Supported Row", "Seated Cable Row", "Renegade Row"),
            "S4": ("Copenhagen Plank", "Soleus Raise", "Monster Walk"),
            "S5": ("Farmer Carry", "Wrist Roller", "Dumbbell Shrug"),
            "S6": ("Pallof Press", "Box Jump"),
        },
    },
}

EXERCISE_CATALOG: Mapping[StrengthProfile, Mapping[DayType, SlotCatalog]] = _freeze(_EXERCISES)

STRENGTH_PROFILE_LABELS: Mapping[StrengthProfile, str] = MappingProxyType({
    StrengthProfile.BODYBUILDING: "Bodybuilding",
    StrengthProfile.POWERLIFTING: "Powerlifting",
    StrengthProfile.BALANCED: "Balanced",
    StrengthProfile.ENDURANCE_SUPPORT: "Endurance Support Strength",
})

DAY_TYPE_LABELS: Mapping[DayType, str] = MappingProxyType({
    DayType.A: "Squat & Press",
    DayType.B: "Hinge & Pull",
    DayType.C: "Single-Leg & Incline",
    DayType.A2: "Squat & Press (variation)",
    DayType.B2: "Hinge & Pull (variation)",
    DayType.C2: "Single-Leg & Incline (variation)",
})

STRENGTH_WARMUP_NAME = "General Warm-up"
STRENGTH_WARMUP_PRESCRIPTION = "8-10 min easy cardio + dynamic mobility, 2 ramp-up sets"

# ---------------------------------------------------------------------------
# Strength prescriptions: (sets, reps, rir)
# ---------------------------------------------------------------------------

MAIN_PRESCRIPTIONS: Mapping[WeekObjective, tuple[int, str, int]] = MappingProxyType({
    WeekObjective.BUILD: (4, "6", 2),
    WeekObjective.PUSH: (4, "4", 1),
    WeekObjective.DELOAD: (2, "5", 4),
    WeekObjective.TAPER: (2, "3", 3),
})

ACCESSORY_PRESCRIPTIONS: Mapping[WeekObjective, tuple[int, str, int]] = MappingProxyType({
    WeekObjective.BUILD: (3, "8-10", 2),
    WeekObjective.PUSH: (3, "6-8", 1),
    WeekObjective.DELOAD: (2, "8", 4),
    WeekObjective.TAPER: (1, "8", 4),
})

# Trunk/power work is prescribed in rounds of short quality efforts
TRUNK_PRESCRIPTIONS: Mapping[WeekObjective, str] = MappingProxyType({
    WeekObjective.BUILD: "3 rounds x 30s quality work",
    WeekObjective.PUSH: "3 rounds x 20s explosive work",
    WeekObjective.DELOAD: "2 rounds x 20s easy work",
    WeekObjective.TAPER: "2 rounds x 15s crisp work",
})


# ---------------------------------------------------------------------------
# Endurance workout descriptors
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class EnduranceTemplate:
    """Fixed three-block structure for an endurance workout subtype.

    Attributes:
        title: Display title of the workout.
        target_mode: ZONE for aerobic work, RPE for quality work.
        target_value: Zone label or RPE range shown alongside the title.
        warmup: Warm-up block prescription.
        main_name: Name of the main-set item.
        main: Main-set prescription.
        cooldown: Cool-down block prescription.
    """

    title: str
    target_mode: TargetMode
    target_value: str
    warmup: str
    main_name: str
    main: str
    cooldown: str


ENDURANCE_TEMPLATES: Mapping[EnduranceWorkoutType, EnduranceTemplate] = MappingProxyType({
    EnduranceWorkoutType.EASY: EnduranceTemplate(
        title="Easy Aerobic",
        target_mode=TargetMode.ZONE,
        target_value="Z2",
        warmup="10 min Z1, relaxed",
        main_name="Steady aerobic",
        main="30-40 min Z2, conversational pace",
        cooldown="5 min Z1 + mobility",
    ),
    EnduranceWorkoutType.LONG_EASY: EnduranceTemplate(
        title="Long Easy",
        target_mode=TargetMode.ZONE,
        target_value="Z2",
        warmup="10 min Z1, relaxed",
        main_name="Long aerobic",
        main="60-90 min Z2, fuel every 30-45 min",
        cooldown="10 min Z1 + mobility",
    ),
    EnduranceWorkoutType.TEMPO: EnduranceTemplate(
        title="Tempo",
        target_mode=TargetMode.RPE,
        target_value="RPE 7",
        warmup="15 min Z1-Z2 + 4 strides",
        main_name="Tempo block",
        main="2 x 12 min @ RPE 7, 3 min easy between",
        cooldown="10 min Z1",
    ),
    EnduranceWorkoutType.INTERVAL: EnduranceTemplate(
        title="Intervals",
        target_mode=TargetMode.RPE,
        target_value="RPE 8-9",
        warmup="15 min Z1-Z2 + 4 strides",
        main_name="VO2 intervals",
        main="5 x 3 min @ RPE 8-9, 3 min easy between",
        cooldown="10 min Z1",
    ),
})


def get_slot_catalog(profile: StrengthProfile, day_type: DayType) -> SlotCatalog:
    """Look up the slot catalog for a profile and (possibly variant) day type.

    Raises:
        KeyError: If the profile has no catalog.
    """
    return EXERCISE_CATALOG[profile][day_type.base]


def get_endurance_template(workout_type: EnduranceWorkoutType) -> EnduranceTemplate:
    return ENDURANCE_TEMPLATES[workout_type]
