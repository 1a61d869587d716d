"""
Data models for gpp-coach.

Plain dataclasses for prescriptions flowing in and out of the scaling
engine.  Template prescriptions validate themselves on construction;
scaled results are produced by the engine and are trusted.
"""

from dataclasses import dataclass
from typing import Literal, get_args

Intensity = Literal["Low", "Moderate", "High"]
AgeGroup = Literal["14-17", "18-35", "36+"]
LegacyAgeGroup = Literal["10-13", "18+"]
Phase = Literal["GPP", "SPP", "SSP"]
DayType = Literal["lower_a", "lower_b", "upper_a", "upper_b", "power", "full_body", "recovery"]
WarmupPhase = Literal[
    "foam_rolling",
    "mobility",
    "core_isometric",
    "core_dynamic",
    "walking_drills",
    "movement_prep",
    "power_primer",
]
Section = Literal["warmup", "main", "circuit", "finisher"]
RepsUnit = Literal["reps", "seconds"]

# Total order used when capping intensity: Low < Moderate < High
INTENSITY_ORDER: tuple[Intensity, ...] = get_args(Intensity)
AGE_GROUPS: tuple[AgeGroup, ...] = get_args(AgeGroup)
PHASES: tuple[Phase, ...] = get_args(Phase)
DAY_TYPES: tuple[DayType, ...] = get_args(DayType)
WARMUP_PHASE_ORDER: tuple[WarmupPhase, ...] = get_args(WarmupPhase)
SECTIONS: tuple[Section, ...] = get_args(Section)


@dataclass(frozen=True)
class RpeTarget:
    """Rate of Perceived Exertion band (1-10 scale)."""

    min: int
    max: int


@dataclass(frozen=True)
class OneRepMaxRange:
    """Permitted load band as fractions of 1RM."""

    min: float
    max: float


# ---------------------------------------------------------------------------
# Parsed reps/duration
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ParsedReps:
    """Result of parsing a free-form reps string."""

    value: float
    unit: RepsUnit
    suffix: str | None = None


@dataclass(frozen=True)
class Reps:
    """A countable rep target, optionally per side ("5 each side")."""

    value: int
    suffix: str | None = None


@dataclass(frozen=True)
class Duration:
    """A timed target in seconds ("30s", "2 min")."""

    seconds: float


@dataclass(frozen=True)
class Amrap:
    """As many reps as possible: cannot be scaled."""


RepsVariant = Reps | Duration | Amrap


# ---------------------------------------------------------------------------
# Weighted / bodyweight scaling inputs and outputs
# ---------------------------------------------------------------------------


@dataclass
class WeightedPrescription:
    """Template prescription for a loaded (barbell/dumbbell) lift."""

    sets: int
    reps: int
    rest_seconds: int


@dataclass
class ScaledWeightedPrescription:
    """Weighted prescription after intensity scaling."""

    sets: int
    reps: int
    rest_seconds: int
    percent_of_1rm: int
    rpe_target: RpeTarget
    weight: float | None = None  # Only set when a 1RM is known


@dataclass
class BodyweightPrescription:
    """Template prescription for a bodyweight movement."""

    reps: str
    rest_seconds: int


@dataclass(frozen=True)
class Progressions:
    """Easier/harder neighbours of an exercise in the progression graph."""

    easier: str | None = None
    harder: str | None = None


@dataclass
class ScaledBodyweightPrescription:
    """Bodyweight prescription after intensity scaling and substitution."""

    exercise_slug: str
    is_substituted: bool
    reps: str
    rest_seconds: int
    rpe_target: RpeTarget


@dataclass
class AgeModifiedPrescription:
    """Output of the age/phase modifier layer."""

    sets: int
    reps: str
    intensity: Intensity
    one_rep_max_range: OneRepMaxRange


# ---------------------------------------------------------------------------
# Template-level prescription
# ---------------------------------------------------------------------------


@dataclass
class Prescription:
    """
    One exercise within a day's template (or a generated warm-up).

    order_index establishes display/execution order within the day.
    """

    exercise_slug: str
    sets: int
    reps: str
    rest_seconds: int
    order_index: int
    section: Section | None = None
    warmup_phase: WarmupPhase | None = None
    tempo: str | None = None
    intensity_percent: float | None = None  # Explicit %1RM override
    superset: str | None = None
    notes: str | None = None

    def __post_init__(self) -> None:
        """Validate prescription data."""
        if not self.exercise_slug:
            raise ValueError("exercise_slug must be non-empty")
        if self.sets <= 0:
            raise ValueError("sets must be positive")
        if not self.reps or not self.reps.strip():
            raise ValueError("reps must be a non-empty string")
        if self.rest_seconds < 0:
            raise ValueError("rest_seconds must be non-negative")
        if self.order_index < 0:
            raise ValueError("order_index must be non-negative")
        if self.section is not None and self.section not in SECTIONS:
            raise ValueError(f"Invalid section: {self.section}")
        if self.warmup_phase is not None and self.warmup_phase not in WARMUP_PHASE_ORDER:
            raise ValueError(f"Invalid warmup_phase: {self.warmup_phase}")
        if self.intensity_percent is not None and not (0 < self.intensity_percent <= 100):
            raise ValueError("intensity_percent must be in (0, 100]")
