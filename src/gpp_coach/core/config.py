"""
Configuration constants for the workout prescription engine.

All scaling coefficients, age rules and phase ranges are centralized here
for easy tuning.  Tables are built once at import time and must be treated
as read-only by every caller.
"""

from dataclasses import dataclass
from typing import Final, Literal

from .models import AgeGroup, Intensity, LegacyAgeGroup, Phase

# =============================================================================
# ROUNDING / FLOORS
# =============================================================================

MIN_SETS: Final[int] = 1  # Scaled sets never drop below one
MIN_REPS: Final[int] = 1  # Scaled reps never drop below one
MIN_REST_SECONDS: Final[int] = 15  # Scaled rest floor
MIN_DURATION_SECONDS: Final[int] = 5  # Scaled hold/interval floor
DURATION_ROUNDING_SECONDS: Final[int] = 5  # Durations snap to 5 s steps
WEIGHT_INCREMENT: Final[float] = 2.5  # Smallest plate jump (lb or kg)
EPLEY_DIVISOR: Final[float] = 30.0  # 1RM = w * (1 + reps / 30)

# =============================================================================
# INTENSITY MATRIX (weighted exercises)
#
# | Variable          | Low    | Moderate | High   |
# |-------------------|--------|----------|--------|
# | Weight (% of 1RM) | 60-70% | 75-80%   | 85-90% |
# | Sets              | 0.75x  | 1x       | 1.25x  |
# | Reps              | 1x     | 1x       | 0.85x  |
# | Rest              | 1.25x  | 1x       | 0.75x  |
# | RPE target        | 5-6    | 6-7      | 8-9    |
# =============================================================================


@dataclass(frozen=True)
class IntensityConfig:
    """Scaling coefficients for one intensity level."""

    one_rep_max_min: float  # Lower bound of the %1RM band (fraction)
    one_rep_max_max: float  # Upper bound of the %1RM band (fraction)
    sets_multiplier: float
    reps_multiplier: float
    rest_multiplier: float
    rpe_min: int
    rpe_max: int

    @property
    def avg_one_rep_max_percent(self) -> float:
        return (self.one_rep_max_min + self.one_rep_max_max) / 2


INTENSITY_CONFIG: Final[dict[Intensity, IntensityConfig]] = {
    "Low": IntensityConfig(
        one_rep_max_min=0.60,
        one_rep_max_max=0.70,
        sets_multiplier=0.75,
        reps_multiplier=1.0,
        rest_multiplier=1.25,
        rpe_min=5,
        rpe_max=6,
    ),
    "Moderate": IntensityConfig(
        one_rep_max_min=0.75,
        one_rep_max_max=0.80,
        sets_multiplier=1.0,
        reps_multiplier=1.0,
        rest_multiplier=1.0,
        rpe_min=6,
        rpe_max=7,
    ),
    "High": IntensityConfig(
        one_rep_max_min=0.85,
        one_rep_max_max=0.90,
        sets_multiplier=1.25,
        reps_multiplier=0.85,
        rest_multiplier=0.75,
        rpe_min=8,
        rpe_max=9,
    ),
}

# =============================================================================
# BODYWEIGHT MODIFIERS
#
# Reps and duration are tracked separately so they can be tuned apart;
# today both use the same ≈2/3 and ≈4/3 factors.
# =============================================================================


@dataclass(frozen=True)
class BodyweightIntensityConfig:
    """Volume multipliers for bodyweight movements at one intensity."""

    reps_multiplier: float
    duration_multiplier: float


BODYWEIGHT_INTENSITY_CONFIG: Final[dict[Intensity, BodyweightIntensityConfig]] = {
    "Low": BodyweightIntensityConfig(reps_multiplier=0.67, duration_multiplier=0.67),
    "Moderate": BodyweightIntensityConfig(reps_multiplier=1.0, duration_multiplier=1.0),
    "High": BodyweightIntensityConfig(reps_multiplier=1.33, duration_multiplier=1.33),
}

# =============================================================================
# AGE RULES
#
# | Age group     | Max intensity | 1RM ceiling | Max sets | Reps x |
# |---------------|---------------|-------------|----------|--------|
# | 10-13 (legacy)| Moderate      | 65%         | 3        | 1.2    |
# | 14-17         | High          | 85%         | 5        | 1.0    |
# | 18-35         | High          | 90%         | 6        | 1.0    |
# | 36+           | High          | 90%         | 6        | 1.0    |
# =============================================================================


@dataclass(frozen=True)
class AgeIntensityRules:
    """Safety ceilings applied to every prescription for one age group."""

    max_intensity: Intensity
    one_rep_max_ceiling: float
    plyometric_allowed: bool
    max_sets_per_exercise: int
    max_reps_multiplier: float  # >1.0 means more reps at a lighter load


AGE_INTENSITY_RULES: Final[dict[AgeGroup | LegacyAgeGroup, AgeIntensityRules]] = {
    "10-13": AgeIntensityRules(
        max_intensity="Moderate",
        one_rep_max_ceiling=0.65,
        plyometric_allowed=True,
        max_sets_per_exercise=3,
        max_reps_multiplier=1.2,
    ),
    "14-17": AgeIntensityRules(
        max_intensity="High",
        one_rep_max_ceiling=0.85,
        plyometric_allowed=True,
        max_sets_per_exercise=5,
        max_reps_multiplier=1.0,
    ),
    "18-35": AgeIntensityRules(
        max_intensity="High",
        one_rep_max_ceiling=0.90,
        plyometric_allowed=True,
        max_sets_per_exercise=6,
        max_reps_multiplier=1.0,
    ),
    "36+": AgeIntensityRules(
        max_intensity="High",
        one_rep_max_ceiling=0.90,
        plyometric_allowed=True,
        max_sets_per_exercise=6,
        max_reps_multiplier=1.0,
    ),
}

DEFAULT_AGE_GROUP: Final[AgeGroup] = "18-35"

# Legacy intake values → current buckets
LEGACY_AGE_GROUP_MAP: Final[dict[str, AgeGroup]] = {
    "10-13": "14-17",
    "18+": "18-35",
}

# =============================================================================
# PHASE RANGES
#
# | Phase | 1RM range | Focus                                       |
# |-------|-----------|---------------------------------------------|
# | GPP   | 60-75%    | Foundation, movement quality, work capacity |
# | SPP   | 75-85%    | Sport-specific strength, power development  |
# | SSP   | 85-90%    | Peaking, maintain gains, competition prep   |
# =============================================================================


@dataclass(frozen=True)
class PhaseIntensityRange:
    """Permitted %1RM band for one training phase."""

    min: float
    max: float


PHASE_INTENSITY_RANGES: Final[dict[Phase, PhaseIntensityRange]] = {
    "GPP": PhaseIntensityRange(min=0.60, max=0.75),
    "SPP": PhaseIntensityRange(min=0.75, max=0.85),
    "SSP": PhaseIntensityRange(min=0.85, max=0.90),
}

# =============================================================================
# SPORT CATEGORIES
#
# | ID | Category   | Sports                       |
# |----|------------|------------------------------|
# | 1  | Endurance  | Soccer, Hockey, Lacrosse     |
# | 2  | Power      | Basketball, Volleyball       |
# | 3  | Rotational | Baseball, Tennis, Golf       |
# | 4  | Strength   | Wrestling, Football          |
#
# Each category/phase cell holds ranges; the athlete's age and experience
# pick a position inside each range (see AGE_EXPERIENCE_MATRIX).
# =============================================================================

CategoryId = Literal[1, 2, 3, 4]
ExperienceBucket = Literal["0-1", "2-5", "6+"]
ExerciseFocus = Literal["strength", "power", "bodyweight"]
RangePosition = Literal[
    "lowest",
    "lowest_plus_1",
    "lowest_plus_2",
    "second_lowest",
    "middle",
    "max_minus_2",
    "max_minus_1",
    "max",
]
VariantChoice = Literal["easier", "base", "harder"]
TempoPart = int | Literal["x"]  # "x" = explosive / as fast as possible


@dataclass(frozen=True)
class ParameterRange:
    min: float
    max: float


@dataclass(frozen=True)
class Tempo:
    """Eccentric / isometric / concentric seconds."""

    eccentric: TempoPart
    isometric: TempoPart
    concentric: TempoPart


@dataclass(frozen=True)
class CategoryPhaseConfig:
    """Prescription ranges for one sport category in one phase."""

    one_rep_max_strength: ParameterRange
    one_rep_max_power: ParameterRange
    reps_strength: ParameterRange
    reps_power: ParameterRange
    sets: ParameterRange
    rest_strength: int
    rest_power: int
    tempo: Tempo
    rpe: ParameterRange


def _cell(
    orm_strength: tuple[float, float],
    orm_power: tuple[float, float],
    reps_strength: tuple[int, int],
    reps_power: tuple[int, int],
    sets: tuple[int, int],
    rest: tuple[int, int],
    tempo: tuple[TempoPart, TempoPart, TempoPart],
    rpe: tuple[int, int],
) -> CategoryPhaseConfig:
    return CategoryPhaseConfig(
        one_rep_max_strength=ParameterRange(*orm_strength),
        one_rep_max_power=ParameterRange(*orm_power),
        reps_strength=ParameterRange(*reps_strength),
        reps_power=ParameterRange(*reps_power),
        sets=ParameterRange(*sets),
        rest_strength=rest[0],
        rest_power=rest[1],
        tempo=Tempo(*tempo),
        rpe=ParameterRange(*rpe),
    )


_EXPLOSIVE: Final = ("x", "x", "x")

#                 1RM strength    1RM power      reps str  reps pwr  sets    rest(s,p)  tempo      RPE
CATEGORY_PHASE_CONFIG: Final[dict[CategoryId, dict[Phase, CategoryPhaseConfig]]] = {
    1: {
        "GPP": _cell((0.50, 0.65), (0.30, 0.30), (10, 14), (6, 8), (4, 6), (30, 60), (2, 1, 2), (6, 7)),
        "SPP": _cell((0.65, 0.75), (0.40, 0.40), (6, 8), (4, 6), (4, 6), (60, 60), (2, 0, 2), (7, 8)),
        "SSP": _cell((0.75, 0.80), (0.55, 0.55), (4, 6), (4, 6), (3, 5), (60, 60), _EXPLOSIVE, (8, 9)),
    },
    2: {
        "GPP": _cell((0.55, 0.65), (0.35, 0.35), (10, 14), (6, 8), (4, 6), (30, 60), (1, 1, 1), (6, 7)),
        "SPP": _cell((0.65, 0.80), (0.45, 0.45), (8, 12), (4, 6), (4, 6), (60, 60), (2, 0, 2), (7, 8)),
        "SSP": _cell((0.80, 0.90), (0.50, 0.60), (4, 6), (3, 6), (4, 6), (120, 120), _EXPLOSIVE, (9, 9)),
    },
    3: {
        "GPP": _cell((0.50, 0.60), (0.30, 0.30), (10, 14), (8, 10), (2, 4), (40, 60), (2, 0, 2), (6, 7)),
        "SPP": _cell((0.60, 0.70), (0.35, 0.40), (8, 12), (6, 8), (3, 5), (90, 60), (2, 0, 2), (7, 8)),
        "SSP": _cell((0.70, 0.85), (0.50, 0.50), (4, 6), (3, 6), (4, 6), (120, 120), _EXPLOSIVE, (8, 9)),
    },
    4: {
        "GPP": _cell((0.60, 0.70), (0.35, 0.40), (10, 12), (6, 8), (3, 5), (30, 60), (2, 1, 2), (7, 7)),
        "SPP": _cell((0.70, 0.85), (0.45, 0.50), (8, 12), (4, 6), (4, 5), (90, 60), (2, 0, 2), (7, 9)),
        "SSP": _cell((0.85, 0.90), (0.55, 0.55), (3, 5), (3, 6), (4, 6), (120, 120), _EXPLOSIVE, (8, 9)),
    },
}

CATEGORY_NAMES: Final[dict[CategoryId, str]] = {
    1: "Endurance",
    2: "Power",
    3: "Rotational",
    4: "Strength",
}

CATEGORY_SPORTS: Final[dict[CategoryId, tuple[str, ...]]] = {
    1: ("Soccer", "Hockey", "Lacrosse"),
    2: ("Basketball", "Volleyball"),
    3: ("Baseball", "Tennis", "Golf"),
    4: ("Wrestling", "Football"),
}

# Tags marking an exercise as power-focused for category parameters
POWER_TAGS: Final[frozenset[str]] = frozenset({"power", "explosive", "plyometric", "reactive"})

# =============================================================================
# AGE × EXPERIENCE POSITIONS
#
# Where inside a category range an athlete lands.  For a 4-6 sets range:
# lowest = 4, middle = 5, max = 6.
# =============================================================================


@dataclass(frozen=True)
class RangePositions:
    sets: RangePosition
    reps: RangePosition


_ADULT_POSITIONS: Final[dict[ExperienceBucket, RangePositions]] = {
    "0-1": RangePositions(sets="max", reps="max_minus_2"),
    "2-5": RangePositions(sets="max", reps="max_minus_1"),
    "6+": RangePositions(sets="max", reps="max"),
}

AGE_EXPERIENCE_MATRIX: Final[dict[AgeGroup | LegacyAgeGroup, dict[ExperienceBucket, RangePositions]]] = {
    "10-13": {
        "0-1": RangePositions(sets="lowest", reps="lowest"),
        "2-5": RangePositions(sets="lowest_plus_1", reps="lowest_plus_2"),
        "6+": RangePositions(sets="second_lowest", reps="max_minus_1"),
    },
    "14-17": {
        "0-1": RangePositions(sets="middle", reps="middle"),
        "2-5": RangePositions(sets="max", reps="max_minus_1"),
        "6+": RangePositions(sets="max", reps="max"),
    },
    "18-35": _ADULT_POSITIONS,
    "36+": _ADULT_POSITIONS,
}


@dataclass(frozen=True)
class AgeSafetyConstraint:
    """Hard caps overriding category ranges for an age group."""

    max_sets: int | None  # None = no extra cap
    one_rep_max_ceiling: float


AGE_SAFETY_CONSTRAINTS: Final[dict[AgeGroup | LegacyAgeGroup, AgeSafetyConstraint]] = {
    "10-13": AgeSafetyConstraint(max_sets=3, one_rep_max_ceiling=0.65),
    "14-17": AgeSafetyConstraint(max_sets=None, one_rep_max_ceiling=0.85),
    "18-35": AgeSafetyConstraint(max_sets=None, one_rep_max_ceiling=0.90),
    "36+": AgeSafetyConstraint(max_sets=None, one_rep_max_ceiling=0.90),
}

# Which bodyweight variant to serve by phase and experience
BODYWEIGHT_VARIANT_MATRIX: Final[dict[Phase, dict[ExperienceBucket, VariantChoice]]] = {
    "GPP": {"0-1": "easier", "2-5": "base", "6+": "base"},
    "SPP": {"0-1": "base", "2-5": "base", "6+": "base"},
    "SSP": {"0-1": "base", "2-5": "base", "6+": "harder"},
}
