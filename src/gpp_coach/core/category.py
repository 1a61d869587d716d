"""
Sport-category prescription parameters.

Each sport category defines, per phase, ranges for load, reps, sets, rest,
tempo and RPE.  An athlete's age group and years of experience choose a
position inside each range; age safety caps are applied last.
"""

from dataclasses import dataclass, replace
from typing import Sequence

from .age import age_rules_key
from .config import (
    AGE_EXPERIENCE_MATRIX,
    AGE_SAFETY_CONSTRAINTS,
    BODYWEIGHT_VARIANT_MATRIX,
    CATEGORY_NAMES,
    CATEGORY_PHASE_CONFIG,
    CATEGORY_SPORTS,
    POWER_TAGS,
    CategoryId,
    ExerciseFocus,
    ExperienceBucket,
    ParameterRange,
    RangePosition,
    Tempo,
)
from .models import Phase, Progressions
from .reps import round_half_up
from .scaling import is_bodyweight_exercise


@dataclass(frozen=True)
class CategoryExerciseParameters:
    """Resolved parameters for one exercise for one athlete."""

    one_rep_max_percent: ParameterRange
    sets: int
    reps: int
    rest_seconds: int
    tempo: Tempo
    rpe: ParameterRange


@dataclass(frozen=True)
class BodyweightVariant:
    slug: str
    is_substituted: bool


def get_experience_bucket(years_of_experience: float) -> ExperienceBucket:
    """Bucket training age: <=1 -> "0-1", <=5 -> "2-5", else "6+"."""
    if years_of_experience <= 1:
        return "0-1"
    if years_of_experience <= 5:
        return "2-5"
    return "6+"


def get_value_from_position(value_range: ParameterRange, position: RangePosition) -> int:
    """
    Pick a whole number from a range by named position.

    "max_minus_*" never drops below the range minimum; "lowest_plus_*"
    may exceed the maximum on narrow ranges (callers cap afterwards).
    """
    low, high = int(value_range.min), int(value_range.max)
    if position == "lowest":
        return low
    if position in ("lowest_plus_1", "second_lowest"):
        return low + 1
    if position == "lowest_plus_2":
        return low + 2
    if position == "max_minus_2":
        return max(low, high - 2)
    if position == "max_minus_1":
        return max(low, high - 1)
    if position == "max":
        return high
    return round_half_up((low + high) / 2)


def get_exercise_focus(
    tags: Sequence[str] | None = None,
    equipment: Sequence[str] | None = None,
) -> ExerciseFocus:
    """Bodyweight when no equipment is needed, power for explosive tags, else strength."""
    if is_bodyweight_exercise(equipment):
        return "bodyweight"
    if tags and any(tag.lower() in POWER_TAGS for tag in tags):
        return "power"
    return "strength"


def get_category_exercise_parameters(
    category_id: CategoryId,
    phase: Phase,
    age_group: str | None,
    years_of_experience: float,
    exercise_focus: ExerciseFocus,
) -> CategoryExerciseParameters:
    """
    Resolve sets/reps/rest/tempo/RPE/%1RM for an athlete and exercise.

    Bodyweight exercises use the strength ranges.

    Args:
        category_id: Sport category (1-4)
        phase: Training phase
        age_group: Stored age-group value (legacy values accepted)
        years_of_experience: Training age in years
        exercise_focus: Result of get_exercise_focus()

    Returns:
        CategoryExerciseParameters with age safety caps applied
    """
    cfg = CATEGORY_PHASE_CONFIG[category_id][phase]
    age_key = age_rules_key(age_group)
    positions = AGE_EXPERIENCE_MATRIX[age_key][get_experience_bucket(years_of_experience)]

    if exercise_focus == "power":
        reps_range, orm_range, rest = cfg.reps_power, cfg.one_rep_max_power, cfg.rest_power
    else:
        reps_range, orm_range, rest = cfg.reps_strength, cfg.one_rep_max_strength, cfg.rest_strength

    params = CategoryExerciseParameters(
        one_rep_max_percent=orm_range,
        sets=get_value_from_position(cfg.sets, positions.sets),
        reps=get_value_from_position(reps_range, positions.reps),
        rest_seconds=rest,
        tempo=cfg.tempo,
        rpe=cfg.rpe,
    )
    return apply_age_safety_constraints(params, age_group)


def apply_age_safety_constraints(
    params: CategoryExerciseParameters, age_group: str | None
) -> CategoryExerciseParameters:
    """Cap sets and both ends of the %1RM band by the age group's limits."""
    constraint = AGE_SAFETY_CONSTRAINTS[age_rules_key(age_group)]
    ceiling = constraint.one_rep_max_ceiling
    sets = params.sets if constraint.max_sets is None else min(params.sets, constraint.max_sets)
    return replace(
        params,
        sets=sets,
        one_rep_max_percent=ParameterRange(
            min=min(params.one_rep_max_percent.min, ceiling),
            max=min(params.one_rep_max_percent.max, ceiling),
        ),
    )


def get_bodyweight_variant(
    base_slug: str,
    phase: Phase,
    experience_bucket: ExperienceBucket,
    progressions: Progressions | None = None,
) -> BodyweightVariant:
    """
    Choose easier/base/harder variant by phase and experience.

    Falls back to the base exercise when the wanted neighbour is missing.
    """
    choice = BODYWEIGHT_VARIANT_MATRIX[phase][experience_bucket]
    if progressions is not None:
        if choice == "easier" and progressions.easier:
            return BodyweightVariant(slug=progressions.easier, is_substituted=True)
        if choice == "harder" and progressions.harder:
            return BodyweightVariant(slug=progressions.harder, is_substituted=True)
    return BodyweightVariant(slug=base_slug, is_substituted=False)


def format_tempo(tempo: Tempo) -> str:
    """Render as "2.1.2" or "x.x.x"."""
    return f"{tempo.eccentric}.{tempo.isometric}.{tempo.concentric}"


def get_category_name(category_id: CategoryId) -> str:
    return CATEGORY_NAMES[category_id]


def get_category_sports(category_id: CategoryId) -> list[str]:
    return list(CATEGORY_SPORTS[category_id])
