"""
Intensity scaling for weighted and bodyweight prescriptions.

Weighted lifts scale sets/reps/rest by the intensity matrix and derive a
target load from a known 1RM.  Bodyweight movements have no load to
scale, so intensity is expressed through volume and, at the extremes,
by substituting an easier or harder variant from the progression graph.

All functions are pure and typed for testability.
"""

from typing import Sequence

from .config import (
    BODYWEIGHT_INTENSITY_CONFIG,
    EPLEY_DIVISOR,
    INTENSITY_CONFIG,
    MIN_REPS,
    MIN_REST_SECONDS,
    MIN_SETS,
    WEIGHT_INCREMENT,
)
from .exercises.base import Exercise
from .models import (
    BodyweightPrescription,
    Intensity,
    Progressions,
    RpeTarget,
    ScaledBodyweightPrescription,
    ScaledWeightedPrescription,
    WeightedPrescription,
)
from .reps import parse_reps_string, round_half_up, scale_reps_or_duration


def get_avg_one_rep_max_percent(intensity: Intensity) -> float:
    """Midpoint of the %1RM band for an intensity (e.g. High -> 0.875)."""
    return INTENSITY_CONFIG[intensity].avg_one_rep_max_percent


def get_rpe_target(intensity: Intensity) -> RpeTarget:
    """RPE band for an intensity."""
    cfg = INTENSITY_CONFIG[intensity]
    return RpeTarget(min=cfg.rpe_min, max=cfg.rpe_max)


def scale_rest(rest_seconds: int, intensity: Intensity) -> int:
    """Apply the intensity rest multiplier, rounded half up, floored at 15 s."""
    multiplier = INTENSITY_CONFIG[intensity].rest_multiplier
    return max(MIN_REST_SECONDS, round_half_up(rest_seconds * multiplier))


# =============================================================================
# 1RM utilities
# =============================================================================


def calculate_one_rep_max(weight: float, reps: int) -> float:
    """
    Estimate 1RM with the Epley formula.

    1RM = weight × (1 + reps / 30)

    Args:
        weight: Load lifted
        reps: Reps completed at that load

    Returns:
        Estimated 1RM rounded to the nearest unit, never below ``weight``;
        ``weight`` itself for a single rep; 0 when either input is non-positive
    """
    if reps <= 0 or weight <= 0:
        return 0
    if reps == 1:
        return weight
    # Rounding must not drop a fractional load below the single-rep estimate
    return max(weight, round_half_up(weight * (1 + reps / EPLEY_DIVISOR)))


def calculate_target_weight(one_rep_max: float, percent: float) -> float:
    """
    Load for a fraction of 1RM, rounded to the nearest plate increment.

    Args:
        one_rep_max: Known or estimated 1RM
        percent: Fraction of 1RM (0.775, not 77.5)

    Returns:
        Target load, a multiple of WEIGHT_INCREMENT
    """
    return round_half_up(one_rep_max * percent / WEIGHT_INCREMENT) * WEIGHT_INCREMENT


def is_bodyweight_exercise(equipment: Sequence[str] | None) -> bool:
    """True when an exercise needs no equipment or only bodyweight."""
    if not equipment:
        return True
    return len(equipment) == 1 and equipment[0] == "bodyweight"


# =============================================================================
# Weighted scaler
# =============================================================================


def apply_intensity_to_weighted(
    prescription: WeightedPrescription,
    intensity: Intensity,
    one_rep_max: float | None = None,
) -> ScaledWeightedPrescription:
    """
    Scale a weighted prescription to the requested intensity.

    Sets and reps are multiplied and rounded half up (minimum 1); rest is
    multiplied and rounded (minimum 15 s).  A target weight is attached
    only when a positive 1RM is supplied.

    Example: 4×8 with 60 s rest at High with a 200 lb 1RM becomes
    5×7, 45 s rest, 175 lb (88% 1RM), RPE 8-9.

    Args:
        prescription: Template sets/reps/rest
        intensity: Target intensity
        one_rep_max: Athlete's 1RM for this lift, if known

    Returns:
        ScaledWeightedPrescription
    """
    cfg = INTENSITY_CONFIG[intensity]
    avg_percent = cfg.avg_one_rep_max_percent

    weight = None
    if one_rep_max:
        weight = calculate_target_weight(one_rep_max, avg_percent)

    return ScaledWeightedPrescription(
        sets=max(MIN_SETS, round_half_up(prescription.sets * cfg.sets_multiplier)),
        reps=max(MIN_REPS, round_half_up(prescription.reps * cfg.reps_multiplier)),
        rest_seconds=scale_rest(prescription.rest_seconds, intensity),
        percent_of_1rm=round_half_up(avg_percent * 100),
        rpe_target=get_rpe_target(intensity),
        weight=weight,
    )


# =============================================================================
# Bodyweight scaler
# =============================================================================


def _substitute_slug(base_slug: str, intensity: Intensity, progressions: Progressions | None) -> str:
    if progressions is None:
        return base_slug
    if intensity == "Low":
        return progressions.easier or base_slug
    if intensity == "High":
        return progressions.harder or base_slug
    return base_slug


def apply_intensity_to_bodyweight(
    prescription: BodyweightPrescription,
    intensity: Intensity,
    base_slug: str,
    progressions: Progressions | None = None,
) -> ScaledBodyweightPrescription:
    """
    Scale a bodyweight prescription and pick the movement variant.

    Volume uses the bodyweight duration multiplier for timed holds and the
    reps multiplier otherwise; unscalable strings (AMRAP) pass through.
    At Low the easier variant replaces the base exercise, at High the
    harder one; Moderate never substitutes.

    Args:
        prescription: Template reps string and rest
        intensity: Target intensity
        base_slug: Exercise the template prescribes
        progressions: Easier/harder neighbours of base_slug

    Returns:
        ScaledBodyweightPrescription
    """
    bw_cfg = BODYWEIGHT_INTENSITY_CONFIG[intensity]
    parsed = parse_reps_string(prescription.reps)
    if parsed is not None and parsed.unit == "seconds":
        multiplier = bw_cfg.duration_multiplier
    else:
        multiplier = bw_cfg.reps_multiplier

    slug = _substitute_slug(base_slug, intensity, progressions)

    return ScaledBodyweightPrescription(
        exercise_slug=slug,
        is_substituted=slug != base_slug,
        reps=scale_reps_or_duration(prescription.reps, multiplier),
        rest_seconds=scale_rest(prescription.rest_seconds, intensity),
        rpe_target=get_rpe_target(intensity),
    )


def resolve_exercise_prescription(
    exercise: Exercise,
    sets: int,
    reps: str,
    rest_seconds: int,
    intensity: Intensity,
    one_rep_max: float | None = None,
) -> ScaledWeightedPrescription | ScaledBodyweightPrescription:
    """
    Dispatch a catalog exercise to the weighted or bodyweight scaler.

    Weighted exercises need an integer rep count; a range or per-side
    string is reduced to its parsed value first.

    Raises:
        ValueError: If a weighted exercise has a reps string that is not a
            rep count (AMRAP, a duration, or unparseable)
    """
    if is_bodyweight_exercise(exercise.equipment):
        return apply_intensity_to_bodyweight(
            BodyweightPrescription(reps=reps, rest_seconds=rest_seconds),
            intensity,
            exercise.slug,
            exercise.progressions,
        )

    parsed = parse_reps_string(reps)
    if parsed is None or parsed.unit != "reps":
        raise ValueError(f"Weighted exercise '{exercise.slug}' needs a rep count, got {reps!r}")
    return apply_intensity_to_weighted(
        WeightedPrescription(sets=sets, reps=int(parsed.value), rest_seconds=rest_seconds),
        intensity,
        one_rep_max,
    )
