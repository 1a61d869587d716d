"""
Boundary validation and JSON serialization.

Values arriving from outside the engine (CLI flags, stored documents)
are validated here and converted to canonical literals.  Dicts use the
camelCase keys of the external persistence layer (exerciseSlug,
restSeconds, orderIndex, ...).
"""

from typing import Any

from ..core.category import CategoryExerciseParameters, format_tempo
from ..core.config import CATEGORY_NAMES, CategoryId
from ..core.models import (
    AGE_GROUPS,
    DAY_TYPES,
    INTENSITY_ORDER,
    PHASES,
    AgeModifiedPrescription,
    DayType,
    Intensity,
    Phase,
    Prescription,
    RpeTarget,
    ScaledBodyweightPrescription,
    ScaledWeightedPrescription,
)

_LEGACY_AGE_GROUPS = ("10-13", "18+")


class ValidationError(Exception):
    """Raised when data validation fails."""

    pass


def validate_intensity(value: str) -> Intensity:
    """
    Validate an intensity level (case-insensitive).

    Returns:
        "Low", "Moderate" or "High"

    Raises:
        ValidationError: If value is not an intensity level
    """
    for level in INTENSITY_ORDER:
        if value.strip().lower() == level.lower():
            return level
    raise ValidationError(f"Invalid intensity: {value}. Must be one of {INTENSITY_ORDER}")


def validate_phase(value: str) -> Phase:
    """
    Validate a training phase (case-insensitive).

    Raises:
        ValidationError: If value is not GPP, SPP or SSP
    """
    phase = value.strip().upper()
    if phase not in PHASES:
        raise ValidationError(f"Invalid phase: {value}. Must be one of {PHASES}")
    return phase  # type: ignore


def validate_day_type(value: str) -> DayType:
    """
    Validate a day type.

    Accepts hyphens in place of underscores ("full-body").

    Raises:
        ValidationError: If value is not a known day type
    """
    day_type = value.strip().lower().replace("-", "_")
    if day_type not in DAY_TYPES:
        raise ValidationError(f"Invalid day type: {value}. Must be one of {DAY_TYPES}")
    return day_type  # type: ignore


def validate_age_group(value: str) -> str:
    """
    Validate an age-group string.

    Legacy values ("10-13", "18+") are accepted and returned unchanged so
    the age layer can apply their historical rules.

    Raises:
        ValidationError: If value is neither a current nor a legacy group
    """
    age_group = value.strip()
    if age_group not in AGE_GROUPS and age_group not in _LEGACY_AGE_GROUPS:
        raise ValidationError(
            f"Invalid age group: {value}. Must be one of {AGE_GROUPS + _LEGACY_AGE_GROUPS}"
        )
    return age_group


def validate_category_id(value: str | int) -> CategoryId:
    """
    Validate a sport category by number (1-4) or name ("power").

    Raises:
        ValidationError: If value names no category
    """
    text = str(value).strip()
    if text.isdigit() and int(text) in CATEGORY_NAMES:
        return int(text)  # type: ignore
    for category_id, name in CATEGORY_NAMES.items():
        if text.lower() == name.lower():
            return category_id
    raise ValidationError(
        f"Invalid category: {value}. Must be 1-4 or one of {tuple(CATEGORY_NAMES.values())}"
    )


def validate_non_negative(value: int | float, name: str) -> int | float:
    """
    Raises:
        ValidationError: If value is negative
    """
    if value < 0:
        raise ValidationError(f"{name} must be non-negative, got {value}")
    return value


def validate_positive(value: int | float, name: str) -> int | float:
    """
    Raises:
        ValidationError: If value is not positive
    """
    if value <= 0:
        raise ValidationError(f"{name} must be positive, got {value}")
    return value


# ---------------------------------------------------------------------------
# Prescriptions
# ---------------------------------------------------------------------------

# Optional Prescription fields and their external keys
_OPTIONAL_KEYS: tuple[tuple[str, str], ...] = (
    ("section", "section"),
    ("warmup_phase", "warmupPhase"),
    ("tempo", "tempo"),
    ("intensity_percent", "intensityPercent"),
    ("superset", "superset"),
    ("notes", "notes"),
)


def prescription_to_dict(prescription: Prescription) -> dict[str, Any]:
    """
    Convert Prescription to JSON-compatible dict.

    Optional fields are omitted when unset.
    """
    d: dict[str, Any] = {
        "exerciseSlug": prescription.exercise_slug,
        "sets": prescription.sets,
        "reps": prescription.reps,
        "restSeconds": prescription.rest_seconds,
        "orderIndex": prescription.order_index,
    }
    for attr, key in _OPTIONAL_KEYS:
        value = getattr(prescription, attr)
        if value is not None:
            d[key] = value
    return d


def prescription_from_dict(data: dict[str, Any]) -> Prescription:
    """
    Convert dict to Prescription.

    Raises:
        ValidationError: If a required key is missing or a value is invalid
    """
    missing = [k for k in ("exerciseSlug", "sets", "reps", "restSeconds", "orderIndex") if k not in data]
    if missing:
        raise ValidationError(f"Prescription missing keys: {missing}")

    optional = {attr: data.get(key) for attr, key in _OPTIONAL_KEYS}
    try:
        if optional["intensity_percent"] is not None:
            optional["intensity_percent"] = float(optional["intensity_percent"])
        return Prescription(
            exercise_slug=str(data["exerciseSlug"]),
            sets=int(data["sets"]),
            reps=str(data["reps"]),
            rest_seconds=int(data["restSeconds"]),
            order_index=int(data["orderIndex"]),
            **optional,
        )
    except (TypeError, ValueError) as e:
        raise ValidationError(f"Invalid prescription: {e}") from e


# ---------------------------------------------------------------------------
# Engine results
# ---------------------------------------------------------------------------


def _rpe_to_dict(rpe: RpeTarget) -> dict[str, int]:
    return {"min": rpe.min, "max": rpe.max}


def scaled_weighted_to_dict(scaled: ScaledWeightedPrescription) -> dict[str, Any]:
    d: dict[str, Any] = {
        "sets": scaled.sets,
        "reps": scaled.reps,
        "restSeconds": scaled.rest_seconds,
        "percentOf1RM": scaled.percent_of_1rm,
        "rpeTarget": _rpe_to_dict(scaled.rpe_target),
    }
    if scaled.weight is not None:
        d["weight"] = scaled.weight
    return d


def scaled_bodyweight_to_dict(scaled: ScaledBodyweightPrescription) -> dict[str, Any]:
    return {
        "exerciseSlug": scaled.exercise_slug,
        "isSubstituted": scaled.is_substituted,
        "reps": scaled.reps,
        "restSeconds": scaled.rest_seconds,
        "rpeTarget": _rpe_to_dict(scaled.rpe_target),
    }


def age_modified_to_dict(modified: AgeModifiedPrescription) -> dict[str, Any]:
    return {
        "sets": modified.sets,
        "reps": modified.reps,
        "intensity": modified.intensity,
        "oneRepMaxRange": {"min": modified.one_rep_max_range.min, "max": modified.one_rep_max_range.max},
    }


def category_parameters_to_dict(params: CategoryExerciseParameters) -> dict[str, Any]:
    return {
        "oneRepMaxPercent": {"min": params.one_rep_max_percent.min, "max": params.one_rep_max_percent.max},
        "sets": params.sets,
        "reps": params.reps,
        "restSeconds": params.rest_seconds,
        "tempo": format_tempo(params.tempo),
        "rpe": {"min": int(params.rpe.min), "max": int(params.rpe.max)},
    }
