"""
Age and phase modifiers.

Caps intensity, set count and rep volume by age group, and narrows the
permitted %1RM band by training phase.  Caps only ever lower a value;
neither age nor phase can loosen a restriction imposed by the other.
"""

from .config import (
    AGE_INTENSITY_RULES,
    DEFAULT_AGE_GROUP,
    LEGACY_AGE_GROUP_MAP,
    PHASE_INTENSITY_RANGES,
    AgeIntensityRules,
)
from .models import (
    AGE_GROUPS,
    INTENSITY_ORDER,
    AgeGroup,
    AgeModifiedPrescription,
    Intensity,
    LegacyAgeGroup,
    OneRepMaxRange,
    Phase,
)
from .reps import scale_reps_or_duration

# Intake value whose historical (stricter) rules are still honoured
_LEGACY_YOUTH = "10-13"


def normalize_age_group(age_group: str | None) -> AgeGroup:
    """
    Map any stored age-group value onto a current bucket.

    Legacy values are translated ("10-13" -> "14-17", "18+" -> "18-35").
    None, empty and unknown strings fall back to "18-35".
    """
    if not age_group:
        return DEFAULT_AGE_GROUP
    if age_group in LEGACY_AGE_GROUP_MAP:
        return LEGACY_AGE_GROUP_MAP[age_group]
    if age_group in AGE_GROUPS:
        return age_group  # type: ignore[return-value]
    return DEFAULT_AGE_GROUP


def age_rules_key(age_group: str | None) -> AgeGroup | LegacyAgeGroup:
    """
    Key into the age-indexed rule tables for a stored age-group value.

    Athletes still stored as "10-13" keep their historical limits
    (Moderate, 65% 1RM, 3 sets, ×1.2 reps); every other value goes
    through normalize_age_group().
    """
    if age_group == _LEGACY_YOUTH:
        return _LEGACY_YOUTH
    return normalize_age_group(age_group)


def get_age_rules(age_group: str | None) -> AgeIntensityRules:
    return AGE_INTENSITY_RULES[age_rules_key(age_group)]


def get_effective_one_rep_max_ceiling(age_group: str | None, phase: Phase) -> float:
    """Tighter of the age ceiling and the phase maximum."""
    return min(get_age_rules(age_group).one_rep_max_ceiling, PHASE_INTENSITY_RANGES[phase].max)


def get_one_rep_max_range(age_group: str | None, phase: Phase) -> OneRepMaxRange:
    """
    Permitted %1RM band for an athlete in a phase.

    The lower bound is the phase minimum; the upper bound is the effective
    ceiling.  For young athletes the ceiling can sit below the phase
    minimum (e.g. legacy 10-13 in SSP: 0.85..0.65); callers should treat
    the ceiling as authoritative.
    """
    return OneRepMaxRange(
        min=PHASE_INTENSITY_RANGES[phase].min,
        max=get_effective_one_rep_max_ceiling(age_group, phase),
    )


def get_max_intensity_for_age(age_group: str | None) -> Intensity:
    return get_age_rules(age_group).max_intensity


def cap_intensity_for_age(intensity: Intensity, age_group: str | None) -> Intensity:
    """Lower intensity to the age maximum (Low < Moderate < High); never raise it."""
    ceiling = get_max_intensity_for_age(age_group)
    index = min(INTENSITY_ORDER.index(intensity), INTENSITY_ORDER.index(ceiling))
    return INTENSITY_ORDER[index]


def get_max_sets_for_age(age_group: str | None) -> int:
    return get_age_rules(age_group).max_sets_per_exercise


def apply_age_modifiers(
    sets: int,
    reps: str,
    age_group: str | None,
    phase: Phase,
    intensity: Intensity | None = None,
) -> AgeModifiedPrescription:
    """
    Apply every age/phase restriction to a prescription.

    Args:
        sets: Template set count
        reps: Template reps/duration string
        age_group: Stored age-group value (legacy values accepted)
        phase: Current training phase
        intensity: Requested intensity; Moderate when omitted

    Returns:
        AgeModifiedPrescription with capped sets and intensity, reps
        scaled by the age multiplier, and the permitted %1RM band
    """
    rules = get_age_rules(age_group)
    capped_intensity = cap_intensity_for_age(intensity or "Moderate", age_group)

    scaled_reps = reps
    if rules.max_reps_multiplier != 1.0:
        scaled_reps = scale_reps_or_duration(reps, rules.max_reps_multiplier)

    return AgeModifiedPrescription(
        sets=min(sets, rules.max_sets_per_exercise),
        reps=scaled_reps,
        intensity=capped_intensity,
        one_rep_max_range=get_one_rep_max_range(age_group, phase),
    )
