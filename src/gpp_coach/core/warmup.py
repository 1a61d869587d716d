"""
Warm-up phase sequencer.

A warm-up runs through up to seven fixed phases:

    foam rolling → mobility → core isometric → core dynamic →
    walking drills → movement prep → power primer

The day type decides which phases are active (recovery days only roll
and mobilise) and which pool of exercises backs each phase.  Exercises
are drawn from each pool in order, never repeating a slug within one
warm-up.
"""

from dataclasses import dataclass
from typing import Final, Sequence

from .models import DayType, Prescription, WarmupPhase


@dataclass(frozen=True)
class WarmupPhaseConfig:
    """Defaults for one warm-up phase."""

    phase: WarmupPhase
    label: str
    duration_min: float
    optional: bool
    exercise_count: int
    default_sets: int
    default_reps: str
    default_rest: int


# =============================================================================
# PHASES (canonical order)
#
# | Phase           | Min | Optional | Draw | Sets × Reps       | Rest |
# |-----------------|-----|----------|------|-------------------|------|
# | Foam Rolling    | 2   | yes      | 3    | 1 × 30s           | 0    |
# | Mobility        | 2   |          | 3    | 1 × 8 each side   | 0    |
# | Core Isometric  | 1.5 |          | 2    | 1 × 20s           | 0    |
# | Core Dynamic    | 1   |          | 2    | 1 × 8 each side   | 0    |
# | Walking Drills  | 2   |          | 3    | 1 × 20 yards      | 0    |
# | Movement Prep   | 2   |          | 3    | 1 × 20 yards      | 0    |
# | Power Primer    | 1.5 |          | 2    | 3 × 3-5           | 15   |
# =============================================================================

WARMUP_PHASES: Final[tuple[WarmupPhaseConfig, ...]] = (
    WarmupPhaseConfig("foam_rolling", "Foam Rolling", 2, True, 3, 1, "30s", 0),
    WarmupPhaseConfig("mobility", "Mobility", 2, False, 3, 1, "8 each side", 0),
    WarmupPhaseConfig("core_isometric", "Core Isometric", 1.5, False, 2, 1, "20s", 0),
    WarmupPhaseConfig("core_dynamic", "Core Dynamic", 1, False, 2, 1, "8 each side", 0),
    WarmupPhaseConfig("walking_drills", "Walking Drills", 2, False, 3, 1, "20 yards", 0),
    WarmupPhaseConfig("movement_prep", "Movement Prep", 2, False, 3, 1, "20 yards", 0),
    WarmupPhaseConfig("power_primer", "Power Primer", 1.5, False, 2, 3, "3-5", 15),
)

WARMUP_PHASE_CONFIG: Final[dict[WarmupPhase, WarmupPhaseConfig]] = {cfg.phase: cfg for cfg in WARMUP_PHASES}

# =============================================================================
# POOLS BY DAY TYPE
#
# A phase missing from a day's mapping is inactive for that day.  Pools are
# ordered by preference; the sequencer takes the first unused slugs.
# =============================================================================

WARMUP_POOLS: Final[dict[DayType, dict[WarmupPhase, tuple[str, ...]]]] = {
    # Squat dominant
    "lower_a": {
        "foam_rolling": ("foam_roll_quads", "foam_roll_adductors", "foam_roll_glutes", "foam_roll_calves"),
        "mobility": (
            "worlds_greatest_stretch",
            "90_90_hip_stretch",
            "hip_circles",
            "ankle_circles",
            "hip_flexor_stretch",
        ),
        "core_isometric": ("hollow_body_hold", "bear_crawl_hold", "dead_bug", "quadruped_belly_lift"),
        "core_dynamic": ("glute_bridge_march", "dead_bug_with_reach", "bird_dog_crunch"),
        "walking_drills": ("walking_knee_hug", "walking_quad_stretch", "walking_rdl_reach", "walking_cradle_stretch"),
        "movement_prep": ("jog", "a_skip", "high_knees_drill", "butt_kicks"),
        "power_primer": ("broad_jump_warmup", "vertical_jump_warmup", "box_jump_warmup"),
    },
    # Hinge dominant
    "lower_b": {
        "foam_rolling": ("foam_roll_hamstrings", "foam_roll_glutes", "foam_roll_it_band", "foam_roll_calves"),
        "mobility": (
            "hip_flexor_stretch",
            "90_90_hip_stretch",
            "hip_circles",
            "ankle_circles",
            "scorpion_stretch",
        ),
        "core_isometric": ("bear_crawl_hold", "hollow_body_hold", "bird_dog", "quadruped_belly_lift"),
        "core_dynamic": ("glute_bridge_march", "bird_dog_crunch", "dead_bug_with_reach"),
        "walking_drills": ("walking_rdl_reach", "walking_knee_hug", "walking_cradle_stretch", "heel_toe_walk"),
        "movement_prep": ("jog", "b_skip", "butt_kicks", "high_knees_drill"),
        "power_primer": ("broad_jump_warmup", "box_jump_warmup", "vertical_jump_warmup"),
    },
    # Push dominant
    "upper_a": {
        "foam_rolling": ("foam_roll_thoracic", "foam_roll_lats", "foam_roll_quads", "foam_roll_glutes"),
        "mobility": (
            "thoracic_rotation",
            "shoulder_pass_through",
            "arm_cross_body_stretch",
            "cat_cow",
            "inchworm",
        ),
        "core_isometric": ("hollow_body_hold", "tall_kneeling_pallof_hold", "dead_bug", "plank"),
        "core_dynamic": ("dead_bug_with_reach", "core_bicycle", "bird_dog_crunch"),
        "walking_drills": ("walking_spiderman", "walking_lunge_rotation", "lateral_shuffle", "heel_toe_walk"),
        "movement_prep": ("jog", "skip", "carioca", "a_skip"),
        "power_primer": (
            "med_ball_chest_pass_warmup",
            "explosive_pushup_warmup",
            "med_ball_overhead_throw_warmup",
        ),
    },
    # Pull dominant
    "upper_b": {
        "foam_rolling": ("foam_roll_lats", "foam_roll_thoracic", "foam_roll_glutes", "foam_roll_hamstrings"),
        "mobility": (
            "thoracic_rotation",
            "arm_cross_body_stretch",
            "shoulder_pass_through",
            "cat_cow",
            "scorpion_stretch",
        ),
        "core_isometric": ("tall_kneeling_pallof_hold", "hollow_body_hold", "bird_dog", "plank"),
        "core_dynamic": ("core_bicycle", "dead_bug_with_reach", "bird_dog_crunch"),
        "walking_drills": ("walking_spiderman", "walking_lunge_rotation", "lateral_shuffle", "walking_knee_hug"),
        "movement_prep": ("jog", "carioca", "skip", "high_knees_drill"),
        "power_primer": (
            "med_ball_overhead_throw_warmup",
            "med_ball_chest_pass_warmup",
            "explosive_pushup_warmup",
        ),
    },
    "power": {
        "foam_rolling": ("foam_roll_quads", "foam_roll_hamstrings", "foam_roll_thoracic", "foam_roll_glutes"),
        "mobility": (
            "worlds_greatest_stretch",
            "hip_circles",
            "thoracic_rotation",
            "ankle_circles",
            "inchworm",
        ),
        "core_isometric": ("hollow_body_hold", "bear_crawl_hold", "dead_bug", "plank"),
        "core_dynamic": ("glute_bridge_march", "bird_dog_crunch", "core_bicycle"),
        "walking_drills": ("walking_spiderman", "walking_rdl_reach", "lateral_shuffle", "walking_lunge_rotation"),
        "movement_prep": ("a_skip", "power_skip", "carioca", "high_knees_drill"),
        "power_primer": ("vertical_jump_warmup", "broad_jump_warmup", "box_jump_warmup"),
    },
    "full_body": {
        "foam_rolling": ("foam_roll_quads", "foam_roll_thoracic", "foam_roll_glutes", "foam_roll_lats"),
        "mobility": (
            "worlds_greatest_stretch",
            "thoracic_rotation",
            "hip_circles",
            "shoulder_pass_through",
            "cat_cow",
        ),
        "core_isometric": ("hollow_body_hold", "bear_crawl_hold", "tall_kneeling_pallof_hold", "dead_bug"),
        "core_dynamic": ("glute_bridge_march", "dead_bug_with_reach", "core_bicycle"),
        "walking_drills": ("walking_knee_hug", "walking_spiderman", "lateral_shuffle", "walking_lunge_rotation"),
        "movement_prep": ("jog", "skip", "a_skip", "carioca"),
        "power_primer": ("med_ball_chest_pass_warmup", "broad_jump_warmup", "med_ball_rotational_pass"),
    },
    # Foam rolling and mobility only
    "recovery": {
        "foam_rolling": (
            "foam_roll_quads",
            "foam_roll_hamstrings",
            "foam_roll_thoracic",
            "foam_roll_glutes",
            "foam_roll_lats",
            "foam_roll_it_band",
        ),
        "mobility": (
            "worlds_greatest_stretch",
            "90_90_hip_stretch",
            "cat_cow",
            "hip_flexor_stretch",
            "thoracic_rotation",
            "scorpion_stretch",
        ),
    },
}


def get_active_phases_for_day_type(day_type: DayType) -> list[WarmupPhase]:
    """Phases with a pool for this day type, in canonical order."""
    pools = WARMUP_POOLS[day_type]
    return [cfg.phase for cfg in WARMUP_PHASES if cfg.phase in pools]


def _selected_phases(day_type: DayType, include_optional: bool) -> list[WarmupPhaseConfig]:
    active = set(get_active_phases_for_day_type(day_type))
    return [cfg for cfg in WARMUP_PHASES if cfg.phase in active and (include_optional or not cfg.optional)]


def get_warmup_duration(day_type: DayType, include_optional: bool = False) -> float:
    """
    Total warm-up length in minutes.

    Optional phases (foam rolling) are excluded unless include_optional.
    """
    return sum(cfg.duration_min for cfg in _selected_phases(day_type, include_optional))


def get_warmup_phase_groups(prescriptions: Sequence[Prescription]) -> dict[WarmupPhase, list[Prescription]]:
    """
    Group prescriptions by warm-up phase, preserving order.

    Items without a warmup_phase are ignored.
    """
    groups: dict[WarmupPhase, list[Prescription]] = {}
    for item in prescriptions:
        if item.warmup_phase is None:
            continue
        groups.setdefault(item.warmup_phase, []).append(item)
    return groups


def generate_warmup_prescriptions(
    day_type: DayType,
    include_optional: bool = True,
    starting_order_index: int = 0,
) -> list[Prescription]:
    """
    Build the ordered warm-up for a day type.

    For each active phase in canonical order, the first exercise_count
    slugs of the day's pool not already used in this warm-up are emitted
    with the phase's default sets/reps/rest.  order_index runs
    contiguously from starting_order_index.

    Args:
        day_type: Workout day category
        include_optional: Include the foam rolling phase
        starting_order_index: order_index of the first exercise

    Returns:
        List of Prescription with section="warmup"
    """
    pools = WARMUP_POOLS[day_type]
    prescriptions: list[Prescription] = []
    used: set[str] = set()
    order_index = starting_order_index

    for cfg in _selected_phases(day_type, include_optional):
        picked = 0
        for slug in pools[cfg.phase]:
            if picked >= cfg.exercise_count:
                break
            if slug in used:
                continue
            used.add(slug)
            prescriptions.append(
                Prescription(
                    exercise_slug=slug,
                    sets=cfg.default_sets,
                    reps=cfg.default_reps,
                    rest_seconds=cfg.default_rest,
                    order_index=order_index,
                    section="warmup",
                    warmup_phase=cfg.phase,
                )
            )
            order_index += 1
            picked += 1

    return prescriptions
