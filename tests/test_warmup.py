"""Unit tests for the warm-up phase sequencer."""

import pytest

from gpp_coach.core import warmup
from gpp_coach.core.exercises.registry import EXERCISE_REGISTRY
from gpp_coach.core.models import DAY_TYPES, WARMUP_PHASE_ORDER, Prescription
from gpp_coach.core.warmup import (
    WARMUP_PHASE_CONFIG,
    generate_warmup_prescriptions,
    get_active_phases_for_day_type,
    get_warmup_duration,
    get_warmup_phase_groups,
)


class TestActivePhases:
    """Which phases run on which day."""

    def test_training_days_run_all_phases(self):
        """Lower/upper/power/full-body days run all seven phases in order."""
        for day in ("lower_a", "lower_b", "upper_a", "upper_b", "power", "full_body"):
            assert get_active_phases_for_day_type(day) == list(WARMUP_PHASE_ORDER)

    def test_recovery_only_rolls_and_mobilises(self):
        """Recovery: foam rolling then mobility."""
        assert get_active_phases_for_day_type("recovery") == ["foam_rolling", "mobility"]


class TestWarmupDuration:
    """Sum of active phase durations."""

    def test_lower_a(self):
        """10 min without foam rolling, 12 with."""
        assert get_warmup_duration("lower_a") == 10
        assert get_warmup_duration("lower_a", include_optional=True) == 12

    def test_recovery(self):
        """2 min mobility, plus 2 min rolling when optional."""
        assert get_warmup_duration("recovery") == 2
        assert get_warmup_duration("recovery", include_optional=True) == 4


class TestGenerateWarmupPrescriptions:
    """Phase-ordered warm-up generation."""

    def test_lower_a_with_foam_rolling(self):
        """3+3+2+2+3+3+2 = 18 exercises, foam rolling first."""
        items = generate_warmup_prescriptions("lower_a")
        assert len(items) == 18
        assert items[0].exercise_slug == "foam_roll_quads"
        assert items[0].warmup_phase == "foam_rolling"

    def test_lower_a_without_foam_rolling(self):
        """Dropping the optional phase leaves 15, starting with mobility."""
        items = generate_warmup_prescriptions("lower_a", include_optional=False)
        assert len(items) == 15
        assert items[0].exercise_slug == "worlds_greatest_stretch"
        assert all(p.warmup_phase != "foam_rolling" for p in items)

    def test_recovery(self):
        """Three rolls then three mobility drills."""
        items = generate_warmup_prescriptions("recovery")
        assert [p.warmup_phase for p in items] == ["foam_rolling"] * 3 + ["mobility"] * 3

    def test_order_index_contiguous(self):
        """order_index runs 0..n-1 by default."""
        items = generate_warmup_prescriptions("upper_a")
        assert [p.order_index for p in items] == list(range(len(items)))

    def test_starting_order_index(self):
        """order_index starts where asked."""
        items = generate_warmup_prescriptions("power", starting_order_index=5)
        assert items[0].order_index == 5
        assert [p.order_index for p in items] == list(range(5, 5 + len(items)))

    def test_phases_in_canonical_order(self):
        """Phases never go backwards."""
        for day in DAY_TYPES:
            positions = [WARMUP_PHASE_ORDER.index(p.warmup_phase) for p in generate_warmup_prescriptions(day)]
            assert positions == sorted(positions)

    def test_no_repeated_slugs(self):
        """A slug appears at most once per warm-up."""
        for day in DAY_TYPES:
            slugs = [p.exercise_slug for p in generate_warmup_prescriptions(day)]
            assert len(slugs) == len(set(slugs)), day

    def test_section_and_defaults(self):
        """Every item is in the warmup section with its phase defaults."""
        for p in generate_warmup_prescriptions("lower_b"):
            cfg = WARMUP_PHASE_CONFIG[p.warmup_phase]
            assert p.section == "warmup"
            assert (p.sets, p.reps, p.rest_seconds) == (cfg.default_sets, cfg.default_reps, cfg.default_rest)

    def test_power_primer_defaults(self):
        """Power primer is 3 × 3-5 with 15 s rest."""
        primer = [p for p in generate_warmup_prescriptions("lower_a") if p.warmup_phase == "power_primer"]
        assert [p.exercise_slug for p in primer] == ["broad_jump_warmup", "vertical_jump_warmup"]
        assert all((p.sets, p.reps, p.rest_seconds) == (3, "3-5", 15) for p in primer)

    def test_all_slugs_in_catalog(self):
        """Generated slugs resolve in the exercise registry."""
        for day in DAY_TYPES:
            for p in generate_warmup_prescriptions(day):
                assert p.exercise_slug in EXERCISE_REGISTRY

    def test_skips_slugs_used_by_earlier_phase(self, monkeypatch):
        """A slug already drawn is skipped and the next in the pool is taken."""
        monkeypatch.setitem(
            warmup.WARMUP_POOLS,
            "recovery",
            {
                "foam_rolling": ("a", "b", "c"),
                "mobility": ("a", "b", "d", "e", "f"),
            },
        )
        items = generate_warmup_prescriptions("recovery")
        assert [p.exercise_slug for p in items] == ["a", "b", "c", "d", "e", "f"]

    def test_short_pool_yields_fewer(self, monkeypatch):
        """If a pool runs out, the phase contributes what it can."""
        monkeypatch.setitem(warmup.WARMUP_POOLS, "recovery", {"foam_rolling": ("a",), "mobility": ("a", "b")})
        items = generate_warmup_prescriptions("recovery")
        assert [p.exercise_slug for p in items] == ["a", "b"]


class TestWarmupPhaseGroups:
    """Grouping prescriptions by phase for display."""

    def test_groups_preserve_order(self):
        """Groups follow input order; items inside too."""
        groups = get_warmup_phase_groups(generate_warmup_prescriptions("recovery"))
        assert list(groups) == ["foam_rolling", "mobility"]
        assert [p.exercise_slug for p in groups["foam_rolling"]] == [
            "foam_roll_quads",
            "foam_roll_hamstrings",
            "foam_roll_thoracic",
        ]

    def test_items_without_phase_ignored(self):
        """Main-section items are skipped."""
        main = Prescription(exercise_slug="back_squat", sets=4, reps="8", rest_seconds=90, order_index=0, section="main")
        groups = get_warmup_phase_groups([main])
        assert groups == {}


class TestPrescriptionValidation:
    """Prescription rejects bad template data."""

    @pytest.mark.parametrize(
        "overrides",
        [
            {"exercise_slug": ""},
            {"sets": 0},
            {"reps": " "},
            {"rest_seconds": -1},
            {"order_index": -1},
            {"section": "cooldown"},
            {"warmup_phase": "stretching"},
            {"intensity_percent": 120.0},
        ],
    )
    def test_invalid_fields_raise(self, overrides):
        """Each bad field raises ValueError."""
        fields = {"exercise_slug": "plank", "sets": 3, "reps": "30s", "rest_seconds": 30, "order_index": 0}
        fields.update(overrides)
        with pytest.raises(ValueError):
            Prescription(**fields)
