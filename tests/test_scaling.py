"""
Unit tests for weighted and bodyweight intensity scaling and 1RM helpers.

Worked example used throughout: 4×8, 60 s rest, 1RM 200.
"""

import pytest

from gpp_coach.core.exercises.base import Exercise
from gpp_coach.core.models import (
    BodyweightPrescription,
    Progressions,
    RpeTarget,
    ScaledBodyweightPrescription,
    ScaledWeightedPrescription,
    WeightedPrescription,
)
from gpp_coach.core.scaling import (
    apply_intensity_to_bodyweight,
    apply_intensity_to_weighted,
    calculate_one_rep_max,
    calculate_target_weight,
    get_avg_one_rep_max_percent,
    get_rpe_target,
    is_bodyweight_exercise,
    resolve_exercise_prescription,
    scale_rest,
)

PLANK_PROGRESSIONS = Progressions(easier="knee_plank", harder="plank_shoulder_taps")
PUSH_UP_PROGRESSIONS = Progressions(easier="incline_push_up", harder="decline_push_up")


def _template() -> WeightedPrescription:
    return WeightedPrescription(sets=4, reps=8, rest_seconds=60)


class TestIntensityHelpers:
    """Per-intensity lookups."""

    def test_avg_percent(self):
        """Midpoints of the %1RM bands."""
        assert get_avg_one_rep_max_percent("Low") == pytest.approx(0.65)
        assert get_avg_one_rep_max_percent("Moderate") == pytest.approx(0.775)
        assert get_avg_one_rep_max_percent("High") == pytest.approx(0.875)

    def test_rpe_targets(self):
        """RPE bands 5-6, 6-7, 8-9."""
        assert get_rpe_target("Low") == RpeTarget(5, 6)
        assert get_rpe_target("Moderate") == RpeTarget(6, 7)
        assert get_rpe_target("High") == RpeTarget(8, 9)

    def test_scale_rest(self):
        """Rest × 1.25 / 1.0 / 0.75, floored at 15 s."""
        assert scale_rest(60, "Low") == 75
        assert scale_rest(60, "Moderate") == 60
        assert scale_rest(60, "High") == 45
        assert scale_rest(10, "High") == 15


class TestOneRepMax:
    """Epley estimate and target load rounding."""

    def test_epley(self):
        """100 × (1 + 10/30) = 133.3 -> 133."""
        assert calculate_one_rep_max(100, 10) == 133

    def test_single_rep_is_the_weight(self):
        """One rep at a load is that load."""
        assert calculate_one_rep_max(100, 1) == 100

    @pytest.mark.parametrize("weight", [0.5, 1.4, 2.2, 7.5, 20, 61.25, 100, 142.5])
    def test_non_decreasing_in_reps(self, weight):
        """More reps at the same load never lowers the estimate, fractional loads included."""
        estimates = [calculate_one_rep_max(weight, reps) for reps in range(1, 31)]
        assert all(a <= b for a, b in zip(estimates, estimates[1:])), estimates

    def test_small_fractional_weight(self):
        """1.4 × 2 rounds to 1 but is held at the single-rep estimate."""
        assert calculate_one_rep_max(1.4, 1) == 1.4
        assert calculate_one_rep_max(1.4, 2) == 1.4

    def test_non_positive_inputs(self):
        """Zero or negative inputs give 0."""
        assert calculate_one_rep_max(0, 5) == 0
        assert calculate_one_rep_max(100, 0) == 0
        assert calculate_one_rep_max(-50, 5) == 0

    def test_target_weight_rounds_to_plate(self):
        """200 × 0.78 = 156 -> 155; 200 × 0.76 = 152 -> 152.5."""
        assert calculate_target_weight(200, 0.78) == 155.0
        assert calculate_target_weight(200, 0.76) == 152.5


class TestIsBodyweightExercise:
    """Equipment-based bodyweight detection."""

    def test_no_equipment(self):
        """Empty or missing equipment is bodyweight."""
        assert is_bodyweight_exercise([])
        assert is_bodyweight_exercise(None)

    def test_bodyweight_only(self):
        """Only 'bodyweight' counts as bodyweight."""
        assert is_bodyweight_exercise(["bodyweight"])

    def test_any_other_equipment(self):
        """A second item, even a bench, makes it weighted."""
        assert not is_bodyweight_exercise(["bodyweight", "bench"])
        assert not is_bodyweight_exercise(["barbell"])


class TestApplyIntensityToWeighted:
    """Intensity matrix applied to a weighted template."""

    def test_high_with_one_rep_max(self):
        """4×8/60 at High, 1RM 200 -> 5×7, 45 s, 175, 88%, RPE 8-9."""
        scaled = apply_intensity_to_weighted(_template(), "High", 200)
        assert scaled == ScaledWeightedPrescription(
            sets=5,
            reps=7,
            rest_seconds=45,
            percent_of_1rm=88,
            rpe_target=RpeTarget(8, 9),
            weight=175.0,
        )

    def test_low(self):
        """Low: 3 sets, reps unchanged, 75 s rest, 130."""
        scaled = apply_intensity_to_weighted(_template(), "Low", 200)
        assert (scaled.sets, scaled.reps, scaled.rest_seconds) == (3, 8, 75)
        assert scaled.weight == 130.0
        assert scaled.percent_of_1rm == 65

    def test_moderate_is_identity_on_volume(self):
        """Moderate keeps sets/reps/rest; load is 77.5% -> 155."""
        scaled = apply_intensity_to_weighted(_template(), "Moderate", 200)
        assert (scaled.sets, scaled.reps, scaled.rest_seconds) == (4, 8, 60)
        assert scaled.weight == 155.0
        assert scaled.percent_of_1rm == 78

    def test_no_one_rep_max_no_weight(self):
        """Weight is only set when a 1RM is given."""
        assert apply_intensity_to_weighted(_template(), "High").weight is None
        assert apply_intensity_to_weighted(_template(), "High", 0).weight is None

    def test_floors(self):
        """Sets and reps never drop below 1, rest below 15 s."""
        scaled = apply_intensity_to_weighted(WeightedPrescription(1, 1, 10), "High")
        assert scaled.sets >= 1
        assert scaled.reps == 1
        assert scaled.rest_seconds == 15


class TestApplyIntensityToBodyweight:
    """Volume scaling and variant substitution for bodyweight movements."""

    def test_plank_low_substitutes_easier(self):
        """Low: knee plank, 30s -> 20s, rest 30 -> 38."""
        scaled = apply_intensity_to_bodyweight(
            BodyweightPrescription(reps="30s", rest_seconds=30), "Low", "plank", PLANK_PROGRESSIONS
        )
        assert scaled == ScaledBodyweightPrescription(
            exercise_slug="knee_plank",
            is_substituted=True,
            reps="20s",
            rest_seconds=38,
            rpe_target=RpeTarget(5, 6),
        )

    def test_plank_high_substitutes_harder(self):
        """High: shoulder taps, 30s -> 40s."""
        scaled = apply_intensity_to_bodyweight(
            BodyweightPrescription(reps="30s", rest_seconds=30), "High", "plank", PLANK_PROGRESSIONS
        )
        assert scaled.exercise_slug == "plank_shoulder_taps"
        assert scaled.is_substituted
        assert scaled.reps == "40s"

    def test_moderate_never_substitutes(self):
        """Moderate keeps the base exercise and volume."""
        scaled = apply_intensity_to_bodyweight(
            BodyweightPrescription(reps="30s", rest_seconds=30), "Moderate", "plank", PLANK_PROGRESSIONS
        )
        assert scaled.exercise_slug == "plank"
        assert not scaled.is_substituted
        assert scaled.reps == "30s"
        assert scaled.rest_seconds == 30

    def test_push_up_reps(self):
        """10 reps -> 7 at Low, 13 at High."""
        template = BodyweightPrescription(reps="10", rest_seconds=60)
        assert apply_intensity_to_bodyweight(template, "Low", "push_up", PUSH_UP_PROGRESSIONS).reps == "7"
        assert apply_intensity_to_bodyweight(template, "High", "push_up", PUSH_UP_PROGRESSIONS).reps == "13"

    def test_each_side_suffix(self):
        """"8 each side" at Low -> "5 each side"."""
        scaled = apply_intensity_to_bodyweight(
            BodyweightPrescription(reps="8 each side", rest_seconds=30), "Low", "side_plank"
        )
        assert scaled.reps == "5 each side"

    def test_missing_neighbour_keeps_base(self):
        """No easier variant: Low keeps the base slug, unsubstituted."""
        scaled = apply_intensity_to_bodyweight(
            BodyweightPrescription(reps="10", rest_seconds=60), "Low", "wall_push_up", Progressions(harder="incline_push_up")
        )
        assert scaled.exercise_slug == "wall_push_up"
        assert not scaled.is_substituted

    def test_no_progressions_keeps_base(self):
        """Without progressions nothing is substituted."""
        scaled = apply_intensity_to_bodyweight(BodyweightPrescription(reps="10", rest_seconds=60), "High", "push_up")
        assert scaled.exercise_slug == "push_up"
        assert not scaled.is_substituted

    def test_amrap_passes_through(self):
        """AMRAP is left as is; rest still scales."""
        scaled = apply_intensity_to_bodyweight(
            BodyweightPrescription(reps="AMRAP", rest_seconds=60), "High", "push_up", PUSH_UP_PROGRESSIONS
        )
        assert scaled.reps == "AMRAP"
        assert scaled.rest_seconds == 45
        assert scaled.exercise_slug == "decline_push_up"


class TestResolveExercisePrescription:
    """Dispatching a catalog exercise to the right scaler."""

    def _squat(self) -> Exercise:
        return Exercise(
            slug="back_squat",
            name="Back Squat",
            difficulty="intermediate",
            tags=frozenset({"lower_body", "squat"}),
            equipment=("barbell", "rack"),
        )

    def _plank(self) -> Exercise:
        return Exercise(
            slug="plank",
            name="Plank",
            difficulty="beginner",
            tags=frozenset({"core", "isometric"}),
            equipment=("bodyweight",),
            progressions=PLANK_PROGRESSIONS,
        )

    def test_weighted_dispatch(self):
        """Barbell exercise goes through the weighted scaler."""
        scaled = resolve_exercise_prescription(self._squat(), 4, "8", 60, "High", 200)
        assert isinstance(scaled, ScaledWeightedPrescription)
        assert scaled.weight == 175.0

    def test_weighted_range_uses_midpoint(self):
        """"8-10" on a weighted lift becomes 9 reps."""
        scaled = resolve_exercise_prescription(self._squat(), 4, "8-10", 60, "Moderate")
        assert scaled.reps == 9

    def test_weighted_duration_rejected(self):
        """A timed target on a weighted lift is an error."""
        with pytest.raises(ValueError, match="needs a rep count"):
            resolve_exercise_prescription(self._squat(), 3, "30s", 60, "Moderate")

    def test_weighted_amrap_rejected(self):
        """AMRAP on a weighted lift is an error."""
        with pytest.raises(ValueError, match="needs a rep count"):
            resolve_exercise_prescription(self._squat(), 3, "AMRAP", 60, "Moderate")

    def test_bodyweight_dispatch(self):
        """Bodyweight exercise uses its own progressions."""
        scaled = resolve_exercise_prescription(self._plank(), 3, "30s", 30, "Low")
        assert isinstance(scaled, ScaledBodyweightPrescription)
        assert scaled.exercise_slug == "knee_plank"
