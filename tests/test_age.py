"""Unit tests for the age and phase modifier layer."""

import pytest

from gpp_coach.core.age import (
    age_rules_key,
    apply_age_modifiers,
    cap_intensity_for_age,
    get_effective_one_rep_max_ceiling,
    get_max_intensity_for_age,
    get_max_sets_for_age,
    get_one_rep_max_range,
    normalize_age_group,
)
from gpp_coach.core.models import OneRepMaxRange


class TestNormalizeAgeGroup:
    """Legacy and missing values map to current buckets."""

    def test_legacy_values(self):
        """10-13 -> 14-17, 18+ -> 18-35."""
        assert normalize_age_group("10-13") == "14-17"
        assert normalize_age_group("18+") == "18-35"

    def test_current_values_unchanged(self):
        """Current buckets pass through."""
        for group in ("14-17", "18-35", "36+"):
            assert normalize_age_group(group) == group

    @pytest.mark.parametrize("value", [None, "", "45-60", "adult"])
    def test_unknown_defaults_to_adult(self, value):
        """None, empty and unknown values fall back to 18-35."""
        assert normalize_age_group(value) == "18-35"


class TestAgeRulesKey:
    """Which rule row applies to a stored value."""

    def test_legacy_youth_keeps_own_rules(self):
        """Stored 10-13 keeps its stricter row."""
        assert age_rules_key("10-13") == "10-13"

    def test_everything_else_normalised(self):
        """Other values go through normalize_age_group()."""
        assert age_rules_key("18+") == "18-35"
        assert age_rules_key(None) == "18-35"
        assert age_rules_key("36+") == "36+"


class TestIntensityCaps:
    """Age ceilings on intensity."""

    def test_max_intensity(self):
        """Only legacy youth is limited to Moderate."""
        assert get_max_intensity_for_age("10-13") == "Moderate"
        assert get_max_intensity_for_age("14-17") == "High"
        assert get_max_intensity_for_age("36+") == "High"

    def test_cap_lowers(self):
        """High is lowered to Moderate for 10-13."""
        assert cap_intensity_for_age("High", "10-13") == "Moderate"

    def test_cap_never_raises(self):
        """Low stays Low even when the ceiling is higher."""
        assert cap_intensity_for_age("Low", "10-13") == "Low"
        assert cap_intensity_for_age("Low", "18-35") == "Low"

    def test_cap_no_effect_for_adults(self):
        """Adults may train at High."""
        assert cap_intensity_for_age("High", "18-35") == "High"


class TestOneRepMaxRange:
    """Phase band narrowed by age ceiling."""

    def test_youth_ssp_clamped_to_age_ceiling(self):
        """14-17 in SSP: phase 85-90%, ceiling 85% -> 0.85..0.85."""
        assert get_one_rep_max_range("14-17", "SSP") == OneRepMaxRange(min=0.85, max=0.85)

    def test_adult_gpp_is_phase_band(self):
        """Adults in GPP get the phase band unchanged."""
        assert get_one_rep_max_range("18-35", "GPP") == OneRepMaxRange(min=0.60, max=0.75)

    def test_adult_ssp(self):
        """Adults in SSP get 85-90%."""
        assert get_one_rep_max_range("36+", "SSP") == OneRepMaxRange(min=0.85, max=0.90)

    def test_legacy_youth_ceiling_below_phase_min(self):
        """10-13 in SSP: ceiling 0.65 sits below the phase minimum."""
        band = get_one_rep_max_range("10-13", "SSP")
        assert band.min == 0.85
        assert band.max == 0.65

    def test_effective_ceiling_is_tighter_of_two(self):
        """min(age ceiling, phase max)."""
        assert get_effective_one_rep_max_ceiling("18-35", "GPP") == 0.75
        assert get_effective_one_rep_max_ceiling("14-17", "SSP") == 0.85


class TestMaxSets:
    """Per-exercise set caps."""

    def test_caps(self):
        """3 / 5 / 6 / 6."""
        assert get_max_sets_for_age("10-13") == 3
        assert get_max_sets_for_age("14-17") == 5
        assert get_max_sets_for_age("18-35") == 6
        assert get_max_sets_for_age(None) == 6


class TestApplyAgeModifiers:
    """Combined age/phase restrictions."""

    def test_legacy_youth(self):
        """10-13: sets capped at 3, reps × 1.2, High -> Moderate."""
        modified = apply_age_modifiers(5, "10", "10-13", "GPP", "High")
        assert modified.sets == 3
        assert modified.reps == "12"
        assert modified.intensity == "Moderate"
        assert modified.one_rep_max_range == OneRepMaxRange(min=0.60, max=0.65)

    def test_legacy_youth_duration(self):
        """30s × 1.2 = 36 s -> "35s"."""
        assert apply_age_modifiers(3, "30s", "10-13", "GPP").reps == "35s"

    def test_adult_reps_untouched(self):
        """Multiplier 1.0 leaves the reps string exactly as given."""
        modified = apply_age_modifiers(4, "10-12", "18-35", "SPP", "High")
        assert modified.reps == "10-12"
        assert modified.sets == 4
        assert modified.intensity == "High"

    def test_default_intensity_is_moderate(self):
        """Omitted intensity defaults to Moderate."""
        assert apply_age_modifiers(3, "8", "36+", "GPP").intensity == "Moderate"

    def test_teen_set_cap(self):
        """14-17 caps 6 sets to 5."""
        assert apply_age_modifiers(6, "8", "14-17", "SPP").sets == 5

    def test_amrap_unchanged_for_youth(self):
        """AMRAP cannot be scaled by the age multiplier."""
        assert apply_age_modifiers(3, "AMRAP", "10-13", "GPP").reps == "AMRAP"
