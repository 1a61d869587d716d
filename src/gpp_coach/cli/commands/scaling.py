"""Scaling commands: scale-weighted, scale-bodyweight, one-rep-max, category-params."""

import json
from typing import Annotated, Optional

import typer

from ...core.age import apply_age_modifiers
from ...core.category import (
    get_category_exercise_parameters,
    get_category_name,
    get_category_sports,
    get_exercise_focus,
)
from ...core.exercises.registry import get_exercise
from ...core.models import INTENSITY_ORDER, BodyweightPrescription, WeightedPrescription
from ...core.reps import parse_reps_string, round_half_up
from ...core.scaling import (
    apply_intensity_to_bodyweight,
    apply_intensity_to_weighted,
    calculate_one_rep_max,
    calculate_target_weight,
    get_avg_one_rep_max_percent,
)
from ...io.serializers import (
    ValidationError,
    age_modified_to_dict,
    category_parameters_to_dict,
    scaled_bodyweight_to_dict,
    scaled_weighted_to_dict,
    validate_age_group,
    validate_category_id,
    validate_intensity,
    validate_non_negative,
    validate_phase,
    validate_positive,
)
from .. import views
from ..app import IntensityOption, JsonOption, app, parse_or_exit


@app.command("scale-weighted")
def scale_weighted(
    sets: Annotated[int, typer.Option("--sets", "-s", help="Template sets")],
    reps: Annotated[int, typer.Option("--reps", "-r", help="Template reps per set")],
    rest: Annotated[int, typer.Option("--rest", help="Template rest in seconds")] = 60,
    intensity: IntensityOption = "Moderate",
    one_rep_max: Annotated[
        Optional[float],
        typer.Option("--one-rep-max", "-m", help="Known 1RM; adds a target weight"),
    ] = None,
    age_group: Annotated[
        Optional[str],
        typer.Option("--age-group", "-a", help="Apply age caps first: 14-17, 18-35, 36+ (legacy 10-13, 18+)"),
    ] = None,
    phase: Annotated[
        str,
        typer.Option("--phase", "-p", help="Training phase for the 1RM band: GPP, SPP, SSP"),
    ] = "GPP",
    json_out: JsonOption = False,
) -> None:
    """
    Scale a barbell/dumbbell prescription to an intensity.

    With --age-group, intensity and sets are capped and reps adjusted for
    the athlete's age before the intensity matrix is applied.
    """
    level = parse_or_exit(validate_intensity, intensity)
    phase_value = parse_or_exit(validate_phase, phase)
    try:
        validate_positive(sets, "sets")
        validate_positive(reps, "reps")
        validate_non_negative(rest, "rest")
    except ValidationError as e:
        views.print_error(str(e))
        raise typer.Exit(1)

    modified = None
    if age_group is not None:
        age_value = parse_or_exit(validate_age_group, age_group)
        modified = apply_age_modifiers(sets, str(reps), age_value, phase_value, level)
        level = modified.intensity
        sets = modified.sets
        reps = int(modified.reps)

    scaled = apply_intensity_to_weighted(WeightedPrescription(sets, reps, rest), level, one_rep_max)

    # The load may not exceed the age/phase 1RM ceiling
    capped = False
    if modified is not None:
        ceiling = modified.one_rep_max_range.max
        if scaled.percent_of_1rm > round_half_up(ceiling * 100):
            scaled.percent_of_1rm = round_half_up(ceiling * 100)
            if one_rep_max is not None:
                scaled.weight = calculate_target_weight(one_rep_max, ceiling)
            capped = True

    if json_out:
        out = scaled_weighted_to_dict(scaled)
        out["intensity"] = level
        if modified is not None:
            out["ageAdjustment"] = age_modified_to_dict(modified)
            out["cappedToAgeCeiling"] = capped
        print(json.dumps(out, indent=2))
        return

    if modified is not None:
        views.print_age_adjustment(modified, age_group or "", phase_value)
    views.console.print(views.format_weighted_table(scaled, level, one_rep_max))
    if capped:
        views.print_info(f"Load capped at {scaled.percent_of_1rm}% of 1RM for age group {age_group}.")


@app.command("scale-bodyweight")
def scale_bodyweight(
    slug: Annotated[str, typer.Argument(help="Exercise slug from the catalog, e.g. plank")],
    reps: Annotated[str, typer.Option("--reps", "-r", help="Template reps: 10, 10-12, 30s, 2 min, AMRAP, 5 each side")],
    rest: Annotated[int, typer.Option("--rest", help="Template rest in seconds")] = 60,
    intensity: IntensityOption = "Moderate",
    json_out: JsonOption = False,
) -> None:
    """
    Scale a bodyweight prescription, substituting easier/harder variants.

    Low swaps in the exercise's easier progression, High its harder one.
    """
    level = parse_or_exit(validate_intensity, intensity)
    try:
        exercise = get_exercise(slug)
    except ValueError as e:
        views.print_error(str(e))
        raise typer.Exit(1)

    scaled = apply_intensity_to_bodyweight(
        BodyweightPrescription(reps=reps, rest_seconds=rest),
        level,
        exercise.slug,
        exercise.progressions,
    )

    if json_out:
        print(json.dumps(scaled_bodyweight_to_dict(scaled), indent=2))
        return

    views.console.print(views.format_bodyweight_table(scaled, slug, level))
    if parse_reps_string(reps) is None and level != "Moderate":
        views.print_warning(f"'{reps}' cannot be scaled; volume left unchanged.")


@app.command("one-rep-max")
def one_rep_max(
    weight: Annotated[float, typer.Option("--weight", "-w", help="Load lifted")],
    reps: Annotated[int, typer.Option("--reps", "-r", help="Reps completed at that load")],
    json_out: JsonOption = False,
) -> None:
    """
    Estimate 1RM (Epley) and list target loads for each intensity.

    1RM = weight × (1 + reps / 30); loads are rounded to 2.5.
    """
    estimate = calculate_one_rep_max(weight, reps)
    if estimate <= 0:
        views.print_error("weight and reps must both be positive")
        raise typer.Exit(1)

    targets = []
    for level in INTENSITY_ORDER:
        percent = get_avg_one_rep_max_percent(level)
        targets.append((level, percent, calculate_target_weight(estimate, percent)))

    if json_out:
        out = {
            "oneRepMax": estimate,
            "targets": {level: {"percent": pct, "weight": w} for level, pct, w in targets},
        }
        print(json.dumps(out, indent=2))
        return

    views.console.print(views.format_one_rep_max_table(estimate, targets))


@app.command("category-params")
def category_params(
    category: Annotated[str, typer.Option("--category", "-c", help="Sport category: 1-4 or Endurance/Power/Rotational/Strength")],
    phase: Annotated[str, typer.Option("--phase", "-p", help="Training phase: GPP, SPP, SSP")] = "GPP",
    age_group: Annotated[str, typer.Option("--age-group", "-a", help="Age group: 14-17, 18-35, 36+")] = "18-35",
    years: Annotated[float, typer.Option("--years", "-y", help="Years of training experience")] = 0,
    focus: Annotated[
        Optional[str],
        typer.Option("--focus", "-f", help="strength, power or bodyweight (default: from --exercise)"),
    ] = None,
    exercise_slug: Annotated[
        Optional[str],
        typer.Option("--exercise", "-e", help="Derive focus from this catalog exercise"),
    ] = None,
    json_out: JsonOption = False,
) -> None:
    """
    Show category-specific sets/reps/rest/tempo/RPE for an athlete.

    Age group and experience choose a position inside the category's
    ranges; legacy 10-13 athletes are capped at 3 sets and 65% 1RM.
    """
    category_id = parse_or_exit(validate_category_id, category)
    phase_value = parse_or_exit(validate_phase, phase)
    age_value = parse_or_exit(validate_age_group, age_group)
    try:
        validate_non_negative(years, "years")
    except ValidationError as e:
        views.print_error(str(e))
        raise typer.Exit(1)

    if focus is not None:
        if focus not in ("strength", "power", "bodyweight"):
            views.print_error(f"Invalid focus: {focus}. Must be strength, power or bodyweight")
            raise typer.Exit(1)
        exercise_focus = focus
    elif exercise_slug is not None:
        try:
            exercise = get_exercise(exercise_slug)
        except ValueError as e:
            views.print_error(str(e))
            raise typer.Exit(1)
        exercise_focus = get_exercise_focus(sorted(exercise.tags), exercise.equipment)
    else:
        exercise_focus = "strength"

    params = get_category_exercise_parameters(category_id, phase_value, age_value, years, exercise_focus)

    if json_out:
        out = category_parameters_to_dict(params)
        out["category"] = get_category_name(category_id)
        out["focus"] = exercise_focus
        print(json.dumps(out, indent=2))
        return

    sports = ", ".join(get_category_sports(category_id))
    title = f"{get_category_name(category_id)} ({sports}) - {phase_value}, {exercise_focus}"
    views.console.print(views.format_category_table(params, title))
