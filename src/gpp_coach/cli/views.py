"""
CLI view formatters using Rich for pretty console output.

Handles table formatting and display of prescriptions, warm-ups and
catalog checks.
"""

from typing import Iterable, Sequence

from rich.console import Console
from rich.table import Table

from ..core.category import CategoryExerciseParameters, format_tempo
from ..core.exercises.base import Exercise
from ..core.exercises.graph import ProgressionIssue
from ..core.models import (
    AgeModifiedPrescription,
    Intensity,
    Prescription,
    ScaledBodyweightPrescription,
    ScaledWeightedPrescription,
)
from ..core.warmup import WARMUP_PHASE_CONFIG, get_warmup_phase_groups

console = Console()


def _fmt_weight(weight: float) -> str:
    return f"{weight:g}"


def format_weighted_table(
    scaled: ScaledWeightedPrescription,
    intensity: Intensity,
    one_rep_max: float | None = None,
) -> Table:
    """
    Create a Rich table for a scaled weighted prescription.

    Args:
        scaled: Engine output
        intensity: Intensity the prescription was scaled to
        one_rep_max: 1RM used for the target weight, if any

    Returns:
        Rich Table object
    """
    table = Table(title=f"Weighted prescription - {intensity}")
    table.add_column("Sets", justify="right", style="bold")
    table.add_column("Reps", justify="right", style="bold")
    table.add_column("Rest(s)", justify="right")
    table.add_column("%1RM", justify="right", style="cyan")
    table.add_column("Weight", justify="right", style="green")
    table.add_column("RPE", justify="center", style="magenta")

    weight = "-"
    if scaled.weight is not None:
        weight = _fmt_weight(scaled.weight)
        if one_rep_max:
            weight += f" (of {_fmt_weight(one_rep_max)})"

    table.add_row(
        str(scaled.sets),
        str(scaled.reps),
        str(scaled.rest_seconds),
        f"{scaled.percent_of_1rm}%",
        weight,
        f"{scaled.rpe_target.min}-{scaled.rpe_target.max}",
    )
    return table


def print_age_adjustment(modified: AgeModifiedPrescription, age_group: str, phase: str) -> None:
    """Show what the age/phase layer changed before scaling."""
    orm = modified.one_rep_max_range
    console.print(
        f"[dim]Age {age_group} / {phase}: intensity {modified.intensity}, "
        f"sets ≤ {modified.sets}, reps {modified.reps}, "
        f"1RM band {orm.min:.0%}–{orm.max:.0%}[/dim]"
    )


def format_bodyweight_table(
    scaled: ScaledBodyweightPrescription,
    base_slug: str,
    intensity: Intensity,
) -> Table:
    """Create a Rich table for a scaled bodyweight prescription."""
    table = Table(title=f"Bodyweight prescription - {intensity}")
    table.add_column("Exercise", style="cyan")
    table.add_column("Reps", justify="right", style="bold")
    table.add_column("Rest(s)", justify="right")
    table.add_column("RPE", justify="center", style="magenta")

    exercise = scaled.exercise_slug
    if scaled.is_substituted:
        exercise = f"{scaled.exercise_slug} [dim](for {base_slug})[/dim]"

    table.add_row(
        exercise,
        scaled.reps,
        str(scaled.rest_seconds),
        f"{scaled.rpe_target.min}-{scaled.rpe_target.max}",
    )
    return table


def print_warmup(prescriptions: Sequence[Prescription], day_type: str, duration_min: float) -> None:
    """
    Print a warm-up grouped by phase.

    Args:
        prescriptions: Output of generate_warmup_prescriptions()
        day_type: Day type shown in the title
        duration_min: Total duration in minutes
    """
    table = Table(title=f"Warm-up - {day_type} (~{duration_min:g} min)")
    table.add_column("#", justify="right", style="dim", width=3)
    table.add_column("Phase", style="magenta")
    table.add_column("Exercise", style="cyan")
    table.add_column("Sets", justify="right")
    table.add_column("Reps", justify="right", style="bold")
    table.add_column("Rest(s)", justify="right")

    for phase, items in get_warmup_phase_groups(prescriptions).items():
        label = WARMUP_PHASE_CONFIG[phase].label
        for i, item in enumerate(items):
            table.add_row(
                str(item.order_index),
                label if i == 0 else "",
                item.exercise_slug,
                str(item.sets),
                item.reps,
                str(item.rest_seconds),
            )
        table.add_section()

    console.print(table)


def format_one_rep_max_table(one_rep_max: float, targets: Iterable[tuple[str, float, float]]) -> Table:
    """
    Create a table of target loads per intensity.

    Args:
        one_rep_max: Estimated 1RM
        targets: (intensity, percent, weight) rows
    """
    table = Table(title=f"Estimated 1RM: {_fmt_weight(one_rep_max)}")
    table.add_column("Intensity", style="magenta")
    table.add_column("%1RM", justify="right", style="cyan")
    table.add_column("Weight", justify="right", style="green")
    for intensity, percent, weight in targets:
        table.add_row(intensity, f"{percent:.1%}", _fmt_weight(weight))
    return table


def print_progressions(slug: str, easier: Sequence[str], harder: Sequence[str]) -> None:
    """Print easier ← slug → harder chains."""
    easier_part = " ← ".join(reversed(easier[1:]))
    harder_part = " → ".join(harder[1:])
    line = f"[bold cyan]{slug}[/bold cyan]"
    if easier_part:
        line = f"{easier_part} ← {line}"
    if harder_part:
        line = f"{line} → {harder_part}"
    console.print(line)
    if not easier_part and not harder_part:
        console.print("[dim]No progressions defined.[/dim]")


def format_catalog_table(exercises: Iterable[Exercise]) -> Table:
    """Create a table listing catalog exercises."""
    table = Table(title="Exercise catalog")
    table.add_column("Slug", style="cyan")
    table.add_column("Name")
    table.add_column("Difficulty", style="magenta")
    table.add_column("Equipment", style="dim")
    table.add_column("Easier", style="green")
    table.add_column("Harder", style="red")
    for ex in exercises:
        table.add_row(
            ex.slug,
            ex.name,
            ex.difficulty,
            ", ".join(ex.equipment),
            ex.progressions.easier or "",
            ex.progressions.harder or "",
        )
    return table


def print_issues(issues: Sequence[ProgressionIssue]) -> None:
    """Print catalog issues, one per line."""
    for issue in issues:
        console.print(f"  [red]{issue.kind}[/red] [cyan]{issue.slug}[/cyan]: {issue.detail}")


def format_category_table(
    params: CategoryExerciseParameters,
    title: str,
) -> Table:
    """Create a table for category-specific exercise parameters."""
    table = Table(title=title)
    table.add_column("Sets", justify="right", style="bold")
    table.add_column("Reps", justify="right", style="bold")
    table.add_column("Rest(s)", justify="right")
    table.add_column("Tempo", justify="center")
    table.add_column("%1RM", justify="right", style="cyan")
    table.add_column("RPE", justify="center", style="magenta")

    orm = params.one_rep_max_percent
    orm_str = f"{orm.min:.0%}" if orm.min == orm.max else f"{orm.min:.0%}–{orm.max:.0%}"
    rpe = params.rpe
    rpe_str = f"{rpe.min:g}" if rpe.min == rpe.max else f"{rpe.min:g}-{rpe.max:g}"

    table.add_row(
        str(params.sets),
        str(params.reps),
        str(params.rest_seconds),
        format_tempo(params.tempo),
        orm_str,
        rpe_str,
    )
    return table


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[green]{message}[/green]")


def print_error(message: str) -> None:
    """Print an error message."""
    console.print(f"[red]Error: {message}[/red]")


def print_warning(message: str) -> None:
    """Print a warning message."""
    console.print(f"[yellow]Warning: {message}[/yellow]")


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[blue]{message}[/blue]")
