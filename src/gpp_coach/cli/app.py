"""Shared Typer app object, shared option types, and boundary parsing helpers."""

from typing import Annotated, Callable, TypeVar

import typer

from ..io.serializers import ValidationError
from . import views

T = TypeVar("T")

# Shared --json option used by every command
JsonOption = Annotated[
    bool,
    typer.Option("--json", "-j", help="Output as JSON for machine processing"),
]

IntensityOption = Annotated[
    str,
    typer.Option("--intensity", "-i", help="Target intensity: Low, Moderate (default), High"),
]

app = typer.Typer(
    name="gpp-coach",
    help="Workout prescription engine: intensity scaling, age/phase caps, progressions and warm-ups.",
    no_args_is_help=True,
)


def parse_or_exit(validator: Callable[[str], T], value: str) -> T:
    """Run a boundary validator; print the error and exit 1 if it fails."""
    try:
        return validator(value)
    except ValidationError as e:
        views.print_error(str(e))
        raise typer.Exit(1)
