"""Warm-up command."""

import json
from typing import Annotated

import typer

from ...core.warmup import (
    generate_warmup_prescriptions,
    get_active_phases_for_day_type,
    get_warmup_duration,
)
from ...io.serializers import prescription_to_dict, validate_day_type
from .. import views
from ..app import JsonOption, app, parse_or_exit


@app.command()
def warmup(
    day_type: Annotated[
        str,
        typer.Argument(help="Day type: lower_a, lower_b, upper_a, upper_b, power, full_body, recovery"),
    ],
    include_optional: Annotated[
        bool,
        typer.Option("--optional/--no-optional", help="Include foam rolling"),
    ] = True,
    start_index: Annotated[
        int,
        typer.Option("--start-index", help="order_index of the first exercise", min=0),
    ] = 0,
    json_out: JsonOption = False,
) -> None:
    """
    Generate the phase-ordered warm-up for a day type.
    """
    day = parse_or_exit(validate_day_type, day_type)
    prescriptions = generate_warmup_prescriptions(day, include_optional, start_index)
    duration = get_warmup_duration(day, include_optional)

    if json_out:
        out = {
            "dayType": day,
            "durationMin": duration,
            "exercises": [prescription_to_dict(p) for p in prescriptions],
        }
        print(json.dumps(out, indent=2))
        return

    views.print_warmup(prescriptions, day, duration)
    if not include_optional and "foam_rolling" in get_active_phases_for_day_type(day):
        views.print_info("Foam rolling skipped; pass --optional to include it.")
