"""Catalog commands: progressions, validate."""

import json
from typing import Annotated, Optional

import typer

from ...core.exercises.graph import ProgressionGraph, validate_catalog
from ...core.exercises.registry import EXERCISE_REGISTRY, get_exercise
from .. import views
from ..app import JsonOption, app


@app.command()
def progressions(
    slug: Annotated[
        Optional[str],
        typer.Argument(help="Exercise slug, e.g. push_up"),
    ] = None,
    list_all: Annotated[
        bool,
        typer.Option("--list", "-l", help="List every exercise in the catalog"),
    ] = False,
    json_out: JsonOption = False,
) -> None:
    """
    Show the easier and harder chains from an exercise.

    Follows easier/harder links until an exercise has none.
    """
    if list_all:
        exercises = list(EXERCISE_REGISTRY.values())
        if json_out:
            out = [
                {"slug": ex.slug, "easier": ex.progressions.easier, "harder": ex.progressions.harder}
                for ex in exercises
            ]
            print(json.dumps(out, indent=2))
            return
        views.console.print(views.format_catalog_table(exercises))
        return

    if slug is None:
        views.print_error("Give an exercise slug or --list.")
        raise typer.Exit(1)

    try:
        get_exercise(slug)
    except ValueError as e:
        views.print_error(str(e))
        raise typer.Exit(1)

    graph = ProgressionGraph.from_exercises(EXERCISE_REGISTRY.values())
    easier = graph.chain(slug, "easier")
    harder = graph.chain(slug, "harder")

    if json_out:
        print(json.dumps({"slug": slug, "easier": easier[1:], "harder": harder[1:]}, indent=2))
        return

    views.print_progressions(slug, easier, harder)


@app.command()
def validate(json_out: JsonOption = False) -> None:
    """
    Check the exercise catalog and warm-up pools for consistency.

    Reports self references, easier == harder, dangling links, cycles,
    unmirrored primary chains, unknown warm-up slugs and undersized pools.
    Exits 1 when any issue is found.
    """
    issues = validate_catalog(EXERCISE_REGISTRY.values())

    if json_out:
        print(json.dumps([{"kind": i.kind, "slug": i.slug, "detail": i.detail} for i in issues], indent=2))
    elif issues:
        views.print_error(f"{len(issues)} catalog issue(s) found:")
        views.print_issues(issues)
    else:
        views.print_success(f"Catalog OK: {len(EXERCISE_REGISTRY)} exercises, no issues.")

    if issues:
        raise typer.Exit(1)
