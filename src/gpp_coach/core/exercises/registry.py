"""
Exercise registry.

The whole catalog is loaded from the bundled YAML files (plus any user
overrides in ``~/.gpp-coach/exercises/``) at import time.  If nothing can
be loaded a RuntimeError is raised: the engine cannot resolve
progressions or validate warm-up pools without a catalog.
"""

from ..models import Progressions
from .base import Exercise


def _build_registry() -> dict[str, Exercise]:
    from .loader import load_exercises_from_yaml

    loaded = load_exercises_from_yaml()
    if not loaded:
        raise RuntimeError(
            "gpp-coach: no exercises could be loaded from YAML. "
            "Check that src/gpp_coach/exercises/*.yaml files are present and valid."
        )
    return loaded


EXERCISE_REGISTRY: dict[str, Exercise] = _build_registry()


def get_exercise(slug: str) -> Exercise:
    """
    Return the Exercise for the given slug.

    Raises:
        ValueError: If slug is not in the catalog
    """
    if slug not in EXERCISE_REGISTRY:
        raise ValueError(f"Unknown exercise '{slug}'. Run `gpp-coach progressions --list` to see valid slugs.")
    return EXERCISE_REGISTRY[slug]


def get_progressions(slug: str) -> Progressions:
    """Easier/harder neighbours of an exercise (empty Progressions if none)."""
    return get_exercise(slug).progressions
