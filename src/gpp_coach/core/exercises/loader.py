"""
YAML → Exercise loader.

The bundled catalog lives in ``src/gpp_coach/exercises/`` as one YAML
file per movement family (squat.yaml, push.yaml, warmup.yaml, ...).  Each
file holds a list of exercise mappings.

User overrides: place YAML files in ``~/.gpp-coach/exercises/``.  Each
holds a list of (partial) mappings keyed by ``slug``.  An entry whose
slug matches a bundled exercise is deep-merged over it, so only changed
keys need to be listed; an entry with a new slug is added as a new
exercise.

Usage (internal - called by registry.py):
    from .loader import load_exercises_from_yaml
    exercises = load_exercises_from_yaml()   # dict or None on failure
"""

from __future__ import annotations

import os
import warnings
from pathlib import Path

import yaml

from ..models import Progressions
from .base import Exercise

_REQUIRED_EXERCISE_FIELDS: frozenset[str] = frozenset({"slug", "name", "difficulty"})


def exercise_from_dict(d: dict) -> Exercise:
    """Convert a raw mapping (from YAML) to an Exercise.

    Raises ValueError if a required field is absent or a value is outside
    its vocabulary.
    """
    missing = _REQUIRED_EXERCISE_FIELDS - set(d)
    if missing:
        raise ValueError(f"Exercise missing fields: {sorted(missing)}")

    raw_prog = d.get("progressions") or {}
    if not isinstance(raw_prog, dict):
        raise ValueError("progressions must be a mapping with easier/harder keys")

    return Exercise(
        slug=str(d["slug"]),
        name=str(d["name"]),
        difficulty=str(d["difficulty"]),  # type: ignore[arg-type]
        tags=frozenset(str(t) for t in d.get("tags") or ()),
        equipment=tuple(str(e) for e in d.get("equipment") or ()),
        progressions=Progressions(
            easier=raw_prog.get("easier") or None,
            harder=raw_prog.get("harder") or None,
        ),
        instructions=d.get("instructions"),
    )


def _load_yaml_list(path: Path) -> list[dict]:
    """Load a YAML file holding a list of mappings; [] if unreadable."""
    try:
        with open(path, "r", encoding="utf-8") as fh:
            data = yaml.safe_load(fh)
    except (OSError, yaml.YAMLError) as exc:
        warnings.warn(f"gpp-coach: cannot read {path.name} ({exc})", stacklevel=3)
        return []
    if not isinstance(data, list):
        return []
    return [item for item in data if isinstance(item, dict)]


def _deep_merge(base: dict, override: dict) -> dict:
    """Recursively merge override into base (non-destructive to base)."""
    result = dict(base)
    for k, v in override.items():
        if isinstance(v, dict) and isinstance(result.get(k), dict):
            result[k] = _deep_merge(result[k], v)
        else:
            result[k] = v
    return result


def get_bundled_exercises_dir() -> Path | None:
    """Return path to the bundled exercises/ data directory, or None if not found."""
    # loader.py lives at src/gpp_coach/core/exercises/loader.py
    candidate = Path(__file__).parent.parent.parent / "exercises"
    return candidate if candidate.is_dir() else None


def get_user_exercises_dir() -> Path | None:
    """Return ~/.gpp-coach/exercises/ if it exists, else None."""
    home = Path(os.environ.get("HOME", "~")).expanduser()
    p = home / ".gpp-coach" / "exercises"
    return p if p.is_dir() else None


def _collect_raw(directory: Path) -> list[dict]:
    raw: list[dict] = []
    for p in sorted(directory.glob("*.yaml")):
        raw.extend(_load_yaml_list(p))
    return raw


def load_exercises_from_yaml(
    bundled_dir: Path | None = None,
    user_dir: Path | None = None,
) -> dict[str, Exercise] | None:
    """Return {slug: Exercise} loaded from the catalog YAML files.

    Args:
        bundled_dir: Catalog directory; defaults to the packaged one
        user_dir: Override directory; defaults to ~/.gpp-coach/exercises/

    Returns:
        Exercises in file order (bundled first, then user-only entries),
        or None if nothing could be loaded.  Malformed entries are skipped
        with a warning.
    """
    bundled_dir = bundled_dir or get_bundled_exercises_dir()
    user_dir = user_dir or get_user_exercises_dir()

    if bundled_dir is None and user_dir is None:
        return None

    raw_by_slug: dict[str, dict] = {}
    for entry in _collect_raw(bundled_dir) if bundled_dir is not None else []:
        slug = entry.get("slug")
        if not slug:
            warnings.warn("gpp-coach: skipping catalog entry without a slug", stacklevel=2)
            continue
        if slug in raw_by_slug:
            warnings.warn(f"gpp-coach: duplicate exercise '{slug}' - keeping the first", stacklevel=2)
            continue
        raw_by_slug[slug] = entry

    if user_dir is not None:
        for entry in _collect_raw(user_dir):
            slug = entry.get("slug")
            if not slug:
                warnings.warn("gpp-coach: skipping user entry without a slug", stacklevel=2)
                continue
            if slug in raw_by_slug:
                raw_by_slug[slug] = _deep_merge(raw_by_slug[slug], entry)
            else:
                raw_by_slug[slug] = entry

    result: dict[str, Exercise] = {}
    for slug, raw in raw_by_slug.items():
        try:
            result[slug] = exercise_from_dict(raw)
        except ValueError as exc:
            warnings.warn(f"gpp-coach: skipping exercise '{slug}' - {exc}", stacklevel=2)

    return result if result else None
