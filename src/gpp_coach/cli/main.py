"""
CLI entry point using Typer.

Provides commands for the prescription engine:
- scale-weighted: Scale a loaded lift to an intensity (optionally age-capped)
- scale-bodyweight: Scale a bodyweight movement, substituting variants
- one-rep-max: Epley 1RM estimate and target loads
- category-params: Sport-category sets/reps/rest/tempo/RPE
- warmup: Phase-ordered warm-up for a day type
- progressions: Easier/harder chains from an exercise
- validate: Offline catalog and warm-up pool checks
"""

from .app import app
from .commands import catalog, scaling, warmup  # noqa: F401  (registers commands)

if __name__ == "__main__":
    app()
