"""
Exercise catalog for gpp-coach.

Each exercise is an immutable Exercise record loaded from the bundled
YAML catalog; the progression graph and its offline checks live in graph.py.
"""

from .base import EQUIPMENT_GLOSSARY, TAG_GLOSSARY, Exercise
from .graph import (
    PRIMARY_CHAINS,
    CatalogValidationError,
    ProgressionGraph,
    ProgressionIssue,
    assert_valid_catalog,
    validate_catalog,
)
from .registry import EXERCISE_REGISTRY, get_exercise, get_progressions

__all__ = [
    "Exercise",
    "TAG_GLOSSARY",
    "EQUIPMENT_GLOSSARY",
    "EXERCISE_REGISTRY",
    "get_exercise",
    "get_progressions",
    "ProgressionGraph",
    "ProgressionIssue",
    "PRIMARY_CHAINS",
    "CatalogValidationError",
    "validate_catalog",
    "assert_valid_catalog",
]
