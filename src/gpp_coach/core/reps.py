"""
Reps/duration string parsing and formatting.

Template prescriptions carry reps as free-form strings ("10-12", "30s",
"2 min", "AMRAP", "5 each side").  This module turns them into a numeric
value plus unit, scales them, and renders them back.  Strings only exist
at the catalog/display boundary; internally callers may use the tagged
variants Reps | Duration | Amrap.

All functions are pure.
"""

import math
import re

from .config import DURATION_ROUNDING_SECONDS, MIN_DURATION_SECONDS, MIN_REPS
from .models import Amrap, Duration, ParsedReps, Reps, RepsUnit, RepsVariant

_AMRAP = "amrap"

_SIDE_RE = re.compile(r"^([\d\s\-]+)\s*(each|per)\s+(side|leg|arm)", re.IGNORECASE)
_MINUTES_RE = re.compile(r"^(\d+(?:\.\d+)?)\s*min(?:utes?)?$", re.IGNORECASE)
_SECONDS_RE = re.compile(r"^(\d+(?:\.\d+)?)\s*s(?:ec(?:onds?)?)?$", re.IGNORECASE)
_RANGE_RE = re.compile(r"^(\d+)\s*-\s*(\d+)$")
_INTEGER_RE = re.compile(r"^(\d+)$")


def round_half_up(value: float) -> int:
    """
    Round to the nearest integer, ties going up.

    Python's round() uses banker's rounding (round(2.5) == 2), which would
    make 7.5 reps display as 8 but 6.5 reps as 6.  Prescriptions need the
    conventional schoolbook rule.
    """
    return int(math.floor(value + 0.5))


def _midpoint(low: int, high: int) -> int:
    return round_half_up((low + high) / 2)


def _parse_side_prefix(num_part: str) -> int | None:
    if "-" in num_part:
        pieces = [p.strip() for p in num_part.split("-")]
        if len(pieces) != 2 or not all(p.isdigit() for p in pieces):
            return None
        return _midpoint(int(pieces[0]), int(pieces[1]))
    digits = num_part.split()[0] if num_part.split() else ""
    return int(digits) if digits.isdigit() else None


def parse_reps_string(text: str) -> ParsedReps | None:
    """
    Parse a reps/duration string into a numeric value and unit.

    Recognised forms, tried in order:
        "AMRAP"           -> None (cannot be scaled)
        "5 each side"     -> 5 reps, suffix " each side" (also per/leg/arm,
                             and ranges: "8-10 each leg" -> 9)
        "2 min"/"2min"    -> 120 seconds (decimals allowed)
        "30s"/"30 sec"    -> 30 seconds (decimals allowed)
        "10-12"           -> 11 reps (midpoint, rounded half up)
        "10"              -> 10 reps

    Args:
        text: Reps string from a template

    Returns:
        ParsedReps, or None when the string is AMRAP or unrecognised
    """
    stripped = text.strip()
    if stripped.lower() == _AMRAP:
        return None

    side = _SIDE_RE.match(stripped)
    if side:
        num_part = side.group(1).strip()
        value = _parse_side_prefix(num_part)
        if value is None:
            return None
        return ParsedReps(value=value, unit="reps", suffix=stripped[len(num_part):])

    minutes = _MINUTES_RE.match(stripped)
    if minutes:
        return ParsedReps(value=float(minutes.group(1)) * 60, unit="seconds")

    seconds = _SECONDS_RE.match(stripped)
    if seconds:
        return ParsedReps(value=float(seconds.group(1)), unit="seconds")

    rng = _RANGE_RE.match(stripped)
    if rng:
        return ParsedReps(value=_midpoint(int(rng.group(1)), int(rng.group(2))), unit="reps")

    integer = _INTEGER_RE.match(stripped)
    if integer:
        return ParsedReps(value=int(integer.group(1)), unit="reps")

    return None


def format_scaled_value(value: float, unit: RepsUnit, suffix: str | None = None) -> str:
    """
    Render a (possibly scaled) value back to a display string.

    Seconds snap to the nearest 5 (minimum 5) and render as "N min" when
    they are a whole number of minutes >= 60, else "Ns".  Reps round to
    the nearest integer (minimum 1) and get their suffix back.

    Args:
        value: Numeric value (reps or seconds)
        unit: "reps" or "seconds"
        suffix: Trailing text to reattach to reps (e.g. " each side")

    Returns:
        Display string such as "35s", "2 min", "7 each side"
    """
    if unit == "seconds":
        step = DURATION_ROUNDING_SECONDS
        seconds = max(MIN_DURATION_SECONDS, round_half_up(value / step) * step)
        if seconds >= 60 and seconds % 60 == 0:
            return f"{seconds // 60} min"
        return f"{seconds}s"

    reps = max(MIN_REPS, round_half_up(value))
    return f"{reps}{suffix}" if suffix else str(reps)


def scale_reps_or_duration(text: str, multiplier: float) -> str:
    """
    Scale a reps/duration string by a multiplier.

    Unparseable strings (AMRAP and anything unrecognised) come back
    unchanged.
    """
    parsed = parse_reps_string(text)
    if parsed is None:
        return text
    return format_scaled_value(parsed.value * multiplier, parsed.unit, parsed.suffix)


# ---------------------------------------------------------------------------
# Tagged variants
# ---------------------------------------------------------------------------


def to_variant(text: str) -> RepsVariant | None:
    """
    Convert a reps string to Reps | Duration | Amrap.

    Returns None only for strings that are neither AMRAP nor parseable.
    """
    if text.strip().lower() == _AMRAP:
        return Amrap()
    parsed = parse_reps_string(text)
    if parsed is None:
        return None
    if parsed.unit == "seconds":
        return Duration(seconds=parsed.value)
    return Reps(value=int(parsed.value), suffix=parsed.suffix)


def variant_value(variant: RepsVariant) -> float | None:
    """Numeric payload of a variant (None for Amrap)."""
    if isinstance(variant, Reps):
        return variant.value
    if isinstance(variant, Duration):
        return variant.seconds
    return None


def scale_variant(variant: RepsVariant, multiplier: float) -> RepsVariant:
    """Scale a variant, applying the same rounding and floors as the string form."""
    if isinstance(variant, Reps):
        return Reps(value=max(MIN_REPS, round_half_up(variant.value * multiplier)), suffix=variant.suffix)
    if isinstance(variant, Duration):
        step = DURATION_ROUNDING_SECONDS
        return Duration(seconds=max(MIN_DURATION_SECONDS, round_half_up(variant.seconds * multiplier / step) * step))
    return variant


def format_variant(variant: RepsVariant) -> str:
    """Render a variant back to its display string."""
    if isinstance(variant, Reps):
        return format_scaled_value(variant.value, "reps", variant.suffix)
    if isinstance(variant, Duration):
        return format_scaled_value(variant.seconds, "seconds")
    return "AMRAP"
