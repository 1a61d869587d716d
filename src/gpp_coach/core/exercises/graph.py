"""
Exercise progression graph.

Every exercise may point to at most one easier and one harder variant.
This module turns those per-entry edges into an explicit adjacency map
and provides the offline consistency checks run before catalog data is
shipped:

    * no self references, easier != harder
    * every edge target exists
    * following easier (or harder) from any node terminates
    * declared primary chains are mirrored in both directions
    * warm-up pools only reference known slugs and are large enough

Checks never raise; they return ProgressionIssue records so one pass can
report every problem.  assert_valid_catalog() is the raising wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Literal, Mapping, Sequence

from ..models import Progressions
from .base import Exercise

Direction = Literal["easier", "harder"]
IssueKind = Literal[
    "self_reference",
    "same_easier_harder",
    "dangling_reference",
    "cycle",
    "missing_forward",
    "missing_reverse",
    "unknown_slug",
    "pool_too_small",
]

# Chains listed easiest → hardest.  Each adjacent pair must be linked both
# ways (A.harder == B and B.easier == A).  Exercises outside these chains
# may point forward into them without being mirrored.
PRIMARY_CHAINS: tuple[tuple[str, ...], ...] = (
    # Anti-extension
    ("knee_plank", "plank", "plank_shoulder_taps"),
    # Horizontal push
    ("incline_push_up", "push_up", "decline_push_up"),
    # Vertical pull
    ("scapular_pull_up", "negative_pull_up", "assisted_pull_up", "pull_up", "weighted_pull_up"),
    # Squat
    ("goblet_squat", "back_squat", "front_squat"),
    ("single_leg_squat_box", "bulgarian_split_squat", "assisted_pistol_squat"),
    # Hinge
    ("glute_bridge", "hip_thrust", "single_leg_hip_thrust"),
    ("kickstand_rdl", "single_leg_rdl", "single_leg_deadlift"),
    # Anti-lateral flexion / anti-rotation
    ("knee_side_plank", "side_plank", "side_plank_hip_dip"),
    ("dead_bug", "pallof_press", "pallof_press_march"),
    # Jumps
    ("pogo_hops", "broad_jump", "consecutive_broad_jumps"),
    ("jump_squat", "box_jump", "depth_jump", "drop_jump"),
    ("ascending_skater_jumps", "deceleration_skater_jump", "lateral_single_leg_bounds"),
    # Carries
    ("goblet_carry", "farmers_carry", "trap_bar_carry"),
    ("suitcase_carry", "single_arm_overhead_carry"),
    ("waiter_carry", "double_overhead_carry"),
    ("front_rack_carry", "zercher_carry"),
    # Lunge
    ("reverse_lunge", "walking_lunge", "deficit_reverse_lunge"),
    # Horizontal pull
    ("elevated_inverted_row", "inverted_row", "feet_elevated_inverted_row"),
    # Hanging core
    ("lying_leg_raise", "hanging_leg_raise", "toes_to_bar"),
    # Rotation
    ("band_woodchop", "cable_woodchop", "low_high_woodchop"),
    # Unilateral press
    ("sa_db_floor_press", "sa_db_bench_press", "sa_rotational_bench_press"),
)


@dataclass(frozen=True)
class ProgressionIssue:
    """One catalog consistency problem."""

    kind: IssueKind
    slug: str
    detail: str

    def __str__(self) -> str:
        return f"[{self.kind}] {self.slug}: {self.detail}"


class CatalogValidationError(Exception):
    """Raised by assert_valid_catalog() when the catalog has issues."""

    def __init__(self, issues: Sequence[ProgressionIssue]):
        self.issues = list(issues)
        lines = "\n".join(f"  {issue}" for issue in self.issues)
        super().__init__(f"{len(self.issues)} catalog issue(s):\n{lines}")


class ProgressionGraph:
    """Adjacency map slug -> Progressions over the exercise catalog."""

    def __init__(self, edges: Mapping[str, Progressions]):
        self._edges: dict[str, Progressions] = dict(edges)

    @classmethod
    def from_exercises(cls, exercises: Iterable[Exercise]) -> ProgressionGraph:
        return cls({ex.slug: ex.progressions for ex in exercises})

    def __contains__(self, slug: object) -> bool:
        return slug in self._edges

    def __len__(self) -> int:
        return len(self._edges)

    @property
    def slugs(self) -> list[str]:
        return list(self._edges)

    def progressions(self, slug: str) -> Progressions:
        """Neighbours of slug (empty Progressions for unknown slugs)."""
        return self._edges.get(slug, Progressions())

    def next_slug(self, slug: str, direction: Direction) -> str | None:
        return getattr(self.progressions(slug), direction)

    def chain(self, slug: str, direction: Direction) -> list[str]:
        """
        Slugs reached by repeatedly following one direction, start included.

        Stops at a node with no edge in that direction, or just before a
        slug would be revisited.
        """
        walked = [slug]
        seen = {slug}
        current = self.next_slug(slug, direction)
        while current is not None and current not in seen:
            walked.append(current)
            seen.add(current)
            current = self.next_slug(current, direction)
        return walked

    def has_cycle(self, slug: str, direction: Direction) -> bool:
        """True if following direction from slug revisits a slug."""
        seen = {slug}
        current = self.next_slug(slug, direction)
        while current is not None:
            if current in seen:
                return True
            seen.add(current)
            current = self.next_slug(current, direction)
        return False

    def chain_depth(self, slug: str, direction: Direction) -> int:
        """Length of chain(slug, direction), or -1 when a cycle is hit."""
        if self.has_cycle(slug, direction):
            return -1
        return len(self.chain(slug, direction))

    def validate(self) -> list[ProgressionIssue]:
        """Structural checks over every node: self loops, dangling edges, cycles."""
        issues: list[ProgressionIssue] = []
        for slug, prog in self._edges.items():
            for direction in ("easier", "harder"):
                target = getattr(prog, direction)
                if target is None:
                    continue
                if target == slug:
                    issues.append(ProgressionIssue("self_reference", slug, f"{direction} points to itself"))
                elif target not in self._edges:
                    issues.append(
                        ProgressionIssue("dangling_reference", slug, f"{direction} -> '{target}' does not exist")
                    )
            if prog.easier is not None and prog.easier == prog.harder:
                issues.append(
                    ProgressionIssue("same_easier_harder", slug, f"easier and harder are both '{prog.easier}'")
                )
            for direction in ("easier", "harder"):
                # Self references already reported above
                if getattr(prog, direction) != slug and self.has_cycle(slug, direction):
                    issues.append(
                        ProgressionIssue("cycle", slug, f"following {direction} revisits a slug")
                    )
        return issues

    def check_bidirectional(self, chains: Iterable[Sequence[str]] = PRIMARY_CHAINS) -> list[ProgressionIssue]:
        """Check each adjacent pair of the declared chains is linked both ways."""
        issues: list[ProgressionIssue] = []
        for chain in chains:
            for easier, harder in zip(chain, chain[1:]):
                if self.next_slug(easier, "harder") != harder:
                    issues.append(
                        ProgressionIssue(
                            "missing_forward",
                            easier,
                            f"expected harder='{harder}', found {self.next_slug(easier, 'harder')!r}",
                        )
                    )
                if self.next_slug(harder, "easier") != easier:
                    issues.append(
                        ProgressionIssue(
                            "missing_reverse",
                            harder,
                            f"expected easier='{easier}', found {self.next_slug(harder, 'easier')!r}",
                        )
                    )
        return issues


def validate_warmup_pools(
    pools: Mapping[str, Mapping[str, Sequence[str]]],
    required_counts: Mapping[str, int],
    catalog_slugs: Iterable[str],
) -> list[ProgressionIssue]:
    """
    Check warm-up pools against the catalog.

    Args:
        pools: day_type -> phase -> ordered slug pool
        required_counts: phase -> number of exercises drawn from its pool
        catalog_slugs: Every slug in the catalog

    Returns:
        unknown_slug issues for pool entries missing from the catalog, and
        pool_too_small issues for pools with fewer distinct slugs than
        the phase draws
    """
    known = set(catalog_slugs)
    issues: list[ProgressionIssue] = []
    for day_type, phases in pools.items():
        for phase, pool in phases.items():
            for slug in pool:
                if slug not in known:
                    issues.append(
                        ProgressionIssue("unknown_slug", slug, f"in {day_type}/{phase} pool but not in catalog")
                    )
            needed = required_counts.get(phase, 0)
            if len(set(pool)) < needed:
                issues.append(
                    ProgressionIssue(
                        "pool_too_small",
                        f"{day_type}/{phase}",
                        f"{len(set(pool))} distinct exercise(s), phase draws {needed}",
                    )
                )
    return issues


def validate_catalog(exercises: Iterable[Exercise]) -> list[ProgressionIssue]:
    """Run every offline check over a catalog and the bundled warm-up pools."""
    from ..warmup import WARMUP_PHASES, WARMUP_POOLS

    exercises = list(exercises)
    graph = ProgressionGraph.from_exercises(exercises)
    required = {cfg.phase: cfg.exercise_count for cfg in WARMUP_PHASES}
    return (
        graph.validate()
        + graph.check_bidirectional(PRIMARY_CHAINS)
        + validate_warmup_pools(WARMUP_POOLS, required, graph.slugs)
    )


def assert_valid_catalog(exercises: Iterable[Exercise]) -> None:
    """
    Raises:
        CatalogValidationError: If validate_catalog() reports any issue
    """
    issues = validate_catalog(exercises)
    if issues:
        raise CatalogValidationError(issues)
