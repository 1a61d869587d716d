"""
Base types for exercise catalog entries.

Exercise is immutable reference data.  Tags and equipment are drawn from
closed vocabularies and checked once, when the catalog is loaded, so the
scaling hot path never re-validates them.
"""

from dataclasses import dataclass, field
from typing import Literal, get_args

from ..models import Progressions

Difficulty = Literal["beginner", "intermediate", "advanced"]
DIFFICULTIES: tuple[Difficulty, ...] = get_args(Difficulty)

# Valid tags, grouped by what they describe
TAG_GLOSSARY: dict[str, frozenset[str]] = {
    "body_part": frozenset({"lower_body", "upper_body", "core", "full_body"}),
    "movement_pattern": frozenset(
        {
            "squat",
            "hinge",
            "lunge",
            "push",
            "pull",
            "carry",
            "rotation",
            "anti_rotation",
            "anti_extension",
            "anti_lateral_flexion",
        }
    ),
    "laterality": frozenset({"bilateral", "unilateral", "single_leg", "single_arm"}),
    "purpose": frozenset(
        {
            "warmup",
            "cooldown",
            "mobility",
            "strength",
            "power",
            "conditioning",
            "plyometric",
            "stability",
            "isometric",
            "agility",
            "isolation",
            "foam_rolling",
            "activation",
        }
    ),
    "muscle_emphasis": frozenset(
        {
            "quad_dominant",
            "hamstring",
            "glute",
            "posterior_chain",
            "chest",
            "back",
            "shoulder",
            "rear_delt",
            "hip_flexor",
            "thoracic",
            "hip",
            "spine",
        }
    ),
    "plane": frozenset({"sagittal", "frontal", "transverse", "horizontal", "vertical", "incline"}),
    "training_quality": frozenset(
        {
            "explosive",
            "reactive",
            "dynamic",
            "static",
            "compound",
            "functional",
            "balance",
            "coordination",
            "shoulder_health",
            "deceleration_mechanics",
            "eccentric",
            "grip_endurance",
        }
    ),
    "equipment_context": frozenset({"bodyweight"}),
    "sport_specific": frozenset({"sport_specific", "basketball"}),
}

ALL_VALID_TAGS: frozenset[str] = frozenset().union(*TAG_GLOSSARY.values())

EQUIPMENT_GLOSSARY: frozenset[str] = frozenset(
    {
        # Free weights
        "dumbbell",
        "kettlebell",
        "barbell",
        "trap_bar",
        "medicine_ball",
        "ez_bar",
        # Benches, boxes, racks
        "bench",
        "incline_bench",
        "plyo_box",
        "box",
        "rack",
        "pull_up_bar",
        "bar",
        # Machines, suspension, sleds
        "cable_machine",
        "trx",
        "sled",
        "tank",
        # Accessories
        "band",
        "mini_band",
        "rings",
        "wall",
        "stability_ball",
        "foam_roller",
        "basketball",
        "bodyweight",
    }
)


@dataclass(frozen=True)
class Exercise:
    """
    One catalog entry.

    progressions holds the adjacency for this node of the progression
    graph; the graph itself is assembled in graph.py.
    """

    slug: str
    name: str
    difficulty: Difficulty
    tags: frozenset[str] = field(default_factory=frozenset)
    equipment: tuple[str, ...] = ()
    progressions: Progressions = field(default_factory=Progressions)
    instructions: str | None = None

    def __post_init__(self) -> None:
        """Validate against the closed vocabularies."""
        if not self.slug:
            raise ValueError("slug must be non-empty")
        if not self.name:
            raise ValueError(f"{self.slug}: name must be non-empty")
        if self.difficulty not in DIFFICULTIES:
            raise ValueError(f"{self.slug}: invalid difficulty '{self.difficulty}'")
        unknown_tags = self.tags - ALL_VALID_TAGS
        if unknown_tags:
            raise ValueError(f"{self.slug}: unknown tags {sorted(unknown_tags)}")
        unknown_equipment = set(self.equipment) - EQUIPMENT_GLOSSARY
        if unknown_equipment:
            raise ValueError(f"{self.slug}: unknown equipment {sorted(unknown_equipment)}")
