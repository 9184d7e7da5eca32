"""
Skill tiers and shot shapes for SwingSynth.

A SkillTier scales and perturbs club baselines and sets how likely
each ShotShape is. A ShotShape maps to a signed curvature range.
"""

from enum import Enum

from swingsynth.errors import UnknownSkillTier
from swingsynth.utils.constants import (
    SKILL_TIERS,
    SHOT_SHAPE_WEIGHTS,
    CURVATURE_RANGES,
)


class ShotShape(str, Enum):
    """Categorical shape of the ball flight."""
    STRAIGHT = "straight"
    FADE = "fade"
    DRAW = "draw"
    SLICE = "slice"
    HOOK = "hook"

    @property
    def curvature_range(self) -> tuple[int, float, float]:
        """(sign, low, high) of the curvature this shape produces."""
        return CURVATURE_RANGES[self.value]


class SkillTier(str, Enum):
    """Coarse player proficiency."""
    NOVICE = "novice"
    INTERMEDIATE = "intermediate"
    EXPERT = "expert"

    @property
    def multiplier(self) -> float:
        return SKILL_TIERS[self.value][0]

    @property
    def variance(self) -> float:
        return SKILL_TIERS[self.value][1]

    @property
    def shape_weights(self) -> tuple[float, ...]:
        """Selection weight for each ShotShape, in ShotShape order."""
        return SHOT_SHAPE_WEIGHTS[self.value]


def resolve_skill(skill_tier: SkillTier | str) -> SkillTier:
    """Resolve a tier label to a SkillTier, raising UnknownSkillTier on a miss."""
    if isinstance(skill_tier, SkillTier):
        return skill_tier
    try:
        return SkillTier(skill_tier)
    except ValueError:
        raise UnknownSkillTier(skill_tier) from None
