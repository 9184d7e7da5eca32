"""SwingSynth: synthetic golf swing data for visualization and demos."""

from swingsynth.composer import generate
from swingsynth.errors import (
    SwingSynthError,
    UnknownClub,
    UnknownSkillTier,
    InvalidWeights,
    InvalidTrajectoryInput,
    InvalidSwingSpeed,
)
from swingsynth.models.club import ClubId, profile
from swingsynth.models.skill import ShotShape, SkillTier

__version__ = "0.1.0"
