"""
Exceptions raised while synthesizing swing data.

Generation is all-or-nothing: any of these aborts the whole record.
"""


class SwingSynthError(Exception):
    """Base class for all SwingSynth errors."""


class UnknownClub(SwingSynthError, LookupError):
    """Club identifier is not one of the supported clubs."""

    def __init__(self, club_id):
        self.club_id = club_id
        super().__init__(f"Unknown club: {club_id!r}")


class UnknownSkillTier(SwingSynthError, LookupError):
    """Skill tier is not one of novice, intermediate, expert."""

    def __init__(self, skill_tier):
        self.skill_tier = skill_tier
        super().__init__(f"Unknown skill tier: {skill_tier!r}")


class InvalidWeights(SwingSynthError, ValueError):
    """Weighted sampler was given a malformed weight vector."""


class InvalidTrajectoryInput(SwingSynthError, ValueError):
    """Distance or launch angle cannot produce a finite trajectory."""


class InvalidSwingSpeed(SwingSynthError, ValueError):
    """Swing speed is not a positive finite number."""
