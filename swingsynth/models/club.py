"""
Club definitions for SwingSynth.

Provides the closed set of supported clubs and lookup of the baseline
distance, swing speed, launch angle and spin rate that swing synthesis
scales by skill tier.
"""

from dataclasses import dataclass
from enum import Enum

from swingsynth.errors import UnknownClub
from swingsynth.utils.constants import (
    BASE_DISTANCE,
    BASE_SWING_SPEED,
    BASE_LAUNCH_ANGLE,
    BASE_SPIN_RATE,
    CLUB_CATEGORIES,
    CATEGORY_ARC_FACTORS,
)


class ClubId(str, Enum):
    """Supported golf clubs."""
    DRIVER = "Driver"
    WOOD_3 = "3-Wood"
    IRON_5 = "5-Iron"
    IRON_7 = "7-Iron"
    IRON_9 = "9-Iron"
    PW = "PW"
    SW = "SW"


class ClubCategory(str, Enum):
    """Club length category, which sets the swing arc amplitude."""
    LONG = "long"
    MID_IRON = "mid_iron"
    SHORT = "short"

    @property
    def arc_factor(self) -> float:
        return CATEGORY_ARC_FACTORS[self.value]


def resolve_club(club_id: ClubId | str) -> ClubId:
    """Resolve a club label to a ClubId, raising UnknownClub on a miss."""
    if isinstance(club_id, ClubId):
        return club_id
    try:
        return ClubId(club_id)
    except ValueError:
        raise UnknownClub(club_id) from None


@dataclass(frozen=True)
class ClubProfile:
    """Baseline statistics for a club at intermediate skill."""

    club_id: ClubId
    category: ClubCategory
    base_distance: float
    base_swing_speed: float
    base_launch_angle: float
    base_spin_rate: float

    @classmethod
    def from_id(cls, club_id: ClubId | str) -> "ClubProfile":
        """Create a ClubProfile from its id, looking up baseline values."""
        club_id = resolve_club(club_id)
        name = club_id.value
        return cls(
            club_id=club_id,
            category=ClubCategory(CLUB_CATEGORIES[name]),
            base_distance=BASE_DISTANCE[name],
            base_swing_speed=BASE_SWING_SPEED[name],
            base_launch_angle=BASE_LAUNCH_ANGLE[name],
            base_spin_rate=BASE_SPIN_RATE[name],
        )

    @property
    def name(self) -> str:
        return self.club_id.value


# Built once; profiles are immutable and shared by all synthesizers.
_PROFILES = {club: ClubProfile.from_id(club) for club in ClubId}


def profile(club_id: ClubId | str) -> ClubProfile:
    """Look up the baseline profile for a club.

    Raises:
        UnknownClub: if club_id is not one of the supported clubs.
    """
    return _PROFILES[resolve_club(club_id)]
