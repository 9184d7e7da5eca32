"""
Swing record composer for SwingSynth.

Pipeline:
  1. Club baselines × skill tier → scalar metrics (distance, speeds,
     launch, spin) with tier-dependent random variance
  2. Skill tier → shot shape (weighted) → signed curvature
  3. Scalar metrics → trajectory, swing path, and sensor stream

All randomness comes from one numpy Generator per call. Pass a seeded
generator for reproducible records; draws happen in a fixed order
(scalars, shape, curvature, sensor stream).
"""

import logging
from typing import Optional

import numpy as np

from swingsynth.models.club import ClubId, ClubProfile, profile
from swingsynth.models.skill import ShotShape, SkillTier, resolve_skill
from swingsynth.models.swing import SwingRecord
from swingsynth.sampler import choose
from swingsynth.sensor_stream import generate_sensor_stream
from swingsynth.swing_path import generate_swing_path
from swingsynth.trajectory import generate_trajectory
from swingsynth.utils.rounding import round_half_away, round_int
from swingsynth.utils.constants import (
    ACCURACY_FLOOR,
    ACCURACY_CEILING,
    ACCURACY_CURVE_PENALTY,
    ACCURACY_DISTANCE_WEIGHT,
    BALL_SPEED_FACTOR,
    BALL_SPEED_JITTER,
    SWING_SPEED_VARIANCE_SCALE,
    LAUNCH_ANGLE_VARIANCE,
    SPIN_RATE_VARIANCE,
)

logger = logging.getLogger(__name__)


def _centered(rng: np.random.Generator) -> float:
    """Uniform draw in [-0.5, 0.5)."""
    return rng.random() - 0.5


def pick_shot_shape(skill: SkillTier, rng: np.random.Generator) -> ShotShape:
    """Sample a shot shape from the tier's weight table."""
    return choose(list(ShotShape), skill.shape_weights, rng)


def curvature_for(shape: ShotShape, rng: np.random.Generator) -> float:
    """Signed curvature (m) for a shot shape.

    Straight shots are exactly 0 and draw nothing from rng.
    """
    sign, low, high = shape.curvature_range
    if sign == 0:
        return 0.0
    return sign * float(rng.uniform(low, high))


def accuracy_score(curvature: float, distance: float,
                   club: ClubProfile) -> int:
    """Accuracy in [ACCURACY_FLOOR, ACCURACY_CEILING].

    Penalizes curvature and falling short of the club's baseline
    distance; overshooting the baseline earns a bonus up to the ceiling.
    """
    shortfall = 100 - distance / club.base_distance * 100
    raw = (100 - abs(curvature) * ACCURACY_CURVE_PENALTY
           - shortfall * ACCURACY_DISTANCE_WEIGHT)
    return round_int(min(ACCURACY_CEILING, max(ACCURACY_FLOOR, raw)))


def generate(club_id: ClubId | str,
             skill_tier: SkillTier | str = SkillTier.INTERMEDIATE,
             rng: Optional[np.random.Generator] = None) -> SwingRecord:
    """Synthesize one complete swing record.

    This is the main entry point for generating swing data.

    Args:
        club_id: Supported club (ClubId or its label).
        skill_tier: Player skill tier (SkillTier or its label).
        rng: Random stream; a fresh one is created when omitted.

    Returns:
        A new, immutable SwingRecord.

    Raises:
        UnknownClub: if club_id is not supported.
        UnknownSkillTier: if skill_tier is not a known tier.
    """
    club = profile(club_id)
    skill = resolve_skill(skill_tier)
    if rng is None:
        rng = np.random.default_rng()

    multiplier = skill.multiplier
    variance = skill.variance

    distance = round_int(
        club.base_distance * multiplier * (1 + _centered(rng) * variance)
    )
    swing_speed = round_half_away(
        club.base_swing_speed * multiplier
        * (1 + _centered(rng) * variance * SWING_SPEED_VARIANCE_SCALE),
        1,
    )
    ball_speed = round_int(
        swing_speed * BALL_SPEED_FACTOR + _centered(rng) * 2 * BALL_SPEED_JITTER
    )
    launch_angle = round_half_away(
        club.base_launch_angle * (1 + _centered(rng) * LAUNCH_ANGLE_VARIANCE), 1
    )
    spin_rate = round_int(
        club.base_spin_rate * (1 + _centered(rng) * SPIN_RATE_VARIANCE)
    )

    shape = pick_shot_shape(skill, rng)
    curvature = curvature_for(shape, rng)
    accuracy = accuracy_score(curvature, distance, club)

    record = SwingRecord(
        club=club.name,
        skill_tier=skill.value,
        distance=distance,
        accuracy=accuracy,
        swing_speed=swing_speed,
        ball_speed=ball_speed,
        launch_angle=launch_angle,
        spin_rate=spin_rate,
        direction=shape.value,
        curvature=curvature,
        trajectory=generate_trajectory(distance, launch_angle, curvature),
        swing_path=generate_swing_path(swing_speed, club.category),
        sensor_data=generate_sensor_stream(swing_speed, club.club_id, rng),
    )

    logger.info(
        f"Swing generated: {record.club} ({record.skill_tier}) "
        f"distance={record.distance}m, "
        f"swing_speed={record.swing_speed}m/s, "
        f"shape={record.direction}, "
        f"curvature={record.curvature:.1f}m, "
        f"accuracy={record.accuracy}"
    )

    return record
