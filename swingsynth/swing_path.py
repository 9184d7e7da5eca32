"""
Club head swing path synthesis for SwingSynth.

The path is a parametric 3D arc swept through SWING_ARC_SPAN around
address. Faster swings lift the arc and add more face wobble; longer
clubs widen it.
"""

import math

import numpy as np

from swingsynth.errors import InvalidSwingSpeed
from swingsynth.models.club import ClubCategory, ClubId, profile
from swingsynth.models.swing import SwingPathPoint, SwingPhase
from swingsynth.utils.constants import (
    SWING_PATH_STEPS,
    SWING_ARC_SPAN,
    SWING_SPEED_REFERENCE,
    ARC_HORIZONTAL_RADIUS,
    ARC_VERTICAL_RADIUS,
    ARC_BASELINE_HEIGHT,
    FACE_WOBBLE_AMPLITUDE,
    DYNAMIC_LIFT_AMPLITUDE,
    PATH_PHASE_THRESHOLDS,
    PATH_FINAL_PHASE,
)


def phase_at(progress: float) -> SwingPhase:
    """Swing phase for a normalized swing progress in [0, 1]."""
    for threshold, phase in PATH_PHASE_THRESHOLDS:
        if progress < threshold:
            return SwingPhase(phase)
    return SwingPhase(PATH_FINAL_PHASE)


def _resolve_category(club: ClubCategory | ClubId | str) -> ClubCategory:
    if isinstance(club, ClubCategory):
        return club
    if isinstance(club, str) and not isinstance(club, ClubId):
        try:
            return ClubCategory(club)
        except ValueError:
            pass
    return profile(club).category


def generate_swing_path(swing_speed: float,
                        club: ClubCategory | ClubId | str) -> tuple[SwingPathPoint, ...]:
    """Generate SWING_PATH_STEPS + 1 club head positions from address
    through follow-through.

    Args:
        swing_speed: Club head speed (m/s), > 0.
        club: Club category, or a club id whose category is looked up.

    Returns:
        Tuple of SwingPathPoint ordered by swing progress.

    Raises:
        InvalidSwingSpeed: if swing_speed is not positive and finite.
        UnknownClub: if club is neither a category nor a supported club.
    """
    if not math.isfinite(swing_speed) or swing_speed <= 0:
        raise InvalidSwingSpeed(f"Swing speed must be positive: {swing_speed}")

    arc_factor = _resolve_category(club).arc_factor
    speed_factor = swing_speed / SWING_SPEED_REFERENCE

    progress = np.arange(SWING_PATH_STEPS + 1) / SWING_PATH_STEPS
    angle = (progress - 0.5) * SWING_ARC_SPAN
    envelope = np.sin(progress * np.pi)

    x = np.sin(angle) * ARC_HORIZONTAL_RADIUS * arc_factor
    y = (np.cos(angle) * ARC_VERTICAL_RADIUS + ARC_BASELINE_HEIGHT
         + envelope * speed_factor * DYNAMIC_LIFT_AMPLITUDE)
    z = np.sin(angle * 2) * FACE_WOBBLE_AMPLITUDE * speed_factor
    speed = np.abs(envelope) * swing_speed

    return tuple(
        SwingPathPoint(
            x=float(xi),
            y=float(yi),
            z=float(zi),
            speed=float(si),
            phase=phase_at(float(pi)),
        )
        for xi, yi, zi, si, pi in zip(x, y, z, speed, progress)
    )
