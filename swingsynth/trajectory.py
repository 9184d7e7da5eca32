"""
Ball trajectory synthesis for SwingSynth.

Ideal projectile motion under constant gravity, solved so the range
equation lands exactly at the requested distance. A parabolic lateral
bow scaled by the shot's curvature is layered on top for display.

No drag, lift, wind, bounce or roll: the curve only has to look right
next to the reported metrics.
"""

import math
from dataclasses import dataclass

import numpy as np

from swingsynth.errors import InvalidTrajectoryInput
from swingsynth.models.swing import TrajectoryPoint
from swingsynth.utils.rounding import round_half_away
from swingsynth.utils.constants import (
    GRAVITY,
    TRAJECTORY_STEPS,
    LATERAL_AMPLIFICATION,
)


@dataclass(frozen=True)
class TrajectorySummary:
    """Headline numbers of a synthesized flight.

    Attributes:
        carry: Downrange distance at landing (m).
        apex: Maximum height (m).
        lateral: Lateral offset at landing (m).
        max_lateral: Largest lateral offset during flight (m, signed).
        flight_time: Total flight time (s).
    """
    carry: float
    apex: float
    lateral: float
    max_lateral: float
    flight_time: float


def generate_trajectory(distance: float, launch_angle: float,
                        curvature: float) -> tuple[TrajectoryPoint, ...]:
    """Generate the ball flight as TRAJECTORY_STEPS + 1 evenly timed points.

    Coordinate system (m):
        x = downrange
        y = height, clamped at ground level
        z = lateral, zero at launch and landing, peaking at mid-flight

    Args:
        distance: Carry distance (m), > 0.
        launch_angle: Vertical launch angle in degrees, in (0, 90).
        curvature: Net lateral bend (m, signed).

    Returns:
        Tuple of TrajectoryPoint ordered by time.

    Raises:
        InvalidTrajectoryInput: if the inputs cannot give a finite flight.
    """
    if not all(math.isfinite(v) for v in (distance, launch_angle, curvature)):
        raise InvalidTrajectoryInput(
            f"Non-finite trajectory input: distance={distance}, "
            f"launch_angle={launch_angle}, curvature={curvature}"
        )
    if distance <= 0:
        raise InvalidTrajectoryInput(f"Distance must be positive: {distance}")
    if not 0 < launch_angle < 90:
        raise InvalidTrajectoryInput(
            f"Launch angle must be in (0, 90) degrees: {launch_angle}"
        )

    launch_rad = math.radians(launch_angle)
    v0 = math.sqrt(distance * GRAVITY / math.sin(2 * launch_rad))
    vx = v0 * math.cos(launch_rad)
    vy = v0 * math.sin(launch_rad)
    flight_time = distance / vx

    t = np.arange(TRAJECTORY_STEPS + 1) / TRAJECTORY_STEPS * flight_time
    x = vx * t
    y = np.maximum(0.0, vy * t - 0.5 * GRAVITY * t ** 2)
    carry_fraction = x / distance
    z = curvature * 4 * carry_fraction * (1 - carry_fraction) * LATERAL_AMPLIFICATION

    return tuple(
        TrajectoryPoint(x=float(xi), y=float(yi), z=float(zi), time=float(ti))
        for xi, yi, zi, ti in zip(x, y, z, t)
    )


def trajectory_summary(points: tuple[TrajectoryPoint, ...]) -> TrajectorySummary:
    """Summarize a trajectory for display and logging."""
    if not points:
        return TrajectorySummary(0.0, 0.0, 0.0, 0.0, 0.0)
    landing = points[-1]
    max_lateral = max((p.z for p in points), key=abs)
    return TrajectorySummary(
        carry=round_half_away(landing.x, 1),
        apex=round_half_away(max(p.y for p in points), 1),
        lateral=round_half_away(landing.z, 1),
        max_lateral=round_half_away(max_lateral, 1),
        flight_time=round_half_away(landing.time, 2),
    )
