"""
Data models for synthesized swing data in SwingSynth.

TrajectoryPoint: Ball position along the flight.
SwingPathPoint: Club head position along the swing arc.
SensorSample: Inertial sensor snapshot for one swing phase.
SwingRecord: Complete swing record combining all of the above.
"""

from dataclasses import dataclass, asdict
from enum import Enum


class SwingPhase(str, Enum):
    """Named segments of a golf swing."""
    ADDRESS = "address"
    TAKEAWAY = "takeaway"
    BACKSWING = "backswing"
    TOP = "top"
    DOWNSWING = "downswing"
    IMPACT = "impact"
    FOLLOW_THROUGH = "follow-through"


@dataclass(frozen=True)
class TrajectoryPoint:
    """Ball position at one instant of flight.

    Attributes:
        x: Distance downrange (m).
        y: Height above ground (m), never negative.
        z: Lateral offset (m, positive = right).
        time: Elapsed flight time (s).
    """
    x: float
    y: float
    z: float
    time: float


@dataclass(frozen=True)
class SwingPathPoint:
    """Club head position along the swing arc.

    Attributes:
        x: Horizontal arc position.
        y: Vertical arc position.
        z: Lateral face wobble.
        speed: Instantaneous club head speed (m/s).
        phase: Swing phase at this point.
    """
    x: float
    y: float
    z: float
    speed: float
    phase: SwingPhase


@dataclass(frozen=True)
class Vector3:
    x: float
    y: float
    z: float


@dataclass(frozen=True)
class SensorSample:
    """Inertial sensor snapshot for one swing phase.

    Attributes:
        phase: Swing phase the sample belongs to.
        time: Timestamp from address (ms).
        acceleration: 3-axis acceleration.
        gyroscope: 3-axis angular rate (deg/s).
        club_face_angle: Face angle (degrees, positive = open).
        wrist_angle: Wrist hinge angle (degrees).
    """
    phase: SwingPhase
    time: int
    acceleration: Vector3
    gyroscope: Vector3
    club_face_angle: float
    wrist_angle: float


@dataclass(frozen=True)
class SwingRecord:
    """Complete synthesized swing.

    Attributes:
        club: Club label the swing was generated for.
        skill_tier: Skill tier label.
        distance: Carry distance (m).
        accuracy: Accuracy score in [50, 100].
        swing_speed: Club head speed (m/s).
        ball_speed: Ball speed.
        launch_angle: Vertical launch angle (degrees).
        spin_rate: Backspin (RPM).
        direction: Shot shape label.
        curvature: Lateral bend at full carry (m, sign matches direction).
        trajectory: 81 ball positions.
        swing_path: 61 club head positions.
        sensor_data: 6 sensor samples, one per phase.
    """
    club: str
    skill_tier: str
    distance: int
    accuracy: int
    swing_speed: float
    ball_speed: int
    launch_angle: float
    spin_rate: int
    direction: str
    curvature: float
    trajectory: tuple[TrajectoryPoint, ...]
    swing_path: tuple[SwingPathPoint, ...]
    sensor_data: tuple[SensorSample, ...]

    def to_dict(self) -> dict:
        """JSON-ready representation with enum values as plain strings."""
        return asdict(self, dict_factory=_plain_dict)


def _plain_dict(items):
    return {
        key: value.value if isinstance(value, Enum) else value
        for key, value in items
    }
