"""
Wearable sensor stream synthesis for SwingSynth.

Produces one inertial snapshot per named swing phase. Acceleration
scales with swing speed; angular rate follows a fixed rotation profile.
Every call draws fresh jitter, so identical inputs give different
streams unless the caller passes a seeded generator.
"""

import math
from typing import Optional

import numpy as np

from swingsynth.errors import InvalidSwingSpeed
from swingsynth.models.club import ClubId, resolve_club
from swingsynth.models.swing import SensorSample, SwingPhase, Vector3
from swingsynth.utils.constants import (
    SENSOR_PHASES,
    SENSOR_TIMESTAMPS_MS,
    ACCEL_JITTER,
    ACCEL_VERTICAL_SCALE,
    GYRO_X_AMPLITUDE,
    GYRO_Y_AMPLITUDE,
    GYRO_JITTER,
    GYRO_Z_RANGE,
    FACE_ANGLE_STABLE_PHASES,
    FACE_ANGLE_RANGE_EARLY,
    FACE_ANGLE_RANGE_LATE,
    WRIST_ANGLE_BASE,
    WRIST_ANGLE_STEP,
    WRIST_ANGLE_JITTER,
)


def generate_sensor_stream(swing_speed: float, club_id: ClubId | str,
                           rng: Optional[np.random.Generator] = None
                           ) -> tuple[SensorSample, ...]:
    """Generate one SensorSample per phase in SENSOR_PHASES.

    Args:
        swing_speed: Club head speed (m/s), > 0.
        club_id: Club the sensor is mounted for. Validated but not yet
            used to vary the readings.
        rng: Random stream; a fresh one is created when omitted.

    Raises:
        InvalidSwingSpeed: if swing_speed is not positive and finite.
        UnknownClub: if club_id is not a supported club.
    """
    if not math.isfinite(swing_speed) or swing_speed <= 0:
        raise InvalidSwingSpeed(f"Swing speed must be positive: {swing_speed}")
    resolve_club(club_id)
    if rng is None:
        rng = np.random.default_rng()

    n = len(SENSOR_PHASES)
    samples = []
    for k, (phase, timestamp) in enumerate(zip(SENSOR_PHASES, SENSOR_TIMESTAMPS_MS)):
        accel_angle = k * math.pi / n
        gyro_angle = k * 2 * math.pi / n

        acceleration = Vector3(
            x=math.sin(accel_angle) * swing_speed * rng.uniform(*ACCEL_JITTER),
            y=math.cos(accel_angle) * swing_speed * rng.uniform(*ACCEL_JITTER),
            z=rng.random() * swing_speed * ACCEL_VERTICAL_SCALE,
        )
        gyroscope = Vector3(
            x=math.sin(gyro_angle) * GYRO_X_AMPLITUDE * rng.uniform(*GYRO_JITTER),
            y=math.cos(gyro_angle) * GYRO_Y_AMPLITUDE * rng.uniform(*GYRO_JITTER),
            z=rng.uniform(*GYRO_Z_RANGE),
        )

        # Face control loosens from impact onwards
        if k < FACE_ANGLE_STABLE_PHASES:
            face_angle = rng.uniform(*FACE_ANGLE_RANGE_EARLY)
        else:
            face_angle = rng.uniform(*FACE_ANGLE_RANGE_LATE)

        wrist_angle = (WRIST_ANGLE_BASE + k * WRIST_ANGLE_STEP
                       + rng.uniform(*WRIST_ANGLE_JITTER))

        samples.append(SensorSample(
            phase=SwingPhase(phase),
            time=timestamp,
            acceleration=acceleration,
            gyroscope=gyroscope,
            club_face_angle=float(face_angle),
            wrist_angle=float(wrist_angle),
        ))

    return tuple(samples)
