"""
Club baselines, skill tiers, shot shapes, and curve-synthesis constants
for SwingSynth.

Tables are keyed by the string values of the enumerations in
swingsynth.models, so enum members can be used directly as keys.
The visual constants are tuned for on-screen plausibility rather than
physical accuracy.
"""

import math

# =============================================================================
# Club Data: Baseline Distance, Swing Speed, Launch and Spin
# =============================================================================

# Carry distance baseline (m) for an intermediate player
BASE_DISTANCE = {
    "Driver":   230,
    "3-Wood":   210,
    "5-Iron":   180,
    "7-Iron":   155,
    "9-Iron":   125,
    "PW":        95,
    "SW":        75,
}

# Club head speed baseline (m/s)
BASE_SWING_SPEED = {
    "Driver":    40,
    "3-Wood":    38,
    "5-Iron":    34,
    "7-Iron":    32,
    "9-Iron":    28,
    "PW":        26,
    "SW":        22,
}

# Vertical launch angle baseline (degrees)
BASE_LAUNCH_ANGLE = {
    "Driver":    12,
    "3-Wood":    13,
    "5-Iron":    16,
    "7-Iron":    18,
    "9-Iron":    22,
    "PW":        26,
    "SW":        30,
}

# Backspin baseline (RPM)
BASE_SPIN_RATE = {
    "Driver":  2800,
    "3-Wood":  3200,
    "5-Iron":  5000,
    "7-Iron":  6200,
    "9-Iron":  7500,
    "PW":      8500,
    "SW":      9500,
}

# Club category drives the swing arc amplitude
CLUB_CATEGORIES = {
    "Driver":  "long",
    "3-Wood":  "long",
    "5-Iron":  "mid_iron",
    "7-Iron":  "mid_iron",
    "9-Iron":  "mid_iron",
    "PW":      "short",
    "SW":      "short",
}

CATEGORY_ARC_FACTORS = {
    "long":      1.2,
    "mid_iron":  1.0,
    "short":     0.8,
}

# =============================================================================
# Skill Tiers and Shot Shapes
# =============================================================================

# (multiplier, variance) applied to the club baselines
SKILL_TIERS = {
    "novice":        (0.8, 0.25),
    "intermediate":  (1.0, 0.15),
    "expert":        (1.2, 0.05),
}

# Shot shape selection weights, in ShotShape order:
# straight, fade, draw, slice, hook
SHOT_SHAPE_WEIGHTS = {
    "novice":        (20, 20, 20, 20, 20),
    "intermediate":  (40, 25, 25,  5,  5),
    "expert":        (60, 20, 20,  0,  0),
}

# (sign, low, high): curvature = sign * uniform(low, high)
CURVATURE_RANGES = {
    "straight":  (0, 0.0, 0.0),
    "fade":      (1, 2.0, 10.0),
    "draw":      (-1, 2.0, 10.0),
    "slice":     (1, 10.0, 30.0),
    "hook":      (-1, 10.0, 30.0),
}

# Accuracy bounds (percent)
ACCURACY_FLOOR = 50
ACCURACY_CEILING = 100
ACCURACY_CURVE_PENALTY = 2.0     # points lost per meter of curvature
ACCURACY_DISTANCE_WEIGHT = 0.5   # weight of the distance shortfall

# Ball speed ≈ swing speed × BALL_SPEED_FACTOR ± BALL_SPEED_JITTER
BALL_SPEED_FACTOR = 3.7
BALL_SPEED_JITTER = 5.0

SWING_SPEED_VARIANCE_SCALE = 0.5
LAUNCH_ANGLE_VARIANCE = 0.3
SPIN_RATE_VARIANCE = 0.2

# =============================================================================
# Trajectory Synthesis
# =============================================================================

GRAVITY = 9.81                 # m/s²
TRAJECTORY_STEPS = 80          # 81 points including t=0
LATERAL_AMPLIFICATION = 20     # visual bow of the lateral curve

# =============================================================================
# Swing Path Synthesis
# =============================================================================

SWING_PATH_STEPS = 60                # 61 points including address
SWING_ARC_SPAN = 1.4 * math.pi       # total swept angle around address
SWING_SPEED_REFERENCE = 40.0         # swing speed that maps to speed factor 1
ARC_HORIZONTAL_RADIUS = 120.0
ARC_VERTICAL_RADIUS = 80.0
ARC_BASELINE_HEIGHT = 30.0
FACE_WOBBLE_AMPLITUDE = 20.0
DYNAMIC_LIFT_AMPLITUDE = 10.0

# Progress thresholds where each path phase ends
PATH_PHASE_THRESHOLDS = (
    (0.3, "backswing"),
    (0.7, "downswing"),
    (0.8, "impact"),
)
PATH_FINAL_PHASE = "follow-through"

# =============================================================================
# Sensor Stream Synthesis
# =============================================================================

SENSOR_PHASES = (
    "address",
    "takeaway",
    "top",
    "downswing",
    "impact",
    "follow-through",
)
SENSOR_TIMESTAMPS_MS = (0, 300, 800, 1200, 1400, 2000)

ACCEL_JITTER = (0.9, 1.1)
ACCEL_VERTICAL_SCALE = 0.3
GYRO_X_AMPLITUDE = 200.0       # deg/s
GYRO_Y_AMPLITUDE = 150.0       # deg/s
GYRO_JITTER = (0.85, 1.15)
GYRO_Z_RANGE = (-50.0, 50.0)

# Club face gets less stable from impact onwards
FACE_ANGLE_STABLE_PHASES = 4
FACE_ANGLE_RANGE_EARLY = (-5.0, 5.0)
FACE_ANGLE_RANGE_LATE = (-10.0, 10.0)

WRIST_ANGLE_BASE = 20.0
WRIST_ANGLE_STEP = -8.0
WRIST_ANGLE_JITTER = (0.0, 10.0)
