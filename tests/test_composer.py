"""
Tests for the swing record composer.

Validates:
  - Every club/tier pair yields a complete, consistent record
  - Shot shape and curvature agree
  - Seeded generation is reproducible
  - Mean distances sit inside the tier's variance band
  - Unknown clubs/tiers fail without a partial record
"""

import json
from statistics import mean

import numpy as np
import pytest

from swingsynth import generate
from swingsynth.composer import accuracy_score, curvature_for, pick_shot_shape
from swingsynth.errors import UnknownClub, UnknownSkillTier
from swingsynth.models.club import ClubId, profile
from swingsynth.models.skill import ShotShape, SkillTier
from swingsynth.models.swing import SwingRecord
from swingsynth.utils.rounding import round_half_away, round_int


ALL_PAIRS = [(club, tier) for club in ClubId for tier in SkillTier]


class TestGenerate:
    """Tests for generate()."""

    @pytest.mark.parametrize("club,tier", ALL_PAIRS)
    def test_record_invariants(self, club, tier):
        """Scalar bounds and curve lengths hold for every club/tier."""
        rng = np.random.default_rng(2024)
        for _ in range(20):
            record = generate(club, tier, rng)
            assert isinstance(record, SwingRecord)
            assert 50 <= record.accuracy <= 100
            assert record.distance > 0
            assert record.swing_speed > 0
            assert record.ball_speed > 0
            assert record.spin_rate > 0
            assert 0 < record.launch_angle < 90
            assert len(record.trajectory) == 81
            assert len(record.swing_path) == 61
            assert len(record.sensor_data) == 6
            assert record.club == club.value
            assert record.skill_tier == tier.value

    @pytest.mark.parametrize("club,tier", ALL_PAIRS)
    def test_curves_consistent_with_metrics(self, club, tier):
        """Curves are built from the record's own scalar values."""
        record = generate(club, tier, np.random.default_rng(5))
        assert record.trajectory[-1].x == pytest.approx(record.distance)
        assert max(p.speed for p in record.swing_path) == pytest.approx(record.swing_speed)
        assert all(0 <= p.speed <= record.swing_speed for p in record.swing_path)
        lateral_peak = record.trajectory[40].z
        assert lateral_peak == pytest.approx(record.curvature * 20)

    def test_curvature_matches_direction(self):
        """Straight is exactly 0; fade/slice right; draw/hook left."""
        rng = np.random.default_rng(11)
        seen = set()
        for _ in range(500):
            record = generate("7-Iron", "novice", rng)
            seen.add(record.direction)
            c = record.curvature
            if record.direction == "straight":
                assert c == 0
            elif record.direction == "fade":
                assert 2 <= c < 10
            elif record.direction == "draw":
                assert -10 < c <= -2
            elif record.direction == "slice":
                assert 10 <= c < 30
            else:
                assert record.direction == "hook"
                assert -30 < c <= -10
        assert seen == {s.value for s in ShotShape}

    def test_expert_never_slices_or_hooks(self):
        rng = np.random.default_rng(12)
        directions = {generate("Driver", "expert", rng).direction for _ in range(500)}
        assert directions <= {"straight", "fade", "draw"}

    def test_rounding_precision(self):
        """Integer metrics are ints; speed and launch carry one decimal."""
        record = generate("5-Iron", "intermediate", np.random.default_rng(3))
        assert isinstance(record.distance, int)
        assert isinstance(record.ball_speed, int)
        assert isinstance(record.spin_rate, int)
        assert isinstance(record.accuracy, int)
        assert record.swing_speed == round_half_away(record.swing_speed, 1)
        assert record.launch_angle == round_half_away(record.launch_angle, 1)

    def test_seeded_reproducible(self):
        """The same seed reproduces the same record."""
        a = generate("PW", "novice", np.random.default_rng(42))
        b = generate("PW", "novice", np.random.default_rng(42))
        assert a == b

    def test_unseeded_records_independent(self):
        a = generate("PW", "novice")
        b = generate("PW", "novice")
        assert a is not b
        assert a.sensor_data != b.sensor_data

    def test_default_tier_is_intermediate(self):
        assert generate("SW").skill_tier == "intermediate"

    def test_accepts_enums(self):
        record = generate(ClubId.IRON_9, SkillTier.EXPERT, np.random.default_rng(0))
        assert record.club == "9-Iron"
        assert record.skill_tier == "expert"

    def test_record_is_immutable(self):
        record = generate("7-Iron", "expert", np.random.default_rng(0))
        with pytest.raises(AttributeError):
            record.distance = 0

    @pytest.mark.parametrize("club_id", ["", "Putter", "ドライバー", None])
    def test_unknown_club(self, club_id):
        """Unknown clubs fail before any record is built."""
        with pytest.raises(UnknownClub):
            generate(club_id, "expert")

    def test_unknown_tier(self):
        with pytest.raises(UnknownSkillTier):
            generate("Driver", "pro")

    def test_to_dict_is_json_ready(self):
        record = generate("3-Wood", "intermediate", np.random.default_rng(8))
        data = json.loads(json.dumps(record.to_dict()))
        assert data["club"] == "3-Wood"
        assert len(data["trajectory"]) == 81
        assert data["swing_path"][0]["phase"] == "backswing"
        assert data["sensor_data"][-1]["phase"] == "follow-through"
        assert set(data["sensor_data"][0]["acceleration"]) == {"x", "y", "z"}


class TestDistributions:
    """Statistical properties over many generated swings."""

    @pytest.mark.parametrize("club,tier", [
        ("Driver", SkillTier.EXPERT),
        ("Driver", SkillTier.NOVICE),
        ("7-Iron", SkillTier.INTERMEDIATE),
        ("SW", SkillTier.NOVICE),
    ])
    def test_mean_distance_in_band(self, club, tier):
        """Mean distance converges on baseline × multiplier."""
        rng = np.random.default_rng(1000)
        expected = profile(club).base_distance * tier.multiplier
        half_band = 0.5 * tier.variance * expected
        distances = [generate(club, tier, rng).distance for _ in range(1000)]

        assert abs(mean(distances) - expected) < 0.1 * half_band + 1
        assert min(distances) >= round_int(expected - half_band)
        assert max(distances) <= round_int(expected + half_band)

    def test_swing_speed_band(self):
        rng = np.random.default_rng(77)
        expected = profile("Driver").base_swing_speed * 1.2
        half_band = 0.5 * 0.05 * 0.5 * expected
        speeds = [generate("Driver", "expert", rng).swing_speed for _ in range(300)]
        assert all(expected - half_band - 0.05 <= s <= expected + half_band + 0.05
                   for s in speeds)

    def test_ball_speed_tracks_swing_speed(self):
        rng = np.random.default_rng(78)
        for _ in range(200):
            record = generate("7-Iron", "novice", rng)
            assert abs(record.ball_speed - record.swing_speed * 3.7) <= 5.5

    def test_expert_more_accurate_than_novice(self):
        rng = np.random.default_rng(79)
        expert = mean(generate("7-Iron", "expert", rng).accuracy for _ in range(300))
        novice = mean(generate("7-Iron", "novice", rng).accuracy for _ in range(300))
        assert expert > novice


class TestHelpers:
    """Tests for the composer's building blocks."""

    def test_pick_shot_shape_expert(self):
        rng = np.random.default_rng(0)
        shapes = {pick_shot_shape(SkillTier.EXPERT, rng) for _ in range(300)}
        assert ShotShape.SLICE not in shapes
        assert ShotShape.HOOK not in shapes

    def test_straight_curvature_draws_nothing(self):
        """Straight shots leave the random stream untouched."""
        rng = np.random.default_rng(9)
        state = rng.bit_generator.state
        assert curvature_for(ShotShape.STRAIGHT, rng) == 0.0
        assert rng.bit_generator.state == state

    @pytest.mark.parametrize("shape", [ShotShape.SLICE, ShotShape.HOOK])
    def test_big_miss_curvature(self, shape):
        rng = np.random.default_rng(10)
        assert all(abs(curvature_for(shape, rng)) >= 10 for _ in range(200))

    def test_accuracy_floor(self):
        """Heavy curvature bottoms out at 50."""
        assert accuracy_score(30.0, 50, profile("Driver")) == 50

    def test_accuracy_ceiling(self):
        """Long, straight shots top out at 100."""
        assert accuracy_score(0.0, 276, profile("Driver")) == 100

    def test_accuracy_formula(self):
        # 100 - 5*2 - (100 - 207/230*100)*0.5 = 85
        assert accuracy_score(5.0, 207, profile("Driver")) == 85


class TestRounding:
    """Tests for half-away-from-zero rounding."""

    @pytest.mark.parametrize("value,ndigits,expected", [
        (2.5, 0, 3.0),
        (-2.5, 0, -3.0),
        (0.5, 0, 1.0),
        (-0.5, 0, -1.0),
        (1.25, 1, 1.3),
        (-1.25, 1, -1.3),
        (3.14159, 2, 3.14),
        (41.96, 1, 42.0),
        (0.49999999999999994, 0, 0.0),
        (-0.49999999999999994, 0, 0.0),
        (2.675, 2, 2.68),
    ])
    def test_round_half_away(self, value, ndigits, expected):
        assert round_half_away(value, ndigits) == expected

    def test_round_int(self):
        assert round_int(229.5) == 230
        assert isinstance(round_int(1.2), int)
