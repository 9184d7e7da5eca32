"""
Tests for the demo swing feed.
"""

import pytest

from swingsynth.errors import InvalidSwingSpeed, UnknownClub, UnknownSkillTier
from swingsynth.models.swing import SwingRecord
from swingsynth.swing_feed import SwingFeed


class TestSwingFeed:
    """Tests for SwingFeed."""

    def test_trigger_emits_record(self, qtbot):
        """A manual trigger should emit one SwingRecord."""
        feed = SwingFeed(club_id="7-Iron", skill_tier="expert", seed=1)
        results = []
        feed.swing_generated.connect(lambda r: results.append(r))
        feed.trigger_swing()

        assert len(results) == 1
        assert isinstance(results[0], SwingRecord)
        assert results[0].club == "7-Iron"
        assert results[0].skill_tier == "expert"
        assert feed.swing_count == 1

    def test_seeded_feeds_match(self, qtbot):
        """Two feeds with the same seed emit the same swings."""
        runs = []
        for _ in range(2):
            feed = SwingFeed(club_id="PW", seed=123)
            records = []
            feed.swing_generated.connect(lambda r, rs=records: rs.append(r))
            for _ in range(5):
                feed.trigger_swing()
            runs.append(records)
        assert runs[0] == runs[1]

    def test_club_and_skill_change(self, qtbot):
        feed = SwingFeed(club_id="Driver", skill_tier="novice")
        feed.set_club("SW")
        feed.set_skill("expert")

        results = []
        feed.swing_generated.connect(lambda r: results.append(r))
        feed.trigger_swing()

        assert results[0].club == "SW"
        assert results[0].skill_tier == "expert"

    def test_invalid_selection(self, qtbot):
        with pytest.raises(UnknownClub):
            SwingFeed(club_id="Putter")
        feed = SwingFeed()
        with pytest.raises(UnknownSkillTier):
            feed.set_skill("pro")

    def test_generation_error_emitted(self, qtbot, monkeypatch):
        """Generation failures are reported on error_occurred, not raised."""
        def failing_generate(*args):
            raise InvalidSwingSpeed("Swing speed must be positive: 0")

        monkeypatch.setattr("swingsynth.swing_feed.generate", failing_generate)
        feed = SwingFeed()
        errors, records = [], []
        feed.error_occurred.connect(lambda msg: errors.append(msg))
        feed.swing_generated.connect(lambda r: records.append(r))
        feed.trigger_swing()

        assert errors == ["Swing speed must be positive: 0"]
        assert records == []
        assert feed.swing_count == 0

    def test_run_loop(self, qtbot):
        """The running feed emits swings until stopped."""
        feed = SwingFeed(club_id="9-Iron", swing_interval=(0.1, 0.1), seed=5)
        with qtbot.waitSignal(feed.feed_started, timeout=3000):
            feed.start()
        with qtbot.waitSignal(feed.swing_generated, timeout=3000) as blocker:
            pass
        assert isinstance(blocker.args[0], SwingRecord)
        assert feed.is_running()

        with qtbot.waitSignal(feed.feed_stopped, timeout=3000):
            feed.stop()
        assert feed.wait(3000)
        assert not feed.is_running()

    def test_stop_right_after_start(self, qtbot):
        """A stop issued before the thread gets going still ends the feed."""
        feed = SwingFeed(swing_interval=(5.0, 5.0), seed=2)
        feed.start()
        feed.stop()
        assert feed.wait(3000)
        assert not feed.is_running()
        assert feed.swing_count == 0

    def test_running_as_soon_as_started(self, qtbot):
        feed = SwingFeed(swing_interval=(5.0, 5.0))
        feed.start()
        assert feed.is_running()
        feed.stop()
        assert feed.wait(3000)
