"""
Session model for SwingSynth.

A session collects the swings generated in one sitting (a CLI batch or
a demo feed run) and summarizes them.
"""

from collections import Counter
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional
from statistics import mean, stdev

from swingsynth.models.swing import SwingRecord
from swingsynth.utils.rounding import round_half_away


@dataclass
class Session:
    """A batch of generated swings.

    Attributes:
        start_time: When the session started.
        end_time: When the session ended (None if still active).
        records: Swing records in generation order.
    """
    start_time: datetime = field(default_factory=datetime.now)
    end_time: Optional[datetime] = None
    records: list[SwingRecord] = field(default_factory=list)

    def add_record(self, record: SwingRecord):
        """Add a swing record to this session."""
        self.records.append(record)

    def end(self):
        """Mark the session as ended."""
        self.end_time = datetime.now()

    @property
    def num_swings(self) -> int:
        return len(self.records)

    def get_stats(self) -> dict:
        """Compute aggregate statistics for the session."""
        if not self.records:
            return {}

        distances = [r.distance for r in self.records]
        swing_speeds = [r.swing_speed for r in self.records]
        ball_speeds = [r.ball_speed for r in self.records]
        accuracies = [r.accuracy for r in self.records]

        stats = {
            "num_swings": len(self.records),
            "avg_distance": round_half_away(mean(distances), 1),
            "avg_swing_speed": round_half_away(mean(swing_speeds), 1),
            "avg_ball_speed": round_half_away(mean(ball_speeds), 1),
            "avg_accuracy": round_half_away(mean(accuracies), 1),
            "shot_shapes": dict(Counter(r.direction for r in self.records)),
        }

        if len(self.records) > 1:
            stats["std_distance"] = round_half_away(stdev(distances), 1)
            stats["std_swing_speed"] = round_half_away(stdev(swing_speeds), 1)
            stats["std_accuracy"] = round_half_away(stdev(accuracies), 1)

        return stats
