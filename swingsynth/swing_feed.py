"""
Demo swing feed for SwingSynth.

Emits freshly generated SwingRecords at random intervals from a
background thread, so a visualization can be driven without any
user input. Swings can also be triggered manually.
"""

import logging
import time
from typing import Optional

import numpy as np
from PyQt6.QtCore import QMutex, QThread, pyqtSignal

from swingsynth.composer import generate
from swingsynth.errors import SwingSynthError
from swingsynth.models.club import resolve_club
from swingsynth.models.skill import resolve_skill

logger = logging.getLogger(__name__)


class SwingFeed(QThread):
    """Generates swing records on a timer.

    The feed owns a single numpy Generator. Timer swings and manual
    triggers run on different threads, so every draw holds the mutex.

    Signals:
        swing_generated(SwingRecord): Emitted for every generated swing.
        feed_started(): Emitted when the run loop begins.
        feed_stopped(): Emitted when the run loop exits.
        error_occurred(str): Emitted when generation fails.
    """

    swing_generated = pyqtSignal(object)  # SwingRecord
    feed_started = pyqtSignal()
    feed_stopped = pyqtSignal()
    error_occurred = pyqtSignal(str)

    def __init__(
        self,
        club_id: str = "7-Iron",
        skill_tier: str = "intermediate",
        swing_interval: tuple[float, float] = (3.0, 8.0),
        seed: Optional[int] = None,
        parent=None,
    ):
        """
        Args:
            club_id: Initial club selection.
            skill_tier: Initial skill tier.
            swing_interval: (min, max) seconds between generated swings.
            seed: Seed for the feed's random stream (None = fresh entropy).

        Raises:
            UnknownClub, UnknownSkillTier: on an invalid initial selection.
        """
        super().__init__(parent)
        self._running = False
        self._club = resolve_club(club_id)
        self._skill = resolve_skill(skill_tier)
        self._swing_interval = swing_interval
        self._rng = np.random.default_rng(seed)
        self._rng_lock = QMutex()
        self._swing_count = 0

    def set_club(self, club_id: str):
        """Change the club for subsequent swings."""
        self._club = resolve_club(club_id)

    def set_skill(self, skill_tier: str):
        """Change the skill tier for subsequent swings."""
        self._skill = resolve_skill(skill_tier)
        logger.info(f"Feed skill tier changed to: {self._skill.value}")

    def start(self, *args):
        """Start the feed thread.

        The running flag is raised here, before the thread exists, so a
        stop() issued right after start() is never overwritten by run().
        """
        self._running = True
        super().start(*args)

    def run(self):
        """Main thread loop: generate swings at random intervals."""
        logger.info(
            f"Swing feed started "
            f"(skill={self._skill.value}, club={self._club.value})"
        )
        self.feed_started.emit()

        while self._running:
            self._rng_lock.lock()
            try:
                delay = self._rng.uniform(*self._swing_interval)
            finally:
                self._rng_lock.unlock()
            # Sleep in small increments so we can stop quickly
            elapsed = 0.0
            while elapsed < delay and self._running:
                time.sleep(0.1)
                elapsed += 0.1

            if not self._running:
                break

            self._generate_swing()

        self.feed_stopped.emit()
        logger.info("Swing feed stopped")

    def _generate_swing(self):
        """Generate one swing and emit it, or report the failure."""
        self._rng_lock.lock()
        try:
            record = generate(self._club, self._skill, self._rng)
        except SwingSynthError as e:
            record = None
            error = str(e)
        finally:
            self._rng_lock.unlock()

        if record is None:
            logger.error(f"Swing generation failed: {error}")
            self.error_occurred.emit(error)
            return

        self._swing_count += 1
        logger.debug(f"Feed swing #{self._swing_count}: {record.club}")
        self.swing_generated.emit(record)

    def trigger_swing(self):
        """Manually trigger a single swing (for UI button / testing)."""
        self._generate_swing()

    @property
    def swing_count(self) -> int:
        return self._swing_count

    def stop(self):
        """Signal the thread to stop."""
        self._running = False

    def is_running(self) -> bool:
        return self._running
