"""
SwingSynth command-line entry point.

Supports two modes:
  - Batch mode: generate N swings, print a summary (or JSON) and exit
  - Feed mode: run the Qt demo feed, printing each swing as it arrives

Usage:
    python -m swingsynth.main                          # One 7-Iron swing
    python -m swingsynth.main --club Driver --skill expert --count 20
    python -m swingsynth.main --club PW --seed 42 --json
    python -m swingsynth.main --feed --interval-min 1 --interval-max 2
"""

import argparse
import json
import logging
import signal
import sys

import numpy as np

from swingsynth.composer import generate
from swingsynth.errors import UnknownClub, UnknownSkillTier
from swingsynth.models.club import ClubId
from swingsynth.models.session import Session
from swingsynth.models.skill import SkillTier
from swingsynth.models.swing import SwingRecord
from swingsynth.trajectory import trajectory_summary
from swingsynth.utils.config import Config

logger = logging.getLogger(__name__)

DEFAULT_FEED_INTERVAL = (3.0, 8.0)


def setup_logging(verbose: bool = False):
    """Configure logging for the application."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def print_record(record: SwingRecord, number: int):
    """Print one swing record to the console."""
    flight = trajectory_summary(record.trajectory)
    print(f"\n{'='*60}")
    print(f"  Swing #{number}")
    print(f"{'='*60}")
    print(f"  Club:          {record.club} ({record.skill_tier})")
    print(f"  Distance:      {record.distance} m")
    print(f"  Accuracy:      {record.accuracy}")
    print(f"  Swing Speed:   {record.swing_speed} m/s")
    print(f"  Ball Speed:    {record.ball_speed}")
    print(f"  Launch Angle:  {record.launch_angle}°")
    print(f"  Spin Rate:     {record.spin_rate} rpm")
    print(f"  Shape:         {record.direction} ({record.curvature:+.1f} m)")
    print(f"  Apex:          {flight.apex} m  Flight: {flight.flight_time} s")
    print(f"{'='*60}")


def print_stats(session: Session):
    """Print aggregate session statistics."""
    stats = session.get_stats()
    if not stats:
        return
    print(f"\nSession: {stats['num_swings']} swings")
    print(f"  Avg distance:    {stats['avg_distance']} m"
          + (f" (±{stats['std_distance']})" if "std_distance" in stats else ""))
    print(f"  Avg swing speed: {stats['avg_swing_speed']} m/s")
    print(f"  Avg accuracy:    {stats['avg_accuracy']}")
    shapes = ", ".join(f"{k}={v}" for k, v in sorted(stats["shot_shapes"].items()))
    print(f"  Shot shapes:     {shapes}")


def run_batch(args) -> int:
    """Generate args.count swings and print them."""
    rng = np.random.default_rng(args.seed)
    session = Session()
    for _ in range(args.count):
        session.add_record(generate(args.club, args.skill, rng))
    session.end()

    if args.json:
        indent = Config().get("json_indent", 2)
        print(json.dumps([r.to_dict() for r in session.records], indent=indent))
    else:
        for number, record in enumerate(session.records, start=1):
            print_record(record, number)
        print_stats(session)
    return 0


def run_feed(args):
    """Run the demo feed: print swings as they are generated."""
    from PyQt6.QtCore import QCoreApplication, QTimer
    from swingsynth.swing_feed import SwingFeed

    app = QCoreApplication(sys.argv)
    feed = SwingFeed(
        club_id=args.club,
        skill_tier=args.skill,
        swing_interval=(args.interval_min, args.interval_max),
        seed=args.seed,
    )
    session = Session()

    def on_swing(record):
        session.add_record(record)
        print_record(record, session.num_swings)

    def on_started():
        print(f"\n✅ Swing feed running")
        print(f"   Club: {args.club} ({args.skill})")
        print(f"   Generating swings... (Ctrl+C to quit)\n")

    def on_error(msg):
        print(f"\n❌ Error: {msg}")

    feed.swing_generated.connect(on_swing)
    feed.feed_started.connect(on_started)
    feed.error_occurred.connect(on_error)

    # Handle Ctrl+C gracefully
    def signal_handler(sig, frame):
        print("\n\nShutting down...")
        feed.stop()
        feed.wait(3000)
        session.end()
        print_stats(session)
        app.quit()

    signal.signal(signal.SIGINT, signal_handler)

    feed.start()

    # Process Qt events (needed for signals to work)
    # Use a timer to check for SIGINT
    timer = QTimer()
    timer.timeout.connect(lambda: None)  # Keep event loop alive
    timer.start(100)

    return app.exec()


def feed_interval(config: Config) -> tuple[float, float]:
    """(min, max) feed interval from config, or the default if malformed."""
    value = config.get("feed_interval", DEFAULT_FEED_INTERVAL)
    try:
        interval_min, interval_max = (float(v) for v in value)
    except (TypeError, ValueError):
        logger.warning(
            f"Ignoring malformed feed_interval {value!r}, using {DEFAULT_FEED_INTERVAL}"
        )
        return DEFAULT_FEED_INTERVAL
    return interval_min, interval_max


def build_parser() -> argparse.ArgumentParser:
    config = Config()
    interval_min, interval_max = feed_interval(config)

    parser = argparse.ArgumentParser(
        description="SwingSynth synthetic golf swing generator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    # Selection
    parser.add_argument(
        "--club", type=str, default=config.get("default_club", "7-Iron"),
        choices=[c.value for c in ClubId],
        help="Club to generate swings for (default: %(default)s)",
    )
    parser.add_argument(
        "--skill", type=str, default=config.get("default_skill", "intermediate"),
        choices=[s.value for s in SkillTier],
        help="Player skill tier (default: %(default)s)",
    )
    parser.add_argument(
        "--seed", type=int, default=config.get("seed"),
        help="Seed for reproducible output (default: fresh entropy)",
    )

    # Batch options
    parser.add_argument(
        "--count", type=int, default=1,
        help="Number of swings to generate (default: 1)",
    )
    parser.add_argument(
        "--json", action="store_true",
        help="Print swing records as JSON",
    )

    # Feed options
    parser.add_argument(
        "--feed", action="store_true",
        help="Run the demo feed until Ctrl+C",
    )
    parser.add_argument(
        "--interval-min", type=float, default=interval_min,
        help="Minimum seconds between feed swings (default: %(default)s)",
    )
    parser.add_argument(
        "--interval-max", type=float, default=interval_max,
        help="Maximum seconds between feed swings (default: %(default)s)",
    )

    # Verbosity
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Enable debug logging",
    )
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.count < 1:
        parser.error("--count must be at least 1")
    setup_logging(args.verbose)

    try:
        if args.feed:
            status = run_feed(args)
        else:
            status = run_batch(args)
    except (UnknownClub, UnknownSkillTier) as e:
        parser.error(str(e))
    sys.exit(status)


if __name__ == "__main__":
    main()
