"""CLI wrapper that replays recorded frames through the stat cache."""

from __future__ import annotations

import argparse
import json
from pathlib import Path
import sys

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from frame_stats import DisplayablePerformanceStat, FrameData, FrameFeed, PerformanceStatService
from frame_stats.config import Settings
from frame_stats.utils.logger import get_logger


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Replay a JSON-lines frame capture and print cached stats")
    parser.add_argument("frames", type=Path, help="File with one FrameData JSON object per line")
    parser.add_argument("--sample-size", type=int, default=None, help="Override window capacity")
    parser.add_argument(
        "--stat",
        action="append",
        choices=[stat.value for stat in DisplayablePerformanceStat],
        help="Only print these stats (repeatable)",
    )
    parser.add_argument("--samples", action="store_true", help="Include raw window samples in output")
    return parser.parse_args()


def main() -> None:
    args = parse_args()

    overrides = {}
    if args.sample_size is not None:
        overrides["stats_sample_size"] = args.sample_size
    settings = Settings(**overrides)
    logger = get_logger("frame_stats", settings.app_log_level)

    feed = FrameFeed()
    service = PerformanceStatService(feed, settings=settings)
    service.start()

    count = 0
    with open(args.frames, "r", encoding="utf-8") as fh:
        for line in fh:
            line = line.strip()
            if not line:
                continue
            feed.publish(FrameData.model_validate_json(line))
            count += 1

    service.stop()
    logger.info("Replayed %d frames from %s", count, args.frames)

    results = service.snapshot_all()
    if args.stat:
        results = {name: data for name, data in results.items() if name in args.stat}
    if not args.samples:
        for data in results.values():
            data.pop("samples", None)

    print(json.dumps(results, indent=2))


if __name__ == "__main__":
    main()
