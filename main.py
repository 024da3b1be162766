"""Rotated log writer — appends stdin lines (or one --message) to hour-stamped files."""

import argparse
import logging
import signal
import sys

from rotatedlog.config import load_config, load_yaml_config
from rotatedlog.writer import RotatingWriter

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [rotatedlog] %(levelname)s %(message)s",
    stream=sys.stderr,
)
logger = logging.getLogger(__name__)


def _signal_handler(sig, _frame):
    logger.info("Shutdown signal received (signal %d), stopping...", sig)
    raise KeyboardInterrupt


def build_cli_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Write lines to time-rotated log files")
    parser.add_argument("--config", default=None, help="Path to YAML config file")
    parser.add_argument("--log-path", default=None,
                        help="Base log path, e.g. logs/app.log (overrides config)")
    parser.add_argument("--rotation-hours", type=float, default=None,
                        help="Hours between file rotations (overrides config)")
    parser.add_argument("--category", default=None,
                        help="Category written at the start of each line (overrides config)")
    parser.add_argument("--message", default=None,
                        help="Write a single message instead of reading stdin")
    return parser


def main(argv=None) -> int:
    signal.signal(signal.SIGTERM, _signal_handler)

    args = build_cli_parser().parse_args(argv)
    try:
        config = load_config(load_yaml_config(args.config))
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    log_path = args.log_path or config.log_path
    rotation_hours = config.rotation_hours if args.rotation_hours is None else args.rotation_hours
    category = args.category or config.category
    logger.info("Config: log_path=%s, rotation_hours=%s, category=%s",
                log_path, rotation_hours, category)

    try:
        writer = RotatingWriter(log_path, rotation_hours)
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    lines_written = 0
    try:
        if args.message is not None:
            writer.write(category, args.message)
            lines_written += 1
        else:
            for line in sys.stdin:
                writer.write(category, line.rstrip("\n"))
                lines_written += 1
    except KeyboardInterrupt:
        pass
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    finally:
        writer.close()

    logger.info("Shut down cleanly. Total lines written: %d", lines_written)
    return 0


if __name__ == "__main__":
    sys.exit(main())
