"""CLI log inspector — list, read, search, and tally hour-stamped log files."""

import argparse
import os
import sys

from rotatedlog.inspector import count_by_category, read_file, search_files
from rotatedlog.naming import list_rotated_files


def _format_size(size: int) -> str:
    if size < 1024:
        return f"{size} B"
    if size < 1024 * 1024:
        return f"{size / 1024:.1f} KB"
    return f"{size / (1024 * 1024):.1f} MB"


def main(argv=None):
    parser = argparse.ArgumentParser(description="Inspect time-rotated log files")
    parser.add_argument("--log-path", default=os.environ.get("LOG_PATH", "./logs/app.log"),
                        help="Base log path the files were written with")
    group = parser.add_mutually_exclusive_group(required=True)
    group.add_argument("--list", action="store_true", help="List all rotated files")
    group.add_argument("--read", metavar="FILENAME", help="Read a specific log file")
    group.add_argument("--search", metavar="TEXT", help="Search text across all rotated files")
    group.add_argument("--stats", action="store_true", help="Count lines per category")
    args = parser.parse_args(argv)

    if args.list:
        files = list_rotated_files(args.log_path)
        if not files:
            print("No log files found.")
            return
        for path in files:
            print(f"  {path}  ({_format_size(os.path.getsize(path))})")

    elif args.read:
        try:
            sys.stdout.write(read_file(args.read))
        except OSError as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)

    elif args.search:
        results = search_files(args.log_path, args.search)
        if not results:
            print(f"No matches found for '{args.search}'.")
            return
        for path, line_num, line in results:
            print(f"  [{path}:{line_num}] {line}")

    elif args.stats:
        counts = count_by_category(args.log_path)
        if not counts:
            print("No log lines found.")
            return
        for category, count in sorted(counts.items(), key=lambda kv: (-kv[1], kv[0])):
            print(f"  {category:<10} {count}")


if __name__ == "__main__":
    main()
