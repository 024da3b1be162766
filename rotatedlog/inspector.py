"""Inspector logic: read, search, and tally hour-stamped log files."""

import os
from collections import Counter

from rotatedlog.naming import list_rotated_files


def read_file(path: str) -> str:
    if not os.path.exists(path):
        raise FileNotFoundError(f"File not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def search_files(base_name: str, text: str) -> list[tuple[str, int, str]]:
    """Search for text across all files of base_name. Returns (path, line_num, line) tuples."""
    results = []
    for path in list_rotated_files(base_name):
        try:
            with open(path, "r", encoding="utf-8") as f:
                for line_num, line in enumerate(f, 1):
                    if text in line:
                        results.append((path, line_num, line.rstrip("\n")))
        except OSError:
            continue
    return results


def count_by_category(base_name: str) -> dict[str, int]:
    """Count lines per category (the first space-separated token)."""
    counts = Counter()
    for path in list_rotated_files(base_name):
        try:
            with open(path, "r", encoding="utf-8") as f:
                for line in f:
                    if not line.strip():
                        continue
                    counts[line.split(" ", 1)[0]] += 1
        except OSError:
            continue
    return dict(counts)
