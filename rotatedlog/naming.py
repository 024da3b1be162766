"""File naming and line formatting for hour-stamped log files."""

import glob
import os
from datetime import datetime

FILE_TIMESTAMP_FORMAT = "%Y-%m-%d-%H"
LINE_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def split_base_name(base_name: str) -> tuple[str, str, str]:
    """Split a base name into (directory, stem, extension).

    The extension starts at the last dot of the final path element, so
    "logs/app.tar.log" gives ("logs", "app.tar", ".log") and "README" gives
    ("", "README", "").
    """
    directory, filename = os.path.split(base_name)
    dot = filename.rfind(".")
    if dot == -1:
        return directory, filename, ""
    return directory, filename[:dot], filename[dot:]


def derive_path(base_name: str, checkpoint: datetime) -> str:
    """Return dir/stem_<YYYY-MM-DD-HH>ext for the given checkpoint."""
    directory, stem, ext = split_base_name(base_name)
    name = f"{stem}_{checkpoint.strftime(FILE_TIMESTAMP_FORMAT)}{ext}"
    return os.path.normpath(os.path.join(directory, name))


def format_line(category: str, message: str, now: datetime) -> str:
    return f"{category} {now.strftime(LINE_TIMESTAMP_FORMAT)} {message}\n"


def parse_path_timestamp(path: str, base_name: str) -> datetime | None:
    """Extract the hour checkpoint from a derived file name. Returns None on failure."""
    _, stem, ext = split_base_name(base_name)
    filename = os.path.basename(path)
    prefix = stem + "_"
    if not filename.startswith(prefix) or not filename.endswith(ext):
        return None
    stamp = filename[len(prefix):len(filename) - len(ext)]
    try:
        return datetime.strptime(stamp, FILE_TIMESTAMP_FORMAT)
    except ValueError:
        return None


def list_rotated_files(base_name: str) -> list[str]:
    """List existing files derived from base_name, oldest hour first."""
    directory, stem, ext = split_base_name(base_name)
    pattern = os.path.join(glob.escape(directory), glob.escape(stem) + "_*" + glob.escape(ext))
    stamped = []
    for path in glob.glob(pattern):
        ts = parse_path_timestamp(path, base_name)
        if ts is not None and os.path.isfile(path):
            stamped.append((ts, os.path.normpath(path)))
    stamped.sort()
    return [path for _, path in stamped]
