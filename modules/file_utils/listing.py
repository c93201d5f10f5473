"""
Directory listing for the file utilities.

Lists the direct children of a directory as FileEntry values and offers
filtering and ordering helpers that never fail on absent input.
"""

import os
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, List, Optional

from .file_ops import PathRef, require_path


@dataclass
class FileEntry:
    """A child of a listed directory."""
    path: str
    name: str
    is_file: bool
    is_dir: bool
    modified: float
    size: int

    @property
    def modified_at(self) -> Optional[datetime]:
        """Last-modified time as a local datetime, None when out of range."""
        try:
            return datetime.fromtimestamp(self.modified)
        except (OverflowError, OSError, ValueError):
            return None

    @classmethod
    def from_dir_entry(cls, entry: os.DirEntry) -> "FileEntry":
        """Build a FileEntry from an os.scandir() entry."""
        try:
            stat = entry.stat()
        except FileNotFoundError:
            # Dangling symlink
            stat = entry.stat(follow_symlinks=False)
        is_file = entry.is_file()
        return cls(
            path=entry.path,
            name=entry.name,
            is_file=is_file,
            is_dir=entry.is_dir(),
            modified=stat.st_mtime,
            size=stat.st_size if is_file else 0
        )


def _list_entries(path: Optional[PathRef], keep: Callable[[FileEntry], bool]) -> List[FileEntry]:
    directory = require_path(path)
    with os.scandir(directory) as it:
        entries = [FileEntry.from_dir_entry(entry) for entry in it]
    return [entry for entry in entries if keep(entry)]


def list_files(path: Optional[PathRef]) -> List[FileEntry]:
    """
    List the regular files directly inside a directory.

    Args:
        path: Path to the directory

    Returns:
        FileEntry objects in no particular order

    Raises:
        PathMissingError: If path is None
        FileNotFoundError: If directory doesn't exist
        NotADirectoryError: If path is not a directory
    """
    return _list_entries(path, lambda entry: entry.is_file)


def list_directories(path: Optional[PathRef]) -> List[FileEntry]:
    """List the entries directly inside a directory that are not regular files."""
    return _list_entries(path, lambda entry: not entry.is_file)


def filter_by_prefix(entries: Optional[List[FileEntry]], prefix: Optional[str]) -> List[FileEntry]:
    """Entries whose name starts with prefix. Absent input gives an empty list."""
    if entries is None or prefix is None:
        return []
    return [entry for entry in entries if entry.name.startswith(prefix)]


def filter_by_suffix(entries: Optional[List[FileEntry]], suffix: Optional[str]) -> List[FileEntry]:
    """Entries whose name ends with suffix. Absent input gives an empty list."""
    if entries is None or suffix is None:
        return []
    return [entry for entry in entries if entry.name.endswith(suffix)]


def order_by_last_modified(entries: Optional[List[FileEntry]], descending: bool = False) -> None:
    """
    Sort entries in place by last-modified time.

    The sort is stable, so entries with equal timestamps keep their order.
    None is ignored.
    """
    if entries is None:
        return
    entries.sort(key=lambda entry: entry.modified, reverse=descending)
