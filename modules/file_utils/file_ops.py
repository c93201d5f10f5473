"""
File operations for the file utilities.

Stateless functions over paths and content. Every function that takes a path
checks for its presence before touching the file system and raises a
MissingArgumentError subclass when it is absent. Platform errors propagate
unchanged.
"""

import errno
import os
import shutil
from pathlib import Path
from typing import List, Optional, Union

from .errors import PathMissingError, SourcePathMissingError, TargetPathMissingError


NEW_LINE = os.linesep

PathRef = Union[str, os.PathLike]


def require_path(path: Optional[PathRef], error=PathMissingError) -> Path:
    """Convert a path reference to a Path, raising error when it is None."""
    if path is None:
        raise error()
    return Path(path)


def _join(lines: Optional[List[str]], separator: str) -> Optional[str]:
    if lines is None:
        return None
    return separator.join(lines)


def exists(path: Optional[PathRef]) -> bool:
    """Check whether a path exists. An absent path never exists."""
    if path is None:
        return False
    return Path(path).exists()


def read_file(path: Optional[PathRef], encoding: str = "utf-8") -> str:
    """
    Read the whole contents of a file.

    Line endings are returned exactly as stored.

    Args:
        path: Path to the file
        encoding: File encoding (default: utf-8)

    Returns:
        File contents as string

    Raises:
        PathMissingError: If path is None
        FileNotFoundError: If file doesn't exist
    """
    target = require_path(path)
    with open(target, "r", encoding=encoding, newline="") as f:
        return f.read()


def parse_file(path: Optional[PathRef], encoding: str = "utf-8") -> List[str]:
    """
    Read a file as a list of lines.

    Lines are split on \\n, \\r and \\r\\n with the terminators removed. A
    trailing terminator does not produce an empty last line.
    """
    target = require_path(path)
    with open(target, "r", encoding=encoding) as f:
        return [line[:-1] if line.endswith("\n") else line for line in f]


def create_file(
    path: Optional[PathRef],
    content: Optional[str] = None,
    encoding: str = "utf-8"
) -> Path:
    """
    Create a file, truncating it if it already exists.

    Args:
        path: Path where the file should be created
        content: Optional content; None leaves the file empty
        encoding: Encoding used for content

    Returns:
        The path of the created file
    """
    target = require_path(path)
    data = b"" if content is None else content.encode(encoding)
    with open(target, "wb") as f:
        f.write(data)
    return target


def write_to_file(
    path: Optional[PathRef],
    content: Optional[str],
    encoding: str = "utf-8"
) -> Path:
    """
    Replace the contents of an existing file.

    The file is not created when missing; the platform error propagates.
    None content leaves the file empty.
    """
    target = require_path(path)
    data = b"" if content is None else content.encode(encoding)
    fd = os.open(target, os.O_WRONLY | os.O_TRUNC | getattr(os, "O_BINARY", 0))
    with open(fd, "wb") as f:
        f.write(data)
    return target


def write_lines(
    path: Optional[PathRef],
    lines: Optional[List[str]],
    separator: str = NEW_LINE,
    encoding: str = "utf-8"
) -> Path:
    """Join lines with the separator and replace the file contents with them."""
    return write_to_file(path, _join(lines, separator), encoding=encoding)


def append_to_file(
    path: Optional[PathRef],
    content: Optional[str],
    prepend_separator: bool = False,
    separator: str = NEW_LINE,
    encoding: str = "utf-8"
) -> Path:
    """
    Append content to the end of an existing file.

    Args:
        path: Path to the file
        content: Text to append; None appends nothing
        prepend_separator: Write the separator before content when True
        separator: Line separator token (default: platform separator)
        encoding: Encoding used for content

    Returns:
        The path of the file

    Raises:
        PathMissingError: If path is None
        FileNotFoundError: If file doesn't exist
    """
    target = require_path(path)
    if content is None:
        data = b""
    else:
        data = ((separator if prepend_separator else "") + content).encode(encoding)
    fd = os.open(target, os.O_WRONLY | os.O_APPEND | getattr(os, "O_BINARY", 0))
    with open(fd, "wb") as f:
        f.write(data)
    return target


def append_lines(
    path: Optional[PathRef],
    lines: Optional[List[str]],
    prepend_separator: bool = False,
    separator: str = NEW_LINE,
    encoding: str = "utf-8"
) -> Path:
    """Join lines with the separator and append them. None appends nothing."""
    return append_to_file(
        path,
        _join(lines, separator),
        prepend_separator=prepend_separator,
        separator=separator,
        encoding=encoding
    )


def rename_file(path: Optional[PathRef], new_name: Optional[str]) -> Path:
    """
    Rename a file within its parent directory.

    An existing entry named new_name is replaced.

    Returns:
        The new path
    """
    source = require_path(path)
    if new_name is None:
        raise TargetPathMissingError("New name is missing")
    return move_file(source, source.parent / new_name)


def move_file(source: Optional[PathRef], target: Optional[PathRef]) -> Path:
    """
    Move a file, replacing any existing file at the target.

    The source is checked before the target.

    Returns:
        The target path
    """
    src = require_path(source, SourcePathMissingError)
    dst = require_path(target, TargetPathMissingError)
    try:
        os.replace(src, dst)
    except OSError as e:
        if e.errno != errno.EXDEV or dst.is_dir():
            raise
        # Different file systems: shutil copies then removes the original
        shutil.move(str(src), str(dst))
    return dst


def copy_file(source: Optional[PathRef], target: Optional[PathRef]) -> Path:
    """
    Copy a file's contents, replacing any existing file at the target.

    The source is checked before the target.

    Returns:
        The target path
    """
    src = require_path(source, SourcePathMissingError)
    dst = require_path(target, TargetPathMissingError)
    shutil.copyfile(src, dst)
    return dst


def truncate_file(path: Optional[PathRef]) -> Path:
    """Empty an existing file in place."""
    target = require_path(path)
    os.truncate(target, 0)
    return target


def delete_file(path: Optional[PathRef]) -> None:
    """
    Delete a file or an empty directory.

    Raises:
        PathMissingError: If path is None
        FileNotFoundError: If nothing exists at path
        OSError: If path is a directory that is not empty
    """
    target = require_path(path)
    if target.is_dir() and not target.is_symlink():
        target.rmdir()
    else:
        target.unlink()
