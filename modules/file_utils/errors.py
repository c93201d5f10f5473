"""
Error taxonomy for the file utilities.

Missing-argument errors are raised by the pre-checks of every operation,
before the file system is touched. Platform errors are never wrapped; they
are only classified into an ErrorKind when a caller asks for one.
"""

import errno
from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    """Kinds of failure an operation can report."""
    PATH_MISSING = "path_missing"
    SOURCE_PATH_MISSING = "source_path_missing"
    TARGET_PATH_MISSING = "target_path_missing"
    LOADER_MISSING = "loader_missing"
    NOT_FOUND = "not_found"
    PERMISSION_DENIED = "permission_denied"
    ALREADY_EXISTS = "already_exists"
    NOT_EMPTY = "not_empty"
    NOT_A_DIRECTORY = "not_a_directory"
    IS_A_DIRECTORY = "is_a_directory"
    DECODE_ERROR = "decode_error"
    IO_ERROR = "io_error"


class MissingArgumentError(ValueError):
    """A required argument was absent."""
    kind = ErrorKind.PATH_MISSING
    default_message = "Path is missing"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.default_message)


class PathMissingError(MissingArgumentError):
    kind = ErrorKind.PATH_MISSING
    default_message = "Path is missing"


class SourcePathMissingError(MissingArgumentError):
    kind = ErrorKind.SOURCE_PATH_MISSING
    default_message = "Source path is missing"


class TargetPathMissingError(MissingArgumentError):
    kind = ErrorKind.TARGET_PATH_MISSING
    default_message = "Target path is missing"


class LoaderMissingError(MissingArgumentError):
    kind = ErrorKind.LOADER_MISSING
    default_message = "Resource anchor is missing"


_OS_ERROR_KINDS = [
    (FileNotFoundError, ErrorKind.NOT_FOUND),
    (PermissionError, ErrorKind.PERMISSION_DENIED),
    (FileExistsError, ErrorKind.ALREADY_EXISTS),
    (IsADirectoryError, ErrorKind.IS_A_DIRECTORY),
    (NotADirectoryError, ErrorKind.NOT_A_DIRECTORY),
]


def error_kind_for(exc: BaseException) -> ErrorKind:
    """
    Classify an exception raised by an operation.

    Args:
        exc: The exception to classify

    Returns:
        The matching ErrorKind, IO_ERROR for anything unrecognised
    """
    if isinstance(exc, MissingArgumentError):
        return exc.kind
    if isinstance(exc, UnicodeError):
        return ErrorKind.DECODE_ERROR
    for exc_type, kind in _OS_ERROR_KINDS:
        if isinstance(exc, exc_type):
            return kind
    if isinstance(exc, OSError) and exc.errno == errno.ENOTEMPTY:
        return ErrorKind.NOT_EMPTY
    return ErrorKind.IO_ERROR
