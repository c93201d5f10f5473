"""
File utilities module.

Null-tolerant file-system operations: read, write, append, rename, move,
copy, truncate, delete, directory listing and bundled resource reading.
"""

from .errors import (
    ErrorKind,
    MissingArgumentError,
    PathMissingError,
    SourcePathMissingError,
    TargetPathMissingError,
    LoaderMissingError,
    error_kind_for,
)
from .file_ops import (
    NEW_LINE,
    require_path,
    exists,
    read_file,
    parse_file,
    create_file,
    write_to_file,
    write_lines,
    append_to_file,
    append_lines,
    rename_file,
    move_file,
    copy_file,
    truncate_file,
    delete_file,
)
from .listing import (
    FileEntry,
    list_files,
    list_directories,
    filter_by_prefix,
    filter_by_suffix,
    order_by_last_modified,
)
from .resources import read_resource, parse_resource
from .operator import FileOperator, OperationResult

__all__ = [
    'ErrorKind', 'MissingArgumentError', 'PathMissingError', 'SourcePathMissingError',
    'TargetPathMissingError', 'LoaderMissingError', 'error_kind_for',
    'NEW_LINE', 'require_path', 'exists', 'read_file', 'parse_file', 'create_file',
    'write_to_file', 'write_lines', 'append_to_file', 'append_lines', 'rename_file',
    'move_file', 'copy_file', 'truncate_file', 'delete_file',
    'FileEntry', 'list_files', 'list_directories', 'filter_by_prefix',
    'filter_by_suffix', 'order_by_last_modified',
    'read_resource', 'parse_resource',
    'FileOperator', 'OperationResult',
]
