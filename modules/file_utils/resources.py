"""
Bundled resource reading.

Resources are read-only files shipped inside an importable package and are
addressed by a path relative to that package.
"""

from importlib import resources
from types import ModuleType
from typing import List, Optional, Union

from .errors import LoaderMissingError, PathMissingError


Anchor = Union[str, ModuleType]


def _read_lines(anchor: Optional[Anchor], path: Optional[str], encoding: str) -> List[str]:
    if anchor is None:
        raise LoaderMissingError()
    if path is None:
        raise PathMissingError()
    resource = resources.files(anchor).joinpath(path)
    with resource.open("r", encoding=encoding) as f:
        return [line[:-1] if line.endswith("\n") else line for line in f]


def read_resource(anchor: Optional[Anchor], path: Optional[str], encoding: str = "utf-8") -> str:
    """
    Read a bundled resource as one string.

    Lines are concatenated without separators.

    Args:
        anchor: Package name or module the resource belongs to
        path: Resource path relative to the package
        encoding: Resource encoding (default: utf-8)

    Raises:
        FileNotFoundError: If the resource doesn't exist
    """
    return "".join(_read_lines(anchor, path, encoding))


def parse_resource(anchor: Optional[Anchor], path: Optional[str], encoding: str = "utf-8") -> List[str]:
    """Read a bundled resource as a list of lines."""
    return _read_lines(anchor, path, encoding)
