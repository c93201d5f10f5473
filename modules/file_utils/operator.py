"""
Result-returning front end for the file operations.

FileOperator runs the plain operations with configured encoding and line
separator, records each call in the audit log and reports failures as an
OperationResult carrying an ErrorKind instead of raising.
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple, Type

from core.config import Settings
from core.logger import AuditLogger, ActionType, ActionStatus

from . import file_ops, listing, resources
from .errors import (
    ErrorKind,
    MissingArgumentError,
    PathMissingError,
    SourcePathMissingError,
    TargetPathMissingError,
    error_kind_for,
)
from .file_ops import PathRef, require_path


@dataclass
class OperationResult:
    """Outcome of an operation run through FileOperator."""
    success: bool
    operation: str
    kind: Optional[ErrorKind] = None
    message: Optional[str] = None
    data: Optional[Any] = None
    dry_run: bool = False


Requirement = Tuple[Optional[PathRef], Type[MissingArgumentError]]


class FileOperator:
    """File operations with audit logging and explicit error kinds."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        logger: Optional[AuditLogger] = None
    ):
        """
        Initialize FileOperator.

        Args:
            settings: Encoding and separator settings (default: Settings())
            logger: Audit logger; None disables auditing
        """
        self.settings = settings or Settings()
        self.logger = logger

    def _log(
        self,
        action_type: ActionType,
        operation: str,
        target: Optional[str],
        status: ActionStatus,
        error_kind: Optional[ErrorKind] = None,
        result: Optional[str] = None,
        metadata: Optional[Dict[str, Any]] = None
    ) -> None:
        if self.logger is None:
            return
        self.logger.log_action(
            action_type=action_type,
            operation=operation,
            target=target,
            status=status,
            error_kind=error_kind.value if error_kind else None,
            result=result,
            metadata=metadata
        )

    def _execute(
        self,
        operation: str,
        action_type: ActionType,
        call: Callable[[], Any],
        target: Optional[PathRef] = None,
        required: Sequence[Requirement] = (),
        dry_run: bool = False,
        metadata: Optional[Dict[str, Any]] = None
    ) -> OperationResult:
        """
        Run one operation and turn its outcome into an OperationResult.

        Argument presence is checked for dry runs too, so a dry run reports
        the same missing-argument kinds as a real one.
        """
        target_str = None if target is None else str(target)
        try:
            for value, error in required:
                require_path(value, error)

            if dry_run:
                self._log(
                    action_type, operation, target_str, ActionStatus.DRY_RUN,
                    result=f"DRY-RUN: would {operation} {target_str}",
                    metadata=metadata
                )
                return OperationResult(
                    success=True,
                    operation=operation,
                    message=f"Dry-run: {operation} {target_str} was not performed",
                    dry_run=True
                )

            data = call()

        except (MissingArgumentError, OSError, UnicodeError) as e:
            kind = error_kind_for(e)
            self._log(
                action_type, operation, target_str, ActionStatus.FAILED,
                error_kind=kind, result=f"Error: {e}", metadata=metadata
            )
            return OperationResult(success=False, operation=operation, kind=kind, message=str(e))

        self._log(action_type, operation, target_str, ActionStatus.EXECUTED, metadata=metadata)
        return OperationResult(success=True, operation=operation, data=data)

    def exists(self, path: Optional[PathRef]) -> OperationResult:
        return OperationResult(success=True, operation="exists", data=file_ops.exists(path))

    def read_file(self, path: Optional[PathRef]) -> OperationResult:
        """Read a file; data is the text content."""
        return self._execute(
            "read_file", ActionType.READ,
            lambda: file_ops.read_file(path, encoding=self.settings.encoding),
            target=path
        )

    def parse_file(self, path: Optional[PathRef]) -> OperationResult:
        """Read a file; data is the list of lines."""
        return self._execute(
            "parse_file", ActionType.READ,
            lambda: file_ops.parse_file(path, encoding=self.settings.encoding),
            target=path
        )

    def create_file(
        self,
        path: Optional[PathRef],
        content: Optional[str] = None,
        dry_run: bool = False
    ) -> OperationResult:
        return self._execute(
            "create_file", ActionType.WRITE,
            lambda: file_ops.create_file(path, content, encoding=self.settings.encoding),
            target=path,
            required=[(path, PathMissingError)],
            dry_run=dry_run,
            metadata={"content_length": len(content or "")}
        )

    def write_to_file(
        self,
        path: Optional[PathRef],
        content: Optional[str],
        dry_run: bool = False
    ) -> OperationResult:
        return self._execute(
            "write_to_file", ActionType.WRITE,
            lambda: file_ops.write_to_file(path, content, encoding=self.settings.encoding),
            target=path,
            required=[(path, PathMissingError)],
            dry_run=dry_run,
            metadata={"content_length": len(content or "")}
        )

    def write_lines(
        self,
        path: Optional[PathRef],
        lines: Optional[List[str]],
        dry_run: bool = False
    ) -> OperationResult:
        return self._execute(
            "write_lines", ActionType.WRITE,
            lambda: file_ops.write_lines(
                path, lines,
                separator=self.settings.line_separator,
                encoding=self.settings.encoding
            ),
            target=path,
            required=[(path, PathMissingError)],
            dry_run=dry_run,
            metadata={"line_count": len(lines or [])}
        )

    def append_to_file(
        self,
        path: Optional[PathRef],
        content: Optional[str],
        prepend_separator: bool = False,
        dry_run: bool = False
    ) -> OperationResult:
        return self._execute(
            "append_to_file", ActionType.WRITE,
            lambda: file_ops.append_to_file(
                path, content,
                prepend_separator=prepend_separator,
                separator=self.settings.line_separator,
                encoding=self.settings.encoding
            ),
            target=path,
            required=[(path, PathMissingError)],
            dry_run=dry_run,
            metadata={"content_length": len(content or ""), "prepend_separator": prepend_separator}
        )

    def append_lines(
        self,
        path: Optional[PathRef],
        lines: Optional[List[str]],
        prepend_separator: bool = False,
        dry_run: bool = False
    ) -> OperationResult:
        return self._execute(
            "append_lines", ActionType.WRITE,
            lambda: file_ops.append_lines(
                path, lines,
                prepend_separator=prepend_separator,
                separator=self.settings.line_separator,
                encoding=self.settings.encoding
            ),
            target=path,
            required=[(path, PathMissingError)],
            dry_run=dry_run,
            metadata={"line_count": len(lines or []), "prepend_separator": prepend_separator}
        )

    def rename_file(
        self,
        path: Optional[PathRef],
        new_name: Optional[str],
        dry_run: bool = False
    ) -> OperationResult:
        return self._execute(
            "rename_file", ActionType.MOVE,
            lambda: file_ops.rename_file(path, new_name),
            target=path,
            required=[(path, PathMissingError), (new_name, TargetPathMissingError)],
            dry_run=dry_run,
            metadata={"new_name": new_name}
        )

    def move_file(
        self,
        source: Optional[PathRef],
        target: Optional[PathRef],
        dry_run: bool = False
    ) -> OperationResult:
        return self._execute(
            "move_file", ActionType.MOVE,
            lambda: file_ops.move_file(source, target),
            target=target,
            required=[(source, SourcePathMissingError), (target, TargetPathMissingError)],
            dry_run=dry_run,
            metadata={"source": None if source is None else str(source)}
        )

    def copy_file(
        self,
        source: Optional[PathRef],
        target: Optional[PathRef],
        dry_run: bool = False
    ) -> OperationResult:
        return self._execute(
            "copy_file", ActionType.WRITE,
            lambda: file_ops.copy_file(source, target),
            target=target,
            required=[(source, SourcePathMissingError), (target, TargetPathMissingError)],
            dry_run=dry_run,
            metadata={"source": None if source is None else str(source)}
        )

    def truncate_file(self, path: Optional[PathRef], dry_run: bool = False) -> OperationResult:
        return self._execute(
            "truncate_file", ActionType.WRITE,
            lambda: file_ops.truncate_file(path),
            target=path,
            required=[(path, PathMissingError)],
            dry_run=dry_run
        )

    def delete_file(self, path: Optional[PathRef], dry_run: bool = False) -> OperationResult:
        return self._execute(
            "delete_file", ActionType.DELETE,
            lambda: file_ops.delete_file(path),
            target=path,
            required=[(path, PathMissingError)],
            dry_run=dry_run
        )

    def list_files(self, path: Optional[PathRef]) -> OperationResult:
        """List regular files; data is a list of FileEntry."""
        return self._execute(
            "list_files", ActionType.LIST,
            lambda: listing.list_files(path),
            target=path
        )

    def list_directories(self, path: Optional[PathRef]) -> OperationResult:
        """List non-file entries; data is a list of FileEntry."""
        return self._execute(
            "list_directories", ActionType.LIST,
            lambda: listing.list_directories(path),
            target=path
        )

    def read_resource(self, anchor: Optional[resources.Anchor], path: Optional[str]) -> OperationResult:
        return self._execute(
            "read_resource", ActionType.READ,
            lambda: resources.read_resource(anchor, path, encoding=self.settings.encoding),
            target=path
        )

    def parse_resource(self, anchor: Optional[resources.Anchor], path: Optional[str]) -> OperationResult:
        return self._execute(
            "parse_resource", ActionType.READ,
            lambda: resources.parse_resource(anchor, path, encoding=self.settings.encoding),
            target=path
        )
