"""
Audit Logger for fileutils.

Keeps an append-only JSONL record of the file operations run through the
FileOperator, with their targets, outcome and error kind.
"""

import json
from dataclasses import dataclass, asdict
from datetime import datetime
from pathlib import Path
from typing import List, Optional, Dict, Any
from enum import Enum


class ActionType(Enum):
    """Categories of file operations."""
    READ = "read"
    WRITE = "write"
    DELETE = "delete"
    MOVE = "move"
    LIST = "list"


class ActionStatus(Enum):
    """Outcome of an operation."""
    EXECUTED = "executed"
    FAILED = "failed"
    DRY_RUN = "dry_run"


@dataclass
class AuditEntry:
    """A single audit log entry."""
    timestamp: str
    action_type: str
    operation: str
    target: Optional[str]
    status: str
    error_kind: Optional[str]
    result: Optional[str]
    metadata: Dict[str, Any]

    @classmethod
    def create(
        cls,
        action_type: ActionType,
        operation: str,
        target: Optional[str] = None,
        status: ActionStatus = ActionStatus.EXECUTED,
        error_kind: Optional[str] = None,
        result: Optional[str] = None,
        metadata: Optional[Dict[str, Any]] = None
    ) -> "AuditEntry":
        """Factory method to create an entry stamped with the current time."""
        return cls(
            timestamp=datetime.now().isoformat(),
            action_type=action_type.value,
            operation=operation,
            target=target,
            status=status.value,
            error_kind=error_kind,
            result=result,
            metadata=metadata or {}
        )

    def to_json(self) -> str:
        return json.dumps(asdict(self), ensure_ascii=False)

    @classmethod
    def from_json(cls, json_str: str) -> "AuditEntry":
        return cls(**json.loads(json_str))


class AuditLogger:
    """
    Append-only audit logger.

    Entries are written one per line to a JSONL file. Existing lines are
    never rewritten; clear() moves the file aside instead.
    """

    def __init__(self, log_path: str = "data/audit_log.jsonl"):
        """
        Initialize the audit logger.

        Args:
            log_path: Path to the JSONL log file
        """
        self.log_path = Path(log_path)
        self._ensure_log_file()

    def _ensure_log_file(self) -> None:
        """Create the log directory and file if they don't exist."""
        self.log_path.parent.mkdir(parents=True, exist_ok=True)
        if not self.log_path.exists():
            self.log_path.touch()

    def log(self, entry: AuditEntry) -> None:
        """Append an entry to the log."""
        with open(self.log_path, "a", encoding="utf-8") as f:
            f.write(entry.to_json() + "\n")

    def log_action(
        self,
        action_type: ActionType,
        operation: str,
        target: Optional[str] = None,
        status: ActionStatus = ActionStatus.EXECUTED,
        error_kind: Optional[str] = None,
        result: Optional[str] = None,
        metadata: Optional[Dict[str, Any]] = None
    ) -> AuditEntry:
        """
        Create and log an entry in one call.

        Returns the created AuditEntry.
        """
        entry = AuditEntry.create(
            action_type=action_type,
            operation=operation,
            target=target,
            status=status,
            error_kind=error_kind,
            result=result,
            metadata=metadata
        )
        self.log(entry)
        return entry

    def _read_entries(self) -> List[AuditEntry]:
        entries = []
        if not self.log_path.exists():
            return entries

        with open(self.log_path, "r", encoding="utf-8") as f:
            for line in f:
                line = line.strip()
                if not line:
                    continue
                try:
                    entries.append(AuditEntry.from_json(line))
                except (json.JSONDecodeError, TypeError):
                    # Skip corrupt lines
                    continue
        return entries

    def get_recent(self, limit: int = 100) -> List[AuditEntry]:
        """
        Get the most recent audit entries.

        Args:
            limit: Maximum number of entries to return

        Returns:
            List of AuditEntry objects, most recent first
        """
        if limit <= 0:
            return []
        return list(reversed(self._read_entries()[-limit:]))

    def get_by_action_type(self, action_type: ActionType, limit: int = 100) -> List[AuditEntry]:
        """Get entries of one action type, oldest first."""
        matching = [e for e in self._read_entries() if e.action_type == action_type.value]
        return matching[:limit]

    def get_failed(self, limit: int = 50) -> List[AuditEntry]:
        """Get operations that failed, oldest first."""
        failed = [e for e in self._read_entries() if e.status == ActionStatus.FAILED.value]
        return failed[:limit]

    def export(self, format: str = "json") -> str:
        """
        Export the audit log.

        Args:
            format: Export format ("json" or "csv")

        Returns:
            String containing the exported data, most recent first
        """
        entries = self.get_recent(limit=10000)
        header = "timestamp,action_type,operation,target,status,error_kind,result"

        if format == "json":
            return json.dumps([asdict(e) for e in entries], indent=2)
        elif format == "csv":
            lines = [header]
            for e in entries:
                lines.append(
                    f'"{e.timestamp}","{e.action_type}","{e.operation}","{e.target or ""}",'
                    f'"{e.status}","{e.error_kind or ""}","{e.result or ""}"'
                )
            return "\n".join(lines)
        else:
            raise ValueError(f"Unsupported export format: {format}")

    def clear(self, confirm: bool = False) -> bool:
        """
        Clear the audit log, keeping the old file as a timestamped backup.

        Args:
            confirm: Must be True to actually clear the log

        Returns:
            True if cleared, False otherwise
        """
        if not confirm or not self.log_path.exists():
            return False

        stamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        self.log_path.rename(self.log_path.with_suffix(f".backup.{stamp}.jsonl"))
        self.log_path.touch()
        return True
