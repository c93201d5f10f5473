# fileutils - Core Module
"""
Core infrastructure for fileutils.
Configuration and audit logging shared by the library front ends.
"""

from .config import Settings, load_settings, resolve_line_separator
from .logger import AuditLogger, AuditEntry, ActionType, ActionStatus

__all__ = [
    "Settings",
    "load_settings",
    "resolve_line_separator",
    "AuditLogger",
    "AuditEntry",
    "ActionType",
    "ActionStatus",
]

__version__ = "0.1.0"
