"""
Configuration for fileutils.

Settings are read from a YAML file whose values live under a top-level
"fileutils" key. A missing or unreadable file falls back to the defaults.
"""

import codecs
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml


LINE_SEPARATORS = {
    "native": os.linesep,
    "lf": "\n",
    "crlf": "\r\n",
    "cr": "\r",
}


def resolve_line_separator(name: str) -> str:
    """
    Resolve a separator name to its token.

    Args:
        name: One of native, lf, crlf or cr (case-insensitive)

    Raises:
        ValueError: If the name is unknown
    """
    try:
        return LINE_SEPARATORS[str(name).lower()]
    except KeyError:
        raise ValueError(
            f"Unknown line separator '{name}', expected one of: {', '.join(LINE_SEPARATORS)}"
        ) from None


def resolve_encoding(name: str) -> str:
    """
    Check that an encoding name is known to Python.

    Raises:
        ValueError: If the codec doesn't exist
    """
    try:
        codecs.lookup(str(name))
    except LookupError:
        raise ValueError(f"Unknown encoding '{name}'") from None
    return str(name)


def _section(config: Dict[str, Any], name: str) -> Dict[str, Any]:
    """Return a config section, or an empty one when it is not a mapping."""
    value = config.get(name)
    return value if isinstance(value, dict) else {}


def _default_config() -> Dict[str, Any]:
    """Return default configuration."""
    return {
        "io": {
            "encoding": "utf-8",
            "line_separator": "native",
        },
        "audit": {
            "enabled": True,
            "log_path": "data/audit_log.jsonl",
        },
    }


@dataclass
class Settings:
    """Resolved settings."""
    encoding: str = "utf-8"
    line_separator: str = os.linesep
    audit_enabled: bool = True
    audit_log_path: str = "data/audit_log.jsonl"

    def __post_init__(self):
        self.encoding = resolve_encoding(self.encoding)

    @classmethod
    def from_dict(cls, config: Dict[str, Any]) -> "Settings":
        """Build settings from a config mapping, filling gaps with defaults."""
        defaults = _default_config()
        if not isinstance(config, dict):
            config = {}
        io = {**defaults["io"], **_section(config, "io")}
        audit = {**defaults["audit"], **_section(config, "audit")}
        return cls(
            encoding=io["encoding"],
            line_separator=resolve_line_separator(io["line_separator"]),
            audit_enabled=bool(audit["enabled"]),
            audit_log_path=str(audit["log_path"]),
        )


def load_config(config_path: str = "config.yaml") -> Dict[str, Any]:
    """Load the raw configuration mapping from a YAML file."""
    path = Path(config_path)
    if not path.exists():
        return _default_config()

    try:
        with open(path, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError):
        return _default_config()

    if not isinstance(config, dict):
        return _default_config()
    root = config.get("fileutils", config)
    return root if isinstance(root, dict) else _default_config()


def load_settings(config_path: Optional[str] = None) -> Settings:
    """
    Load settings from a YAML file.

    Args:
        config_path: Path to the config file (default: config.yaml)

    Returns:
        Settings with defaults for anything not configured

    Raises:
        ValueError: If the configured line separator or encoding is unknown
    """
    return Settings.from_dict(load_config(config_path or "config.yaml"))
