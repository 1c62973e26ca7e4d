"""RosterConfig: where the data file lives and how chatty logging is.

Without a config file the data file is user_data/user_data.json relative to
the working directory. A roster.toml in the working directory itself
can move it:

    [roster]
    data_dir = "user_data"          # relative to the directory holding roster.toml
    data_file = "user_data.json"

    [logging]
    level = "WARNING"               # DEBUG | INFO | WARNING | ERROR
"""

from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

_CONFIG_FILENAME = "roster.toml"
_DEFAULT_DATA_DIR = "user_data"
_DEFAULT_DATA_FILE = "user_data.json"
_DEFAULT_LOG_LEVEL = "WARNING"


@dataclass
class RosterConfig:
    """Resolved configuration for a roster session."""

    root: Path                      # directory holding roster.toml, or cwd
    data_dir: Path = field(default_factory=lambda: Path(_DEFAULT_DATA_DIR))
    data_file: str = _DEFAULT_DATA_FILE
    log_level: str = _DEFAULT_LOG_LEVEL

    @property
    def data_path(self) -> Path:
        return self.data_dir / self.data_file

    @property
    def config_path(self) -> Path:
        return self.root / _CONFIG_FILENAME

    def logging_level(self) -> int:
        """Numeric level for log_level, falling back to WARNING for unknown names."""
        level = logging.getLevelName(self.log_level.upper())
        return level if isinstance(level, int) else logging.WARNING


def load_config(root: Path | str | None = None) -> RosterConfig:
    """Load roster.toml from root (or cwd if root is None). Parent directories are not searched.

    Relative paths stay relative so the data file resolves against the
    working directory when no config file exists.
    """
    start = Path(root) if root else Path.cwd()
    found = start if (start / _CONFIG_FILENAME).exists() else None

    raw: dict[str, Any] = {}
    if found is not None:
        with (found / _CONFIG_FILENAME).open("rb") as f:
            raw = tomllib.load(f)

    roster_section = raw.get("roster", {})
    log_section = raw.get("logging", {})

    data_dir = Path(roster_section.get("data_dir", _DEFAULT_DATA_DIR))
    if found is not None and not data_dir.is_absolute():
        data_dir = found / data_dir
    elif root is not None and not data_dir.is_absolute():
        data_dir = start / data_dir

    return RosterConfig(
        root=found if found is not None else start,
        data_dir=data_dir,
        data_file=str(roster_section.get("data_file", _DEFAULT_DATA_FILE)),
        log_level=str(log_section.get("level", _DEFAULT_LOG_LEVEL)),
    )


def init_config(root: Path) -> Path:
    """Write a default roster.toml at root. Raises if already exists."""
    config_path = root / _CONFIG_FILENAME
    if config_path.exists():
        msg = f"roster.toml already exists at {config_path}"
        raise FileExistsError(msg)

    content = f"""\
[roster]
# data_dir = "{_DEFAULT_DATA_DIR}"        # default, relative to this file
# data_file = "{_DEFAULT_DATA_FILE}"   # default

# [logging]
# level = "{_DEFAULT_LOG_LEVEL}"   # DEBUG | INFO | WARNING | ERROR (written to stderr)
"""
    config_path.write_text(content)
    return config_path
