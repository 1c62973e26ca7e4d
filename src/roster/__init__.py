"""JSON-backed user roster with an interactive editor.

Layout (relative to the working directory, or to roster.toml when present):
    user_data/
        user_data.json    # [{"id": "<uuid4>", "name": "Alice", "age": 30}, ...]

The file is loaded once per session and rewritten in full after every add,
edit or delete.
"""

from roster.config import RosterConfig, init_config, load_config
from roster.models import UserRecord
from roster.store import RecordStore

__all__ = ["RecordStore", "RosterConfig", "UserRecord", "init_config", "load_config"]
