# src/mockgen/configuration/storage/local.py
"""Local filesystem storage configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from mockgen.stores import SessionStore

SESSIONS_DB = "sessions.db"


@dataclass(frozen=True)
class LocalStorage:
    """Local filesystem storage using SQLite.

    Sessions, questions and answers are persisted to sessions.db inside
    the data directory.

    Args:
        data_dir: Base directory for storage files.
                  Created if it doesn't exist.

    Example:
        storage = LocalStorage("./mockgen_data")
        store = storage.build_store()
    """

    data_dir: str

    def build_store(self) -> SessionStore:
        """Build the SQLite session store, creating the data directory."""
        from mockgen.stores import SQLiteSessionStore

        Path(self.data_dir).mkdir(parents=True, exist_ok=True)
        return SQLiteSessionStore(os.path.join(self.data_dir, SESSIONS_DB))
