"""Storage for generated test sessions."""

from mockgen.stores.base import SessionStore
from mockgen.stores.sqlite_session import SQLiteSessionStore

__all__ = [
    "SessionStore",
    "SQLiteSessionStore",
]
