"""Database infrastructure helpers (engine, sessions, migrations)."""

from .base import Base
from .session import Database, IMMEDIATE_OPTION

__all__ = ["Base", "Database", "IMMEDIATE_OPTION"]
