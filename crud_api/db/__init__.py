"""Database helpers (store handle export)."""

from .session import Base, Database

__all__ = ["Base", "Database"]
