"""Database package: async SQLAlchemy Base, Database holder, session dependency."""
from streeteats.db.base import Base, Database, get_db

__all__ = ["Base", "Database", "get_db"]
