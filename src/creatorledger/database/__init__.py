"""Database layer for creatorledger application."""

from creatorledger.database.base import Database
from creatorledger.database.factories import create_sqlite_database

__all__ = ["Database", "create_sqlite_database"]
