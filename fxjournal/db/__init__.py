"""Persistence layer for fxjournal."""

from fxjournal.db.store import DataStore

__all__ = ["DataStore"]
