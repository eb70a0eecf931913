"""SQLite key-value store for fxjournal."""

import json
import logging
import math
import sqlite3
from datetime import datetime
from pathlib import Path
from typing import Optional

from pydantic import TypeAdapter, ValidationError

from fxjournal.models import SortSpec, Trade

logger = logging.getLogger(__name__)

TRADES_KEY = "trades"
CAPITAL_KEY = "initialCapital"
SESSION_KEY = "session"
SORT_KEY = "tradeLogSort"

_trade_list = TypeAdapter(list[Trade])


class DataStore:
    """SQLite-backed key-value store holding JSON values.

    Loaders return None when a value is missing or cannot be decoded, and
    savers return False when the write fails. Neither raises.
    """

    REQUIRED_TABLES = ["kv_store"]

    def __init__(self, db_path: Path):
        """Initialize the data store.

        Args:
            db_path: Path to the SQLite database file.
        """
        self.db_path = db_path
        self._ensure_db_dir()
        self._init_schema()

    def _ensure_db_dir(self) -> None:
        """Ensure the database directory exists."""
        self.db_path.parent.mkdir(parents=True, exist_ok=True)

    def _get_connection(self) -> sqlite3.Connection:
        """Get a database connection."""
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = sqlite3.Row
        return conn

    def _init_schema(self) -> None:
        """Initialize database schema on first run.

        A database that cannot be opened is logged and left alone; later
        reads and writes report the failure through their return values.
        """
        try:
            conn = self._get_connection()
        except sqlite3.Error as e:
            logger.warning("Could not open %s: %s", self.db_path, e)
            return
        try:
            cursor = conn.cursor()
            cursor.execute("""
                CREATE TABLE IF NOT EXISTS kv_store (
                    key TEXT PRIMARY KEY,
                    value TEXT NOT NULL,
                    updated_at TEXT NOT NULL
                )
            """)
            conn.commit()
        except sqlite3.Error as e:
            logger.warning("Could not initialize %s: %s", self.db_path, e)
        finally:
            conn.close()

    def get_tables(self) -> list[str]:
        """Get list of all tables in the database."""
        conn = self._get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute(
                "SELECT name FROM sqlite_master WHERE type='table' AND name NOT LIKE 'sqlite_%'"
            )
            return [row["name"] for row in cursor.fetchall()]
        finally:
            conn.close()

    # ==================== Raw values ====================

    def get_value(self, key: str) -> Optional[str]:
        """Get the raw value stored under a key.

        Args:
            key: Storage key.

        Returns:
            The stored text, or None if the key is absent.
        """
        conn = self._get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute("SELECT value FROM kv_store WHERE key = ?", (key,))
            row = cursor.fetchone()
            return row["value"] if row else None
        finally:
            conn.close()

    def set_value(self, key: str, value: str) -> None:
        """Store a raw value, replacing any previous one.

        Args:
            key: Storage key.
            value: Text to store.
        """
        conn = self._get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute(
                """
                INSERT OR REPLACE INTO kv_store (key, value, updated_at)
                VALUES (?, ?, ?)
                """,
                (key, value, datetime.now().isoformat()),
            )
            conn.commit()
        finally:
            conn.close()

    def delete_value(self, key: str) -> None:
        """Delete the value stored under a key.

        Args:
            key: Storage key.
        """
        conn = self._get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute("DELETE FROM kv_store WHERE key = ?", (key,))
            conn.commit()
        finally:
            conn.close()

    def _read(self, key: str) -> Optional[str]:
        try:
            return self.get_value(key)
        except sqlite3.Error as e:
            logger.warning("Could not read '%s' from %s: %s", key, self.db_path, e)
            return None

    def _write(self, key: str, value: str) -> bool:
        try:
            self.set_value(key, value)
            return True
        except sqlite3.Error as e:
            logger.warning("Could not save '%s' to %s: %s", key, self.db_path, e)
            return False

    # ==================== Trades ====================

    def load_trades(self) -> Optional[list[Trade]]:
        """Load the saved trade collection.

        Returns:
            List of trades, or None if never saved or corrupted.
        """
        raw = self._read(TRADES_KEY)
        if raw is None:
            return None
        try:
            return _trade_list.validate_json(raw)
        except ValidationError as e:
            logger.warning("Could not parse saved trades: %s", e)
            return None

    def save_trades(self, trades: list[Trade]) -> bool:
        """Overwrite the saved trade collection.

        Args:
            trades: Trades to save.

        Returns:
            True if the write succeeded.
        """
        payload = _trade_list.dump_json(list(trades), by_alias=True).decode()
        return self._write(TRADES_KEY, payload)

    # ==================== Capital ====================

    def load_initial_capital(self) -> Optional[float]:
        """Load the saved initial capital.

        Returns:
            The capital, or None if never saved, corrupted or not a
            positive finite number.
        """
        raw = self._read(CAPITAL_KEY)
        if raw is None:
            return None
        try:
            value = json.loads(raw)
        except json.JSONDecodeError as e:
            logger.warning("Could not parse saved initial capital: %s", e)
            return None
        if (
            isinstance(value, bool)
            or not isinstance(value, (int, float))
            or not math.isfinite(value)
            or value <= 0
        ):
            logger.warning("Ignoring invalid saved initial capital: %r", value)
            return None
        return float(value)

    def save_initial_capital(self, value: float) -> bool:
        """Overwrite the saved initial capital.

        Args:
            value: Capital to save.

        Returns:
            True if the write succeeded.
        """
        return self._write(CAPITAL_KEY, json.dumps(value))

    # ==================== Session ====================

    def is_logged_in(self) -> bool:
        """Check the session flag set by login."""
        raw = self._read(SESSION_KEY)
        if raw is None:
            return False
        try:
            return json.loads(raw) is True
        except json.JSONDecodeError:
            return False

    def set_logged_in(self, logged_in: bool) -> bool:
        """Set or clear the session flag.

        Args:
            logged_in: New flag value.

        Returns:
            True if the write succeeded.
        """
        return self._write(SESSION_KEY, json.dumps(logged_in))

    # ==================== Trade log sort ====================

    def load_sort(self, default: Optional[SortSpec] = None) -> Optional[SortSpec]:
        """Load the last sort used in the trade log.

        Args:
            default: Sort to use when none was saved or it is corrupted.

        Returns:
            The saved SortSpec, None if the log was saved unsorted, or
            the default.
        """
        raw = self._read(SORT_KEY)
        if raw is None:
            return default
        try:
            data = json.loads(raw)
            return SortSpec.model_validate(data) if data is not None else None
        except (json.JSONDecodeError, ValidationError) as e:
            logger.warning("Could not parse saved sort: %s", e)
            return default

    def save_sort(self, sort_spec: Optional[SortSpec]) -> bool:
        """Save the trade log sort. None means original order.

        Args:
            sort_spec: Sort to save.

        Returns:
            True if the write succeeded.
        """
        payload = sort_spec.model_dump_json() if sort_spec is not None else "null"
        return self._write(SORT_KEY, payload)
