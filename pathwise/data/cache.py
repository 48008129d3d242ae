"""SQLite-backed cache for the last saved portfolio and the cache toggle.

A key-value store: the portfolio is kept in its export JSON form. Storage
or parse failures are logged and treated as "nothing cached".
"""

import logging
import sqlite3
from datetime import datetime, timezone
from pathlib import Path

from pathwise.config import settings
from pathwise.data.portfolio_io import PortfolioImportError, export_to_json, import_from_json
from pathwise.models.investment import Investment
from pathwise.models.loan import Loan

logger = logging.getLogger(__name__)

CACHE_KEY_DATA = "pathwise-cached-data"
CACHE_KEY_ENABLED = "pathwise-cache-enabled"


class PortfolioCache:
    def __init__(self, db_path: str | None = None):
        self.db_path = db_path or settings.cache_db_path
        try:
            Path(self.db_path).parent.mkdir(parents=True, exist_ok=True)
            self._ensure_tables()
        except (OSError, sqlite3.Error) as e:
            logger.error("Error opening cache at %s: %s", self.db_path, e)

    def _connect(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = sqlite3.Row
        return conn

    def _ensure_tables(self) -> None:
        with self._connect() as conn:
            conn.executescript("""
                CREATE TABLE IF NOT EXISTS kv_store (
                    cache_key TEXT PRIMARY KEY,
                    value TEXT,
                    saved_at TIMESTAMP
                );
            """)

    def _get(self, key: str) -> str | None:
        with self._connect() as conn:
            row = conn.execute(
                "SELECT value FROM kv_store WHERE cache_key = ?", (key,)
            ).fetchone()
        return row["value"] if row else None

    def _set(self, key: str, value: str) -> None:
        now = datetime.now(timezone.utc).isoformat()
        with self._connect() as conn:
            conn.execute(
                "INSERT OR REPLACE INTO kv_store (cache_key, value, saved_at) VALUES (?, ?, ?)",
                (key, value, now),
            )

    def save(self, loans: list[Loan], investments: list[Investment]) -> None:
        """Store loans and investments, replacing whatever was cached."""
        try:
            self._set(CACHE_KEY_DATA, export_to_json(loans, investments))
        except sqlite3.Error as e:
            logger.error("Error saving to cache: %s", e)

    def load(self) -> tuple[list[Loan], list[Investment]] | None:
        """Return cached loans and investments, or None if missing/unreadable."""
        try:
            cached = self._get(CACHE_KEY_DATA)
            if not cached:
                return None
            return import_from_json(cached)
        except (sqlite3.Error, PortfolioImportError) as e:
            logger.error("Error loading from cache: %s", e)
            return None

    def clear(self) -> None:
        try:
            with self._connect() as conn:
                conn.execute("DELETE FROM kv_store WHERE cache_key = ?", (CACHE_KEY_DATA,))
        except sqlite3.Error as e:
            logger.error("Error clearing cache: %s", e)

    def save_enabled(self, enabled: bool) -> None:
        try:
            self._set(CACHE_KEY_ENABLED, "true" if enabled else "false")
        except sqlite3.Error as e:
            logger.error("Error saving cache enabled setting: %s", e)

    def load_enabled(self) -> bool:
        """Whether caching is switched on (False unless saved as on)."""
        try:
            return self._get(CACHE_KEY_ENABLED) == "true"
        except sqlite3.Error as e:
            logger.error("Error loading cache enabled setting: %s", e)
            return False
