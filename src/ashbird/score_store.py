"""
score_store.py: Durable high score persistence.
"""

import logging
import sqlite3
from typing import Dict, Optional, Protocol

from .constants import SCORE_DB_FILE, HIGH_SCORE_KEY

logger = logging.getLogger(__name__)


class ScoreStore(Protocol):
    """A single durable integer. get() returns None when nothing is stored."""

    def get(self) -> Optional[int]:
        ...

    def set(self, value: int) -> bool:
        ...


class SqliteScoreStore:
    """Keeps the high score in a small SQLite key-value table."""

    def __init__(self, db_file: str = SCORE_DB_FILE, key: str = HIGH_SCORE_KEY):
        # check_same_thread=False lets the driver and an input thread share it
        self.conn = sqlite3.connect(db_file, check_same_thread=False)
        self.cur = self.conn.cursor()
        self.key = key
        self.setup()

    def setup(self):
        """Creates the table if it doesn't exist."""
        self.cur.execute("""
            CREATE TABLE IF NOT EXISTS Scores (
                key TEXT PRIMARY KEY,
                best INTEGER DEFAULT 0
            )
        """)
        self.conn.commit()

    def get(self) -> Optional[int]:
        """Fetches the stored value as-is. Validation is the caller's job."""
        try:
            self.cur.execute("SELECT best FROM Scores WHERE key=?", (self.key,))
            row = self.cur.fetchone()
        except sqlite3.Error as e:
            logger.warning("Could not read high score: %s", e)
            return None
        return row[0] if row else None

    def set(self, value: int) -> bool:
        """Stores value, returning False instead of raising on failure."""
        try:
            self.cur.execute(
                "INSERT OR REPLACE INTO Scores (key, best) VALUES (?, ?)", (self.key, int(value)))
            self.conn.commit()
            return True
        except sqlite3.Error as e:
            logger.warning("Could not persist high score %s: %s", value, e)
            return False

    def close(self):
        self.conn.close()


class MemoryScoreStore:
    """Volatile store for tests and throwaway sessions."""

    def __init__(self, initial: Optional[int] = None):
        self.values: Dict[str, Optional[int]] = {HIGH_SCORE_KEY: initial}

    def get(self) -> Optional[int]:
        return self.values.get(HIGH_SCORE_KEY)

    def set(self, value: int) -> bool:
        self.values[HIGH_SCORE_KEY] = value
        return True
