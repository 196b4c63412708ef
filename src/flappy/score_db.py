"""
score_db.py: Persistence layer for the best score.
"""

import logging
import sqlite3

from .constants import DB_FILE, BEST_SCORE_KEY

logger = logging.getLogger(__name__)


class ScoreDatabase:
    """
    Stores a single best-score integer in SQLite, keyed by a fixed name.
    Failures are logged and ignored: losing a best score never ends a session.
    """
    def __init__(self, db_file: str = DB_FILE, key: str = BEST_SCORE_KEY):
        self.key = key
        try:
            self.conn = sqlite3.connect(db_file)
            self.cur = self.conn.cursor()
            self.setup()
        except sqlite3.Error as e:
            # Keep the session going; the best score just won't outlive it.
            logger.warning("Could not open score database %r, scores won't be saved: %s", db_file, e)
            if getattr(self, "conn", None) is not None:
                self.conn.close()
            self.conn = sqlite3.connect(":memory:")
            self.cur = self.conn.cursor()
            self.setup()

    def setup(self):
        """Creates the table if it doesn't exist."""
        self.cur.execute("""
            CREATE TABLE IF NOT EXISTS Scores (
                key TEXT PRIMARY KEY,
                value TEXT
            )
        """)
        self.conn.commit()

    def get_best(self) -> int:
        """Returns the stored best score, or 0 when absent or unreadable."""
        try:
            self.cur.execute("SELECT value FROM Scores WHERE key=?", (self.key,))
            row = self.cur.fetchone()
        except sqlite3.Error as e:
            logger.warning("Could not read best score: %s", e)
            return 0

        if row is None:
            return 0
        try:
            return max(int(row[0]), 0)
        except (TypeError, ValueError):
            logger.warning("Ignoring malformed best score %r", row[0])
            return 0

    def set_best(self, value: int):
        try:
            self.cur.execute(
                "INSERT OR REPLACE INTO Scores (key, value) VALUES (?, ?)",
                (self.key, str(int(value))))
            self.conn.commit()
        except sqlite3.Error as e:
            logger.warning("Could not persist best score %d: %s", value, e)

    def close(self):
        self.conn.close()


class MemoryScoreStore:
    """Same interface as ScoreDatabase, kept in memory. Chosen when no database file is given."""
    def __init__(self, best: int = 0):
        self.best = best

    def get_best(self) -> int:
        return self.best

    def set_best(self, value: int):
        self.best = value

    def close(self):
        pass


def open_store(db_file: str):
    """An empty path means play without saving."""
    if not db_file:
        logger.info("No score database given, best score kept in memory")
        return MemoryScoreStore()
    return ScoreDatabase(db_file)
