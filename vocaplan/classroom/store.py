"""
ScheduleStore - Persist lessons in ~/.vocaplan/lessons.db.

The store is the scheduling engine's persistence port: the planner never
touches storage itself, the application hands it a schedule to save and
asks for one back by lesson ID. Records are stored as plain JSON (word
set + schedule), so nothing but data crosses the boundary.
"""

import sqlite3
from datetime import datetime
from pathlib import Path
from typing import Optional

from vocaplan.schemas import LessonRecord, Schedule, WordSet
from vocaplan.settings import DEFAULT_LESSONS_DB


class ScheduleStore:
    """
    Store lesson records in a SQLite database.

    Each method opens its own connection, so one store instance can be
    shared between the UI thread and background work.
    """

    def __init__(self, db_path: Optional[Path] = None):
        """
        Initialize schedule store.

        Args:
            db_path: Path to lessons.db (default: ~/.vocaplan/lessons.db)
        """
        self.db_path = Path(db_path) if db_path else DEFAULT_LESSONS_DB
        self._ensure_database()

    def _ensure_database(self):
        """Create database and tables if they don't exist."""
        self.db_path.parent.mkdir(parents=True, exist_ok=True)

        conn = sqlite3.connect(str(self.db_path))
        try:
            conn.executescript("""
                CREATE TABLE IF NOT EXISTS lessons (
                    lesson_id TEXT PRIMARY KEY,
                    title TEXT NOT NULL DEFAULT '',
                    record_json TEXT NOT NULL,
                    day_count INTEGER NOT NULL,
                    word_count INTEGER NOT NULL,
                    confirmed_at TEXT,
                    updated_at TEXT NOT NULL
                );
            """)
            conn.commit()
        finally:
            conn.close()

    def _get_connection(self) -> sqlite3.Connection:
        """Get a new database connection."""
        conn = sqlite3.connect(str(self.db_path))
        conn.row_factory = sqlite3.Row
        return conn

    # -------------------------------------------------------------------------
    # Persistence port
    # -------------------------------------------------------------------------

    def save(
        self,
        lesson_id: str,
        schedule: Schedule,
        words: WordSet,
        title: str = "",
        confirmed_at: Optional[datetime] = None,
    ) -> LessonRecord:
        """Insert or replace a lesson record."""
        record = LessonRecord(
            lesson_id=lesson_id,
            title=title,
            words=words,
            schedule=schedule,
            confirmed_at=confirmed_at,
            updated_at=datetime.now(),
        )
        self.save_record(record)
        return record

    def save_record(self, record: LessonRecord):
        """Insert or replace a prepared lesson record."""
        conn = self._get_connection()
        try:
            updated_at = record.updated_at or datetime.now()
            conn.execute(
                """INSERT INTO lessons
                     (lesson_id, title, record_json, day_count, word_count, confirmed_at, updated_at)
                   VALUES (?, ?, ?, ?, ?, ?, ?)
                   ON CONFLICT(lesson_id) DO UPDATE SET
                     title = excluded.title,
                     record_json = excluded.record_json,
                     day_count = excluded.day_count,
                     word_count = excluded.word_count,
                     confirmed_at = excluded.confirmed_at,
                     updated_at = excluded.updated_at""",
                (
                    record.lesson_id,
                    record.title,
                    record.model_dump_json(),
                    record.schedule.day_count,
                    len(record.words),
                    record.confirmed_at.isoformat() if record.confirmed_at else None,
                    updated_at.isoformat(),
                )
            )
            conn.commit()
        finally:
            conn.close()

    def load(self, lesson_id: str) -> Optional[Schedule]:
        """Get the stored schedule for a lesson, or None."""
        record = self.load_record(lesson_id)
        return record.schedule if record else None

    def load_record(self, lesson_id: str) -> Optional[LessonRecord]:
        """Get the full stored record (word set + schedule) for a lesson."""
        conn = self._get_connection()
        try:
            cursor = conn.execute(
                "SELECT record_json FROM lessons WHERE lesson_id = ?", (lesson_id,)
            )
            row = cursor.fetchone()
            if not row:
                return None
            return LessonRecord.model_validate_json(row["record_json"])
        finally:
            conn.close()

    def delete(self, lesson_id: str) -> bool:
        """Delete a lesson. Returns True if a record was removed."""
        conn = self._get_connection()
        try:
            cursor = conn.execute("DELETE FROM lessons WHERE lesson_id = ?", (lesson_id,))
            conn.commit()
            return cursor.rowcount > 0
        finally:
            conn.close()

    # -------------------------------------------------------------------------
    # Listing
    # -------------------------------------------------------------------------

    def list_lessons(self) -> list[dict]:
        """Lightweight lesson summaries, most recently updated first."""
        conn = self._get_connection()
        try:
            cursor = conn.execute(
                """SELECT lesson_id, title, day_count, word_count, confirmed_at, updated_at
                   FROM lessons ORDER BY updated_at DESC, lesson_id"""
            )
            return [
                {
                    "lesson_id": row["lesson_id"],
                    "title": row["title"],
                    "day_count": row["day_count"],
                    "word_count": row["word_count"],
                    "confirmed": row["confirmed_at"] is not None,
                    "updated_at": datetime.fromisoformat(row["updated_at"]),
                }
                for row in cursor.fetchall()
            ]
        finally:
            conn.close()
