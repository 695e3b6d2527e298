"""
ProgressTracker - Track student progress in ~/.vocaplan/progress.db.

Stores student progress separately from lesson content:
- Day completion status per lesson
- Resume position inside a day's activity sequence
- Current day per lesson
"""

import sqlite3
from datetime import datetime
from pathlib import Path
from typing import Optional

from vocaplan.schemas import DayStatus, DayProgress, StudentProgress
from vocaplan.settings import DEFAULT_PROGRESS_DB


class ProgressTracker:
    """
    Track student progress in SQLite database.

    Progress is stored separately from lessons (lessons.db) so that:
    - A lesson can be re-assigned without losing progress on other lessons
    - Progress is student-specific, lessons are shared
    """

    def __init__(self, db_path: Optional[Path] = None, student_id: str = "default"):
        """
        Initialize progress tracker.

        Args:
            db_path: Path to progress.db (default: ~/.vocaplan/progress.db)
            student_id: Student identifier for shared devices
        """
        self.db_path = Path(db_path) if db_path else DEFAULT_PROGRESS_DB
        self.student_id = student_id
        self._ensure_database()

    def _ensure_database(self):
        """Create database and tables if they don't exist."""
        self.db_path.parent.mkdir(parents=True, exist_ok=True)

        conn = sqlite3.connect(str(self.db_path))
        try:
            conn.executescript("""
                CREATE TABLE IF NOT EXISTS day_progress (
                    student_id TEXT NOT NULL,
                    lesson_id TEXT NOT NULL,
                    day_index INTEGER NOT NULL,
                    status TEXT NOT NULL DEFAULT 'not_started',
                    position INTEGER NOT NULL DEFAULT 0,
                    started_at TEXT,
                    completed_at TEXT,
                    PRIMARY KEY (student_id, lesson_id, day_index)
                );

                CREATE TABLE IF NOT EXISTS lesson_state (
                    student_id TEXT NOT NULL,
                    lesson_id TEXT NOT NULL,
                    current_day_index INTEGER,
                    last_activity_at TEXT,
                    PRIMARY KEY (student_id, lesson_id)
                );

                CREATE INDEX IF NOT EXISTS idx_day_progress_lesson
                ON day_progress(student_id, lesson_id);
            """)
            conn.commit()
        finally:
            conn.close()

    def _get_connection(self) -> sqlite3.Connection:
        """Get a new database connection."""
        conn = sqlite3.connect(str(self.db_path))
        conn.row_factory = sqlite3.Row
        return conn

    @staticmethod
    def _row_to_progress(row: sqlite3.Row) -> DayProgress:
        return DayProgress(
            lesson_id=row["lesson_id"],
            day_index=row["day_index"],
            status=DayStatus(row["status"]),
            position=row["position"],
            started_at=datetime.fromisoformat(row["started_at"]) if row["started_at"] else None,
            completed_at=datetime.fromisoformat(row["completed_at"]) if row["completed_at"] else None,
        )

    def _touch_lesson(self, conn: sqlite3.Connection, lesson_id: str, day_index: int, now: str):
        conn.execute(
            """INSERT INTO lesson_state (student_id, lesson_id, current_day_index, last_activity_at)
               VALUES (?, ?, ?, ?)
               ON CONFLICT(student_id, lesson_id) DO UPDATE SET
                 current_day_index = ?,
                 last_activity_at = ?""",
            (self.student_id, lesson_id, day_index, now, day_index, now)
        )

    # -------------------------------------------------------------------------
    # Day Progress
    # -------------------------------------------------------------------------

    def get_day_progress(self, lesson_id: str, day_index: int) -> DayProgress:
        """Get progress for one day of a lesson."""
        conn = self._get_connection()
        try:
            cursor = conn.execute(
                """SELECT lesson_id, day_index, status, position, started_at, completed_at
                   FROM day_progress
                   WHERE student_id = ? AND lesson_id = ? AND day_index = ?""",
                (self.student_id, lesson_id, day_index)
            )
            row = cursor.fetchone()
            if not row:
                return DayProgress(lesson_id=lesson_id, day_index=day_index)
            return self._row_to_progress(row)
        finally:
            conn.close()

    def get_all_day_progress(self, lesson_id: str) -> dict[int, DayProgress]:
        """Get progress for every recorded day of a lesson."""
        conn = self._get_connection()
        try:
            cursor = conn.execute(
                """SELECT lesson_id, day_index, status, position, started_at, completed_at
                   FROM day_progress
                   WHERE student_id = ? AND lesson_id = ?
                   ORDER BY day_index""",
                (self.student_id, lesson_id)
            )
            return {row["day_index"]: self._row_to_progress(row) for row in cursor.fetchall()}
        finally:
            conn.close()

    def start_day(self, lesson_id: str, day_index: int):
        """Mark a day as started (in progress); keeps an existing resume position."""
        conn = self._get_connection()
        try:
            now = datetime.now().isoformat()
            conn.execute(
                """INSERT INTO day_progress (student_id, lesson_id, day_index, status, started_at)
                   VALUES (?, ?, ?, ?, ?)
                   ON CONFLICT(student_id, lesson_id, day_index) DO UPDATE SET
                     status = CASE
                       WHEN status = 'not_started' THEN 'in_progress'
                       ELSE status
                     END,
                     started_at = CASE
                       WHEN started_at IS NULL THEN ?
                       ELSE started_at
                     END""",
                (self.student_id, lesson_id, day_index, DayStatus.IN_PROGRESS.value, now, now)
            )
            self._touch_lesson(conn, lesson_id, day_index, now)
            conn.commit()
        finally:
            conn.close()

    def set_position(self, lesson_id: str, day_index: int, position: int):
        """Record the next activity to play for a day."""
        if position < 0:
            raise ValueError(f"position must be >= 0, got {position}")
        conn = self._get_connection()
        try:
            now = datetime.now().isoformat()
            conn.execute(
                """INSERT INTO day_progress (student_id, lesson_id, day_index, status, position, started_at)
                   VALUES (?, ?, ?, ?, ?, ?)
                   ON CONFLICT(student_id, lesson_id, day_index) DO UPDATE SET
                     position = ?""",
                (self.student_id, lesson_id, day_index, DayStatus.IN_PROGRESS.value, position, now, position)
            )
            self._touch_lesson(conn, lesson_id, day_index, now)
            conn.commit()
        finally:
            conn.close()

    def complete_day(self, lesson_id: str, day_index: int):
        """Mark a day as completed."""
        conn = self._get_connection()
        try:
            now = datetime.now().isoformat()
            conn.execute(
                """INSERT INTO day_progress (student_id, lesson_id, day_index, status, completed_at)
                   VALUES (?, ?, ?, ?, ?)
                   ON CONFLICT(student_id, lesson_id, day_index) DO UPDATE SET
                     status = 'completed',
                     completed_at = ?""",
                (self.student_id, lesson_id, day_index, DayStatus.COMPLETED.value, now, now)
            )
            conn.execute(
                """UPDATE lesson_state SET last_activity_at = ?
                   WHERE student_id = ? AND lesson_id = ?""",
                (now, self.student_id, lesson_id)
            )
            conn.commit()
        finally:
            conn.close()

    def reset_day(self, lesson_id: str, day_index: int):
        """Reset a day to not started."""
        conn = self._get_connection()
        try:
            conn.execute(
                """DELETE FROM day_progress
                   WHERE student_id = ? AND lesson_id = ? AND day_index = ?""",
                (self.student_id, lesson_id, day_index)
            )
            conn.commit()
        finally:
            conn.close()

    def is_day_completed(self, lesson_id: str, day_index: int) -> bool:
        """Check if a day is completed."""
        return self.get_day_progress(lesson_id, day_index).status == DayStatus.COMPLETED

    def get_completed_days(self, lesson_id: str) -> set[int]:
        """Get set of completed day indices for a lesson."""
        conn = self._get_connection()
        try:
            cursor = conn.execute(
                """SELECT day_index FROM day_progress
                   WHERE student_id = ? AND lesson_id = ? AND status = 'completed'""",
                (self.student_id, lesson_id)
            )
            return {row["day_index"] for row in cursor.fetchall()}
        finally:
            conn.close()

    # -------------------------------------------------------------------------
    # Lesson State
    # -------------------------------------------------------------------------

    def get_current_day_index(self, lesson_id: str) -> Optional[int]:
        """Get the day the student last worked on."""
        conn = self._get_connection()
        try:
            cursor = conn.execute(
                """SELECT current_day_index FROM lesson_state
                   WHERE student_id = ? AND lesson_id = ?""",
                (self.student_id, lesson_id)
            )
            row = cursor.fetchone()
            return row["current_day_index"] if row else None
        finally:
            conn.close()

    def get_student_progress(self, lesson_id: str) -> StudentProgress:
        """Get full progress object for one lesson."""
        return StudentProgress(
            student_id=self.student_id,
            lesson_id=lesson_id,
            days=self.get_all_day_progress(lesson_id),
            current_day_index=self.get_current_day_index(lesson_id),
        )

    # -------------------------------------------------------------------------
    # Statistics
    # -------------------------------------------------------------------------

    def get_completion_stats(self, lesson_id: str, total_days: int) -> dict:
        """
        Get completion statistics for a lesson.

        Args:
            lesson_id: Lesson to summarize
            total_days: Number of days in the lesson's schedule

        Returns:
            Dictionary with completion stats
        """
        all_progress = self.get_all_day_progress(lesson_id)
        completed = sum(1 for p in all_progress.values() if p.status == DayStatus.COMPLETED)
        in_progress = sum(1 for p in all_progress.values() if p.status == DayStatus.IN_PROGRESS)

        return {
            "total_days": total_days,
            "completed": completed,
            "in_progress": in_progress,
            "not_started": total_days - completed - in_progress,
            "completion_percent": round(completed / total_days * 100, 1) if total_days > 0 else 0,
        }

    def reset_lesson(self, lesson_id: str):
        """Reset all progress on one lesson for the current student."""
        conn = self._get_connection()
        try:
            conn.execute(
                "DELETE FROM day_progress WHERE student_id = ? AND lesson_id = ?",
                (self.student_id, lesson_id)
            )
            conn.execute(
                "DELETE FROM lesson_state WHERE student_id = ? AND lesson_id = ?",
                (self.student_id, lesson_id)
            )
            conn.commit()
        finally:
            conn.close()
