# src/mockgen/stores/sqlite_session.py
"""SQLite session store implementation."""

import sqlite3
from datetime import datetime
from pathlib import Path

from mockgen.models import AnswerRecord, QuestionCandidate, StoredQuestion, TestSession
from mockgen.stores.base import SessionStore

QUESTION_COLUMNS = (
    "id, session_id, index_in_session, exam_type, topic, difficulty, question_text, "
    "option_a, option_b, option_c, option_d, correct_option, explanation"
)
SESSION_COLUMNS = (
    "id, exam_type, difficulty, session_type, medium, num_questions, "
    "requested_questions, duration_minutes, created_at"
)


def _row_to_session(row: tuple) -> TestSession:
    return TestSession(
        id=row[0],
        exam_type=row[1],
        difficulty=row[2],
        session_type=row[3],
        medium=row[4],
        num_questions=row[5],
        requested_questions=row[6],
        duration_minutes=row[7],
        created_at=datetime.fromisoformat(row[8]),
    )


def _row_to_question(row: tuple) -> StoredQuestion:
    return StoredQuestion(
        id=row[0],
        session_id=row[1],
        index_in_session=row[2],
        exam_type=row[3],
        topic=row[4],
        difficulty=row[5],
        question_text=row[6],
        option_a=row[7],
        option_b=row[8],
        option_c=row[9],
        option_d=row[10],
        correct_option=row[11],
        explanation=row[12],
    )


class SQLiteSessionStore(SessionStore):
    """SQLite-based store for sessions, questions and answers."""

    def __init__(self, db_path: str) -> None:
        """Initialize the SQLite session store."""
        self.db_path = db_path
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)
        self._init_db()

    def _init_db(self) -> None:
        """Create tables if they don't exist."""
        with sqlite3.connect(self.db_path) as conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS sessions (
                    id TEXT PRIMARY KEY,
                    exam_type TEXT NOT NULL,
                    difficulty TEXT NOT NULL,
                    session_type TEXT NOT NULL,
                    medium TEXT NOT NULL,
                    num_questions INTEGER DEFAULT 0,
                    requested_questions INTEGER DEFAULT 0,
                    duration_minutes INTEGER DEFAULT 60,
                    created_at TEXT NOT NULL
                )
            """)
            conn.execute("""
                CREATE TABLE IF NOT EXISTS questions (
                    id TEXT PRIMARY KEY,
                    session_id TEXT NOT NULL,
                    index_in_session INTEGER NOT NULL,
                    exam_type TEXT NOT NULL,
                    topic TEXT NOT NULL,
                    difficulty TEXT NOT NULL,
                    question_text TEXT NOT NULL,
                    option_a TEXT NOT NULL,
                    option_b TEXT NOT NULL,
                    option_c TEXT DEFAULT '',
                    option_d TEXT DEFAULT '',
                    correct_option TEXT NOT NULL,
                    explanation TEXT DEFAULT '',
                    UNIQUE (session_id, index_in_session)
                )
            """)
            conn.execute("""
                CREATE TABLE IF NOT EXISTS answers (
                    session_id TEXT NOT NULL,
                    question_id TEXT NOT NULL,
                    selected_option TEXT,
                    is_correct INTEGER NOT NULL,
                    PRIMARY KEY (session_id, question_id)
                )
            """)
            conn.execute("CREATE INDEX IF NOT EXISTS idx_question_session ON questions(session_id)")
            conn.commit()

    def create_session(self, session: TestSession) -> TestSession:
        """Store a new session."""
        with sqlite3.connect(self.db_path) as conn:
            conn.execute(
                f"INSERT INTO sessions ({SESSION_COLUMNS}) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)",
                (
                    session.id,
                    session.exam_type,
                    session.difficulty,
                    session.session_type,
                    session.medium,
                    session.num_questions,
                    session.requested_questions,
                    session.duration_minutes,
                    session.created_at.isoformat(),
                ),
            )
            conn.commit()
        return session

    def get_session(self, session_id: str) -> TestSession | None:
        """Retrieve a session by ID."""
        with sqlite3.connect(self.db_path) as conn:
            cursor = conn.execute(
                f"SELECT {SESSION_COLUMNS} FROM sessions WHERE id = ?",
                (session_id,),
            )
            row = cursor.fetchone()
            return _row_to_session(row) if row else None

    def list_sessions(self, limit: int | None = None) -> list[TestSession]:
        """List sessions, newest first."""
        query = f"SELECT {SESSION_COLUMNS} FROM sessions ORDER BY created_at DESC"
        params: tuple = ()
        if limit is not None:
            query += " LIMIT ?"
            params = (limit,)
        with sqlite3.connect(self.db_path) as conn:
            cursor = conn.execute(query, params)
            return [_row_to_session(row) for row in cursor.fetchall()]

    def count_sessions(self) -> int:
        """Count the total number of sessions in the store."""
        with sqlite3.connect(self.db_path) as conn:
            cursor = conn.execute("SELECT COUNT(id) FROM sessions")
            count = cursor.fetchone()
            return count[0] if count else 0

    def delete_session(self, session_id: str) -> None:
        """Delete a session with its questions and answers."""
        with sqlite3.connect(self.db_path) as conn:
            conn.execute("DELETE FROM answers WHERE session_id = ?", (session_id,))
            conn.execute("DELETE FROM questions WHERE session_id = ?", (session_id,))
            conn.execute("DELETE FROM sessions WHERE id = ?", (session_id,))
            conn.commit()

    def add_questions(
        self, session_id: str, questions: list[QuestionCandidate]
    ) -> list[StoredQuestion]:
        """Append questions after the session's current last index."""
        if not questions:
            return []
        with sqlite3.connect(self.db_path) as conn:
            cursor = conn.execute(
                "SELECT COALESCE(MAX(index_in_session), 0) FROM questions WHERE session_id = ?",
                (session_id,),
            )
            start = cursor.fetchone()[0] + 1
            stored = [
                StoredQuestion(
                    session_id=session_id,
                    index_in_session=start + offset,
                    **question.model_dump(),
                )
                for offset, question in enumerate(questions)
            ]
            conn.executemany(
                f"INSERT INTO questions ({QUESTION_COLUMNS}) "
                "VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)",
                [
                    (
                        q.id,
                        q.session_id,
                        q.index_in_session,
                        q.exam_type,
                        q.topic,
                        q.difficulty,
                        q.question_text,
                        q.option_a,
                        q.option_b,
                        q.option_c,
                        q.option_d,
                        q.correct_option,
                        q.explanation,
                    )
                    for q in stored
                ],
            )
            conn.execute(
                "UPDATE sessions SET num_questions = "
                "(SELECT COUNT(id) FROM questions WHERE session_id = ?) WHERE id = ?",
                (session_id, session_id),
            )
            conn.commit()
        return stored

    def get_questions(self, session_id: str) -> list[StoredQuestion]:
        """Get all questions of a session, ordered by index."""
        with sqlite3.connect(self.db_path) as conn:
            cursor = conn.execute(
                f"SELECT {QUESTION_COLUMNS} FROM questions "
                "WHERE session_id = ? ORDER BY index_in_session",
                (session_id,),
            )
            return [_row_to_question(row) for row in cursor.fetchall()]

    def get_question_by_index(self, session_id: str, index: int) -> StoredQuestion | None:
        """Get one question by its 1-based index."""
        with sqlite3.connect(self.db_path) as conn:
            cursor = conn.execute(
                f"SELECT {QUESTION_COLUMNS} FROM questions "
                "WHERE session_id = ? AND index_in_session = ?",
                (session_id, index),
            )
            row = cursor.fetchone()
            return _row_to_question(row) if row else None

    def save_answers(self, answers: list[AnswerRecord]) -> None:
        """Store answers, replacing earlier answers to the same question."""
        if not answers:
            return
        with sqlite3.connect(self.db_path) as conn:
            conn.executemany(
                """
                INSERT OR REPLACE INTO answers
                    (session_id, question_id, selected_option, is_correct)
                VALUES (?, ?, ?, ?)
                """,
                [
                    (a.session_id, a.question_id, a.selected_option, int(a.is_correct))
                    for a in answers
                ],
            )
            conn.commit()

    def get_answers(self, session_id: str) -> list[AnswerRecord]:
        """Get all stored answers of a session."""
        with sqlite3.connect(self.db_path) as conn:
            cursor = conn.execute(
                "SELECT session_id, question_id, selected_option, is_correct "
                "FROM answers WHERE session_id = ?",
                (session_id,),
            )
            return [
                AnswerRecord(
                    session_id=row[0],
                    question_id=row[1],
                    selected_option=row[2],
                    is_correct=bool(row[3]),
                )
                for row in cursor.fetchall()
            ]
