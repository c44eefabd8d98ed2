# src/mockgen/commands/sessions.py
"""Sessions commands - list stored sessions and show one.

This module provides the read-only session logic that the CLI uses.
"""

from __future__ import annotations

from pathlib import Path

from mockgen.commands.base import (
    ListSessionsResult,
    QuestionView,
    SessionSummary,
    ShowSessionResult,
)
from mockgen.config import open_store
from mockgen.models import TestSession


def _summarize(session: TestSession, answered: int = 0) -> SessionSummary:
    return SessionSummary(
        session_id=session.id,
        exam_type=session.exam_type,
        difficulty=session.difficulty,
        session_type=session.session_type,
        medium=session.medium,
        num_questions=session.num_questions,
        requested_questions=session.requested_questions,
        duration_minutes=session.duration_minutes,
        created_at=session.created_at,
        answered=answered,
    )


def list_sessions(
    data_dir: str | None = None,
    config_path: str | Path | None = None,
    limit: int | None = None,
) -> ListSessionsResult:
    """List stored sessions, newest first.

    Args:
        data_dir: Override data directory
        config_path: Override config file path
        limit: Maximum number of sessions to return

    Returns:
        ListSessionsResult with session summaries
    """
    try:
        store = open_store(data_dir, config_path)
    except Exception as e:
        return ListSessionsResult(success=False, error=f"Failed to access database: {e}")
    if store is None:
        return ListSessionsResult(success=True)

    result = ListSessionsResult(success=True, total=store.count_sessions())
    for session in store.list_sessions(limit=limit):
        result.sessions.append(_summarize(session, len(store.get_answers(session.id))))
    return result


def show_session(
    session_id: str,
    data_dir: str | None = None,
    config_path: str | Path | None = None,
) -> ShowSessionResult:
    """Show a stored session with its questions and any saved answers.

    Args:
        session_id: ID of the session to show
        data_dir: Override data directory
        config_path: Override config file path

    Returns:
        ShowSessionResult with the session and its questions in index order
    """
    try:
        store = open_store(data_dir, config_path)
    except Exception as e:
        return ShowSessionResult(success=False, error=f"Failed to access database: {e}")
    if store is None:
        return ShowSessionResult(success=False, error="No database found.")

    session = store.get_session(session_id)
    if session is None:
        return ShowSessionResult(success=False, error=f"Session not found: {session_id}")

    selections = {a.question_id: a.selected_option for a in store.get_answers(session_id)}
    questions = [
        QuestionView(
            index=q.index_in_session,
            question_id=q.id,
            topic=q.topic,
            difficulty=q.difficulty,
            text=q.question_text,
            options=q.options,
            correct_option=q.correct_option,
            explanation=q.explanation,
            selected_option=selections.get(q.id),
        )
        for q in store.get_questions(session_id)
    ]
    return ShowSessionResult(
        success=True,
        session=_summarize(session, len(selections)),
        questions=questions,
    )
