# src/mockgen/commands/submit.py
"""Submit command - score answers for a stored session."""

from __future__ import annotations

from pathlib import Path

from mockgen.commands.base import SubmitResult
from mockgen.config import open_store
from mockgen.models import StoredQuestion
from mockgen.scoring import score_answers


def resolve_answers(
    questions: list[StoredQuestion],
    answers: dict[str, str | None],
) -> tuple[dict[str, str | None], list[str]]:
    """Map answer keys to question IDs.

    Keys may be question IDs or 1-based question numbers ("3").

    Returns:
        Tuple of (answers keyed by question ID, keys that matched nothing)
    """
    by_id = {q.id: q for q in questions}
    by_index = {str(q.index_in_session): q for q in questions}

    resolved: dict[str, str | None] = {}
    ignored: list[str] = []
    for key, selection in answers.items():
        key = str(key).strip()
        question = by_id.get(key) or by_index.get(key)
        if question is None:
            ignored.append(key)
            continue
        resolved[question.id] = selection
    return resolved, ignored


def submit(
    session_id: str,
    answers: dict[str, str | None],
    data_dir: str | None = None,
    config_path: str | Path | None = None,
) -> SubmitResult:
    """Score answers for a session and store them.

    Submitting again replaces earlier answers to the same questions.

    Args:
        session_id: ID of the session being answered
        answers: Mapping of question ID or number to selected letter (A-D)
        data_dir: Override data directory
        config_path: Override config file path

    Returns:
        SubmitResult with the score
    """
    try:
        store = open_store(data_dir, config_path)
    except Exception as e:
        return SubmitResult(
            success=False, session_id=session_id, error=f"Failed to access database: {e}"
        )
    if store is None:
        return SubmitResult(success=False, session_id=session_id, error="No database found.")

    if store.get_session(session_id) is None:
        return SubmitResult(
            success=False, session_id=session_id, error=f"Session not found: {session_id}"
        )

    questions = store.get_questions(session_id)
    resolved, ignored = resolve_answers(questions, answers)
    score, records = score_answers(session_id, questions, resolved)
    store.save_answers(records)

    return SubmitResult(
        success=True,
        session_id=session_id,
        total=score.total,
        attempted=score.attempted,
        correct=score.correct,
        score_percent=score.score_percent,
        ignored=ignored,
    )
