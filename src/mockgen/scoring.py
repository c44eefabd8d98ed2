# src/mockgen/scoring.py
"""Scoring of submitted answers."""

import math

from mockgen.models import AnswerRecord, QuestionScore, SessionScore, StoredQuestion


def normalize_selection(value: str | None) -> str | None:
    """Uppercase a selected letter; blank selections become None."""
    if value is None:
        return None
    value = value.strip().upper()
    return value or None


def score_answers(
    session_id: str,
    questions: list[StoredQuestion],
    answers: dict[str, str | None],
) -> tuple[SessionScore, list[AnswerRecord]]:
    """Score a set of answers against a session's questions.

    Args:
        session_id: The session being scored.
        questions: All questions of the session.
        answers: Mapping of question ID to selected letter. Unknown IDs are
                 ignored; None or blank means unanswered.

    Returns:
        Tuple of (score, answer records to persist). Only answered
        questions produce records.
    """
    records: list[AnswerRecord] = []
    breakdown: list[QuestionScore] = []
    correct = 0

    for question in sorted(questions, key=lambda q: q.index_in_session):
        selected = normalize_selection(answers.get(question.id))
        is_correct = selected is not None and selected == question.correct_option
        if selected is not None:
            records.append(
                AnswerRecord(
                    session_id=session_id,
                    question_id=question.id,
                    selected_option=selected,
                    is_correct=is_correct,
                )
            )
        if is_correct:
            correct += 1
        breakdown.append(
            QuestionScore(
                question_id=question.id,
                index_in_session=question.index_in_session,
                selected_option=selected,
                correct_option=question.correct_option,
                is_correct=is_correct,
            )
        )

    total = len(questions)
    score = SessionScore(
        session_id=session_id,
        total=total,
        attempted=len(records),
        correct=correct,
        score_percent=math.floor(100 * correct / total + 0.5) if total else 0,
        breakdown=breakdown,
    )
    return score, records
