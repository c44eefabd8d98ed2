"""UI-agnostic command layer for mockgen.

This module provides command functions that the CLI (or any other UI) can
call. Commands return data structures, allowing UIs to render results
appropriately.

Usage:
    from mockgen.commands import generate, sessions, submit

    # Generate a new session
    result = generate.generate("SSC CGL", ["Algebra"], num_questions=10)

    # List sessions
    result = sessions.list_sessions()

    # Score answers
    result = submit.submit(session_id, {"1": "A", "2": "C"})
"""

from mockgen.commands import config_cmd, generate, sessions, submit
from mockgen.commands.base import (
    CommandResult,
    CommandStage,
    ConfigResult,
    GenerateResult,
    ListSessionsResult,
    ProgressCallback,
    ProgressUpdate,
    QuestionView,
    SessionSummary,
    SettingInfo,
    ShowSessionResult,
    SubmitResult,
)

__all__ = [
    # Base types
    "CommandStage",
    "ProgressUpdate",
    "ProgressCallback",
    "CommandResult",
    # Result types
    "GenerateResult",
    "ListSessionsResult",
    "SessionSummary",
    "ShowSessionResult",
    "QuestionView",
    "SubmitResult",
    "ConfigResult",
    "SettingInfo",
    # Command modules
    "generate",
    "sessions",
    "submit",
    "config_cmd",
]
