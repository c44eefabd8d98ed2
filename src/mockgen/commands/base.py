# src/mockgen/commands/base.py
"""Base types for the commands layer.

This module defines the data structures used by all commands:
- Progress callbacks for long-running operations
- Result types for each command
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class CommandStage(Enum):
    """Stages of command execution for progress reporting."""

    # Generation stages
    PLANNING = "Planning"
    GENERATING = "Generating"
    FILLING = "Filling"

    # General stages
    LOADING = "Loading"
    PROCESSING = "Processing"
    COMPLETE = "Complete"


@dataclass
class ProgressUpdate:
    """Progress update for long-running operations.

    Attributes:
        stage: Current stage of the operation
        current: Current item number (1-indexed)
        total: Total number of items (0 for indeterminate)
        message: Optional status message
    """

    stage: CommandStage
    current: int
    total: int
    message: str | None = None

    @property
    def is_indeterminate(self) -> bool:
        """True if progress is indeterminate (total unknown)."""
        return self.total == 0

    @property
    def percentage(self) -> int:
        """Progress as percentage (0-100). Returns 0 if indeterminate."""
        if self.total == 0:
            return 0
        return int(100 * self.current / self.total)


# Callback type for progress updates
ProgressCallback = Callable[[ProgressUpdate], None]


@dataclass
class CommandResult:
    """Base result type for commands."""

    success: bool
    error: str | None = None


@dataclass
class GenerateResult(CommandResult):
    """Result of the generate command.

    Attributes:
        session_id: ID of the stored session (empty on failure)
        exam_type: Exam the questions were generated for
        requested: Number of questions requested
        generated: Number of questions stored
        shortfall: requested - generated
        fill_iterations: Fill rounds needed to reach the target
    """

    session_id: str = ""
    exam_type: str = ""
    requested: int = 0
    generated: int = 0
    shortfall: int = 0
    fill_iterations: int = 0


@dataclass
class SessionSummary:
    """Summary of a stored session."""

    session_id: str
    exam_type: str
    difficulty: str
    session_type: str
    medium: str
    num_questions: int
    requested_questions: int
    duration_minutes: int
    created_at: datetime
    answered: int = 0


@dataclass
class ListSessionsResult(CommandResult):
    """Result of the sessions command."""

    total: int = 0
    sessions: list[SessionSummary] = field(default_factory=list)


@dataclass
class QuestionView:
    """A stored question as shown to the user."""

    index: int
    question_id: str
    topic: str
    difficulty: str
    text: str
    options: dict[str, str]
    correct_option: str
    explanation: str = ""
    selected_option: str | None = None


@dataclass
class ShowSessionResult(CommandResult):
    """Result of the show command."""

    session: SessionSummary | None = None
    questions: list[QuestionView] = field(default_factory=list)


@dataclass
class SubmitResult(CommandResult):
    """Result of the submit command.

    Attributes:
        session_id: The answered session
        total: Questions in the session
        attempted: Questions with a selection
        correct: Correct selections
        score_percent: Rounded percentage of correct answers over total
        ignored: Answer keys that matched no question in the session
    """

    session_id: str = ""
    total: int = 0
    attempted: int = 0
    correct: int = 0
    score_percent: int = 0
    ignored: list[str] = field(default_factory=list)


@dataclass
class SettingInfo:
    """Information about a single setting."""

    name: str
    value: str
    source: str  # "env var", "yaml", "preset", "default"


@dataclass
class ConfigResult(CommandResult):
    """Result of the config command.

    Attributes:
        provider: Provider type (litellm, custom)
        llm_model: LLM model name
        data_dir: Data directory path
        settings: List of behavioral settings with sources
        config_path: Path to config file (if found)
        warnings: Unknown keys found in the config file
    """

    provider: str = "litellm"
    llm_model: str | None = None
    data_dir: str = ""
    settings: list[SettingInfo] = field(default_factory=list)
    config_path: str | None = None
    warnings: list[str] = field(default_factory=list)
