# src/mockgen/commands/generate.py
"""Generate command - create a new mock test session.

This module provides the core generate logic that the CLI uses.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

from mockgen.commands.base import (
    CommandStage,
    GenerateResult,
    ProgressCallback,
    ProgressUpdate,
)
from mockgen.config import ConfigError, create_generator, get_generator_config
from mockgen.models import DEFAULT_DURATION_MINUTES, GenerationRequest
from mockgen.question_generator import InvalidRequestError

if TYPE_CHECKING:
    from mockgen.mockgen import MockGen

# Map generator progress events to CommandStage
STAGE_MAP = {
    "planning": CommandStage.PLANNING,
    "generating": CommandStage.GENERATING,
    "filling": CommandStage.FILLING,
    "complete": CommandStage.COMPLETE,
}


def generate(
    exam_type: str,
    topics: list[str],
    num_questions: Any = 10,
    difficulty: str = "mixed",
    session_type: str = "practice",
    medium: str | None = None,
    duration_minutes: int = DEFAULT_DURATION_MINUTES,
    data_dir: str | None = None,
    config_path: str | Path | None = None,
    on_progress: ProgressCallback | None = None,
) -> GenerateResult:
    """Generate questions and store them as a new session.

    The request is validated before any configuration is loaded or any
    upstream call is made.

    Args:
        exam_type: Exam the questions are for (e.g. "SSC CGL")
        topics: Topics to spread the questions across
        num_questions: Number of questions (clamped to 1-100)
        difficulty: easy, medium, hard or mixed
        session_type: practice, pyq or mock
        medium: Language of the questions (None for the configured default)
        duration_minutes: Time limit stored with the session
        data_dir: Override data directory
        config_path: Override config file path
        on_progress: Callback for progress updates

    Returns:
        GenerateResult with session ID and counts
    """
    try:
        request = GenerationRequest.create(
            exam_type=exam_type,
            topics=topics,
            num_questions=num_questions,
            difficulty=difficulty,
            session_type=session_type,
            medium=medium,
        )
    except InvalidRequestError as e:
        return GenerateResult(success=False, error=str(e))

    config = get_generator_config(data_dir, config_path)
    if isinstance(config, ConfigError):
        return GenerateResult(success=False, error=config.message)

    if not medium:
        request = request.model_copy(update={"medium": config.settings.default_medium})

    try:
        mg = create_generator(config)
    except (ImportError, ValueError, OSError) as e:
        return GenerateResult(success=False, error=f"Failed to create generator: {e}")

    return generate_with_mockgen(mg, request, duration_minutes, on_progress)


def generate_with_mockgen(
    mg: MockGen,
    request: GenerationRequest,
    duration_minutes: int = DEFAULT_DURATION_MINUTES,
    on_progress: ProgressCallback | None = None,
) -> GenerateResult:
    """Generate a session using an existing MockGen instance."""

    def progress_adapter(event: str, current: int, total: int, message: str) -> None:
        """Adapt the generator's progress callback to ProgressUpdate."""
        if on_progress:
            on_progress(
                ProgressUpdate(
                    stage=STAGE_MAP.get(event, CommandStage.PROCESSING),
                    current=current,
                    total=total,
                    message=message,
                )
            )

    try:
        session, result = mg.create_session(
            request,
            duration_minutes=duration_minutes,
            on_progress=progress_adapter if on_progress else None,
        )
    except Exception as e:
        return GenerateResult(
            success=False,
            exam_type=request.exam_type,
            requested=request.num_questions,
            error=f"Generation failed: {type(e).__name__}: {e}",
        )

    if session is None:
        return GenerateResult(
            success=False,
            exam_type=request.exam_type,
            requested=result.requested,
            shortfall=result.shortfall,
            fill_iterations=result.fill_iterations,
            error="No questions could be generated. Check the model and API key.",
        )

    return GenerateResult(
        success=True,
        session_id=session.id,
        exam_type=request.exam_type,
        requested=result.requested,
        generated=session.num_questions,
        shortfall=result.shortfall,
        fill_iterations=result.fill_iterations,
    )
