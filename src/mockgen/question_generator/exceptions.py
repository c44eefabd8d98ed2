# src/mockgen/question_generator/exceptions.py
"""Exceptions for question generation."""


class GenerationError(Exception):
    """Base class for question generation errors."""


class InvalidRequestError(GenerationError, ValueError):
    """Raised before any upstream call when a generation request is invalid."""


class BatchFetchError(GenerationError):
    """Raised for one failed upstream attempt.

    Covers timeouts, transport errors, empty responses and responses with
    zero parseable questions. Absorbed by the fetcher's retry loop.

    Attributes:
        label: Batch label used in the prompt and in logs.
        attempt: 1-based attempt number that failed.
    """

    def __init__(self, message: str, label: str, attempt: int) -> None:
        super().__init__(message)
        self.label = label
        self.attempt = attempt
