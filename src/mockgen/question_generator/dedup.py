# src/mockgen/question_generator/dedup.py
"""Fingerprint-based removal of near-verbatim duplicate questions."""

import re

from mockgen.models import QuestionCandidate
from mockgen.question_generator.parser import strip_question_number

# Everything that is not a letter or digit in any script
NON_ALNUM = re.compile(r"[\W_]+")


class DuplicateFilter:
    """Filters out questions whose fingerprints collide.

    The fingerprint is the casefolded question text plus its leading
    option(s) with all non-alphanumeric characters removed, truncated to
    a fixed length. It catches verbatim and near-verbatim regenerations
    (different numbering, punctuation or spacing), not paraphrases.
    """

    def __init__(self, fingerprint_length: int = 160, option_count: int = 1) -> None:
        """Initialize the filter.

        Args:
            fingerprint_length: Characters of the normalized text to compare.
            option_count: How many leading options (1 or 2) join the text.
        """
        if fingerprint_length < 1:
            raise ValueError("fingerprint_length must be positive")
        if option_count not in (1, 2):
            raise ValueError("option_count must be 1 or 2")
        self.fingerprint_length = fingerprint_length
        self.option_count = option_count

    def fingerprint(self, question: QuestionCandidate) -> str:
        """Derive the dedup key for a question."""
        options = [question.option_a, question.option_b][: self.option_count]
        raw = " ".join([strip_question_number(question.question_text), *options])
        return NON_ALNUM.sub("", raw.casefold())[: self.fingerprint_length]

    def filter(
        self,
        questions: list[QuestionCandidate],
        seen: set[str] | None = None,
    ) -> list[QuestionCandidate]:
        """Keep the first question for each fingerprint, preserving order.

        Args:
            questions: Candidates in priority order.
            seen: Optional fingerprints to treat as already kept. Updated
                  in place with the fingerprints of kept questions.

        Returns:
            Filtered list; the earliest of any duplicates survives.
        """
        seen = set() if seen is None else seen
        kept: list[QuestionCandidate] = []
        for question in questions:
            key = self.fingerprint(question)
            if key in seen:
                continue
            seen.add(key)
            kept.append(question)
        return kept


def dedupe(questions: list[QuestionCandidate]) -> list[QuestionCandidate]:
    """Deduplicate with the default fingerprint settings."""
    return DuplicateFilter().filter(questions)
