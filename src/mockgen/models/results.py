# src/mockgen/models/results.py
"""Result of one generation call."""

from collections.abc import Iterator
from dataclasses import dataclass, field

from mockgen.models.question import QuestionCandidate


@dataclass
class GenerationResult:
    """Questions produced for a request, plus how the run went.

    Behaves like the question list (len, iteration, indexing) so callers
    that only want the questions can ignore the rest.

    Attributes:
        questions: Final, renumbered questions (never more than requested).
        requested: The clamped number of questions asked for.
        batches_planned: Batches sent in the initial fan-out.
        fill_iterations: Fill-loop iterations that were needed.
    """

    questions: list[QuestionCandidate] = field(default_factory=list)
    requested: int = 0
    batches_planned: int = 0
    fill_iterations: int = 0

    @property
    def shortfall(self) -> int:
        """How many questions are missing from the requested count."""
        return max(0, self.requested - len(self.questions))

    @property
    def is_complete(self) -> bool:
        return self.shortfall == 0

    def __len__(self) -> int:
        return len(self.questions)

    def __iter__(self) -> Iterator[QuestionCandidate]:
        return iter(self.questions)

    def __getitem__(self, index: int) -> QuestionCandidate:
        return self.questions[index]
