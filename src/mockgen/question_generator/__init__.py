"""Question generation pipeline for mockgen."""

from mockgen.question_generator.base import ProgressCallback, QuestionGenerator
from mockgen.question_generator.client import ClientQuestionGenerator, renumber
from mockgen.question_generator.dedup import DuplicateFilter, dedupe
from mockgen.question_generator.exceptions import (
    BatchFetchError,
    GenerationError,
    InvalidRequestError,
)
from mockgen.question_generator.fetcher import BatchFetcher
from mockgen.question_generator.parser import (
    ParseContext,
    ParsedBlock,
    is_well_formed_block,
    parse_questions,
)
from mockgen.question_generator.planner import least_used_topic, merge_small_batches, plan_batches
from mockgen.question_generator.pool import run_pool
from mockgen.question_generator.prompts import Prompt, build_prompt

__all__ = [
    "QuestionGenerator",
    "ClientQuestionGenerator",
    "ProgressCallback",
    "BatchFetcher",
    "DuplicateFilter",
    "dedupe",
    "ParseContext",
    "ParsedBlock",
    "parse_questions",
    "is_well_formed_block",
    "plan_batches",
    "merge_small_batches",
    "least_used_topic",
    "run_pool",
    "Prompt",
    "build_prompt",
    "renumber",
    "GenerationError",
    "BatchFetchError",
    "InvalidRequestError",
]
