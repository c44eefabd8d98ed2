# src/mockgen/question_generator/prompts.py
"""Prompt templates for batch question generation."""

from dataclasses import dataclass

from mockgen.models import Batch, GenerationRequest

SYSTEM_PROMPT = """You are an expert question setter for the {exam_type} exam.
Generate EXACTLY {count} multiple-choice questions.

Topics: {topics}
Difficulty: {difficulty_line}
Language: {medium}

{medium_guidance}
{session_guidance}

Rules:
1. Every question has exactly four options labelled A), B), C) and D).
2. Exactly one option is correct.
3. All {count} questions must be different from each other: do not repeat a question, \
its numbers or its structure.
4. Do NOT use markdown: no **, no *, no #, no code blocks.
5. Put the question text on its own line below the "Question N:" header, never on the \
header line itself.
6. Do not write anything before "Question 1:" or after the last explanation.

Use exactly this format for every question:

Question 1:
<question text>
A) <option>
B) <option>
C) <option>
D) <option>
{topic_line}Correct: <A, B, C or D>
Explanation: <one or two sentences>
"""

USER_PROMPT = "Generate batch {label} with {count} questions."

MEDIUM_GUIDANCE: dict[str, str] = {
    "english": "Write everything in clear, simple English.",
    "hindi": (
        "Write the question, options and explanation in Hindi (Devanagari script). "
        "Keep the option labels A), B), C), D) and the words Question, Correct and "
        "Explanation in English."
    ),
    "hinglish": (
        "Write in Hinglish: Hindi sentences in Roman script, with English technical "
        "terms where they are commonly used."
    ),
    "bilingual": (
        "Write every question and option in English followed by its Hindi translation "
        "on the same line, separated by ' / '. Keep one set of option labels A) to D)."
    ),
}

SESSION_GUIDANCE: dict[str, str] = {
    "practice": (
        "Questions should feel like standard practice-book questions for this exam, "
        "inspired by previous papers but with original wording and values."
    ),
    "pyq": (
        "Questions should closely resemble previous-year questions of this exam in "
        "pattern, level and style, without copying any question verbatim."
    ),
    "mock": (
        "Questions should read like a full-length mock test: balanced across concepts, "
        "with the time pressure of the real exam in mind."
    ),
}

DIFFICULTY_LINES: dict[str, str] = {
    "easy": "easy (direct, single-concept questions)",
    "medium": "medium (two-step reasoning, standard exam level)",
    "hard": "hard (multi-step reasoning, close distractors)",
    "mixed": "mixed (roughly equal easy, medium and hard)",
}


@dataclass
class Prompt:
    """System and user message for one batch."""

    system: str
    user: str

    def messages(self) -> list[dict]:
        return [
            {"role": "system", "content": self.system},
            {"role": "user", "content": self.user},
        ]


def build_prompt(batch: Batch, request: GenerationRequest, label: str = "1") -> Prompt:
    """Build the prompt for one batch.

    Multi-topic batches also ask for a "Topic:" line per question so the
    parser can tag each candidate with the right topic.
    """
    medium_key = request.medium.strip().lower()
    medium_guidance = MEDIUM_GUIDANCE.get(
        medium_key,
        f"Write everything in {request.medium}. Keep the option labels A) to D) in Latin letters.",
    )
    topic_line = ""
    if len(batch.topics) > 1:
        topic_line = f"Topic: <one of: {', '.join(batch.topics)}>\n"

    system = SYSTEM_PROMPT.format(
        exam_type=request.exam_type,
        count=batch.count,
        topics=", ".join(batch.topics),
        difficulty_line=DIFFICULTY_LINES.get(request.difficulty, request.difficulty),
        medium=request.medium,
        medium_guidance=medium_guidance,
        session_guidance=SESSION_GUIDANCE.get(request.session_type, ""),
        topic_line=topic_line,
    )
    user = USER_PROMPT.format(label=label, count=batch.count)
    return Prompt(system=system, user=user)
