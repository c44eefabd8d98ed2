# src/mockgen/question_generator/parser.py
"""Parse free-text model output into question candidates.

The upstream model is asked for a strict plain-text layout but routinely
drifts from it: reasoning blocks, markdown emphasis, Hindi headers, options
on one line, answers written as "Ans. (b)". Parsing is therefore a
best-effort transform that never raises. Each block is checked with
is_well_formed_block() and silently dropped when it fails.

Expected layout per question:

    Question 1:
    <question text>
    A) ...
    B) ...
    C) ...
    D) ...
    Correct: B
    Explanation: ...
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field

from mockgen.models import OPTION_LETTERS, QuestionCandidate

logger = logging.getLogger(__name__)

REASONING_BLOCK = re.compile(r"<think>.*?</think>", re.IGNORECASE | re.DOTALL)
REASONING_CLOSE = re.compile(r"</think>", re.IGNORECASE)
REASONING_OPEN = re.compile(r"<think>", re.IGNORECASE)

CODE_FENCE = re.compile(r"^[ \t]*```[\w-]*[ \t]*$", re.MULTILINE)
HEADING = re.compile(r"^[ \t]*#{1,6}[ \t]*", re.MULTILINE)
STRONG = re.compile(r"\*\*|__")
# A lone "*" is emphasis unless it sits between digits/spaces ("3 * 4").
EMPHASIS = re.compile(r"(?<![\d \t])\*|\*(?![\d \t])")

HEADER = re.compile(
    r"^[ \t]*(?:[-•>][ \t]*)?"
    r"(?:Question|Ques\.?|Q|प्रश्न)[ \t]*(?:\.[ \t]*)?(\d+)[ \t]*"
    r"(?:\(([^)\n]*)\))?"
    r"[ \t]*[:.)\-–]*[ \t]*",
    re.IGNORECASE | re.MULTILINE,
)
NUMBER_PREFIX = re.compile(
    r"^\s*(?:(?:Question|Ques\.?|Q|प्रश्न)\s*(?:\.\s*)?\d+\s*(?:\([^)]*\))?\s*[:.)\-–]*\s*"
    r"|\d+\s*[.)]\s+)",
    re.IGNORECASE,
)

OPTION = re.compile(r"^(?:[-•][ \t]*)?\(?([A-Da-d])[ \t]*[).:\]][ \t]*(.*)$")
INLINE_OPTION_MARKER = re.compile(r"(?:^|[ \t])\(?([A-D])[ \t]*[).][ \t]+")
ANSWER = re.compile(
    r"^(?:correct[ \t]*(?:answer|option)?|right[ \t]+answer|answer|ans|सही[ \t]*उत्तर|उत्तर)"
    r"(?:[ \t]*[:.)\-–=]+[ \t]*|[ \t]+|$)(.*)$",
    re.IGNORECASE,
)
EXPLANATION = re.compile(
    r"^(?:explanation|exp|reasoning|reason|solution|व्याख्या|स्पष्टीकरण)"
    r"(?:[ \t]*[:.)\-–]+[ \t]*|[ \t]*$)(.*)$",
    re.IGNORECASE,
)
TOPIC_LINE = re.compile(r"^(?:topic|subject|विषय)[ \t]*[:\-–][ \t]*(.+)$", re.IGNORECASE)
DIFFICULTY_LINE = re.compile(r"^(?:difficulty|level)[ \t]*[:\-–][ \t]*(.+)$", re.IGNORECASE)
PARENTHESIZED = re.compile(r"^\(.*\)$")
META_SPLIT = re.compile(r"\s*[-–,/|]\s*")

DIFFICULTY_WORDS = ("easy", "medium", "hard")
MIN_QUESTION_TEXT_LENGTH = 3


@dataclass
class ParseContext:
    """Values used to tag parsed candidates.

    Attributes:
        exam_type: Copied onto every candidate.
        topics: The batch's topics; topics[0] is the default tag.
        difficulty: Default difficulty when the block does not state one.
        max_questions: Optional cap on returned candidates.
    """

    exam_type: str
    topics: list[str]
    difficulty: str = "mixed"
    max_questions: int | None = None


@dataclass
class ParsedBlock:
    """Fields extracted from one question block, before validation."""

    question_text: str = ""
    options: dict[str, str] = field(default_factory=dict)
    correct_option: str | None = None
    explanation: str = ""
    topic: str | None = None
    difficulty: str | None = None


def strip_reasoning(text: str) -> str:
    """Remove <think> reasoning, including unbalanced markers.

    A dangling close marker drops everything before it; a dangling open
    marker drops everything from it onward.
    """
    text = REASONING_BLOCK.sub("", text)
    closes = list(REASONING_CLOSE.finditer(text))
    if closes:
        text = text[closes[-1].end() :]
    opened = REASONING_OPEN.search(text)
    if opened:
        text = text[: opened.start()]
    return text


def strip_markdown(text: str) -> str:
    """Remove emphasis, headings and code fences."""
    text = CODE_FENCE.sub("", text)
    text = HEADING.sub("", text)
    text = STRONG.sub("", text)
    return EMPHASIS.sub("", text)


def strip_question_number(text: str) -> str:
    """Remove a leading "Question N:", "Q3.", "प्रश्न 2 -" or "4." prefix."""
    return NUMBER_PREFIX.sub("", text, count=1).strip()


def split_blocks(text: str) -> list[tuple[str, str | None]]:
    """Split text into (block, header_meta) pairs on question headers.

    Text before the first header is discarded. A header that repeats the
    previous number before any option has appeared (bilingual output) is
    not treated as a new question. With no headers, the whole text is one
    block.
    """
    headers = list(HEADER.finditer(text))
    if not headers:
        return [(text, None)]

    blocks: list[tuple[str, str | None]] = []
    previous_number: str | None = None
    for i, match in enumerate(headers):
        end = headers[i + 1].start() if i + 1 < len(headers) else len(text)
        body = text[match.end() : end]
        meta = match.group(2)
        number = match.group(1)
        if (
            blocks
            and number == previous_number
            and not any(OPTION.match(line.strip()) for line in blocks[-1][0].splitlines())
        ):
            prev_body, prev_meta = blocks[-1]
            blocks[-1] = (prev_body + "\n" + body, prev_meta or meta)
            continue
        blocks.append((body, meta))
        previous_number = number
    return blocks


def _in_option_order(markers: list[re.Match[str]]) -> bool:
    letters = [m.group(1) for m in markers]
    return letters == list(OPTION_LETTERS[: len(letters)])


def _split_inline_options(line: str) -> list[tuple[str, str]] | None:
    """Split "A) x B) y C) z D) w" into letter/text pairs."""
    markers = list(INLINE_OPTION_MARKER.finditer(line))
    if len(markers) < 2 or line[: markers[0].start()].strip():
        return None
    if not _in_option_order(markers):
        return None
    pairs = []
    for i, marker in enumerate(markers):
        end = markers[i + 1].start() if i + 1 < len(markers) else len(line)
        pairs.append((marker.group(1), line[marker.end() : end].strip()))
    return pairs


def _break_inline_options(line: str) -> list[str]:
    """Move a trailing "A) .. B) .. C) .. D) .." run onto its own line.

    Only a run with all four markers in order counts; fewer markers are
    part of the question text ("Consider (A) .. (B) .. (C) ..").
    """
    line = line.strip()
    markers = list(INLINE_OPTION_MARKER.finditer(line))
    if (
        len(markers) != len(OPTION_LETTERS)
        or markers[0].start() == 0
        or not _in_option_order(markers)
    ):
        return [line]
    start = markers[0].start()
    return [line[:start].strip(), line[start:].strip()]


def _extract_letter(rest: str) -> str | None:
    rest = re.sub(r"^(?:option|विकल्प)\s*", "", rest.strip(), flags=re.IGNORECASE)
    leading = re.match(r"^[\s(\[]*([A-Da-d])(?![A-Za-z])", rest)
    if leading:
        return leading.group(1).upper()
    anywhere = re.search(r"(?<![A-Za-z])([A-D])(?![A-Za-z])", rest)
    return anywhere.group(1) if anywhere else None


def _match_topic(value: str, topics: list[str]) -> str | None:
    wanted = value.strip().casefold()
    if not wanted:
        return None
    for topic in topics:
        if topic.casefold() == wanted:
            return topic
    for topic in topics:
        if topic.casefold() in wanted or wanted in topic.casefold():
            return topic
    return None


def _match_difficulty(value: str) -> str | None:
    wanted = value.strip().casefold()
    for word in DIFFICULTY_WORDS:
        if wanted.startswith(word):
            return word
    return None


def _apply_meta(block: ParsedBlock, meta: str, topics: list[str]) -> None:
    for part in META_SPLIT.split(meta.strip("() ")):
        if not part:
            continue
        if block.difficulty is None and (difficulty := _match_difficulty(part)):
            block.difficulty = difficulty
        elif block.topic is None and (topic := _match_topic(part, topics)):
            block.topic = topic


def _is_metadata(line: str) -> bool:
    return bool(
        PARENTHESIZED.match(line)
        or (HEADER.match(line) and not HEADER.sub("", line, count=1).strip())
        or TOPIC_LINE.match(line)
        or DIFFICULTY_LINE.match(line)
    )


def parse_block(body: str, topics: list[str], meta: str | None = None) -> ParsedBlock:
    """Extract fields from one question block. Never raises."""
    block = ParsedBlock()
    raw_lines = [line.strip() for line in body.splitlines() if line.strip()]
    last_option = max((i for i, line in enumerate(raw_lines) if OPTION.match(line)), default=-1)
    lines: list[str] = []
    for i, line in enumerate(raw_lines):
        # Options already on their own lines win over markers inside the text.
        lines.extend(_break_inline_options(line) if i > last_option else [line])
    if not lines:
        return block

    if meta:
        _apply_meta(block, meta, topics)

    option_index = next((i for i, line in enumerate(lines) if OPTION.match(line)), None)
    head = lines if option_index is None else lines[:option_index]
    text_lines: list[str] = []
    for line in head:
        if _is_metadata(line):
            _read_metadata(block, line, topics)
            continue
        text_lines.append(line)
    block.question_text = " ".join(" ".join(text_lines).split())
    if option_index is None or not block.question_text:
        block.question_text = " ".join(lines[0].split())
    if option_index is None:
        return block

    in_explanation = False
    for line in lines[option_index:]:
        answer = ANSWER.match(line)
        if answer and in_explanation and block.correct_option is not None:
            answer = None
        if answer:
            if block.correct_option is None:
                block.correct_option = _extract_letter(answer.group(1))
            in_explanation = False
        elif explanation := EXPLANATION.match(line):
            if not block.explanation:
                block.explanation = explanation.group(1).strip()
                in_explanation = True
        elif option := OPTION.match(line):
            inline = _split_inline_options(line)
            pairs = inline or [(option.group(1).upper(), option.group(2).strip())]
            for letter, text in pairs:
                if text and letter not in block.options:
                    block.options[letter] = text
            in_explanation = False
        elif _is_metadata(line):
            _read_metadata(block, line, topics)
        elif in_explanation:
            block.explanation = f"{block.explanation} {line}".strip()
    return block


def _read_metadata(block: ParsedBlock, line: str, topics: list[str]) -> None:
    if topic_line := TOPIC_LINE.match(line):
        if block.topic is None:
            block.topic = _match_topic(topic_line.group(1), topics)
    elif difficulty_line := DIFFICULTY_LINE.match(line):
        if block.difficulty is None:
            block.difficulty = _match_difficulty(difficulty_line.group(1))
    elif PARENTHESIZED.match(line):
        _apply_meta(block, line, topics)


def is_well_formed_block(block: ParsedBlock) -> bool:
    """True if a block has options A and B, a correct letter and real text."""
    return bool(
        block.options.get("A")
        and block.options.get("B")
        and block.correct_option in OPTION_LETTERS
        and len(block.question_text.strip()) > MIN_QUESTION_TEXT_LENGTH
    )


def parse_questions(raw: str, context: ParseContext) -> list[QuestionCandidate]:
    """Parse model output into well-formed question candidates.

    Args:
        raw: Raw text of the model's reply.
        context: Tags applied to every candidate.

    Returns:
        Candidates in the order they appear. Possibly empty; never raises
        on malformed text.
    """
    if not raw or not raw.strip():
        return []

    text = strip_markdown(strip_reasoning(raw.replace("\r\n", "\n")))
    default_topic = context.topics[0] if context.topics else ""
    candidates: list[QuestionCandidate] = []
    dropped = 0

    for body, meta in split_blocks(text):
        block = parse_block(body, context.topics, meta)
        if not is_well_formed_block(block):
            dropped += 1
            continue
        candidates.append(
            QuestionCandidate(
                exam_type=context.exam_type,
                topic=block.topic or default_topic,
                difficulty=block.difficulty or context.difficulty,
                question_text=block.question_text,
                option_a=block.options["A"],
                option_b=block.options["B"],
                option_c=block.options.get("C", ""),
                option_d=block.options.get("D", ""),
                correct_option=block.correct_option,
                explanation=block.explanation,
            )
        )
        if context.max_questions is not None and len(candidates) >= context.max_questions:
            break

    logger.debug("Parsed %d questions (%d blocks dropped)", len(candidates), dropped)
    return candidates
