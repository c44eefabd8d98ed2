# tests/question_generator/test_parser.py
"""Tests for parsing model output into question candidates."""

import pytest

from mockgen.question_generator import (
    ParseContext,
    ParsedBlock,
    is_well_formed_block,
    parse_questions,
)
from mockgen.question_generator.parser import (
    split_blocks,
    strip_markdown,
    strip_question_number,
    strip_reasoning,
)

TWO_QUESTIONS = """Question 1:
What is 2 + 2?
A) 3
B) 4
C) 5
D) 6
Correct: B
Explanation: Two plus two is four.

Question 2:
Which number is prime?
A) 4
B) 6
C) 7
D) 9
Correct: C
Explanation: 7 has no divisors other than 1 and itself.
"""


@pytest.fixture
def context():
    return ParseContext(exam_type="SSC CGL", topics=["Algebra", "Geometry"], difficulty="medium")


class TestParseQuestions:
    def test_well_formed(self, context):
        questions = parse_questions(TWO_QUESTIONS, context)
        assert len(questions) == 2
        first = questions[0]
        assert first.question_text == "What is 2 + 2?"
        assert first.options == {"A": "3", "B": "4", "C": "5", "D": "6"}
        assert first.correct_option == "B"
        assert first.explanation == "Two plus two is four."
        assert first.exam_type == "SSC CGL"
        assert first.topic == "Algebra"
        assert first.difficulty == "medium"
        assert questions[1].correct_option == "C"

    def test_empty_input(self, context):
        assert parse_questions("", context) == []
        assert parse_questions("   \n  ", context) == []

    def test_garbage_never_raises(self, context):
        assert parse_questions("Sorry, I cannot help with that.", context) == []
        assert parse_questions("Question 1:\nQuestion 2:\nA)\nB)", context) == []

    def test_preamble_discarded(self, context):
        raw = "Here are your questions for today.\n\n" + TWO_QUESTIONS
        assert len(parse_questions(raw, context)) == 2

    def test_windows_line_endings(self, context):
        raw = TWO_QUESTIONS.replace("\n", "\r\n")
        assert len(parse_questions(raw, context)) == 2

    def test_max_questions(self, context):
        context.max_questions = 1
        questions = parse_questions(TWO_QUESTIONS, context)
        assert len(questions) == 1

    def test_missing_correct_answer_dropped(self, context):
        raw = "Question 1:\nWhat is 2 + 2?\nA) 3\nB) 4\nC) 5\nD) 6\n"
        assert parse_questions(raw, context) == []

    def test_missing_option_b_dropped(self, context):
        raw = "Question 1:\nWhat is 2 + 2?\nA) 4\nCorrect: A\n"
        assert parse_questions(raw, context) == []

    def test_short_text_dropped(self, context):
        raw = "Question 1:\nWhy\nA) 3\nB) 4\nCorrect: A\n"
        assert parse_questions(raw, context) == []

    def test_malformed_block_does_not_affect_others(self, context):
        raw = "Question 1:\nBroken?\nA) only\n\n" + TWO_QUESTIONS.replace(
            "Question 1:", "Question 7:"
        )
        questions = parse_questions(raw, context)
        assert [q.question_text for q in questions] == ["What is 2 + 2?", "Which number is prime?"]

    def test_two_options_only(self, context):
        raw = "Question 1:\nIs 7 a prime number?\nA) Yes\nB) No\nCorrect: A\n"
        questions = parse_questions(raw, context)
        assert len(questions) == 1
        assert questions[0].option_c == ""
        assert questions[0].option_d == ""

    def test_no_headers_single_question(self, context):
        raw = "What is 10 / 2?\nA) 2\nB) 5\nC) 10\nD) 20\nAnswer: B\n"
        questions = parse_questions(raw, context)
        assert len(questions) == 1
        assert questions[0].question_text == "What is 10 / 2?"

    def test_question_on_header_line(self, context):
        raw = "Question 1: What is 2 + 2?\nA) 3\nB) 4\nCorrect: B\n"
        questions = parse_questions(raw, context)
        assert questions[0].question_text == "What is 2 + 2?"


class TestReasoningAndMarkdown:
    def test_reasoning_block_removed(self, context):
        raw = (
            "<think>\nQuestion 1:\nDraft question?\nA) x\nB) y\nCorrect: A\n</think>\n"
            + TWO_QUESTIONS
        )
        questions = parse_questions(raw, context)
        assert len(questions) == 2
        assert all("Draft" not in q.question_text for q in questions)

    def test_dangling_close_marker(self, context):
        raw = "Let me plan Question 9 first.\n</think>\n" + TWO_QUESTIONS
        assert len(parse_questions(raw, context)) == 2

    def test_dangling_open_marker(self, context):
        raw = TWO_QUESTIONS + "\n<think>\nQuestion 3:\nHalf written?\nA) 1\nB) 2\nCorrect: A\n"
        assert len(parse_questions(raw, context)) == 2

    def test_strip_reasoning_case_insensitive(self):
        assert strip_reasoning("<THINK>x</THINK>answer") == "answer"

    def test_markdown_removed(self, context):
        raw = (
            "## Questions\n"
            "**Question 1:**\n"
            "**What is 3 * 4?**\n"
            "A) *Twelve*\n"
            "B) 7\n"
            "**Correct:** A\n"
        )
        questions = parse_questions(raw, context)
        assert len(questions) == 1
        assert questions[0].question_text == "What is 3 * 4?"
        assert questions[0].option_a == "Twelve"
        assert questions[0].correct_option == "A"

    def test_strip_markdown_keeps_arithmetic(self):
        assert strip_markdown("2*3 and 3 * 4 and *word*") == "2*3 and 3 * 4 and word"

    def test_code_fence_removed(self, context):
        raw = "```\n" + TWO_QUESTIONS + "```\n"
        assert len(parse_questions(raw, context)) == 2


class TestFormatVariants:
    def test_parenthesized_lowercase_options(self, context):
        raw = "Q1.\nWhat is 9 - 4?\n(a) 3\n(b) 5\n(c) 6\n(d) 4\nAns. (b)\n"
        questions = parse_questions(raw, context)
        assert len(questions) == 1
        assert questions[0].options == {"A": "3", "B": "5", "C": "6", "D": "4"}
        assert questions[0].correct_option == "B"

    def test_dot_options(self, context):
        raw = "Question 1:\nWhat is 9 - 4?\nA. 3\nB. 5\nC. 6\nD. 4\nCorrect Answer: Option B\n"
        questions = parse_questions(raw, context)
        assert questions[0].option_b == "5"
        assert questions[0].correct_option == "B"

    def test_inline_options_on_own_line(self, context):
        raw = "Question 1:\nWhat is 2 + 2?\nA) 3 B) 4 C) 5 D) 6\nCorrect: B\n"
        questions = parse_questions(raw, context)
        assert questions[0].options == {"A": "3", "B": "4", "C": "5", "D": "6"}

    def test_inline_options_after_question(self, context):
        raw = "Question 1:\nWhat is 2 + 2? A) 3 B) 4 C) 5 D) 6\nCorrect: B\n"
        questions = parse_questions(raw, context)
        assert questions[0].question_text == "What is 2 + 2?"
        assert questions[0].option_d == "6"

    def test_hindi_labels(self, context):
        raw = (
            "प्रश्न 1:\n"
            "2 और 3 का योग क्या है?\n"
            "A) 4\n"
            "B) 5\n"
            "C) 6\n"
            "D) 7\n"
            "सही उत्तर: B\n"
            "व्याख्या: 2 + 3 = 5\n"
        )
        questions = parse_questions(raw, context)
        assert len(questions) == 1
        assert questions[0].correct_option == "B"
        assert questions[0].explanation == "2 + 3 = 5"

    def test_bilingual_first_option_wins(self, context):
        raw = (
            "Question 1:\n"
            "What is 2 + 2?\n"
            "प्रश्न 1:\n"
            "2 + 2 कितना है?\n"
            "A) 3\n"
            "B) 4\n"
            "A) तीन\n"
            "B) चार\n"
            "Correct: B\n"
        )
        questions = parse_questions(raw, context)
        assert len(questions) == 1
        assert questions[0].option_a == "3"
        assert questions[0].option_b == "4"
        assert questions[0].question_text.startswith("What is 2 + 2?")

    def test_explanation_continuation(self, context):
        raw = (
            "Question 1:\nWhat is 2 + 2?\nA) 3\nB) 4\nCorrect: B\n"
            "Explanation: Add the numbers.\nThe sum is four.\n"
        )
        questions = parse_questions(raw, context)
        assert questions[0].explanation == "Add the numbers. The sum is four."

    def test_answer_shaped_explanation_line_kept(self, context):
        raw = (
            "Question 1:\nWhat is 2 + 2?\nA) 3\nB) 4\nCorrect: B\n"
            "Explanation: Add the numbers.\nAnswer B is the only even sum.\n"
        )
        questions = parse_questions(raw, context)
        assert questions[0].correct_option == "B"
        assert questions[0].explanation == "Add the numbers. Answer B is the only even sum."

    def test_markers_inside_question_text(self, context):
        raw = (
            "Question 1:\n"
            "Consider: (A) 2 is a prime, (B) 2 is even, (C) 2 is odd. Which statements hold?\n"
            "A) Only A\nB) A and B\nC) B and C\nD) All\nCorrect: B\n"
            "Explanation: 2 is the only even prime.\n"
        )
        questions = parse_questions(raw, context)
        assert len(questions) == 1
        assert questions[0].question_text == (
            "Consider: (A) 2 is a prime, (B) 2 is even, (C) 2 is odd. Which statements hold?"
        )
        assert questions[0].options == {
            "A": "Only A",
            "B": "A and B",
            "C": "B and C",
            "D": "All",
        }

    def test_four_markers_inside_text_with_option_lines(self, context):
        raw = (
            "Question 1:\nMatch the pairs: (A) Delhi (B) Agra (C) Pune (D) Goa\n"
            "A) 1-2-3-4\nB) 4-3-2-1\nCorrect: A\n"
        )
        questions = parse_questions(raw, context)
        assert questions[0].question_text == "Match the pairs: (A) Delhi (B) Agra (C) Pune (D) Goa"
        assert questions[0].option_a == "1-2-3-4"

    def test_three_trailing_markers_not_split(self, context):
        raw = "Question 1:\nWhich holds? A) x B) y C) z\nCorrect: A\n"
        assert parse_questions(raw, context) == []


class TestMetadata:
    def test_header_meta_sets_topic_and_difficulty(self, context):
        raw = (
            "Question 1 (Hard - Geometry):\nHow many sides has a hexagon?\n"
            "A) 5\nB) 6\nCorrect: B\n"
        )
        questions = parse_questions(raw, context)
        assert questions[0].topic == "Geometry"
        assert questions[0].difficulty == "hard"

    def test_topic_line(self, context):
        raw = (
            "Question 1:\nHow many sides has a hexagon?\n"
            "A) 5\nB) 6\nTopic: geometry\nCorrect: B\n"
        )
        questions = parse_questions(raw, context)
        assert questions[0].topic == "Geometry"

    def test_unknown_topic_falls_back_to_first(self, context):
        raw = "Question 1:\nHow many sides has a hexagon?\nA) 5\nB) 6\nTopic: Biology\nCorrect: B\n"
        questions = parse_questions(raw, context)
        assert questions[0].topic == "Algebra"

    def test_metadata_before_options_not_in_text(self, context):
        raw = (
            "Question 1:\n(Easy)\nHow many sides has a hexagon?\n"
            "Difficulty: easy\nA) 5\nB) 6\nCorrect: B\n"
        )
        questions = parse_questions(raw, context)
        assert questions[0].question_text == "How many sides has a hexagon?"
        assert questions[0].difficulty == "easy"


class TestHelpers:
    @pytest.mark.parametrize(
        "text,expected",
        [
            ("Question 12: What is x?", "What is x?"),
            ("Q3. What is x?", "What is x?"),
            ("4. What is x?", "What is x?"),
            ("प्रश्न 2 - x क्या है?", "x क्या है?"),
            ("What is x?", "What is x?"),
        ],
    )
    def test_strip_question_number(self, text, expected):
        assert strip_question_number(text) == expected

    def test_split_blocks_without_headers(self):
        assert split_blocks("just text") == [("just text", None)]

    def test_split_blocks_returns_meta(self):
        blocks = split_blocks("Question 1 (Easy):\nx\nQuestion 2:\ny\n")
        assert [meta for _, meta in blocks] == ["Easy", None]

    def test_long_whitespace_after_header_word(self, context):
        raw = "Question" + " " * 50_000 + "x\n" + TWO_QUESTIONS
        assert len(split_blocks(raw)) == 2
        assert strip_question_number("Q" + " " * 50_000 + "x") == "Q" + " " * 50_000 + "x"
        assert len(parse_questions(raw, context)) == 2

    def test_is_well_formed_block(self):
        block = ParsedBlock(
            question_text="What is 2 + 2?", options={"A": "3", "B": "4"}, correct_option="B"
        )
        assert is_well_formed_block(block)

    def test_is_well_formed_block_rejects_bad_letter(self):
        block = ParsedBlock(
            question_text="What is 2 + 2?", options={"A": "3", "B": "4"}, correct_option="E"
        )
        assert not is_well_formed_block(block)
