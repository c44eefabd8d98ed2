# tests/question_generator/test_prompts.py
"""Tests for batch prompt construction."""

from mockgen.models import Batch, GenerationRequest
from mockgen.question_generator import build_prompt


def make_request(**overrides) -> GenerationRequest:
    fields = {"exam_type": "SSC CGL", "topics": ["Algebra", "Geometry"], "num_questions": 20}
    fields.update(overrides)
    return GenerationRequest(**fields)


class TestBuildPrompt:
    def test_states_exact_count_and_exam(self):
        prompt = build_prompt(Batch(topics=["Algebra"], count=7), make_request())
        assert "EXACTLY 7" in prompt.system
        assert "SSC CGL" in prompt.system
        assert "Topics: Algebra" in prompt.system

    def test_format_rules(self):
        system = build_prompt(Batch(topics=["Algebra"], count=3), make_request()).system
        assert "A)" in system and "D)" in system
        assert "Correct:" in system
        assert "markdown" in system
        assert "different from each other" in system

    def test_single_topic_has_no_topic_line(self):
        system = build_prompt(Batch(topics=["Algebra"], count=3), make_request()).system
        assert "Topic: <one of" not in system

    def test_multi_topic_asks_for_topic_line(self):
        batch = Batch(topics=["Algebra", "Geometry"], count=4)
        system = build_prompt(batch, make_request()).system
        assert "Topic: <one of: Algebra, Geometry>" in system

    def test_difficulty_line(self):
        system = build_prompt(Batch(topics=["Algebra"], count=3), make_request(difficulty="hard"))
        assert "Difficulty: hard" in system.system

    def test_hindi_medium_guidance(self):
        prompt = build_prompt(Batch(topics=["Algebra"], count=3), make_request(medium="Hindi"))
        assert "Devanagari" in prompt.system
        assert "Language: Hindi" in prompt.system

    def test_unknown_medium_uses_generic_guidance(self):
        prompt = build_prompt(Batch(topics=["Algebra"], count=3), make_request(medium="Tamil"))
        assert "Write everything in Tamil" in prompt.system

    def test_session_guidance(self):
        prompt = build_prompt(Batch(topics=["Algebra"], count=3), make_request(session_type="pyq"))
        assert "previous-year" in prompt.system

    def test_user_message_has_label(self):
        prompt = build_prompt(Batch(topics=["Algebra"], count=3), make_request(), label="fill-2")
        assert prompt.user == "Generate batch fill-2 with 3 questions."

    def test_messages(self):
        messages = build_prompt(Batch(topics=["Algebra"], count=3), make_request()).messages()
        assert [m["role"] for m in messages] == ["system", "user"]
