# tests/models/test_request.py
"""Tests for the GenerationRequest model."""

import pytest
from pydantic import ValidationError

from mockgen.models import GenerationRequest
from mockgen.question_generator import InvalidRequestError


class TestGenerationRequest:
    def test_defaults(self):
        request = GenerationRequest(exam_type="SSC CGL", topics=["Algebra"])
        assert request.num_questions == 10
        assert request.difficulty == "mixed"
        assert request.session_type == "practice"
        assert request.medium == "English"

    def test_topics_are_stripped_and_blanks_dropped(self):
        request = GenerationRequest(exam_type="UPSC", topics=[" Polity ", "", "  ", "History"])
        assert request.topics == ["Polity", "History"]

    def test_duplicate_topics_are_kept(self):
        request = GenerationRequest(exam_type="UPSC", topics=["Polity", "Polity"])
        assert request.topics == ["Polity", "Polity"]

    def test_num_questions_clamped_high(self):
        request = GenerationRequest(exam_type="UPSC", topics=["Polity"], num_questions=500)
        assert request.num_questions == 100

    def test_num_questions_clamped_low(self):
        request = GenerationRequest(exam_type="UPSC", topics=["Polity"], num_questions=0)
        assert request.num_questions == 1

    def test_difficulty_case_insensitive(self):
        request = GenerationRequest(exam_type="UPSC", topics=["Polity"], difficulty="HARD")
        assert request.difficulty == "hard"

    def test_session_type_case_insensitive(self):
        request = GenerationRequest(exam_type="UPSC", topics=["Polity"], session_type="PYQ")
        assert request.session_type == "pyq"

    def test_blank_medium_defaults_to_english(self):
        request = GenerationRequest(exam_type="UPSC", topics=["Polity"], medium="  ")
        assert request.medium == "English"

    def test_blank_exam_type_rejected(self):
        with pytest.raises(ValidationError):
            GenerationRequest(exam_type="   ", topics=["Polity"])

    def test_all_blank_topics_rejected(self):
        with pytest.raises(ValidationError):
            GenerationRequest(exam_type="UPSC", topics=["", " "])

    def test_unknown_difficulty_rejected(self):
        with pytest.raises(ValidationError):
            GenerationRequest(exam_type="UPSC", topics=["Polity"], difficulty="brutal")


class TestCreate:
    def test_create_valid(self):
        request = GenerationRequest.create(exam_type="JEE", topics=["Physics"], num_questions=5)
        assert request.num_questions == 5

    def test_create_missing_exam_type(self):
        with pytest.raises(InvalidRequestError, match="exam_type"):
            GenerationRequest.create(topics=["Physics"])

    def test_create_empty_topics(self):
        with pytest.raises(InvalidRequestError, match="topics"):
            GenerationRequest.create(exam_type="JEE", topics=[])

    def test_create_non_numeric_count(self):
        with pytest.raises(InvalidRequestError, match="num_questions"):
            GenerationRequest.create(exam_type="JEE", topics=["Physics"], num_questions="many")

    def test_create_unknown_session_type(self):
        with pytest.raises(InvalidRequestError):
            GenerationRequest.create(exam_type="JEE", topics=["Physics"], session_type="quiz")

    def test_invalid_request_error_is_value_error(self):
        with pytest.raises(ValueError):
            GenerationRequest.create(exam_type="", topics=["Physics"])
