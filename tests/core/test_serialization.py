"""
Unit Tests for Serialization Utilities

Tests for quiz_to_dict / quiz_from_dict / load_quiz.
"""

import json
import pytest

from quiz_print.core.models import Quiz
from quiz_print.core.schemas import ValidationError
from quiz_print.core.utils import load_quiz, quiz_from_dict, quiz_to_dict


class TestQuizSerialization:
    """Tests for dictionary conversion."""

    def test_quiz_to_dict_when_serialized_then_passes_schema(self, arabic_quiz):
        data = quiz_to_dict(arabic_quiz)
        assert quiz_from_dict(data) == arabic_quiz

    def test_quiz_from_dict_when_invalid_then_raises_validation_error(self):
        with pytest.raises(ValidationError):
            quiz_from_dict({"title": "Only a title"})

    def test_quiz_from_dict_when_validation_skipped_then_missing_field_is_value_error(self):
        with pytest.raises(ValueError, match="Missing field"):
            quiz_from_dict({"title": "Only a title"}, validate=False)


class TestLoadQuiz:
    """Tests for loading quiz files."""

    def test_load_quiz_when_valid_file_then_returns_quiz(self, tmp_path, arabic_quiz):
        path = tmp_path / "quiz.json"
        path.write_text(json.dumps(arabic_quiz.to_dict(), ensure_ascii=False), encoding="utf-8")

        quiz = load_quiz(path)

        assert isinstance(quiz, Quiz)
        assert quiz == arabic_quiz
        assert quiz.questions[0].correct_index == 1

    def test_load_quiz_when_bad_json_then_raises_validation_error(self, tmp_path):
        path = tmp_path / "quiz.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(ValidationError, match="Invalid JSON"):
            load_quiz(path)

    def test_load_quiz_when_missing_file_then_raises_os_error(self, tmp_path):
        with pytest.raises(OSError):
            load_quiz(tmp_path / "missing.json")
