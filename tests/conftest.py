import pytest
import sys
from dataclasses import replace
from pathlib import Path

# Add src to sys.path so we can import quiz_print
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from quiz_print.builder import RenderConfig
from quiz_print.builder.layout import ENGLISH_LABELS, LayoutConfig, identity_text
from quiz_print.core.models import Quiz, QuizQuestion


# Common test fixtures
@pytest.fixture
def make_question():
    """Factory for questions with n generated options."""
    def _create(number: int = 1, option_count: int = 4, correct_index: int = 0) -> QuizQuestion:
        return QuizQuestion(
            prompt=f"Prompt {number}",
            options=tuple(f"Option {number}.{i}" for i in range(option_count)),
            correct_index=correct_index,
        )
    return _create


@pytest.fixture
def make_quiz(make_question):
    """Factory for quizzes with n questions of option_count options each."""
    def _create(question_count: int = 3, option_count: int = 4) -> Quiz:
        return Quiz(
            title="Weekly Test",
            subject="Mathematics",
            creator="Sara",
            questions=tuple(
                make_question(n, option_count) for n in range(1, question_count + 1)
            ),
        )
    return _create


@pytest.fixture
def arabic_quiz() -> Quiz:
    """A small quiz in the wire format used by the web client."""
    return Quiz.from_dict({
        "title": "اختبار الأسبوع",
        "subject": "الرياضيات",
        "creator": "سارة",
        "questions": [
            {"question": "ما ناتج ٢ + ٢؟", "options": ["٣", "٤", "٥"], "correctAnswer": 1},
            {"question": "ما عاصمة مصر؟", "options": ["القاهرة", "دمشق"], "correctAnswer": 0},
        ],
    })


@pytest.fixture
def english_config() -> RenderConfig:
    """English labels with ASCII markers and no reversal, for readable assertions."""
    return RenderConfig(
        layout=LayoutConfig(),
        labels=replace(ENGLISH_LABELS, correct_marker="(x) ", other_marker="( ) "),
        direction=identity_text,
    )
