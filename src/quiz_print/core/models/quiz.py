"""
Module: quiz

Purpose:
    Provides the Quiz and QuizQuestion dataclasses - the content model the
    layout engine renders. Every display string is already resolved and
    localized by the caller (subject code -> subject name, user -> creator).

Key Classes:
    - QuizQuestion: Prompt, ordered options and the index of the correct one
    - Quiz: Title, subject, creator and the ordered questions

Dependencies:
    - dataclasses (std)

Used By:
    - core.utils.serialization
    - builder.layout.engine
    - builder.controller

Wire Format:
    to_dict()/from_dict() use the same keys as the web client's shared
    question schema ("question", "options", "correctAnswer") so payloads can
    be passed through unchanged.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable


@dataclass(frozen=True)
class QuizQuestion:
    """
    A single multiple-choice question (immutable).

    Attributes:
        prompt: Question text
        options: Ordered answer options
        correct_index: 0-based index of the correct option

    Invariants:
        - correct_index is NOT range-checked. An out-of-range value is a
          legal question that simply renders with no option marked.
        - options may be empty; the question line is still emitted.

    Example:
        >>> q = QuizQuestion("2 + 2 = ?", ("3", "4"), correct_index=1)
        >>> q.is_correct(1)
        True
    """

    prompt: str
    options: tuple[str, ...]
    correct_index: int

    def __post_init__(self) -> None:
        """Validate field types on construction."""
        if not isinstance(self.prompt, str):
            raise ValueError(f"prompt must be a string: {self.prompt!r}")
        # Accept any iterable of strings but store a tuple
        options = tuple(self.options)
        for i, option in enumerate(options):
            if not isinstance(option, str):
                raise ValueError(f"option {i} must be a string: {option!r}")
        object.__setattr__(self, "options", options)
        if isinstance(self.correct_index, bool) or not isinstance(self.correct_index, int):
            raise ValueError(f"correct_index must be an integer: {self.correct_index!r}")

    @property
    def option_count(self) -> int:
        """Number of answer options."""
        return len(self.options)

    @property
    def has_valid_answer(self) -> bool:
        """True if correct_index points at an existing option."""
        return 0 <= self.correct_index < len(self.options)

    def is_correct(self, option_index: int) -> bool:
        """Check whether the option at option_index is the marked answer."""
        return option_index == self.correct_index

    def to_dict(self) -> dict[str, Any]:
        """Serialize using the web client's wire keys."""
        return {
            "question": self.prompt,
            "options": list(self.options),
            "correctAnswer": self.correct_index,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> QuizQuestion:
        """
        Deserialize from a dictionary.

        Accepts both the wire keys ("question", "correctAnswer") and the
        attribute names ("prompt", "correct_index").
        """
        prompt = data["question"] if "question" in data else data["prompt"]
        correct = data["correctAnswer"] if "correctAnswer" in data else data["correct_index"]
        return cls(
            prompt=prompt,
            options=tuple(data.get("options", ())),
            correct_index=correct,
        )


@dataclass(frozen=True)
class Quiz:
    """
    Complete quiz to render (immutable).

    Attributes:
        title: Quiz title
        subject: Subject display name (already resolved from its code)
        creator: Creator display name
        questions: Ordered questions; may be empty

    Example:
        >>> quiz = Quiz("Weekly test", "Mathematics", "Sara", questions=())
        >>> quiz.question_count
        0
    """

    title: str
    subject: str
    creator: str
    questions: tuple[QuizQuestion, ...] = ()

    def __post_init__(self) -> None:
        """Validate field types on construction."""
        for name in ("title", "subject", "creator"):
            value = getattr(self, name)
            if not isinstance(value, str):
                raise ValueError(f"{name} must be a string: {value!r}")
        questions = tuple(self.questions)
        for i, question in enumerate(questions):
            if not isinstance(question, QuizQuestion):
                raise ValueError(f"questions[{i}] must be a QuizQuestion: {question!r}")
        object.__setattr__(self, "questions", questions)

    @property
    def question_count(self) -> int:
        """Number of questions in the quiz."""
        return len(self.questions)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-compatible dictionary."""
        return {
            "title": self.title,
            "subject": self.subject,
            "creator": self.creator,
            "questions": [q.to_dict() for q in self.questions],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Quiz:
        """Deserialize from a dictionary produced by to_dict()."""
        return cls(
            title=data["title"],
            subject=data["subject"],
            creator=data["creator"],
            questions=_questions_from(data.get("questions", ())),
        )


def _questions_from(items: Iterable[dict[str, Any]]) -> tuple[QuizQuestion, ...]:
    return tuple(QuizQuestion.from_dict(item) for item in items)
