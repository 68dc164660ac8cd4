"""
Module: builder.layout.labels

Purpose:
    Display templates for every generated line of text. Defaults reproduce
    the Arabic wording of the web client; ENGLISH_LABELS is provided for
    English quizzes and for readable test assertions.

Key Classes:
    - QuizLabels: Immutable set of line templates and answer markers
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class QuizLabels:
    """
    Line templates (immutable).

    Templates use str.format fields: {subject}, {creator}, {count},
    {number}, {prompt}, {page}, {total}.
    """

    subject: str = "المادة: {subject}"
    creator: str = "المنشئ: {creator}"
    question_count: str = "عدد الأسئلة: {count}"
    question: str = "السؤال {number}: {prompt}"
    footer: str = "الصفحة {page} من {total}"
    correct_marker: str = "★ "
    other_marker: str = "○ "

    def subject_line(self, subject: str) -> str:
        return self.subject.format(subject=subject)

    def creator_line(self, creator: str) -> str:
        return self.creator.format(creator=creator)

    def count_line(self, count: int) -> str:
        return self.question_count.format(count=count)

    def question_line(self, number: int, prompt: str) -> str:
        return self.question.format(number=number, prompt=prompt)

    def option_line(self, option: str, is_correct: bool) -> str:
        marker = self.correct_marker if is_correct else self.other_marker
        return f"{marker}{option}"

    def footer_line(self, page: int, total: int) -> str:
        return self.footer.format(page=page, total=total)


ARABIC_LABELS = QuizLabels()

ENGLISH_LABELS = QuizLabels(
    subject="Subject: {subject}",
    creator="Creator: {creator}",
    question_count="Questions: {count}",
    question="Question {number}: {prompt}",
    footer="Page {page} of {total}",
)

LABEL_PRESETS = {
    "ar": ARABIC_LABELS,
    "en": ENGLISH_LABELS,
}
