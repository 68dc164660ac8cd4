"""
Unit tests for layout configuration and labels.
"""

import pytest

from quiz_print.builder.layout import ARABIC_LABELS, ENGLISH_LABELS, LayoutConfig


class TestLayoutConfig:
    def test_defaults_when_created_then_content_starts_below_rule(self):
        config = LayoutConfig()
        assert config.top_margin + config.header_rule_offset == 55.0
        assert config.content_top == 65.0

    def test_block_height_when_options_then_includes_gap(self):
        config = LayoutConfig()
        assert config.block_height(0) == 20.0
        assert config.block_height(4) == 52.0

    def test_init_when_margins_exceed_height_then_raises_error(self):
        with pytest.raises(ValueError, match="Margins exceed page height"):
            LayoutConfig(page_height=40, top_margin=20, bottom_margin=20)

    def test_init_when_negative_line_height_then_raises_error(self):
        with pytest.raises(ValueError, match="line_height_option must be non-negative"):
            LayoutConfig(line_height_option=-1)

    def test_init_when_page_width_zero_then_raises_error(self):
        with pytest.raises(ValueError, match="page_width must be positive"):
            LayoutConfig(page_width=0)


class TestQuizLabels:
    def test_english_labels_when_formatted_then_match_expected_text(self):
        assert ENGLISH_LABELS.question_line(3, "Why?") == "Question 3: Why?"
        assert ENGLISH_LABELS.footer_line(2, 5) == "Page 2 of 5"
        assert ENGLISH_LABELS.count_line(7) == "Questions: 7"

    def test_arabic_labels_when_formatted_then_use_arabic_wording(self):
        assert ARABIC_LABELS.footer_line(1, 3) == "الصفحة 1 من 3"
        assert ARABIC_LABELS.subject_line("الرياضيات") == "المادة: الرياضيات"

    def test_option_line_when_correct_then_filled_marker(self):
        assert ARABIC_LABELS.option_line("x", True) == "★ x"
        assert ARABIC_LABELS.option_line("x", False) == "○ x"
