"""
Module: builder.layout.engine

Purpose:
    Place quiz content onto a DrawingSurface: the page-1 header block, then
    one block per question (question line + option lines), opening new
    pages as the cursor reaches the bottom margin.

Key Classes:
    - LayoutEngine: Content pass over a single surface

Algorithm:
    1. Header (page 1 only, no overflow check): title, subject, creator,
       question count, horizontal rule. Cursor moves below the rule.
    2. For each question:
       a. Overflow check. Default: only the question line must fit,
          cursor_y + line_height_question > page_height - bottom_margin
          opens a new page. With keep_blocks_together the question line
          plus all option lines must fit instead.
       b. Question line, right-aligned at page_width - right_margin.
       c. Option lines, right-aligned option_inset further in, with the
          correct marker on the option at correct_index. No per-option
          check, so options may run below the bottom margin (reported as
          a warning in the LayoutResult).
       d. Trailing gap.
    Footers are NOT drawn here; see builder.layout.footer.

Dependencies:
    - builder.output.surface: DrawingSurface, Align, FontWeight
    - builder.layout.config: LayoutConfig
    - builder.layout.labels: QuizLabels

Used By:
    - builder.controller: Render orchestration
"""

from __future__ import annotations

import logging
from typing import Optional

from quiz_print.core.models import Quiz, QuizQuestion

from ..output.surface import Align, DrawingSurface, FontWeight
from .config import LayoutConfig
from .direction import DirectionAdapter, reverse_text
from .labels import QuizLabels
from .models import LayoutContext, LayoutResult

logger = logging.getLogger(__name__)


class LayoutEngine:
    """
    Content pass for one quiz on one surface.

    The engine owns the cursor for the duration of run(); the surface must
    not be shared with any other render.

    Example:
        >>> engine = LayoutEngine(CanvasSurface(), LayoutConfig())
        >>> result = engine.run(quiz)
        >>> result.page_count
        1
    """

    def __init__(
        self,
        surface: DrawingSurface,
        config: LayoutConfig,
        labels: Optional[QuizLabels] = None,
        direction: DirectionAdapter = reverse_text,
    ) -> None:
        self.surface = surface
        self.config = config
        self.labels = labels or QuizLabels()
        self.direction = direction

    def run(self, quiz: Quiz) -> LayoutResult:
        """
        Lay out the header and every question.

        Args:
            quiz: Content to place

        Returns:
            LayoutResult with the page count after the content pass

        Raises:
            DrawingError: If the surface rejects an operation
        """
        ctx = LayoutContext(cursor_y=self.config.top_margin, page=self.surface.active_page)
        question_pages: dict[int, int] = {}
        warnings: list[str] = []

        self._emit_header(ctx, quiz)

        for number, question in enumerate(quiz.questions, start=1):
            self._break_page_if_needed(ctx, question, number, warnings)
            self._emit_question(ctx, question, number, question_pages, warnings)

        page_count = self.surface.page_count
        logger.info(f"Laid out {quiz.question_count} questions onto {page_count} pages")
        return LayoutResult(
            page_count=page_count,
            question_pages=question_pages,
            warnings=warnings,
        )

    # ─────────────────────────────────────────────────────────────────────
    # Header
    # ─────────────────────────────────────────────────────────────────────

    def _emit_header(self, ctx: LayoutContext, quiz: Quiz) -> None:
        """Draw the page-1 header and move the cursor below its rule."""
        cfg = self.config
        x = self._text_anchor()
        top = cfg.top_margin

        self.surface.set_font(FontWeight.BOLD, cfg.title_font_size)
        self._draw(quiz.title, x, top)

        self.surface.set_font(FontWeight.NORMAL, cfg.info_font_size)
        info_lines = (
            self.labels.subject_line(quiz.subject),
            self.labels.creator_line(quiz.creator),
            self.labels.count_line(quiz.question_count),
        )
        for i, line in enumerate(info_lines, start=1):
            self._draw(line, x, top + i * cfg.header_line_spacing)

        rule_y = top + cfg.header_rule_offset
        self.surface.draw_line(
            cfg.left_margin, rule_y,
            self.surface.page_width - cfg.right_margin, rule_y,
            width=cfg.rule_width,
        )
        ctx.cursor_y = cfg.content_top

    # ─────────────────────────────────────────────────────────────────────
    # Question blocks
    # ─────────────────────────────────────────────────────────────────────

    def _break_page_if_needed(
        self,
        ctx: LayoutContext,
        question: QuizQuestion,
        number: int,
        warnings: list[str],
    ) -> None:
        """Open a new page when the next block does not fit the current one."""
        cfg = self.config
        needed = cfg.line_height_question
        if cfg.keep_blocks_together:
            needed += question.option_count * cfg.line_height_option

        if ctx.cursor_y + needed <= self._page_bottom():
            return

        ctx.page = self.surface.add_page()
        ctx.cursor_y = cfg.top_margin
        logger.debug(f"Question {number} starts page {ctx.page}")

        if cfg.keep_blocks_together and ctx.cursor_y + needed > self._page_bottom():
            message = (
                f"Question {number} needs {needed:.1f}mm but a page only holds "
                f"{self._page_bottom() - cfg.top_margin:.1f}mm"
            )
            logger.warning(message)
            warnings.append(message)

    def _emit_question(
        self,
        ctx: LayoutContext,
        question: QuizQuestion,
        number: int,
        question_pages: dict[int, int],
        warnings: list[str],
    ) -> None:
        """Draw one question line and its options at the cursor."""
        cfg = self.config
        question_pages[number] = ctx.page

        self.surface.set_font(FontWeight.BOLD, cfg.question_font_size)
        self._draw(self.labels.question_line(number, question.prompt), self._text_anchor(), ctx.cursor_y)
        ctx.advance(cfg.line_height_question)

        if not question.has_valid_answer:
            logger.debug(f"Question {number}: correct index {question.correct_index} marks no option")

        self.surface.set_font(FontWeight.NORMAL, cfg.option_font_size)
        option_x = self.surface.page_width - cfg.right_margin - cfg.option_inset
        overflowed = False
        for index, option in enumerate(question.options):
            if ctx.cursor_y > self._page_bottom():
                overflowed = True
            line = self.labels.option_line(option, question.is_correct(index))
            self._draw(line, option_x, ctx.cursor_y)
            ctx.advance(cfg.line_height_option)

        if overflowed:
            message = f"Question {number}: options run below the bottom margin on page {ctx.page}"
            logger.warning(message)
            warnings.append(message)

        ctx.advance(cfg.block_trailing_gap)

    # ─────────────────────────────────────────────────────────────────────
    # Helpers
    # ─────────────────────────────────────────────────────────────────────

    def _draw(self, logical_text: str, x: float, y: float) -> None:
        self.surface.draw_text(self.direction(logical_text), x, y, Align.RIGHT)

    def _text_anchor(self) -> float:
        return self.surface.page_width - self.config.right_margin

    def _page_bottom(self) -> float:
        return self.surface.page_height - self.config.bottom_margin

