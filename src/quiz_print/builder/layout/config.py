"""
Module: builder.layout.config

Purpose:
    Configuration for the quiz layout engine.
    Defines page size, margins, line heights and font sizes (all in mm / pt).

Key Classes:
    - LayoutConfig: Immutable layout configuration

Dependencies:
    - dataclasses (std)

Used By:
    - builder.layout.engine: Cursor and overflow arithmetic
    - builder.layout.footer: Footer position
    - builder.output.canvas_surface: Page size
"""

from __future__ import annotations

from dataclasses import dataclass


# A4 portrait in millimetres
DEFAULT_PAGE_WIDTH_MM = 210.0
DEFAULT_PAGE_HEIGHT_MM = 297.0


@dataclass(frozen=True)
class LayoutConfig:
    """
    Configuration for quiz layout (immutable).

    Vertical positions are measured in mm from the top edge of the page.
    Text is anchored on its baseline.

    Attributes:
        page_width: Page width in mm
        page_height: Page height in mm
        top_margin: Cursor position on a fresh page (mm)
        bottom_margin: Space kept free at the page bottom (mm)
        right_margin: Distance of the RTL text anchor from the right edge (mm)
        left_margin: Left end of the header rule (mm)
        line_height_question: Advance after a question line (mm)
        line_height_option: Advance after an option line (mm)
        block_trailing_gap: Gap after the last option of a question (mm)
        option_inset: Extra right inset of option lines (mm)
        header_line_spacing: Distance between header lines (mm)
        header_rule_offset: Rule position below top_margin (mm)
        header_gap: Gap between the rule and the first question (mm)
        footer_offset: Footer baseline distance from the page bottom (mm)
        keep_blocks_together: Move a whole question block to the next page
            when it does not fit, instead of checking the question line only

    Example:
        >>> config = LayoutConfig()
        >>> config.content_top
        65.0
        >>> config.block_height(4)
        52.0
    """

    # Page dimensions
    page_width: float = DEFAULT_PAGE_WIDTH_MM
    page_height: float = DEFAULT_PAGE_HEIGHT_MM

    # Margins
    top_margin: float = 20.0
    bottom_margin: float = 20.0
    right_margin: float = 20.0
    left_margin: float = 20.0

    # Question blocks
    line_height_question: float = 10.0
    line_height_option: float = 8.0
    block_trailing_gap: float = 10.0
    option_inset: float = 5.0

    # Header block (page 1 only)
    header_line_spacing: float = 10.0
    header_rule_offset: float = 35.0
    header_gap: float = 10.0
    rule_width: float = 0.5

    # Footer
    footer_offset: float = 10.0

    # Font sizes (pt)
    title_font_size: float = 24.0
    info_font_size: float = 14.0
    question_font_size: float = 16.0
    option_font_size: float = 12.0
    footer_font_size: float = 10.0

    # Behavior
    keep_blocks_together: bool = False

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.page_width <= 0:
            raise ValueError(f"page_width must be positive: {self.page_width}")
        if self.page_height <= 0:
            raise ValueError(f"page_height must be positive: {self.page_height}")
        for name in (
            "top_margin", "bottom_margin", "right_margin", "left_margin",
            "line_height_question", "line_height_option", "block_trailing_gap",
            "option_inset", "header_line_spacing", "header_rule_offset",
            "header_gap", "footer_offset",
        ):
            value = getattr(self, name)
            if value < 0:
                raise ValueError(f"{name} must be non-negative: {value}")
        if self.left_margin + self.right_margin >= self.page_width:
            raise ValueError("Margins exceed page width")
        if self.top_margin + self.bottom_margin >= self.page_height:
            raise ValueError("Margins exceed page height")

    @property
    def content_top(self) -> float:
        """Cursor position after the page-1 header block."""
        return self.top_margin + self.header_rule_offset + self.header_gap

    def block_height(self, option_count: int) -> float:
        """Vertical extent of one question block with option_count options."""
        return (
            self.line_height_question
            + option_count * self.line_height_option
            + self.block_trailing_gap
        )
