"""
Module: builder.layout.models

Purpose:
    Result and state models for the layout pass.

Key Classes:
    - LayoutContext: Mutable cursor state owned by one render
    - LayoutResult: Immutable summary of a finished layout

Used By:
    - builder.layout.engine: Creates and advances LayoutContext
    - builder.controller: Reports LayoutResult
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class LayoutContext:
    """
    Cursor state for one layout run.

    Exclusively owned by a single LayoutEngine.run() call and discarded
    when it returns; never shared between renders.

    Attributes:
        cursor_y: Baseline of the next line, mm from the page top
        page: Ordinal of the page content is being placed on
    """

    cursor_y: float
    page: int = 1

    def advance(self, amount: float) -> None:
        """Move the cursor down by amount mm."""
        self.cursor_y += amount


@dataclass(frozen=True)
class LayoutResult:
    """
    Final layout output with diagnostics.

    Attributes:
        page_count: Number of pages in the document
        question_pages: 1-based question number -> page ordinal it starts on
        warnings: Messages about lines placed below the bottom margin

    Example:
        >>> result = LayoutResult(page_count=2, question_pages={1: 1, 2: 1, 3: 2})
        >>> result.questions_on_page(2)
        [3]
    """

    page_count: int
    question_pages: dict[int, int] = field(default_factory=dict)
    warnings: list[str] = field(default_factory=list)

    def questions_on_page(self, ordinal: int) -> list[int]:
        """Numbers of the questions that start on page `ordinal`."""
        return [number for number, page in self.question_pages.items() if page == ordinal]
