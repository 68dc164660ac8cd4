"""
Module: builder.output.surface

Purpose:
    Abstract interface for the paginated drawing surface the layout engine
    draws on. Keeps the engine independent of the PDF library.

Key Classes:
    - DrawingSurface: Abstract base class for multi-page drawing
    - Align: Horizontal text anchoring
    - FontWeight: Regular / bold selection
    - DrawingError: Exception for rejected drawing operations

Used By:
    - builder.layout.engine: Content pass
    - builder.layout.footer: Footer pass
    - builder.output.canvas_surface: ReportLab implementation
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum


class DrawingError(Exception):
    """The drawing surface rejected an operation."""
    pass


class Align(str, Enum):
    """Horizontal anchoring of a text run relative to its x coordinate."""

    LEFT = "left"
    RIGHT = "right"
    CENTER = "center"


class FontWeight(str, Enum):
    """Font weight; the surface maps each to a concrete font name."""

    NORMAL = "normal"
    BOLD = "bold"


class DrawingSurface(ABC):
    """
    Abstract multi-page canvas.

    Coordinates are in mm with y measured from the top of the page.
    Pages are addressed by 1-based ordinal, are created in append order and
    are never removed. A new surface starts with one page, already active.

    Text passed to draw_text is placed as-is: direction adjustment is the
    caller's job.
    """

    @property
    @abstractmethod
    def page_width(self) -> float:
        """Width of every page in mm."""

    @property
    @abstractmethod
    def page_height(self) -> float:
        """Height of every page in mm."""

    @property
    @abstractmethod
    def page_count(self) -> int:
        """Number of pages created so far."""

    @property
    @abstractmethod
    def active_page(self) -> int:
        """Ordinal of the page currently receiving draw calls."""

    @abstractmethod
    def set_font(self, weight: FontWeight, size: float) -> None:
        """
        Select the font for subsequent draw_text calls.

        Raises:
            DrawingError: If the font cannot be resolved
        """

    @abstractmethod
    def draw_text(self, text: str, x: float, y: float, align: Align = Align.RIGHT) -> None:
        """Draw text with its baseline at y, anchored at x per align."""

    @abstractmethod
    def draw_line(self, x1: float, y1: float, x2: float, y2: float, width: float = 0.5) -> None:
        """Draw a straight rule between two points."""

    @abstractmethod
    def add_page(self) -> int:
        """Append a page, make it active and return its ordinal."""

    @abstractmethod
    def set_active_page(self, ordinal: int) -> None:
        """
        Switch drawing to an existing page.

        Raises:
            DrawingError: If ordinal is not in 1..page_count
        """

    def set_metadata(self, *, title: str = "", author: str = "", subject: str = "") -> None:
        """Record document metadata; surfaces without metadata ignore it."""

    @abstractmethod
    def export_binary(self) -> bytes:
        """
        Finalize and serialize the whole document.

        May only be called once.

        Raises:
            DrawingError: On a second call or if serialization fails
        """
