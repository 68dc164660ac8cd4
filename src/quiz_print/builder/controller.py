"""
Module: builder.controller

Purpose:
    Orchestrate a complete quiz render.
    Surface → Content pass → Footer pass → Export

Key Functions:
    - render_quiz(): Quiz → PDF bytes; never raises
    - render_quiz_to_file(): Render and write to disk, with a summary
    - build_document(): Strict variant that propagates failures

Key Classes:
    - RenderResult: Summary of a file render

Error Policy:
    render_quiz() and render_quiz_to_file() catch every failure, log it and
    return FALLBACK_PAYLOAD instead of a PDF. Callers detect that case with
    is_fallback() or the content type; they never get a partial document.

Concurrency:
    Every call builds its own surface through the surface factory. Surfaces
    and layout state are never shared, so concurrent renders need no locks
    as long as a factory never hands out the same surface twice.

Dependencies:
    - builder.layout: LayoutEngine, stamp_footers
    - builder.output: CanvasSurface, fallback payload

Used By:
    - quiz_print.cli: Command line rendering
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional, Tuple

from quiz_print.core.models import Quiz

from .config import RenderConfig
from .layout import LayoutEngine, LayoutResult, stamp_footers
from .output import (
    CanvasSurface,
    DrawingSurface,
    FALLBACK_PAYLOAD,
    content_type_of,
)

logger = logging.getLogger(__name__)

SurfaceFactory = Callable[[RenderConfig], DrawingSurface]


@dataclass(frozen=True)
class RenderResult:
    """
    Summary of a render written to disk (immutable).

    Attributes:
        output_path: File the payload was written to
        content_type: "application/pdf" or "text/plain" for the fallback
        page_count: Pages in the document (0 for the fallback)
        is_fallback: True if rendering failed and the fallback was written
        warnings: Layout warnings (options below the bottom margin, etc.)
        size_bytes: Size of the written payload

    Example:
        >>> result = render_quiz_to_file(quiz, Path("out/quiz.pdf"))
        >>> print(f"Wrote {result.page_count} pages")
    """

    output_path: Path
    content_type: str
    page_count: int
    is_fallback: bool
    warnings: tuple[str, ...] = ()
    size_bytes: int = 0


def create_surface(config: RenderConfig) -> DrawingSurface:
    """Default surface factory: a fresh ReportLab surface per render."""
    return CanvasSurface(
        page_width=config.layout.page_width,
        page_height=config.layout.page_height,
        fonts=config.fonts,
    )


def build_document(
    quiz: Quiz,
    config: Optional[RenderConfig] = None,
    *,
    surface_factory: Optional[SurfaceFactory] = None,
) -> Tuple[bytes, LayoutResult]:
    """
    Render a quiz, propagating any failure.

    Args:
        quiz: Content to render
        config: Render configuration (defaults to Arabic labels on A4)
        surface_factory: Builds the drawing surface; called once per render

    Returns:
        (PDF bytes, layout result)

    Raises:
        DrawingError: If the surface rejects an operation
    """
    config = config or RenderConfig()
    factory = surface_factory or create_surface

    surface = factory(config)
    surface.set_metadata(title=quiz.title, author=quiz.creator, subject=quiz.subject)

    engine = LayoutEngine(surface, config.layout, config.labels, config.direction)
    layout = engine.run(quiz)
    stamp_footers(surface, config.layout, config.labels, config.direction)

    return surface.export_binary(), layout


def render_quiz(
    quiz: Quiz,
    config: Optional[RenderConfig] = None,
    *,
    surface_factory: Optional[SurfaceFactory] = None,
) -> bytes:
    """
    Render a quiz to PDF bytes.

    Never raises: on any failure the error is logged and FALLBACK_PAYLOAD
    is returned instead.

    Example:
        >>> data = render_quiz(quiz)
        >>> is_fallback(data)
        False
    """
    data, _ = _render_safely(quiz, config, surface_factory)
    return data


def render_quiz_to_file(
    quiz: Quiz,
    output_path: Path,
    config: Optional[RenderConfig] = None,
    *,
    surface_factory: Optional[SurfaceFactory] = None,
) -> RenderResult:
    """
    Render a quiz and write the payload to output_path.

    The fallback payload is written too, so the file always reflects the
    outcome; check RenderResult.is_fallback.

    Raises:
        OSError: If the file cannot be written
    """
    data, layout = _render_safely(quiz, config, surface_factory)

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_bytes(data)

    result = RenderResult(
        output_path=output_path,
        content_type=content_type_of(data),
        page_count=layout.page_count if layout else 0,
        is_fallback=layout is None,
        warnings=tuple(layout.warnings) if layout else (),
        size_bytes=len(data),
    )
    logger.info(f"Wrote {result.size_bytes} bytes ({result.content_type}) to {output_path}")
    return result


def _render_safely(
    quiz: Quiz,
    config: Optional[RenderConfig],
    surface_factory: Optional[SurfaceFactory],
) -> Tuple[bytes, Optional[LayoutResult]]:
    """Run build_document, converting any failure to the fallback payload."""
    start_time = time.perf_counter()
    try:
        data, layout = build_document(quiz, config, surface_factory=surface_factory)
    except Exception:
        logger.exception(f"Error generating PDF for quiz {quiz.title!r}")
        return FALLBACK_PAYLOAD, None

    elapsed = time.perf_counter() - start_time
    logger.info(f"Rendered {layout.page_count} pages in {elapsed:.2f}s")
    return data, layout
