"""
Command line entry point: render a quiz JSON file to PDF.

Usage:
    quiz-print quiz.json -o quiz.pdf [--labels ar|en] [--direction rtl|ltr] [--font PATH]
               [--bold-font PATH] [--system-font] [--keep-blocks-together] [-v]

Exit codes:
    0 PDF written, 1 rendering failed (fallback payload written),
    2 input could not be loaded or validated.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from quiz_print import __version__
from quiz_print.builder import RenderConfig, render_quiz_to_file
from quiz_print.builder.layout import DIRECTION_ADAPTERS, LABEL_PRESETS, LayoutConfig
from quiz_print.builder.output import FontConfig, find_arabic_font
from quiz_print.core import ValidationError, load_quiz

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FALLBACK = 1
EXIT_BAD_INPUT = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="quiz-print",
        description="Render a quiz JSON file to a paginated right-to-left PDF",
    )
    parser.add_argument("input", type=Path, help="Quiz JSON file")
    parser.add_argument(
        "-o", "--output", type=Path, default=None,
        help="Output PDF path (default: input name with .pdf)",
    )
    parser.add_argument(
        "--labels", choices=sorted(LABEL_PRESETS), default="ar",
        help="Wording of generated lines (default: ar)",
    )
    parser.add_argument(
        "--direction", choices=sorted(DIRECTION_ADAPTERS), default="rtl",
        help="rtl reverses every line before drawing (default: rtl)",
    )
    parser.add_argument("--font", type=Path, default=None, help="TTF file for regular text")
    parser.add_argument("--bold-font", type=Path, default=None, help="TTF file for bold text")
    parser.add_argument(
        "--system-font", action="store_true",
        help="Look for an installed Arabic-capable font when --font is not given",
    )
    parser.add_argument(
        "--keep-blocks-together", action="store_true",
        help="Move a whole question to the next page when its options do not fit",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _font_config(args: argparse.Namespace) -> FontConfig:
    if args.font:
        return FontConfig.from_files(args.font, args.bold_font)
    if args.system_font:
        found = find_arabic_font()
        if found:
            return found
    return FontConfig()


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(message)s",
    )

    try:
        quiz = load_quiz(args.input)
    except (OSError, ValidationError, ValueError) as e:
        logger.error(f"Cannot load {args.input}: {e}")
        for problem in getattr(e, "errors", []):
            logger.error(f"  {problem}")
        return EXIT_BAD_INPUT

    config = RenderConfig(
        layout=LayoutConfig(keep_blocks_together=args.keep_blocks_together),
        labels=LABEL_PRESETS[args.labels],
        fonts=_font_config(args),
        direction=DIRECTION_ADAPTERS[args.direction],
    )
    output = args.output or args.input.with_suffix(".pdf")
    result = render_quiz_to_file(quiz, output, config)

    if result.is_fallback:
        logger.error(f"Rendering failed; wrote fallback payload to {output}")
        return EXIT_FALLBACK

    logger.info(f"Wrote {result.page_count} pages to {output}")
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
