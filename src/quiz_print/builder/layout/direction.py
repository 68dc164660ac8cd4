"""
Module: builder.layout.direction

Purpose:
    Text direction adapters. Turn a logical (reading-order) string into the
    glyph order handed to the drawing surface.

Key Functions:
    - reverse_text(): Simplified RTL policy, full character reversal
    - identity_text(): No-op adapter for LTR content

Known Limitation:
    reverse_text is NOT a bidi algorithm. Embedded Latin words and numerals
    are reversed along with the Arabic text ("Q12" comes out as "21Q") and
    no contextual shaping is applied. Swap in another DirectionAdapter via
    RenderConfig to change the policy.
"""

from __future__ import annotations

from typing import Callable

DirectionAdapter = Callable[[str], str]


def reverse_text(text: str) -> str:
    """
    Reverse the character sequence of text.

    Self-inverse: reverse_text(reverse_text(s)) == s.

    Example:
        >>> reverse_text("abc")
        'cba'
    """
    return text[::-1]


def identity_text(text: str) -> str:
    """Return text unchanged."""
    return text


DIRECTION_ADAPTERS: dict[str, DirectionAdapter] = {
    "rtl": reverse_text,
    "ltr": identity_text,
}
