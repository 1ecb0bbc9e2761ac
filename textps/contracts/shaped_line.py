#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Shaped Line Contract

What the shaping side hands to the flow engine. The engine reads only the
extents and the two flags; the render token goes back to the shaper
untouched when the emitter needs PostScript for the line.
"""

from dataclasses import dataclass
from typing import Iterable, Protocol, runtime_checkable


@runtime_checkable
class RenderToken(Protocol):
    """Opaque handle that serializes one shaped line at a position"""

    def to_postscript(self, x: float, y: float) -> str:
        """
        Return PostScript drawing the line with its box bottom-left at (x, y).

        Args:
            x: Absolute x in points
            y: Absolute y in points (bottom of the line box)
        """
        ...


@dataclass(frozen=True)
class ShapedLine:
    """One measured line of text, extents in shaping units"""
    width: float
    height: float
    is_paragraph_end: bool = False
    is_form_feed_terminated: bool = False
    render_token: RenderToken = None


@runtime_checkable
class ShapingCollaborator(Protocol):
    """The text shaper, as seen by the header composer and the emitter"""

    pt_to_unit: float

    def shape_label(self, text: str, font=None) -> ShapedLine:
        """Shape a single unwrapped line of text"""
        ...

    def resource_definitions(self) -> str:
        """PostScript prologue resources needed by the tokens handed out so far"""
        ...


def total_height(lines: Iterable[ShapedLine]) -> float:
    """Sum of line heights"""
    return sum(line.height for line in lines)
