#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Placement Events

The flow engine describes a document as an ordered stream of these
events; the document emitter renders them one by one.

    BeginPage(1) DrawLine... [ColumnSeparator DrawLine...] EndPage(1)
    BeginPage(2) ...

Version: 1.0.0
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple, Union

from .shaped_line import ShapedLine


@dataclass(frozen=True)
class HeaderCell:
    """One positioned text cell of a header or footer"""
    text: str
    x: float
    y: float
    line: ShapedLine


@dataclass(frozen=True)
class HeaderLayout:
    """Three-cell header (or footer) composed for one page"""
    page_index: int
    cells: Tuple[HeaderCell, ...]
    height: float                      # points
    rule: Tuple[float, float, float]   # (x_start, x_end, y) of the separator
    is_footer: bool = False

    @property
    def left(self) -> HeaderCell:
        return self.cells[0]

    @property
    def center(self) -> HeaderCell:
        return self.cells[1]

    @property
    def right(self) -> HeaderCell:
        return self.cells[2]


@dataclass(frozen=True)
class BeginPage:
    page_index: int
    header: Optional[HeaderLayout] = None
    footer: Optional[HeaderLayout] = None


@dataclass(frozen=True)
class DrawLine:
    column_index: int
    vertical_offset: float  # shaping units, cumulative including this line
    line: ShapedLine = field(repr=False)


@dataclass(frozen=True)
class ColumnSeparator:
    column_index: int  # the column being entered


@dataclass(frozen=True)
class EndPage:
    page_index: int


PlacementEvent = Union[BeginPage, DrawLine, ColumnSeparator, EndPage]
