#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Line Flow Engine

Distributes shaped lines across the columns and pages of a PageGeometry:
- Column break when the next line does not fit (an exact fit breaks too)
- Column/page break after a paragraph that ended on a form feed
- Page furniture composed once per page

The engine holds no run state of its own: a FlowCursor is threaded through
step(), so engines can be reused and runs never interfere.

Version: 1.0.0
"""

from dataclasses import dataclass, field, replace
from typing import Callable, Generator, Iterable, List, Optional, Tuple, TYPE_CHECKING
import logging

from textps.contracts import (
    BeginPage,
    ColumnSeparator,
    DrawLine,
    EndPage,
    PlacementEvent,
    ShapedLine,
)

from .geometry import PageGeometry

if TYPE_CHECKING:
    from .header import HeaderFooterComposer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FlowCursor:
    """Position of the flow between two lines"""
    page_index: int = 1
    column: int = 0
    offset: float = 0  # shaping units used in the current column
    previous_form_feed: bool = False
    column_has_lines: bool = False


@dataclass
class FlowResult:
    """Fully materialized flow of a document"""
    events: List[PlacementEvent] = field(default_factory=list)
    page_count: int = 0

    def pages(self) -> List[List[PlacementEvent]]:
        """Events grouped per page, BeginPage..EndPage inclusive"""
        grouped: List[List[PlacementEvent]] = []
        for event in self.events:
            if isinstance(event, BeginPage):
                grouped.append([])
            grouped[-1].append(event)
        return grouped

    def lines_in(self, page_index: int, column_index: int) -> List[DrawLine]:
        """DrawLine events of one column of one page"""
        page = self.pages()[page_index - 1]
        return [
            event for event in page
            if isinstance(event, DrawLine) and event.column_index == column_index
        ]


class LineFlowEngine:
    """
    Turns a sequence of ShapedLines into PlacementEvents.

    Usage:
        engine = LineFlowEngine(geometry, composer)
        for event in engine.flow(lines):
            emitter.emit(event)

        # or, materialized
        result = engine.layout(lines)
        print(result.page_count)
    """

    def __init__(
        self,
        geometry: PageGeometry,
        composer: Optional["HeaderFooterComposer"] = None,
    ):
        """
        Initialize flow engine.

        Args:
            geometry: Final geometry (header/footer heights already measured)
            composer: Builds page headers/footers; None draws no furniture
        """
        self.geometry = geometry
        self.composer = composer
        self.column_height = geometry.column_height_units

    def initial_cursor(self) -> FlowCursor:
        return FlowCursor()

    def begin_page(self, page_index: int) -> BeginPage:
        """BeginPage event with the furniture of that page"""
        header = footer = None
        if self.composer is not None:
            if self.geometry.do_draw_header:
                header = self.composer.compose(page_index, self.geometry, is_footer=False)
            if self.geometry.do_draw_footer:
                footer = self.composer.compose(page_index, self.geometry, is_footer=True)
        return BeginPage(page_index, header=header, footer=footer)

    def must_break(self, cursor: FlowCursor, line: ShapedLine) -> bool:
        """Whether line has to start in the next column"""
        if cursor.previous_form_feed:
            return True
        # The first line of a column is always placed, however tall
        if not cursor.column_has_lines:
            return False
        return cursor.offset + line.height >= self.column_height

    def step(
        self,
        cursor: FlowCursor,
        line: ShapedLine,
    ) -> Tuple[FlowCursor, List[PlacementEvent]]:
        """
        Place one line.

        Args:
            cursor: Flow position before the line
            line: Next line in input order

        Returns:
            (cursor after the line, events produced for it)
        """
        events: List[PlacementEvent] = []

        if self.must_break(cursor, line):
            column = cursor.column + 1
            page_index = cursor.page_index
            if column == self.geometry.num_columns:
                column = 0
                events.append(EndPage(page_index))
                page_index += 1
                events.append(self.begin_page(page_index))
            elif self.geometry.do_separation_line:
                events.append(ColumnSeparator(column))
            cursor = replace(
                cursor,
                page_index=page_index,
                column=column,
                offset=0,
                column_has_lines=False,
            )

        offset = cursor.offset + line.height
        events.append(DrawLine(cursor.column, offset, line))

        cursor = replace(
            cursor,
            offset=offset,
            previous_form_feed=line.is_form_feed_terminated,
            column_has_lines=True,
        )
        return cursor, events

    def flow(self, lines: Iterable[ShapedLine]) -> Generator[PlacementEvent, None, int]:
        """
        Lazily produce the events of a whole document.

        Args:
            lines: ShapedLines in input order

        Yields:
            PlacementEvents in document order

        Returns:
            Page count, as the value of the final StopIteration
        """
        cursor = self.initial_cursor()
        yield self.begin_page(cursor.page_index)

        line_count = 0
        for line in lines:
            cursor, events = self.step(cursor, line)
            line_count += 1
            yield from events

        yield EndPage(cursor.page_index)

        logger.info(f"Flow complete: {line_count} lines across {cursor.page_index} pages")
        return cursor.page_index

    def layout(self, lines: Iterable[ShapedLine]) -> FlowResult:
        """Run flow() to completion"""
        result = FlowResult()
        result.page_count = drain_flow(self.flow(lines), result.events.append)
        return result


def drain_flow(events: Generator[PlacementEvent, None, int], consume: Callable) -> int:
    """
    Feed every event of a flow to consume.

    Returns:
        The page count the flow returned
    """
    while True:
        try:
            event = next(events)
        except StopIteration as done:
            return done.value
        consume(event)
