#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Document Emitter

Streams a PostScript document out of placement events.

    emitter = DocumentEmitter(sys.stdout, geometry, shaper, title="notes.txt")
    emitter.begin_document()
    for event in engine.flow(lines):
        emitter.emit(event)
    emitter.finalize(page_count)

The prologue is written on begin_document(). Page bodies are buffered
until finalize(), because the font resources the shaper hands out are only
known once every line has been drawn and must precede %%EndProlog.

Version: 1.0.0
"""

from enum import Enum
from io import StringIO
from typing import Optional, TextIO
import logging

from textps.contracts import (
    BeginPage,
    ColumnSeparator,
    DrawLine,
    EmitterStateError,
    EndPage,
    HeaderLayout,
    PlacementEvent,
    ShapingCollaborator,
)
from textps.layout.geometry import PageGeometry

from .numbers import ps_number
from .prologue import render_header, render_setup, render_trailer

logger = logging.getLogger(__name__)


class EmitterState(Enum):
    """Lifecycle of a DocumentEmitter"""
    UNINITIALIZED = "uninitialized"
    PROLOGUE_EMITTED = "prologue_emitted"
    BODY_EMITTING = "body_emitting"
    FINALIZED = "finalized"


class DocumentEmitter:
    """
    Writes prologue, pages and trailer of one document to a text sink.

    The emitter is the only writer to the sink. Driving it out of order
    raises EmitterStateError.
    """

    def __init__(
        self,
        sink: TextIO,
        geometry: PageGeometry,
        shaper: ShapingCollaborator,
        title: str = "stdin",
    ):
        """
        Initialize emitter.

        Args:
            sink: Text stream receiving the document
            geometry: Final geometry
            shaper: Collaborator owning the render tokens and font resources
            title: Value of the %%Title comment
        """
        self.sink = sink
        self.geometry = geometry
        self.shaper = shaper
        self.title = title

        self.state = EmitterState.UNINITIALIZED
        self.pages_emitted = 0
        self.current_page: Optional[int] = None
        self._body = StringIO()

        self._handlers = {
            BeginPage: self.begin_page,
            DrawLine: self.draw_line,
            ColumnSeparator: self.column_separator,
            EndPage: self.end_page,
        }

    # ------------------------------------------------------------------
    # State machine
    # ------------------------------------------------------------------

    def _require_body(self, operation: str) -> None:
        if self.state not in (EmitterState.PROLOGUE_EMITTED, EmitterState.BODY_EMITTING):
            raise EmitterStateError(operation, self.state.value)

    def _require_open_page(self, operation: str) -> None:
        self._require_body(operation)
        if self.current_page is None:
            raise EmitterStateError(operation, "outside a page")

    def begin_document(self) -> None:
        """Write the document prologue"""
        if self.state is not EmitterState.UNINITIALIZED:
            raise EmitterStateError("begin the document", self.state.value)

        self.sink.write(render_header(self.geometry, self.title))
        self.state = EmitterState.PROLOGUE_EMITTED
        logger.debug("Prologue written")

    def emit(self, event: PlacementEvent) -> None:
        """Render one placement event"""
        handler = self._handlers.get(type(event))
        if handler is None:
            raise TypeError(f"Not a placement event: {event!r}")
        handler(event)

    def finalize(self, page_count: int) -> None:
        """
        Write font resources, setup, buffered pages and the trailer.

        Args:
            page_count: Page count reported by the flow engine
        """
        if self.state is not EmitterState.BODY_EMITTING:
            raise EmitterStateError("finalize", self.state.value)
        if self.current_page is not None:
            raise EmitterStateError("finalize", f"inside page {self.current_page}")
        if self.pages_emitted == 0:
            raise EmitterStateError("finalize", "holding no pages")
        if page_count != self.pages_emitted:
            raise EmitterStateError(
                f"finalize with {page_count} pages",
                f"holding {self.pages_emitted} emitted pages",
            )

        self.sink.write(self.shaper.resource_definitions())
        self.sink.write("%%EndProlog\n")
        self.sink.write(render_setup(self.geometry))
        self.sink.write(self._body.getvalue())
        self.sink.write(render_trailer(page_count))

        self._body = StringIO()
        self.state = EmitterState.FINALIZED
        logger.info(f"Document finalized: {page_count} pages")

    # ------------------------------------------------------------------
    # Body
    # ------------------------------------------------------------------

    def begin_page(self, event: BeginPage) -> None:
        self._require_body("begin a page")
        if self.current_page is not None:
            raise EmitterStateError(f"begin page {event.page_index}", f"inside page {self.current_page}")

        self.state = EmitterState.BODY_EMITTING
        self.current_page = event.page_index
        self.pages_emitted += 1
        self._body.write(f"%%Page: {event.page_index} {event.page_index}\ntextps_bop\n")

        if self.geometry.do_draw_contour:
            self._draw_contour()
        if event.header is not None:
            self._draw_furniture(event.header)
        if event.footer is not None:
            self._draw_furniture(event.footer)

    def draw_line(self, event: DrawLine) -> None:
        self._require_open_page("draw a line")
        geometry = self.geometry

        x_pos = geometry.column_x(event.column_index)
        # Do right aligned column layout for rtl direction
        if geometry.rtl:
            x_pos += geometry.column_width - event.line.width * geometry.unit_to_pt
        y_pos = geometry.body_top - event.vertical_offset * geometry.unit_to_pt

        self._body.write(event.line.render_token.to_postscript(x_pos, y_pos))

    def column_separator(self, event: ColumnSeparator) -> None:
        """Vertical rule centered in the gutter before the entered column"""
        self._require_open_page("draw a column separator")
        geometry = self.geometry

        slot = event.column_index
        if geometry.rtl:
            slot = geometry.num_columns - event.column_index
        x_pos = (
            geometry.left_margin
            + slot * geometry.column_width
            + (slot - 0.5) * geometry.gutter_width
        )
        y_top = geometry.body_top + geometry.header_sep / 2
        y_bot = geometry.body_bottom - geometry.footer_sep / 2
        self._stroke(x_pos, y_top, x_pos, y_bot)

    def end_page(self, event: EndPage) -> None:
        self._require_open_page("end a page")
        if event.page_index != self.current_page:
            raise EmitterStateError(f"end page {event.page_index}", f"inside page {self.current_page}")

        self._body.write("textps_eop\nshowpage\n")
        self.current_page = None

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _stroke(self, x0: float, y0: float, x1: float, y1: float) -> None:
        self._body.write(
            f"{ps_number(x0)} {ps_number(y0)} moveto "
            f"{ps_number(x1)} {ps_number(y1)} lineto 0 setlinewidth stroke\n"
        )

    def _draw_furniture(self, layout: HeaderLayout) -> None:
        for cell in layout.cells:
            self._body.write(cell.line.render_token.to_postscript(cell.x, cell.y))
        x_start, x_end, y = layout.rule
        self._stroke(x_start, y, x_end, y)

    def _draw_contour(self) -> None:
        """Rectangle around the area inside the margins"""
        g = self.geometry
        left, bottom = g.left_margin, g.bottom_margin
        width = g.page_width - g.left_margin - g.right_margin
        height = g.page_height - g.top_margin - g.bottom_margin
        self._body.write(
            f"newpath {ps_number(left)} {ps_number(bottom)} moveto "
            f"{ps_number(width)} 0 rlineto 0 {ps_number(height)} rlineto "
            f"{ps_number(-width)} 0 rlineto closepath 0 setlinewidth stroke\n"
        )
