#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Document Pipeline

    settings -> PageGeometry -> (measure header/footer) -> shape lines
             -> LineFlowEngine -> DocumentEmitter

Usage:
    pipeline = DocumentPipeline(Settings(columns=2, header=True))
    with open("out.ps", "w", encoding="latin-1") as sink:
        pages = pipeline.render_file("notes.txt", sink)
"""

from datetime import datetime
from pathlib import Path
from typing import Optional, TextIO, Union

from config.logging_config import get_logger
from config.settings import Settings
from textps.layout import HeaderFooterComposer, LineFlowEngine, PageGeometry, drain_flow
from textps.postscript import DocumentEmitter
from textps.shaping import FontDescriptor, TextShaper, read_text, split_paragraphs

logger = get_logger(__name__)


class DocumentPipeline:
    """One pass from text to PostScript"""

    def __init__(self, settings: Optional[Settings] = None, timestamp: Optional[datetime] = None):
        """
        Args:
            settings: Page settings; defaults come from the environment
            timestamp: Header date; now when None
        """
        self.settings = settings or Settings()
        self.timestamp = timestamp

    def prepare(self, title: str):
        """
        Build the final geometry and its collaborators.

        Returns:
            (geometry, shaper, composer or None)

        Raises:
            ConfigError: Impossible geometry or font description
        """
        settings = self.settings
        geometry = PageGeometry.compute(settings)

        body_font = FontDescriptor.parse(settings.font_family, default_size=settings.font_scale)
        shaper = TextShaper(
            body_font,
            paint_width=geometry.column_width,
            pt_to_unit=geometry.pt_to_unit,
            justify=geometry.justify,
        )

        composer = None
        if geometry.do_draw_header or geometry.do_draw_footer:
            composer = HeaderFooterComposer(
                shaper,
                title=title,
                timestamp=self.timestamp,
                font=FontDescriptor.parse(settings.header_font),
            )
            if geometry.do_draw_header:
                geometry = geometry.with_header_height(composer.measure_header())
            if geometry.do_draw_footer:
                geometry = geometry.with_footer_height(composer.measure_header(is_footer=True))

        return geometry, shaper, composer

    def render(self, text: str, sink: TextIO, title: str = "stdin") -> int:
        """
        Typeset text into sink.

        Returns:
            Number of pages written
        """
        logger.info(f"Rendering {title!r}: {self.settings.describe()}")
        geometry, shaper, composer = self.prepare(title)

        lines = shaper.shape_paragraphs(split_paragraphs(text))
        engine = LineFlowEngine(geometry, composer)
        emitter = DocumentEmitter(sink, geometry, shaper, title=title)

        emitter.begin_document()
        page_count = drain_flow(engine.flow(lines), emitter.emit)
        emitter.finalize(page_count)

        return page_count

    def render_file(self, path: Union[str, Path], sink: TextIO, title: Optional[str] = None) -> int:
        """Read, decode and typeset a file"""
        text = read_text(path, self.settings.encoding)
        return self.render(text, sink, title=title or str(path))
