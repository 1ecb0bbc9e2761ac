#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Header / Footer Composer

Builds the three-cell page furniture:

    | <date>              <title>              Page N |
    ---------------------------------------------------

Height is measured from the shaper, not assumed, in two phases:

    height = composer.measure_header()
    geometry = geometry.with_header_height(height)
    layout = composer.compose(page_index, geometry)

Version: 1.0.0
"""

from datetime import datetime
from typing import Optional
import logging

from config.constants import DATE_FORMAT
from textps.contracts import HeaderCell, HeaderLayout, ShapingCollaborator

from .geometry import PageGeometry

logger = logging.getLogger(__name__)


class HeaderFooterComposer:
    """
    Compose headers and footers for every page of a document.

    Usage:
        composer = HeaderFooterComposer(shaper, title="notes.txt", font=header_font)
        geometry = geometry.with_header_height(composer.measure_header())
        header = composer.compose(3, geometry)
        print(header.right.text)  # "Page 3"
    """

    def __init__(
        self,
        shaper: ShapingCollaborator,
        title: str,
        timestamp: Optional[datetime] = None,
        font=None,
    ):
        """
        Initialize composer.

        Args:
            shaper: Shapes the cell labels and reports their size
            title: Center cell text (usually the input file name)
            timestamp: Left cell time; defaults to now, fixed for all pages
            font: FontDescriptor for the cells; None uses the shaper's font
        """
        self.shaper = shaper
        self.title = title
        self.font = font
        self.timestamp = timestamp or datetime.now()
        self.date_text = self.timestamp.strftime(DATE_FORMAT)

    @staticmethod
    def page_label(page_index: int) -> str:
        return f"Page {page_index}"

    def _shape(self, text: str):
        return self.shaper.shape_label(text, self.font)

    def measure_header(self, is_footer: bool = False) -> float:
        """
        Height the furniture needs, in points.

        All three cells share one font, so the tallest of a representative
        set is the height of every page's header (or footer).
        """
        probe = (self.date_text, self.title, self.page_label(1))
        tallest = max(self._shape(text).height for text in probe)
        height = tallest / self.shaper.pt_to_unit
        logger.debug(f"{'Footer' if is_footer else 'Header'} measured at {height:.2f}pt")
        return height

    def compose(
        self,
        page_index: int,
        geometry: PageGeometry,
        is_footer: bool = False,
    ) -> HeaderLayout:
        """
        Lay out the furniture of one page.

        Args:
            page_index: 1-based page number
            geometry: Geometry already refined with the measured height
            is_footer: Compose the footer instead of the header

        Returns:
            HeaderLayout with left/center/right cells and the separator rule
        """
        unit_to_pt = geometry.unit_to_pt

        left = self._shape(self.date_text)
        center = self._shape(self.title)
        right = self._shape(self.page_label(page_index))

        if is_footer:
            height = geometry.footer_height
            y_pos = geometry.bottom_margin
            rule_y = geometry.bottom_margin + height + geometry.footer_sep / 2
        else:
            height = geometry.header_height
            y_pos = geometry.page_height - geometry.top_margin - height
            rule_y = geometry.page_height - geometry.top_margin - height - geometry.header_sep / 2

        cells = (
            HeaderCell(self.date_text, geometry.left_margin, y_pos, left),
            HeaderCell(
                self.title,
                (geometry.page_width - center.width * unit_to_pt) / 2,
                y_pos,
                center,
            ),
            HeaderCell(
                self.page_label(page_index),
                geometry.page_width - geometry.right_margin - right.width * unit_to_pt,
                y_pos,
                right,
            ),
        )

        return HeaderLayout(
            page_index=page_index,
            cells=cells,
            height=height,
            rule=(geometry.left_margin, geometry.page_width - geometry.right_margin, rule_y),
            is_footer=is_footer,
        )
