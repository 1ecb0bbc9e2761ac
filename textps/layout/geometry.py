#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Page Geometry

Derives the immutable layout constants of a document from Settings:
- Paper size and orientation
- Margins, columns and gutter
- Header/footer reservation
- Conversion between shaping units and PostScript points

All lengths are PostScript points unless a name ends in _units.

Version: 1.0.0
"""

from dataclasses import dataclass, replace
from typing import Tuple
import logging

from config.constants import PAPER_SIZES
from textps.contracts import ConfigError

logger = logging.getLogger(__name__)


def paper_size(name: str) -> Tuple[float, float]:
    """Portrait (width, height) of a named paper preset"""
    key = (name or "").strip().lower()
    if key not in PAPER_SIZES:
        raise ConfigError(
            f"Unknown page size name: {name!r} (known: {', '.join(PAPER_SIZES)})"
        )
    return PAPER_SIZES[key]


@dataclass(frozen=True)
class PageGeometry:
    """
    Layout constants for one document.

    Built once by compute(); later refinements (measured header and
    footer heights) produce new instances.

    Usage:
        geometry = PageGeometry.compute(settings)
        geometry = geometry.with_header_height(14.4)
    """
    page_width: float
    page_height: float
    landscape: bool

    num_columns: int
    column_width: float
    gutter_width: float
    column_height: float

    top_margin: float
    bottom_margin: float
    left_margin: float
    right_margin: float

    header_height: float = 0.0
    footer_height: float = 0.0
    header_sep: float = 0.0
    footer_sep: float = 0.0
    do_draw_header: bool = False
    do_draw_footer: bool = False

    do_separation_line: bool = True
    do_draw_contour: bool = False
    do_duplex: bool = True
    do_tumble: bool = False
    rtl: bool = False
    justify: bool = False

    pt_to_unit: float = 1024.0

    @classmethod
    def compute(cls, settings) -> "PageGeometry":
        """
        Derive geometry from settings.

        Args:
            settings: config.settings.Settings (or anything with the same fields)

        Returns:
            PageGeometry with header/footer heights still unmeasured

        Raises:
            ConfigError: On an unknown paper, fewer than one column, negative
                spacing, or no room left for the body
        """
        width, height = paper_size(settings.paper)

        num_columns = int(settings.columns)
        if num_columns < 1:
            raise ConfigError(f"Number of columns must be at least 1, got {num_columns}")

        for name in ("top_margin", "bottom_margin", "left_margin", "right_margin", "gutter_width"):
            if getattr(settings, name) < 0:
                raise ConfigError(f"{name} must not be negative, got {getattr(settings, name)}")

        if settings.pt_to_unit <= 0:
            raise ConfigError(f"pt_to_unit must be positive, got {settings.pt_to_unit}")

        # Landscape is decided before the columns are derived
        if settings.landscape:
            width, height = height, width

        duplex = True if settings.duplex is None else settings.duplex
        tumble = settings.landscape if settings.tumble is None else settings.tumble

        total_gutter_width = settings.gutter_width * (num_columns - 1)
        column_width = (
            width - settings.left_margin - settings.right_margin - total_gutter_width
        ) / num_columns
        if column_width <= 0:
            raise ConfigError(
                f"Margins and gutters leave no room for {num_columns} column(s) "
                f"on a {width:g}pt wide page"
            )

        geometry = cls(
            page_width=width,
            page_height=height,
            landscape=bool(settings.landscape),
            num_columns=num_columns,
            column_width=column_width,
            gutter_width=float(settings.gutter_width),
            column_height=0.0,
            top_margin=float(settings.top_margin),
            bottom_margin=float(settings.bottom_margin),
            left_margin=float(settings.left_margin),
            right_margin=float(settings.right_margin),
            header_sep=float(settings.header_sep) if settings.header else 0.0,
            footer_sep=float(settings.footer_sep) if settings.footer else 0.0,
            do_draw_header=bool(settings.header),
            do_draw_footer=bool(settings.footer),
            do_separation_line=bool(settings.separation_line),
            do_draw_contour=bool(settings.border),
            do_duplex=bool(duplex),
            do_tumble=bool(tumble),
            rtl=bool(settings.rtl),
            justify=bool(settings.justify),
            pt_to_unit=float(settings.pt_to_unit),
        )
        geometry = geometry._with_column_height()

        logger.info(
            f"Geometry: {width:g}x{height:g}pt, {num_columns} column(s) of "
            f"{column_width:.2f}x{geometry.column_height:.2f}pt"
        )
        return geometry

    def _with_column_height(self) -> "PageGeometry":
        column_height = (
            self.page_height
            - self.top_margin - self.header_height - self.header_sep
            - self.bottom_margin - self.footer_height - self.footer_sep
        )
        if column_height <= 0:
            raise ConfigError(
                f"Vertical margins and header/footer leave no room for the body "
                f"on a {self.page_height:g}pt high page"
            )
        return replace(self, column_height=column_height)

    def with_header_height(self, height: float) -> "PageGeometry":
        """Geometry refined with the measured header height"""
        logger.debug(f"Header height measured: {height:.2f}pt")
        return replace(self, header_height=float(height))._with_column_height()

    def with_footer_height(self, height: float) -> "PageGeometry":
        """Geometry refined with the measured footer height"""
        logger.debug(f"Footer height measured: {height:.2f}pt")
        return replace(self, footer_height=float(height))._with_column_height()

    # ------------------------------------------------------------------
    # Derived values
    # ------------------------------------------------------------------

    @property
    def unit_to_pt(self) -> float:
        return 1.0 / self.pt_to_unit

    @property
    def column_height_units(self) -> float:
        return self.column_height * self.pt_to_unit

    @property
    def body_top(self) -> float:
        """y of the top edge of every column"""
        return self.page_height - self.top_margin - self.header_height - self.header_sep

    @property
    def body_bottom(self) -> float:
        """y of the bottom edge of every column"""
        return self.bottom_margin + self.footer_height + self.footer_sep

    @property
    def is_wide(self) -> bool:
        """True when the page is wider than it is high"""
        return self.page_width > self.page_height

    def visual_column(self, column_index: int) -> int:
        """Left-to-right slot of a logical column (mirrored for rtl)"""
        if self.rtl:
            return self.num_columns - 1 - column_index
        return column_index

    def column_x(self, column_index: int) -> float:
        """x of the left edge of a logical column"""
        slot = self.visual_column(column_index)
        return self.left_margin + slot * (self.column_width + self.gutter_width)

    def used_width(self) -> float:
        """Columns, gutters and side margins; equals page_width"""
        return (
            self.column_width * self.num_columns
            + self.gutter_width * (self.num_columns - 1)
            + self.left_margin + self.right_margin
        )
