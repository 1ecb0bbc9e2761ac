#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Settings - Centralized configuration management

Every field can be overridden with a TEXTPS_<FIELD> environment variable
or a .env file next to the project root.
"""

from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import (
    DEFAULT_PAPER,
    DEFAULT_MARGIN,
    DEFAULT_GUTTER_WIDTH,
    DEFAULT_NUM_COLUMNS,
    DEFAULT_FONT_FAMILY,
    DEFAULT_FONT_SCALE,
    DEFAULT_HEADER_FONT,
    HEADER_SEP,
    FOOTER_SEP,
    SHAPING_UNITS_PER_POINT,
)


# Base directory
BASE_DIR = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    """Page and typesetting settings"""

    # ========== Paper ==========
    paper: str = DEFAULT_PAPER  # a4 | letter | legal
    landscape: bool = False

    # ========== Columns ==========
    columns: int = DEFAULT_NUM_COLUMNS
    gutter_width: float = DEFAULT_GUTTER_WIDTH

    # ========== Margins ==========
    top_margin: float = DEFAULT_MARGIN
    bottom_margin: float = DEFAULT_MARGIN
    left_margin: float = DEFAULT_MARGIN
    right_margin: float = DEFAULT_MARGIN

    # ========== Body text ==========
    font_family: str = DEFAULT_FONT_FAMILY
    font_scale: float = DEFAULT_FONT_SCALE
    rtl: bool = False
    justify: bool = False
    encoding: Optional[str] = None  # input encoding, UTF-8 when unset

    # ========== Page furniture ==========
    header: bool = False
    footer: bool = False
    header_font: str = DEFAULT_HEADER_FONT
    header_sep: float = HEADER_SEP
    footer_sep: float = FOOTER_SEP
    separation_line: bool = True
    border: bool = False

    # ========== Printer hints ==========
    # None means "infer from orientation"
    duplex: Optional[bool] = None
    tumble: Optional[bool] = None

    # ========== Units ==========
    pt_to_unit: float = SHAPING_UNITS_PER_POINT

    model_config = SettingsConfigDict(
        env_prefix="TEXTPS_",
        env_file=str(BASE_DIR / ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    def describe(self) -> str:
        """One-line configuration summary for logs"""
        return (
            f"paper={self.paper} landscape={self.landscape} "
            f"columns={self.columns} font={self.font_family} {self.font_scale} "
            f"header={self.header} footer={self.footer} rtl={self.rtl}"
        )
