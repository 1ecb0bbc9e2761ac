#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Font Descriptors

Parses descriptions like "Monospace Bold 12" into one of the standard
PostScript base fonts, the only fonts whose metrics ship with reportlab
and that every printer has.
"""

from dataclasses import dataclass
from typing import Optional

from config.constants import DEFAULT_FONT_FAMILY, DEFAULT_FONT_SCALE, FONT_FAMILIES
from textps.contracts import ConfigError

BOLD_WORDS = {"bold", "heavy", "black", "semibold", "demibold"}
ITALIC_WORDS = {"italic", "oblique", "slanted"}
IGNORED_WORDS = {"regular", "normal", "book", "roman", "medium"}


@dataclass(frozen=True)
class FontDescriptor:
    family: str = DEFAULT_FONT_FAMILY
    size: float = DEFAULT_FONT_SCALE
    bold: bool = False
    italic: bool = False

    @classmethod
    def parse(cls, description: str, default_size: Optional[float] = None) -> "FontDescriptor":
        """
        Parse "<family words> [style words] [size]".

        Raises:
            ConfigError: Empty description or non-positive size
        """
        words = (description or "").split()
        if not words:
            raise ConfigError("Empty font description")

        size = default_size if default_size is not None else DEFAULT_FONT_SCALE
        try:
            size = float(words[-1])
            words = words[:-1]
        except ValueError:
            pass
        if size <= 0:
            raise ConfigError(f"Font size must be positive in {description!r}")

        bold = italic = False
        family_words = []
        for word in words:
            lowered = word.lower()
            if lowered in BOLD_WORDS:
                bold = True
            elif lowered in ITALIC_WORDS:
                italic = True
            elif lowered not in IGNORED_WORDS:
                family_words.append(word)

        family = " ".join(family_words) or DEFAULT_FONT_FAMILY
        return cls(family=family, size=size, bold=bold, italic=italic)

    @property
    def postscript_name(self) -> str:
        """Standard base font for this family and style; unknown families map to Courier"""
        variants = FONT_FAMILIES.get(self.family.lower(), FONT_FAMILIES["monospace"])
        return variants[(1 if self.bold else 0) + (2 if self.italic else 0)]

    def __str__(self) -> str:
        style = " ".join(
            word for word, on in (("Bold", self.bold), ("Italic", self.italic)) if on
        )
        return " ".join(part for part in (self.family, style, f"{self.size:g}") if part)
