#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Text Shaper

Turns paragraphs into ShapedLines for the flow engine:
- Greedy word wrap at the paint width (overlong words break anywhere)
- Optional justification of all but the last line of a paragraph
- Metrics from reportlab's tables for the standard PostScript fonts

Each line carries a PostScriptTextToken; the emitter hands it a position
and gets back the PostScript that draws it. Fonts are re-encoded to
ISO Latin-1 and declared in the prologue through resource_definitions().

Version: 1.0.0
"""

from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Optional, Tuple
import logging
import re

from reportlab.pdfbase.pdfmetrics import getAscentDescent, stringWidth

from config.constants import LINE_LEADING, PLACEHOLDER_CHAR, SHAPING_UNITS_PER_POINT
from textps.contracts import ShapedLine
from textps.postscript.numbers import ps_number, ps_string

from .fonts import FontDescriptor
from .paragraphs import Paragraph

logger = logging.getLogger(__name__)

_CHUNK = re.compile(r" *[^ ]+")


@dataclass(frozen=True)
class PostScriptTextToken:
    """Render token for one line drawn with a prologue font procedure"""
    text: str
    font_key: str
    baseline_offset: float  # points from line box bottom to baseline
    word_spacing: float = 0.0  # extra points added to every space
    indent: float = 0.0  # points from x to the first drawn character

    def to_postscript(self, x: float, y: float) -> str:
        if not self.text:
            return ""
        prefix = f"{ps_number(x + self.indent)} {ps_number(y + self.baseline_offset)} moveto {self.font_key} "
        if self.word_spacing:
            return prefix + f"{ps_number(self.word_spacing)} 0 32 {ps_string(self.text)} widthshow\n"
        return prefix + f"{ps_string(self.text)} show\n"


def to_latin1(text: str) -> Tuple[str, int]:
    """Replace characters the re-encoded fonts cannot show; returns (text, replaced)"""
    out = []
    replaced = 0
    for ch in text:
        code = ord(ch)
        if ch == " " or (32 < code < 127) or (160 <= code <= 255):
            out.append(ch)
        else:
            out.append(PLACEHOLDER_CHAR)
            replaced += 1
    return "".join(out), replaced


class TextShaper:
    """
    Shape plain text paragraphs for a fixed column width.

    Usage:
        shaper = TextShaper(FontDescriptor("Monospace", 10), paint_width=250)
        lines = list(shaper.shape_paragraphs(split_paragraphs(text)))
    """

    def __init__(
        self,
        font: FontDescriptor,
        paint_width: float,
        pt_to_unit: float = SHAPING_UNITS_PER_POINT,
        justify: bool = False,
    ):
        """
        Initialize shaper.

        Args:
            font: Body font
            paint_width: Wrap width in points (the column width)
            pt_to_unit: Shaping units per point for reported extents
            justify: Spread slack over spaces on non-final lines
        """
        self.font = font
        self.paint_width = paint_width
        self.pt_to_unit = pt_to_unit
        self.justify = justify
        self._font_keys: Dict[Tuple[str, float], str] = {}

    # ------------------------------------------------------------------
    # Metrics
    # ------------------------------------------------------------------

    def text_width(self, text: str, font: Optional[FontDescriptor] = None) -> float:
        font = font or self.font
        return stringWidth(text, font.postscript_name, font.size)

    def line_metrics(self, font: Optional[FontDescriptor] = None) -> Tuple[float, float]:
        """(line height, baseline offset) in points"""
        font = font or self.font
        ascent, descent = getAscentDescent(font.postscript_name, font.size)
        leading = LINE_LEADING * font.size
        return ascent - descent + leading, -descent + leading / 2

    def font_key(self, font: FontDescriptor) -> str:
        """Name of the prologue procedure selecting font"""
        key = (font.postscript_name, font.size)
        if key not in self._font_keys:
            self._font_keys[key] = f"textps_F{len(self._font_keys)}"
        return self._font_keys[key]

    # ------------------------------------------------------------------
    # Line breaking
    # ------------------------------------------------------------------

    def _fitting_prefix(self, text: str, font: FontDescriptor) -> int:
        """Length of the longest prefix that fits the paint width, at least 1"""
        low, high = 1, len(text)
        while low < high:
            middle = (low + high + 1) // 2
            if self.text_width(text[:middle], font) <= self.paint_width:
                low = middle
            else:
                high = middle - 1
        return low

    def wrap(self, text: str, font: Optional[FontDescriptor] = None) -> List[str]:
        """Break text into lines no wider than the paint width"""
        font = font or self.font
        if self.text_width(text, font) <= self.paint_width:
            return [text]

        lines: List[str] = []
        current = ""
        for match in _CHUNK.finditer(text):
            chunk = match.group(0)
            candidate = current + chunk
            if current and self.text_width(candidate, font) > self.paint_width:
                lines.append(current)
                current = chunk.lstrip(" ")
            else:
                current = candidate

            while len(current) > 1 and self.text_width(current, font) > self.paint_width:
                cut = self._fitting_prefix(current, font)
                lines.append(current[:cut])
                current = current[cut:]

        lines.append(current)
        return lines

    # ------------------------------------------------------------------
    # Shaping
    # ------------------------------------------------------------------

    def _make_line(
        self,
        text: str,
        font: FontDescriptor,
        is_paragraph_end: bool,
        form_feed: bool,
        justify: bool,
    ) -> ShapedLine:
        height, baseline_offset = self.line_metrics(font)
        width = self.text_width(text, font)

        word_spacing = indent = 0.0
        if justify and width < self.paint_width:
            # Leading indent keeps its width, slack goes between words only
            body = text.lstrip(" ")
            spaces = body.count(" ")
            if spaces:
                indent = self.text_width(text[:len(text) - len(body)], font)
                word_spacing = (self.paint_width - width) / spaces
                text = body
                width = self.paint_width

        token = PostScriptTextToken(
            text=text,
            font_key=self.font_key(font),
            baseline_offset=baseline_offset,
            word_spacing=word_spacing,
            indent=indent,
        )
        return ShapedLine(
            width=width * self.pt_to_unit,
            height=height * self.pt_to_unit,
            is_paragraph_end=is_paragraph_end,
            is_form_feed_terminated=form_feed and is_paragraph_end,
            render_token=token,
        )

    def shape_paragraph(self, paragraph: Paragraph) -> List[ShapedLine]:
        """All lines of one paragraph; an empty paragraph is one empty line"""
        text, replaced = to_latin1(paragraph.text)
        if replaced:
            logger.warning(f"Replaced {replaced} unprintable character(s) with {PLACEHOLDER_CHAR!r}")

        texts = self.wrap(text)
        last = len(texts) - 1
        return [
            self._make_line(
                line_text.rstrip(" ") if index < last else line_text,
                self.font,
                is_paragraph_end=(index == last),
                form_feed=paragraph.form_feed,
                justify=self.justify and index < last,
            )
            for index, line_text in enumerate(texts)
        ]

    def shape_paragraphs(self, paragraphs: Iterable[Paragraph]) -> Iterator[ShapedLine]:
        for paragraph in paragraphs:
            yield from self.shape_paragraph(paragraph)

    def shape_label(self, text: str, font: Optional[FontDescriptor] = None) -> ShapedLine:
        """Single unwrapped line, used for headers and footers"""
        text, _ = to_latin1(text)
        return self._make_line(
            text, font or self.font, is_paragraph_end=True, form_feed=False, justify=False
        )

    def resource_definitions(self) -> str:
        """Re-encoded fonts and selection procedures for every font handed out"""
        if not self._font_keys:
            return ""

        lines = ["textpsdict begin"]
        base_names = sorted({name for name, _ in self._font_keys})
        for name in base_names:
            lines.append(f"/{name}-Latin1 /{name} textps_reencode")
        lines.append("end")
        for (name, size), key in self._font_keys.items():
            lines.append(
                f"/{key} {{ /{name}-Latin1 findfont {ps_number(size)} scalefont setfont }} bind def"
            )
        return "\n".join(lines) + "\n"
