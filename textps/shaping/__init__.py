#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Shaping Module

Reference text collaborators of the layout core:
- read_text / decode_text: bytes to normalized text
- split_paragraphs: text to paragraphs, form feeds recorded
- FontDescriptor: "Monospace Bold 12" style font descriptions
- TextShaper: paragraphs to ShapedLines with PostScript render tokens
"""

from .reader import decode_text, read_text, resolve_encoding
from .paragraphs import Paragraph, split_paragraphs
from .fonts import FontDescriptor
from .shaper import PostScriptTextToken, TextShaper, to_latin1

__all__ = [
    "decode_text",
    "read_text",
    "resolve_encoding",
    "Paragraph",
    "split_paragraphs",
    "FontDescriptor",
    "PostScriptTextToken",
    "TextShaper",
    "to_latin1",
]
