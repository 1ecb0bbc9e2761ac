"""Split text into paragraphs on newlines and form feeds."""

from dataclasses import dataclass
from typing import List

from config.constants import TAB_WIDTH


@dataclass(frozen=True)
class Paragraph:
    text: str
    form_feed: bool = False


def split_paragraphs(text: str) -> List[Paragraph]:
    """
    One paragraph per \\n or \\f terminated run of text.

    A final run without terminator is kept as its own paragraph.
    """
    paragraphs: List[Paragraph] = []
    start = 0
    for index, ch in enumerate(text):
        if ch in "\n\f":
            paragraphs.append(
                Paragraph(text[start:index].expandtabs(TAB_WIDTH), form_feed=(ch == "\f"))
            )
            start = index + 1
    if start < len(text):
        paragraphs.append(Paragraph(text[start:].expandtabs(TAB_WIDTH)))
    return paragraphs
