"""
Pytest configuration and shared fixtures for textps tests.
"""
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import List

import pytest

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from config.settings import Settings
from textps.contracts import ShapedLine
from textps.layout import PageGeometry


# ============================================================================
# Fakes: shaping collaborator
# ============================================================================

@dataclass(frozen=True)
class FakeToken:
    """Render token that reports where it was drawn"""
    label: str

    def to_postscript(self, x: float, y: float) -> str:
        return f"% draw {self.label} at {x:.2f} {y:.2f}\n"


class FakeShaper:
    """Shaper with 1 unit per point, 6pt per character and 10pt lines"""

    pt_to_unit = 1.0
    char_width = 6.0
    line_height = 10.0

    def __init__(self):
        self.labels: List[str] = []

    def shape_label(self, text: str, font=None) -> ShapedLine:
        self.labels.append(text)
        return ShapedLine(
            width=len(text) * self.char_width,
            height=self.line_height,
            is_paragraph_end=True,
            render_token=FakeToken(text),
        )

    def resource_definitions(self) -> str:
        return "% fake resources\n"


def make_line(height: float, width: float = 10.0, form_feed: bool = False,
              label: str = "line") -> ShapedLine:
    return ShapedLine(
        width=width,
        height=height,
        is_paragraph_end=True,
        is_form_feed_terminated=form_feed,
        render_token=FakeToken(label),
    )


def make_geometry(column_height: float = 100.0, num_columns: int = 1,
                  separators: bool = True, **overrides) -> PageGeometry:
    """Geometry in which shaping units equal points"""
    column_width = 100.0
    gutter = 20.0
    values = dict(
        page_width=column_width * num_columns + gutter * (num_columns - 1) + 20.0,
        page_height=column_height + 20.0,
        landscape=False,
        num_columns=num_columns,
        column_width=column_width,
        gutter_width=gutter,
        column_height=column_height,
        top_margin=10.0,
        bottom_margin=10.0,
        left_margin=10.0,
        right_margin=10.0,
        do_separation_line=separators,
        pt_to_unit=1.0,
    )
    values.update(overrides)
    return PageGeometry(**values)


# ============================================================================
# Fixtures
# ============================================================================

@pytest.fixture
def settings() -> Settings:
    """Default settings, isolated from any .env file."""
    return Settings(_env_file=None)


@pytest.fixture
def fake_shaper() -> FakeShaper:
    return FakeShaper()


@pytest.fixture
def sample_text() -> str:
    """A short document with two paragraphs and a page break."""
    return (
        "The quick brown fox jumps over the lazy dog.\n"
        "\n"
        "Pack my box with five dozen liquor jugs.\f"
        "Second page starts here.\n"
    )
