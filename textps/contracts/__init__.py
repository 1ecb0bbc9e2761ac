#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Contracts Module

Data shared between the shaping side, the layout core and the emitter:
- ShapedLine / RenderToken / ShapingCollaborator: shaper output
- PlacementEvent variants: flow engine output
- Error hierarchy

Usage:
    from textps.contracts import ShapedLine, BeginPage, DrawLine, ConfigError
"""

from .errors import (
    TextPSError,
    ConfigError,
    ShapingInputError,
    EmitterStateError,
)

from .shaped_line import (
    ShapedLine,
    RenderToken,
    ShapingCollaborator,
    total_height,
)

from .events import (
    HeaderCell,
    HeaderLayout,
    BeginPage,
    DrawLine,
    ColumnSeparator,
    EndPage,
    PlacementEvent,
)

__all__ = [
    # Errors
    "TextPSError",
    "ConfigError",
    "ShapingInputError",
    "EmitterStateError",
    # Shaping
    "ShapedLine",
    "RenderToken",
    "ShapingCollaborator",
    "total_height",
    # Events
    "HeaderCell",
    "HeaderLayout",
    "BeginPage",
    "DrawLine",
    "ColumnSeparator",
    "EndPage",
    "PlacementEvent",
]
