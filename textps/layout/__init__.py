#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Layout Core Module

Decides where every line of the document lands.

Components:
- PageGeometry: Immutable page/column constants
- LineFlowEngine: Column and page breaking
- HeaderFooterComposer: Date / title / page number furniture

Usage:
    from textps.layout import PageGeometry, LineFlowEngine

    geometry = PageGeometry.compute(settings)
    result = LineFlowEngine(geometry).layout(lines)
"""

from .geometry import PageGeometry, paper_size
from .flow import LineFlowEngine, FlowCursor, FlowResult, drain_flow
from .header import HeaderFooterComposer

__all__ = [
    "PageGeometry",
    "paper_size",
    "LineFlowEngine",
    "FlowCursor",
    "FlowResult",
    "drain_flow",
    "HeaderFooterComposer",
]
