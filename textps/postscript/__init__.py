#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
PostScript Output Module

- DocumentEmitter: prologue, page bodies and trailer
- ps_number / ps_string: literal formatting shared with the shaper
"""

from .emitter import DocumentEmitter, EmitterState
from .numbers import ps_bool, ps_number, ps_string

__all__ = [
    "DocumentEmitter",
    "EmitterState",
    "ps_bool",
    "ps_number",
    "ps_string",
]
