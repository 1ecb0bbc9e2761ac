#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Error Hierarchy

ConfigError and EmitterStateError abort the run. ShapingInputError is
logged and the offending unit replaced, processing continues.
"""

from typing import Optional


class TextPSError(Exception):
    """Base error for textps"""
    pass


class ConfigError(TextPSError):
    """Raised when settings describe an impossible page geometry"""
    pass


class ShapingInputError(TextPSError):
    """Malformed character data from the input"""

    def __init__(self, message: str, position: Optional[int] = None):
        self.position = position
        if position is not None:
            message = f"{message} (at offset {position})"
        super().__init__(message)


class EmitterStateError(TextPSError):
    """Raised when the document emitter is driven out of order"""

    def __init__(self, operation: str, state: str):
        self.operation = operation
        self.state = state
        super().__init__(f"Cannot {operation} while emitter is {state}")
