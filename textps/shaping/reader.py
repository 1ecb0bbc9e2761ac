#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Text Reader

Decodes raw input into text. A malformed byte sequence never aborts the
document: it is logged and replaced with U+FFFD.
"""

import codecs
from pathlib import Path
from typing import Optional, Union
import logging

from textps.contracts import ConfigError, ShapingInputError

logger = logging.getLogger(__name__)

REPLACEMENT_CHAR = "\ufffd"
ERROR_HANDLER = "textps-placeholder"


def _placeholder_handler(error: UnicodeDecodeError):
    problem = ShapingInputError(
        f"Invalid character in input ({error.reason})", position=error.start
    )
    logger.warning(str(problem))
    return REPLACEMENT_CHAR, error.end


codecs.register_error(ERROR_HANDLER, _placeholder_handler)


def resolve_encoding(encoding: Optional[str]) -> str:
    """Canonical codec name; UTF-8 when unset"""
    name = encoding or "utf-8"
    try:
        return codecs.lookup(name).name
    except LookupError:
        raise ConfigError(f"Invalid encoding: {name}")


def decode_text(data: bytes, encoding: Optional[str] = None) -> str:
    """
    Decode bytes into normalized text.

    Args:
        data: Raw input
        encoding: Input encoding, UTF-8 when None

    Returns:
        Text with \\n line ends and a trailing newline

    Raises:
        ConfigError: Unknown encoding
    """
    codec = resolve_encoding(encoding)
    text = data.decode(codec, errors=ERROR_HANDLER)

    text = text.replace("\r\n", "\n").replace("\r", "\n")
    if text.startswith("\ufeff"):
        text = text[1:]

    # Add a trailing new line if it is missing
    if not text.endswith("\n"):
        text += "\n"
    return text


def read_text(source: Union[str, Path, bytes], encoding: Optional[str] = None) -> str:
    """Read a file (or take raw bytes) and decode it"""
    if isinstance(source, (bytes, bytearray)):
        data = bytes(source)
    else:
        data = Path(source).read_bytes()
        logger.debug(f"Read {len(data)} bytes from {source}")
    return decode_text(data, encoding)
