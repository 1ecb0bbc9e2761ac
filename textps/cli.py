#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
textps command line

Usage:
    textps --columns 2 --header notes.txt > notes.ps
    cat notes.txt | textps --landscape -o notes.ps
"""

import argparse
import io
import sys
from typing import List, Optional

from pydantic import ValidationError

from config.constants import PAPER_SIZES
from config.logging_config import setup_logger
from config.settings import Settings
from textps import __version__
from textps.contracts import ConfigError
from textps.pipeline import DocumentPipeline
from textps.shaping import decode_text

EXIT_OK = 0
EXIT_CONFIG = 1
EXIT_INPUT = 2

# argparse dest -> Settings field, only for options given on the command line
_SETTING_OPTIONS = (
    "paper", "landscape", "columns", "gutter_width", "font_scale", "font_family",
    "rtl", "justify", "top_margin", "bottom_margin", "left_margin", "right_margin",
    "header", "footer", "header_font", "border", "separation_line", "encoding",
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="textps",
        description="Convert a plain text file to multi-column PostScript.",
    )
    parser.add_argument('file', nargs='?', help='Text file (default: stdin)')
    parser.add_argument('--output', '-o', help='Output file (default: stdout)')
    parser.add_argument('--title', help='Document title (default: file name)')

    parser.add_argument('--landscape', action='store_true', default=None, help='Landscape output. (Default: portrait)')
    parser.add_argument('--columns', type=int, help='Number of columns output. (Default: 1)')
    parser.add_argument('--gutter-width', type=float, help='Space between columns. (Default: 40)')
    parser.add_argument('--font-scale', type=float, help='Font size in points. (Default: 12)')
    parser.add_argument('--family', dest='font_family', help='Font family. (Default: Monospace)')
    parser.add_argument('--rtl', action='store_true', default=None, help='Do rtl layout.')
    parser.add_argument('--justify', action='store_true', default=None, help='Do justify the lines.')
    parser.add_argument('--paper', choices=sorted(PAPER_SIZES), type=str.lower,
                        help='Choose paper size. (Default: a4)')
    parser.add_argument('--bottom-margin', type=float, help='Set bottom margin. (Default: 36)')
    parser.add_argument('--top-margin', type=float, help='Set top margin. (Default: 36)')
    parser.add_argument('--right-margin', type=float, help='Set right margin. (Default: 36)')
    parser.add_argument('--left-margin', type=float, help='Set left margin. (Default: 36)')
    parser.add_argument('--header', action='store_true', default=None, help='Draw page header for each page.')
    parser.add_argument('--footer', action='store_true', default=None, help='Draw page footer for each page.')
    parser.add_argument('--header-font', help='Header font. (Default: "Monospace Bold 12")')
    parser.add_argument('--border', action='store_true', default=None, help='Draw a border inside the margins.')
    parser.add_argument('--no-separators', dest='separation_line', action='store_false', default=None,
                        help='Do not draw lines between columns.')
    parser.add_argument('--encoding', help='Assume the documentation encoding.')

    parser.add_argument('--log-file', help='Also log to this file')
    parser.add_argument('--verbose', '-v', action='store_true', help='Debug logging')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    return parser


def settings_from_args(args: argparse.Namespace) -> Settings:
    overrides = {
        name: getattr(args, name)
        for name in _SETTING_OPTIONS
        if getattr(args, name) is not None
    }
    return Settings(**overrides)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logger = setup_logger('textps', log_file=args.log_file, level='DEBUG' if args.verbose else None)

    try:
        settings = settings_from_args(args)
    except ValidationError as e:
        logger.error(f"Invalid settings: {e}")
        return EXIT_CONFIG

    pipeline = DocumentPipeline(settings)

    try:
        if args.file:
            with open(args.file, 'rb') as f:
                data = f.read()
            title = args.title or args.file
        else:
            data = sys.stdin.buffer.read()
            title = args.title or 'stdin'
    except OSError as e:
        logger.error(f"Failed to open {args.file}: {e}")
        return EXIT_INPUT

    # Nothing reaches the output unless the whole document rendered
    document = io.StringIO()
    try:
        text = decode_text(data, settings.encoding)
        pipeline.render(text, document, title=title)
    except ConfigError as e:
        logger.error(str(e))
        return EXIT_CONFIG

    if args.output:
        with open(args.output, 'w', encoding='latin-1', newline='\n') as sink:
            sink.write(document.getvalue())
    else:
        sys.stdout.write(document.getvalue())
        sys.stdout.flush()

    return EXIT_OK


if __name__ == '__main__':
    sys.exit(main())
