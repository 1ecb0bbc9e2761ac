#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
PostScript prologue, setup and trailer text.

Everything textps defines lives in textpsdict; the two page procedures
that the body calls directly are prefixed textps_.
"""

from config.constants import CREATOR
from textps import __version__

from .numbers import ps_bool, ps_number


HEADER_TEMPLATE = """\
%!PS-Adobe-3.0
%%Title: {title}
%%Creator: {creator} {version}
%%Pages: (atend)
%%BoundingBox: 0 0 {bb_width} {bb_height}
%%Orientation: {orientation}
%%BeginProlog
/textpsdict 64 dict def
textpsdict begin

% override setpagedevice if it is not defined
/setpagedevice where {{
    pop % get rid of its dictionary
    /setpagesize {{
       3 dict begin
         /pageheight exch def
         /pagewidth exch def
         /orientation 0 def
         % Exchange pagewidth and pageheight so that pagewidth is bigger
         pagewidth pageheight gt {{
             pagewidth
             /pagewidth pageheight def
             /pageheight exch def
             /orientation 3 def
         }} if
         2 dict
         dup /PageSize [pagewidth pageheight] put
         dup /Orientation orientation put
         setpagedevice
       end
    }} def
}}
{{
    /setpagesize {{ pop pop }} def
}} ifelse
/duplex {{
    statusdict /setduplexmode known
    {{ statusdict begin setduplexmode end }} {{pop}} ifelse
}} def
/tumble {{
    statusdict /settumble known
   {{ statusdict begin settumble end }} {{pop}} ifelse
}} def
% Turn the page around
/turnpage {{
  90 rotate
  0 pageheight neg translate
}} def
"""

SETTINGS_TEMPLATE = """\
% User settings
/pagewidth {page_width} def
/pageheight {page_height} def
/column_width {column_width} def
/gutter_width {gutter_width} def
/numcolumns {num_columns} def
/bodyheight {body_height} def
/lmarg {left_margin} def
/ytop {ytop} def
/do_separation_line {do_separation_line} def
/do_landscape {do_landscape} def
/do_tumble {do_tumble} def
/do_duplex {do_duplex} def
"""

PROCEDURES_TEMPLATE = """\
% Re-encode a base font as ISO Latin-1: /NewName /BaseName textps_reencode
/textps_reencode {{
    findfont dup length dict begin
      {{ 1 index /FID ne {{ def }} {{ pop pop }} ifelse }} forall
      /Encoding ISOLatin1Encoding def
      currentdict
    end
    definefont pop
}} bind def

end % textpsdict

/textps_bop {{  % Beginning of page definitions
    textpsdict begin
    gsave
    do_landscape {{turnpage}} if
    end
}} def

/textps_eop {{  % End of page cleanups
    grestore
}} def
"""

SETUP_TEMPLATE = """\
%%BeginSetup
textpsdict begin
pagewidth pageheight setpagesize
{hints}end
%%EndSetup
"""

TRAILER_TEMPLATE = """\
%%Trailer
%%Pages: {num_pages}
%%EOF
"""


def escape_dsc_text(text: str) -> str:
    """Keep a DSC comment value on one printable line"""
    return "".join(ch if " " <= ch <= "~" else "?" for ch in text)


def render_header(geometry, title: str) -> str:
    """Document prologue up to (not including) the font resources"""
    bb_width, bb_height = geometry.page_width, geometry.page_height
    # Keep bounding box non-rotated so viewers agree on the frame
    if geometry.is_wide:
        bb_width, bb_height = bb_height, bb_width

    header = HEADER_TEMPLATE.format(
        title=escape_dsc_text(title),
        creator=CREATOR,
        version=__version__,
        bb_width=int(round(bb_width)),
        bb_height=int(round(bb_height)),
        orientation="Landscape" if geometry.is_wide else "Portrait",
    )

    settings = SETTINGS_TEMPLATE.format(
        page_width=ps_number(geometry.page_width),
        page_height=ps_number(geometry.page_height),
        column_width=ps_number(geometry.column_width),
        gutter_width=ps_number(geometry.gutter_width),
        body_height=ps_number(geometry.column_height),
        left_margin=ps_number(geometry.left_margin),
        ytop=ps_number(geometry.body_top),
        do_separation_line=ps_bool(geometry.do_separation_line),
        do_landscape=ps_bool(geometry.landscape),
        do_tumble=ps_bool(geometry.do_tumble),
        do_duplex=ps_bool(geometry.do_duplex),
        num_columns=geometry.num_columns,
    )

    procedures = PROCEDURES_TEMPLATE.format()
    return header + settings + procedures


def render_setup(geometry) -> str:
    hints = ""
    if geometry.do_duplex:
        hints += "true duplex\n"
    if geometry.do_tumble:
        hints += "true tumble\n"
    return SETUP_TEMPLATE.format(hints=hints)


def render_trailer(num_pages: int) -> str:
    return TRAILER_TEMPLATE.format(num_pages=num_pages)
