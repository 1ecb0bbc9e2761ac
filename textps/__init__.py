"""
textps - plain text to multi-column PostScript

Package layout:
- contracts/   data shared between shaping, layout and output
- layout/      page geometry, column flow, headers and footers
- postscript/  document emitter
- shaping/     reader, paragraph splitter and text shaper
- pipeline.py  end-to-end rendering
- cli.py       command line front end
"""

__version__ = "0.6.3"
