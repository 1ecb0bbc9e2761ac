"""
Centralized constants for textps.
All layout defaults and magic numbers live here.
"""

# ===========================================
# PAPER
# ===========================================
# (width, height) in PostScript points, portrait
PAPER_SIZES = {
    "a4": (595.28, 841.89),
    "letter": (612.0, 792.0),
    "legal": (612.0, 1008.0),
}
DEFAULT_PAPER = "a4"

# ===========================================
# PAGE LAYOUT
# ===========================================
DEFAULT_MARGIN = 36                   # all four margins
DEFAULT_GUTTER_WIDTH = 40             # space between columns
DEFAULT_NUM_COLUMNS = 1
HEADER_SEP = 20                       # gap between header and body
FOOTER_SEP = 20                       # gap between body and footer

# Shaping units per PostScript point
SHAPING_UNITS_PER_POINT = 1024

# ===========================================
# FONTS
# ===========================================
DEFAULT_FONT_FAMILY = "Monospace"
DEFAULT_FONT_SCALE = 12
DEFAULT_HEADER_FONT = "Monospace Bold 12"
LINE_LEADING = 0.2                    # extra line gap, fraction of font size
TAB_WIDTH = 8

# Family aliases -> PostScript base font names
# (regular, bold, italic, bold-italic)
FONT_FAMILIES = {
    "monospace": ("Courier", "Courier-Bold", "Courier-Oblique", "Courier-BoldOblique"),
    "courier": ("Courier", "Courier-Bold", "Courier-Oblique", "Courier-BoldOblique"),
    "sans": ("Helvetica", "Helvetica-Bold", "Helvetica-Oblique", "Helvetica-BoldOblique"),
    "helvetica": ("Helvetica", "Helvetica-Bold", "Helvetica-Oblique", "Helvetica-BoldOblique"),
    "serif": ("Times-Roman", "Times-Bold", "Times-Italic", "Times-BoldItalic"),
    "times": ("Times-Roman", "Times-Bold", "Times-Italic", "Times-BoldItalic"),
}

PLACEHOLDER_CHAR = "?"

# ===========================================
# OUTPUT
# ===========================================
CREATOR = "textps"
DATE_FORMAT = "%c"

# ===========================================
# LOGGING
# ===========================================
LOG_LEVEL = 'INFO'
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_MAX_SIZE_MB = 10
LOG_BACKUP_COUNT = 5
