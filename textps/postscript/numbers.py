"""PostScript literal formatting."""


def ps_number(value: float) -> str:
    """Shortest fixed-point form with at most 3 decimals"""
    text = f"{float(value):.3f}".rstrip("0").rstrip(".")
    if text in ("-0", ""):
        return "0"
    return text


def ps_bool(value: bool) -> str:
    return "true" if value else "false"


def ps_string(text: str) -> str:
    """
    Latin-1 text as a PostScript string literal.

    Parentheses and backslashes are escaped, anything outside printable
    ASCII becomes an octal escape.
    """
    out = ["("]
    for ch in text:
        code = ord(ch)
        if ch in "()\\":
            out.append("\\" + ch)
        elif 32 <= code < 127:
            out.append(ch)
        else:
            out.append("\\%03o" % (code & 0xFF))
    out.append(")")
    return "".join(out)
