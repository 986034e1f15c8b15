from typing import Optional, Tuple, Union

SYNTAX_PLAIN = "plain"
SYNTAX_C = "c"
SYNTAX_PYTHON = "python"

SYNTAXES = [SYNTAX_PLAIN, SYNTAX_C, SYNTAX_PYTHON]

# syntax -> (verbose header, opening token, closing token)
DECORATIONS = {
    SYNTAX_PLAIN:  (None, "", ""),
    SYNTAX_C:      ("unsigned char buffer[] =", '"', '"'),
    SYNTAX_PYTHON: ('buffer =  ""', 'buffer += "', '"'),
}

HEX_DIGITS = frozenset(b"0123456789ABCDEFabcdef")

# Skipped without being counted: EOF (0xFF reads back as -1), LF and NUL.
EOF_MARKER = 0xFF
SILENT_CHARS = frozenset((EOF_MARKER, 0x0A, 0x00))


def syntax_from_name(name: Optional[str]) -> str:
    if not name:
        return SYNTAX_PLAIN
    key = name.strip().lower()
    if key not in DECORATIONS:
        raise ValueError(f"Unknown syntax: '{name}' (expected one of {', '.join(SYNTAXES)})")
    return key


def format_warning(invalid_count: int) -> str:
    return f"[-] Warning: {invalid_count} non-hexadecimal character(s) detected in input."


def encode(digits: Union[bytes, bytearray, str],
           syntax: str = SYNTAX_PLAIN,
           width: int = 0,
           verbose: bool = False,
           interactive: bool = False) -> Tuple[str, int]:
    """
    Escapes a stream of ASCII hex digits into a binary string literal.

    Every pair of hex digits becomes one '\\xHH' token, digit case is kept.
    With width > 0 the literal is closed and reopened on a new line every
    'width' bytes; the check only happens at the start of a byte pair, so
    a pair is never split and the first line never starts with a break.

    Characters that are not hex digits are dropped. EOF (0xFF), LF and NUL
    are dropped silently; anything else is counted.

    Returns (text, invalid_count). Never fails on content.
    """
    if width < 0:
        raise ValueError(f"Invalid width: {width} (expected 0 or more bytes)")
    header, opening, closing = DECORATIONS[syntax]

    codes = digits if isinstance(digits, (bytes, bytearray)) else (ord(ch) for ch in digits)
    wrap_every = width * 2

    out = []
    if interactive:
        out.append("\n")
    if verbose and header is not None:
        out.append(header + "\n")
    out.append(opening)

    digit_index = 0
    invalid = 0
    for c in codes:
        if c in HEX_DIGITS:
            if digit_index % 2 == 0:
                if wrap_every and digit_index and digit_index % wrap_every == 0:
                    out.append(closing + "\n" + opening)
                out.append("\\x")
            out.append(chr(c))
            digit_index += 1
        elif c in SILENT_CHARS:
            continue
        else:
            invalid += 1

    out.append(closing + "\n")
    return "".join(out), invalid
