# parse_escape_sequences, nt_escape
# (string utilities)
#

import string

ESCAPES = {
    '0': '\0',
    'a': '\a',
    'b': '\b',
    't': '\t',
    'n': '\n',
    'v': '\v',
    'f': '\f',
    'r': '\r',
    'e': '\x1b',
    '\\': '\\',
    "'": "'",
    '"': '"',
}


def parse_escape_sequences(text: str) -> str:
    """Interpret C-style escapes in `text`.

    Supports the sequences in `ESCAPES` and ``\\uXXXX`` with one to four
    hex digits. Unknown escapes are left as they are.

    """
    output = ''
    i = 0
    while i < len(text):
        c = text[i]
        i += 1
        if c != '\\' or i == len(text):
            output += c
            continue
        nxt = text[i]
        if nxt in ESCAPES:
            output += ESCAPES[nxt]
            i += 1
        elif nxt == 'u':
            i += 1
            hex_digits = ''
            while len(hex_digits) < 4 and i < len(text) and text[i] in string.hexdigits:
                hex_digits += text[i]
                i += 1
            codepoint = int(hex_digits, 16) if hex_digits else None
            # surrogates are not characters
            if codepoint is not None and not 0xD800 <= codepoint <= 0xDFFF:
                output += chr(codepoint)
        else:
            output += c
    return output


def nt_escape(text: str) -> str:
    """Newline and tab C-style escape"""
    output = ''
    tr = {
        '\\': '\\\\',
        '\n': '\\n',
        '\t': '\\t',
    }
    for c in text:
        if c in tr:
            output += tr[c]
        else:
            output += c
    return output
