"""Decoding of Go string literals, following strconv.Unquote."""

import string

from import_rewriter.config.go_constants import GoLiteralConstants


def unquote(literal: str) -> str:
    """Return the value of a Go string literal.

    Raises ``ValueError`` when ``literal`` is not a well-formed interpreted or
    raw string literal.
    """
    if len(literal) < 2:
        raise ValueError(f"invalid string literal: {literal!r}")

    quote = literal[0]
    if quote != literal[-1]:
        raise ValueError(f"mismatched quotes in {literal!r}")
    body = literal[1:-1]

    if quote == GoLiteralConstants.BACK_QUOTE:
        if GoLiteralConstants.BACK_QUOTE in body:
            raise ValueError(f"invalid raw string literal: {literal!r}")
        return body.replace('\r', '')

    if quote != GoLiteralConstants.DOUBLE_QUOTE:
        raise ValueError(f"invalid string literal: {literal!r}")
    if '\n' in body:
        raise ValueError(f"newline in string literal: {literal!r}")
    if '\\' not in body and '"' not in body:
        return body

    out = bytearray()
    i = 0
    while i < len(body):
        ch = body[i]
        if ch == '"':
            raise ValueError(f"unescaped quote in {literal!r}")
        if ch != '\\':
            out += ch.encode("utf-8")
            i += 1
            continue

        if i + 1 >= len(body):
            raise ValueError(f"trailing backslash in {literal!r}")
        esc = body[i + 1]
        i += 2

        if esc in GoLiteralConstants.SIMPLE_ESCAPES:
            out += GoLiteralConstants.SIMPLE_ESCAPES[esc].encode("utf-8")
        elif esc in GoLiteralConstants.HEX_ESCAPES:
            width = GoLiteralConstants.HEX_ESCAPES[esc]
            digits = body[i:i + width]
            if len(digits) != width or any(d not in string.hexdigits for d in digits):
                raise ValueError(f"invalid \\{esc} escape in {literal!r}")
            value = int(digits, 16)
            i += width
            if esc == 'x':
                out.append(value)
            else:
                if value > 0x10FFFF or 0xD800 <= value <= 0xDFFF:
                    raise ValueError(f"invalid code point in {literal!r}")
                out += chr(value).encode("utf-8")
        elif '0' <= esc <= '7':
            digits = body[i - 1:i + 2]
            if len(digits) != 3 or any(d not in "01234567" for d in digits):
                raise ValueError(f"invalid octal escape in {literal!r}")
            value = int(digits, 8)
            if value > 0xFF:
                raise ValueError(f"octal escape out of range in {literal!r}")
            out.append(value)
            i += 2
        else:
            raise ValueError(f"unknown escape \\{esc} in {literal!r}")

    return out.decode("utf-8", errors="surrogateescape")
