from __future__ import annotations

import re
import unicodedata

from .types import ParameterToken

CRLF = "\r\n"
FOLD_WIDTH = 76
FOLD_MARKER = CRLF + "\t"

_FOLD_POINTS = " \t"


def split_parameters(parameters: str) -> list[ParameterToken]:
    """Split a raw ``key=value;key`` parameter string into tokens.

    Empty tokens are skipped. Keys are lower-cased for lookup while ``raw``
    keeps the token text exactly as it appeared.
    """
    tokens: list[ParameterToken] = []
    for raw in (parameters or "").split(";"):
        if not raw:
            continue
        key, sep, val = raw.partition("=")
        tokens.append(
            {
                "raw": raw,
                "key": key.strip().lower(),
                "value": val.strip() if sep else None,
            }
        )
    return tokens


def need_encode(value: str) -> bool:
    """Return True if value can't be written as-is in a vCard 2.1 line.

    That is any non-ASCII character or any control character (TAB, CR and LF
    included).
    """
    if not value.isascii():
        return True
    return any(unicodedata.category(c) == "Cc" for c in value)


def fold_data(data: str, width: int = FOLD_WIDTH) -> str:
    """Fold a long value into physical lines of at most ``width`` chars.

    Folds at the last space or tab of the current line when there is one,
    otherwise breaks the word at ``width``. The whitespace stays at the start
    of the continuation line so removing FOLD_MARKER restores the input.
    """
    if len(data) <= width:
        return data

    parts = []
    start = 0
    fold_pos = None
    last = len(data) - 1
    i = 0
    while i <= last:
        if data[i] in _FOLD_POINTS and i > start:
            fold_pos = i

        if i - start >= width:
            if fold_pos is None:
                fold_pos = i
            parts.append(data[start:fold_pos])
            start = i = fold_pos
            fold_pos = None
            continue

        if i == last:
            parts.append(data[start:])
        i += 1

    return FOLD_MARKER.join(parts)


def unfold_data(data: str) -> str:
    return data.replace(FOLD_MARKER, "")


def escape_text(s: object) -> str:
    """Escape a free-text value per RFC 2426 section 5.

    Backslashes, commas and semicolons get a backslash, line breaks become
    ``\\n``.
    """
    if s is None:
        return ""
    value = re.sub(r"\r\n|\r", "\n", str(s))
    return (
        value.replace("\\", "\\\\")
        .replace(";", "\\;")
        .replace(",", "\\,")
        .replace("\n", "\\n")
    )


def unescape_text(s: str) -> str:
    chars = []
    index = 0
    end = len(s)
    while index < end:
        char = s[index]
        index += 1
        if char == "\\" and index < end:
            next_char = s[index]
            index += 1
            if next_char in "\\,;":
                chars.append(next_char)
            elif next_char in "nN":
                chars.append("\n")
            else:
                chars.append(char)
                chars.append(next_char)
        else:
            chars.append(char)
    return "".join(chars)


__all__ = [
    "CRLF",
    "FOLD_WIDTH",
    "FOLD_MARKER",
    "split_parameters",
    "need_encode",
    "fold_data",
    "unfold_data",
    "escape_text",
    "unescape_text",
]
