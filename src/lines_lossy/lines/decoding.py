"""
Lossy UTF-8 decoding of a single line body.

CPython's `utf-8` codec with errors="replace" follows the Unicode Standard
"U+FFFD substitution of maximal subparts": a truncated but otherwise
well-formed prefix becomes one U+FFFD, and every byte that can not start
or continue a sequence (C0, C1, F5..FF, stray continuation bytes,
surrogate and overlong second bytes) becomes its own U+FFFD.
"""
from typing import Tuple

REPLACEMENT_CHARACTER = '\ufffd'
_ENCODED_REPLACEMENT_CHARACTER = REPLACEMENT_CHARACTER.encode('utf-8')


def decode_lossy(data: bytes) -> str:
    """
    Decode `data` as UTF-8 replacing ill-formed subsequences with U+FFFD.
    Never raises for bytes-like input. Valid input decodes exactly as strict decoding does.
    """
    return decode_lossy_counted(data)[0]


def decode_lossy_counted(data: bytes) -> Tuple[str, int]:
    """
    Same as `decode_lossy` but also returns how many U+FFFD were substituted.
    U+FFFD characters that were already present (validly encoded) in `data` are not counted.
    """
    try:
        return str(data, 'utf-8'), 0
    except UnicodeDecodeError:
        text = str(data, 'utf-8', 'replace')

    # EF BF BD is always a complete sequence, so it can not be swallowed by a replacement
    already_there = bytes(data).count(_ENCODED_REPLACEMENT_CHARACTER)
    return text, count_replacements(text) - already_there


def count_replacements(text: str) -> int:
    return text.count(REPLACEMENT_CHARACTER)
