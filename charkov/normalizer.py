"""
Copyright (c) 2025 Ynosound.
All rights reserved.

See LICENSE file in the project root for full license information.
"""

from charkov.errors import EncodingError

ASCII_CHARS = b"abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ'\".,-_:;!?() "

# bytes.translate() with this table drops everything not in ASCII_CHARS
_NON_ASCII = bytes(b for b in range(256) if b not in ASCII_CHARS)


def _as_bytes(data):
    if isinstance(data, str):
        return data.encode('utf-8')
    return bytes(data)


def filter_short_lines(data, min_line):
    """Removes the empty lines and the lines shorter than min_line (in bytes).
    A min_line of 0 keeps the input as is."""
    data = _as_bytes(data)
    if not min_line:
        return data
    lines = [line for line in data.split(b'\n') if line and len(line) >= min_line]
    return b'\n'.join(lines)


def fold_newlines(data):
    # the whole input becomes a single sequence
    return _as_bytes(data).replace(b'\n', b' ')


def restrict_charset(data):
    return _as_bytes(data).translate(None, _NON_ASCII)


def fold_case(data):
    # multi-byte utf-8 sequences are left untouched
    return _as_bytes(data).lower()


def decode_codepoints(data):
    try:
        return _as_bytes(data).decode('utf-8')
    except UnicodeDecodeError as e:
        raise EncodingError(e.start, e.reason) from e


def prepare_bytes(data, min_line=0, ascii_only=False):
    """
    Runs the byte level steps of the normalization, in order:
    short line filtering, newline folding, charset restriction (if ascii_only)
    and case folding.

    Args:
        data: the raw input, bytes or str
        min_line: lines shorter than this are dropped, 0 disables the filtering
        ascii_only: keeps only the letters, space and basic punctuation

    Returns:
        the lowercase byte string, as printed by the dump mode
    """
    data = filter_short_lines(data, min_line)
    data = fold_newlines(data)
    if ascii_only:
        data = restrict_charset(data)
    return fold_case(data)


def normalize(data, min_line=0, ascii_only=False):
    """Returns the training corpus as a str (a sequence of code points).
    Raises EncodingError if the input is not valid utf-8."""
    return decode_codepoints(prepare_bytes(data, min_line=min_line, ascii_only=ascii_only))
