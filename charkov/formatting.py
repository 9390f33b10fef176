"""
Copyright (c) 2025 Ynosound.
All rights reserved.

See LICENSE file in the project root for full license information.
"""
import re


def trim(text):
    return text.strip(' \t')


def split_by_regex(text, pattern):
    """Yields the text between the matches and the matches themselves, in order.
    The remainder after the last match is yielded only if not empty."""
    start = 0
    matched = False
    for match in re.finditer(pattern, text):
        matched = True
        yield text[start:match.start()]
        yield match.group(0)
        start = match.end()
    if not matched or start < len(text):
        yield text[start:]


def format_output(text, split=None):
    if split is None:
        return trim(text)
    result = []
    for i, piece in enumerate(split_by_regex(text, split)):
        # short pieces (usually the separators) stay on the current line
        if i > 0 and len(piece) > 5:
            result.append('\n')
        result.append(trim(piece))
    return ''.join(result)
