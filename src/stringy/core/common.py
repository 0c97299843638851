"""
Longest common prefix, suffix and substring of two codepoint sequences.
"""

from __future__ import annotations

import numpy as np


def _as_codepoints(text: str) -> np.ndarray:
    """Convert text to an array of Unicode scalar values."""
    return np.frombuffer(text.encode("utf-32-le", "surrogatepass"), dtype="<u4")


def longest_common_prefix(a: str, b: str) -> str:
    """
    Return the longest prefix shared by both strings.

    Examples:
        >>> longest_common_prefix("foobar", "foo bar")
        'foo'
    """
    limit = min(len(a), len(b))
    i = 0
    while i < limit and a[i] == b[i]:
        i += 1
    return a[:i]


def longest_common_suffix(a: str, b: str) -> str:
    """
    Return the longest suffix shared by both strings.

    Examples:
        >>> longest_common_suffix("fòô bàř", "fòr bàř")
        ' bàř'
    """
    limit = min(len(a), len(b))
    i = 0
    while i < limit and a[-1 - i] == b[-1 - i]:
        i += 1
    return a[len(a) - i :]


def longest_common_substring(a: str, b: str) -> str:
    """
    Return the longest substring shared by both strings.

    Dynamic programming over an (n+1) x (m+1) table where table[i][j] is
    the length of the common suffix ending at a[i-1] and b[j-1]. Rows are
    filled top to bottom; the first row that reaches a new maximum fixes
    the answer, so the leftmost maximal match in `a` wins ties.

    Examples:
        >>> longest_common_substring("foo bar", "boo far")
        'oo '
    """
    if not a or not b:
        return ""

    other = _as_codepoints(b)
    previous = np.zeros(len(b) + 1, dtype=np.int64)
    best_length = 0
    best_end = 0

    for i, ch in enumerate(_as_codepoints(a), start=1):
        current = np.zeros_like(previous)
        current[1:] = np.where(other == ch, previous[:-1] + 1, 0)
        row_max = int(current.max())
        if row_max > best_length:
            best_length = row_max
            best_end = i
        previous = current

    return a[best_end - best_length : best_end]
