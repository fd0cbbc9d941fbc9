"""Comparison of non-digit segments"""

from __future__ import annotations

import re
from typing import Callable, NamedTuple

__all__ = [
    "NonDigitComparator",
    "NonDigitResult",
    "ascii_case_insensitive_nondigit_compare",
    "bytewise_nondigit_compare",
]

_re_non_digits = re.compile(rb"[^0-9]*")


class NonDigitResult(NamedTuple):
    """Outcome of comparing the non-digit prefixes of two byte views.

    The end offsets are relative to the views that have been compared and point
    to the first digit in each view or to its end.
    """

    order: int
    end_a: int
    end_b: int


NonDigitComparator = Callable[[memoryview, memoryview], NonDigitResult]


def ascii_case_insensitive_nondigit_compare(
    a: memoryview, b: memoryview
) -> NonDigitResult:
    """Compare the non-digit prefixes of a and b ignoring the case of ASCII letters.

    This is the default strategy used by :func:`~natcmp.natural_compare`.
    """
    return _compare_prefixes(a, b, fold_case=True)


def bytewise_nondigit_compare(a: memoryview, b: memoryview) -> NonDigitResult:
    """Compare the non-digit prefixes of a and b byte by byte (case-sensitive)."""
    return _compare_prefixes(a, b, fold_case=False)


def _compare_prefixes(a: memoryview, b: memoryview, fold_case: bool) -> NonDigitResult:
    end_a = _re_non_digits.match(a).end()  # type: ignore
    end_b = _re_non_digits.match(b).end()  # type: ignore
    len_common = min(end_a, end_b)
    prefix_a, prefix_b = bytes(a[:len_common]), bytes(b[:len_common])
    if fold_case:
        prefix_a, prefix_b = prefix_a.lower(), prefix_b.lower()
    if prefix_a != prefix_b:
        order = -1 if prefix_a < prefix_b else 1
    elif end_a != end_b:
        # the shorter prefix comes first
        order = -1 if end_a < end_b else 1
    else:
        order = 0
    return NonDigitResult(order, end_a, end_b)
