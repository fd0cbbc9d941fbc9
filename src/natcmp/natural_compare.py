"""Natural sort order"""

from __future__ import annotations

import re
from typing import NamedTuple, Optional, Union

from .as_bytes import as_bytes, is_ascii_digit
from .error import StrategyContractError
from .nondigit_compare import (
    NonDigitComparator,
    ascii_case_insensitive_nondigit_compare,
)

__all__ = ["natural_compare", "StrOrBytes"]

StrOrBytes = Union[str, bytes, bytearray, memoryview]

_re_digits = re.compile(rb"[0-9]*")
_re_leading_zeros = re.compile(rb"0*(?=[0-9])")


class DigitRun(NamedTuple):
    """A run of digits with the offsets of its significant digits."""

    head: int
    digits: int
    tail: int

    @classmethod
    def scan(cls, s: Union[bytes, bytearray], start: int) -> DigitRun:
        # s[start] is a digit, so neither pattern can fail to match;
        # a lone zero is significant
        digits = _re_leading_zeros.match(s, start).end()  # type: ignore
        tail = _re_digits.match(s, digits).end()  # type: ignore
        return cls(start, digits, tail)

    @property
    def num_digits(self) -> int:
        return self.tail - self.digits

    @property
    def length(self) -> int:
        return self.tail - self.head


def natural_compare(
    a: StrOrBytes, b: StrOrBytes, strategy: Optional[NonDigitComparator] = None
) -> int:
    """Compare two strings by natural sort order.

    Runs of ASCII digits are compared by their numeric value, so "file2.txt" comes
    before "file10.txt". Numbers come before other characters at the same position.
    When two numbers are equal, the one with fewer leading zeros comes first.

    All other parts are compared by the given non-digit strategy, which defaults to
    :func:`~natcmp.ascii_case_insensitive_nondigit_compare`.

    Returns -1 if a comes before b, 1 if a comes after b and 0 if they are equal.

    See: https://en.wikipedia.org/wiki/Natural_sort_order
    """
    if strategy is None:
        strategy = ascii_case_insensitive_nondigit_compare
    a, b = as_bytes(a), as_bytes(b)
    len_a, len_b = len(a), len(b)
    pos_a = pos_b = 0

    while pos_a < len_a and pos_b < len_b:
        is_digit_a = is_ascii_digit(a[pos_a])
        is_digit_b = is_ascii_digit(b[pos_b])

        if not is_digit_a and not is_digit_b:
            order, end_a, end_b = strategy(memoryview(a)[pos_a:], memoryview(b)[pos_b:])
            if order:
                return -1 if order < 0 else 1
            pos_a = _resume_at(a, pos_a, end_a, strategy, "a")
            pos_b = _resume_at(b, pos_b, end_b, strategy, "b")
            if pos_a == len_a or pos_b == len_b:
                break
            is_digit_a = is_ascii_digit(a[pos_a])
            is_digit_b = is_ascii_digit(b[pos_b])

        if is_digit_a != is_digit_b:
            # numbers come before other characters
            return -1 if is_digit_a else 1

        run_a, run_b = DigitRun.scan(a, pos_a), DigitRun.scan(b, pos_b)
        if run_a.num_digits != run_b.num_digits:
            return -1 if run_a.num_digits < run_b.num_digits else 1
        digits_a = a[run_a.digits : run_a.tail]
        digits_b = b[run_b.digits : run_b.tail]
        if digits_a != digits_b:
            return -1 if digits_a < digits_b else 1
        if run_a.length != run_b.length:
            # more leading zeros come later
            return -1 if run_a.length < run_b.length else 1

        pos_a, pos_b = run_a.tail, run_b.tail

    if pos_b < len_b:
        return -1
    if pos_a < len_a:
        return 1
    return 0


def _resume_at(
    s: Union[bytes, bytearray],
    start: int,
    end: int,
    strategy: NonDigitComparator,
    side: str,
) -> int:
    """Get the position after a non-digit segment as reported by the strategy.

    The position must point to a digit or to the end of the input. Since the segment
    starts with a non-digit, this also rejects strategies that do not advance.
    """
    if not isinstance(end, int) or isinstance(end, bool) or end < 0:
        raise StrategyContractError(strategy, side, end)
    pos = start + end
    if pos > len(s) or (pos < len(s) and not is_ascii_digit(s[pos])):
        raise StrategyContractError(strategy, side, end)
    return pos
