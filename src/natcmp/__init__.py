"""Natural order comparison for Python

The :mod:`natcmp` package compares strings by natural sort order, treating runs of
ASCII digits as numbers, so that "file2.txt" comes before "file10.txt".

The main entry point is :func:`natural_compare`, a three-way comparison function.
The non-digit parts of the strings are compared by a pluggable strategy, which is
case-insensitive for ASCII letters by default. Use :func:`natural_comparison_key`
to sort with Python's built-in sort functions.
"""

# The natcmp package version.
from .version import version, version_info

# Strategies for comparing the non-digit parts.
from .nondigit_compare import (
    NonDigitComparator,
    NonDigitResult,
    ascii_case_insensitive_nondigit_compare,
    bytewise_nondigit_compare,
)

# The natural order comparison.
from .natural_compare import natural_compare, StrOrBytes
from .natural_comparison_key import natural_comparison_key

# Input handling.
from .as_bytes import as_bytes, is_ascii_digit

# Errors.
from .error import NaturalCompareError, StrategyContractError

__version__ = version

__all__ = [
    "version",
    "version_info",
    "__version__",
    "NonDigitComparator",
    "NonDigitResult",
    "ascii_case_insensitive_nondigit_compare",
    "bytewise_nondigit_compare",
    "natural_compare",
    "StrOrBytes",
    "natural_comparison_key",
    "as_bytes",
    "is_ascii_digit",
    "NaturalCompareError",
    "StrategyContractError",
]
