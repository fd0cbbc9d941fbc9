from functools import cmp_to_key, partial
from typing import Any, Optional

from .natural_compare import StrOrBytes, natural_compare
from .nondigit_compare import NonDigitComparator

__all__ = ["natural_comparison_key"]


def natural_comparison_key(
    value: StrOrBytes, strategy: Optional[NonDigitComparator] = None
) -> Any:
    """Comparison key function for sorting strings by natural sort order.

    The returned keys are ordered like :func:`~natcmp.natural_compare` orders the
    values, e.g. ``sorted(names, key=natural_comparison_key)``. Use
    ``functools.partial`` to sort with a different non-digit strategy.
    """
    return cmp_to_key(partial(natural_compare, strategy=strategy))(value)
