"""Strategy Contract Error"""

from __future__ import annotations

from typing import Any, Callable

from .natural_compare_error import NaturalCompareError

__all__ = ["StrategyContractError"]


class StrategyContractError(NaturalCompareError):
    """A NaturalCompareError raised when a non-digit strategy misreports an end.

    After reporting equal prefixes, a strategy must return end offsets that lie
    within the compared views and point to a digit or to the end of the view.
    """

    strategy: Callable[..., Any]
    """The strategy that returned the invalid end offset"""

    side: str
    """The input with the invalid end offset, either 'a' or 'b'"""

    end: Any
    """The reported end offset"""

    def __init__(self, strategy: Callable[..., Any], side: str, end: Any) -> None:
        name = getattr(strategy, "__name__", None) or repr(strategy)
        super().__init__(
            f"Non-digit strategy {name} returned invalid end offset {end!r}"
            f" for input {side}: must point to a digit or to the end of the input."
        )
        self.strategy = strategy
        self.side = side
        self.end = end
