"""Natural Compare Errors

The :mod:`natcmp.error` package contains the errors raised when natural order
comparison cannot be performed.
"""

from .natural_compare_error import NaturalCompareError

from .strategy_contract_error import StrategyContractError

__all__ = ["NaturalCompareError", "StrategyContractError"]
