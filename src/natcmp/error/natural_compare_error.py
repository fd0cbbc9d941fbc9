from typing import Any

__all__ = ["NaturalCompareError"]


class NaturalCompareError(Exception):
    """Natural Compare Error

    Base class for the errors raised by the natural order comparison.
    """

    message: str
    """A message describing the error for debugging purposes"""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r})"

    def __eq__(self, other: Any) -> bool:
        return (
            isinstance(other, NaturalCompareError)
            and self.__class__ == other.__class__
            and self.message == other.message
        )

    def __ne__(self, other: Any) -> bool:
        return not self == other

    __hash__ = Exception.__hash__
