from typing import Any

from swapmath.exceptions.base import SwapMathError


class EVMRevertError(SwapMathError):
    """
    Raised when a simulated EVM contract operation would revert.
    """

    def __init__(self, error: str) -> None:
        self.error = error
        super().__init__(message=f"EVM Revert: {error}")

    def __reduce__(self) -> tuple[Any, ...]:
        # Pickling will raise an exception if a reduction method is not defined
        return self.__class__, (self.error,)


class InvalidUint256(EVMRevertError):
    def __init__(self, error: str = "Not a valid uint256") -> None:
        super().__init__(error=error)


class DivideByZero(EVMRevertError):
    """
    Raised when a ratio would be computed with a zero denominator.
    """

    def __init__(self, error: str = "DivideByZero") -> None:
        super().__init__(error=error)


class Overflow(EVMRevertError):
    """
    Raised when a result does not fit the width of its return type.
    """

    def __init__(self, error: str = "Overflow") -> None:
        super().__init__(error=error)
