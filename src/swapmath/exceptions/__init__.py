from swapmath.exceptions.base import SwapMathError, SwapMathValueError
from swapmath.exceptions.evm import DivideByZero, EVMRevertError, InvalidUint256, Overflow
from swapmath.exceptions.swap import (
    InvalidFee,
    InvalidLiquidity,
    InvalidPrice,
    NotEnoughLiquidity,
    PriceOverflow,
)

from . import evm, swap

__all__ = (
    "DivideByZero",
    "EVMRevertError",
    "InvalidFee",
    "InvalidLiquidity",
    "InvalidPrice",
    "InvalidUint256",
    "NotEnoughLiquidity",
    "Overflow",
    "PriceOverflow",
    "SwapMathError",
    "SwapMathValueError",
    "evm",
    "swap",
)
