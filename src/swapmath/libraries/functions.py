from swapmath.constants import MAX_INT128, MAX_INT256, MAX_UINT160, MIN_INT128, MIN_INT256
from swapmath.exceptions import DivideByZero, Overflow


def mulmod(x: int, y: int, k: int) -> int:
    if k == 0:
        raise DivideByZero(error="mulmod by zero")
    return (x * y) % k


def _checked_cast(x: int, lower: int, upper: int, type_name: str) -> int:
    """
    Return the value unchanged if it fits the target type, otherwise revert like a Solidity
    SafeCast.
    """

    if not (lower <= x <= upper):
        raise Overflow(error=f"{x} does not fit in {type_name}")
    return x


def to_int128(x: int) -> int:
    return _checked_cast(x, MIN_INT128, MAX_INT128, "int128")


def to_int256(x: int) -> int:
    return _checked_cast(x, MIN_INT256, MAX_INT256, "int256")


def to_uint160(x: int) -> int:
    return _checked_cast(x, 0, MAX_UINT160, "uint160")
