"""
EVM word operations on 256-bit unsigned values. Arithmetic wraps modulo 2**256, and division or
modulo by zero returns zero, matching the Yul builtins of the same name.
"""

from swapmath.constants import MAX_UINT256

WORD_MODULUS = MAX_UINT256 + 1


def add(x: int, y: int) -> int:
    return (x + y) % WORD_MODULUS


def sub(x: int, y: int) -> int:
    return (x - y) % WORD_MODULUS


def mul(x: int, y: int) -> int:
    return (x * y) % WORD_MODULUS


def div(x: int, y: int) -> int:
    return 0 if y == 0 else x // y


def mulmod(x: int, y: int, m: int) -> int:
    return 0 if m == 0 else (x * y) % m


def lt(x: int, y: int) -> int:
    return 1 if x < y else 0


def gt(x: int, y: int) -> int:
    return 1 if x > y else 0


def _and(x: int, y: int) -> int:
    return x & y


def _or(x: int, y: int) -> int:
    return x | y


def xor(x: int, y: int) -> int:
    return x ^ y


def _not(x: int) -> int:
    return MAX_UINT256 ^ x
