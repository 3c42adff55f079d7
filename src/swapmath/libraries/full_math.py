from swapmath.constants import MAX_UINT256, MIN_UINT256
from swapmath.exceptions import DivideByZero, InvalidUint256, Overflow
from swapmath.libraries import yul_operations as yul
from swapmath.libraries.functions import mulmod


def _check_uint256(value: int, name: str) -> None:
    if not (MIN_UINT256 <= value <= MAX_UINT256):
        raise InvalidUint256(error=f"Invalid value for {name}.")


def muldiv(
    a: int,
    b: int,
    denominator: int,
) -> int:
    """
    Calculates floor(a*b/denominator) with full precision. Throws if result overflows a uint256 or
    denominator == 0.

    The 512-bit product is held in two 256-bit words [prod1 prod0] and divided without ever
    exceeding the word width, reproducing the Solidity contract operation by operation.

    ref: https://github.com/Uniswap/v3-core/blob/main/contracts/libraries/FullMath.sol
    ref: https://xn--2-umb.com/21/muldiv
    """

    # Assert values are valid for Solidity contract
    _check_uint256(a, "a")
    _check_uint256(b, "b")
    _check_uint256(denominator, "denominator")

    # 512-bit multiply [prod1 prod0] = a * b, using the Chinese Remainder Theorem to reconstruct
    # the high word from the product modulo 2**256 and modulo 2**256 - 1
    mm = yul.mulmod(a, b, yul._not(0))
    prod0 = yul.mul(a, b)
    prod1 = yul.sub(yul.sub(mm, prod0), yul.lt(mm, prod0))

    # Handle non-overflow cases, 256 by 256 division
    if prod1 == 0:
        if denominator == 0:
            raise DivideByZero(error="required: denominator > 0")
        return yul.div(prod0, denominator)

    # Make sure the result is less than 2**256, which also prevents denominator == 0
    if denominator == 0:
        raise DivideByZero(error="required: denominator > 0")
    if not (denominator > prod1):
        raise Overflow(error="Invalid result, does not fit in uint256")

    # Make division exact by subtracting the remainder from [prod1 prod0]
    remainder = yul.mulmod(a, b, denominator)
    prod1 = yul.sub(prod1, yul.gt(remainder, prod0))
    prod0 = yul.sub(prod0, remainder)

    # Factor powers of two out of denominator, the largest power of two divisor is always >= 1
    twos = yul._and(yul.sub(0, denominator), denominator)
    denominator = yul.div(denominator, twos)
    prod0 = yul.div(prod0, twos)

    # Shift in bits from prod1 into prod0. Flip `twos` such that it is 2**256 / twos. If twos is
    # one, the result wraps to zero.
    twos = yul.add(yul.div(yul.sub(0, twos), twos), 1)
    prod0 = yul._or(prod0, yul.mul(prod1, twos))

    # Invert denominator mod 2**256. The seed is correct for four bits, and each Newton-Raphson
    # iteration doubles the number of correct bits: 8, 16, 32, 64, 128, 256.
    inv = yul.xor(yul.mul(3, denominator), 2)
    for _ in range(6):
        inv = yul.mul(inv, yul.sub(2, yul.mul(denominator, inv)))

    # The division is exact, so the result is prod0 multiplied by the modular inverse of the
    # denominator. The high word is no longer required because the result is less than 2**256.
    return yul.mul(prod0, inv)


def muldiv_rounding_up(
    a: int,
    b: int,
    denominator: int,
) -> int:
    """
    Calculates ceil(a*b/denominator) with full precision. Throws if result overflows a uint256 or
    denominator == 0.

    ref: https://github.com/Uniswap/v3-core/blob/main/contracts/libraries/FullMath.sol
    """

    result = muldiv(a, b, denominator)
    if mulmod(a, b, denominator) > 0:
        # must be less than max uint256 since we're rounding up
        if not (MIN_UINT256 <= result < MAX_UINT256):
            raise Overflow(error="Invalid result, does not fit in uint256")
        return result + 1
    return result
