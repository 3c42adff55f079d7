import functools

from pydantic import validate_call

from swapmath.constants import MAX_UINT160, MAX_UINT256
from swapmath.exceptions import (
    DivideByZero,
    InvalidLiquidity,
    InvalidPrice,
    NotEnoughLiquidity,
    Overflow,
    PriceOverflow,
)
from swapmath.libraries._config import LIB_CACHE_SIZE
from swapmath.libraries.constants import Q96, Q96_RESOLUTION
from swapmath.libraries.full_math import muldiv, muldiv_rounding_up
from swapmath.libraries.functions import to_int128, to_int256, to_uint160
from swapmath.libraries.unsafe_math import div_rounding_up
from swapmath.types import Rounding
from swapmath.validation.evm_values import ValidatedUint128, ValidatedUint160, ValidatedUint256

"""
ref: https://github.com/Uniswap/v3-core/blob/main/contracts/libraries/SqrtPriceMath.sol
"""


@functools.lru_cache(maxsize=LIB_CACHE_SIZE)
@validate_call
def get_amount0_delta(
    sqrt_ratio_a_x96: ValidatedUint160,
    sqrt_ratio_b_x96: ValidatedUint160,
    liquidity: ValidatedUint128,
    round_up: Rounding | bool,
) -> int:
    """
    Gets the amount0 delta between two prices, calculated as
    liquidity / sqrt(lower) - liquidity / sqrt(upper).
    """

    if sqrt_ratio_a_x96 > sqrt_ratio_b_x96:
        sqrt_ratio_a_x96, sqrt_ratio_b_x96 = sqrt_ratio_b_x96, sqrt_ratio_a_x96

    numerator1 = liquidity << Q96_RESOLUTION
    numerator2 = sqrt_ratio_b_x96 - sqrt_ratio_a_x96

    if not (sqrt_ratio_a_x96 > 0):
        raise InvalidPrice(error="required: sqrt_ratio_a_x96 > 0")

    return (
        div_rounding_up(
            muldiv_rounding_up(numerator1, numerator2, sqrt_ratio_b_x96),
            sqrt_ratio_a_x96,
        )
        if round_up
        else muldiv(numerator1, numerator2, sqrt_ratio_b_x96) // sqrt_ratio_a_x96
    )


@functools.lru_cache(maxsize=LIB_CACHE_SIZE)
@validate_call
def get_amount1_delta(
    sqrt_ratio_a_x96: ValidatedUint160,
    sqrt_ratio_b_x96: ValidatedUint160,
    liquidity: ValidatedUint128,
    round_up: Rounding | bool,
) -> int:
    """
    Gets the amount1 delta between two prices, calculated as
    liquidity * (sqrt(upper) - sqrt(lower)).
    """

    if sqrt_ratio_a_x96 > sqrt_ratio_b_x96:
        sqrt_ratio_a_x96, sqrt_ratio_b_x96 = sqrt_ratio_b_x96, sqrt_ratio_a_x96

    return (
        muldiv_rounding_up(liquidity, sqrt_ratio_b_x96 - sqrt_ratio_a_x96, Q96)
        if round_up
        else muldiv(liquidity, sqrt_ratio_b_x96 - sqrt_ratio_a_x96, Q96)
    )


def get_amount0_delta_signed(
    sqrt_ratio_a_x96: int,
    sqrt_ratio_b_x96: int,
    liquidity: int,
) -> int:
    """
    Gets the signed token0 delta for a signed liquidity change. Removed liquidity rounds down and
    returns a negative amount, added liquidity rounds up.
    """

    liquidity = to_int128(liquidity)
    return (
        -to_int256(
            get_amount0_delta(sqrt_ratio_a_x96, sqrt_ratio_b_x96, -liquidity, Rounding.DOWN)
        )
        if liquidity < 0
        else to_int256(
            get_amount0_delta(sqrt_ratio_a_x96, sqrt_ratio_b_x96, liquidity, Rounding.UP)
        )
    )


def get_amount1_delta_signed(
    sqrt_ratio_a_x96: int,
    sqrt_ratio_b_x96: int,
    liquidity: int,
) -> int:
    """
    Gets the signed token1 delta for a signed liquidity change. Removed liquidity rounds down and
    returns a negative amount, added liquidity rounds up.
    """

    liquidity = to_int128(liquidity)
    return (
        -to_int256(
            get_amount1_delta(sqrt_ratio_a_x96, sqrt_ratio_b_x96, -liquidity, Rounding.DOWN)
        )
        if liquidity < 0
        else to_int256(
            get_amount1_delta(sqrt_ratio_a_x96, sqrt_ratio_b_x96, liquidity, Rounding.UP)
        )
    )


@functools.lru_cache(maxsize=LIB_CACHE_SIZE)
@validate_call
def get_next_sqrt_price_from_amount0_rounding_up(
    sqrt_price_x96: ValidatedUint160,
    liquidity: ValidatedUint128,
    amount: ValidatedUint256,
    add: bool,
) -> int:
    # we short circuit amount == 0 because the result is otherwise not guaranteed to equal the
    # input price
    if amount == 0:
        return sqrt_price_x96

    numerator1 = liquidity << Q96_RESOLUTION
    product = amount * sqrt_price_x96

    if add:
        # safe path, neither the product nor the denominator overflow a uint256
        if product <= MAX_UINT256 and (denominator := numerator1 + product) <= MAX_UINT256:
            return muldiv_rounding_up(numerator1, sqrt_price_x96, denominator)

        # failsafe path in case of overflow
        denominator = (numerator1 // sqrt_price_x96) + amount
        if denominator > MAX_UINT256:
            raise Overflow(error="required: numerator1 / sqrt_price_x96 + amount <= MAX_UINT256")
        return div_rounding_up(numerator1, denominator)

    # the product must not overflow, and the amount removed must be less than the reserves
    if not (product <= MAX_UINT256 and numerator1 > product):
        raise PriceOverflow(error="required: numerator1 > product")

    denominator = numerator1 - product
    return to_uint160(muldiv_rounding_up(numerator1, sqrt_price_x96, denominator))


@functools.lru_cache(maxsize=LIB_CACHE_SIZE)
@validate_call
def get_next_sqrt_price_from_amount1_rounding_down(
    sqrt_price_x96: ValidatedUint160,
    liquidity: ValidatedUint128,
    amount: ValidatedUint256,
    add: bool,
) -> int:
    if liquidity == 0:
        raise DivideByZero(error="required: liquidity > 0")

    # if we're adding (subtracting), rounding down requires rounding the quotient down (up)
    # in both cases, avoid a muldiv for most inputs
    if add:
        quotient = (
            (amount << Q96_RESOLUTION) // liquidity
            if amount <= MAX_UINT160
            else muldiv(amount, Q96, liquidity)
        )
        return to_uint160(sqrt_price_x96 + quotient)

    quotient = (
        div_rounding_up(amount << Q96_RESOLUTION, liquidity)
        if amount <= MAX_UINT160
        else muldiv_rounding_up(amount, Q96, liquidity)
    )

    if not (sqrt_price_x96 > quotient):
        raise NotEnoughLiquidity(error="required: sqrt_price_x96 > quotient")

    # always fits 160 bits
    return sqrt_price_x96 - quotient


@functools.lru_cache(maxsize=LIB_CACHE_SIZE)
@validate_call
def get_next_sqrt_price_from_input(
    sqrt_price_x96: ValidatedUint160,
    liquidity: ValidatedUint128,
    amount_in: ValidatedUint256,
    zero_for_one: bool,
) -> int:
    """
    Gets the next sqrt price given an input amount of token0 or token1.
    """

    if not (sqrt_price_x96 > 0):
        raise InvalidPrice(error="required: sqrt_price_x96 > 0")

    if not (liquidity > 0):
        raise InvalidLiquidity(error="required: liquidity > 0")

    # round to make sure that we don't pass the target price
    return (
        get_next_sqrt_price_from_amount0_rounding_up(sqrt_price_x96, liquidity, amount_in, True)
        if zero_for_one
        else get_next_sqrt_price_from_amount1_rounding_down(
            sqrt_price_x96, liquidity, amount_in, True
        )
    )


@functools.lru_cache(maxsize=LIB_CACHE_SIZE)
@validate_call
def get_next_sqrt_price_from_output(
    sqrt_price_x96: ValidatedUint160,
    liquidity: ValidatedUint128,
    amount_out: ValidatedUint256,
    zero_for_one: bool,
) -> int:
    """
    Gets the next sqrt price given an output amount of token0 or token1.
    """

    if not (sqrt_price_x96 > 0):
        raise InvalidPrice(error="required: sqrt_price_x96 > 0")

    if not (liquidity > 0):
        raise InvalidLiquidity(error="required: liquidity > 0")

    # round to make sure that we pass the target price
    return (
        get_next_sqrt_price_from_amount1_rounding_down(sqrt_price_x96, liquidity, amount_out, False)
        if zero_for_one
        else get_next_sqrt_price_from_amount0_rounding_up(
            sqrt_price_x96, liquidity, amount_out, False
        )
    )
