# ruff: noqa: E501

from decimal import Decimal, getcontext

import hypothesis
import hypothesis.strategies
import pydantic
import pytest

from swapmath.constants import MAX_UINT128, MAX_UINT160, MAX_UINT256
from swapmath.exceptions import InvalidFee
from swapmath.libraries.constants import MAX_SQRT_RATIO, MAX_SWAP_FEE, MIN_SQRT_RATIO, Q96
from swapmath.libraries.sqrt_price_math import (
    get_next_sqrt_price_from_input,
    get_next_sqrt_price_from_output,
)
from swapmath.libraries.swap_math import compute_swap_step
from swapmath.types import ExactInput, ExactOutput, SwapStepResult

# Tests adapted from Typescript tests on Uniswap V3 Github repo
# ref: https://github.com/Uniswap/v3-core/blob/main/test/SwapMath.spec.ts


# Change the rounding method to match the BigNumber unit test at https://github.com/Uniswap/v3-core/blob/main/test/shared/utilities.ts
# which specifies .integerValue(3), the 'ROUND_FLOOR' rounding method per https://mikemcl.github.io/bignumber.js/#bignumber
getcontext().prec = 256
getcontext().rounding = "ROUND_FLOOR"


def expand_to_18_decimals(x: int):
    return x * 10**18


def encode_price_sqrt(reserve1: int, reserve0: int):
    """
    Returns the sqrt price as a Q64.96 value
    """
    return round((Decimal(reserve1) / Decimal(reserve0)).sqrt() * Decimal(2**96))


def test_exact_amount_in_capped_at_price_target_in_one_for_zero():
    price = encode_price_sqrt(1, 1)
    price_target = encode_price_sqrt(101, 100)
    liquidity = expand_to_18_decimals(2)
    amount = expand_to_18_decimals(1)
    fee = 600
    zero_for_one = False

    sqrt_q, amount_in, amount_out, fee_amount = compute_swap_step(
        price, price_target, liquidity, amount, fee
    )

    assert amount_in == 9975124224178055
    assert fee_amount == 5988667735148
    assert amount_out == 9925619580021728
    assert amount_in + fee_amount < amount

    price_after_whole_input_amount = get_next_sqrt_price_from_input(
        price, liquidity, amount, zero_for_one
    )

    assert sqrt_q == price_target
    assert sqrt_q < price_after_whole_input_amount


def test_exact_amount_out_capped_at_price_target_in_one_for_zero():
    price = encode_price_sqrt(1, 1)
    price_target = encode_price_sqrt(101, 100)
    liquidity = expand_to_18_decimals(2)
    amount = -expand_to_18_decimals(1)
    fee = 600
    zero_for_one = False

    sqrt_q, amount_in, amount_out, fee_amount = compute_swap_step(
        price, price_target, liquidity, amount, fee
    )

    assert amount_in == 9975124224178055
    assert fee_amount == 5988667735148
    assert amount_out == 9925619580021728
    assert amount_out < -amount

    price_after_whole_output_amount = get_next_sqrt_price_from_output(
        price, liquidity, -amount, zero_for_one
    )

    assert sqrt_q == price_target
    assert sqrt_q < price_after_whole_output_amount


def test_exact_amount_in_fully_spent_in_one_for_zero():
    price = encode_price_sqrt(1, 1)
    price_target = encode_price_sqrt(1000, 100)
    liquidity = expand_to_18_decimals(2)
    amount = expand_to_18_decimals(1)
    fee = 600
    zero_for_one = False

    sqrt_q, amount_in, amount_out, fee_amount = compute_swap_step(
        price, price_target, liquidity, amount, fee
    )

    assert amount_in == 999400000000000000
    assert fee_amount == 600000000000000
    assert amount_out == 666399946655997866
    assert amount_in + fee_amount == amount

    price_after_whole_input_amount_less_fee = get_next_sqrt_price_from_input(
        price, liquidity, amount - fee_amount, zero_for_one
    )

    assert sqrt_q < price_target
    assert sqrt_q == price_after_whole_input_amount_less_fee


def test_exact_amount_out_fully_received_in_one_for_zero():
    price = encode_price_sqrt(1, 1)
    price_target = encode_price_sqrt(10000, 100)
    liquidity = expand_to_18_decimals(2)
    amount = -expand_to_18_decimals(1)
    fee = 600
    zero_for_one = False

    sqrt_q, amount_in, amount_out, fee_amount = compute_swap_step(
        price, price_target, liquidity, amount, fee
    )

    assert amount_in == 2000000000000000000
    assert fee_amount == 1200720432259356
    assert amount_out == -amount

    price_after_whole_output_amount = get_next_sqrt_price_from_output(
        price, liquidity, -amount, zero_for_one
    )

    assert sqrt_q < price_target
    assert sqrt_q == price_after_whole_output_amount


def test_amount_out_is_capped_at_the_desired_amount_out():
    sqrt_q, amount_in, amount_out, fee_amount = compute_swap_step(
        417332158212080721273783715441582,
        1452870262520218020823638996,
        159344665391607089467575320103,
        -1,
        1,
    )

    assert amount_in == 1
    assert fee_amount == 1
    assert amount_out == 1  # would be 2 if not capped
    assert sqrt_q == 417332158212080721273783715441581


def test_target_price_of_1_uses_partial_input_amount():
    sqrt_q, amount_in, amount_out, fee_amount = compute_swap_step(
        2,
        1,
        1,
        3915081100057732413702495386755767,
        1,
    )
    assert amount_in == 39614081257132168796771975168
    assert fee_amount == 39614120871253040049813
    assert amount_in + fee_amount <= 3915081100057732413702495386755767
    assert amount_out == 0
    assert sqrt_q == 1


def test_entire_input_amount_taken_as_fee():
    sqrt_q, amount_in, amount_out, fee_amount = compute_swap_step(
        2413,
        79887613182836312,
        1985041575832132834610021537970,
        10,
        1872,
    )
    assert amount_in == 0
    assert fee_amount == 10
    assert amount_out == 0
    assert sqrt_q == 2413


def test_handles_intermediate_insufficient_liquidity_in_zero_for_one_exact_output_case():
    sqrt_p = 20282409603651670423947251286016
    sqrt_p_target = sqrt_p * 11 // 10
    liquidity = 1024
    # virtual reserves of one are only 4
    # https://www.wolframalpha.com/input/?i=1024+%2F+%2820282409603651670423947251286016+%2F+2**96%29
    amount_remaining = -4
    fee_pips = 3000
    sqrt_q, amount_in, amount_out, fee_amount = compute_swap_step(
        sqrt_p, sqrt_p_target, liquidity, amount_remaining, fee_pips
    )
    assert amount_out == 0
    assert sqrt_q == sqrt_p_target
    assert amount_in == 26215
    assert fee_amount == 79


def test_handles_intermediate_insufficient_liquidity_in_one_for_zero_exact_output_case():
    sqrt_p = 20282409603651670423947251286016
    sqrt_p_target = sqrt_p * 9 // 10
    liquidity = 1024
    # virtual reserves of zero are only 262144
    # https://www.wolframalpha.com/input/?i=1024+*+%2820282409603651670423947251286016+%2F+2**96%29
    amount_remaining = -263000
    fee_pips = 3000
    sqrt_q, amount_in, amount_out, fee_amount = compute_swap_step(
        sqrt_p, sqrt_p_target, liquidity, amount_remaining, fee_pips
    )
    assert amount_out == 26214
    assert sqrt_q == sqrt_p_target
    assert amount_in == 1
    assert fee_amount == 1


def test_returns_swap_step_result():
    result = compute_swap_step(Q96, 2 * Q96, 10**18, 1000, 3000)
    assert isinstance(result, SwapStepResult)
    assert result.sqrt_ratio_next_x96 == result[0]
    assert result.fee_amount == result[3]


def test_current_price_equal_to_target_does_nothing():
    for amount_remaining in (1000, -1000, ExactInput(amount=1000), ExactOutput(amount=1000)):
        assert compute_swap_step(Q96, Q96, 10**18, amount_remaining, 3000) == (Q96, 0, 0, 0)


def test_exact_input_stops_short_of_the_target():
    result = compute_swap_step(Q96, 2 * Q96, 10**18, 1000, 3000)

    assert Q96 < result.sqrt_ratio_next_x96 < 2 * Q96
    assert result.amount_in == 997
    assert result.fee_amount == 3
    assert result.amount_in + result.fee_amount == 1000


def test_exact_output_reaches_the_target():
    result = compute_swap_step(Q96, Q96 - 500, Q96, ExactOutput(amount=500), 3000)

    assert result.sqrt_ratio_next_x96 == Q96 - 500
    assert result.amount_out == 500
    assert result.amount_in == 501
    assert result.fee_amount == 2


def test_tagged_amounts_match_signed_amounts():
    price = encode_price_sqrt(1, 1)
    price_target = encode_price_sqrt(101, 100)
    liquidity = expand_to_18_decimals(2)
    amount = expand_to_18_decimals(1)

    assert compute_swap_step(
        price, price_target, liquidity, ExactInput(amount=amount), 600
    ) == compute_swap_step(price, price_target, liquidity, amount, 600)
    assert compute_swap_step(
        price, price_target, liquidity, ExactOutput(amount=amount), 600
    ) == compute_swap_step(price, price_target, liquidity, -amount, 600)


def test_zero_fee_charges_nothing_when_the_target_is_reached():
    sqrt_q, amount_in, _, fee_amount = compute_swap_step(Q96, Q96 + 1000, Q96, 5000, 0)
    assert sqrt_q == Q96 + 1000
    assert amount_in == 1000
    assert fee_amount == 0

    sqrt_q, _, amount_out, fee_amount = compute_swap_step(
        Q96, Q96 - 500, Q96, ExactOutput(amount=500), 0
    )
    assert sqrt_q == Q96 - 500
    assert amount_out == 500
    assert fee_amount == 0


def test_zero_exact_output_does_not_move_the_price():
    for price_target in (2 * Q96, Q96 // 2):
        assert compute_swap_step(Q96, price_target, 10**18, ExactOutput(amount=0), 3000) == (
            Q96,
            0,
            0,
            0,
        )


def test_zero_liquidity_moves_directly_to_the_target():
    for amount_remaining in (1000, -1000):
        assert compute_swap_step(Q96, 2 * Q96, 0, amount_remaining, 3000) == (2 * Q96, 0, 0, 0)
        assert compute_swap_step(2 * Q96, Q96, 0, amount_remaining, 3000) == (Q96, 0, 0, 0)


def test_rejects_fee_of_one_hundred_percent():
    with pytest.raises(InvalidFee):
        compute_swap_step(Q96, 2 * Q96, 10**18, 1000, MAX_SWAP_FEE)


@pytest.mark.parametrize(
    ("sqrt_ratio_x96_current", "sqrt_ratio_x96_target", "liquidity", "amount_remaining", "fee"),
    [
        (MAX_UINT160 + 1, Q96, 10**18, 1000, 3000),
        (Q96, -1, 10**18, 1000, 3000),
        (Q96, 2 * Q96, MAX_UINT128 + 1, 1000, 3000),
        (Q96, 2 * Q96, 10**18, MAX_UINT256, 3000),
        (Q96, 2 * Q96, 10**18, 1000, 2**24),
        (Q96, 2 * Q96, 10**18, "1000", 3000),
    ],
)
def test_rejects_values_outside_their_ranges(
    sqrt_ratio_x96_current: int,
    sqrt_ratio_x96_target: int,
    liquidity: int,
    amount_remaining: int,
    fee: int,
):
    with pytest.raises(pydantic.ValidationError):
        compute_swap_step(
            sqrt_ratio_x96_current, sqrt_ratio_x96_target, liquidity, amount_remaining, fee
        )


@hypothesis.given(
    sqrt_ratio_x96_current=hypothesis.strategies.integers(
        min_value=MIN_SQRT_RATIO, max_value=MAX_SQRT_RATIO
    ),
    sqrt_ratio_x96_target=hypothesis.strategies.integers(
        min_value=MIN_SQRT_RATIO, max_value=MAX_SQRT_RATIO
    ),
    liquidity=hypothesis.strategies.integers(min_value=0, max_value=MAX_UINT128),
    amount_remaining=hypothesis.strategies.integers(min_value=-(2**128), max_value=2**128),
    fee_pips=hypothesis.strategies.integers(min_value=0, max_value=MAX_SWAP_FEE - 1),
)
def test_fuzz_compute_swap_step(
    sqrt_ratio_x96_current: int,
    sqrt_ratio_x96_target: int,
    liquidity: int,
    amount_remaining: int,
    fee_pips: int,
):
    sqrt_q, amount_in, amount_out, fee_amount = compute_swap_step(
        sqrt_ratio_x96_current, sqrt_ratio_x96_target, liquidity, amount_remaining, fee_pips
    )

    if amount_remaining >= 0:
        assert amount_in + fee_amount <= amount_remaining
        if sqrt_q != sqrt_ratio_x96_target:
            assert amount_in + fee_amount == amount_remaining
    else:
        assert amount_out <= -amount_remaining

    # the price never moves past the target
    if sqrt_ratio_x96_current >= sqrt_ratio_x96_target:
        assert sqrt_ratio_x96_target <= sqrt_q <= sqrt_ratio_x96_current
    else:
        assert sqrt_ratio_x96_current <= sqrt_q <= sqrt_ratio_x96_target
