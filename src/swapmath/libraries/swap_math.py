from pydantic import validate_call

from swapmath.exceptions import InvalidFee
from swapmath.libraries import full_math, sqrt_price_math
from swapmath.libraries.constants import MAX_SWAP_FEE
from swapmath.types import (
    ExactInput,
    ExactOutput,
    Rounding,
    SwapAmount,
    SwapStepResult,
    swap_amount_from_signed,
)
from swapmath.validation.evm_values import (
    ValidatedInt256,
    ValidatedUint24,
    ValidatedUint128,
    ValidatedUint160,
)


@validate_call(validate_return=True)
def compute_swap_step(
    sqrt_ratio_x96_current: ValidatedUint160,
    sqrt_ratio_x96_target: ValidatedUint160,
    liquidity: ValidatedUint128,
    amount_remaining: ValidatedInt256 | SwapAmount,
    fee_pips: ValidatedUint24,
) -> SwapStepResult:
    """
    Computes the result of swapping some amount in, or amount out, given the parameters of the swap.

    The remaining amount is either a signed integer (positive for exact input, negative for exact
    output) or an `ExactInput` / `ExactOutput` value. The fee, plus the amount in, will never exceed
    the amount remaining if the swap's `amount_remaining` is an exact input.

    ref: https://github.com/Uniswap/v3-core/blob/main/contracts/libraries/SwapMath.sol
    """

    if fee_pips >= MAX_SWAP_FEE:
        raise InvalidFee(error=f"required: fee_pips < {MAX_SWAP_FEE}, was {fee_pips}")

    swap_amount = (
        amount_remaining
        if isinstance(amount_remaining, ExactInput | ExactOutput)
        else swap_amount_from_signed(amount_remaining)
    )
    exact_in = isinstance(swap_amount, ExactInput)
    zero_for_one = sqrt_ratio_x96_current >= sqrt_ratio_x96_target

    amount_in = 0
    amount_out = 0

    if exact_in:
        amount_remaining_less_fee = full_math.muldiv(
            swap_amount.amount, MAX_SWAP_FEE - fee_pips, MAX_SWAP_FEE
        )
        amount_in = (
            sqrt_price_math.get_amount0_delta(
                sqrt_ratio_x96_target, sqrt_ratio_x96_current, liquidity, Rounding.UP
            )
            if zero_for_one
            else sqrt_price_math.get_amount1_delta(
                sqrt_ratio_x96_current, sqrt_ratio_x96_target, liquidity, Rounding.UP
            )
        )
        if amount_remaining_less_fee >= amount_in:
            sqrt_ratio_x96_next = sqrt_ratio_x96_target
        else:
            sqrt_ratio_x96_next = sqrt_price_math.get_next_sqrt_price_from_input(
                sqrt_ratio_x96_current, liquidity, amount_remaining_less_fee, zero_for_one
            )
    else:
        amount_out = (
            sqrt_price_math.get_amount1_delta(
                sqrt_ratio_x96_target, sqrt_ratio_x96_current, liquidity, Rounding.DOWN
            )
            if zero_for_one
            else sqrt_price_math.get_amount0_delta(
                sqrt_ratio_x96_current, sqrt_ratio_x96_target, liquidity, Rounding.DOWN
            )
        )
        if swap_amount.amount >= amount_out:
            sqrt_ratio_x96_next = sqrt_ratio_x96_target
        else:
            sqrt_ratio_x96_next = sqrt_price_math.get_next_sqrt_price_from_output(
                sqrt_ratio_x96_current, liquidity, swap_amount.amount, zero_for_one
            )

    reached_target_price = sqrt_ratio_x96_target == sqrt_ratio_x96_next

    # get the input/output amounts
    if zero_for_one:
        if not (reached_target_price and exact_in):
            amount_in = sqrt_price_math.get_amount0_delta(
                sqrt_ratio_x96_next, sqrt_ratio_x96_current, liquidity, Rounding.UP
            )
        if not (reached_target_price and not exact_in):
            amount_out = sqrt_price_math.get_amount1_delta(
                sqrt_ratio_x96_next, sqrt_ratio_x96_current, liquidity, Rounding.DOWN
            )
    else:
        if not (reached_target_price and exact_in):
            amount_in = sqrt_price_math.get_amount1_delta(
                sqrt_ratio_x96_current, sqrt_ratio_x96_next, liquidity, Rounding.UP
            )
        if not (reached_target_price and not exact_in):
            amount_out = sqrt_price_math.get_amount0_delta(
                sqrt_ratio_x96_current, sqrt_ratio_x96_next, liquidity, Rounding.DOWN
            )

    # cap the output amount to not exceed the remaining output amount
    if not exact_in and amount_out > swap_amount.amount:
        amount_out = swap_amount.amount

    if exact_in and not reached_target_price:
        # we didn't reach the target, so take the remainder of the maximum input as fee
        fee_amount = swap_amount.amount - amount_in
    else:
        fee_amount = full_math.muldiv_rounding_up(amount_in, fee_pips, MAX_SWAP_FEE - fee_pips)

    return SwapStepResult(sqrt_ratio_x96_next, amount_in, amount_out, fee_amount)
