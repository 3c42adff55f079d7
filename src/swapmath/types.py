import enum
from typing import Annotated, NamedTuple

import pydantic
from pydantic import Field

from swapmath.constants import MAX_INT256, MIN_INT256
from swapmath.validation.evm_values import ValidatedUint160, ValidatedUint256

type Pip = int  # pool fees are expressed in pips equaling one hundredth of one basis point
type Liquidity = int
type SqrtPriceX96 = int


class Rounding(enum.IntEnum):
    """
    The rounding direction applied to a fixed point result. Members are interchangeable with the
    `round_up` booleans accepted by the library functions.
    """

    DOWN = 0
    UP = 1


class ExactInput(pydantic.BaseModel, frozen=True):
    """
    An amount of the input token still to be spent.
    """

    amount: Annotated[int, Field(strict=True, ge=0, le=MAX_INT256)]

    @property
    def signed(self) -> int:
        return self.amount


class ExactOutput(pydantic.BaseModel, frozen=True):
    """
    An amount of the output token still owed to the swapper.
    """

    amount: Annotated[int, Field(strict=True, ge=0, le=-MIN_INT256)]

    @property
    def signed(self) -> int:
        return -self.amount


type SwapAmount = ExactInput | ExactOutput


def swap_amount_from_signed(amount_remaining: int) -> SwapAmount:
    """
    Convert a signed amount, where a negative value requests an exact output, to its tagged form.
    """

    return (
        ExactInput(amount=amount_remaining)
        if amount_remaining >= 0
        else ExactOutput(amount=-amount_remaining)
    )


class SwapStepResult(NamedTuple):
    sqrt_ratio_next_x96: ValidatedUint160
    amount_in: ValidatedUint256
    amount_out: ValidatedUint256
    fee_amount: ValidatedUint256
