import json
from collections.abc import Callable
from typing import Any

import click
import pydantic

from swapmath.cli import cli
from swapmath.exceptions import SwapMathError
from swapmath.libraries import full_math, sqrt_price_math, swap_math
from swapmath.logging import logger
from swapmath.types import ExactInput, ExactOutput, Rounding

# Accept arbitrarily large integers, but reject negative values
UINT = click.IntRange(min=0)


def _call[T](func: Callable[..., T], *args: Any) -> T:
    try:
        return func(*args)
    except (SwapMathError, pydantic.ValidationError) as exc:
        logger.debug(f"{func.__name__}{args} failed: {exc!r}")
        raise click.ClickException(str(exc)) from exc


@cli.command()
@click.argument("a", type=UINT)
@click.argument("b", type=UINT)
@click.argument("denominator", type=UINT)
@click.option("--round-up", is_flag=True, help="Round the quotient up instead of down.")
def muldiv(*, a: int, b: int, denominator: int, round_up: bool) -> None:
    """
    Calculate A * B / DENOMINATOR with full precision.
    """

    click.echo(
        _call(
            full_math.muldiv_rounding_up if round_up else full_math.muldiv,
            a,
            b,
            denominator,
        )
    )


@cli.command("amount-delta")
@click.argument("token", type=click.Choice(["0", "1"]))
@click.argument("sqrt_ratio_a_x96", type=UINT)
@click.argument("sqrt_ratio_b_x96", type=UINT)
@click.argument("liquidity", type=UINT)
@click.option("--round-up", is_flag=True, help="Round the amount up instead of down.")
def amount_delta(
    *,
    token: str,
    sqrt_ratio_a_x96: int,
    sqrt_ratio_b_x96: int,
    liquidity: int,
    round_up: bool,
) -> None:
    """
    Calculate the amount of TOKEN spanned by two sqrt prices at the given liquidity.
    """

    click.echo(
        _call(
            sqrt_price_math.get_amount0_delta
            if token == "0"
            else sqrt_price_math.get_amount1_delta,
            sqrt_ratio_a_x96,
            sqrt_ratio_b_x96,
            liquidity,
            Rounding.UP if round_up else Rounding.DOWN,
        )
    )


@cli.command("next-price")
@click.argument("mode", type=click.Choice(["input", "output"]))
@click.argument("sqrt_price_x96", type=UINT)
@click.argument("liquidity", type=UINT)
@click.argument("amount", type=UINT)
@click.option(
    "--zero-for-one/--one-for-zero",
    default=True,
    show_default=True,
    help="Swap direction, token0 for token1 lowers the price.",
)
def next_price(
    *,
    mode: str,
    sqrt_price_x96: int,
    liquidity: int,
    amount: int,
    zero_for_one: bool,
) -> None:
    """
    Calculate the sqrt price after an exact input or output AMOUNT.
    """

    click.echo(
        _call(
            sqrt_price_math.get_next_sqrt_price_from_input
            if mode == "input"
            else sqrt_price_math.get_next_sqrt_price_from_output,
            sqrt_price_x96,
            liquidity,
            amount,
            zero_for_one,
        )
    )


@cli.command()
@click.argument("sqrt_ratio_x96_current", type=UINT)
@click.argument("sqrt_ratio_x96_target", type=UINT)
@click.argument("liquidity", type=UINT)
@click.argument("amount", type=UINT)
@click.argument("fee_pips", type=UINT)
@click.option(
    "--exact-in/--exact-out",
    default=True,
    show_default=True,
    help="Treat AMOUNT as the input to spend, or as the output to receive.",
)
@click.option("--json", "as_json", is_flag=True, help="Display the result as JSON.")
def step(
    *,
    sqrt_ratio_x96_current: int,
    sqrt_ratio_x96_target: int,
    liquidity: int,
    amount: int,
    fee_pips: int,
    exact_in: bool,
    as_json: bool,
) -> None:
    """
    Compute a single swap step within one price range.
    """

    swap_amount = _call(
        lambda: ExactInput(amount=amount) if exact_in else ExactOutput(amount=amount),
    )
    result = _call(
        swap_math.compute_swap_step,
        sqrt_ratio_x96_current,
        sqrt_ratio_x96_target,
        liquidity,
        swap_amount,
        fee_pips,
    )

    if as_json:
        # Values exceed the safe integer range of most JSON parsers, so encode them as strings
        click.echo(json.dumps({key: str(value) for key, value in result._asdict().items()}))
    else:
        for key, value in result._asdict().items():
            click.echo(f"{key}: {value}")
